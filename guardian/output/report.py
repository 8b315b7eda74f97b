"""
Guardian Report Generator
==========================

HTML and JSON reports for :class:`~shared.models.ScanResult` objects
produced by ``GuardianEngine.analyze_secret``. Reports carry the masked
secret only. The HTML report uses inline CSS so it renders without any
external assets.

References:
    - OWASP Authentication Cheat Sheet.
      https://cheatsheetseries.owasp.org/cheatsheets/Authentication_Cheat_Sheet.html
"""

from __future__ import annotations

import html
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from shared.models import ScanResult


_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Guardian Report - {title}</title>
    <style>
        :root {{
            --bg-primary: #0d1117;
            --bg-secondary: #161b22;
            --bg-tertiary: #21262d;
            --text-primary: #c9d1d9;
            --text-secondary: #8b949e;
            --accent-cyan: #58a6ff;
            --accent-green: #3fb950;
            --accent-yellow: #d29922;
            --accent-red: #f85149;
            --border: #30363d;
        }}
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{
            font-family: -apple-system, 'Segoe UI', Helvetica, Arial, sans-serif;
            background: var(--bg-primary);
            color: var(--text-primary);
            line-height: 1.6;
            padding: 2rem;
        }}
        .container {{ max-width: 960px; margin: 0 auto; }}
        .section {{
            background: var(--bg-secondary);
            border: 1px solid var(--border);
            border-radius: 8px;
            padding: 1.5rem;
            margin-bottom: 1.5rem;
        }}
        h1 {{ color: var(--accent-cyan); margin-bottom: 0.5rem; }}
        h2 {{ margin-bottom: 1rem; }}
        table {{ width: 100%; border-collapse: collapse; }}
        th, td {{ padding: 0.5rem 1rem; text-align: left; border: 1px solid var(--border); }}
        th {{ background: var(--bg-tertiary); color: var(--accent-cyan); }}
        .meter {{
            height: 20px;
            background: var(--bg-tertiary);
            border-radius: 10px;
            overflow: hidden;
            margin: 1rem 0;
        }}
        .meter-fill {{ height: 100%; }}
        .score-0 {{ background: var(--accent-red); }}
        .score-1 {{ background: #db6d28; }}
        .score-2 {{ background: var(--accent-yellow); }}
        .score-3 {{ background: var(--accent-green); }}
        .score-4 {{ background: #56d364; }}
        .finding {{
            padding: 0.75rem 1rem;
            margin: 0.5rem 0;
            border-left: 4px solid var(--border);
            background: var(--bg-tertiary);
        }}
        .severity-critical {{ border-left-color: var(--accent-red); }}
        .severity-high {{ border-left-color: #ff7b72; }}
        .severity-medium {{ border-left-color: var(--accent-yellow); }}
        .severity-low {{ border-left-color: var(--accent-cyan); }}
        .severity-info {{ border-left-color: var(--accent-green); }}
        .footer {{ text-align: center; color: var(--text-secondary); font-size: 0.8rem; }}
    </style>
</head>
<body>
    <div class="container">
        <div class="section">
            <h1>Guardian :: Strength Report</h1>
            <div class="footer">Generated: {timestamp}</div>
        </div>

        <div class="section">
            <h2>Summary</h2>
            <p>{summary}</p>
            <div class="meter"><div class="meter-fill score-{score}" style="width: {percent}%"></div></div>
            <table>
                <tr><th>Secret</th><td>{masked}</td><th>Status</th><td>{status}</td></tr>
                <tr><th>Entropy</th><td>{entropy:.2f} bits</td><th>Score</th><td>{score}/4</td></tr>
            </table>
        </div>

        <div class="section">
            <h2>Findings</h2>
            {findings_html}
        </div>

        <div class="footer">Guardian v{version}</div>
    </div>
</body>
</html>
"""


class GuardianReportGenerator:
    """Write HTML and JSON reports for strength analysis results.

    Usage::

        generator = GuardianReportGenerator()
        generator.generate_html(result, Path("report.html"))
        generator.generate_json(result, Path("report.json"))
    """

    def __init__(self, version: str = "1.0.0") -> None:
        self.version = version

    def generate_html(
        self,
        result: ScanResult,
        output_path: Path,
        title: Optional[str] = None,
    ) -> Path:
        """Render *result* as a standalone HTML page at *output_path*."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_html(result, title), encoding="utf-8")
        return output_path

    def render_html(self, result: ScanResult, title: Optional[str] = None) -> str:
        assessment = result.metadata.get("assessment", {})
        score = int(assessment.get("score", 0))

        return _HTML_TEMPLATE.format(
            title=_escape(title or "Strength Analysis"),
            timestamp=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC"),
            summary=_escape(result.summary),
            masked=_escape(str(result.metadata.get("masked", ""))),
            status=_escape(result.findings[0].title if result.findings else ""),
            entropy=float(assessment.get("entropy_bits", 0.0)),
            score=score,
            percent=min(100, round(score / 4 * 100)),
            findings_html=self._build_findings_html(result),
            version=_escape(self.version),
        )

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        """Write :meth:`build_json` output to *output_path*."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(self.build_json(result), indent=2, ensure_ascii=False, default=str),
            encoding="utf-8",
        )
        return output_path

    def build_json(self, result: ScanResult) -> dict[str, Any]:
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
                "version": self.version,
            },
            "summary": {
                "description": result.summary,
                "total_findings": len(result.findings),
                "severity_counts": result.severity_counts,
                "duration_seconds": result.duration_seconds,
            },
            "findings": [f.model_dump(mode="json") for f in result.findings],
            "metadata": result.metadata,
        }

    def _build_findings_html(self, result: ScanResult) -> str:
        if not result.findings:
            return '<p class="footer">No findings.</p>'

        parts: list[str] = []
        for finding in result.findings:
            parts.append(
                f'<div class="finding {finding.severity.css_class}">'
                f"<strong>[{finding.severity.value}]</strong> {_escape(finding.title)}"
                f"<p>{_escape(finding.description)}</p>"
            )
            if finding.recommendation:
                parts.append(
                    f"<p><em>Recommendation:</em> {_escape(finding.recommendation)}</p>"
                )
            parts.append("</div>")
        return "\n".join(parts)


def _escape(text: str) -> str:
    return html.escape(text, quote=True)
