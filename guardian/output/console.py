"""
Guardian Console Output
========================

Rich-based display of generated secrets, strength assessments, advice
and uniformity audits. The strength meter mirrors a browser meter: its
fill is ``score / 4`` and its colour follows the score bucket.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import GuardianConsole
from guardian.core.engine import mask_secret
from guardian.core.models import (
    GeneratedSecret,
    StrengthAssessment,
    StrengthLabel,
    UniformityResult,
)

# Indexed by score
_SCORE_COLOURS: tuple[str, ...] = (
    "red",
    "dark_orange",
    "yellow",
    "green",
    "bright_green",
)

_LABEL_COLOURS: dict[StrengthLabel, str] = {
    StrengthLabel.COMPROMISED: "bold white on red",
    StrengthLabel.VERY_WEAK: "bold red",
    StrengthLabel.WEAK: "bold dark_orange",
    StrengthLabel.FAIR: "bold yellow",
    StrengthLabel.STRONG: "bold green",
    StrengthLabel.VERY_STRONG: "bold bright_green",
}

METER_WIDTH = 40


def render_meter(assessment: StrengthAssessment, width: int = METER_WIDTH) -> Text:
    """Bar filled to ``meter_percent`` of *width*, then the status text."""
    filled = max(0, min(width, round(assessment.meter_percent / 100 * width)))
    colour = _SCORE_COLOURS[assessment.score]

    meter = Text()
    meter.append("[", style="dim")
    meter.append("█" * filled, style=colour)
    meter.append("░" * (width - filled), style="dim")
    meter.append("]", style="dim")
    meter.append(f" {assessment.meter_percent:>3}%  ")
    meter.append(assessment.status_text, style=_LABEL_COLOURS[assessment.label])
    return meter


class GuardianConsoleOutput:
    """Console formatters for Guardian results.

    Usage::

        output = GuardianConsoleOutput(GuardianConsole())
        output.display_secret(secret)
        output.display_assessment(assessment)
        output.display_advice(tips)
    """

    def __init__(self, console: Optional[GuardianConsole] = None) -> None:
        self.console = console or GuardianConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def display_secret(self, secret: GeneratedSecret) -> None:
        """Print the secret itself; the only place it is ever shown."""
        title = secret.kind.value.title()
        detail = f"{secret.length} characters"
        if secret.word_count is not None:
            detail = f"{secret.word_count} words, {detail}"

        body = Text(secret.value, style="bold bright_white")
        self._rich.print(Panel(
            body,
            title=f"Generated {title}",
            subtitle=detail,
            border_style="cyan",
        ))

    # ------------------------------------------------------------------ #
    #  Assessment
    # ------------------------------------------------------------------ #

    def display_assessment(self, assessment: StrengthAssessment, secret: str = "") -> None:
        self.console.section("Strength Assessment")
        self._rich.print(Panel(
            render_meter(assessment),
            title="Strength Meter",
            border_style="cyan",
        ))

        signals = assessment.signals
        present = [
            name
            for name, on in (
                ("lower", signals.has_lower),
                ("upper", signals.has_upper),
                ("digits", signals.has_digit),
                ("symbols", signals.has_symbol),
                ("other", signals.has_other),
            )
            if on
        ]
        patterns = [
            name
            for name, on in (
                ("repeated run", signals.repeated_run),
                ("numeric sequence", signals.numeric_sequence),
                ("keyboard sequence", signals.keyboard_sequence),
            )
            if on
        ]

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")

        if secret:
            tbl.add_row("Secret", Text(mask_secret(secret)))
        tbl.add_row("Length", str(signals.length))
        tbl.add_row("Character Classes", ", ".join(present) or "none")
        tbl.add_row("Character Pool", str(signals.pool_size))
        tbl.add_row("Raw Entropy", f"{signals.raw_bits:.2f} bits")
        tbl.add_row("Estimated Entropy", f"{round(assessment.entropy_bits)} bits")
        tbl.add_row("Score", f"{assessment.score}/4")
        tbl.add_row("Patterns", ", ".join(patterns) or "none")
        tbl.add_row("Known Weak", "Yes" if signals.compromised else "No")

        self._rich.print(tbl)

    def display_advice(self, tips: Sequence[str]) -> None:
        if not tips:
            return
        self._rich.print()
        self._rich.print("[bold]Suggestions:[/bold]")
        for tip in tips:
            self._rich.print(f"  [bright_cyan]•[/bright_cyan] {tip}")

    # ------------------------------------------------------------------ #
    #  Uniformity audit
    # ------------------------------------------------------------------ #

    def display_uniformity(self, results: Sequence[UniformityResult]) -> None:
        self.console.section("Generator Uniformity Audit")

        passed = sum(1 for r in results if r.passed)
        overall = passed == len(results)
        summary = Text()
        summary.append("Overall: ", style="bold")
        summary.append(
            "PASS" if overall else "FAIL",
            style="bold bright_green" if overall else "bold red",
        )
        summary.append(f"\nTests: {passed}/{len(results)} passed")
        self._rich.print(Panel(summary, title="Chi-Squared Goodness of Fit", border_style="cyan"))

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("#", style="dim", width=3, justify="right")
        tbl.add_column("Test", style="bold")
        tbl.add_column("Categories", justify="right")
        tbl.add_column("Observations", justify="right")
        tbl.add_column("Chi-Squared", justify="right")
        tbl.add_column("p-value", justify="right")
        tbl.add_column("Result", justify="center")

        for idx, res in enumerate(results, start=1):
            colour = "green" if res.passed else "red"
            tbl.add_row(
                str(idx),
                Text(res.test_name),
                str(res.categories),
                f"{res.samples:,}",
                f"{res.chi_squared:.4f}",
                f"{res.p_value:.6f}",
                f"[{colour}]{'PASS' if res.passed else 'FAIL'}[/{colour}]",
            )

        self._rich.print(tbl)
