"""Tests for console rendering and reports."""

from __future__ import annotations

import json

from shared.console import GuardianConsole
from guardian.analyzers.strength import EntropyEstimator
from guardian.output.console import GuardianConsoleOutput, render_meter
from guardian.output.report import GuardianReportGenerator


class TestMeter:
    def test_fill_follows_score(self):
        estimator = EntropyEstimator()
        empty = render_meter(estimator.assess(""), width=20).plain
        full = render_meter(estimator.assess("correct-horse-battery-staple"), width=20).plain
        assert empty.count("█") == 0
        assert full.count("█") == 20
        assert full.endswith("Very Strong")

    def test_compromised_status(self):
        text = render_meter(EntropyEstimator().assess("dragon")).plain
        assert "Compromised (very common)" in text
        assert "  0%" in text


class TestConsoleOutput:
    def test_assessment_masks_secret(self):
        console = GuardianConsole()
        output = GuardianConsoleOutput(console)
        with console.rich.capture() as capture:
            assessment = EntropyEstimator().assess("Hunter2Hunter2")
            output.display_assessment(assessment, "Hunter2Hunter2")
            output.display_advice(["Add symbols."])
        text = capture.get()
        assert "Hunter2Hunter2" not in text
        assert "H************2" in text
        assert "Add symbols." in text

    def test_uniformity_table(self, engine):
        console = GuardianConsole()
        console.rich.width = 160
        results = engine.audit(samples=500, significance=1e-6, shuffle_size=2)
        with console.rich.capture() as capture:
            GuardianConsoleOutput(console).display_uniformity(results)
        text = capture.get()
        assert "shuffle[n=2]" in text
        for name in ("lower", "upper", "digit", "symbol"):
            assert f"characters[{name}]" in text
        assert "PASS" in text


class TestQuietConsole:
    def test_info_suppressed_errors_kept(self):
        console = GuardianConsole(quiet=True)
        with console.rich.capture() as capture:
            console.banner()
            console.info("routine detail")
            console.success("routine success")
            console.error("broken")
        text = capture.get()
        assert "routine" not in text
        assert "Version" not in text
        assert "broken" in text


class TestReports:
    def test_json_report(self, engine, tmp_path):
        result = engine.analyze_secret("letmein")
        path = GuardianReportGenerator().generate_json(result, tmp_path / "out" / "r.json")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["report_metadata"]["target"] == "[secret]"
        assert data["summary"]["severity_counts"]["CRITICAL"] >= 1
        assert data["metadata"]["masked"] == "l*****n"
        assert "letmein" not in path.read_text(encoding="utf-8")

    def test_html_report_escapes(self, engine, tmp_path):
        result = engine.analyze_secret("<b>&</b>")
        path = GuardianReportGenerator().generate_html(result, tmp_path / "r.html")
        html = path.read_text(encoding="utf-8")
        assert html.startswith("<!DOCTYPE html>")
        assert "&lt;******&gt;" in html
        assert "<b>&</b>" not in html
