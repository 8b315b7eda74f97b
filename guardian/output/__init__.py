"""
Guardian Output Module
=======================

Console display and report generation for Guardian results.
"""

from guardian.output.console import GuardianConsoleOutput, render_meter
from guardian.output.report import GuardianReportGenerator

__all__ = [
    "GuardianConsoleOutput",
    "GuardianReportGenerator",
    "render_meter",
]
