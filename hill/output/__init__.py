"""
Hill Output Module
===================

Console display and report generation for Hill cipher results.
"""

from hill.output.console import HillConsoleOutput
from hill.output.report import HillReportGenerator

__all__ = [
    "HillConsoleOutput",
    "HillReportGenerator",
]
