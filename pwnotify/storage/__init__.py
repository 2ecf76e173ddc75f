"""Data persistence layer"""

from .report_file import REPORT_HEADER, ReportFile

__all__ = ["REPORT_HEADER", "ReportFile"]
