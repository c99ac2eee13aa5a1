from .split_report import (
    LoggingReportSink,
    OutlierSplit,
    ReportingSink,
    SplitReport,
    build_split_report,
)

__all__ = [
    "LoggingReportSink",
    "OutlierSplit",
    "ReportingSink",
    "SplitReport",
    "build_split_report",
]
