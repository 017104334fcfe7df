"""Line-count analysis: counting, formatting, collecting and reporting."""

from .collector import ResultCollector
from .engine import AnalysisRunner
from .line_counter import LineCounter, count_lines
from .processor import DocumentProcessor, process_document
from .report import ReportPrinter, sort_records

__all__ = [
    "AnalysisRunner",
    "DocumentProcessor",
    "LineCounter",
    "ReportPrinter",
    "ResultCollector",
    "count_lines",
    "process_document",
    "sort_records",
]
