"""Sequential line-count analysis over a title -> content mapping."""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping, Optional

from common.models import DocumentProgress
from common.progress import ProgressLogger
from .collector import ResultCollector
from .processor import DocumentProcessor
from .report import ReportPrinter

ProgressCallback = Optional[Callable[[DocumentProgress], None]]


class AnalysisRunner:
    """Runs DocumentProcessor over every document and reports the results."""

    def __init__(
        self,
        *,
        processor: Optional[DocumentProcessor] = None,
        printer: Optional[ReportPrinter] = None,
        progress_log: Optional[Path] = None,
    ) -> None:
        self.processor = processor or DocumentProcessor()
        self.printer = printer or ReportPrinter()
        self.progress_logger = ProgressLogger(progress_log) if progress_log else None

    def run(
        self,
        documents: Mapping[str, str],
        *,
        progress_callback: ProgressCallback = None,
    ) -> ResultCollector:
        results = self.run_and_return_results(documents, progress_callback=progress_callback)
        self.printer.print_results(results.to_sequence())
        return results

    def run_and_return_results(
        self,
        documents: Mapping[str, str],
        *,
        progress_callback: ProgressCallback = None,
    ) -> ResultCollector:
        results = ResultCollector()
        total = len(documents)
        if self.progress_logger:
            self.progress_logger.open()
        try:
            for title, content in documents.items():
                line_count, record = self.processor.analyze(title, content)
                results.append(record)
                self._emit_progress(
                    DocumentProgress(title=title, line_count=line_count, processed=len(results), total=total),
                    progress_callback,
                )
        finally:
            if self.progress_logger:
                self.progress_logger.close()
        return results

    def _emit_progress(self, progress: DocumentProgress, progress_callback: ProgressCallback) -> None:
        if progress_callback:
            progress_callback(progress)
        if self.progress_logger:
            self.progress_logger.emit(progress)
