"""Sorting and printing of result records."""
from __future__ import annotations

import sys
import threading
from typing import Iterable, List, Optional, TextIO


def sort_records(records: Iterable[str]) -> List[str]:
    """Return a new list ordered descending by code point comparison."""

    return sorted(records, reverse=True)


def format_report_line(unit_id: object, record: str) -> str:
    return f"[{unit_id}] {record}"


class ReportPrinter:
    """Writes sorted records, each tagged with the id of the printing thread."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def print_results(self, records: Iterable[str]) -> None:
        stream = self.stream or sys.stdout
        unit_id = threading.get_ident()
        for record in sort_records(records):
            print(format_report_line(unit_id, record), file=stream)
