"""Turns one (title, content) document into a formatted result record."""
from __future__ import annotations

from typing import Optional, Tuple

from .line_counter import LineCounter

RESULT_TEMPLATE = "{count} is the number of lines in {title}"


def format_result(count: int, title: str) -> str:
    return RESULT_TEMPLATE.format(count=count, title=title)


class DocumentProcessor:
    """Counts the lines of a document and formats the result record."""

    def __init__(self, line_counter: Optional[LineCounter] = None) -> None:
        self.line_counter = line_counter or LineCounter()

    def analyze(self, title: str, content: str) -> Tuple[int, str]:
        """Return the line count together with its formatted record."""

        count = self.line_counter.count(content)
        return count, format_result(count, title)

    def process(self, title: str, content: str) -> str:
        return self.analyze(title, content)[1]


def process_document(title: str, content: str) -> str:
    return DocumentProcessor().process(title, content)
