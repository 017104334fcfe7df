"""Append-only accumulation of result records."""
from __future__ import annotations

from typing import Iterator, List


class ResultCollector:
    """Keeps result records in append order for a single run.

    Appends are not synchronized; the collector is owned by one sequential
    runner for the duration of a run.
    """

    def __init__(self) -> None:
        self._records: List[str] = []

    def append(self, record: str) -> None:
        self._records.append(record)

    def to_sequence(self) -> List[str]:
        """Return a snapshot of every record appended so far."""

        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_sequence())
