"""Data models shared between the CLI, the config layer and the analysis core."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class GlobalSettings:
    """Settings that apply to every profile."""

    encoding: str = "utf-8"
    error_policy: str = "fail-fast"


@dataclass(slots=True)
class ProfileSettings:
    """Where a document set lives and how its files are recognized."""

    description: str = ""
    folder: str = "plays"
    extension: str = ".txt"


@dataclass(slots=True)
class RuntimeConfig:
    global_settings: GlobalSettings
    profile: ProfileSettings


@dataclass(slots=True)
class DocumentProgress:
    """Progress event emitted once a document has been counted."""

    title: str
    line_count: int
    processed: int
    total: int
    phase: str = "count-complete"


@dataclass(slots=True)
class BenchmarkMetrics:
    """Throughput of one benchmark run over a document set."""

    dataset: str
    documents: int
    lines: int
    seconds: float

    @property
    def lines_per_second(self) -> float:
        return self.lines / self.seconds if self.seconds else 0.0
