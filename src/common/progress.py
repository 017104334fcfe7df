"""JSONL sinks for per-document progress and benchmark results."""
from __future__ import annotations

import json
import time
from dataclasses import asdict, fields
from pathlib import Path
from typing import List, Optional, TextIO

from .models import BenchmarkMetrics, DocumentProgress


class ProgressLogger:
    """Appends one JSON line per counted document.

    The log file is opened once per run with ``open()`` and released with
    ``close()``; ``emit`` outside an open run is ignored.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._handle: Optional[TextIO] = None

    def open(self) -> None:
        if self._handle is not None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = self.path.open("a", encoding="utf-8")

    def close(self) -> None:
        if self._handle is None:
            return
        self._handle.close()
        self._handle = None

    def emit(self, progress: DocumentProgress) -> None:
        if self._handle is None:
            return
        payload = {**asdict(progress), "timestamp": time.time()}
        self._handle.write(json.dumps(payload, ensure_ascii=False) + "\n")

    def __enter__(self) -> "ProgressLogger":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class BenchmarkRecorder:
    """Keeps a history of benchmark runs, newest last."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def record(self, metrics: BenchmarkMetrics) -> None:
        payload = asdict(metrics)
        payload["lines_per_second"] = metrics.lines_per_second
        payload["recorded_at"] = time.time()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(payload, ensure_ascii=False) + "\n")

    def history(self) -> List[BenchmarkMetrics]:
        if not self.path.exists():
            return []
        names = [field.name for field in fields(BenchmarkMetrics)]
        runs = []
        with self.path.open("r", encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                payload = json.loads(line)
                runs.append(BenchmarkMetrics(**{name: payload[name] for name in names}))
        return runs
