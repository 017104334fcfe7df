from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from common.models import DocumentProgress
from core.analysis import AnalysisRunner, DocumentProcessor, ReportPrinter

PLAYS = {"PlayA": "line1\nline2\n", "PlayB": "only one line, no newline"}


def build_runner(stream: io.StringIO, **kwargs) -> AnalysisRunner:
    return AnalysisRunner(printer=ReportPrinter(stream=stream), **kwargs)


def unprefixed(output: str) -> list[str]:
    return [line.split("] ", 1)[1] for line in output.splitlines()]


def test_run_prints_sorted_report() -> None:
    stream = io.StringIO()
    results = build_runner(stream).run(PLAYS)
    assert unprefixed(stream.getvalue()) == [
        "2 is the number of lines in PlayA",
        "0 is the number of lines in PlayB",
    ]
    assert len(results) == 2


def test_run_and_return_results_visits_every_document_once() -> None:
    documents = {f"Play{idx}": "x\n" * idx for idx in range(12)}
    results = build_runner(io.StringIO()).run_and_return_results(documents)
    records = results.to_sequence()
    assert len(records) == len(documents)
    for title in documents:
        matches = [record for record in records if record.endswith(f" in {title}")]
        assert len(matches) == 1


def test_output_is_sorted_and_repeatable() -> None:
    documents = {"Hamlet": "a\n" * 12, "Macbeth": "a\n" * 3, "Othello": "a\n" * 25, "Tempest": ""}
    first, second = io.StringIO(), io.StringIO()
    build_runner(first).run(documents)
    build_runner(second).run(documents)
    lines = unprefixed(first.getvalue())
    assert lines == unprefixed(second.getvalue())
    assert all(lines[i] >= lines[i + 1] for i in range(len(lines) - 1))


def test_empty_documents_produce_no_output() -> None:
    stream = io.StringIO()
    results = build_runner(stream).run({})
    assert len(results) == 0
    assert stream.getvalue() == ""


def test_progress_callback_and_log(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "progress.jsonl"
    events: list[DocumentProgress] = []
    build_runner(io.StringIO(), progress_log=log_path).run(PLAYS, progress_callback=events.append)

    assert [(event.title, event.line_count) for event in events] == [("PlayA", 2), ("PlayB", 0)]
    assert [event.processed for event in events] == [1, 2]
    assert all(event.total == 2 for event in events)

    payloads = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert [payload["title"] for payload in payloads] == ["PlayA", "PlayB"]
    assert all("timestamp" in payload for payload in payloads)


def test_progress_log_released_when_processing_fails(tmp_path: Path) -> None:
    class FailingProcessor(DocumentProcessor):
        def analyze(self, title: str, content: str) -> tuple[int, str]:
            if title == "PlayB":
                raise ValueError("unreadable")
            return super().analyze(title, content)

    runner = build_runner(io.StringIO(), processor=FailingProcessor(), progress_log=tmp_path / "progress.jsonl")
    with pytest.raises(ValueError):
        runner.run(PLAYS)
    assert runner.progress_logger._handle is None
    assert len((tmp_path / "progress.jsonl").read_text(encoding="utf-8").splitlines()) == 1
