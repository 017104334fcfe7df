"""CLI entry point: load a document folder, count lines, print the report."""
from __future__ import annotations

import argparse
import io
import sys
import time
from pathlib import Path
from typing import Dict, Tuple

from common.config import DEFAULT_PROFILE, error_mode_from_policy, load_runtime_config
from common.errors import AnalyzerError
from common.models import BenchmarkMetrics, DocumentProgress, RuntimeConfig
from common.progress import BenchmarkRecorder
from core.analysis import AnalysisRunner, ReportPrinter
from core.documents import load_documents

ANALYZER_NAME = "Sequential PlayAnalyzer"


def render_progress(progress: DocumentProgress) -> None:
    print(
        f"[analysis] {progress.title} lines={progress.line_count} "
        f"({progress.processed}/{progress.total}) phase={progress.phase}",
        file=sys.stderr,
    )


def resolve_documents(args: argparse.Namespace) -> Tuple[RuntimeConfig, Dict[str, str]]:
    config_path = Path(args.config) if args.config else None
    runtime = load_runtime_config(profile=args.profile, config_path=config_path)
    folder = Path(args.folder or runtime.profile.folder)
    extension = args.extension or runtime.profile.extension
    documents = load_documents(
        folder,
        extension,
        encoding=runtime.global_settings.encoding,
        errors=error_mode_from_policy(runtime.global_settings.error_policy),
    )
    return runtime, documents


def command_analyze(args: argparse.Namespace) -> None:
    _, documents = resolve_documents(args)
    progress_log = Path(args.progress_log) if args.progress_log else None
    runner = AnalysisRunner(progress_log=progress_log)

    print(f"Starting {ANALYZER_NAME}")
    runner.run(documents, progress_callback=render_progress if args.verbose else None)
    print(f"Ending {ANALYZER_NAME}")


def command_benchmark(args: argparse.Namespace) -> None:
    _, documents = resolve_documents(args)
    runner = AnalysisRunner(printer=ReportPrinter(stream=io.StringIO()))
    line_counts = []

    start = time.perf_counter()
    runner.run(documents, progress_callback=lambda progress: line_counts.append(progress.line_count))
    duration = time.perf_counter() - start

    metrics = BenchmarkMetrics(
        dataset=str(args.folder or args.profile),
        documents=len(documents),
        lines=sum(line_counts),
        seconds=duration,
    )
    BenchmarkRecorder(Path(args.log)).record(metrics)
    print(
        f"Benchmark complete: {metrics.documents} document(s) in {metrics.seconds:.2f}s, "
        f"throughput {metrics.lines_per_second:,.0f} lines/s"
    )


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("folder", nargs="?", help="Folder of documents (defaults to the profile folder)")
    parser.add_argument("--extension", help="File extension to load, e.g. .txt")
    parser.add_argument(
        "--profile",
        default=DEFAULT_PROFILE,
        help="Profile from config/defaults.json",
    )
    parser.add_argument("--config", help="Path to a configuration JSON file")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playlines", description="Count the lines of every document in a folder"
    )
    subparsers = parser.add_subparsers(dest="command")

    analyze = subparsers.add_parser("analyze", help="Count lines and print the sorted report")
    _add_source_arguments(analyze)
    analyze.add_argument(
        "--progress-log",
        help="Path to JSONL file for structured progress events",
    )
    analyze.add_argument(
        "--verbose",
        action="store_true",
        help="Print per-document progress to stderr",
    )
    analyze.set_defaults(func=command_analyze)

    benchmark = subparsers.add_parser("benchmark", help="Measure line counting throughput")
    _add_source_arguments(benchmark)
    benchmark.add_argument(
        "--log",
        default="artifacts/benchmarks.jsonl",
        help="Where to append benchmark metrics",
    )
    benchmark.set_defaults(func=command_benchmark)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return
    try:
        args.func(args)
    except AnalyzerError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
