"""Command-line entry point.

Evaluates one or more expression files and prints their results::

    unitify expressions.txt --sorted --stats
    unitify a.txt b.txt --report report.txt --csv results.csv
    unitify --generate random.txt --lines 100 --seed 7

Each file is processed independently; a file that cannot be read (or, with
``--strict``, contains a bad line) is reported and the exit status becomes 1,
but the remaining files are still processed.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from rich.console import Console
from rich.panel import Panel

from .config import DEFAULT_REPORT_FILE, GENERATOR_LINES, LOG_FORMAT, LOG_LEVEL
from .errors import UnitifyError
from .measurement import Measurement
from .processing import (
    MeasurementFileProcessor,
    build_statistics_panel,
    build_table,
    generate_csv_report,
    write_expression_file,
    write_report,
)

CONSOLE = Console()
logger = logging.getLogger(__name__)


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unitify",
        description="Evaluate arithmetic expressions over physical measurements.",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="expression files, one expression per line")
    parser.add_argument("--sorted", action="store_true", help="also print results in ascending order")
    parser.add_argument("--stats", action="store_true", help="print mean, mode and median of the results")
    parser.add_argument("--csv", metavar="PATH", help="write all results as CSV")
    parser.add_argument(
        "--report",
        metavar="PATH",
        nargs="?",
        const=DEFAULT_REPORT_FILE,
        help=f"write a text report (default path: {DEFAULT_REPORT_FILE})",
    )
    parser.add_argument("--strict", action="store_true", help="fail a file on its first bad line")
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="logging verbosity",
    )
    parser.add_argument("--generate", metavar="PATH", help="write a random expression file and exit")
    parser.add_argument("--lines", type=int, default=GENERATOR_LINES, help="number of generated lines")
    parser.add_argument("--seed", type=int, default=None, help="seed for the generator")
    return parser


def _process_file(
    processor: MeasurementFileProcessor,
    args: argparse.Namespace,
    console: Console,
    sections: dict[str, list[str]],
) -> list[Measurement]:
    processor.read_file()
    results = processor.result_measurements
    name = str(processor.path)

    console.print(build_table(results, title=f"{name} (original order)"))
    sections[f"{name}: original order"] = processor.numbered_results()

    if args.sorted:
        ordered = processor.sorted_results()
        console.print(build_table(ordered, title=f"{name} (sorted order)"))
        sections[f"{name}: sorted order"] = [f"{i}. {m}" for i, m in enumerate(ordered, start=1)]

    if processor.skipped:
        sections[f"{name}: skipped lines"] = [
            f"line {s.line_number}: {s.text} ({s.reason})" for s in processor.skipped
        ]

    if args.stats:
        if results:
            stats = processor.compute_statistics()
            console.print(build_statistics_panel(stats, title=f"{name} statistics"))
            sections[f"{name}: statistics"] = stats.as_lines()
        else:
            logger.warning("No results in %s to compute statistics", name)
    return results


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Run the command line and return the exit status."""
    console = console or CONSOLE
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.generate:
        if args.lines < 0:
            parser.error("--lines must be non-negative")
        written = write_expression_file(args.generate, args.lines, args.seed)
        console.print(f"[green]Wrote {written} expression line(s) to {args.generate}")
        return 0

    if not args.files:
        parser.error("at least one FILE is required unless --generate is given")

    status = 0
    sections: dict[str, list[str]] = {}
    all_results: list[Measurement] = []
    for path in args.files:
        processor = MeasurementFileProcessor(path, strict=args.strict)
        try:
            all_results.extend(_process_file(processor, args, console, sections))
        except OSError as e:
            logger.error("Cannot read %s: %s", path, e)
            console.print(Panel(f"[red]{e}", title=f"Failed: {path}"))
            status = 1
        except UnitifyError as e:
            logger.error("Stopped processing %s: %s", path, e)
            console.print(Panel(f"[red]{e}", title=f"Failed: {path}"))
            status = 1

    if args.report:
        write_report(args.report, sections)
        console.print(f"[green]Report written to {args.report}")
    if args.csv:
        with open(args.csv, "w", encoding="utf-8", newline="") as f:
            f.write(generate_csv_report(all_results))
        console.print(f"[green]CSV written to {args.csv}")
    return status
