"""Text, CSV and console reports of measurement results.

Functions:
    generate_text_report: One ``"<magnitude> <unit>"`` line per measurement.
    generate_csv_report: ``Magnitude,Unit`` CSV text.
    build_table: rich Table of numbered results.
    build_statistics_panel: rich Panel with mean, mode and median.
    write_report: Write titled report sections to a text file.
"""

from __future__ import annotations

import csv
import io
import os
from collections.abc import Iterable, Mapping

from rich.panel import Panel
from rich.table import Table

from ..config import CSV_HEADER
from ..measurement import Measurement
from .statistics import Statistics


def generate_text_report(measurements: Iterable[Measurement]) -> str:
    return "".join(f"{m}\n" for m in measurements)


def generate_csv_report(measurements: Iterable[Measurement]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for m in measurements:
        writer.writerow([f"{m.magnitude:g}", m.unit.name])
    return buffer.getvalue()


def build_table(measurements: Iterable[Measurement], title: str = "Results") -> Table:
    t = Table(title=title)
    t.add_column("#", justify="right", style="dim")
    t.add_column("Magnitude", justify="right")
    t.add_column("Unit", style="cyan")
    for i, m in enumerate(measurements, start=1):
        t.add_row(str(i), f"{m.magnitude:g}", m.unit.name)
    return t


def build_statistics_panel(stats: Statistics, title: str = "Statistics") -> Panel:
    t = Table.grid(padding=(0, 2))
    t.add_row("[b]Count[/b]: ", str(stats.count))
    t.add_section()
    t.add_row("[b]Mean[/b]: ", f"{stats.mean:g}")
    t.add_row("[b]Mode[/b]: ", f"{stats.mode:g}")
    t.add_row("[b]Median[/b]: ", f"{stats.median:g}")
    return Panel(t, title=title, padding=(1, 2))


def write_report(path: str | os.PathLike, sections: Mapping[str, Iterable[str]]) -> None:
    """Write titled sections of lines to a text report.

    Each section is written as its title, an underline of ``=`` and its
    lines, followed by a blank line.

    Args:
        path: Destination file, overwritten if it exists.
        sections: Title to lines, in the order they should appear.
    """
    with open(path, "w", encoding="utf-8") as f:
        for title, lines in sections.items():
            f.write(f"{title}\n{'=' * len(title)}\n")
            for line in lines:
                f.write(f"{line}\n")
            f.write("\n")
