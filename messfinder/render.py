"""Console formatting for mess reports.

Each report becomes one line of text, or nothing for silently skipped
directories. Labels are colored with Pygments console codes when enabled.
"""

from __future__ import annotations

import os
from typing import TextIO

from pygments.console import colorize as _colorize

from .report import MessReport, ReportKind

_LABELS: dict[ReportKind, tuple[str, str]] = {
    ReportKind.FILE: ("file", "yellow"),
    ReportKind.DIRTY_REPOSITORY: ("git repo", "brightred"),
    ReportKind.UNKNOWN_ENTRY_KIND: ("unknown entry", "magenta"),
    ReportKind.NOT_FOUND: ("not found", "red"),
    ReportKind.UNREADABLE_DIRECTORY: ("unreadable dir", "red"),
    ReportKind.CYCLE_DETECTED: ("already visited", "brightblack"),
}


def should_colorize(stream: TextIO) -> bool:
    """Color only interactive output, and never when ``NO_COLOR`` is set."""
    if os.environ.get("NO_COLOR"):
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def display_text(text: str) -> str:
    """Make path text printable: undecodable filename bytes become U+FFFD."""
    return os.fsencode(text).decode("utf-8", "replace")


def format_report(report: MessReport, colorize: bool = False) -> str | None:
    """Return the console line for ``report``, or ``None`` to print nothing."""
    if report.kind is ReportKind.EXCLUDED_DIRECTORY:
        return None
    if report.kind is ReportKind.SEPARATOR:
        return ""
    if report.kind is ReportKind.HEADER:
        header = f"{display_text(report.path)}:"
        return _colorize("bold", header) if colorize else header

    label, color = _LABELS[report.kind]
    if colorize:
        label = _colorize(color, label)
    line = f"{label}: {display_text(report.path)}"
    if report.reasons:
        line += f" ({', '.join(report.reasons)})"
    elif report.detail:
        line += f" ({report.detail})"
    return line
