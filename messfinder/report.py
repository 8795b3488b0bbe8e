"""Report events emitted by the traversal engine.

Reports are transient: the walker yields them and the CLI renders each one
immediately.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ReportKind(Enum):
    FILE = "file"
    EXCLUDED_DIRECTORY = "excluded_directory"
    DIRTY_REPOSITORY = "dirty_repository"
    UNKNOWN_ENTRY_KIND = "unknown_entry_kind"
    NOT_FOUND = "not_found"
    UNREADABLE_DIRECTORY = "unreadable_directory"
    CYCLE_DETECTED = "cycle_detected"
    HEADER = "header"
    SEPARATOR = "separator"


@dataclass(frozen=True)
class MessReport:
    """One output event.

    ``path`` is the path text as traversed, or the original command-line
    argument for ``HEADER`` and ``NOT_FOUND``. ``reasons`` is only set for
    dirty repositories and ``detail`` only for unreadable directories.
    """

    kind: ReportKind
    path: str = ""
    reasons: tuple[str, ...] = ()
    detail: str = ""


SEPARATOR_REPORT = MessReport(ReportKind.SEPARATOR)


def header_report(original_argument: str) -> MessReport:
    return MessReport(ReportKind.HEADER, original_argument)
