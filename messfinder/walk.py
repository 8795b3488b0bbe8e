"""Recursive mess traversal.

Walks a directory tree depth-first and yields ``MessReport`` events. A
directory is either enumerated or treated as a single unit (ignored,
excluded, already visited, or a git repository), never both.

Path text is kept exactly as given and children are joined onto it with
``os.path.join``, so ignore patterns see ``./build`` when the root was ``./``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from .config import EXCLUSION_MARKER
from .git_status import inspect_repository, is_repository
from .ignore import IgnorePatterns
from .report import SEPARATOR_REPORT, MessReport, ReportKind, header_report

logger = logging.getLogger(__name__)

Inspector = Callable[[Path], list[str]]
PathText = str | os.PathLike[str]


def _directory_identity(path: str) -> object:
    """Return a key identifying the directory behind ``path`` and its symlinks."""
    try:
        st = os.stat(path)
    except OSError:
        return os.path.realpath(path)
    return (st.st_dev, st.st_ino)


def _sorted_child_names(directory: str) -> list[str]:
    with os.scandir(directory) as entries:
        return sorted(entry.name for entry in entries)


def _framed(
    reports: Iterable[MessReport],
    original_argument: str,
    announce_root: bool,
) -> Iterator[MessReport]:
    if announce_root:
        yield header_report(original_argument)
    yield from reports
    if announce_root:
        yield SEPARATOR_REPORT


def _directory_contents(
    path: str,
    ignore_patterns: IgnorePatterns,
    inspect: Inspector,
    visited: set[object],
) -> Iterator[MessReport]:
    if os.path.isfile(os.path.join(path, EXCLUSION_MARKER)):
        yield MessReport(ReportKind.EXCLUDED_DIRECTORY, path)
        return

    if is_repository(path):
        reasons = inspect(Path(path))
        if reasons:
            yield MessReport(ReportKind.DIRTY_REPOSITORY, path, reasons=tuple(reasons))
        return

    try:
        names = _sorted_child_names(path)
    except OSError as exc:
        logger.debug("cannot list %s: %s", path, exc)
        yield MessReport(ReportKind.UNREADABLE_DIRECTORY, path, detail=exc.strerror or str(exc))
        return

    for name in names:
        child = os.path.join(path, name)
        if os.path.isdir(child):
            yield from walk_directory(child, ignore_patterns, inspect=inspect, visited=visited)
        elif os.path.isfile(child):
            if not ignore_patterns.matches(child):
                yield MessReport(ReportKind.FILE, child)
        else:
            yield MessReport(ReportKind.UNKNOWN_ENTRY_KIND, child)


def walk_directory(
    path: PathText,
    ignore_patterns: IgnorePatterns,
    original_argument: str = "",
    announce_root: bool = False,
    inspect: Inspector = inspect_repository,
    visited: set[object] | None = None,
) -> Iterator[MessReport]:
    """Yield reports for directory ``path`` and everything beneath it.

    Precedence at each directory: ignore patterns, revisit guard, optional
    header, exclusion marker, git repository, then child enumeration.
    ``visited`` is scoped to one root; a fresh set is used when omitted.
    """
    path = os.fspath(path)
    if ignore_patterns.matches(path):
        return

    if visited is None:
        visited = set()
    identity = _directory_identity(path)
    if identity in visited:
        logger.debug("skipping already visited directory %s", path)
        yield MessReport(ReportKind.CYCLE_DETECTED, path)
        return
    visited.add(identity)

    yield from _framed(
        _directory_contents(path, ignore_patterns, inspect, visited),
        original_argument,
        announce_root,
    )


def display(
    path: PathText,
    ignore_patterns: IgnorePatterns,
    original_argument: str,
    show_argument_header: bool = False,
    inspect: Inspector = inspect_repository,
) -> Iterator[MessReport]:
    """Yield reports for one command-line root.

    Directories are walked, regular files are reported unless ignored, and
    anything else is reported as not found under ``original_argument``.
    """
    path = os.fspath(path)
    if os.path.isdir(path):
        yield from walk_directory(
            path,
            ignore_patterns,
            original_argument=original_argument,
            announce_root=show_argument_header,
            inspect=inspect,
        )
        return

    if os.path.isfile(path):
        if ignore_patterns.matches(path):
            return
        body = [MessReport(ReportKind.FILE, path)]
    else:
        body = [MessReport(ReportKind.NOT_FOUND, original_argument)]

    yield from _framed(body, original_argument, show_argument_header)
