"""Substring-based ignore patterns.

Patterns are plain text fragments, never globs or regexes. A path is ignored
when any pattern occurs anywhere in its string form, exactly as given.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path


def path_matches(path: Path | str, patterns: Iterable[str]) -> bool:
    """Return whether any pattern is a literal substring of ``str(path)``."""
    text = str(path)
    return any(pattern in text for pattern in patterns)


@dataclass(frozen=True)
class IgnorePatterns:
    """Ordered, immutable pattern set shared by a whole traversal."""

    patterns: tuple[str, ...] = ()

    def matches(self, path: Path | str) -> bool:
        return path_matches(path, self.patterns)

    def __bool__(self) -> bool:
        return bool(self.patterns)

    def __len__(self) -> int:
        return len(self.patterns)


EMPTY_IGNORE_PATTERNS = IgnorePatterns()


def parse_ignore_patterns(text: str) -> IgnorePatterns:
    """Parse ignore-file text, one pattern per line.

    Surrounding whitespace is stripped. Blank lines and ``#`` comments are
    skipped; order of the remaining lines is kept.
    """
    patterns: list[str] = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        patterns.append(line)
    return IgnorePatterns(tuple(patterns))
