"""Fixed locations and per-run configuration.

Resolves the per-user ignore file, the per-directory opt-out marker, and
home-directory expansion for command-line arguments.
All loading is defensive: a missing or unreadable ignore file means no patterns.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import user_config_dir

from .ignore import EMPTY_IGNORE_PATTERNS, IgnorePatterns, parse_ignore_patterns

logger = logging.getLogger(__name__)

APP_NAME = "messfinder"
IGNORE_FILENAME = "ignore"
IGNORE_FILE_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / IGNORE_FILENAME

EXCLUSION_MARKER = ".nomess"
REPOSITORY_MARKER = ".git"
DEFAULT_ROOT = "./"

_HOME_PREFIX = "~/"


def load_ignore_patterns(path: Path | None = None) -> IgnorePatterns:
    """Load ignore patterns from ``path`` (default ``IGNORE_FILE_PATH``).

    Returns an empty pattern set when the file is missing, unreadable, or not
    valid UTF-8.
    """
    ignore_path = IGNORE_FILE_PATH if path is None else path
    try:
        text = ignore_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return EMPTY_IGNORE_PATTERNS
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("cannot read ignore file %s: %s", ignore_path, exc)
        return EMPTY_IGNORE_PATTERNS
    return parse_ignore_patterns(text)


def expand_argument(argument: str) -> str:
    """Replace a leading ``~/`` with the user's home directory.

    The rest of the text is kept verbatim (``./`` prefixes, trailing slashes);
    any other form (``~user``, ``$HOME``) is left untouched.
    """
    if argument.startswith(_HOME_PREFIX):
        return os.path.join(str(Path.home()), argument[len(_HOME_PREFIX):])
    return argument
