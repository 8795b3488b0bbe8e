"""Command-line front door for messfinder.

Parses root arguments, loads ignore patterns once, and prints the reports
for each root in argument order. Always exits successfully.
"""

from __future__ import annotations

import argparse
import sys

from .config import DEFAULT_ROOT, expand_argument, load_ignore_patterns
from .logging_setup import configure_logging
from .render import format_report, should_colorize
from .walk import display


def main() -> None:
    """Report leftover files and dirty git repositories under each root.

    With no arguments the current directory is inspected. Each root's output
    is framed by an ``<argument>:`` header and a blank line only when more
    than one root is given.
    """
    parser = argparse.ArgumentParser(
        description="Report files and dirty git repositories left lying around a workspace."
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="path",
        help=f"Directory or file to inspect. Defaults to {DEFAULT_ROOT}",
    )
    args = parser.parse_args()

    configure_logging()
    ignore_patterns = load_ignore_patterns()
    arguments = args.paths or [DEFAULT_ROOT]
    show_argument_header = len(args.paths) > 1
    colorize = should_colorize(sys.stdout)

    for argument in arguments:
        for report in display(expand_argument(argument), ignore_patterns, argument, show_argument_header):
            line = format_report(report, colorize=colorize)
            if line is not None:
                sys.stdout.write(line + "\n")
        sys.stdout.flush()


if __name__ == "__main__":
    main()
