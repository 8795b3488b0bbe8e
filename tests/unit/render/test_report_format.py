"""Console line formatting for each report kind."""

from __future__ import annotations

import io
import os
import unittest
from unittest import mock

from pygments import console

from messfinder.render import _LABELS, format_report, should_colorize
from messfinder.report import MessReport, ReportKind


class FormatReportTests(unittest.TestCase):
    def test_plain_lines_per_kind(self) -> None:
        cases = [
            (MessReport(ReportKind.FILE, "ws/notes.txt"), "file: ws/notes.txt"),
            (
                MessReport(ReportKind.DIRTY_REPOSITORY, "ws/app", reasons=("not on default branch", "stash is not empty")),
                "git repo: ws/app (not on default branch, stash is not empty)",
            ),
            (MessReport(ReportKind.UNKNOWN_ENTRY_KIND, "ws/dangling"), "unknown entry: ws/dangling"),
            (MessReport(ReportKind.NOT_FOUND, "/no/such/path"), "not found: /no/such/path"),
            (
                MessReport(ReportKind.UNREADABLE_DIRECTORY, "ws/locked", detail="Permission denied"),
                "unreadable dir: ws/locked (Permission denied)",
            ),
            (MessReport(ReportKind.CYCLE_DETECTED, "ws/loop"), "already visited: ws/loop"),
            (MessReport(ReportKind.HEADER, "~/ws"), "~/ws:"),
            (MessReport(ReportKind.SEPARATOR), ""),
        ]
        for report, expected in cases:
            with self.subTest(kind=report.kind):
                self.assertEqual(format_report(report), expected)

    def test_every_label_color_is_a_pygments_console_code(self) -> None:
        for kind, (_label, color) in _LABELS.items():
            with self.subTest(kind=kind):
                self.assertIn(color, console.codes)
        self.assertIn("bold", console.codes)

    def test_excluded_directory_prints_nothing(self) -> None:
        self.assertIsNone(format_report(MessReport(ReportKind.EXCLUDED_DIRECTORY, "ws/archive")))

    def test_undecodable_filename_bytes_are_replaced(self) -> None:
        path = os.fsdecode(b"ws/bad\xff.txt")

        line = format_report(MessReport(ReportKind.FILE, path))

        self.assertEqual(line, "file: ws/bad�.txt")
        line.encode("utf-8")

    def test_colorized_line_keeps_path_uncolored(self) -> None:
        line = format_report(MessReport(ReportKind.FILE, "ws/notes.txt"), colorize=True)

        self.assertIsNotNone(line)
        self.assertIn("\x1b[", line)
        self.assertTrue(line.endswith(": ws/notes.txt"))


class ShouldColorizeTests(unittest.TestCase):
    def test_non_tty_stream_is_plain(self) -> None:
        self.assertFalse(should_colorize(io.StringIO()))

    def test_no_color_env_disables_color_on_tty(self) -> None:
        stream = mock.Mock()
        stream.isatty.return_value = True
        with mock.patch.dict(os.environ, {"NO_COLOR": "1"}):
            self.assertFalse(should_colorize(stream))
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertTrue(should_colorize(stream))


if __name__ == "__main__":
    unittest.main()
