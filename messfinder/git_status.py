"""Git working-directory state inspection.

Asks git for the current branch, porcelain status records and stash entries,
and turns them into the ordered list of reasons a repository counts as dirty.
Every git call is bounded by a timeout; a failed call only disables its check.
"""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .config import REPOSITORY_MARKER

logger = logging.getLogger(__name__)

GIT_TIMEOUT_SECONDS = 10.0
DEFAULT_BRANCHES = frozenset({"main", "master"})

REASON_NOT_ON_DEFAULT_BRANCH = "not on default branch"
REASON_WORKING_TREE_CHANGED = "files added, modified, or removed"
REASON_STASH_NOT_EMPTY = "stash is not empty"


@dataclass(frozen=True)
class StatusEntry:
    """One ``git status --porcelain`` record: two-char code plus path."""

    code: str
    path: str


class RepositoryProbe(Protocol):
    """Source of repository state used by ``inspect_repository``."""

    def current_branch(self, repo: Path) -> str | None: ...

    def status_entries(self, repo: Path) -> list[StatusEntry]: ...

    def stash_count(self, repo: Path) -> int: ...


def is_repository(path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` has a git metadata directory at its top level."""
    return os.path.isdir(os.path.join(path, REPOSITORY_MARKER))


def _git_env() -> dict[str, str]:
    env = dict(os.environ)
    # Keep status from refreshing the index on disk.
    env["GIT_OPTIONAL_LOCKS"] = "0"
    return env


def _run_git(repo: Path, args: list[str], timeout_seconds: float) -> subprocess.CompletedProcess[str] | None:
    """Run git in ``repo``; ``None`` on launch failure, timeout or non-zero exit."""
    try:
        proc = subprocess.run(
            ["git", *args],
            cwd=str(repo),
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
            env=_git_env(),
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git %s failed in %s: %s", " ".join(args), repo, exc)
        return None
    if proc.returncode != 0:
        logger.debug("git %s exited %d in %s", " ".join(args), proc.returncode, repo)
        return None
    return proc


def parse_porcelain_records(output: str) -> list[StatusEntry]:
    """Parse NUL-separated ``--porcelain=v1 -z`` output.

    Records shorter than ``XY path`` or without the separating space are
    dropped.
    """
    entries: list[StatusEntry] = []
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if not token:
            continue
        if len(token) < 4 or token[2] != " ":
            continue

        code = token[:2]
        entries.append(StatusEntry(code=code, path=token[3:]))

        # Renamed/copied records carry the source path as an extra token.
        if "R" in code or "C" in code:
            index += 1

    return entries


class GitCommandProbe:
    """``RepositoryProbe`` backed by the ``git`` command-line tool."""

    def __init__(self, timeout_seconds: float = GIT_TIMEOUT_SECONDS) -> None:
        self.timeout_seconds = timeout_seconds

    def current_branch(self, repo: Path) -> str | None:
        # symbolic-ref fails on a detached HEAD, which skips the branch check.
        proc = _run_git(repo, ["symbolic-ref", "--short", "-q", "HEAD"], self.timeout_seconds)
        if proc is None:
            return None
        branch = proc.stdout.strip()
        return branch or None

    def status_entries(self, repo: Path) -> list[StatusEntry]:
        proc = _run_git(
            repo,
            ["status", "--porcelain=v1", "-z", "--untracked-files=normal"],
            self.timeout_seconds,
        )
        if proc is None:
            return []
        return parse_porcelain_records(proc.stdout)

    def stash_count(self, repo: Path) -> int:
        proc = _run_git(repo, ["stash", "list"], self.timeout_seconds)
        if proc is None:
            return 0
        return sum(1 for line in proc.stdout.splitlines() if line.strip())


def inspect_repository(repo: Path, probe: RepositoryProbe | None = None) -> list[str]:
    """Return the reasons ``repo`` is dirty, in fixed branch/status/stash order.

    An empty list means the repository is clean.
    """
    if probe is None:
        probe = GitCommandProbe()

    reasons: list[str] = []
    branch = probe.current_branch(repo)
    if branch is not None and branch not in DEFAULT_BRANCHES:
        reasons.append(REASON_NOT_ON_DEFAULT_BRANCH)
    if probe.status_entries(repo):
        reasons.append(REASON_WORKING_TREE_CHANGED)
    if probe.stash_count(repo) > 0:
        reasons.append(REASON_STASH_NOT_EMPTY)
    return reasons
