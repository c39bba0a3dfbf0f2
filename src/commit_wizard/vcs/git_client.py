"""
Git client implementation for commit_wizard.

This module wraps the handful of Git operations the wizard needs:
status, staged diff, commit and push. All subprocess calls go through
:meth:`GitClient._run` so that unit tests can mock them easily.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


@dataclass(frozen=True)
class RepositoryStatus:
    """Snapshot of the repository state relevant to committing."""

    staged_files: List[str] = field(default_factory=list)
    current_branch: str = ""
    has_upstream: bool = False


class GitError(Exception):
    """Raised when a Git command fails."""

    pass


class GitStateError(GitError):
    """Raised when the repository is not in a committable state."""

    pass


class PushError(GitError):
    """Raised when pushing to the remote fails."""

    pass


class GitClient:
    """Client for interacting with a Git repository."""

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = repo_root or Path.cwd()

    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run a Git command in the repository root.

        Raises
        ------
        GitError
            If the command exits with a non-zero status when ``check`` is
            True, or the ``git`` executable cannot be started.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            logger.error("Failed to execute git: %s", exc)
            raise GitError(f"Failed to execute git: {exc}") from exc

        if check and result.returncode != 0:
            logger.error(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(result.stderr.strip() or result.stdout.strip())
        return result

    # ------------------------------------------------------------------
    # Status and diff
    # ------------------------------------------------------------------
    def get_status(self) -> RepositoryStatus:
        """Return a fresh :class:`RepositoryStatus` snapshot.

        Parses ``git status --porcelain=v2 --branch -z`` so that paths
        arrive unquoted. A file counts as staged when its index status
        column is not ``.``. Untracked, ignored and unmerged entries are
        skipped.
        """
        result = self._run(["status", "--porcelain=v2", "--branch", "-z"])
        staged: List[str] = []
        branch = ""
        has_upstream = False

        records = iter(result.stdout.split("\0"))
        for record in records:
            if record.startswith("# branch.head "):
                branch = record[len("# branch.head "):].strip()
            elif record.startswith("# branch.upstream "):
                has_upstream = True
            elif record.startswith("1 "):
                # 1 XY sub mH mI mW hH hI path
                parts = record.split(" ", 8)
                if len(parts) == 9 and parts[1][0] != ".":
                    staged.append(parts[8])
            elif record.startswith("2 "):
                # 2 XY sub mH mI mW hH hI Xscore path, then origPath as its own record
                next(records, None)
                parts = record.split(" ", 9)
                if len(parts) == 10 and parts[1][0] != ".":
                    staged.append(parts[9])

        return RepositoryStatus(
            staged_files=staged,
            current_branch=branch,
            has_upstream=has_upstream,
        )

    def get_staged_diff(self, files: Optional[List[str]] = None) -> str:
        """Return the unified diff of the index against HEAD.

        When ``files`` is given and non-empty, the diff is restricted to
        those paths.
        """
        args = ["diff", "--cached"]
        if files:
            args.append("--")
            args.extend(files)
        return self._run(args).stdout

    # ------------------------------------------------------------------
    # Committing and pushing
    # ------------------------------------------------------------------
    def commit(self, message: str) -> None:
        """Create a commit with the given message.

        Multi-line commit messages are supported. If the commit fails,
        a GitError is raised.
        """
        self._run(["commit", "-m", message])

    def push(self, set_upstream_branch: Optional[str] = None) -> None:
        """Push the current branch to the default remote.

        Parameters
        ----------
        set_upstream_branch : str, optional
            When given, push with ``-u origin <branch>`` so the branch
            starts tracking ``origin/<branch>``.

        Raises
        ------
        PushError
            If pushing fails.
        """
        args = ["push"]
        if set_upstream_branch:
            args += ["-u", "origin", set_upstream_branch]
        try:
            self._run(args)
        except GitError as exc:
            raise PushError(str(exc)) from exc
