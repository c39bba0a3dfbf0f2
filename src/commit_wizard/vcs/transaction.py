"""
Repository side effects of a wizard run.

:class:`GitTransaction` is the only place the wizard changes the
repository. It checks that something is staged, commits, and pushes,
setting up the upstream branch on the first push of a new branch.
"""

from __future__ import annotations

import logging

from commit_wizard.progress import print_warning
from commit_wizard.vcs.git_client import GitClient, GitStateError, PushError


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


NO_UPSTREAM_MARKER = "no upstream branch"
NO_STAGED_CHANGES = "No staged changes. Use 'git add' to stage the files you want to commit."


class GitTransaction:
    """Precondition check, commit and push on top of a :class:`GitClient`."""

    def __init__(self, client: GitClient) -> None:
        self.client = client

    def check_precondition(self) -> None:
        """Raise :class:`GitStateError` if nothing is staged."""
        status = self.client.get_status()
        if not status.staged_files:
            raise GitStateError(NO_STAGED_CHANGES)
        logger.debug(
            "%d staged file(s) on branch '%s', upstream %s",
            len(status.staged_files),
            status.current_branch,
            "configured" if status.has_upstream else "not configured",
        )

    def commit(self, message: str) -> None:
        self.client.commit(message)

    def push(self) -> None:
        """Push, bootstrapping ``origin/<branch>`` if there is no upstream.

        A failure whose message mentions a missing upstream branch is
        retried once as ``git push -u origin <branch>``. Every other
        failure, including a failed retry, propagates as
        :class:`PushError`.
        """
        try:
            self.client.push()
        except PushError as exc:
            if NO_UPSTREAM_MARKER not in str(exc):
                raise
            branch = self.client.get_status().current_branch
            print_warning(f"Branch '{branch}' has no upstream branch, setting origin/{branch}")
            logger.debug("Retrying push with upstream origin/%s", branch)
            self.client.push(set_upstream_branch=branch)
