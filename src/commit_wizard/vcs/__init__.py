"""
Version control integration.

:class:`GitClient` wraps the raw Git commands; :class:`GitTransaction`
builds the wizard's precondition check, commit and push on top of it.
"""

from .git_client import GitClient, GitError, GitStateError, PushError, RepositoryStatus  # noqa: F401
from .transaction import GitTransaction  # noqa: F401
