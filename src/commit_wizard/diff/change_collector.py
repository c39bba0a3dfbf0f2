"""
Staged change collection.

The collector asks Git for the staged file list, drops every file that
matches one of the configured exclude rules, and fetches the staged
diff for the remaining files only. Excluded files therefore never reach
the completion service.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from commit_wizard.config.loader import OpenAIConfig
from commit_wizard.vcs.git_client import GitClient


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


@dataclass(frozen=True)
class StagedChangeSet:
    """Filtered staged files and their unified diff."""

    files: List[str] = field(default_factory=list)
    diff_text: str = ""


def is_excluded(path: str, rules: Iterable[str]) -> bool:
    """Return True if ``path`` starts with a rule or contains ``/rule/``."""
    return any(path.startswith(rule) or f"/{rule}/" in path for rule in rules)


def filter_excluded(files: Iterable[str], rules: Iterable[str]) -> List[str]:
    """Return ``files`` without the ones matched by any exclude rule.

    Order is preserved. An empty rule list keeps every file.
    """
    rules = list(rules or ())
    if not rules:
        return list(files)
    return [path for path in files if not is_excluded(path, rules)]


class ChangeCollector:
    """Build the :class:`StagedChangeSet` sent to the suggestion engine."""

    def __init__(self, client: GitClient) -> None:
        self.client = client

    def collect(self, config: OpenAIConfig) -> StagedChangeSet:
        status = self.client.get_status()
        files = filter_excluded(status.staged_files, config.exclude)
        skipped = len(status.staged_files) - len(files)
        if skipped:
            logger.debug("Excluded %d staged file(s) by configuration", skipped)
        # An unrestricted `git diff --cached` would include excluded files
        diff_text = self.client.get_staged_diff(files) if files else ""
        return StagedChangeSet(files=files, diff_text=diff_text)
