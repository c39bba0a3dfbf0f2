"""
The commit wizard.

:class:`CommitWizard` runs one commit from start to finish:

1. check that something is staged (``git-check``),
2. collect the commit answers, either manually or by confirming an AI
   suggestion built from the filtered staged diff,
3. assemble the message and commit (``commit``),
4. push if the user asked for it (``push``).

Steps run strictly in this order. Any fatal error propagates to the
caller unchanged; :func:`commit_wizard.cli.main` turns it into an exit
status.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from commit_wizard.commit.answer_collector import AnswerCollector
from commit_wizard.commit.message import assemble
from commit_wizard.commit.models import CommitAnswers
from commit_wizard.config.loader import OpenAIConfig, load_config
from commit_wizard.diff.change_collector import ChangeCollector
from commit_wizard.llm.suggestion_engine import SuggestionEngine
from commit_wizard.progress import ProgressTracker
from commit_wizard.vcs.git_client import GitClient
from commit_wizard.vcs.transaction import GitTransaction


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


class CommitWizard:
    """Sequence precondition, answer collection, commit and push."""

    def __init__(
        self,
        use_ai: bool = False,
        config_path: Optional[str] = None,
        client: Optional[GitClient] = None,
        collector: Optional[AnswerCollector] = None,
        engine: Optional[SuggestionEngine] = None,
        config_loader: Callable[[Optional[str]], OpenAIConfig] = load_config,
    ) -> None:
        self.use_ai = use_ai
        self.config_path = config_path
        self.client = client or GitClient()
        self.transaction = GitTransaction(self.client)
        self.changes = ChangeCollector(self.client)
        self.collector = collector or AnswerCollector()
        self.engine = engine or SuggestionEngine()
        self.config_loader = config_loader
        self.progress = ProgressTracker()

    def collect_answers(self) -> CommitAnswers:
        if not self.use_ai:
            return self.collector.collect_manual()

        config = self.config_loader(self.config_path)
        change_set = self.changes.collect(config)
        suggestion = self.engine.suggest(change_set, config)
        return self.collector.confirm_suggestion(suggestion)

    def run(self) -> str:
        """Run the wizard and return the commit message that was used."""
        with self.progress.phase("git-check", "Checking Git status", "Git status checked"):
            self.transaction.check_precondition()

        answers = self.collect_answers()
        message = assemble(answers)
        logger.debug("Assembled commit message: %r", message)

        with self.progress.phase("commit", "Committing", "Committed"):
            self.transaction.commit(message)

        if answers.should_push:
            with self.progress.phase("push", "Pushing to the remote repository", "Pushed"):
                self.transaction.push()

        return message
