"""
Terminal feedback for the wizard.

Status lines are written with :func:`click.echo` so that they are
captured by :class:`click.testing.CliRunner`. Long-running phases are
wrapped in a :class:`ProgressIndicator`; the orchestrator hands these
out through a :class:`ProgressTracker` so that each named phase has at
most one live indicator and every indicator is closed on every exit
path.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

import click


def print_step(message: str) -> None:
    """Print a section header."""
    click.echo(f"\n{'=' * 60}")
    click.echo(message)
    click.echo(f"{'=' * 60}")


def print_info(message: str, indent: int = 0) -> None:
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {click.style(message, fg='blue')}")


def print_success(message: str, indent: int = 0) -> None:
    prefix = "  " * indent
    click.echo(f"{prefix}✓ {click.style(message, fg='green')}")


def print_warning(message: str, indent: int = 0) -> None:
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {click.style(message, fg='yellow')}")


def print_error(message: str, indent: int = 0) -> None:
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {click.style(message, fg='red')}", err=True)


class ProgressIndicator:
    """Start/finish lines for a single phase.

    Usable directly as a context manager; on a clean exit it prints the
    success text with the elapsed time, on an exception it prints the
    failure text and lets the exception propagate.
    """

    def __init__(self, message: str, done_message: Optional[str] = None) -> None:
        self.message = message
        self.done_message = done_message or message
        self.start_time: Optional[float] = None
        self.finished = False

    def start(self) -> "ProgressIndicator":
        self.start_time = time.time()
        click.echo(f"→ {click.style(self.message, fg='cyan')}...")
        return self

    def succeed(self, message: Optional[str] = None) -> None:
        if self.finished:
            return
        self.finished = True
        now = time.time()
        elapsed = now - (self.start_time if self.start_time is not None else now)
        text = message or self.done_message
        click.echo(f"✓ {click.style(text, fg='green')} (took {elapsed:.1f}s)")

    def fail(self, message: Optional[str] = None) -> None:
        if self.finished:
            return
        self.finished = True
        text = message or f"{self.message} failed"
        click.echo(f"✗ {click.style(text, fg='red')}", err=True)

    def __enter__(self) -> "ProgressIndicator":
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            self.succeed()
        else:
            self.fail()
        return False


class ProgressTracker:
    """Registry of the live indicators of one wizard run, keyed by phase id."""

    def __init__(self) -> None:
        self._active: Dict[str, ProgressIndicator] = {}

    def is_active(self, phase_id: str) -> bool:
        return phase_id in self._active

    @contextmanager
    def phase(
        self, phase_id: str, message: str, done_message: Optional[str] = None
    ) -> Iterator[ProgressIndicator]:
        """Run a block under the indicator named ``phase_id``.

        Raises
        ------
        RuntimeError
            If an indicator with the same id is still running.
        """
        if phase_id in self._active:
            raise RuntimeError(f"Progress phase '{phase_id}' is already running")
        indicator = ProgressIndicator(message, done_message)
        self._active[phase_id] = indicator
        try:
            with indicator:
                yield indicator
        finally:
            del self._active[phase_id]
