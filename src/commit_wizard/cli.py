"""
Command line interface for commit_wizard.

This module defines the ``main`` function used as the entry point of the
``commit-wizard`` command. It configures logging, prints the banner,
runs the :class:`CommitWizard` and is the single place where errors are
turned into exit codes.
"""

from __future__ import annotations

import logging
import traceback
from typing import Optional

import click

from commit_wizard import __version__
from commit_wizard.config.loader import ConfigError
from commit_wizard.llm.openai_client import AIServiceError
from commit_wizard.progress import print_error, print_info, print_success
from commit_wizard.vcs.git_client import GitError, GitStateError
from commit_wizard.wizard import CommitWizard

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def print_banner() -> None:
    click.echo("\n" + "=" * 60)
    click.echo(click.style("🧙 Commit Wizard".center(60), fg="cyan", bold=True))
    click.echo(f"v{__version__}".center(60))
    click.echo("=" * 60)


def _describe(exc: Exception) -> str:
    if isinstance(exc, ConfigError):
        return f"Configuration error: {exc}"
    if isinstance(exc, GitStateError):
        return str(exc)
    if isinstance(exc, AIServiceError):
        return f"AI service call failed: {exc}"
    if isinstance(exc, GitError):
        return f"Git error: {exc}"
    return f"Unexpected error: {exc}"


@click.command(
    epilog=(
        "\b\nExamples:\n"
        "  commit-wizard                  start the interactive wizard\n"
        "  commit-wizard --ai             let the AI suggest the message\n"
        "  commit-wizard -c ./cfg.json    use a custom configuration file\n"
        "  git cw                         run through the Git alias"
    )
)
@click.option("-a", "--ai", "use_ai", is_flag=True, default=False, help="Suggest the commit message with AI.")
@click.option("-d", "--debug", is_flag=True, default=False, help="Show full error details.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to the configuration file (.commit-wizard.json).",
)
@click.version_option(version=__version__, prog_name="commit-wizard")
def main(use_ai: bool, debug: bool, config_path: Optional[str]) -> None:
    """Create a conventional commit for the staged changes."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
        force=True,
    )

    print_banner()
    logger.debug("Starting wizard (ai=%s, config=%s)", use_ai, config_path)

    try:
        CommitWizard(use_ai=use_ai, config_path=config_path).run()
    except (click.exceptions.Exit, click.Abort):
        raise
    except Exception as exc:
        print_error(_describe(exc))
        if isinstance(exc, ConfigError):
            print_info(
                'Expected .commit-wizard.json: {"openai": {"apiKey": ..., "baseURL": ..., "model": ...}}',
                indent=1,
            )
        if debug:
            click.echo(traceback.format_exc(), err=True)
        raise click.exceptions.Exit(EXIT_FAILURE)

    print_success("Commit complete! Thanks for using Commit Wizard.")
