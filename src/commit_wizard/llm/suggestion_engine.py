"""
AI commit suggestions.

The :class:`SuggestionEngine` turns a :class:`StagedChangeSet` into an
:class:`AISuggestion`:

1. a fixed prompt embeds the staged file list and diff verbatim,
2. one completion request is made through :class:`OpenAIClient`,
3. the reply is parsed as JSON, first from a fenced ```` ```json ````
   block, then as the whole reply.

The model's reply is untrusted text. Anything that does not parse into
a JSON object yields the default suggestion (``chore`` / ``updated
code``) instead of an error. A failed request, on the other hand, is
raised as :class:`AIServiceError` and ends the run.
"""

from __future__ import annotations

import enum
import json
import logging
import re
from dataclasses import dataclass
from textwrap import dedent
from typing import Any, Dict, List, Optional

import click

from commit_wizard.commit.commit_types import COMMIT_TYPE_VALUES, DEFAULT_COMMIT_TYPE
from commit_wizard.commit.models import AISuggestion
from commit_wizard.config.loader import OpenAIConfig
from commit_wizard.diff.change_collector import StagedChangeSet
from commit_wizard.llm.openai_client import OpenAIClient
from commit_wizard.progress import ProgressIndicator, print_info, print_step


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


DEFAULT_SUBJECT = "updated code"

_JSON_FENCE = re.compile(r"```json[ \t]*\n(.*?)```", re.DOTALL | re.IGNORECASE)
_PLAIN_FENCE = re.compile(r"```[ \t]*\n(.*?)```", re.DOTALL)

PROMPT_TEMPLATE = dedent(
    """
    You are a professional Git commit message assistant. Generate a structured
    commit message for the staged changes below, following the Conventional
    Commits specification. Work through these steps:

    1. Change analysis
    - Analyze the changed file paths:
    {files}
    - Review the code diff:
    {diff}
    - Identify the core intent of the change (new feature, bug fix, docs, style, ...).

    2. Decision
    Type: choose exactly one of {types}
      feat     -> new product functionality (not test code)
      fix      -> bug fix
      init     -> project initialization
      docs     -> documentation only (README, CHANGELOG, ...)
      style    -> formatting only (whitespace, indentation, semicolons)
      refactor -> restructuring without behaviour change
      perf     -> performance improvement
      test     -> test code
      revert   -> reverts a previous commit
      build    -> build system
      chore    -> tooling, dependencies and other maintenance
      ci       -> continuous integration
    Scope: infer the module from the file paths (e.g. src/user -> user). If
    several modules are touched pick the single dominant one, otherwise null.
    Subject: an imperative sentence starting with a lowercase letter, no
    trailing punctuation, at most 50 characters, describing the nature of the
    change rather than listing operations.

    3. Output
    Return ONLY a JSON object, with no other text, containing exactly these keys:
    {{"type": "<one of the types above>", "scope": "<module name or null>", "subject": "<subject>"}}
    Escape special characters so that the JSON parses. If the type cannot be
    determined use "chore".
    """
).strip()


class SuggestionParseError(Exception):
    """Raised internally when a model reply cannot be decoded."""

    pass


class SuggestionSource(enum.Enum):
    """Where a suggestion came from."""

    PARSED = "parsed"
    DEFAULT = "default"


@dataclass(frozen=True)
class SuggestionOutcome:
    suggestion: AISuggestion
    source: SuggestionSource


def default_suggestion() -> AISuggestion:
    return AISuggestion(type=DEFAULT_COMMIT_TYPE, subject=DEFAULT_SUBJECT)


def build_prompt(files: List[str], diff_text: str) -> str:
    """Return the completion prompt for the given files and diff."""
    return PROMPT_TEMPLATE.format(
        files="\n".join(files),
        diff=diff_text,
        types=", ".join(COMMIT_TYPE_VALUES),
    )


def _decode(text: str) -> Dict[str, Any]:
    match = _JSON_FENCE.search(text) or _PLAIN_FENCE.search(text)
    payload = match.group(1) if match else text
    try:
        result = json.loads(payload.strip())
    except ValueError as exc:
        raise SuggestionParseError(f"reply is not valid JSON: {exc}") from exc
    if not isinstance(result, dict):
        raise SuggestionParseError(f"expected a JSON object, got {type(result).__name__}")
    return result


def _text_field(result: Dict[str, Any], key: str) -> Optional[str]:
    value = result.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        value = str(value)
    return value.strip() or None


def parse_suggestion(text: str) -> SuggestionOutcome:
    """Parse a model reply, falling back to :func:`default_suggestion`."""
    try:
        result = _decode(text)
    except SuggestionParseError as exc:
        logger.warning("Could not parse AI suggestion, using default: %s", exc)
        return SuggestionOutcome(default_suggestion(), SuggestionSource.DEFAULT)

    suggestion = AISuggestion(
        type=_text_field(result, "type") or DEFAULT_COMMIT_TYPE,
        scope=_text_field(result, "scope"),
        subject=_text_field(result, "subject") or DEFAULT_SUBJECT,
    )
    return SuggestionOutcome(suggestion, SuggestionSource.PARSED)


class SuggestionEngine:
    """Generate an :class:`AISuggestion` for a staged change set."""

    def __init__(self, client: Optional[OpenAIClient] = None) -> None:
        self.client = client

    def _show_files(self, files: List[str]) -> None:
        print_info("Analyzing file types and paths")
        for index, path in enumerate(files, start=1):
            icon = "📂" if path.endswith("/") else "📄"
            click.echo(f"    {index}. {icon} {click.style(path, fg='green')}")
        click.echo(click.style(f"\n    {len(files)} file(s) in total\n", dim=True))

    def suggest(self, change_set: StagedChangeSet, config: OpenAIConfig) -> AISuggestion:
        """Ask the completion service for a suggestion.

        Raises
        ------
        AIServiceError
            If the completion request fails.
        """
        client = self.client or OpenAIClient.from_config(config)

        print_step("Change analysis")
        self._show_files(change_set.files)

        prompt = build_prompt(change_set.files, change_set.diff_text)
        logger.debug("Prompt length: %d characters", len(prompt))

        with ProgressIndicator("Asking the AI for a suggestion", "AI analysis complete"):
            reply = client.complete(prompt)

        print_info("Parsing the AI suggestion")
        outcome = parse_suggestion(reply)
        if outcome.source is SuggestionSource.DEFAULT:
            logger.debug("Raw AI reply: %r", reply)
        return outcome.suggestion
