"""
Interactive collection of commit answers.

All questions are asked with :func:`click.prompt` / :func:`click.confirm`.
Validation errors raise :class:`click.BadParameter` from the prompt's
``value_proc`` so that click prints the message and asks again.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple, Union

import click

from commit_wizard.commit.commit_types import COMMIT_TYPES, COMMIT_TYPE_VALUES
from commit_wizard.commit.models import AISuggestion, CommitAnswers
from commit_wizard.commit.validators import validate_scope, validate_subject, validate_url
from commit_wizard.progress import print_warning


def _checked(validator: Callable[[str], Union[bool, str]]) -> Callable[[str], str]:
    def value_proc(value: str) -> str:
        result = validator(value)
        if result is not True:
            raise click.BadParameter(str(result))
        return value

    return value_proc


def _type_proc(value: str) -> str:
    choice = value.strip().lower()
    if choice.isdigit() and 1 <= int(choice) <= len(COMMIT_TYPE_VALUES):
        return COMMIT_TYPE_VALUES[int(choice) - 1]
    if choice in COMMIT_TYPE_VALUES:
        return choice
    raise click.BadParameter(
        f"Unknown commit type '{value}'. Choose one of: {', '.join(COMMIT_TYPE_VALUES)}"
    )


class AnswerCollector:
    """Ask the user for the fields of a :class:`CommitAnswers`."""

    def collect_type(self) -> str:
        click.echo("")
        for index, (value, label, description) in enumerate(COMMIT_TYPES, start=1):
            click.echo(f"  {index:>2}. {click.style(f'{value:<9}', fg='green')} {label} - {description}")
        return click.prompt(
            click.style("Select the commit type (name or number)", fg="blue", bold=True),
            value_proc=_type_proc,
        )

    def collect_scope(self) -> Optional[str]:
        scope = click.prompt(
            click.style("Enter the scope (optional)", fg="blue", bold=True),
            default="",
            show_default=False,
            value_proc=_checked(validate_scope),
        ).strip()
        return scope or None

    def collect_subject(self) -> str:
        subject = click.prompt(
            click.style("Enter a short description (required)", fg="blue", bold=True),
            value_proc=_checked(validate_subject),
        )
        return subject.strip()

    def collect_doc_info(self) -> Tuple[bool, Optional[str]]:
        add_doc_link = click.confirm(
            click.style("Add a link to related documentation?", fg="blue", bold=True),
            default=False,
        )
        doc_link = None
        if add_doc_link:
            doc_link = click.prompt(
                click.style("Enter the documentation URL (http:// or https://)", fg="blue", bold=True),
                value_proc=_checked(validate_url),
            )
        return add_doc_link, doc_link

    def collect_push_info(self) -> bool:
        return click.confirm(
            click.style("Push to the remote repository after committing?", fg="blue", bold=True),
            default=False,
        )

    def collect_manual(self) -> CommitAnswers:
        """Ask every question in order and return the answers."""
        commit_type = self.collect_type()
        scope = self.collect_scope()
        subject = self.collect_subject()
        add_doc_link, doc_link = self.collect_doc_info()
        should_push = self.collect_push_info()
        return CommitAnswers(
            type=commit_type,
            scope=scope,
            subject=subject,
            add_doc_link=add_doc_link,
            doc_link=doc_link,
            should_push=should_push,
        )

    def confirm_suggestion(self, suggestion: AISuggestion) -> CommitAnswers:
        """Offer ``suggestion``; fall back to manual entry if it is declined."""
        click.echo(click.style("\nSuggested commit:", bold=True))
        click.echo(f"  {click.style('Type:', fg='cyan')}    {suggestion.type}")
        click.echo(f"  {click.style('Scope:', fg='cyan')}   {suggestion.scope or '(none)'}")
        click.echo(f"  {click.style('Subject:', fg='cyan')} {suggestion.subject}\n")

        use_suggestion = click.confirm(
            click.style("Use the suggested commit message?", fg="blue", bold=True),
            default=True,
        )
        if not use_suggestion:
            return self.collect_manual()

        # The suggestion is model output; hold it to the same rules as typed input.
        scope = suggestion.scope
        scope_check = validate_scope(scope or "")
        if scope_check is not True:
            print_warning(f"Suggested scope rejected: {scope_check}")
            scope = self.collect_scope()
        subject = suggestion.subject.strip()
        subject_check = validate_subject(subject)
        if subject_check is not True:
            print_warning(f"Suggested subject rejected: {subject_check}")
            subject = self.collect_subject()

        add_doc_link, doc_link = self.collect_doc_info()
        should_push = self.collect_push_info()
        return CommitAnswers(
            type=suggestion.type,
            scope=scope,
            subject=subject,
            add_doc_link=add_doc_link,
            doc_link=doc_link,
            should_push=should_push,
        )
