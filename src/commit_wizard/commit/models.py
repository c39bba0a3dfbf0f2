"""
Data models shared by the suggestion engine, the answer collector and
message assembly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AISuggestion:
    """Commit fields proposed by the completion service.

    ``type`` and ``subject`` are never empty; ``scope`` is ``None`` when
    the model did not name one.
    """

    type: str
    subject: str
    scope: Optional[str] = None


@dataclass
class CommitAnswers:
    """Everything needed to assemble the message and decide on pushing.

    Attributes
    ----------
    type : str
        Conventional commit type.
    subject : str
        Short description; validated to 1-100 characters after stripping.
    scope : str, optional
        Affected module, omitted from the message when empty.
    add_doc_link : bool
        Whether the user asked to reference documentation.
    doc_link : str, optional
        http(s) URL appended as a ``Docs:`` trailer.
    should_push : bool
        Whether to push after committing.
    """

    type: str
    subject: str
    scope: Optional[str] = None
    add_doc_link: bool = False
    doc_link: Optional[str] = None
    should_push: bool = False
