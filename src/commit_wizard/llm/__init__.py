"""
Language model integration for commit_wizard.

This package contains the :class:`OpenAIClient` for a chat-completions
API and the :class:`SuggestionEngine` which turns staged changes into a
commit suggestion.
"""

from .openai_client import AIServiceError, OpenAIClient  # noqa: F401
from .suggestion_engine import SuggestionEngine, parse_suggestion  # noqa: F401
