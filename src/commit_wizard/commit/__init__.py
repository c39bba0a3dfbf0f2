"""
Commit answers: data models, validation, interactive collection and
message assembly.
"""

from .answer_collector import AnswerCollector  # noqa: F401
from .message import assemble  # noqa: F401
from .models import AISuggestion, CommitAnswers  # noqa: F401
