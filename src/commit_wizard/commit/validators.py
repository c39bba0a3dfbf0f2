"""
Input validators for the interactive prompts.

Each validator returns ``True`` when the input is acceptable and the
message to show the user otherwise.
"""

from typing import Union
from urllib.parse import urlparse

SUBJECT_MAX = 100
SCOPE_MAX = 50

SUBJECT_REQUIRED = "Subject is required, please enter a description."
SUBJECT_MAX_LENGTH = f"Subject must not exceed {SUBJECT_MAX} characters, please shorten it."
SCOPE_MAX_LENGTH = f"Scope must not exceed {SCOPE_MAX} characters."
URL_PROTOCOL = "Please enter a valid URL (starting with http:// or https://)."
URL_FORMAT = "Please enter a well-formed URL."


def validate_subject(value: str) -> Union[bool, str]:
    trimmed = value.strip()
    if not trimmed:
        return SUBJECT_REQUIRED
    if len(trimmed) > SUBJECT_MAX:
        return SUBJECT_MAX_LENGTH
    return True


def validate_scope(value: str) -> Union[bool, str]:
    if value and len(value) > SCOPE_MAX:
        return SCOPE_MAX_LENGTH
    return True


def validate_url(value: str) -> Union[bool, str]:
    """Accept absolute http(s) URLs with a host."""
    if not value.startswith(("http://", "https://")):
        return URL_PROTOCOL
    try:
        parsed = urlparse(value)
        parsed.port  # raises ValueError for a malformed port
    except ValueError:
        return URL_FORMAT
    if not parsed.hostname or any(c.isspace() for c in value):
        return URL_FORMAT
    return True
