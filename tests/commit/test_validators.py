import pytest

from commit_wizard.commit.validators import (
    SCOPE_MAX_LENGTH,
    SUBJECT_MAX_LENGTH,
    SUBJECT_REQUIRED,
    URL_FORMAT,
    URL_PROTOCOL,
    validate_scope,
    validate_subject,
    validate_url,
)


@pytest.mark.parametrize("value", ["", "   ", "\t\n"])
def test_subject_required(value):
    assert validate_subject(value) == SUBJECT_REQUIRED


def test_subject_length_limit():
    assert validate_subject("x" * 101) == SUBJECT_MAX_LENGTH
    assert validate_subject("x" * 100) is True
    # Surrounding whitespace does not count
    assert validate_subject("  " + "x" * 100 + "  ") is True


def test_scope_length_limit():
    assert validate_scope("") is True
    assert validate_scope("s" * 50) is True
    assert validate_scope("s" * 51) == SCOPE_MAX_LENGTH


@pytest.mark.parametrize(
    "value, expected",
    [
        ("ftp://x.com", URL_PROTOCOL),
        ("example.com/doc", URL_PROTOCOL),
        ("http://", URL_FORMAT),
        ("https://exa mple.com", URL_FORMAT),
        ("http://example.com:notaport/", URL_FORMAT),
        ("https://example.com/doc", True),
        ("http://localhost:8080/wiki?page=1#top", True),
    ],
)
def test_validate_url(value, expected):
    assert validate_url(value) == expected
