"""
Commit message assembly.
"""

from commit_wizard.commit.models import CommitAnswers


def assemble(answers: CommitAnswers) -> str:
    """Format ``answers`` as a conventional commit message.

    >>> assemble(CommitAnswers(type="feat", scope="user", subject="add login"))
    'feat(user): add login'
    """
    scope_part = f"({answers.scope})" if answers.scope else ""
    message = f"{answers.type}{scope_part}: {answers.subject}"
    if answers.doc_link:
        return f"{message}\n\nDocs: {answers.doc_link}"
    return message
