from commit_wizard.commit.message import assemble
from commit_wizard.commit.models import CommitAnswers


def test_type_scope_subject():
    answers = CommitAnswers(type="feat", scope="user", subject="add login")
    assert assemble(answers) == "feat(user): add login"


def test_scope_omitted_when_empty():
    assert assemble(CommitAnswers(type="feat", subject="add login")) == "feat: add login"
    assert assemble(CommitAnswers(type="feat", scope="", subject="add login")) == "feat: add login"


def test_doc_link_trailer():
    answers = CommitAnswers(
        type="feat", scope="user", subject="add login", add_doc_link=True, doc_link="https://x.io/doc"
    )
    assert assemble(answers) == "feat(user): add login\n\nDocs: https://x.io/doc"


def test_push_flag_does_not_change_message():
    answers = CommitAnswers(type="fix", subject="handle empty input", should_push=True)
    assert assemble(answers) == "fix: handle empty input"
