import unittest
from unittest.mock import MagicMock, call

from commit_wizard.vcs.git_client import GitClient, GitStateError, PushError, RepositoryStatus
from commit_wizard.vcs.transaction import GitTransaction


def make_client(staged=None, branch="main"):
    client = MagicMock(spec=GitClient)
    client.get_status.return_value = RepositoryStatus(
        staged_files=list(staged or []), current_branch=branch, has_upstream=False
    )
    return client


class TestPrecondition(unittest.TestCase):
    def test_no_staged_changes_fails(self) -> None:
        client = make_client(staged=[])
        with self.assertRaises(GitStateError) as ctx:
            GitTransaction(client).check_precondition()
        self.assertIn("No staged changes", str(ctx.exception))

    def test_staged_changes_pass(self) -> None:
        client = make_client(staged=["a.py"])
        GitTransaction(client).check_precondition()
        client.get_status.assert_called_once_with()

    def test_upstream_state_is_logged(self) -> None:
        client = make_client(staged=["a.py"], branch="feature/x")
        with self.assertLogs("commit_wizard.vcs.transaction", level="DEBUG") as logs:
            GitTransaction(client).check_precondition()
        self.assertIn("1 staged file(s) on branch 'feature/x', upstream not configured", logs.output[0])


class TestCommit(unittest.TestCase):
    def test_commit_passes_message_through(self) -> None:
        client = make_client(staged=["a.py"])
        GitTransaction(client).commit("fix: handle empty input")
        client.commit.assert_called_once_with("fix: handle empty input")


class TestPush(unittest.TestCase):
    def test_plain_push_success(self) -> None:
        client = make_client()
        GitTransaction(client).push()
        client.push.assert_called_once_with()

    def test_no_upstream_triggers_single_bootstrap_retry(self) -> None:
        client = make_client(branch="feature/x")
        client.push.side_effect = [
            PushError("fatal: The current branch feature/x has no upstream branch."),
            None,
        ]
        GitTransaction(client).push()
        self.assertEqual(client.push.call_args_list, [call(), call(set_upstream_branch="feature/x")])

    def test_failed_bootstrap_retry_propagates(self) -> None:
        client = make_client(branch="main")
        client.push.side_effect = [
            PushError("fatal: The current branch main has no upstream branch."),
            PushError("fatal: 'origin' does not appear to be a git repository"),
        ]
        with self.assertRaises(PushError) as ctx:
            GitTransaction(client).push()
        self.assertIn("does not appear", str(ctx.exception))
        self.assertEqual(client.push.call_count, 2)

    def test_other_failure_propagates_without_retry(self) -> None:
        client = make_client()
        error = PushError("! [rejected] main -> main (fetch first)")
        client.push.side_effect = error
        with self.assertRaises(PushError) as ctx:
            GitTransaction(client).push()
        self.assertIs(ctx.exception, error)
        client.push.assert_called_once_with()
        client.get_status.assert_not_called()


if __name__ == "__main__":
    unittest.main()
