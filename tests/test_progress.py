"""Tests for progress indicators and display helpers."""

import unittest
from unittest.mock import patch

import pytest

from commit_wizard.progress import (
    ProgressIndicator,
    ProgressTracker,
    print_error,
    print_info,
    print_step,
    print_success,
    print_warning,
)


class TestProgressIndicator(unittest.TestCase):
    @patch("commit_wizard.progress.click.echo")
    @patch("commit_wizard.progress.time.time")
    def test_success_prints_elapsed(self, mock_time, mock_echo):
        mock_time.side_effect = [0.0, 1.5]

        with ProgressIndicator("Committing", "Committed"):
            pass

        self.assertEqual(mock_echo.call_count, 2)
        self.assertIn("Committing", str(mock_echo.call_args_list[0]))
        self.assertIn("✓", str(mock_echo.call_args_list[1]))
        self.assertIn("Committed", str(mock_echo.call_args_list[1]))
        self.assertIn("1.5s", str(mock_echo.call_args_list[1]))

    @patch("commit_wizard.progress.click.echo")
    def test_failure_prints_and_reraises(self, mock_echo):
        with self.assertRaises(ValueError):
            with ProgressIndicator("Pushing"):
                raise ValueError("boom")

        last = mock_echo.call_args_list[-1]
        self.assertIn("✗", str(last))
        self.assertIn("Pushing failed", str(last))
        self.assertEqual(last[1].get("err"), True)

    @patch("commit_wizard.progress.click.echo")
    def test_finishing_twice_prints_once(self, mock_echo):
        indicator = ProgressIndicator("Work").start()
        indicator.succeed()
        indicator.fail()
        self.assertEqual(mock_echo.call_count, 2)


class TestProgressTracker(unittest.TestCase):
    def test_phase_is_released_on_success_and_failure(self):
        tracker = ProgressTracker()
        with tracker.phase("commit", "Committing"):
            self.assertTrue(tracker.is_active("commit"))
        self.assertFalse(tracker.is_active("commit"))

        with self.assertRaises(RuntimeError):
            with tracker.phase("push", "Pushing"):
                raise RuntimeError("network down")
        self.assertFalse(tracker.is_active("push"))

    def test_same_phase_cannot_run_twice(self):
        tracker = ProgressTracker()
        with tracker.phase("git-check", "Checking"):
            with self.assertRaises(RuntimeError):
                with tracker.phase("git-check", "Checking again"):
                    pass
            self.assertTrue(tracker.is_active("git-check"))


@pytest.mark.parametrize(
    "func, symbol",
    [(print_info, "ℹ"), (print_success, "✓"), (print_warning, "⚠")],
)
def test_print_helpers(func, symbol, capsys):
    func("hello", indent=1)
    assert capsys.readouterr().out == f"  {symbol} hello\n"


def test_print_error_goes_to_stderr(capsys):
    print_error("bad")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "✗ bad\n"


def test_print_step(capsys):
    print_step("Change analysis")
    assert "Change analysis" in capsys.readouterr().out
