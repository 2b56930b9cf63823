"""Unit tests for test runner scripts."""

import unittest
from unittest.mock import Mock, patch

from tests import run_tests


class TestRunCommandFunction(unittest.TestCase):
    """Tests for the run_command helper function."""

    @patch("tests.run_tests.subprocess.run")
    def test_run_command_returns_exit_code(self, mock_run):
        mock_run.return_value = Mock(returncode=42)

        result = run_tests.run_command("some_command")

        self.assertEqual(result, 42)
        self.assertTrue(mock_run.call_args[1]["shell"])


class TestSuiteRunners(unittest.TestCase):
    """Tests for the suite entry points."""

    @patch("tests.run_tests.run_command", return_value=0)
    def test_suites_select_their_directories(self, mock_run_command):
        cases = [
            (run_tests.run_unit, "tests/unit"),
            (run_tests.run_component, "tests/component"),
            (run_tests.run_dependency, "tests/dependency"),
        ]

        for runner, directory in cases:
            with self.subTest(runner=runner.__name__):
                with self.assertRaises(SystemExit) as ctx:
                    runner()
                self.assertEqual(ctx.exception.code, 0)
                command = mock_run_command.call_args[0][0]
                self.assertIn("pytest", command)
                self.assertIn(directory, command)

    @patch("tests.run_tests.run_command", return_value=1)
    def test_run_all_propagates_failure(self, mock_run_command):
        with self.assertRaises(SystemExit) as ctx:
            run_tests.run_all()

        self.assertEqual(ctx.exception.code, 1)
        command = mock_run_command.call_args[0][0]
        for directory in ("tests/unit", "tests/component", "tests/dependency"):
            self.assertIn(directory, command)

    @patch("tests.run_tests.run_command", return_value=0)
    def test_performance_runs_locust_headless(self, mock_run_command):
        with self.assertRaises(SystemExit):
            run_tests.run_performance()

        command = mock_run_command.call_args[0][0]
        self.assertIn("locust", command)
        self.assertIn("--headless", command)


if __name__ == "__main__":
    unittest.main()
