"""
Tests for grader module.

Tests the Grader class:
- Heuristic grading with validation gating
- Remote grading through a mocked judge client
- Fallback to heuristic grading when the judge fails
- Verdict formatting
"""

import pytest
from pathlib import Path
from unittest.mock import MagicMock, patch

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from codequiz.catalog import load_catalog
from codequiz.errors import JudgeError, UnsupportedLanguageError
from codequiz.grader import Grader
from codequiz.judge import JudgeResult
from codequiz.models import CodingQuestion, QuizConfig

CATALOG = load_catalog()
PRIME = CATALOG.get_coding(3, "python")
FIND_MAX = CATALOG.get_coding(5, "java")

REMOTE = QuizConfig(heuristic_mode=False)


@pytest.fixture
def judge():
    return MagicMock()


class TestHeuristicGrading:
    """Test grading without the remote judge."""

    def test_sample_solution_passes(self):
        """Test a passing verdict carries one line per test case."""
        verdict = Grader().run_tests(PRIME.sample_solution, PRIME)

        assert verdict.passed is True
        assert verdict.mode == "heuristic"
        assert verdict.details == ["Test case 1: Passed", "Test case 2: Passed"]

    def test_rule_failure_broadcast(self):
        """Test valid code failing its rule reports every test case as failed."""
        verdict = Grader().run_tests("def is_prime(n):\n    return n > 1", PRIME)

        assert verdict.passed is False
        assert verdict.details == ["Test case 1: Failed", "Test case 2: Failed"]

    @patch('codequiz.grader.grade_heuristically')
    def test_validation_gates_rules(self, mock_rule):
        """Test code failing validation never reaches the rules."""
        mock_rule.return_value = True

        verdict = Grader().run_tests("is_prime = lambda n: n > 1", PRIME)

        assert verdict.passed is False
        assert verdict.message == "There are syntax issues with your code:"
        assert verdict.details
        mock_rule.assert_not_called()

    def test_deterministic(self):
        """Test the same input always yields the same verdict."""
        grader = Grader()

        verdicts = [grader.run_tests(FIND_MAX.sample_solution, FIND_MAX) for _ in range(3)]

        assert all(v == verdicts[0] for v in verdicts)

    def test_no_test_cases(self):
        """Test questions without test cases get an empty detail list."""
        question = CodingQuestion(
            id=42, language="python", text="", starter_code="",
            test_cases_spec="",
        )

        verdict = Grader().run_tests("def solve():\n    return 'an answer comfortably longer than the threshold'", question)

        assert verdict.passed is True
        assert verdict.details == []

    def test_french_messages(self):
        """Test verdicts are localized."""
        verdict = Grader(message_language="fr").run_tests(PRIME.sample_solution, PRIME)

        assert verdict.details[0] == "Cas de test 1 : Réussi"

    def test_heuristic_mode_never_checks_language(self):
        """Test heuristic mode accepts languages without a judge id."""
        Grader().ensure_supported("cobol")


class TestRemoteGrading:
    """Test grading on the remote judge."""

    def test_accepted(self, judge):
        """Test an accepted run passes with the judge's test-case lines."""
        judge.submit.return_value = JudgeResult(
            status_description="Accepted",
            stdout="Test case 1: Passed\nTest case 2: Passed\nAll tests passed successfully!\n",
        )

        verdict = Grader(REMOTE, judge=judge).run_tests(PRIME.sample_solution, PRIME)

        assert verdict.passed is True
        assert verdict.mode == "remote"
        assert verdict.details == ["Test case 1: Passed", "Test case 2: Passed"]
        assert verdict.expected == "True\nFalse"
        program, language = judge.submit.call_args[0]
        assert language == "python"
        assert "test_result = is_prime(7)" in program

    def test_compile_error(self, judge):
        """Test compiler output yields the compile-error message."""
        judge.submit.return_value = JudgeResult(
            status_description="Compilation Error",
            compile_output="Main.java:3: error: ';' expected",
        )

        verdict = Grader(REMOTE, judge=judge).run_tests(FIND_MAX.sample_solution, FIND_MAX)

        assert verdict.passed is False
        assert verdict.message == "There appears to be a syntax error in your code."
        assert verdict.details == ["Review your logic and try again."]

    def test_failed_case_lines(self, judge):
        """Test a failing run keeps the judge's per-case lines."""
        judge.submit.return_value = JudgeResult(
            status_description="Runtime Error (NZEC)",
            stdout="Test case 1: Passed\nTest case 2: Failed\n",
        )

        verdict = Grader(REMOTE, judge=judge).run_tests(PRIME.sample_solution, PRIME)

        assert verdict.passed is False
        assert verdict.message == "Your code didn't pass all test cases."
        assert verdict.details == ["Test case 1: Passed", "Test case 2: Failed"]
        assert verdict.output == "Test case 1: Passed\nTest case 2: Failed\n"

    def test_unsupported_language(self, judge):
        """Test remote mode refuses unmapped languages before submitting."""
        question = CodingQuestion(id=1, language="cobol", text="", starter_code="", test_cases_spec="")
        grader = Grader(REMOTE, judge=judge)

        with pytest.raises(UnsupportedLanguageError):
            grader.ensure_supported("cobol")
        with pytest.raises(UnsupportedLanguageError):
            grader.run_tests("x", question)
        judge.submit.assert_not_called()


class TestFallback:
    """Test switching to heuristic grading when the judge fails."""

    def test_fallback_matches_heuristic(self, judge):
        """Test the fallback verdict equals the heuristic verdict."""
        judge.submit.side_effect = JudgeError("timeout")

        remote = Grader(REMOTE, judge=judge).run_tests(PRIME.sample_solution, PRIME)
        local = Grader().run_tests(PRIME.sample_solution, PRIME)

        assert remote == local

    @patch('codequiz.judge.httpx.post')
    def test_malformed_response_falls_back(self, mock_post):
        """Test a judge body with non-text output is graded locally."""
        response = MagicMock()
        response.json.return_value = {"status": {"description": "Wrong Answer"}, "stdout": 42}
        mock_post.return_value = response
        grader = Grader(REMOTE)

        verdict = grader.run_tests(PRIME.sample_solution, PRIME)

        assert verdict == Grader().run_tests(PRIME.sample_solution, PRIME)
        assert grader.fallback_active is True
        mock_post.assert_called_once()

    def test_fallback_is_sticky(self, judge):
        """Test later runs stay local once the judge has failed."""
        judge.submit.side_effect = JudgeError("connection refused")
        grader = Grader(REMOTE, judge=judge)

        grader.run_tests(PRIME.starter_code, PRIME)
        verdict = grader.run_tests(PRIME.sample_solution, PRIME)

        assert grader.fallback_active is True
        assert grader.heuristic_mode is True
        assert verdict.passed is True
        assert judge.submit.call_count == 1


class TestFormatVerdict:
    """Test verdict formatting."""

    def test_format_passed(self):
        """Test a passed verdict lists its details and mode."""
        grader = Grader()
        text = grader.format_verdict(grader.run_tests(PRIME.sample_solution, PRIME))

        assert "Great job!" in text
        assert "  - Test case 2: Passed" in text
        assert text.endswith("Graded in heuristic mode")

    def test_format_failed_remote_details(self, judge):
        """Test failed remote verdicts show output and expected values."""
        judge.submit.return_value = JudgeResult(status_description="Wrong Answer", stdout="Test case 1: Failed\n")
        grader = Grader(REMOTE, judge=judge)

        text = grader.format_verdict(grader.run_tests(PRIME.sample_solution, PRIME))

        assert "Output: Test case 1: Failed" in text
        assert "Expected: True" in text
        assert "Output:" not in grader.format_verdict(
            grader.run_tests(PRIME.sample_solution, PRIME), show_details=False
        )
