"""
Tests for scoring module.

Tests score aggregation:
- Per-question coding points with the retry penalty and floor
- Percentage of the maximum possible score
- Rounding and empty quizzes
"""

import pytest
from pathlib import Path

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from codequiz.models import QuizAttempt, QuizConfig, Submission
from codequiz.scoring import (
    coding_question_score,
    earned_points,
    max_possible,
    round_half_up,
    score_percent,
)


def _mcq(question_id, passed):
    return Submission(question_id=question_id, source_text="a", attempt_count=1, passed=passed)


def _coding(question_id, attempts, passed=True):
    return Submission(question_id=question_id, source_text="code", attempt_count=attempts, passed=passed)


class TestCodingQuestionScore:
    """Test points for a single coding question."""

    @pytest.mark.parametrize("attempts,points", [(1, 20), (2, 18), (3, 16), (8, 6), (9, 5), (20, 5)])
    def test_penalty_and_floor(self, attempts, points):
        """Test each retry costs two points down to the floor."""
        assert coding_question_score(attempts, True) == points

    def test_not_passed(self):
        """Test an unpassed question earns nothing."""
        assert coding_question_score(1, False) == 0
        assert coding_question_score(0, False) == 0

    def test_zero_attempts_counts_as_one(self):
        """Test a pass without a recorded attempt earns the base points."""
        assert coding_question_score(0, True) == 20

    def test_monotonic(self):
        """Test more attempts never earn more points."""
        scores = [coding_question_score(n, True) for n in range(1, 30)]

        assert scores == sorted(scores, reverse=True)


class TestScorePercent:
    """Test the overall percentage."""

    def test_end_to_end(self):
        """Test three correct MCQs and two coding passes on attempts 1 and 3."""
        attempt = QuizAttempt(
            language="python",
            mcq_submissions=[_mcq(1, True), _mcq(2, True), _mcq(3, True)],
            coding_submissions=[_coding(1, 1), _coding(2, 3)],
        )

        assert max_possible(3, 2) == 70
        assert earned_points(attempt) == 66
        assert score_percent(attempt) == 94
        assert attempt.score_percent == 94

    def test_unanswered_questions_count_in_maximum(self):
        """Test totals larger than the submission count lower the percentage."""
        attempt = QuizAttempt(
            language="python",
            mcq_submissions=[_mcq(1, True)],
            mcq_total=3,
            coding_total=2,
        )

        assert score_percent(attempt) == 14

    def test_empty_quiz(self):
        """Test a quiz without questions scores 0."""
        assert score_percent(QuizAttempt(language="python")) == 0

    def test_half_rounds_up(self):
        """Test a percentage ending in .5 rounds up."""
        attempt = QuizAttempt(
            language="python",
            coding_submissions=[_coding(1, 10)],
            coding_total=2,
        )

        assert earned_points(attempt) == 5
        assert score_percent(attempt) == 13

    def test_wrong_answers(self):
        """Test wrong MCQs and failed coding questions earn nothing."""
        attempt = QuizAttempt(
            language="java",
            mcq_submissions=[_mcq(1, False)],
            coding_submissions=[_coding(1, 4, passed=False)],
        )

        assert score_percent(attempt) == 0

    def test_custom_config(self):
        """Test configured point values replace the defaults."""
        config = QuizConfig(mcq_points=5, coding_base_points=10, attempt_penalty=5, coding_min_points=1)
        attempt = QuizAttempt(
            language="python",
            mcq_submissions=[_mcq(1, True)],
            coding_submissions=[_coding(1, 2)],
        )

        assert earned_points(attempt, config) == 10
        assert score_percent(attempt, config) == 67


class TestRoundHalfUp:
    """Test the rounding helper."""

    def test_values(self):
        """Test halves go up where round() would go to even."""
        assert round_half_up(12.5) == 13
        assert round_half_up(2.5) == 3
        assert round_half_up(2.4999) == 2
        assert round_half_up(94.2857) == 94
