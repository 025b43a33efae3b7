"""
Score aggregation for a completed quiz attempt.

Multiple-choice answers earn a fixed value; coding questions earn a base value
reduced for every retry and floored at a minimum once passed.
"""

import math

MCQ_POINTS = 10
CODING_BASE_POINTS = 20
ATTEMPT_PENALTY = 2
CODING_MIN_POINTS = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return int(math.floor(value + 0.5))


def coding_question_score(
    attempts: int,
    passed: bool,
    base: int = CODING_BASE_POINTS,
    penalty: int = ATTEMPT_PENALTY,
    floor: int = CODING_MIN_POINTS,
) -> int:
    """
    Points earned by one coding question.

    Args:
        attempts: Number of times the student ran the tests (values below 1 count as 1)
        passed: Whether the latest verdict passed
        base: Points for a first-attempt pass
        penalty: Deduction per attempt beyond the first
        floor: Minimum points for a passed question

    Returns:
        max(base - penalty * (attempts - 1), floor) if passed, otherwise 0
    """
    if not passed:
        return 0
    attempts = max(attempts, 1)
    return max(base - penalty * (attempts - 1), floor)


def max_possible(
    mcq_count: int,
    coding_count: int,
    mcq_points: int = MCQ_POINTS,
    coding_points: int = CODING_BASE_POINTS,
) -> int:
    return mcq_points * mcq_count + coding_points * coding_count


def earned_points(attempt, config=None) -> int:
    """Sum the points earned by every submission of a QuizAttempt."""
    mcq_points = getattr(config, 'mcq_points', MCQ_POINTS)
    base = getattr(config, 'coding_base_points', CODING_BASE_POINTS)
    penalty = getattr(config, 'attempt_penalty', ATTEMPT_PENALTY)
    floor = getattr(config, 'coding_min_points', CODING_MIN_POINTS)

    total = 0
    for submission in attempt.mcq_submissions:
        if submission.passed:
            total += mcq_points
    for submission in attempt.coding_submissions:
        total += coding_question_score(
            submission.attempt_count, bool(submission.passed), base, penalty, floor
        )
    return total


def score_percent(attempt, config=None) -> int:
    """
    Convert a QuizAttempt into a percentage of the maximum possible score.

    Returns 0 when the quiz has no questions at all.
    """
    maximum = max_possible(
        attempt.mcq_total,
        attempt.coding_total,
        getattr(config, 'mcq_points', MCQ_POINTS),
        getattr(config, 'coding_base_points', CODING_BASE_POINTS),
    )
    if maximum <= 0:
        return 0
    return round_half_up(100 * earned_points(attempt, config) / maximum)
