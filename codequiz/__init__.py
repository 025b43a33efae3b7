"""
Programming Quiz Grading Engine - codequiz Package

This package contains the core components for grading programming quizzes:
- models: Data structures for questions, submissions and verdicts
- validation: Textual pre-checks on submitted code
- rules: Heuristic per-question grading rules
- grader: Verdict synthesis and remote judge fallback
- scoring: Score aggregation for a quiz attempt
- session: Quiz session controller
"""

__version__ = "1.0.0"
