"""
Exception types raised by the grading engine and the quiz session.

Grading failures are reported as failed verdicts; only misconfiguration and
invalid session usage surface as exceptions.
"""


class CodequizError(Exception):
    """Base class for all codequiz errors."""


class UnsupportedLanguageError(CodequizError):
    """Raised when a language has no remote judge mapping."""

    def __init__(self, language: str):
        super().__init__(f"Language '{language}' is not supported by the remote judge")
        self.language = language


class JudgeError(CodequizError):
    """Raised when the remote judge cannot be reached or answers garbage."""


class QuizStateError(CodequizError):
    """Raised when a session operation is not allowed in the current state."""
