"""
Data models for the question catalog, submissions and grading verdicts.

Provides type-safe structures for questions, test cases, verdicts, quiz
attempts and the quiz configuration.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Tuple

from .scoring import (
    MCQ_POINTS,
    CODING_BASE_POINTS,
    ATTEMPT_PENALTY,
    CODING_MIN_POINTS,
    score_percent,
)


GRADED_LANGUAGES = ("javascript", "python", "java", "csharp")
RESERVED_LANGUAGES = ("cpp", "c", "typescript")
LANGUAGES = GRADED_LANGUAGES + RESERVED_LANGUAGES

LANGUAGE_NAMES = {
    "javascript": "JavaScript",
    "python": "Python",
    "java": "Java",
    "csharp": "C#",
    "cpp": "C++",
    "c": "C",
    "typescript": "TypeScript",
}


def _check_language(language: str) -> str:
    if language not in LANGUAGES:
        raise ValueError(f"Unknown language: {language!r}")
    return language


@dataclass
class MCQOption:
    """A single answer option of a multiple-choice question."""
    id: str
    text: str


@dataclass(frozen=True)
class MCQuestion:
    """Represents a multiple-choice question."""
    id: int
    language: str
    text: str
    options: Tuple[MCQOption, ...]
    correct_option_id: str

    kind = "mcq"

    def is_correct(self, option_id: Optional[str]) -> bool:
        return option_id is not None and option_id == self.correct_option_id

    @staticmethod
    def from_dict(data: dict) -> 'MCQuestion':
        """Create an MCQuestion from a dictionary."""
        return MCQuestion(
            id=int(data['id']),
            language=_check_language(data['language']),
            text=data['text'],
            options=tuple(MCQOption(id=o['id'], text=o['text']) for o in data['options']),
            correct_option_id=data.get('correct_option_id') or data['correctAnswer'],
        )


@dataclass(frozen=True)
class CodingQuestion:
    """Represents a coding question graded against its test-case block."""
    id: int
    language: str
    text: str
    starter_code: str
    test_cases_spec: str
    sample_solution: Optional[str] = None
    hints: Optional[Tuple[str, ...]] = None

    kind = "coding"

    @staticmethod
    def from_dict(data: dict) -> 'CodingQuestion':
        """Create a CodingQuestion from a dictionary (snake_case or camelCase keys)."""
        hints = data.get('hints')
        return CodingQuestion(
            id=int(data['id']),
            language=_check_language(data['language']),
            text=data['text'],
            starter_code=data.get('starter_code', data.get('starterCode', '')),
            test_cases_spec=data.get('test_cases_spec', data.get('testCases', '')),
            sample_solution=data.get('sample_solution', data.get('sampleSolution')),
            hints=tuple(hints) if hints else None,
        )


@dataclass(frozen=True)
class TestCase:
    """One parsed test-case line: a call expression and its expected value."""
    __test__ = False

    input: str
    expected: str


@dataclass
class Submission:
    """
    A student's answer to one question within an attempt.

    For multiple-choice questions ``source_text`` holds the selected option id.
    ``passed`` is the outcome of the most recent grading, None if never graded.
    """
    question_id: int
    source_text: str
    attempt_count: int = 0
    passed: Optional[bool] = None


@dataclass
class ValidationResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass
class TestVerdict:
    """Outcome of grading one coding submission."""
    __test__ = False

    passed: bool
    message: str
    details: List[str] = field(default_factory=list)
    output: Optional[str] = None
    expected: Optional[str] = None
    mode: str = "heuristic"  # "heuristic" or "remote"

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "passed": self.passed,
            "message": self.message,
            "details": list(self.details),
            "mode": self.mode,
        }
        if self.output is not None:
            data["output"] = self.output
        if self.expected is not None:
            data["expected"] = self.expected
        return data


@dataclass
class QuizAttempt:
    """
    Session-scoped aggregate of one student's run through a language quiz.

    ``mcq_total`` and ``coding_total`` count the questions of the quiz, which
    may exceed the number of submissions when questions were left unanswered.
    """
    language: str
    mcq_submissions: List[Submission] = field(default_factory=list)
    coding_submissions: List[Submission] = field(default_factory=list)
    mcq_total: Optional[int] = None
    coding_total: Optional[int] = None

    def __post_init__(self):
        if self.mcq_total is None:
            self.mcq_total = len(self.mcq_submissions)
        if self.coding_total is None:
            self.coding_total = len(self.coding_submissions)

    @property
    def score_percent(self) -> int:
        return score_percent(self)


@dataclass
class QuestionCatalog:
    """Read-only question set for all languages."""
    version: str
    mcq: List[MCQuestion]
    coding: List[CodingQuestion]

    @staticmethod
    def from_dict(data: dict) -> 'QuestionCatalog':
        """Create a QuestionCatalog from a dictionary."""
        return QuestionCatalog(
            version=str(data.get('version', '1')),
            mcq=[MCQuestion.from_dict(q) for q in data.get('mcq', [])],
            coding=[CodingQuestion.from_dict(q) for q in data.get('coding', [])],
        )

    def for_language(self, language: str) -> Tuple[List[MCQuestion], List[CodingQuestion]]:
        """Return the MCQ and coding questions of one language, in catalog order."""
        return (
            [q for q in self.mcq if q.language == language],
            [q for q in self.coding if q.language == language],
        )

    def get_coding(self, question_id: int, language: str) -> Optional[CodingQuestion]:
        for question in self.coding:
            if question.id == question_id and question.language == language:
                return question
        return None

    def languages(self) -> List[str]:
        seen = []
        for question in list(self.mcq) + list(self.coding):
            if question.language not in seen:
                seen.append(question.language)
        return seen


@dataclass
class QuizConfig:
    """
    Configuration for grading and scoring.

    Attributes:
        heuristic_mode: Grade locally with textual heuristics instead of the remote judge
        judge_url: Base URL of the remote code-execution judge
        judge_api_host: Value of the X-RapidAPI-Host header
        judge_api_key: Value of the X-RapidAPI-Key header
        judge_timeout_seconds: Bound on a single remote judge call
        mcq_points: Points for each correctly answered multiple-choice question
        coding_base_points: Points for a coding question passed on the first attempt
        attempt_penalty: Points deducted for each attempt beyond the first
        coding_min_points: Floor for a passed coding question
        certificate_threshold: Minimum score percentage for a certificate
        work_dir_postfix: Postfix for the student's working directory
    """
    heuristic_mode: bool = True
    judge_url: str = "https://judge0-ce.p.rapidapi.com"
    judge_api_host: str = "judge0-ce.p.rapidapi.com"
    judge_api_key: str = ""
    judge_timeout_seconds: float = 5.0
    mcq_points: int = MCQ_POINTS
    coding_base_points: int = CODING_BASE_POINTS
    attempt_penalty: int = ATTEMPT_PENALTY
    coding_min_points: int = CODING_MIN_POINTS
    certificate_threshold: int = 80
    work_dir_postfix: str = "QUIZ"

    @staticmethod
    def from_dict(data: dict) -> 'QuizConfig':
        """Create QuizConfig from dictionary."""
        defaults = QuizConfig()
        return QuizConfig(
            heuristic_mode=bool(data.get('heuristic_mode', defaults.heuristic_mode)),
            judge_url=str(data.get('judge_url', defaults.judge_url)).rstrip('/'),
            judge_api_host=str(data.get('judge_api_host', defaults.judge_api_host)),
            judge_api_key=str(data.get('judge_api_key', defaults.judge_api_key)),
            judge_timeout_seconds=float(data.get('judge_timeout_seconds', defaults.judge_timeout_seconds)),
            mcq_points=int(data.get('mcq_points', defaults.mcq_points)),
            coding_base_points=int(data.get('coding_base_points', defaults.coding_base_points)),
            attempt_penalty=int(data.get('attempt_penalty', defaults.attempt_penalty)),
            coding_min_points=int(data.get('coding_min_points', defaults.coding_min_points)),
            certificate_threshold=int(data.get('certificate_threshold', defaults.certificate_threshold)),
            work_dir_postfix=str(data.get('work_dir_postfix', defaults.work_dir_postfix)),
        )

    def validate(self) -> tuple[bool, str]:
        """
        Validate configuration consistency.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if any(x < 0 for x in [self.mcq_points, self.coding_base_points,
                                self.attempt_penalty, self.coding_min_points]):
            return False, "Point values must be non-negative"

        if self.coding_min_points > self.coding_base_points:
            return False, (f"Coding floor ({self.coding_min_points}) exceeds "
                           f"base points ({self.coding_base_points})")

        if not 0 <= self.certificate_threshold <= 100:
            return False, "Certificate threshold must be between 0 and 100"

        if self.judge_timeout_seconds <= 0:
            return False, "Judge timeout must be positive"

        if not self.heuristic_mode and not self.judge_url:
            return False, "Remote mode requires a judge URL"

        return True, ""

    @staticmethod
    def default() -> 'QuizConfig':
        """Return default configuration (local heuristic grading)."""
        return QuizConfig()
