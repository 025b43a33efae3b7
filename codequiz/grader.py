"""
Grader module for validating and grading coding submissions.

Provides the Grader class which runs a submission through textual validation
and either the local heuristic rules or the remote judge, and turns the
outcome into a TestVerdict. Remote failures fall back to local grading so the
caller only ever sees verdicts.
"""

import logging
from typing import List, Optional

from .errors import JudgeError
from .harness import build_harness
from .judge import JudgeClient, JudgeResult, language_id_for
from .messages import get_message
from .models import CodingQuestion, QuizConfig, TestCase, TestVerdict
from .rules import DEFAULT_REGISTRY, RuleRegistry, grade_heuristically
from .testcases import parse_test_cases
from .validation import validate_code

logger = logging.getLogger(__name__)


class Grader:
    """Grades coding submissions in heuristic or remote judge mode."""

    def __init__(
        self,
        config: Optional[QuizConfig] = None,
        judge: Optional[JudgeClient] = None,
        registry: RuleRegistry = DEFAULT_REGISTRY,
        message_language: str = "en",
    ):
        """Initialize grader with the quiz config, an optional judge client and rule registry."""
        self.config = config or QuizConfig.default()
        self.registry = registry
        self.message_language = message_language
        self.judge = judge
        if self.judge is None and not self.config.heuristic_mode:
            self.judge = JudgeClient.from_config(self.config)
        # Set once a remote call fails; later submissions stay local.
        self.fallback_active = False

    # ===== HELPER FUNCTIONS =====

    def _msg(self, key: str, **kwargs) -> str:
        return get_message(key, self.message_language, **kwargs)

    @property
    def heuristic_mode(self) -> bool:
        return self.config.heuristic_mode or self.fallback_active

    def ensure_supported(self, language: str) -> None:
        """
        Fail at setup time when remote grading cannot handle a language.

        Raises:
            UnsupportedLanguageError: If remote mode is on and the language has no judge id
        """
        if not self.config.heuristic_mode:
            language_id_for(language)

    # ===== GRADING =====

    def run_tests(self, source: str, question: CodingQuestion, attempt_count: int = 1) -> TestVerdict:
        """
        Grade a submission and return its verdict.

        Args:
            source: The student's code
            question: The coding question being answered
            attempt_count: How many times the student has run the tests, this run included

        Returns:
            TestVerdict; grading problems are reported as failed verdicts

        Raises:
            UnsupportedLanguageError: In remote mode, when the question's language has no judge id
        """
        logger.debug(
            f"Grading question {question.language}/{question.id} "
            f"(attempt {attempt_count}, {'heuristic' if self.heuristic_mode else 'remote'} mode)"
        )
        if self.heuristic_mode:
            return self.grade_locally(source, question)

        language_id_for(question.language)
        try:
            return self.grade_remotely(source, question)
        except JudgeError as e:
            logger.warning(f"Remote judge unavailable, switching to heuristic grading: {e}")
            self.fallback_active = True
            return self.grade_locally(source, question)

    def grade_locally(self, source: str, question: CodingQuestion) -> TestVerdict:
        """Validate the code, then apply the question's heuristic rule."""
        validation = validate_code(source, question.language)
        if not validation.is_valid:
            return TestVerdict(
                passed=False,
                message=self._msg("verdict_syntax_issues"),
                details=list(validation.errors),
                mode="heuristic",
            )

        passed = grade_heuristically(source, question, self.registry)
        return self.synthesize_verdict(passed, parse_test_cases(question.test_cases_spec))

    def synthesize_verdict(self, passed: bool, test_cases: List[TestCase]) -> TestVerdict:
        """
        Build a heuristic verdict with one detail line per declared test case.

        The single heuristic outcome is reported for every line; cases are not
        graded independently.
        """
        status = self._msg("status_passed" if passed else "status_failed")
        details = [
            self._msg("test_case_line", num=i, status=status)
            for i in range(1, len(test_cases) + 1)
        ]
        return TestVerdict(
            passed=passed,
            message=self._msg("verdict_passed" if passed else "verdict_failed"),
            details=details,
            mode="heuristic",
        )

    def grade_remotely(self, source: str, question: CodingQuestion) -> TestVerdict:
        """
        Submit the code wrapped in a generated harness to the remote judge.

        Raises:
            JudgeError: When the judge call fails in any way
        """
        if self.judge is None:
            self.judge = JudgeClient.from_config(self.config)
        test_cases = parse_test_cases(question.test_cases_spec)
        program = build_harness(source, question.language, test_cases)
        result = self.judge.submit(program, question.language)
        return self.interpret_judge_result(result, test_cases)

    def interpret_judge_result(self, result: JudgeResult, test_cases: Optional[List[TestCase]] = None) -> TestVerdict:
        """Map a judge response onto a verdict."""
        details = result.test_case_lines()
        expected = None
        if test_cases:
            expected = "\n".join(case.expected for case in test_cases)

        if result.accepted or (result.stdout and "All tests passed" in result.stdout):
            return TestVerdict(
                passed=True,
                message=self._msg("verdict_passed"),
                details=details,
                output=result.stdout,
                expected=expected,
                mode="remote",
            )

        message = self._msg("verdict_failed")
        if result.compile_output:
            message = self._msg("verdict_compile_error")
        return TestVerdict(
            passed=False,
            message=message,
            details=details or [self._msg("verdict_review_logic")],
            output=result.stdout,
            expected=expected,
            mode="remote",
        )

    # ===== UTILITY METHODS =====

    def format_verdict(self, verdict: TestVerdict, show_details: bool = True) -> str:
        """
        Format a verdict for terminal display.

        Args:
            verdict: Verdict returned by run_tests
            show_details: If True, include raw output and expected values when available

        Returns:
            Formatted string for terminal display
        """
        lines = [verdict.message]
        for detail in verdict.details:
            lines.append(f"  - {detail}")

        if show_details and not verdict.passed:
            if verdict.output and verdict.output.strip():
                lines.append(self._msg("grader_output_label", text=verdict.output.strip()[:200]))
            if verdict.expected:
                lines.append(self._msg("grader_expected_label", text=verdict.expected[:200]))

        lines.append(self._msg("grader_mode_label", mode=verdict.mode))
        return "\n".join(lines)
