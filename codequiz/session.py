"""
Quiz session controller.

Holds the state of one student's attempt at a language quiz: current
question, selected answers, code, attempt counters and verdicts. Coding
questions only unlock the next question once their latest verdict passed.
"""

import json
import logging
import threading
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Union

from .errors import QuizStateError, UnsupportedLanguageError
from .grader import Grader
from .messages import get_message
from .models import (
    LANGUAGE_NAMES,
    CodingQuestion,
    MCQuestion,
    QuestionCatalog,
    QuizAttempt,
    QuizConfig,
    Submission,
    TestVerdict,
)
from .scoring import coding_question_score, score_percent

logger = logging.getLogger(__name__)

PHASE_MCQ = "mcq"
PHASE_CODING = "coding"
PHASE_FINISHED = "finished"


@dataclass
class SessionContext:
    """Identity of the student taking the quiz and the chosen language."""
    student_id: str
    student_name: str
    language: str
    language_name: Optional[str] = None

    def __post_init__(self):
        if self.language_name is None:
            self.language_name = LANGUAGE_NAMES.get(self.language, self.language)


@dataclass
class QuizCompletion:
    """Summary record persisted when a quiz attempt completes."""
    student_id: str
    student_name: str
    quiz_name: str
    language: str
    score: int
    certificate_eligible: bool
    completed_at: str

    def to_dict(self) -> dict:
        return asdict(self)


class JsonLinesCompletionStore:
    """Appends completion records to a JSON-lines file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def save(self, completion: QuizCompletion) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'a', encoding='utf-8') as f:
            f.write(json.dumps(completion.to_dict()) + "\n")

    def load_all(self) -> List[QuizCompletion]:
        if not self.path.exists():
            return []
        completions = []
        with open(self.path, 'r', encoding='utf-8') as f:
            for line in f:
                if line.strip():
                    completions.append(QuizCompletion(**json.loads(line)))
        return completions


class QuizSession:
    """Manages the state of a student's quiz attempt."""

    def __init__(
        self,
        context: SessionContext,
        catalog: QuestionCatalog,
        config: Optional[QuizConfig] = None,
        grader: Optional[Grader] = None,
        work_dir: Optional[Path] = None,
        store=None,
        message_language: str = "en",
    ):
        self.context = context
        self.config = config or QuizConfig.default()
        self.grader = grader or Grader(self.config, message_language=message_language)
        self.grader.ensure_supported(context.language)
        self.store = store
        self.message_language = message_language

        self.mcq_questions: List[MCQuestion]
        self.coding_questions: List[CodingQuestion]
        self.mcq_questions, self.coding_questions = catalog.for_language(context.language)

        self.selected_answers: Dict[int, str] = {}
        self.coding_answers: Dict[int, str] = {}
        self.attempts: Dict[int, int] = {}
        self.verdicts: Dict[int, TestVerdict] = {}
        self.show_hints = False

        self.current_index = 0
        if self.mcq_questions:
            self.phase = PHASE_MCQ
        elif self.coding_questions:
            self.phase = PHASE_CODING
        else:
            self.phase = PHASE_FINISHED

        self.completion: Optional[QuizCompletion] = None

        self._lock = threading.Lock()
        self._in_flight = set()

        self.work_dir = Path(work_dir) if work_dir else None
        self.log_path = self.work_dir / "session.log" if self.work_dir else None
        self.results_path = self.work_dir / "results.txt" if self.work_dir else None
        if self.work_dir:
            self.work_dir.mkdir(parents=True, exist_ok=True)

        self.log("SESSION_START", f"{context.student_name} ({context.student_id}) - {context.language_name}")

    def _msg(self, key: str, **kwargs) -> str:
        return get_message(key, self.message_language, **kwargs)

    def log(self, event: str, details: str = ""):
        """Append an entry to the session log."""
        if self.log_path is None:
            return
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        log_entry = f"[{timestamp}] - {event}"
        if details:
            log_entry += f" - {details}"
        log_entry += "\n"

        with open(self.log_path, 'a', encoding='utf-8') as f:
            f.write(log_entry)

    # ===== NAVIGATION =====

    @property
    def current_question(self) -> Optional[Union[MCQuestion, CodingQuestion]]:
        if self.phase == PHASE_MCQ:
            return self.mcq_questions[self.current_index]
        if self.phase == PHASE_CODING:
            return self.coding_questions[self.current_index]
        return None

    @property
    def progress(self) -> float:
        """Percentage of the quiz reached: MCQs fill the first half, coding the second."""
        if self.phase == PHASE_MCQ:
            return (self.current_index + 1) / len(self.mcq_questions) * 50
        if self.phase == PHASE_CODING:
            return 50 + (self.current_index + 1) / len(self.coding_questions) * 50
        return 100.0

    def can_advance(self) -> bool:
        if self.phase == PHASE_MCQ:
            return True
        if self.phase == PHASE_CODING:
            verdict = self.verdicts.get(self.current_question.id)
            return verdict is not None and verdict.passed
        return False

    def next_question(self) -> Optional[Union[MCQuestion, CodingQuestion]]:
        """
        Move to the next question, from the MCQs to the coding questions and then to completion.

        Returns:
            The new current question, or None once the quiz is complete

        Raises:
            QuizStateError: If the current coding question has not passed yet, or the quiz is over
        """
        if self.phase == PHASE_FINISHED:
            raise QuizStateError("The quiz is already finished")
        if not self.can_advance():
            raise QuizStateError(
                f"Coding question {self.current_question.id} must pass its tests before moving on"
            )

        self.show_hints = False
        if self.phase == PHASE_MCQ:
            if self.current_index < len(self.mcq_questions) - 1:
                self.current_index += 1
            elif self.coding_questions:
                self.phase = PHASE_CODING
                self.current_index = 0
            else:
                self.complete()
                return None
        elif self.current_index < len(self.coding_questions) - 1:
            self.current_index += 1
        else:
            self.complete()
            return None
        return self.current_question

    def toggle_hints(self) -> bool:
        self.show_hints = not self.show_hints
        return self.show_hints

    # ===== ANSWERS =====

    def select_option(self, question_id: int, option_id: str):
        """Record the selected option of a multiple-choice question."""
        question = next((q for q in self.mcq_questions if q.id == question_id), None)
        if question is None:
            raise QuizStateError(f"No multiple-choice question {question_id} in this quiz")
        if option_id not in {option.id for option in question.options}:
            raise QuizStateError(f"Question {question_id} has no option '{option_id}'")
        self.selected_answers[question_id] = option_id

    def set_code(self, question_id: int, code: str):
        """Record edited code; the previous verdict no longer applies."""
        self._coding_question(question_id)
        self.coding_answers[question_id] = code
        self.verdicts.pop(question_id, None)

    def _coding_question(self, question_id: int) -> CodingQuestion:
        for question in self.coding_questions:
            if question.id == question_id:
                return question
        raise QuizStateError(f"No coding question {question_id} in this quiz")

    def run_tests(self, code: Optional[str] = None, question_id: Optional[int] = None) -> TestVerdict:
        """
        Grade the code of a coding question, counting one attempt.

        Args:
            code: Code to grade; defaults to the stored answer or the starter code
            question_id: Coding question; defaults to the current question

        Returns:
            The verdict. A second request while one is running for the same
            question returns a failed verdict without counting an attempt.

        Raises:
            UnsupportedLanguageError: If remote grading is misconfigured for the language
        """
        if question_id is None:
            if self.phase != PHASE_CODING:
                raise QuizStateError("No coding question is active")
            question = self.current_question
        else:
            question = self._coding_question(question_id)

        if code is None:
            code = self.coding_answers.get(question.id, question.starter_code)

        with self._lock:
            if question.id in self._in_flight:
                return TestVerdict(
                    passed=False,
                    message=self._msg("verdict_in_progress"),
                    details=[],
                )
            self._in_flight.add(question.id)

        try:
            self.attempts[question.id] = self.attempts.get(question.id, 0) + 1
            self.coding_answers[question.id] = code
            attempt_count = self.attempts[question.id]
            try:
                verdict = self.grader.run_tests(code, question, attempt_count)
            except UnsupportedLanguageError:
                raise
            except Exception as e:
                logger.exception(f"Unexpected error while grading question {question.id}: {e}")
                verdict = TestVerdict(
                    passed=False,
                    message=self._msg("verdict_internal_error"),
                    details=[self._msg("verdict_internal_error_hint")],
                )
        finally:
            with self._lock:
                self._in_flight.discard(question.id)

        self.verdicts[question.id] = verdict
        self.log(
            "RUN_TESTS",
            f"q{question.id} attempt {attempt_count}: {'PASSED' if verdict.passed else 'FAILED'} ({verdict.mode})"
        )
        return verdict

    # ===== SCORING =====

    @property
    def attempt(self) -> QuizAttempt:
        """Snapshot of the answers given so far as a QuizAttempt."""
        mcq_submissions = [
            Submission(
                question_id=q.id,
                source_text=self.selected_answers[q.id],
                attempt_count=1,
                passed=q.is_correct(self.selected_answers[q.id]),
            )
            for q in self.mcq_questions if q.id in self.selected_answers
        ]
        coding_submissions = []
        for q in self.coding_questions:
            if q.id not in self.coding_answers:
                continue
            verdict = self.verdicts.get(q.id)
            coding_submissions.append(Submission(
                question_id=q.id,
                source_text=self.coding_answers[q.id],
                attempt_count=self.attempts.get(q.id, 0),
                passed=verdict.passed if verdict else False,
            ))
        return QuizAttempt(
            language=self.context.language,
            mcq_submissions=mcq_submissions,
            coding_submissions=coding_submissions,
            mcq_total=len(self.mcq_questions),
            coding_total=len(self.coding_questions),
        )

    def score_percent(self) -> int:
        return score_percent(self.attempt, self.config)

    def complete(self) -> QuizCompletion:
        """
        Finish the quiz: compute the score, persist the completion record and
        write the results file. Calling it again returns the same record.
        """
        if self.completion is not None:
            return self.completion

        score = self.score_percent()
        self.completion = QuizCompletion(
            student_id=self.context.student_id,
            student_name=self.context.student_name,
            quiz_name=f"{self.context.language_name} Quiz",
            language=self.context.language,
            score=score,
            certificate_eligible=score >= self.config.certificate_threshold,
            completed_at=datetime.now().isoformat(timespec="seconds"),
        )
        self.phase = PHASE_FINISHED

        if self.store is not None:
            self.store.save(self.completion)
        if self.results_path is not None:
            self.generate_results_file()
        self.log("QUIZ_COMPLETE", f"score {score}% certificate={'yes' if self.completion.certificate_eligible else 'no'}")
        return self.completion

    def completion_message(self) -> str:
        if self.completion is None:
            raise QuizStateError("The quiz is not complete")
        lines = [self._msg("quiz_completed", score=self.completion.score)]
        if self.completion.certificate_eligible:
            lines.append(self._msg("certificate_eligible"))
        else:
            lines.append(self._msg("certificate_not_eligible", threshold=self.config.certificate_threshold))
        return " ".join(lines)

    def generate_results_file(self):
        """Generate the human-readable results.txt file."""
        lines = []
        lines.append(f"Student: {self.context.student_name} | ID: {self.context.student_id} "
                     f"| Date: {datetime.now().strftime('%Y-%m-%d')}")
        lines.append(f"Quiz: {self.context.language_name}\n")

        lines.append("[Multiple choice]")
        for q in self.mcq_questions:
            selected = self.selected_answers.get(q.id)
            if selected is None:
                lines.append(f"  Q{q.id}: NOT ANSWERED")
            else:
                mark = "correct" if q.is_correct(selected) else "wrong"
                lines.append(f"  Q{q.id}: {selected} ({mark})")
        lines.append("")

        lines.append("[Coding]")
        for q in self.coding_questions:
            attempts = self.attempts.get(q.id, 0)
            verdict = self.verdicts.get(q.id)
            passed = verdict is not None and verdict.passed
            points = coding_question_score(
                attempts, passed,
                self.config.coding_base_points, self.config.attempt_penalty, self.config.coding_min_points
            ) if q.id in self.coding_answers else 0
            status = "PASSED" if passed else ("FAILED" if attempts else "NOT ATTEMPTED")
            lines.append(f"  Q{q.id}: {status} - {attempts} attempt(s) - {points} pts")
        lines.append("")

        lines.append(f"TOTAL SCORE: {self.score_percent()}%")

        with open(self.results_path, 'w', encoding='utf-8') as f:
            f.write("\n".join(lines))
