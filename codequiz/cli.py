#!/usr/bin/env python3
"""
Programming Quiz CLI

Terminal driver for the grading engine: grade a single file against a
catalog question, or take a full language quiz interactively.
"""

import argparse
import dataclasses
import getpass
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .catalog import language_hints, load_catalog
from .config_loader import create_sample_config, load_config
from .connectivity import check_internet_connectivity
from .errors import CodequizError
from .grader import Grader
from .judge import JudgeClient
from .messages import get_message
from .models import LANGUAGE_NAMES, CodingQuestion, MCQuestion, QuizConfig
from .session import JsonLinesCompletionStore, QuizSession, SessionContext, PHASE_FINISHED

logger = logging.getLogger(__name__)

SOURCE_EXTENSIONS = {
    "javascript": "js",
    "python": "py",
    "java": "java",
    "csharp": "cs",
    "cpp": "cpp",
    "c": "c",
    "typescript": "ts",
}

HELP_TEXT = """Commands:
  test   Run the tests on your code file
  next   Go to the next question (coding questions must pass first)
  hint   Show or hide hints
  help   Show this help
  quit   Leave the quiz without finishing"""


def _load_catalog_arg(args):
    key = None
    if args.catalog and Path(args.catalog).suffix.lower() != '.json':
        key = args.key or getpass.getpass("Catalog key or password: ")
    return load_catalog(Path(args.catalog) if args.catalog else None, key)


def _load_config_arg(args) -> QuizConfig:
    config = load_config(Path(args.config) if args.config else None)
    if args.remote:
        config = dataclasses.replace(config, heuristic_mode=False)
    return config


def cmd_grade(args) -> int:
    """Grade one source file against one coding question."""
    config = _load_config_arg(args)
    catalog = _load_catalog_arg(args)

    question = catalog.get_coding(args.question, args.language)
    if question is None:
        print(f"No coding question {args.question} for language '{args.language}'", file=sys.stderr)
        return 2

    code_path = Path(args.file)
    if not code_path.exists():
        print(f"File '{code_path}' not found", file=sys.stderr)
        return 2

    grader = Grader(config)
    grader.ensure_supported(question.language)
    verdict = grader.run_tests(code_path.read_text(encoding='utf-8'), question)
    if args.json:
        print(json.dumps(verdict.to_dict(), indent=2))
    else:
        print(grader.format_verdict(verdict))
    return 0 if verdict.passed else 1


def _print_mcq(question: MCQuestion, index: int, total: int):
    print(f"\nQuestion {index + 1}/{total}: {question.text}")
    for option in question.options:
        print(f"  {option.id}) {option.text}")


def _print_coding(question: CodingQuestion, code_path: Path, index: int, total: int):
    print(f"\nCoding question {index + 1}/{total}: {question.text}")
    print(f"Edit your solution in: {code_path}")
    print("Type 'test' when ready, 'help' for commands.")


def _code_path(work_dir: Path, question: CodingQuestion) -> Path:
    return work_dir / f"q{question.id}.{SOURCE_EXTENSIONS.get(question.language, 'txt')}"


def _ask_mcq(session: QuizSession, question: MCQuestion) -> bool:
    """Prompt until a valid option is chosen; returns False if the student quits."""
    valid = [option.id for option in question.options]
    while True:
        answer = input(f"Your answer ({'/'.join(valid)}, or quit): ").strip().lower()
        if answer == "quit":
            return False
        if answer in valid:
            session.select_option(question.id, answer)
            return True
        print("Invalid option.")


def _coding_loop(session: QuizSession, question: CodingQuestion) -> bool:
    """Command loop for one coding question; returns False if the student quits."""
    code_path = _code_path(session.work_dir, question)
    if not code_path.exists():
        code_path.write_text(question.starter_code, encoding='utf-8')
    _print_coding(question, code_path, session.current_index, len(session.coding_questions))

    while True:
        command = input(f"[q{question.id}]> ").strip().lower()
        if command == "test":
            verdict = session.run_tests(code_path.read_text(encoding='utf-8'))
            print(session.grader.format_verdict(verdict))
            print(get_message("tests_passed_notice" if verdict.passed else "tests_failed_notice"))
        elif command == "next":
            if session.can_advance():
                return True
            print("Your code must pass the tests before moving on.")
        elif command == "hint":
            if session.toggle_hints():
                for hint in language_hints(question):
                    print(f"  * {hint}")
        elif command == "help":
            print(HELP_TEXT)
        elif command == "quit":
            return False
        elif command:
            print("Unknown command. Type 'help' for the list of commands.")


def cmd_take(args) -> int:
    """Run an interactive quiz in the terminal."""
    config = _load_config_arg(args)
    catalog = _load_catalog_arg(args)

    language = args.language
    if language is None:
        available = catalog.languages()
        while language not in available:
            language = input(f"Choose a language ({', '.join(available)}): ").strip().lower()

    name = args.name or input("Your name: ").strip()
    student_id = args.student_id or name.lower().replace(" ", "_")

    if not config.heuristic_mode:
        print("Checking the remote judge...")
        if JudgeClient.from_config(config).is_reachable():
            print("✓ Remote judge reachable, code will be executed remotely.")
        else:
            if check_internet_connectivity():
                print("! Remote judge unreachable, switching to local heuristic grading.")
            else:
                print("! No internet connection, switching to local heuristic grading.")
            config = dataclasses.replace(config, heuristic_mode=True)

    work_dir = Path(args.work_dir) if args.work_dir else (
        Path.cwd() / f"{student_id}_{config.work_dir_postfix}"
    )
    store = JsonLinesCompletionStore(Path(args.results)) if args.results else None

    context = SessionContext(student_id=student_id, student_name=name, language=language)
    session = QuizSession(context, catalog, config, work_dir=work_dir, store=store)

    print("=" * 60)
    print(f"{context.language_name} Quiz - {name}")
    print("=" * 60)

    while session.phase != PHASE_FINISHED:
        question = session.current_question
        print(f"\nProgress: {session.progress:.0f}%")
        if isinstance(question, MCQuestion):
            _print_mcq(question, session.current_index, len(session.mcq_questions))
            if not _ask_mcq(session, question):
                session.log("QUIT", "Student left during multiple-choice questions")
                return 1
        elif not _coding_loop(session, question):
            session.log("QUIT", f"Student left at coding question {question.id}")
            return 1
        session.next_question()

    print("\n" + "=" * 60)
    print(session.completion_message())
    print("=" * 60)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codequiz",
        description="Programming quiz runner and grader",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  codequiz grade --language python --question 3 solution.py
  codequiz take --language java --name "Ada Lovelace"
  codequiz config --sample config.json

Languages: {', '.join(LANGUAGE_NAMES)}
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(sub):
        sub.add_argument("--config", help="Path to config.json")
        sub.add_argument("--catalog", help="Question catalog (.json or encrypted); built-in if omitted")
        sub.add_argument("--key", help="Key or password of an encrypted catalog")
        sub.add_argument("--remote", action="store_true",
                         help="Execute code on the remote judge instead of heuristic grading")

    grade = subparsers.add_parser("grade", help="Grade a source file against a coding question")
    add_common(grade)
    grade.add_argument("--language", required=True, choices=list(LANGUAGE_NAMES))
    grade.add_argument("--question", required=True, type=int, help="Coding question id")
    grade.add_argument("file", help="Source file to grade")
    grade.add_argument("--json", action="store_true", help="Print the verdict as JSON")
    grade.set_defaults(func=cmd_grade)

    take = subparsers.add_parser("take", help="Take a quiz interactively")
    add_common(take)
    take.add_argument("--language", choices=list(LANGUAGE_NAMES))
    take.add_argument("--name", help="Student name")
    take.add_argument("--student-id", help="Student identifier")
    take.add_argument("--work-dir", help="Directory for code files and the session log")
    take.add_argument("--results", help="JSON-lines file receiving the completion record")
    take.set_defaults(func=cmd_take)

    config = subparsers.add_parser("config", help="Configuration helpers")
    config.add_argument("--sample", required=True, help="Write a sample config file to this path")
    config.set_defaults(func=lambda a: create_sample_config(Path(a.sample)) or 0)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except (CodequizError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
