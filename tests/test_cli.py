"""
Tests for cli module.

Tests the command-line driver:
- Grading a single file
- Writing a sample configuration
- Taking a full quiz with scripted input
"""

import json
from pathlib import Path
from unittest.mock import patch

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from codequiz.catalog import load_catalog
from codequiz.cli import main

CATALOG = load_catalog()


class TestGradeCommand:
    """Test the grade subcommand."""

    def test_passing_file(self, tmp_path, capsys):
        """Test a passing solution exits with 0."""
        source = tmp_path / "solution.py"
        source.write_text(CATALOG.get_coding(3, "python").sample_solution, encoding='utf-8')

        code = main(["grade", "--config", str(tmp_path / "none.json"),
                     "--language", "python", "--question", "3", str(source)])

        assert code == 0
        assert "Great job!" in capsys.readouterr().out

    def test_failing_file(self, tmp_path):
        """Test a failing solution exits with 1."""
        source = tmp_path / "solution.py"
        source.write_text(CATALOG.get_coding(3, "python").starter_code, encoding='utf-8')

        code = main(["grade", "--config", str(tmp_path / "none.json"),
                     "--language", "python", "--question", "3", str(source)])

        assert code == 1

    def test_unknown_question(self, tmp_path, capsys):
        """Test an unknown question exits with 2."""
        source = tmp_path / "solution.py"
        source.write_text("pass", encoding='utf-8')

        code = main(["grade", "--config", str(tmp_path / "none.json"),
                     "--language", "python", "--question", "99", str(source)])

        assert code == 2
        assert "No coding question 99" in capsys.readouterr().err

    def test_missing_catalog(self, tmp_path):
        """Test load errors exit with 2."""
        code = main(["grade", "--config", str(tmp_path / "none.json"),
                     "--catalog", str(tmp_path / "absent.json"),
                     "--language", "python", "--question", "3", str(tmp_path / "x.py")])

        assert code == 2

    def test_json_output(self, tmp_path, capsys):
        """Test --json prints the verdict as a JSON object."""
        source = tmp_path / "solution.py"
        source.write_text(CATALOG.get_coding(3, "python").sample_solution, encoding='utf-8')

        code = main(["grade", "--config", str(tmp_path / "none.json"), "--json",
                     "--language", "python", "--question", "3", str(source)])

        verdict = json.loads(capsys.readouterr().out)
        assert code == 0
        assert verdict["passed"] is True
        assert verdict["mode"] == "heuristic"
        assert verdict["details"] == ["Test case 1: Passed", "Test case 2: Passed"]
        assert "output" not in verdict


class TestConfigCommand:
    """Test the config subcommand."""

    def test_sample(self, tmp_path):
        """Test the sample config is written."""
        path = tmp_path / "config.json"

        assert main(["config", "--sample", str(path)]) == 0
        assert json.loads(path.read_text(encoding='utf-8'))["heuristic_mode"] is True


class TestTakeCommand:
    """Test an interactive quiz run."""

    def test_full_quiz(self, tmp_path, capsys):
        """Test a scripted student finishing the Python quiz with full marks."""
        work_dir = tmp_path / "ada_QUIZ"
        work_dir.mkdir()
        (work_dir / "q3.py").write_text(CATALOG.get_coding(3, "python").sample_solution, encoding='utf-8')
        (work_dir / "q4.py").write_text(CATALOG.get_coding(4, "python").sample_solution, encoding='utf-8')
        results = tmp_path / "completions.jsonl"
        answers = iter(["a", "c", "c", "test", "next", "test", "next"])

        with patch('builtins.input', lambda prompt="": next(answers)):
            code = main(["take", "--config", str(tmp_path / "none.json"),
                         "--language", "python", "--name", "Ada Lovelace",
                         "--work-dir", str(work_dir), "--results", str(results)])

        assert code == 0
        assert "Your score is 100%" in capsys.readouterr().out
        assert json.loads(results.read_text(encoding='utf-8'))["student_id"] == "ada_lovelace"
        assert (work_dir / "results.txt").exists()

    def test_next_blocked_until_passing(self, tmp_path, capsys):
        """Test 'next' is refused while the code still fails, then quitting exits with 1."""
        work_dir = tmp_path / "ada_QUIZ"
        answers = iter(["a", "c", "c", "next", "test", "quit"])

        with patch('builtins.input', lambda prompt="": next(answers)):
            code = main(["take", "--config", str(tmp_path / "none.json"),
                         "--language", "python", "--name", "Ada",
                         "--work-dir", str(work_dir)])

        out = capsys.readouterr().out
        assert code == 1
        assert "must pass the tests" in out
        assert "Test Failed" in out
        assert (work_dir / "q3.py").read_text(encoding='utf-8').startswith("def is_prime")
        assert "QUIT" in (work_dir / "session.log").read_text(encoding='utf-8')


class TestRemoteStartup:
    """Test the judge check before a remote quiz starts."""

    @patch('codequiz.cli.check_internet_connectivity', return_value=False)
    @patch('codequiz.cli.JudgeClient.is_reachable', return_value=False)
    def test_offline_message(self, mock_reachable, mock_internet, tmp_path, capsys):
        """Test an offline machine is reported before switching to heuristic grading."""
        answers = iter(["quit"])

        with patch('builtins.input', lambda prompt="": next(answers)):
            code = main(["take", "--config", str(tmp_path / "none.json"), "--remote",
                         "--language", "python", "--name", "Ada",
                         "--work-dir", str(tmp_path / "ada_QUIZ")])

        assert code == 1
        assert "No internet connection" in capsys.readouterr().out
        mock_internet.assert_called_once()

    @patch('codequiz.cli.check_internet_connectivity', return_value=True)
    @patch('codequiz.cli.JudgeClient.is_reachable', return_value=False)
    def test_judge_down_message(self, mock_reachable, mock_internet, tmp_path, capsys):
        """Test a down judge host is told apart from a missing connection."""
        answers = iter(["quit"])

        with patch('builtins.input', lambda prompt="": next(answers)):
            main(["take", "--config", str(tmp_path / "none.json"), "--remote",
                  "--language", "python", "--name", "Ada",
                  "--work-dir", str(tmp_path / "ada_QUIZ")])

        assert "Remote judge unreachable" in capsys.readouterr().out

    @patch('codequiz.cli.check_internet_connectivity')
    @patch('codequiz.cli.JudgeClient.is_reachable', return_value=True)
    def test_reachable_judge(self, mock_reachable, mock_internet, tmp_path, capsys):
        """Test the internet probe is skipped when the judge answers."""
        answers = iter(["quit"])

        with patch('builtins.input', lambda prompt="": next(answers)):
            main(["take", "--config", str(tmp_path / "none.json"), "--remote",
                  "--language", "python", "--name", "Ada",
                  "--work-dir", str(tmp_path / "ada_QUIZ")])

        assert "Remote judge reachable" in capsys.readouterr().out
        mock_internet.assert_not_called()
