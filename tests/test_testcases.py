"""
Tests for testcases module.

Tests parsing of free-text test-case blocks:
- Strict (===) and loose (==) equality markers
- The returns marker used by Java and C# questions
- Skipping of unrecognized lines and idempotence
"""

from pathlib import Path

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from codequiz.models import TestCase
from codequiz.testcases import parse_test_cases


class TestParseMarkers:
    """Test each supported marker."""

    def test_strict_equality(self):
        """Test === lines are split and stripped."""
        cases = parse_test_cases("sum(1, 2) === 3\nsum(-1, 1) === 0")

        assert cases == [
            TestCase(input="sum(1, 2)", expected="3"),
            TestCase(input="sum(-1, 1)", expected="0"),
        ]

    def test_loose_equality(self):
        """Test == lines are parsed."""
        cases = parse_test_cases("is_prime(7) == True\nis_prime(4) == False")

        assert cases == [
            TestCase(input="is_prime(7)", expected="True"),
            TestCase(input="is_prime(4)", expected="False"),
        ]

    def test_loose_equality_splits_on_last_marker(self):
        """Test the loose pattern keeps earlier == inside the input."""
        cases = parse_test_cases("f(a == b) == True")

        assert cases == [TestCase(input="f(a == b)", expected="True")]

    def test_returns_marker(self):
        """Test Java/C# style lines are parsed."""
        cases = parse_test_cases('ReverseString("hello") returns "olleh"')

        assert cases == [TestCase(input='ReverseString("hello")', expected='"olleh"')]


class TestParseRobustness:
    """Test lenient parsing."""

    def test_unrecognized_lines_skipped(self):
        """Test lines with no marker are ignored without error."""
        cases = parse_test_cases("just a comment\nfactorial(5) == 120\n\n")

        assert cases == [TestCase(input="factorial(5)", expected="120")]

    def test_empty_text(self):
        """Test empty and missing text yield no cases."""
        assert parse_test_cases("") == []
        assert parse_test_cases(None) == []

    def test_idempotent(self):
        """Test parsing the same text twice gives equal lists."""
        text = "sum(1, 2) === 3\nnoise\nfactorial(0) == 1"

        assert parse_test_cases(text) == parse_test_cases(text)
