"""
Heuristic grading rules for coding questions.

Each rule is a named predicate over the submitted source text that looks for
the idioms a correct solution would normally contain. Nothing is executed, so
the rules are an approximation: incorrect code that happens to contain the
expected idioms passes, and correct code written in an unanticipated style
fails. Use remote judge mode when real execution is required.

Rules live in a registry keyed by (language, question_id) so new questions
can be added without touching the grader.
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional, Tuple

# Submissions without a dedicated rule pass once they exceed this many characters
MIN_EFFORT_LENGTH = 50


@dataclass(frozen=True)
class HeuristicRule:
    """A named source-text predicate for one (language, question) pair."""
    name: str
    language: str
    question_id: int
    predicate: Callable[[str], bool]
    description: str = ""

    @property
    def key(self) -> Tuple[str, int]:
        return (self.language, self.question_id)

    def matches(self, source: str) -> bool:
        return bool(self.predicate(source))


class RuleRegistry:
    """Lookup table of heuristic rules keyed by (language, question_id)."""

    def __init__(self):
        self._rules: Dict[Tuple[str, int], HeuristicRule] = {}

    def register(self, rule: HeuristicRule) -> HeuristicRule:
        if rule.key in self._rules:
            raise ValueError(f"A rule is already registered for {rule.key}")
        self._rules[rule.key] = rule
        return rule

    def rule(self, language: str, question_id: int, name: Optional[str] = None,
             description: str = ""):
        """Decorator registering a predicate function as a rule."""
        def decorator(func: Callable[[str], bool]) -> Callable[[str], bool]:
            self.register(HeuristicRule(
                name=name or func.__name__,
                language=language,
                question_id=question_id,
                predicate=func,
                description=description or (func.__doc__ or "").strip(),
            ))
            return func
        return decorator

    def get(self, language: str, question_id: int) -> Optional[HeuristicRule]:
        return self._rules.get((language, question_id))

    def __contains__(self, key) -> bool:
        return key in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[HeuristicRule]:
        return iter(self._rules.values())


DEFAULT_REGISTRY = RuleRegistry()


# ===== JAVASCRIPT =====

@DEFAULT_REGISTRY.rule('javascript', 1)
def js_sum(code: str) -> bool:
    """sum(a, b) returns an addition expression."""
    declared = 'function sum' in code and 'return' in code and '+' in code
    adds_in_return = (
        'return a + b' in code
        or 'return (a + b)' in code
        or re.search(r'return\s*\(?.*\+.*\)?', code) is not None
    )
    return declared and adds_in_return


@DEFAULT_REGISTRY.rule('javascript', 2)
def js_is_palindrome(code: str) -> bool:
    """isPalindrome(str) reverses the string or walks it with a loop."""
    reverses = 'reverse()' in code or ('split' in code and 'join' in code)
    loops = ('for' in code or 'while' in code) and 'length' in code
    return 'function isPalindrome' in code and 'return' in code and (reverses or loops)


# ===== PYTHON =====

@DEFAULT_REGISTRY.rule('python', 3)
def py_is_prime(code: str) -> bool:
    """is_prime(n) trial-divides over a range or bounds by the square root."""
    trial_division = 'range' in code and 'for' in code and ('%' in code or 'mod' in code)
    square_root = 'sqrt' in code or '**0.5' in code
    return 'def is_prime' in code and 'return' in code and (trial_division or square_root)


@DEFAULT_REGISTRY.rule('python', 4)
def py_factorial(code: str) -> bool:
    """factorial(n) recurses or multiplies in a loop."""
    recursive = 'factorial(' in code and 'return' in code
    iterative = 'for' in code and ('*=' in code or 'result *' in code)
    return 'def factorial' in code and 'return' in code and (recursive or iterative)


# ===== JAVA =====

@DEFAULT_REGISTRY.rule('java', 5)
def java_find_max(code: str) -> bool:
    """findMax(int[]) loops and compares."""
    loop_and_compare = 'for' in code and ('>' in code or 'Math.max' in code)
    return 'findMax' in code and 'return' in code and loop_and_compare


@DEFAULT_REGISTRY.rule('java', 6)
def java_contains_only_digits(code: str) -> bool:
    """containsOnlyDigits(String) checks characters or uses a regex."""
    character_check = 'charAt' in code and (
        'isDigit' in code or ('0' in code and '9' in code)
    )
    regex_check = 'matches' in code or 'Pattern' in code
    return 'containsOnlyDigits' in code and 'return' in code and (character_check or regex_check)


# ===== C# =====

@DEFAULT_REGISTRY.rule('csharp', 7)
def csharp_reverse_string(code: str) -> bool:
    """ReverseString(string) swaps characters or rebuilds a reversed char array."""
    manual_swap = 'char' in code and 'for' in code and ('temp' in code or 'swap' in code)
    char_array = 'ToCharArray' in code and ('Array.Reverse' in code or 'new string' in code)
    return 'ReverseString' in code and 'return' in code and (manual_swap or char_array)


@DEFAULT_REGISTRY.rule('csharp', 8)
def csharp_find_even_numbers(code: str) -> bool:
    """FindEvenNumbers(List<int>) filters with a loop or LINQ."""
    loop = 'foreach' in code and '%' in code and 'Add' in code
    linq = 'Where' in code or 'Select' in code or '=>' in code
    return 'FindEvenNumbers' in code and 'return' in code and (loop or linq)


def grade_heuristically(source: str, question, registry: RuleRegistry = DEFAULT_REGISTRY) -> bool:
    """
    Decide whether a submission passes without running it.

    Args:
        source: Validated source text
        question: CodingQuestion being answered
        registry: Rules to consult

    Returns:
        The rule's verdict, or a minimum-length check for questions without a rule
    """
    rule = registry.get(question.language, question.id)
    if rule is None:
        return len(source) > MIN_EFFORT_LENGTH
    return rule.matches(source)
