"""
Textual pre-checks that reject submissions before any grading work is done.

The checks are plain substring tests per language; they never parse or run
the code.
"""

from .models import ValidationResult

MISSING_FUNCTION = "Your code must include a function definition."
MISSING_RETURN = "Your function must return a value."
MISSING_PUBLIC_CLASS = "Your code must include a public class definition."
MISSING_RETURN_OR_VOID = "Your method must return a value or be declared void."


def _check_function_language(code: str, function_token: str) -> list:
    errors = []
    if function_token not in code:
        errors.append(MISSING_FUNCTION)
    if 'return' not in code:
        errors.append(MISSING_RETURN)
    return errors


def _check_class_language(code: str) -> list:
    errors = []
    if 'public' not in code or 'class' not in code:
        errors.append(MISSING_PUBLIC_CLASS)
    if 'return' not in code and 'void' not in code:
        errors.append(MISSING_RETURN_OR_VOID)
    return errors


def validate_code(source_text: str, language: str) -> ValidationResult:
    """
    Validate submitted code for the given language.

    Args:
        source_text: The student's code
        language: Language key of the question

    Returns:
        ValidationResult whose errors list is empty when the code is acceptable.
        Languages without rules are always accepted.
    """
    if language == 'javascript':
        errors = _check_function_language(source_text, 'function')
    elif language == 'python':
        errors = _check_function_language(source_text, 'def')
    elif language in ('java', 'csharp'):
        errors = _check_class_language(source_text)
    else:
        errors = []

    return ValidationResult(is_valid=not errors, errors=errors)
