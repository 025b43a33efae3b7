"""
Parser for the free-text test-case blocks attached to coding questions.

One case per line, written as ``call === expected``, ``call == expected`` or
``call returns expected``. Lines in any other shape are skipped.
"""

import re
from typing import List

from .models import TestCase

_LOOSE_EQUALITY = re.compile(r'(.+)\s*==\s*(.+)')
_RETURNS = re.compile(r'(.+?)\s+returns\s+(.+)')


def parse_test_cases(text: str) -> List[TestCase]:
    """
    Convert a test-case block into ordered (input, expected) pairs.

    Args:
        text: Raw multi-line test-case specification

    Returns:
        List of TestCase objects in line order
    """
    test_cases = []
    for line in (text or "").strip().split('\n'):
        if '===' in line:
            parts = [part.strip() for part in line.split('===')]
            test_cases.append(TestCase(input=parts[0], expected=parts[1]))
            continue

        match = _LOOSE_EQUALITY.search(line)
        if match is None:
            match = _RETURNS.search(line)
        if match is not None:
            test_cases.append(TestCase(
                input=match.group(1).strip(),
                expected=match.group(2).strip()
            ))

    return test_cases
