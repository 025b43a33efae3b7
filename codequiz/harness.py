"""
Test harness generation for remote execution.

Appends assertion code to a submission so that the remote judge prints one
``Test case N: Passed|Failed`` line per case and exits non-zero on the first
failure. Each builder takes the student's source and the parsed test cases
and returns the full program to submit.
"""

import re
from typing import Callable, Dict, List

from .models import TestCase

ALL_PASSED_LINE = "All tests passed successfully!"


def _python_harness(source: str, test_cases: List[TestCase]) -> str:
    blocks = []
    for idx, case in enumerate(test_cases, start=1):
        blocks.append(f"""
# Test case {idx}
try:
    test_result = {case.input}
    expected = {case.expected}
    assert str(test_result) == str(expected), "Test case {idx} failed"
    print("Test case {idx}: Passed")
except Exception:
    print("Test case {idx}: Failed")
    exit(1)
""")
    tests = "\n".join(blocks)
    return f'{source}\n\n# Running tests\n{tests}\nprint("{ALL_PASSED_LINE}")'


def _javascript_harness(source: str, test_cases: List[TestCase]) -> str:
    blocks = []
    for idx, case in enumerate(test_cases, start=1):
        blocks.append(f"""
// Test case {idx}
try {{
  const testResult = {case.input};
  const expected = {case.expected};
  if (JSON.stringify(testResult) !== JSON.stringify(expected)) {{
    console.error("Test case {idx}: Failed");
    process.exit(1);
  }}
  console.log("Test case {idx}: Passed");
}} catch (e) {{
  console.error("Test case {idx}: Failed");
  process.exit(1);
}}""")
    tests = "\n".join(blocks)
    return f'{source}\n\n// Running tests\n{tests}\nconsole.log("{ALL_PASSED_LINE}");'


def _expected_text(expected: str) -> str:
    """Expected value as the text the rendered result must equal."""
    text = expected.strip()
    if len(text) >= 2 and text[0] == text[-1] == '"':
        text = text[1:-1]
    return text


def _string_literal(text: str) -> str:
    return '"' + text.replace('\\', '\\\\').replace('"', '\\"') + '"'


def _qualify(call: str, class_name: str) -> str:
    """Prefix a bare method call with the solution class name."""
    if re.match(r'^[A-Za-z_]\w*\s*\(', call):
        return f"{class_name}.{call}"
    return call


_JAVA_PUBLIC_CLASS = re.compile(r'\bpublic\s+((?:final\s+|abstract\s+)*class\b)')


def _java_harness(source: str, test_cases: List[TestCase]) -> str:
    # Judge0 compiles Main.java, so only the harness class may be public.
    student = _JAVA_PUBLIC_CLASS.sub(r'\1', source)
    blocks = []
    for idx, case in enumerate(test_cases, start=1):
        blocks.append(f"""
        try {{
            Object actual = {_qualify(case.input, 'Solution')};
            if (!render(actual).equals({_string_literal(_expected_text(case.expected))})) {{
                System.out.println("Test case {idx}: Failed");
                System.exit(1);
            }}
            System.out.println("Test case {idx}: Passed");
        }} catch (Exception e) {{
            System.out.println("Test case {idx}: Failed");
            System.exit(1);
        }}""")
    tests = "\n".join(blocks)
    return f"""{student}

public class Main {{
    static String render(Object value) {{
        if (value instanceof int[]) return java.util.Arrays.toString((int[]) value);
        if (value instanceof long[]) return java.util.Arrays.toString((long[]) value);
        if (value instanceof double[]) return java.util.Arrays.toString((double[]) value);
        if (value instanceof char[]) return new String((char[]) value);
        if (value instanceof Object[]) return java.util.Arrays.toString((Object[]) value);
        return String.valueOf(value);
    }}

    public static void main(String[] args) {{
{tests}
        System.out.println("{ALL_PASSED_LINE}");
    }}
}}
"""


_CSHARP_USINGS = (
    "using System;\n"
    "using System.Collections;\n"
    "using System.Collections.Generic;\n"
    "using System.Linq;\n"
)


def _csharp_harness(source: str, test_cases: List[TestCase]) -> str:
    blocks = []
    for idx, case in enumerate(test_cases, start=1):
        blocks.append(f"""
        try {{
            object actual = {_qualify(case.input, 'Solution')};
            if (Render(actual) != {_string_literal(_expected_text(case.expected))}) {{
                Console.WriteLine("Test case {idx}: Failed");
                Environment.Exit(1);
            }}
            Console.WriteLine("Test case {idx}: Passed");
        }} catch (Exception) {{
            Console.WriteLine("Test case {idx}: Failed");
            Environment.Exit(1);
        }}""")
    tests = "\n".join(blocks)
    return f"""{_CSHARP_USINGS}
{source}

public class HarnessProgram {{
    static string Render(object value) {{
        if (value == null) return "null";
        if (value is bool) return ((bool) value) ? "true" : "false";
        if (value is string) return (string) value;
        if (value is IEnumerable) {{
            var items = new List<string>();
            foreach (var item in (IEnumerable) value) items.Add(Render(item));
            return "[" + string.Join(", ", items) + "]";
        }}
        return value.ToString();
    }}

    public static void Main() {{
{tests}
        Console.WriteLine("{ALL_PASSED_LINE}");
    }}
}}
"""


HARNESS_BUILDERS: Dict[str, Callable[[str, List[TestCase]], str]] = {
    "python": _python_harness,
    "javascript": _javascript_harness,
    "java": _java_harness,
    "csharp": _csharp_harness,
}


def build_harness(source: str, language: str, test_cases: List[TestCase]) -> str:
    """
    Build the program submitted to the remote judge.

    Languages without a builder, and questions without test cases, are
    submitted unmodified.
    """
    builder = HARNESS_BUILDERS.get(language)
    if builder is None or not test_cases:
        return source
    return builder(source, test_cases)
