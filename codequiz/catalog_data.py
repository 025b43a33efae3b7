"""
Built-in question catalog.

Ids are unique within a language; coding question ids select the heuristic
rules registered in rules.py.
"""

CATALOG_VERSION = "1.0"

MCQ_QUESTIONS = [
    # JavaScript
    {
        "id": 1,
        "language": "javascript",
        "text": "What is the output of console.log(typeof null) in JavaScript?",
        "options": [
            {"id": "a", "text": "null"},
            {"id": "b", "text": "object"},
            {"id": "c", "text": "undefined"},
            {"id": "d", "text": "string"},
        ],
        "correct_option_id": "b",
    },
    {
        "id": 2,
        "language": "javascript",
        "text": "Which of the following is not a JavaScript data type?",
        "options": [
            {"id": "a", "text": "String"},
            {"id": "b", "text": "Boolean"},
            {"id": "c", "text": "Float"},
            {"id": "d", "text": "Symbol"},
        ],
        "correct_option_id": "c",
    },
    {
        "id": 3,
        "language": "javascript",
        "text": "What is the correct way to declare a JavaScript variable?",
        "options": [
            {"id": "a", "text": "variable x;"},
            {"id": "b", "text": "var x;"},
            {"id": "c", "text": "v x;"},
            {"id": "d", "text": "x = var;"},
        ],
        "correct_option_id": "b",
    },
    # Python
    {
        "id": 4,
        "language": "python",
        "text": "What is the output of print(type(None)) in Python?",
        "options": [
            {"id": "a", "text": "NoneType"},
            {"id": "b", "text": "null"},
            {"id": "c", "text": "undefined"},
            {"id": "d", "text": "void"},
        ],
        "correct_option_id": "a",
    },
    {
        "id": 5,
        "language": "python",
        "text": "Which of these is not a valid Python data type?",
        "options": [
            {"id": "a", "text": "list"},
            {"id": "b", "text": "dictionary"},
            {"id": "c", "text": "array"},
            {"id": "d", "text": "tuple"},
        ],
        "correct_option_id": "c",
    },
    {
        "id": 6,
        "language": "python",
        "text": "How do you declare a variable in Python?",
        "options": [
            {"id": "a", "text": "var x = 5"},
            {"id": "b", "text": "dim x as integer = 5"},
            {"id": "c", "text": "x = 5"},
            {"id": "d", "text": "let x = 5"},
        ],
        "correct_option_id": "c",
    },
    # Java
    {
        "id": 7,
        "language": "java",
        "text": "Which of these is not a Java primitive data type?",
        "options": [
            {"id": "a", "text": "int"},
            {"id": "b", "text": "String"},
            {"id": "c", "text": "boolean"},
            {"id": "d", "text": "char"},
        ],
        "correct_option_id": "b",
    },
    {
        "id": 8,
        "language": "java",
        "text": "What is the correct way to declare a constant in Java?",
        "options": [
            {"id": "a", "text": "var PI = 3.14159;"},
            {"id": "b", "text": "const PI = 3.14159;"},
            {"id": "c", "text": "final double PI = 3.14159;"},
            {"id": "d", "text": "#define PI 3.14159"},
        ],
        "correct_option_id": "c",
    },
    {
        "id": 9,
        "language": "java",
        "text": "In Java, which keyword is used to inherit a class?",
        "options": [
            {"id": "a", "text": "implements"},
            {"id": "b", "text": "extends"},
            {"id": "c", "text": "inherits"},
            {"id": "d", "text": "using"},
        ],
        "correct_option_id": "b",
    },
    # C#
    {
        "id": 10,
        "language": "csharp",
        "text": "What is the correct way to declare a read-only field in C#?",
        "options": [
            {"id": "a", "text": "static int x = 5;"},
            {"id": "b", "text": "readonly int x = 5;"},
            {"id": "c", "text": "final int x = 5;"},
            {"id": "d", "text": "const int x = 5;"},
        ],
        "correct_option_id": "b",
    },
    {
        "id": 11,
        "language": "csharp",
        "text": "Which of the following is NOT a valid C# access modifier?",
        "options": [
            {"id": "a", "text": "public"},
            {"id": "b", "text": "private"},
            {"id": "c", "text": "protected"},
            {"id": "d", "text": "friend"},
        ],
        "correct_option_id": "d",
    },
    {
        "id": 12,
        "language": "csharp",
        "text": "What does the 'var' keyword do in C#?",
        "options": [
            {"id": "a", "text": "Creates a late-bound variable"},
            {"id": "b", "text": "Creates a variant type that can hold any value"},
            {"id": "c", "text": "Lets the compiler infer the type of the variable"},
            {"id": "d", "text": "Declares a dynamic variable"},
        ],
        "correct_option_id": "c",
    },
]

CODING_QUESTIONS = [
    # JavaScript
    {
        "id": 1,
        "language": "javascript",
        "text": "Write a function that returns the sum of two numbers.",
        "starter_code": "function sum(a, b) {\n  // Your code here\n}",
        "test_cases_spec": "sum(1, 2) === 3\nsum(-1, 1) === 0",
        "sample_solution": "function sum(a, b) {\n  return a + b;\n}",
    },
    {
        "id": 2,
        "language": "javascript",
        "text": "Write a function that checks if a string is a palindrome.",
        "starter_code": "function isPalindrome(str) {\n  // Your code here\n}",
        "test_cases_spec": "isPalindrome('racecar') === true\nisPalindrome('hello') === false",
        "sample_solution": (
            "function isPalindrome(str) {\n"
            "  const reversed = str.split('').reverse().join('');\n"
            "  return str === reversed;\n"
            "}"
        ),
    },
    # Python
    {
        "id": 3,
        "language": "python",
        "text": "Write a function to check if a number is prime.",
        "starter_code": "def is_prime(n):\n    # Your code here\n    pass",
        "test_cases_spec": "is_prime(7) == True\nis_prime(4) == False",
        "sample_solution": (
            "def is_prime(n):\n"
            "    if n <= 1:\n"
            "        return False\n"
            "    for i in range(2, int(n**0.5) + 1):\n"
            "        if n % i == 0:\n"
            "            return False\n"
            "    return True"
        ),
    },
    {
        "id": 4,
        "language": "python",
        "text": "Write a function that returns the factorial of a number.",
        "starter_code": "def factorial(n):\n    # Your code here\n    pass",
        "test_cases_spec": "factorial(5) == 120\nfactorial(0) == 1",
        "sample_solution": (
            "def factorial(n):\n"
            "    if n == 0:\n"
            "        return 1\n"
            "    return n * factorial(n-1)"
        ),
    },
    # Java
    {
        "id": 5,
        "language": "java",
        "text": "Create a method to find the largest element in an array.",
        "starter_code": (
            "public class Solution {\n"
            "    public static int findMax(int[] array) {\n"
            "        // Your code here\n"
            "        return 0; // Replace with your solution\n"
            "    }\n"
            "}"
        ),
        "test_cases_spec": (
            "findMax(new int[]{1, 3, 5, 7, 2}) returns 7\n"
            "findMax(new int[]{-1, -5, -2}) returns -1"
        ),
        "sample_solution": (
            "public class Solution {\n"
            "    public static int findMax(int[] array) {\n"
            "        int max = array[0];\n"
            "        for (int i = 1; i < array.length; i++) {\n"
            "            if (array[i] > max) {\n"
            "                max = array[i];\n"
            "            }\n"
            "        }\n"
            "        return max;\n"
            "    }\n"
            "}"
        ),
        "hints": [
            "Initialize max with the first element of the array",
            "Loop through the array starting from index 1",
            "Compare each element with max and update if necessary",
            "Remember to check for edge cases like empty arrays",
        ],
    },
    {
        "id": 6,
        "language": "java",
        "text": "Write a method to check if a string contains only digits.",
        "starter_code": (
            "public class Solution {\n"
            "    public static boolean containsOnlyDigits(String str) {\n"
            "        // Your code here\n"
            "        return false; // Replace with your solution\n"
            "    }\n"
            "}"
        ),
        "test_cases_spec": (
            'containsOnlyDigits("12345") returns true\n'
            'containsOnlyDigits("123a") returns false'
        ),
        "sample_solution": (
            "public class Solution {\n"
            "    public static boolean containsOnlyDigits(String str) {\n"
            "        for (int i = 0; i < str.length(); i++) {\n"
            "            if (!Character.isDigit(str.charAt(i))) {\n"
            "                return false;\n"
            "            }\n"
            "        }\n"
            "        return true;\n"
            "    }\n"
            "}"
        ),
        "hints": [
            "Use a for loop to iterate through each character",
            "Java has the Character.isDigit() method to check if a char is a digit",
            "Return false as soon as you find a non-digit character",
            "If you get through the entire string, return true",
        ],
    },
    # C#
    {
        "id": 7,
        "language": "csharp",
        "text": "Write a method to reverse a string without using the built-in Reverse method.",
        "starter_code": (
            "public class Solution {\n"
            "    public static string ReverseString(string input) {\n"
            "        // Your code here\n"
            "        return \"\"; // Replace with your solution\n"
            "    }\n"
            "}"
        ),
        "test_cases_spec": (
            'ReverseString("hello") returns "olleh"\n'
            'ReverseString("C#") returns "#C"'
        ),
        "sample_solution": (
            "public class Solution {\n"
            "    public static string ReverseString(string input) {\n"
            "        char[] charArray = input.ToCharArray();\n"
            "        int left = 0;\n"
            "        int right = charArray.Length - 1;\n"
            "        while (left < right) {\n"
            "            char temp = charArray[left];\n"
            "            charArray[left] = charArray[right];\n"
            "            charArray[right] = temp;\n"
            "            left++;\n"
            "            right--;\n"
            "        }\n"
            "        return new string(charArray);\n"
            "    }\n"
            "}"
        ),
        "hints": [
            "Convert the string to a character array using ToCharArray()",
            "Use a two-pointer approach (one at the start, one at the end)",
            "Swap characters as the pointers move toward each other",
            "Create a new string from the final char array",
        ],
    },
    {
        "id": 8,
        "language": "csharp",
        "text": "Write a method to find all even numbers in a list.",
        "starter_code": (
            "public class Solution {\n"
            "    public static List<int> FindEvenNumbers(List<int> numbers) {\n"
            "        // Your code here\n"
            "        return new List<int>(); // Replace with your solution\n"
            "    }\n"
            "}"
        ),
        "test_cases_spec": (
            "FindEvenNumbers(new List<int>{1, 2, 3, 4, 5}) returns [2, 4]\n"
            "FindEvenNumbers(new List<int>{7, 9, 11}) returns []"
        ),
        "sample_solution": (
            "public class Solution {\n"
            "    public static List<int> FindEvenNumbers(List<int> numbers) {\n"
            "        List<int> result = new List<int>();\n"
            "        foreach (int num in numbers) {\n"
            "            if (num % 2 == 0) {\n"
            "                result.Add(num);\n"
            "            }\n"
            "        }\n"
            "        return result;\n"
            "    }\n"
            "}"
        ),
        "hints": [
            "Create a new List<int> to store your results",
            "Iterate through the input list using a foreach loop",
            "Check if each number is even using the modulo operator (% 2 == 0)",
            "Add even numbers to your result list",
        ],
    },
]

LANGUAGE_HINTS = {
    "javascript": [
        "Make sure your function is defined correctly",
        "Check for edge cases in your logic",
        "Use console.log to debug your code",
    ],
    "python": [
        "Ensure your function is defined with 'def'",
        "Check for indentation errors",
        "Use print statements to debug your code",
    ],
}

GENERIC_HINTS = [
    "Break down the problem into smaller steps",
    "Think about the input and expected output",
    "Consider edge cases",
]
