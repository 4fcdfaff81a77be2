"""Expression evaluation and conversion, bracket matching and string helpers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

__all__ = [
    "evaluate_postfix",
    "infix_to_postfix",
    "is_balanced",
    "is_palindrome",
    "reverse_string",
    "remove_k_duplicates",
    "count_keys",
]

_PRIORITY = {"+": 1, "-": 1, "*": 2, "/": 2}
_PAIRS = {")": "(", "]": "[", "}": "{"}


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands and ``+ - * /``.

    Division truncates toward zero. Whitespace is ignored.
    """
    stack: list[int] = []
    for char in expression:
        if char.isspace():
            continue
        if char.isdigit():
            stack.append(int(char))
            continue
        if char not in _PRIORITY:
            raise ValueError(f"unexpected character {char!r}")
        if len(stack) < 2:
            raise ValueError(f"operator {char!r} lacks operands")
        right = stack.pop()
        left = stack.pop()
        if char == "+":
            stack.append(left + right)
        elif char == "-":
            stack.append(left - right)
        elif char == "*":
            stack.append(left * right)
        else:
            if right == 0:
                raise ZeroDivisionError("division by zero")
            stack.append(_truncating_divide(left, right))
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack[0]


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Tokens of the result are separated by single spaces.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char.isspace():
            continue
        if char.isalnum():
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')'")
            stack.pop()
        elif char in _PRIORITY:
            while stack and stack[-1] != "(" and _PRIORITY[stack[-1]] >= _PRIORITY[char]:
                output.append(stack.pop())
            stack.append(char)
        else:
            raise ValueError(f"unexpected character {char!r}")
    while stack:
        operator = stack.pop()
        if operator == "(":
            raise ValueError("unmatched '('")
        output.append(operator)
    return " ".join(output)


def is_balanced(text: str) -> bool:
    """True if every ``()``, ``[]`` and ``{}`` in ``text`` is properly nested."""
    stack: list[str] = []
    for char in text:
        if char in "([{":
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack


def is_palindrome(text: str) -> bool:
    """True if ``text`` reads the same backwards, ignoring letter case."""
    folded = text.upper()
    return folded == folded[::-1]


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def remove_k_duplicates(text: str, k: int) -> str:
    """Repeatedly remove runs of ``k`` equal adjacent characters."""
    if k < 1:
        raise ValueError("k must be positive")
    runs: list[list] = []
    for char in text:
        if runs and runs[-1][0] == char:
            runs[-1][1] += 1
        else:
            runs.append([char, 1])
        if runs[-1][1] == k:
            runs.pop()
    return "".join(char * count for char, count in runs)


def count_keys(names: Iterable[str]) -> dict[str, int]:
    """Count occurrences of each (case-sensitive) name, in first-seen order."""
    return dict(Counter(names))