"""Stack-based problems: editing, expression evaluation, next greater values and celebrities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_OPERATORS = frozenset("+-*/")


def _typed(text: str) -> list[str]:
    """Return what remains of ``text`` after applying '#' as a backspace."""
    kept: list[str] = []
    for char in text:
        if char != "#":
            kept.append(char)
        elif kept:
            kept.pop()
    return kept


def backspace_compare(s: str, t: str) -> bool:
    """Tell whether two strings are equal once '#' is applied as a backspace."""
    return _typed(s) == _typed(t)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _apply(a: int, b: int, operator: str) -> int:
    if operator == "+":
        return a + b
    if operator == "-":
        return a - b
    if operator == "*":
        return a * b
    return _truncating_div(a, b)


def _evaluate(tokens: Iterable[str | int]) -> int:
    """Evaluate postfix tokens, each an operator string or an integer operand."""
    stack: list[int] = []
    for token in tokens:
        if isinstance(token, int):
            stack.append(token)
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(_apply(left, right, token))
    if not stack:
        raise ValueError("expression holds no operands")
    return stack[-1]


def eval_rpn(tokens: Sequence[str]) -> int:
    """Evaluate a reverse Polish expression; division truncates towards zero."""
    return _evaluate(token if token in _OPERATORS else int(token) for token in tokens)


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands; other characters are skipped."""
    return _evaluate(
        int(char) if char.isdigit() else char
        for char in expression
        if char in _OPERATORS or char in "0123456789"
    )


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, return the next greater value after it in ``nums2``, or -1."""
    following: dict[int, int] = {}
    stack: list[int] = []
    for value in reversed(nums2):
        while stack and stack[-1] <= value:
            stack.pop()
        following[value] = stack[-1] if stack else -1
        stack.append(value)
    missing = [value for value in nums1 if value not in following]
    if missing:
        raise ValueError(f"values not found in the second sequence: {missing}")
    return [following[value] for value in nums1]


def celebrity(mat: Sequence[Sequence[int]]) -> int:
    """Return the person everyone knows and who knows nobody, or -1.

    ``mat[i][j]`` is 1 when person ``i`` knows person ``j``.
    """
    n = len(mat)
    if n == 0:
        return -1
    top, last = 0, n - 1
    while top < last:
        if mat[top][last]:
            top += 1
        elif mat[last][top]:
            last -= 1
        else:
            top += 1
            last -= 1
    if last < 0 or any(value == 1 for value in mat[last]):
        return -1
    if any(mat[other][last] == 0 for other in range(n) if other != last):
        return -1
    return last