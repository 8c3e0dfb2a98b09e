"""String problems: duplicates, searching, prefixes, palindromes and brackets."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

_OPENER = {")": "(", "}": "{", "]": "["}


def find_duplicate_chars(text: str) -> str:
    """Return the characters occurring more than once, sorted and space-separated."""
    counts = Counter(text)
    return " ".join(sorted(char for char, count in counts.items() if count > 1))


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of a non-empty ``needle``, or -1."""
    if not needle:
        return -1
    return haystack.find(needle)


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string."""
    if not strs:
        raise ValueError("no strings given")
    prefix = strs[0]
    for text in strs[1:]:
        shared = 0
        for ours, theirs in zip(prefix, text):
            if ours != theirs:
                break
            shared += 1
        prefix = prefix[:shared]
        if not prefix:
            break
    return prefix


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def valid_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways after deleting at most one character."""
    i, j = 0, len(s) - 1
    while i < j:
        if s[i] != s[j]:
            return _is_palindrome(s[i + 1:j + 1]) or _is_palindrome(s[i:j])
        i += 1
        j -= 1
    return True


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` closes in the right order; other characters fail."""
    stack: list[str] = []
    for char in s:
        if stack and _OPENER.get(char) == stack[-1]:
            stack.pop()
        else:
            stack.append(char)
    return not stack