"""String checks: bracket balance, palindromes and reversal."""

from __future__ import annotations

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_balanced(expression: str) -> bool:
    """True when every (), [] and {} in ``expression`` is properly nested."""
    stack: list[str] = []
    for char in expression:
        if char in _OPENERS:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack


def is_palindrome(text: str) -> bool:
    """Case-insensitive check that ``text`` reads the same both ways."""
    half = len(text) // 2
    return all(
        a.upper() == b.upper() for a, b in zip(text[:half], reversed(text))
    )


def count_palindromic_substrings(text: str) -> int:
    """Number of (start, end) positions whose substring is a palindrome."""
    n = len(text)
    palindrome = [[False] * n for _ in range(n)]
    count = 0
    for gap in range(n):
        for i in range(n - gap):
            j = i + gap
            if gap == 0:
                palindrome[i][j] = True
            elif gap == 1:
                palindrome[i][j] = text[i] == text[j]
            else:
                palindrome[i][j] = text[i] == text[j] and palindrome[i + 1][j - 1]
            if palindrome[i][j]:
                count += 1
    return count


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]