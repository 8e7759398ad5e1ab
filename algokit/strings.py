"""String algorithms: BKDR hashing, KMP matching and Manacher's palindromes."""

from __future__ import annotations

from typing import Iterable

_MASK = (1 << 64) - 1
_SIGN = 1 << 63


def bkdr_hash(text: str, base: int = 19) -> int:
    """Return the BKDR hash of ``text`` as a signed 64-bit integer."""
    value = 0
    for ch in text:
        value = (value * base + ord(ch)) & _MASK
    return value - (1 << 64) if value & _SIGN else value


def count_hash_matches(target: str, words: Iterable[str]) -> int:
    """Count the words whose BKDR hash equals that of ``target``."""
    wanted = bkdr_hash(target)
    return sum(1 for word in words if bkdr_hash(word) == wanted)


def prefix_function(pattern: str) -> list[int]:
    """Return, for each prefix, the length of its longest proper border."""
    pi = [0] * len(pattern)
    k = 0
    for i, ch in enumerate(pattern[1:], start=1):
        while k and ch != pattern[k]:
            k = pi[k - 1]
        if ch == pattern[k]:
            k += 1
        pi[i] = k
    return pi


def kmp_count(text: str, pattern: str) -> int:
    """Count the (possibly overlapping) occurrences of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    pi = prefix_function(pattern)
    count = 0
    j = 0
    for ch in text:
        while j and ch != pattern[j]:
            j = pi[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == len(pattern):
            count += 1
            j = pi[j - 1]
    return count


def longest_palindrome_length(text: str) -> int:
    """Return the length of the longest palindromic substring of ``text``."""
    if not text:
        return 0
    spread: list[str | None] = [None]
    for ch in text:
        spread.extend((ch, None))

    size = len(spread)
    radius = [0] * size
    center = right = 0
    for i in range(size):
        r = min(radius[2 * center - i], right - i) if i < right else 1
        while i - r >= 0 and i + r < size and spread[i - r] == spread[i + r]:
            r += 1
        radius[i] = r
        if i + r > right:
            center, right = i, i + r
    return max(radius) - 1