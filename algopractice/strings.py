"""String algorithms: duplicates, edit distance, anagrams and more."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def duplicate_counts(text: str) -> dict[str, int]:
    """Return the characters occurring more than once, with counts, sorted by character."""
    counts = Counter(text)
    return {char: counts[char] for char in sorted(counts) if counts[char] > 1}


def edit_distance(first: str, second: str) -> int:
    """Return the Levenshtein distance between two strings."""
    if not first or not second:
        return len(first) + len(second)
    previous = list(range(len(second) + 1))
    for i, a in enumerate(first, start=1):
        current = [i]
        for j, b in enumerate(second, start=1):
            substitute = previous[j - 1] + (a != b)
            current.append(min(substitute, previous[j] + 1, current[j - 1] + 1))
        previous = current
    return previous[-1]


def group_anagrams(words: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in words:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def is_isomorphic(first: str, second: str) -> bool:
    """Tell whether one string maps onto the other character by character, one to one."""
    if len(first) != len(second):
        return False
    mapping: dict[str, str] = {}
    used: set[str] = set()
    for a, b in zip(first, second):
        if a in mapping:
            if mapping[a] != b:
                return False
        elif b in used:
            return False
        else:
            mapping[a] = b
            used.add(b)
    return True


def longest_common_prefix(words: Iterable[str]) -> str:
    """Return the longest prefix shared by every word of a non-empty collection."""
    ordered = sorted(words)
    if not ordered:
        raise ValueError("longest_common_prefix() of an empty collection")
    first, last = ordered[0], ordered[-1]
    prefix: list[str] = []
    for a, b in zip(first, last):
        if a != b:
            break
        prefix.append(a)
    return "".join(prefix)


def is_palindrome(text: str) -> bool:
    """Tell whether text reads the same backwards."""
    return text == text[::-1]