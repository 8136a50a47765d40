"""Classic problems on strings."""

from __future__ import annotations

from collections import Counter
from itertools import product
from typing import Iterable

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def _capitalize_word(word: str) -> str:
    if len(word) <= 2:
        return word.lower()
    return word[0].upper() + word[1:].lower()


def capitalize_title(title: str) -> str:
    """Capitalize each space-separated word; words of one or two letters go lower case."""
    return " ".join(_capitalize_word(word) for word in title.split(" "))


def find_anagrams(s: str, p: str) -> list[int]:
    """Start indices of every substring of ``s`` that is an anagram of ``p``."""
    if not p:
        raise ValueError("pattern must not be empty")
    width = len(p)
    wanted = Counter(p)
    window = Counter(s[: width - 1])
    starts: list[int] = []
    for start in range(len(s) - width + 1):
        window[s[start + width - 1]] += 1
        if window == wanted:
            starts.append(start)
        leaving = s[start]
        window[leaving] -= 1
        if not window[leaving]:
            del window[leaving]
    return starts


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def letter_combinations(digits: str) -> list[str]:
    """Every letter string a phone keypad can spell from ``digits`` (2 to 9)."""
    if not digits:
        return []
    try:
        letters = [_KEYPAD[digit] for digit in digits]
    except KeyError as exc:
        raise ValueError(f"not a keypad letter digit: {exc.args[0]!r}") from None
    return ["".join(combo) for combo in product(*letters)]