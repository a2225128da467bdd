"""String rotation, letter sorting and prefix-function pattern search."""

from __future__ import annotations

from collections import Counter
from string import ascii_lowercase, ascii_uppercase


def rotate_clockwise(text: str) -> str:
    """Move the last character to the front."""
    return text[-1:] + text[:-1]


def rotate_anticlockwise(text: str) -> str:
    """Move the first character to the end."""
    return text[1:] + text[:1]


def is_rotated_by_two(first: str, second: str) -> bool:
    """Whether second is first rotated two places in either direction."""
    clockwise = rotate_clockwise(rotate_clockwise(first))
    anticlockwise = rotate_anticlockwise(rotate_anticlockwise(first))
    return second in (clockwise, anticlockwise)


def _sorted_letters(counts: Counter[str], alphabet: str) -> str:
    return "".join(letter * counts[letter] for letter in alphabet)


def counting_sort(text: str) -> str:
    """Sort a string of lowercase ASCII letters by counting them."""
    counts = Counter(text)
    stray = set(counts) - set(ascii_lowercase)
    if stray:
        raise ValueError(f"not lowercase letters: {''.join(sorted(stray))!r}")
    return _sorted_letters(counts, ascii_lowercase)


def case_sort(text: str) -> str:
    """Sort letters within each case, keeping each position's case."""
    counts = Counter(text)
    stray = set(counts) - set(ascii_lowercase) - set(ascii_uppercase)
    if stray:
        raise ValueError(f"not ASCII letters: {''.join(sorted(stray))!r}")
    lower = iter(_sorted_letters(counts, ascii_lowercase))
    upper = iter(_sorted_letters(counts, ascii_uppercase))
    return "".join(next(lower) if ch.islower() else next(upper) for ch in text)


def prefix_function(text: str) -> list[int]:
    """For each position, the length of the longest proper prefix that ends there."""
    lps = [0] * len(text)
    prefix, suffix = 0, 1
    while suffix < len(text):
        if text[prefix] == text[suffix]:
            prefix += 1
            lps[suffix] = prefix
            suffix += 1
        elif prefix == 0:
            suffix += 1
        else:
            prefix = lps[prefix - 1]
    return lps


def longest_prefix_suffix(text: str) -> int:
    """Length of the longest proper prefix of text that is also its suffix."""
    lps = prefix_function(text)
    return lps[-1] if lps else 0


def find_pattern(pattern: str, text: str) -> list[int]:
    """Start indices of every, possibly overlapping, occurrence of pattern in text."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    matches: list[int] = []
    i = j = 0
    while i < len(text):
        if text[i] == pattern[j]:
            i += 1
            j += 1
            if j == len(pattern):
                matches.append(i - j)
                j = lps[j - 1]
        elif j == 0:
            i += 1
        else:
            j = lps[j - 1]
    return matches