"""
Unicode character classification utilities.

This module provides the per-code-point predicates used by the census engine.
Every predicate works on a single Python ``str`` character, which is always
one Unicode code point, so supplementary-plane ideographs are never split.
"""

import re
from typing import FrozenSet, Tuple

# CJK ideograph blocks, inclusive (lo, hi) code point ranges
IDEOGRAPH_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0x3400, 0x4DBF),  # Extension A
    (0x20000, 0x2A6DF),  # Extension B
    (0x2A700, 0x2B73F),  # Extension C
    (0x2B740, 0x2B81F),  # Extension D
    (0x2B820, 0x2CEAF),  # Extension E
    (0xF900, 0xFAFF),  # Compatibility Ideographs
    (0x2F800, 0x2FA1F),  # Compatibility Ideographs Supplement
)

# Closed punctuation alphabets (not Unicode category tests)
CHINESE_PUNCTUATION: FrozenSet[str] = frozenset(
    "，。！？、；：“”‘’（）【】《》…—～·"  # quotes are U+201C/D, U+2018/9
)
ENGLISH_PUNCTUATION: FrozenSet[str] = frozenset(",.!?;:'\"()[]{}<>/\\@#$%^&*-_+=|`~")

LINE_BREAK = "\n"

# Unicode-aware ``\s``; shared by counting and stripping
WHITESPACE_PATTERN = re.compile(r"\s")
LATIN_WORD_PATTERN = re.compile(r"[A-Za-z]+")


def is_ideograph(char: str) -> bool:
    """Check if a character lies in one of the CJK ideograph ranges."""
    code_point = ord(char)
    for lo, hi in IDEOGRAPH_RANGES:
        if lo <= code_point <= hi:
            return True
    return False


def is_latin_letter(char: str) -> bool:
    """Check if a character is an ASCII letter (A-Z, a-z)."""
    return ("A" <= char <= "Z") or ("a" <= char <= "z")


def is_digit(char: str) -> bool:
    """Check if a character is an ASCII digit (0-9)."""
    return "0" <= char <= "9"


def is_chinese_punctuation(char: str) -> bool:
    return char in CHINESE_PUNCTUATION


def is_english_punctuation(char: str) -> bool:
    return char in ENGLISH_PUNCTUATION


def is_whitespace(char: str) -> bool:
    """Check if a character matches the regex whitespace class."""
    return WHITESPACE_PATTERN.match(char) is not None


def is_line_break(char: str) -> bool:
    """Only U+000A counts; CR and U+2028 are whitespace but not line breaks."""
    return char == LINE_BREAK


def count_latin_words(text: str) -> int:
    """Count maximal runs of ASCII letters."""
    return sum(1 for _ in LATIN_WORD_PATTERN.finditer(text))


def strip_whitespace(text: str) -> str:
    """Remove every whitespace character from text."""
    return WHITESPACE_PATTERN.sub("", text)
