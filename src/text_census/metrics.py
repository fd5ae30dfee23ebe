"""
Category census for mixed Chinese/English text.

Goals of this module:
- Count every category of a text blob in one pure, idempotent call.
- Keep categories as independent predicates: they may overlap and they do
  not partition the total (symbols, emoji, full-width digits and other
  punctuation are only part of the totals).
- Offer per-page counts and percentage views for presentation.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .unicode_utils import (
    count_latin_words,
    is_chinese_punctuation,
    is_digit,
    is_english_punctuation,
    is_ideograph,
    is_latin_letter,
    is_line_break,
    is_whitespace,
    strip_whitespace,
)

# Absence of a document is ``None``, never an all-zero record
NO_STATISTICS = None


@dataclass(frozen=True)
class CategoryCounts:
    """Immutable tally of character categories for one text blob."""

    ideograph_count: int = 0
    latin_word_count: int = 0
    latin_letter_count: int = 0
    digit_count: int = 0
    chinese_punctuation_count: int = 0
    english_punctuation_count: int = 0
    whitespace_count: int = 0
    line_break_count: int = 0
    total_count: int = 0
    total_count_no_whitespace: int = 0

    @classmethod
    def empty(cls) -> "CategoryCounts":
        return cls()

    def to_dict(self) -> Dict[str, int]:
        """Serialize with camelCase keys."""
        return {_to_camel(name): value for name, value in asdict(self).items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CategoryCounts":
        """Inverse of ``to_dict``; accepts camelCase or snake_case keys."""
        values: Dict[str, int] = {}
        for field in fields(cls):
            camel = _to_camel(field.name)
            if camel in data:
                values[field.name] = int(data[camel])
            elif field.name in data:
                values[field.name] = int(data[field.name])
            else:
                raise ValueError(f"Missing category count: {camel}")
        return cls(**values)


# Per-code-point rules, evaluated independently over the same input.
# Not a partition: a character may match several rules or none.
CATEGORY_RULES: List[Tuple[str, Callable[[str], bool]]] = [
    ("ideograph_count", is_ideograph),
    ("latin_letter_count", is_latin_letter),
    ("digit_count", is_digit),
    ("chinese_punctuation_count", is_chinese_punctuation),
    ("english_punctuation_count", is_english_punctuation),
    ("whitespace_count", is_whitespace),
    ("line_break_count", is_line_break),
]

# Categories shown as shares of the non-whitespace total
PERCENTAGE_FIELDS = (
    "ideograph_count",
    "latin_letter_count",
    "digit_count",
    "chinese_punctuation_count",
    "english_punctuation_count",
)


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def calculate_category_counts(text: str) -> CategoryCounts:
    """Compute the full census of a text blob.

    Returns all-zero counts for an empty string. ``total_count`` is the code
    point length and ``total_count_no_whitespace`` is the length after
    stripping whitespace, not a sum of other categories.
    """
    if text is None:
        raise ValueError("text cannot be None")

    tallies: Dict[str, int] = {name: 0 for name, _ in CATEGORY_RULES}
    for char in text:
        for name, predicate in CATEGORY_RULES:
            if predicate(char):
                tallies[name] += 1

    return CategoryCounts(
        latin_word_count=count_latin_words(text),
        total_count=len(text),
        total_count_no_whitespace=len(strip_whitespace(text)),
        **tallies,
    )


def calculate_page_counts(pages: Sequence[str]) -> List[CategoryCounts]:
    """Census of each page on its own, without the page separator."""
    return [calculate_category_counts(page) for page in pages]


def category_percentages(counts: Optional[CategoryCounts]) -> Dict[str, float]:
    """Share of each character category over the non-whitespace total."""
    if counts is None:
        return {}

    denominator = counts.total_count_no_whitespace
    return {
        name: (getattr(counts, name) / denominator) * 100 if denominator > 0 else 0.0
        for name in PERCENTAGE_FIELDS
    }
