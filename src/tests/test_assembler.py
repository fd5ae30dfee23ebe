"""
Tests for page text assembly.
"""

import pytest
from text_census.assembler import PAGE_SEPARATOR, assemble_text


@pytest.mark.parametrize(
    "pages,expected",
    [
        ([], ""),
        (["A"], "A\n"),
        (["A", "B"], "A\nB\n"),
        (["B", "A"], "B\nA\n"),  # order is kept, never sorted
        ([""], "\n"),
        (["", ""], "\n\n"),
        (["A", "A"], "A\nA\n"),  # no deduplication
        ([" A ", "B\n"], " A \nB\n\n"),  # no trimming
        (["中文", "English"], "中文\nEnglish\n"),
    ],
)
def test_assemble_text(pages, expected):
    assert assemble_text(pages) == expected


def test_every_page_is_terminated():
    pages = ["first", "second", "third"]
    text = assemble_text(pages)

    assert text.endswith(PAGE_SEPARATOR)
    assert text.count(PAGE_SEPARATOR) == len(pages)
    assert text.split(PAGE_SEPARATOR)[:-1] == pages


def test_accepts_any_sequence():
    assert assemble_text(("x", "y")) == "x\ny\n"


def test_none_pages_rejected():
    with pytest.raises(ValueError):
        assemble_text(None)
