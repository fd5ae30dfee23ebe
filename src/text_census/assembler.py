"""
Assemble per-page texts into one document text blob.
"""

from typing import Sequence

PAGE_SEPARATOR = "\n"


def assemble_text(pages: Sequence[str]) -> str:
    """Join pages in order, terminating every page with a line break.

    ``["A", "B"]`` becomes ``"A\\nB\\n"`` and an empty sequence becomes ``""``.
    Pages are never reordered, trimmed or deduplicated.
    """
    if pages is None:
        raise ValueError("pages cannot be None")

    return "".join(f"{page}{PAGE_SEPARATOR}" for page in pages)
