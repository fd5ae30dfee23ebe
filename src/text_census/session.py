"""
Caller-held document state.

A loaded document is kept as one immutable ``DocumentSnapshot`` (file name,
text blob, counts). Loading builds the new snapshot completely before it
replaces the old one, so readers never see a new file name with stale
counts. A failed load leaves the previous snapshot in place.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from .assembler import assemble_text
from .extraction import (
    DEFAULT_MAX_FILE_SIZE_BYTES,
    extract_page_texts,
    extract_page_texts_from_path,
)
from .metrics import CategoryCounts, calculate_category_counts, calculate_page_counts


@dataclass(frozen=True)
class DocumentSnapshot:
    """Everything derived from one successful document load."""

    file_name: str
    page_count: int
    text: str
    counts: CategoryCounts
    page_counts: Tuple[CategoryCounts, ...] = ()


def build_snapshot(file_name: str, pages: Sequence[str]) -> DocumentSnapshot:
    """Assemble pages and compute their census in one step."""
    text = assemble_text(pages)
    return DocumentSnapshot(
        file_name=file_name,
        page_count=len(pages),
        text=text,
        counts=calculate_category_counts(text),
        page_counts=tuple(calculate_page_counts(pages)),
    )


class DocumentSession:
    """Holds at most one loaded document and its statistics."""

    def __init__(
        self,
        max_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES,
        verbose: bool = False,
    ) -> None:
        self.max_size_bytes = max_size_bytes
        self.verbose = verbose
        self._snapshot: Optional[DocumentSnapshot] = None

    @property
    def snapshot(self) -> Optional[DocumentSnapshot]:
        return self._snapshot

    @property
    def has_document(self) -> bool:
        return self._snapshot is not None

    @property
    def file_name(self) -> Optional[str]:
        return self._snapshot.file_name if self._snapshot else None

    @property
    def text(self) -> Optional[str]:
        return self._snapshot.text if self._snapshot else None

    @property
    def counts(self) -> Optional[CategoryCounts]:
        """Current statistics, or ``None`` when no document is loaded."""
        return self._snapshot.counts if self._snapshot else None

    def load_pages(self, file_name: str, pages: Sequence[str]) -> DocumentSnapshot:
        """Replace the current document with already-extracted pages."""
        snapshot = build_snapshot(file_name, list(pages))
        self._snapshot = snapshot
        return snapshot

    def load_bytes(
        self, data: bytes, file_name: str, mime_type: Optional[str] = None
    ) -> DocumentSnapshot:
        """Extract, assemble and count a PDF given as bytes.

        Raises the extraction errors unchanged; the previous snapshot survives.
        """
        pages = extract_page_texts(
            data,
            filename=file_name,
            mime_type=mime_type,
            max_size_bytes=self.max_size_bytes,
            verbose=self.verbose,
        )
        return self.load_pages(file_name, pages)

    def load_path(self, path: Union[str, Path]) -> DocumentSnapshot:
        """Extract, assemble and count a PDF on disk."""
        file_path = Path(path)
        pages = extract_page_texts_from_path(
            file_path, max_size_bytes=self.max_size_bytes, verbose=self.verbose
        )
        return self.load_pages(file_path.name, pages)

    def clear(self) -> None:
        """Drop the current document; statistics become absent."""
        self._snapshot = None
