"""
PDF text extraction using PyMuPDF.

This module turns a PDF (bytes or a file path) into an ordered list of page
texts. Only inputs recognized as PDF reach PyMuPDF, and extraction is
all-or-nothing: either every page's text is returned or an error is raised.
"""

from pathlib import Path
from typing import List, Optional, Union

import fitz  # PyMuPDF

# Input validation
PDF_MIME_TYPES = {"application/pdf", "application/x-pdf"}
PDF_SIGNATURE = b"%PDF-"
SIGNATURE_SEARCH_BYTES = 1024
DEFAULT_MAX_FILE_SIZE_MB = 200.0
DEFAULT_MAX_FILE_SIZE_BYTES = int(DEFAULT_MAX_FILE_SIZE_MB * 1024 * 1024)

# User-facing messages
UNSUPPORTED_MESSAGE = "Unsupported file type: please provide a PDF document"
PARSE_FAILED_MESSAGE = "Failed to parse document"


class UnsupportedDocumentError(ValueError):
    """Input is not an accepted document type."""


class DocumentTooLargeError(UnsupportedDocumentError):
    """Input exceeds the configured size limit."""

    def __init__(self, file_size: int, max_size: int, filename: str) -> None:
        super().__init__(
            f"'{filename}' size ({file_size:,} bytes) exceeds maximum ({max_size:,} bytes)"
        )
        self.file_size = file_size
        self.max_size = max_size
        self.filename = filename


class DocumentExtractionError(RuntimeError):
    """Input is a PDF but its pages could not be read."""


def is_pdf(data: bytes, mime_type: Optional[str] = None) -> bool:
    """Check the declared MIME type (when given) and the %PDF- signature."""
    if mime_type is not None:
        base_type = mime_type.split(";", 1)[0].strip().lower()
        if base_type not in PDF_MIME_TYPES:
            return False

    return PDF_SIGNATURE in data[:SIGNATURE_SEARCH_BYTES]


def extract_page_texts(
    data: bytes,
    filename: str = "document.pdf",
    mime_type: Optional[str] = None,
    max_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES,
    verbose: bool = False,
) -> List[str]:
    """Extract the text of every page, in page order.

    Raises:
        UnsupportedDocumentError: If the input is not a PDF or is too large
        DocumentExtractionError: If PyMuPDF cannot open or read the document
    """
    if not data or not is_pdf(data, mime_type):
        raise UnsupportedDocumentError(f"{UNSUPPORTED_MESSAGE} ('{filename}')")

    if len(data) > max_size_bytes:
        raise DocumentTooLargeError(len(data), max_size_bytes, filename)

    if verbose:
        print(f"    📄 Extracting {filename} ({len(data) / 1024 / 1024:.2f} MB)...")

    try:
        with fitz.open(stream=data, filetype="pdf") as doc:
            if doc.needs_pass:
                raise DocumentExtractionError(
                    f"{PARSE_FAILED_MESSAGE}: '{filename}' is password protected"
                )
            # Collect everything before returning so no partial list escapes
            pages: List[str] = [page.get_text() for page in doc]
    except DocumentExtractionError:
        raise
    except Exception as e:
        raise DocumentExtractionError(f"{PARSE_FAILED_MESSAGE}: {e}") from e

    if verbose:
        print(f"    ✅ Extracted {len(pages):,} pages from {filename}")

    return pages


def extract_page_texts_from_path(
    path: Union[str, Path],
    max_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES,
    verbose: bool = False,
) -> List[str]:
    """Read a file from disk and extract its page texts."""
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"File not found: {file_path}")

    file_size = file_path.stat().st_size
    if file_size > max_size_bytes:
        raise DocumentTooLargeError(file_size, max_size_bytes, file_path.name)

    return extract_page_texts(
        file_path.read_bytes(),
        filename=file_path.name,
        max_size_bytes=max_size_bytes,
        verbose=verbose,
    )
