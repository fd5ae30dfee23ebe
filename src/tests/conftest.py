"""
Shared fixtures: in-memory PDFs built with PyMuPDF.
"""

import fitz  # PyMuPDF
import pytest


def build_pdf(page_texts, **save_options):
    """Create a PDF whose pages carry the given ASCII texts."""
    doc = fitz.open()
    for text in page_texts:
        page = doc.new_page(width=612, height=792)
        if text:
            page.insert_text((72, 72), text, fontsize=11)
    data = doc.tobytes(**save_options)
    doc.close()
    return data


@pytest.fixture
def make_pdf():
    return build_pdf


@pytest.fixture
def sample_pdf():
    """Three pages, the middle one blank."""
    return build_pdf(["Page one 123", "", "Page three"])
