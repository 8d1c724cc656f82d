import pymupdf as fitz
import pytest


def _make_pdf(labels, width=200, height=300):
    doc = fitz.open()
    for label in labels:
        page = doc.new_page(width=width, height=height)
        page.insert_text((20, 50), label, fontsize=14)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def make_pdf():
    """Build a PDF whose pages carry the given text labels"""
    return _make_pdf


@pytest.fixture
def page_labels():
    """Read back the text label of every page, in page order"""
    def read(data):
        doc = fitz.open(stream=data, filetype="pdf")
        try:
            return [page.get_text().strip() for page in doc]
        finally:
            doc.close()
    return read


@pytest.fixture
def five_page_pdf():
    return _make_pdf([f"Page {i}" for i in range(5)])


@pytest.fixture
def encrypted_pdf():
    doc = fitz.open()
    doc.new_page().insert_text((20, 50), "Secret")
    data = doc.tobytes(
        encryption=fitz.PDF_ENCRYPT_AES_256,
        owner_pw="owner-secret",
        user_pw="user-secret",
    )
    doc.close()
    return data
