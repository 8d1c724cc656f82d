"""
Page mutator.

Produces new PDF bytes by removing pages from a document, extracting pages
into a fresh document, or concatenating several documents. Every operation
works on its own freshly parsed copy of the input and either returns the
complete serialized output or raises MutationError.
"""
import io
import logging
from typing import Iterable, List, Sequence

import PyPDF2
import pymupdf as fitz

from .errors import MutationError

logger = logging.getLogger(__name__)


def _normalize_indices(indices: Iterable[int], total_pages: int) -> List[int]:
    """Deduplicate page indices and check them against the page count"""
    indices = list(indices)
    not_ints = [i for i in indices if isinstance(i, bool) or not isinstance(i, int)]
    if not_ints:
        raise MutationError(f"Page indices must be integers, got: {not_ints!r}")

    unique = sorted(set(indices))
    invalid = [i for i in unique if i < 0 or i >= total_pages]
    if invalid:
        raise MutationError(
            f"Invalid page indices: {', '.join(map(str, invalid))} "
            f"(document has {total_pages} pages)"
        )
    return unique


def _read_pdf(data: bytes, label: str = "document") -> PyPDF2.PdfReader:
    """Parse PDF bytes with PyPDF2, rejecting unreadable or encrypted input"""
    try:
        reader = PyPDF2.PdfReader(io.BytesIO(data))
        if reader.is_encrypted:
            raise MutationError(f"{label} is password-protected")
        # Force the page tree to load so parse errors surface here
        len(reader.pages)
    except MutationError:
        raise
    except Exception as e:
        logger.warning(f"Failed to parse {label}: {e}")
        raise MutationError(f"{label} could not be read") from e
    return reader


def _write_pdf(writer: PyPDF2.PdfWriter) -> bytes:
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def remove_pages(pdf_bytes: bytes, indices: Iterable[int]) -> bytes:
    """
    Remove pages from a PDF.

    The document is reloaded from pdf_bytes and pages are deleted from the
    highest index down, so earlier deletions never shift later targets.

    Args:
        pdf_bytes: The original PDF file as bytes
        indices: 0-based page indices to remove

    Returns:
        The new PDF as bytes
    """
    try:
        doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    except Exception as e:
        logger.warning(f"Failed to open PDF for page removal: {e}")
        raise MutationError("Document could not be read") from e

    try:
        if doc.needs_pass or doc.is_encrypted:
            raise MutationError("Document is password-protected")

        total_pages = doc.page_count
        to_remove = _normalize_indices(indices, total_pages)
        if len(to_remove) >= total_pages:
            raise MutationError("Cannot remove every page of the document")

        for idx in reversed(to_remove):
            doc.delete_page(idx)

        result = doc.tobytes(garbage=3, deflate=True)
        logger.info(f"Removed {len(to_remove)} pages, {doc.page_count} remaining")
        return result
    except MutationError:
        raise
    except Exception as e:
        logger.error(f"Page removal failed: {e}")
        raise MutationError("Pages could not be removed") from e
    finally:
        doc.close()


def extract_pages(pdf_bytes: bytes, indices: Iterable[int]) -> bytes:
    """
    Copy selected pages into a new PDF.

    Output pages always follow the original document order, whatever order
    the indices were given in.

    Args:
        pdf_bytes: The original PDF file as bytes
        indices: 0-based page indices to keep

    Returns:
        The new PDF as bytes
    """
    reader = _read_pdf(pdf_bytes)
    to_extract = _normalize_indices(indices, len(reader.pages))
    if not to_extract:
        raise MutationError("No pages selected for extraction")

    try:
        pdf_writer = PyPDF2.PdfWriter()
        for idx in to_extract:
            pdf_writer.add_page(reader.pages[idx])
        result = _write_pdf(pdf_writer)
    except Exception as e:
        logger.error(f"Page extraction failed: {e}")
        raise MutationError("Pages could not be extracted") from e

    logger.info(f"Extracted {len(to_extract)} pages")
    return result


def merge_documents(files: Sequence[bytes]) -> bytes:
    """
    Concatenate several PDFs.

    Every page of every file is appended in list order, keeping each file's
    own page order.

    Args:
        files: PDF files as bytes, in output order

    Returns:
        The merged PDF as bytes
    """
    if not files:
        raise MutationError("No documents to merge")

    # Parse everything first so a bad file fails before any copying
    readers = [
        _read_pdf(data, label=f"Document {position}")
        for position, data in enumerate(files, start=1)
    ]

    try:
        merged_writer = PyPDF2.PdfWriter()
        for reader in readers:
            for page in reader.pages:
                merged_writer.add_page(page)

        if len(merged_writer.pages) == 0:
            raise MutationError("Merged document would have no pages")

        result = _write_pdf(merged_writer)
    except MutationError:
        raise
    except Exception as e:
        logger.error(f"Merge failed: {e}")
        raise MutationError("Documents could not be merged") from e

    logger.info(f"Merged {len(readers)} documents into {len(merged_writer.pages)} pages")
    return result
