"""
Document decoder.

Opens raw PDF bytes with PyMuPDF and renders single pages to compact
JPEG data URIs suitable for direct display.
"""
import base64
import io
import logging
from dataclasses import dataclass

import pymupdf as fitz
from PIL import Image

from .errors import DecodeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedPage:
    """Raster output of one page render"""
    image: str  # data:image/jpeg;base64,...
    width: int
    height: int


def open_document(data: bytes):
    """
    Open PDF bytes as a page-addressable document.

    Args:
        data: The PDF file as bytes

    Returns:
        PyMuPDF document handle; the caller owns it and must close it

    Raises:
        DecodeError: bytes are empty, malformed or password-protected
    """
    if not data:
        raise DecodeError("Document is empty")

    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        logger.warning(f"Failed to open PDF ({len(data)} bytes): {e}")
        raise DecodeError("Document could not be opened") from e

    if doc.needs_pass or doc.is_encrypted:
        doc.close()
        raise DecodeError("Document is password-protected")

    if doc.page_count == 0:
        doc.close()
        raise DecodeError("Document has no pages")

    return doc


def page_count(doc) -> int:
    """Total number of pages in an open document"""
    return doc.page_count


def render_page(doc, page_number: int, scale: float, jpeg_quality: int = 80) -> RenderedPage:
    """
    Render one page into a JPEG data URI.

    Every call renders into its own pixmap, nothing is shared between pages.

    Args:
        doc: Document returned by open_document
        page_number: 1-based page number
        scale: Zoom factor (1.0 = 72 dpi)
        jpeg_quality: JPEG quality for the encoded image

    Returns:
        RenderedPage with the data URI and the viewport size in pixels
    """
    if page_number < 1 or page_number > doc.page_count:
        raise DecodeError(f"Page {page_number} does not exist")

    try:
        page = doc.load_page(page_number - 1)
        pix = page.get_pixmap(matrix=fitz.Matrix(scale, scale), alpha=False)

        # Re-encode through Pillow to get a compact JPEG
        img = Image.open(io.BytesIO(pix.tobytes("ppm")))
        buffer = io.BytesIO()
        img.convert("RGB").save(buffer, format="JPEG", quality=jpeg_quality)
    except Exception as e:
        logger.warning(f"Failed to render page {page_number}: {e}")
        raise DecodeError(f"Page {page_number} could not be rendered") from e

    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return RenderedPage(
        image=f"data:image/jpeg;base64,{encoded}",
        width=pix.width,
        height=pix.height,
    )
