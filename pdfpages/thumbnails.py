"""
Thumbnail pipeline.

Drives the decoder across every page of a document, one page at a time,
and collects lightweight previews for the page-selection grid.
"""
import base64
import io
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from PIL import Image

from . import decoder
from .config import settings

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class PageThumbnail:
    """Low-resolution preview of one page"""
    index: int  # 0-based position in the source document
    image: str  # JPEG data URI
    width: int
    height: int

    def to_image(self) -> Image.Image:
        """Decode the data URI back into a Pillow image"""
        _, encoded = self.image.split(",", 1)
        return Image.open(io.BytesIO(base64.b64decode(encoded)))


def generate_thumbnails(
    pdf_bytes: bytes,
    on_progress: Optional[ProgressCallback] = None,
    scale: Optional[float] = None,
) -> List[PageThumbnail]:
    """
    Generate thumbnails for every page of a PDF.

    Pages are rendered strictly in ascending order, one after the other,
    against a single document handle. on_progress(done, total) is called
    after each page.

    Args:
        pdf_bytes: The PDF file as bytes
        on_progress: Optional progress observer
        scale: Render scale, defaults to settings.thumbnail_scale

    Returns:
        Thumbnails ordered by page index

    Raises:
        DecodeError: the document cannot be opened or a page cannot be rendered
    """
    if scale is None:
        scale = settings.thumbnail_scale

    doc = decoder.open_document(pdf_bytes)
    try:
        total_pages = decoder.page_count(doc)
        logger.info(f"Generating {total_pages} thumbnails at scale {scale}")

        thumbnails = []
        for page_number in range(1, total_pages + 1):
            rendered = decoder.render_page(
                doc, page_number, scale, jpeg_quality=settings.thumbnail_jpeg_quality
            )
            thumbnails.append(PageThumbnail(
                index=page_number - 1,
                image=rendered.image,
                width=rendered.width,
                height=rendered.height,
            ))

            if on_progress is not None:
                on_progress(page_number, total_pages)
    finally:
        doc.close()

    logger.info(f"Generated {len(thumbnails)} thumbnails")
    return thumbnails
