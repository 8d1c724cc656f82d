"""
Session state for the two workflows.

EditorSession holds the document being edited in the remove/extract
workflow; MergeSession holds the ordered inputs of the merge workflow.
Both are plain objects owned by the UI, with an explicit reset().
"""
import logging
from pathlib import Path
from typing import List, Optional

from . import mutator
from .errors import DecodeError
from .selection import SelectionModel
from .sources import PdfSourceList
from .thumbnails import PageThumbnail, ProgressCallback, generate_thumbnails

logger = logging.getLogger(__name__)


class EditorSession:
    """Single-document page removal and extraction"""

    OUTPUT_SUFFIX = "_edited"

    def __init__(self):
        self.reset()

    def reset(self):
        """Back to the empty, pre-upload state"""
        self.file_name: Optional[str] = None
        self.data: Optional[bytes] = None
        self.thumbnails: List[PageThumbnail] = []
        self.selection = SelectionModel()
        self.output_filename = ""
        self.progress = 0

    @property
    def loaded(self) -> bool:
        return self.data is not None and bool(self.thumbnails)

    @property
    def total_pages(self) -> int:
        return len(self.thumbnails)

    def load(self, file_name: str, data: bytes, on_progress: Optional[ProgressCallback] = None):
        """
        Replace the current document and generate its thumbnails.

        On DecodeError the session is reset and the error re-raised.
        """
        self.reset()
        self.file_name = file_name
        self.data = data
        self.output_filename = Path(file_name).stem + self.OUTPUT_SUFFIX

        def track(done, total):
            self.progress = round(done / total * 100)
            if on_progress is not None:
                on_progress(done, total)

        try:
            self.thumbnails = generate_thumbnails(data, track)
        except DecodeError:
            logger.error(f"Error reading {file_name}")
            self.reset()
            raise

        self.selection.reset(len(self.thumbnails))
        logger.info(f"Loaded {file_name} with {self.total_pages} pages")

    def toggle_page(self, index: int, extend: bool = False):
        self.selection.extend_range(index, extend)

    def clear_selection(self):
        self.selection.clear()

    def removal_bytes(self, indices=None) -> bytes:
        """The original document without the selected pages"""
        if indices is None:
            indices = self.selection.selected()
        return mutator.remove_pages(self.data, indices)

    def extraction_bytes(self, indices=None) -> bytes:
        """A new document with only the selected pages"""
        if indices is None:
            indices = self.selection.selected()
        return mutator.extract_pages(self.data, indices)


class MergeSession:
    """Ordered list of PDFs to concatenate"""

    DEFAULT_OUTPUT_NAME = "merged_document"

    def __init__(self):
        self.sources = PdfSourceList()
        self.reset()

    def reset(self):
        self.sources.clear()
        self.output_filename = self.DEFAULT_OUTPUT_NAME

    def can_merge(self) -> bool:
        return len(self.sources) >= 2

    def merged_bytes(self, payloads=None) -> bytes:
        if payloads is None:
            payloads = self.sources.payloads()
        return mutator.merge_documents(payloads)
