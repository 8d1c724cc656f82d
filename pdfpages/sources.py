"""Ordered list of input PDFs for the merge workflow."""
import logging
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from . import decoder
from .errors import DecodeError

logger = logging.getLogger(__name__)


@dataclass
class PdfSource:
    """One uploaded PDF"""
    name: str
    data: bytes = field(repr=False)
    page_count: Optional[int] = None  # None when the file could not be decoded
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:9])


def count_pages(data: bytes) -> Optional[int]:
    """Page count for display, or None if the file does not decode"""
    try:
        doc = decoder.open_document(data)
    except DecodeError:
        return None
    try:
        return decoder.page_count(doc)
    finally:
        doc.close()


class PdfSourceList:
    """Merge inputs; list order is output page order"""

    def __init__(self):
        self.sources: List[PdfSource] = []

    def __len__(self):
        return len(self.sources)

    def __iter__(self):
        return iter(self.sources)

    def add(self, name: str, data: bytes) -> PdfSource:
        """Append a PDF to the end of the list"""
        source = PdfSource(name=name, data=data, page_count=count_pages(data))
        self.sources.append(source)
        logger.info(f"Added {name} ({source.page_count} pages) as #{len(self.sources)}")
        return source

    def add_file(self, path) -> PdfSource:
        path = Path(path)
        return self.add(path.name, path.read_bytes())

    def remove(self, source_id: str):
        """Drop a source by id; unknown ids are ignored"""
        self.sources = [s for s in self.sources if s.id != source_id]

    def move(self, from_index: int, to_index: int):
        """Move one entry, keeping the relative order of all the others"""
        if from_index == to_index:
            return
        if not 0 <= from_index < len(self.sources) or not 0 <= to_index < len(self.sources):
            raise IndexError(f"Cannot move {from_index} to {to_index} in a list of {len(self.sources)}")

        source = self.sources.pop(from_index)
        self.sources.insert(to_index, source)

    def clear(self):
        self.sources.clear()

    def total_pages(self) -> int:
        return sum(s.page_count or 0 for s in self.sources)

    def payloads(self) -> List[bytes]:
        return [s.data for s in self.sources]
