"""Exception types raised by the pdfpages core."""


class PdfPagesError(Exception):
    """Base class for every error raised by pdfpages"""


class DecodeError(PdfPagesError):
    """Input bytes could not be opened as a PDF (corrupt, truncated or encrypted)"""


class MutationError(PdfPagesError):
    """Removing, extracting or merging pages failed"""


class DestinationCancelled(PdfPagesError):
    """The user dismissed the save-location prompt"""


class DestinationUnavailable(PdfPagesError):
    """A native save destination could not be acquired"""


class WriteError(PdfPagesError):
    """Writing the output to its destination failed"""
