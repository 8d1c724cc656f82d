"""
Save/export coordination.

A save action first secures a destination (a native "save as" file handle,
or nothing, meaning the bytes are dropped into the downloads folder), then
computes the output bytes, then writes them.

The destination has to be requested first, straight from the UI callback
that started the save, before any background work is started. Cancelling
the prompt ends the save with no further work; any other acquisition
failure falls back to the downloads folder.
"""
import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional

from .config import settings
from .errors import DestinationCancelled, DestinationUnavailable, WriteError

logger = logging.getLogger(__name__)

PDF_FILETYPES = [("PDF files", "*.pdf"), ("All files", "*.*")]


def ensure_pdf_extension(filename: str) -> str:
    """Append .pdf unless the name already ends with it"""
    filename = filename.strip() or "document"
    if filename.lower().endswith(".pdf"):
        return filename
    return f"{filename}.pdf"


class SaveState(Enum):
    IDLE = "idle"
    DESTINATION_CHECK = "destination_check"
    ACQUIRING_HANDLE = "acquiring_handle"
    NO_HANDLE = "no_handle"
    MUTATING = "mutating"
    WRITING = "writing"
    DOWNLOADING = "downloading"
    DONE = "done"
    CANCELLED = "cancelled"
    FAILED = "failed"


class FileHandle:
    """Writable file chosen through a native save dialog"""

    def __init__(self, path):
        self.path = Path(path)

    def create_writable(self):
        return open(self.path, "wb")


@dataclass(frozen=True)
class SaveDestination:
    kind: str  # "handle" or "none"
    handle: Any = None

    @classmethod
    def for_handle(cls, handle):
        return cls(kind="handle", handle=handle)

    @classmethod
    def none(cls):
        return cls(kind="none")


class DestinationProvider(ABC):
    """Native save-destination capability"""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether a native save dialog can be shown right now"""

    @abstractmethod
    def acquire(self, suggested_name: str) -> SaveDestination:
        """
        Ask the user where to save.

        Raises:
            DestinationCancelled: the user dismissed the prompt
            DestinationUnavailable: the prompt could not be shown
        """

    def write(self, destination: SaveDestination, data: bytes):
        """Write the full output to an acquired handle, always closing the stream"""
        try:
            stream = destination.handle.create_writable()
        except OSError as e:
            raise WriteError(f"Cannot open {destination.handle.path} for writing") from e

        try:
            stream.write(data)
        except OSError as e:
            raise WriteError(f"Cannot write {destination.handle.path}") from e
        finally:
            stream.close()


class TkFileDialogProvider(DestinationProvider):
    """Save destinations chosen with tkinter's "save as" dialog"""

    def __init__(self, root=None, enabled: Optional[bool] = None):
        self.root = root
        self.enabled = settings.native_save_dialog if enabled is None else enabled

    def is_available(self) -> bool:
        if not self.enabled or self.root is None:
            return False

        import tkinter as tk
        try:
            return bool(self.root.winfo_exists())
        except tk.TclError:
            return False

    def acquire(self, suggested_name: str) -> SaveDestination:
        import tkinter as tk
        from tkinter import filedialog

        try:
            save_path = filedialog.asksaveasfilename(
                parent=self.root,
                title="Save PDF",
                defaultextension=".pdf",
                initialfile=ensure_pdf_extension(suggested_name),
                filetypes=PDF_FILETYPES,
            )
        except tk.TclError as e:
            raise DestinationUnavailable(str(e)) from e

        if not save_path:
            raise DestinationCancelled()

        if not save_path.lower().endswith(".pdf"):
            save_path += ".pdf"
        return SaveDestination.for_handle(FileHandle(save_path))


class ImplicitDownload:
    """Fallback delivery: drop the file into the downloads folder"""

    def __init__(self, directory=None):
        self.directory = Path(directory) if directory else settings.download_dir

    def target_path(self, filename: str) -> Path:
        """First free path for filename, adding " (n)" like a browser does"""
        name = ensure_pdf_extension(filename)
        candidate = self.directory / name
        stem = candidate.stem
        counter = 1
        while candidate.exists():
            candidate = self.directory / f"{stem} ({counter}).pdf"
            counter += 1
        return candidate

    def deliver(self, data: bytes, filename: str) -> Path:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path = self.target_path(filename)
            path.write_bytes(data)
        except OSError as e:
            raise WriteError(f"Cannot save download to {self.directory}") from e

        logger.info(f"Downloaded {len(data)} bytes to {path}")
        return path


@dataclass
class SaveResult:
    status: SaveState  # DONE, CANCELLED or FAILED
    path: Optional[Path] = None
    message: str = ""
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.status == SaveState.DONE


def run_in_thread(work: Callable[[], None]):
    """Background runner for save(): one daemon thread per save"""
    threading.Thread(target=work, daemon=True).start()


class SaveCoordinator:
    """Runs one save action at a time through the save state machine"""

    FAILURE_MESSAGE = "The new PDF could not be saved."

    def __init__(
        self,
        provider: Optional[DestinationProvider] = None,
        download: Optional[ImplicitDownload] = None,
        on_state: Optional[Callable[[SaveState], None]] = None,
    ):
        self.provider = provider
        self.download = download or ImplicitDownload()
        self.on_state = on_state
        self.state = SaveState.IDLE

    def _set_state(self, state: SaveState):
        self.state = state
        logger.debug(f"Save state -> {state.value}")
        if self.on_state is not None:
            self.on_state(state)

    def supports_native_save(self) -> bool:
        """Capability probe; evaluated on every call"""
        return self.provider is not None and self.provider.is_available()

    def save(
        self,
        filename: str,
        produce: Callable[[], bytes],
        run_in_background: Optional[Callable[[Callable[[], None]], None]] = None,
        on_finished: Optional[Callable[[SaveResult], None]] = None,
    ) -> Optional[SaveResult]:
        """
        Save the bytes returned by produce() under filename.

        Must be called directly from the user action that triggered the save:
        the native destination is requested before anything else happens.

        Args:
            filename: User-chosen output name, .pdf is appended if missing
            produce: Computes the output bytes (remove/extract/merge)
            run_in_background: Optional runner for the produce-and-write step,
                e.g. run_in_thread. When given, save() returns None and the
                result is only delivered to on_finished.
            on_finished: Called with the SaveResult of every terminal state

        Returns:
            SaveResult when the save finished inline, was cancelled, or could
            not be started
        """
        if self.state != SaveState.IDLE:
            raise RuntimeError("A save is already in progress")

        self._set_state(SaveState.DESTINATION_CHECK)
        try:
            destination = self._acquire_destination(filename)
        except DestinationCancelled:
            logger.info("Save cancelled by user")
            return self._finish(SaveResult(SaveState.CANCELLED), on_finished)
        except Exception as e:
            logger.error(f"Error preparing save: {e}", exc_info=True)
            return self._fail(e, on_finished)

        def work():
            result = self._produce_and_write(destination, filename, produce)
            if on_finished is not None:
                on_finished(result)
            return result

        if run_in_background is None:
            return work()

        try:
            run_in_background(work)
        except Exception as e:
            logger.error(f"Error starting background save: {e}", exc_info=True)
            return self._fail(e, on_finished)
        return None

    def _acquire_destination(self, filename) -> SaveDestination:
        """Native handle when possible, otherwise the download fallback"""
        if self.supports_native_save():
            self._set_state(SaveState.ACQUIRING_HANDLE)
            try:
                return self.provider.acquire(filename)
            except DestinationCancelled:
                raise
            except Exception as e:
                logger.warning(f"Failed to get file handle, falling back to download: {e}")

        self._set_state(SaveState.NO_HANDLE)
        return SaveDestination.none()

    def _finish(self, result: SaveResult, on_finished) -> SaveResult:
        self._set_state(result.status)
        self._set_state(SaveState.IDLE)
        if on_finished is not None:
            on_finished(result)
        return result

    def _fail(self, error: Exception, on_finished) -> SaveResult:
        result = SaveResult(SaveState.FAILED, message=self.FAILURE_MESSAGE, error=error)
        return self._finish(result, on_finished)

    def _produce_and_write(self, destination, filename, produce) -> SaveResult:
        try:
            self._set_state(SaveState.MUTATING)
            data = produce()

            if destination.kind == "handle":
                self._set_state(SaveState.WRITING)
                self.provider.write(destination, data)
                path = destination.handle.path
                logger.info(f"Saved {len(data)} bytes to {path}")
            else:
                self._set_state(SaveState.DOWNLOADING)
                path = self.download.deliver(data, filename)

            self._set_state(SaveState.DONE)
            return SaveResult(SaveState.DONE, path=path)
        except Exception as e:
            logger.error(f"Error saving PDF: {e}", exc_info=True)
            self._set_state(SaveState.FAILED)
            return SaveResult(SaveState.FAILED, message=self.FAILURE_MESSAGE, error=e)
        finally:
            self._set_state(SaveState.IDLE)
