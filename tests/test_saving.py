"""Tests for the save/export coordinator."""
from pathlib import Path

import pytest

from pdfpages.errors import DestinationCancelled, DestinationUnavailable, MutationError
from pdfpages.saving import (
    DestinationProvider,
    FileHandle,
    ImplicitDownload,
    SaveCoordinator,
    SaveDestination,
    SaveState,
    TkFileDialogProvider,
    ensure_pdf_extension,
)

PDF_BYTES = b"%PDF-1.7 fake output"


class FakeProvider(DestinationProvider):
    """Native destination stand-in that records what it was asked"""

    def __init__(self, events, available=True, target=None, failure=None):
        self.events = events
        self.available = available
        self.target = target
        self.failure = failure
        self.requested = []

    def is_available(self):
        return self.available

    def acquire(self, suggested_name):
        self.events.append("acquire")
        self.requested.append(suggested_name)
        if self.failure is not None:
            raise self.failure
        return SaveDestination.for_handle(FileHandle(self.target))


class BrokenStream:
    def __init__(self):
        self.closed = False

    def write(self, data):
        raise OSError("disk full")

    def close(self):
        self.closed = True


class BrokenHandle:
    path = Path("broken.pdf")

    def __init__(self):
        self.stream = BrokenStream()

    def create_writable(self):
        return self.stream


@pytest.fixture
def events():
    return []


@pytest.fixture
def downloads(tmp_path):
    return tmp_path / "downloads"


def producer(events, data=PDF_BYTES):
    def produce():
        events.append("produce")
        return data
    return produce


def make_coordinator(provider, downloads, states=None):
    return SaveCoordinator(
        provider=provider,
        download=ImplicitDownload(downloads),
        on_state=states.append if states is not None else None,
    )


def test_without_native_capability_downloads(events, downloads):
    provider = FakeProvider(events, available=False)
    coordinator = make_coordinator(provider, downloads)

    result = coordinator.save("report", producer(events))

    assert result.ok
    assert events == ["produce"]
    assert result.path == downloads / "report.pdf"
    assert result.path.read_bytes() == PDF_BYTES


def test_without_provider_downloads(events, downloads):
    coordinator = SaveCoordinator(download=ImplicitDownload(downloads))

    assert coordinator.supports_native_save() is False
    result = coordinator.save("report.pdf", producer(events))

    assert result.ok
    assert result.path == downloads / "report.pdf"


def test_handle_is_acquired_before_producing(events, tmp_path, downloads):
    target = tmp_path / "chosen.pdf"
    provider = FakeProvider(events, target=target)
    states = []
    coordinator = make_coordinator(provider, downloads, states)

    result = coordinator.save("report", producer(events))

    assert result.ok
    assert events == ["acquire", "produce"]
    assert provider.requested == ["report"]
    assert target.read_bytes() == PDF_BYTES
    assert not downloads.exists()
    assert states == [
        SaveState.DESTINATION_CHECK,
        SaveState.ACQUIRING_HANDLE,
        SaveState.MUTATING,
        SaveState.WRITING,
        SaveState.DONE,
        SaveState.IDLE,
    ]


def test_cancel_stops_everything(events, downloads):
    provider = FakeProvider(events, failure=DestinationCancelled())
    states = []
    finished = []
    coordinator = make_coordinator(provider, downloads, states)

    result = coordinator.save("report", producer(events), on_finished=finished.append)

    assert result.status == SaveState.CANCELLED
    assert events == ["acquire"]
    assert not downloads.exists()
    assert finished == [result]
    assert states[-2:] == [SaveState.CANCELLED, SaveState.IDLE]
    assert coordinator.state == SaveState.IDLE


@pytest.mark.parametrize("failure", [DestinationUnavailable("no dialog"), RuntimeError("boom")])
def test_acquisition_failure_falls_back_to_download(events, downloads, failure):
    provider = FakeProvider(events, failure=failure)
    states = []
    coordinator = make_coordinator(provider, downloads, states)

    result = coordinator.save("report", producer(events))

    assert result.ok
    assert events == ["acquire", "produce"]
    assert result.path == downloads / "report.pdf"
    assert SaveState.NO_HANDLE in states
    assert SaveState.DOWNLOADING in states


def test_mutation_failure_writes_nothing(events, tmp_path, downloads):
    target = tmp_path / "chosen.pdf"
    provider = FakeProvider(events, target=target)
    coordinator = make_coordinator(provider, downloads)

    def produce():
        raise MutationError("bad index")

    result = coordinator.save("report", produce)

    assert result.status == SaveState.FAILED
    assert result.message == SaveCoordinator.FAILURE_MESSAGE
    assert isinstance(result.error, MutationError)
    assert not target.exists()
    assert coordinator.state == SaveState.IDLE


def test_write_failure_closes_stream(events, downloads):
    handle = BrokenHandle()

    class BrokenProvider(FakeProvider):
        def acquire(self, suggested_name):
            return SaveDestination.for_handle(handle)

    coordinator = make_coordinator(BrokenProvider(events), downloads)
    result = coordinator.save("report", producer(events))

    assert result.status == SaveState.FAILED
    assert handle.stream.closed
    assert coordinator.state == SaveState.IDLE


def test_background_runner_defers_production(events, downloads):
    provider = FakeProvider(events, available=False)
    coordinator = make_coordinator(provider, downloads)
    queued = []
    finished = []

    returned = coordinator.save("report", producer(events), run_in_background=queued.append,
                                on_finished=finished.append)

    assert returned is None
    assert events == []
    assert coordinator.state == SaveState.NO_HANDLE

    with pytest.raises(RuntimeError):
        coordinator.save("again", producer(events))

    queued[0]()

    assert events == ["produce"]
    assert finished[0].ok
    assert coordinator.state == SaveState.IDLE


def test_capability_check_is_not_cached(events, downloads):
    provider = FakeProvider(events, available=False)
    coordinator = make_coordinator(provider, downloads)

    assert coordinator.supports_native_save() is False
    provider.available = True
    assert coordinator.supports_native_save() is True


def test_implicit_download_picks_free_name(tmp_path):
    download = ImplicitDownload(tmp_path)

    first = download.deliver(b"1", "report")
    second = download.deliver(b"2", "report.pdf")
    third = download.deliver(b"3", "report")

    assert [p.name for p in (first, second, third)] == ["report.pdf", "report (1).pdf", "report (2).pdf"]
    assert third.read_bytes() == b"3"


@pytest.mark.parametrize("name,expected", [
    ("report", "report.pdf"),
    ("report.pdf", "report.pdf"),
    ("REPORT.PDF", "REPORT.PDF"),
    ("report.txt", "report.txt.pdf"),
    ("  spaced  ", "spaced.pdf"),
    ("", "document.pdf"),
])
def test_ensure_pdf_extension(name, expected):
    assert ensure_pdf_extension(name) == expected


def test_tk_provider_unavailable_without_root():
    assert TkFileDialogProvider(root=None).is_available() is False


def test_tk_provider_can_be_disabled():
    pytest.importorskip("tkinter")

    class Root:
        def winfo_exists(self):
            return True

    assert TkFileDialogProvider(root=Root(), enabled=False).is_available() is False
    assert TkFileDialogProvider(root=Root(), enabled=True).is_available() is True


def test_runner_that_cannot_start_returns_to_idle(events, downloads):
    provider = FakeProvider(events, available=False)
    states = []
    coordinator = make_coordinator(provider, downloads, states)
    finished = []

    def broken_runner(work):
        raise RuntimeError("can't start new thread")

    result = coordinator.save("report", producer(events), run_in_background=broken_runner,
                              on_finished=finished.append)

    assert result.status == SaveState.FAILED
    assert result.message == SaveCoordinator.FAILURE_MESSAGE
    assert finished == [result]
    assert events == []
    assert states[-2:] == [SaveState.FAILED, SaveState.IDLE]

    assert coordinator.save("again", producer(events)).ok
    assert events == ["produce"]


def test_failing_capability_check_returns_to_idle(events, downloads):
    class CapabilityCheckFails(FakeProvider):
        def is_available(self):
            raise RuntimeError("display went away")

    coordinator = make_coordinator(CapabilityCheckFails(events), downloads)

    result = coordinator.save("report", producer(events))

    assert result.status == SaveState.FAILED
    assert coordinator.state == SaveState.IDLE
    assert events == []
    assert not downloads.exists()


@pytest.mark.parametrize("chosen,expected", [
    ("out/report ", "out/report .pdf"),
    ("out/report.PDF", "out/report.PDF"),
])
def test_tk_provider_keeps_dialog_path(monkeypatch, tmp_path, chosen, expected):
    pytest.importorskip("tkinter")
    from tkinter import filedialog

    monkeypatch.setattr(filedialog, "asksaveasfilename", lambda **kwargs: str(tmp_path / chosen))

    destination = TkFileDialogProvider(root=None, enabled=True).acquire("report")

    assert destination.kind == "handle"
    assert destination.handle.path == tmp_path / expected


def test_tk_provider_empty_path_is_cancel(monkeypatch):
    pytest.importorskip("tkinter")
    from tkinter import filedialog

    monkeypatch.setattr(filedialog, "asksaveasfilename", lambda **kwargs: "")

    with pytest.raises(DestinationCancelled):
        TkFileDialogProvider(root=None, enabled=True).acquire("report")
