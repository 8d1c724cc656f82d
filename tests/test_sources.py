"""Tests for the merge source list."""
import pytest

from pdfpages.sources import PdfSourceList


@pytest.fixture
def sources(make_pdf):
    source_list = PdfSourceList()
    for name, pages in (("a.pdf", 1), ("b.pdf", 2), ("c.pdf", 3), ("d.pdf", 4)):
        source_list.add(name, make_pdf([name] * pages))
    return source_list


def names(source_list):
    return [s.name for s in source_list]


def test_add_appends_with_page_count(sources):
    assert names(sources) == ["a.pdf", "b.pdf", "c.pdf", "d.pdf"]
    assert [s.page_count for s in sources] == [1, 2, 3, 4]
    assert sources.total_pages() == 10


def test_ids_are_unique(sources):
    assert len({s.id for s in sources}) == len(sources)


def test_unreadable_file_has_no_page_count():
    source_list = PdfSourceList()
    source = source_list.add("broken.pdf", b"nope")

    assert source.page_count is None
    assert source_list.total_pages() == 0


def test_add_file_reads_from_disk(tmp_path, make_pdf):
    path = tmp_path / "report.pdf"
    path.write_bytes(make_pdf(["x", "y"]))
    source = PdfSourceList().add_file(path)

    assert source.name == "report.pdf"
    assert source.page_count == 2


def test_remove_by_id(sources):
    b_id = sources.sources[1].id
    sources.remove(b_id)

    assert names(sources) == ["a.pdf", "c.pdf", "d.pdf"]

    sources.remove("unknown")
    assert len(sources) == 3


def test_move_forward_keeps_relative_order(sources):
    sources.move(0, 2)

    assert names(sources) == ["b.pdf", "c.pdf", "a.pdf", "d.pdf"]


def test_move_backward_keeps_relative_order(sources):
    sources.move(3, 1)

    assert names(sources) == ["a.pdf", "d.pdf", "b.pdf", "c.pdf"]


def test_move_out_of_range(sources):
    with pytest.raises(IndexError):
        sources.move(0, 4)


def test_clear_empties_the_list(sources):
    sources.clear()

    assert len(sources) == 0
    assert sources.total_pages() == 0


def test_payloads_follow_list_order(sources):
    sources.move(3, 0)

    assert sources.payloads() == [s.data for s in sources]
    assert sources.payloads()[0] is sources.sources[0].data
