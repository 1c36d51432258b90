import pytest

from screenq.screen.paginate import build_page, clamp_page, page_count, paginate


def test_middle_page(numbered_records) -> None:
    assert [r.id for r in paginate(numbered_records, 2, 10)] == list(range(11, 21))


def test_last_partial_page(numbered_records) -> None:
    page = paginate(numbered_records, 3, 10)
    assert [r.id for r in page] == [21, 22, 23, 24, 25]


def test_page_past_end_is_empty(numbered_records) -> None:
    assert paginate(numbered_records, 4, 10) == []


def test_page_below_one_is_empty(numbered_records) -> None:
    assert paginate(numbered_records, 0, 10) == []
    assert paginate(numbered_records, -1, 10) == []


def test_default_page_size_is_ten(numbered_records) -> None:
    assert len(paginate(numbered_records, 1)) == 10


def test_pages_partition_the_list(numbered_records) -> None:
    for size in (1, 3, 7, 10, 25, 40):
        pages = [paginate(numbered_records, n, size) for n in range(1, page_count(25, size) + 1)]
        flattened = [r for page in pages for r in page]
        assert flattened == numbered_records
        assert all(len(p) == size for p in pages[:-1])


def test_invalid_page_size_raises(numbered_records) -> None:
    with pytest.raises(ValueError, match="page_size"):
        paginate(numbered_records, 1, 0)
    with pytest.raises(ValueError, match="page_size"):
        page_count(10, -2)


def test_page_count() -> None:
    assert page_count(0, 10) == 0
    assert page_count(1, 10) == 1
    assert page_count(10, 10) == 1
    assert page_count(11, 10) == 2
    assert page_count(25, 10) == 3


def test_clamp_page() -> None:
    assert clamp_page(0, 25, 10) == 1
    assert clamp_page(2, 25, 10) == 2
    assert clamp_page(9, 25, 10) == 3
    assert clamp_page(5, 0, 10) == 1


def test_build_page(numbered_records) -> None:
    page = build_page(numbered_records, 3, 10)
    assert page.number == 3
    assert page.total == 25
    assert page.page_count == 3
    assert [r.id for r in page.records] == [21, 22, 23, 24, 25]
    assert (page.start_index, page.end_index) == (21, 25)


def test_build_page_empty_dataset() -> None:
    page = build_page([], 1, 10)
    assert page.records == ()
    assert page.total == 0
    assert page.page_count == 0
