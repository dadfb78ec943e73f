from __future__ import annotations

import pytest

from cqrs_ddd_criteria import (
    NotValidCurrentPageError,
    NotValidMaxPerPageError,
    OutOfBoundsPositionError,
    OutOfRangeCurrentPageError,
    Pager,
    PaginationAdapter,
    PaginationError,
    PaginatorOptions,
    SequenceAdapter,
)


class CountingAdapter(PaginationAdapter[int]):
    def __init__(self, items: list[int]) -> None:
        self.items = items
        self.count_calls = 0
        self.slice_calls: list[tuple[int, int]] = []

    def nb_results(self) -> int:
        self.count_calls += 1
        return len(self.items)

    def slice(self, offset: int, length: int) -> list[int]:
        self.slice_calls.append((offset, length))
        return self.items[offset : offset + length]


@pytest.fixture
def pager() -> Pager[int]:
    return Pager(SequenceAdapter(list(range(1, 26))), max_per_page=10)


def test_first_page(pager):
    assert pager.nb_results == 25
    assert len(pager) == 25
    assert pager.nb_pages == 3
    assert pager.current_page == 1
    assert pager.current_page_results == list(range(1, 11))
    assert pager.have_to_paginate()
    assert not pager.has_previous_page()
    assert pager.next_page == 2


def test_last_page(pager):
    pager.current_page = 3
    assert pager.current_page_results == [21, 22, 23, 24, 25]
    assert list(pager) == [21, 22, 23, 24, 25]
    assert pager.current_page_offset_start == 21
    assert pager.current_page_offset_end == 25
    assert pager.previous_page == 2
    assert not pager.has_next_page()
    with pytest.raises(PaginationError):
        pager.next_page


def test_previous_page_on_first_page_raises(pager):
    with pytest.raises(PaginationError):
        pager.previous_page


def test_middle_page_offsets(pager):
    pager.current_page = 2
    assert pager.current_page_offset_start == 11
    assert pager.current_page_offset_end == 20


def test_out_of_range_page_raises(pager):
    with pytest.raises(OutOfRangeCurrentPageError) as exc_info:
        pager.current_page = 4
    assert exc_info.value.to_dict() == {
        "error": "OUT_OF_RANGE_PAGE",
        "page": 4,
        "nb_pages": 3,
    }
    assert pager.current_page == 1


def test_out_of_range_page_normalized():
    pager = Pager(
        SequenceAdapter(list(range(25))),
        max_per_page=10,
        normalize_out_of_range_pages=True,
    )
    pager.current_page = 9
    assert pager.current_page == 3


def test_out_of_range_page_allowed():
    pager = Pager(
        SequenceAdapter(list(range(25))),
        max_per_page=10,
        allow_out_of_range_pages=True,
    )
    pager.current_page = 9
    assert pager.current_page == 9
    assert pager.current_page_results == []


@pytest.mark.parametrize("value", [0, -1, 1.5, "abc", True, None])
def test_invalid_max_per_page(pager, value):
    with pytest.raises(NotValidMaxPerPageError):
        pager.max_per_page = value


@pytest.mark.parametrize("value", [0, -3, "x", False])
def test_invalid_current_page(pager, value):
    with pytest.raises(NotValidCurrentPageError):
        pager.current_page = value


def test_numeric_string_page_is_accepted(pager):
    pager.current_page = "2"
    assert pager.current_page == 2


def test_empty_sequence_has_one_page():
    pager: Pager[int] = Pager(SequenceAdapter([]))
    assert pager.nb_results == 0
    assert pager.nb_pages == 1
    assert pager.current_page_results == []
    assert pager.current_page_offset_start == 0
    assert pager.current_page_offset_end == 0
    assert not pager.have_to_paginate()


def test_page_number_for_item_at_position(pager):
    assert pager.page_number_for_item_at_position(1) == 1
    assert pager.page_number_for_item_at_position(10) == 1
    assert pager.page_number_for_item_at_position(11) == 2
    assert pager.page_number_for_item_at_position(25) == 3
    with pytest.raises(OutOfBoundsPositionError):
        pager.page_number_for_item_at_position(26)


def test_max_nb_pages_caps_page_count():
    pager = Pager(SequenceAdapter(list(range(100))), max_per_page=10, max_nb_pages=4)
    assert pager.nb_pages == 4
    with pytest.raises(OutOfRangeCurrentPageError):
        pager.current_page = 5


def test_count_and_page_are_cached():
    adapter = CountingAdapter(list(range(30)))
    pager = Pager(adapter, max_per_page=10)
    pager.current_page = 2

    assert pager.current_page_results == list(range(10, 20))
    assert pager.current_page_results == list(range(10, 20))
    pager.nb_pages
    pager.has_next_page()

    assert adapter.count_calls == 1
    assert adapter.slice_calls == [(10, 10)]


def test_changing_page_size_refetches():
    adapter = CountingAdapter(list(range(30)))
    pager = Pager(adapter, max_per_page=10)
    pager.current_page_results
    pager.max_per_page = 5
    assert pager.current_page_results == [0, 1, 2, 3, 4]
    assert adapter.slice_calls == [(0, 10), (0, 5)]
    assert pager.nb_pages == 6


def test_from_options():
    options = PaginatorOptions(max_per_page=4).with_out_of_range(normalize=True)
    pager = Pager.from_options(SequenceAdapter(list(range(10))), options)
    assert pager.max_per_page == 4
    pager.current_page = 10
    assert pager.current_page == 3


def test_repr(pager):
    assert repr(pager) == "<Pager page=1 max_per_page=10 adapter=SequenceAdapter>"


def test_larger_page_size_rechecks_current_page(pager):
    pager.current_page = 3
    with pytest.raises(OutOfRangeCurrentPageError):
        pager.max_per_page = 25
    assert pager.max_per_page == 10
    assert pager.current_page == 3


def test_larger_page_size_normalizes_current_page():
    pager = Pager(
        SequenceAdapter(list(range(25))),
        max_per_page=10,
        normalize_out_of_range_pages=True,
    )
    pager.current_page = 3
    pager.max_per_page = 20
    assert pager.current_page == 2
    assert pager.current_page_results == list(range(20, 25))


def test_larger_page_size_keeps_allowed_page():
    pager = Pager(
        SequenceAdapter(list(range(25))),
        max_per_page=10,
        allow_out_of_range_pages=True,
    )
    pager.current_page = 3
    pager.max_per_page = 50
    assert pager.current_page == 3
    assert pager.current_page_results == []
