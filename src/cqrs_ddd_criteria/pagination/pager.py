"""Page-sliced access over a :class:`PaginationAdapter`."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..exceptions import (
    NotValidCurrentPageError,
    NotValidMaxPerPageError,
    OutOfBoundsPositionError,
    OutOfRangeCurrentPageError,
    PaginationError,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..options import PaginatorOptions
    from .adapters import PaginationAdapter

T = TypeVar("T")


def _positive_int(value: Any, error: type[PaginationError], label: str) -> int:
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise error(f"{label} must be a positive integer, got {value!r}")
    return value


class Pager(Generic[T]):
    """
    Page-oriented view over an adapter.

    The result count and the current page's results are fetched lazily and
    cached; changing ``max_per_page`` or ``current_page`` drops the cached
    page.  Set ``max_per_page`` before ``current_page``: the page is
    validated against the page count at assignment time, and checked again
    under the same out-of-range policy when the page size changes.

    Usage::

        pager = Pager(SequenceAdapter(items), max_per_page=20)
        pager.current_page = 3
        for item in pager:
            ...
    """

    def __init__(
        self,
        adapter: PaginationAdapter[T],
        *,
        max_per_page: int = 10,
        allow_out_of_range_pages: bool = False,
        normalize_out_of_range_pages: bool = False,
        max_nb_pages: int | None = None,
    ) -> None:
        self._adapter = adapter
        self.allow_out_of_range_pages = allow_out_of_range_pages
        self.normalize_out_of_range_pages = normalize_out_of_range_pages
        self._max_per_page = _positive_int(
            max_per_page, NotValidMaxPerPageError, "max_per_page"
        )
        self._max_nb_pages = (
            None
            if max_nb_pages is None
            else _positive_int(max_nb_pages, PaginationError, "max_nb_pages")
        )
        self._current_page = 1
        self._nb_results: int | None = None
        self._current_page_results: list[T] | None = None

    @classmethod
    def from_options(
        cls, adapter: PaginationAdapter[T], options: PaginatorOptions
    ) -> Pager[T]:
        return cls(
            adapter,
            max_per_page=options.max_per_page,
            allow_out_of_range_pages=options.allow_out_of_range_pages,
            normalize_out_of_range_pages=options.normalize_out_of_range_pages,
            max_nb_pages=options.max_nb_pages,
        )

    @property
    def adapter(self) -> PaginationAdapter[T]:
        return self._adapter

    # -- page size / position -----------------------------------------------

    @property
    def max_per_page(self) -> int:
        return self._max_per_page

    @max_per_page.setter
    def max_per_page(self, value: int) -> None:
        max_per_page = _positive_int(value, NotValidMaxPerPageError, "max_per_page")
        page = self._current_page
        if page > 1:
            page = self._checked_page(page, self._nb_pages_for(max_per_page))
        self._max_per_page = max_per_page
        self._current_page = page
        self._current_page_results = None

    @property
    def max_nb_pages(self) -> int | None:
        return self._max_nb_pages

    @property
    def current_page(self) -> int:
        return self._current_page

    @current_page.setter
    def current_page(self, value: int) -> None:
        page = _positive_int(value, NotValidCurrentPageError, "current_page")
        self._current_page = self._checked_page(page, self.nb_pages)
        self._current_page_results = None

    def _checked_page(self, page: int, nb_pages: int) -> int:
        if page > nb_pages:
            if self.normalize_out_of_range_pages:
                return nb_pages
            if not self.allow_out_of_range_pages:
                raise OutOfRangeCurrentPageError(page, nb_pages)
        return page

    # -- counts -------------------------------------------------------------

    @property
    def nb_results(self) -> int:
        if self._nb_results is None:
            self._nb_results = self._adapter.nb_results()
        return self._nb_results

    @property
    def nb_pages(self) -> int:
        return self._nb_pages_for(self._max_per_page)

    def _nb_pages_for(self, max_per_page: int) -> int:
        nb_pages = max(1, math.ceil(self.nb_results / max_per_page))
        if self._max_nb_pages is not None:
            return min(nb_pages, self._max_nb_pages)
        return nb_pages

    def have_to_paginate(self) -> bool:
        return self.nb_results > self._max_per_page

    # -- navigation ---------------------------------------------------------

    def has_previous_page(self) -> bool:
        return self._current_page > 1

    @property
    def previous_page(self) -> int:
        if not self.has_previous_page():
            raise PaginationError("There is no previous page.")
        return self._current_page - 1

    def has_next_page(self) -> bool:
        return self._current_page < self.nb_pages

    @property
    def next_page(self) -> int:
        if not self.has_next_page():
            raise PaginationError("There is no next page.")
        return self._current_page + 1

    # -- results ------------------------------------------------------------

    @property
    def current_page_results(self) -> list[T]:
        if self._current_page_results is None:
            offset = (self._current_page - 1) * self._max_per_page
            self._current_page_results = self._adapter.slice(
                offset, self._max_per_page
            )
        return self._current_page_results

    @property
    def current_page_offset_start(self) -> int:
        """1-based position of the first item on the page, 0 when empty."""
        if not self.nb_results:
            return 0
        return (self._current_page - 1) * self._max_per_page + 1

    @property
    def current_page_offset_end(self) -> int:
        if self.has_next_page():
            return self._current_page * self._max_per_page
        return self.nb_results

    def page_number_for_item_at_position(self, position: int) -> int:
        position = _positive_int(position, PaginationError, "position")
        if self.nb_results < position:
            raise OutOfBoundsPositionError(position, self.nb_results)
        return math.ceil(position / self._max_per_page)

    def __len__(self) -> int:
        return self.nb_results

    def __iter__(self) -> Iterator[T]:
        return iter(self.current_page_results)

    def __repr__(self) -> str:
        return (
            f"<Pager page={self._current_page} "
            f"max_per_page={self._max_per_page} adapter={type(self._adapter).__name__}>"
        )
