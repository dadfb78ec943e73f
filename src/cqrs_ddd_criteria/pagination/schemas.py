"""Serializable snapshot of a pager's current page."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from collections.abc import Callable

    from .pager import Pager


class PageSnapshot(BaseModel):
    """
    One page of results plus its position in the result set.

    Built from a :class:`Pager` for API responses; ``model_dump()`` gives a
    plain dict.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: list[Any] = Field(default_factory=list)
    page: int = Field(ge=1)
    per_page: int = Field(ge=1)
    total: int = Field(ge=0)
    pages: int = Field(ge=1)
    has_next: bool
    has_previous: bool

    @classmethod
    def from_pager(
        cls,
        pager: Pager[Any],
        serializer: Callable[[Any], Any] | None = None,
    ) -> PageSnapshot:
        """
        Snapshot *pager*'s current page.

        Args:
            pager: The pager; its count and current page are evaluated.
            serializer: Optional per-item conversion (e.g. ORM entity →
                dict).  Items are passed through unchanged when omitted.
        """
        items = pager.current_page_results
        if serializer is not None:
            items = [serializer(item) for item in items]
        return cls(
            items=list(items),
            page=pager.current_page,
            per_page=pager.max_per_page,
            total=pager.nb_results,
            pages=pager.nb_pages,
            has_next=pager.has_next_page(),
            has_previous=pager.has_previous_page(),
        )
