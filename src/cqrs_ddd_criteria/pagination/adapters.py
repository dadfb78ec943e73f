"""
Pagination adapters.

An adapter answers two questions for a :class:`Pager`: how many results
there are, and which results fall in ``[offset, offset + length)``.

- :class:`SelectAdapter` runs a :class:`QueryBuilder` statement through a
  SQLAlchemy ``Session``; nothing is executed until the pager asks.
- :class:`SequenceAdapter` slices an in-memory sequence.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import distinct, func, select

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy import Select
    from sqlalchemy.orm import Session

    from ..query import QueryBuilder

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PaginationAdapter(ABC, Generic[T]):
    """Result source for a pager."""

    @abstractmethod
    def nb_results(self) -> int:
        """Total number of results."""
        ...

    @abstractmethod
    def slice(self, offset: int, length: int) -> list[T]:
        """Results ``offset`` .. ``offset + length - 1``."""
        ...


class SequenceAdapter(PaginationAdapter[T]):
    """Adapter over a fixed in-memory sequence."""

    def __init__(self, items: Sequence[T]) -> None:
        self._items = items

    @property
    def items(self) -> Sequence[T]:
        return self._items

    def nb_results(self) -> int:
        return len(self._items)

    def slice(self, offset: int, length: int) -> list[T]:
        return list(self._items[offset : offset + length])


class SelectAdapter(PaginationAdapter[T]):
    """
    Adapter over an ORM query.

    Args:
        session: Session used to run the count and slice statements.
        query_builder: The finished query.
        fetch_join_collection: Page over ``DISTINCT`` root primary keys, then
            load the entities for those keys.  Needed whenever the query
            joins a collection, otherwise LIMIT/OFFSET cut through the
            joined rows.  Requires a single-column primary key; composite
            keys fall back to plain LIMIT/OFFSET.  Sort on root columns
            only: a column of the joined collection has several values per
            root row, so the order of the distinct keys it produces is not
            defined.
        use_output_walkers: Count with ``SELECT count(*) FROM (<query>)``
            instead of rewriting the select list to ``count(DISTINCT pk)``.
            Keep it off unless the rewritten count is not valid SQL for the
            query at hand; the wrapped form is far slower on joins.
    """

    def __init__(
        self,
        session: Session,
        query_builder: QueryBuilder,
        *,
        fetch_join_collection: bool = True,
        use_output_walkers: bool = False,
    ) -> None:
        self._session = session
        self._builder = query_builder
        self._pk = query_builder.primary_key()
        self.use_output_walkers = use_output_walkers

        if fetch_join_collection and len(self._pk) != 1:
            logger.warning(
                "Composite primary key on %s: paging with plain LIMIT/OFFSET",
                query_builder.entity.__name__,
            )
            fetch_join_collection = False
        self.fetch_join_collection = fetch_join_collection

    @property
    def query_builder(self) -> QueryBuilder:
        return self._builder

    # -- count --------------------------------------------------------------

    def count_statement(self) -> Select[Any]:
        base = self._builder.build(eager=False).order_by(None)

        if self.use_output_walkers:
            inner = base.with_only_columns(*self._pk, maintain_column_froms=True)
            if self.fetch_join_collection:
                inner = inner.distinct()
            return select(func.count()).select_from(inner.subquery())

        target = (
            func.count(distinct(self._pk[0]))
            if self.fetch_join_collection
            else func.count()
        )
        return base.with_only_columns(target, maintain_column_froms=True)

    def nb_results(self) -> int:
        stmt = self.count_statement()
        logger.debug("Counting results: %s", stmt)
        return int(self._session.scalar(stmt) or 0)

    # -- slice --------------------------------------------------------------

    def slice(self, offset: int, length: int) -> list[T]:
        if not self.fetch_join_collection:
            stmt = self._builder.build().limit(length).offset(offset)
            logger.debug("Fetching slice offset=%d length=%d", offset, length)
            return list(self._session.scalars(stmt).unique().all())

        pk = self._pk[0]
        keys_stmt = (
            self._builder.build(eager=False)
            .with_only_columns(pk, maintain_column_froms=True)
            .distinct()
            .limit(length)
            .offset(offset)
        )
        keys = list(self._session.scalars(keys_stmt).all())
        logger.debug(
            "Fetching slice offset=%d length=%d over %d keys", offset, length, len(keys)
        )
        if not keys:
            return []

        stmt = self._builder.build().where(pk.in_(keys))
        items = self._session.scalars(stmt).unique().all()
        position = {key: index for index, key in enumerate(keys)}
        return sorted(items, key=lambda item: position[getattr(item, pk.key)])
