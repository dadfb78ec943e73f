"""Repository facade: criteria, sorting and pagination for one mapped class."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .compiler import (
    apply_criteria,
    apply_criterion_list,
    apply_operator_criteria,
    apply_sorting,
)
from .options import PaginatorOptions
from .pagination import Pager, SelectAdapter, SequenceAdapter
from .query import QueryBuilder

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from sqlalchemy.orm import Session

    from .criteria import Criterion, SortSpec
    from .operators import CriteriaOperator, SortDirection
    from .strategy import PredicateOperatorRegistry

    Sorting = Mapping[str, str | SortDirection | None] | Iterable[SortSpec] | None

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EntityRepository(Generic[T]):
    """
    Filtered, sorted, paginated reads for one mapped class.

    Every ``create_*_paginator`` method applies criteria then sorting to a
    :class:`QueryBuilder` and wraps it in a lazy :class:`Pager`; no SQL runs
    until the pager is read::

        repo = EntityRepository(session, PersonRecord)
        pager = repo.create_paginator(
            "person", {"status": "active"}, {"name": "ASC"}
        )
        pager.max_per_page = 20
        pager.current_page = 2
        people = pager.current_page_results

    The ``_apply_*`` and ``get_*paginator`` methods are the override points
    for subclasses.
    """

    def __init__(
        self,
        session: Session,
        model: type[T],
        *,
        options: PaginatorOptions | None = None,
        registry: PredicateOperatorRegistry | None = None,
    ) -> None:
        self.session = session
        self.model = model
        self.options = options or PaginatorOptions()
        self._registry = registry

    def create_query_builder(self, alias: str) -> QueryBuilder:
        return QueryBuilder(self.model, alias)

    # -- paginator factories ------------------------------------------------

    def create_paginator(
        self,
        alias: str,
        criteria: Mapping[str, Any] | None = None,
        sorting: Sorting = None,
    ) -> Pager[T]:
        query_builder = self.create_query_builder(alias)

        self._apply_criteria(alias, query_builder, criteria)
        self._apply_sorting(alias, query_builder, sorting)

        return self.get_paginator(query_builder)

    def create_advanced_paginator(
        self,
        query_builder: QueryBuilder,
        alias: str,
        criteria: Mapping[str, Any] | None = None,
        sorting: Sorting = None,
    ) -> Pager[T]:
        """Like :meth:`create_paginator` on a caller-built query (joins etc.)."""
        self._apply_criteria(alias, query_builder, criteria)
        self._apply_sorting(alias, query_builder, sorting)

        return self.get_paginator(query_builder)

    def create_operator_paginator(
        self,
        query_builder: QueryBuilder,
        alias: str,
        keys: Sequence[str | None] = (),
        operators: Sequence[str | CriteriaOperator | None] = (),
        values: Sequence[Any] = (),
        sorting: Sorting = None,
    ) -> Pager[T]:
        """
        Filter with parallel ``keys`` / ``operators`` / ``values`` sequences.

        ``keys[i] is None`` skips index ``i``.  BETWEEN reads its bounds as
        configured by ``options.between_source``.
        """
        self._apply_criteria_operator(alias, query_builder, keys, operators, values)
        self._apply_sorting(alias, query_builder, sorting)

        return self.get_paginator(query_builder)

    def create_criterion_paginator(
        self,
        query_builder: QueryBuilder,
        alias: str,
        criteria: Iterable[Criterion] = (),
        sorting: Sorting = None,
    ) -> Pager[T]:
        """Filter with ordered :class:`Criterion` records."""
        apply_criterion_list(query_builder, alias, criteria, registry=self._registry)
        self._apply_sorting(alias, query_builder, sorting)

        return self.get_paginator(query_builder)

    def get_paginator(self, query_builder: QueryBuilder) -> Pager[T]:
        """Wrap *query_builder* in a lazy pager (no output walkers by default)."""
        logger.debug(
            "Paginating %s (fetch_join_collection=%s, use_output_walkers=%s)",
            query_builder.root_alias,
            self.options.fetch_join_collection,
            self.options.use_output_walkers,
        )
        adapter: SelectAdapter[T] = SelectAdapter(
            self.session,
            query_builder,
            fetch_join_collection=self.options.fetch_join_collection,
            use_output_walkers=self.options.use_output_walkers,
        )
        return Pager.from_options(adapter, self.options)

    def get_array_paginator(self, objects: Sequence[T]) -> Pager[T]:
        return Pager.from_options(SequenceAdapter(objects), self.options)

    # -- appliers -----------------------------------------------------------

    def _apply_criteria(
        self,
        alias: str,
        query_builder: QueryBuilder,
        criteria: Mapping[str, Any] | None = None,
    ) -> QueryBuilder:
        return apply_criteria(query_builder, alias, criteria, registry=self._registry)

    def _apply_criteria_operator(
        self,
        alias: str,
        query_builder: QueryBuilder,
        keys: Sequence[str | None] = (),
        operators: Sequence[str | CriteriaOperator | None] = (),
        values: Sequence[Any] = (),
    ) -> QueryBuilder:
        return apply_operator_criteria(
            query_builder,
            alias,
            keys,
            operators,
            values,
            between_source=self.options.between_source,
            registry=self._registry,
        )

    def _apply_sorting(
        self,
        alias: str,
        query_builder: QueryBuilder,
        sorting: Sorting = None,
    ) -> QueryBuilder:
        return apply_sorting(query_builder, alias, sorting)
