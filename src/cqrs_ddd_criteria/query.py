"""
Mutable query handle over a SQLAlchemy ``Select``.

``QueryBuilder`` owns one ORM statement built around an aliased root entity.
Criteria and sorting appliers mutate it in place; the pager reads the final
statement.  Relationship joins register further aliases so that qualified
names such as ``person_article.title`` resolve against them.  Joined
aliases should start with the root alias: the appliers leave a name that
already starts with the root alias untouched and prefix every other one.

A builder accumulates predicates and parameters in order and must not be
shared between concurrent call chains.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import inspect, select
from sqlalchemy.orm import RelationshipProperty, aliased, contains_eager

from .exceptions import (
    DuplicateParameterError,
    UnknownAliasError,
    UnknownPropertyError,
)
from .operators import SortDirection
from .utils import SEPARATOR

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement, Select

    from .strategy import Predicate

logger = logging.getLogger(__name__)


class QueryBuilder:
    """
    Query handle for one root entity under an alias.

    Usage::

        qb = QueryBuilder(PersonRecord, "person")
        qb.join("person.articles", "person_article", fetch=True)
        qb.resolve("person_article.title")
        stmt = qb.statement
    """

    def __init__(self, entity: type[Any], alias: str) -> None:
        self.entity = entity
        self._root_alias = alias
        self._root: Any = aliased(entity, name=alias)
        self._aliases: dict[str, Any] = {alias: self._root}
        self._stmt: Select[Any] = select(self._root)
        self._loaders: dict[str, Any] = {}
        self._parameters: dict[str, Any] = {}

    # -- introspection ------------------------------------------------------

    @property
    def root(self) -> Any:
        """The aliased root entity."""
        return self._root

    @property
    def root_alias(self) -> str:
        return self._root_alias

    @property
    def aliases(self) -> dict[str, Any]:
        return dict(self._aliases)

    @property
    def parameters(self) -> dict[str, Any]:
        """Named parameters bound so far."""
        return dict(self._parameters)

    @property
    def has_fetch_joins(self) -> bool:
        return bool(self._loaders)

    def entity_for(self, alias: str) -> Any:
        entity = self._aliases.get(alias)
        if entity is None:
            raise UnknownAliasError(alias, list(self._aliases))
        return entity

    def resolve(self, qualified_name: str) -> Any:
        """
        Resolve ``alias.attribute`` to the aliased column attribute.

        Raises:
            UnknownAliasError: If the alias is not declared on this query.
            UnknownPropertyError: If the attribute is not mapped.
        """
        alias, _, attr = qualified_name.partition(SEPARATOR)
        entity = self.entity_for(alias)
        mapper = inspect(entity).mapper
        available = [
            k for k in mapper.all_orm_descriptors.keys() if not k.startswith("_")
        ]
        if attr not in available:
            raise UnknownPropertyError(
                qualified_name, alias, mapper.class_.__name__, available
            )
        return getattr(entity, attr)

    def primary_key(self) -> list[Any]:
        """Primary-key attributes of the aliased root entity."""
        mapper = inspect(self._root).mapper
        return [
            getattr(self._root, mapper.get_property_by_column(col).key)
            for col in mapper.primary_key
        ]

    # -- mutation -----------------------------------------------------------

    def join(
        self,
        path: str,
        alias: str,
        *,
        outer: bool = False,
        fetch: bool = False,
    ) -> QueryBuilder:
        """
        Join relationship *path* (``parent_alias.relationship``) as *alias*.

        With ``fetch=True`` the joined rows also populate the relationship
        (``contains_eager``).  Fetch joins must chain from the root alias.
        """
        parent_alias, _, rel_name = path.partition(SEPARATOR)
        parent = self.entity_for(parent_alias)
        mapper = inspect(parent).mapper
        rel_prop = mapper.relationships.get(rel_name) if rel_name else None
        if not isinstance(rel_prop, RelationshipProperty):
            raise UnknownPropertyError(
                path,
                parent_alias,
                mapper.class_.__name__,
                list(mapper.relationships.keys()),
            )

        rel_attr = getattr(parent, rel_name)
        target = aliased(rel_prop.mapper.class_, name=alias)
        self._stmt = self._stmt.join(rel_attr.of_type(target), isouter=outer)
        self._aliases[alias] = target

        if fetch:
            if parent_alias == self._root_alias:
                loader = contains_eager(rel_attr.of_type(target))
            elif parent_alias in self._loaders:
                loader = self._loaders[parent_alias].contains_eager(
                    rel_attr.of_type(target)
                )
            else:
                raise ValueError(
                    f"Cannot fetch-join '{path}': '{parent_alias}' is not "
                    "fetch-joined from the root alias."
                )
            self._loaders[alias] = loader

        logger.debug(
            "Joined %s as %s (outer=%s, fetch=%s)", path, alias, outer, fetch
        )
        return self

    def and_where(self, predicate: Predicate) -> QueryBuilder:
        """AND *predicate* into the WHERE clause and record its parameters."""
        for name in predicate.parameters:
            if name in self._parameters:
                raise DuplicateParameterError(name)
        self._stmt = self._stmt.where(predicate.clause)
        self._parameters.update(predicate.parameters)
        return self

    def where(self, *clauses: ColumnElement[bool]) -> QueryBuilder:
        """AND raw SQLAlchemy clauses into the WHERE clause."""
        self._stmt = self._stmt.where(*clauses)
        return self

    def add_order_by(
        self, qualified_name: str, direction: SortDirection
    ) -> QueryBuilder:
        column = self.resolve(qualified_name)
        self._stmt = self._stmt.order_by(
            column.desc() if direction is SortDirection.DESC else column.asc()
        )
        return self

    # -- output -------------------------------------------------------------

    def build(self, *, eager: bool = True) -> Select[Any]:
        """
        Return the statement.

        ``eager=False`` leaves out fetch-join loader options, for statements
        whose select list is rewritten (counts, key pages).
        """
        if eager and self._loaders:
            return self._stmt.options(*self._loaders.values())
        return self._stmt

    @property
    def statement(self) -> Select[Any]:
        return self.build()
