"""
Predicate compilation strategy.

Provides the ``PredicateOperator`` strategy interface, the ``Predicate``
result type, and a registry keyed by :class:`CriteriaOperator`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, NamedTuple

from .exceptions import InvalidOperatorError

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    from .operators import CriteriaOperator


class Predicate(NamedTuple):
    """A WHERE fragment plus the named parameters it binds."""

    clause: ColumnElement[bool]
    parameters: dict[str, Any]


class PredicateOperator(ABC):
    """
    Strategy interface for compiling one criteria operator into a
    SQLAlchemy ``ColumnElement[bool]``.
    """

    @property
    @abstractmethod
    def name(self) -> CriteriaOperator:
        """The operator this strategy handles."""
        ...

    @abstractmethod
    def build(
        self,
        column: Any,
        value: Any,
        parameter: str,
    ) -> Predicate | None:
        """
        Build a predicate.

        Args:
            column: A SQLAlchemy column or instrumented attribute.
            value: The criterion value.
            parameter: Name for the bound parameter.

        Returns:
            The predicate, or ``None`` when the criterion must be skipped.
        """
        ...


class PredicateOperatorRegistry:
    """Registry of ``PredicateOperator`` instances keyed by operator."""

    def __init__(self) -> None:
        self._operators: dict[CriteriaOperator, PredicateOperator] = {}

    def register(self, operator: PredicateOperator) -> None:
        self._operators[operator.name] = operator

    def register_all(self, *operators: PredicateOperator) -> None:
        for op in operators:
            self.register(op)

    def unregister(self, name: CriteriaOperator) -> None:
        self._operators.pop(name, None)

    def get(self, name: CriteriaOperator) -> PredicateOperator | None:
        return self._operators.get(name)

    def has(self, name: CriteriaOperator) -> bool:
        return name in self._operators

    @property
    def supported_operators(self) -> set[CriteriaOperator]:
        return set(self._operators.keys())

    def build(
        self,
        name: CriteriaOperator,
        column: Any,
        value: Any,
        parameter: str,
    ) -> Predicate | None:
        """
        Look up the operator and build.

        Raises:
            InvalidOperatorError: If the operator is not registered.
        """
        op = self.get(name)
        if op is None:
            raise InvalidOperatorError(
                name.value, sorted(o.value for o in self._operators)
            )
        return op.build(column, value, parameter)
