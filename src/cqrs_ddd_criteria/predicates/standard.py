"""Equality and comparison predicates."""

from __future__ import annotations

import operator as op_module
from typing import Any

from sqlalchemy import bindparam

from ..operators import CriteriaOperator
from ..strategy import Predicate, PredicateOperator

MEMBERSHIP_TYPES = (list, tuple, set, frozenset)


class EqualOperator(PredicateOperator):
    """
    Implicit equality.

    ``None`` compiles to ``IS NULL`` and a list to ``IN``.  An empty string
    means "no filter" and yields no predicate.
    """

    @property
    def name(self) -> CriteriaOperator:
        return CriteriaOperator.EQ

    def build(self, column: Any, value: Any, parameter: str) -> Predicate | None:
        if value is None:
            return Predicate(column.is_(None), {})
        if isinstance(value, MEMBERSHIP_TYPES):
            items = list(value)
            return Predicate(
                column.in_(bindparam(parameter, items, expanding=True)),
                {parameter: items},
            )
        if isinstance(value, str) and value == "":
            return None
        return Predicate(column == bindparam(parameter, value), {parameter: value})


class _ComparisonOperator(PredicateOperator):
    _compare: Any

    def build(self, column: Any, value: Any, parameter: str) -> Predicate | None:
        clause = type(self)._compare(column, bindparam(parameter, value))
        return Predicate(clause, {parameter: value})


class GreaterThanOperator(_ComparisonOperator):
    _compare = op_module.gt

    @property
    def name(self) -> CriteriaOperator:
        return CriteriaOperator.GT


class LessThanOperator(_ComparisonOperator):
    _compare = op_module.lt

    @property
    def name(self) -> CriteriaOperator:
        return CriteriaOperator.LT


class GreaterEqualOperator(_ComparisonOperator):
    _compare = op_module.ge

    @property
    def name(self) -> CriteriaOperator:
        return CriteriaOperator.GTE


class LessEqualOperator(_ComparisonOperator):
    _compare = op_module.le

    @property
    def name(self) -> CriteriaOperator:
        return CriteriaOperator.LTE
