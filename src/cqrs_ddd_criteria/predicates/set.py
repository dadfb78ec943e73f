"""Range predicates."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..exceptions import MalformedBetweenError
from ..operators import CriteriaOperator
from ..strategy import Predicate, PredicateOperator


class BetweenOperator(PredicateOperator):
    """
    ``column BETWEEN low AND high`` from the first two entries of *value*.

    Bounds are bound anonymously; *parameter* is not used.
    """

    @property
    def name(self) -> CriteriaOperator:
        return CriteriaOperator.BETWEEN

    def build(self, column: Any, value: Any, parameter: str) -> Predicate | None:
        if (
            isinstance(value, (str, bytes))
            or not isinstance(value, Sequence)
            or len(value) < 2
        ):
            raise MalformedBetweenError(getattr(column, "key", str(column)), value)
        return Predicate(column.between(value[0], value[1]), {})
