"""String predicates."""

from __future__ import annotations

from typing import Any

from sqlalchemy import bindparam

from ..operators import CriteriaOperator
from ..strategy import Predicate, PredicateOperator


class LikeOperator(PredicateOperator):
    """
    Substring match.  Wildcards inside the value are passed through and
    ``None`` gives ``%%``, which matches every non-null value.
    """

    @property
    def name(self) -> CriteriaOperator:
        return CriteriaOperator.LIKE

    def build(self, column: Any, value: Any, parameter: str) -> Predicate | None:
        pattern = f"%{'' if value is None else value}%"
        return Predicate(
            column.like(bindparam(parameter, pattern)),
            {parameter: pattern},
        )
