from __future__ import annotations

from enum import Enum

from .exceptions import InvalidOperatorError


class CriteriaOperator(str, Enum):
    """Supported comparison operators for criteria."""

    EQ = "eq"
    GT = "gt"
    LT = "lt"
    GTE = "gte"
    LTE = "lte"
    LIKE = "like"
    BETWEEN = "between"

    @classmethod
    def parse(cls, symbol: str | CriteriaOperator | None) -> CriteriaOperator:
        """
        Resolve an operator symbol.

        ``None`` and ``""`` mean equality.  Matching is case-insensitive.

        Raises:
            InvalidOperatorError: If the symbol is not a known operator.
        """
        if isinstance(symbol, CriteriaOperator):
            return symbol
        if symbol is None or symbol == "":
            return cls.EQ
        if isinstance(symbol, str):
            try:
                return cls(symbol.strip().lower())
            except ValueError:
                pass
        raise InvalidOperatorError(symbol, [op.value for op in cls])


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class BetweenSource(str, Enum):
    """
    Where BETWEEN reads its bounds in the parallel-sequence convention.

    ``LEADING`` always reads ``values[0]`` and ``values[1]``, whatever the
    index of the BETWEEN key.  ``INDEXED`` reads ``values[i]`` and
    ``values[i + 1]``.
    """

    LEADING = "leading"
    INDEXED = "indexed"
