"""
Criterion and sort records.

``Criterion`` is the record form of one filter; ``criteria_from_sequences``
converts the parallel keys / operators / values convention into records.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .exceptions import CriteriaLengthMismatchError, InvalidSortDirectionError
from .operators import BetweenSource, CriteriaOperator, SortDirection
from .utils import parameter_name


@dataclass(frozen=True)
class Criterion:
    """
    One filter on a property.

    Attributes:
        property: Bare (``age``) or alias-qualified (``person.age``) name.
        operator: Comparison operator, equality by default.
        value: ``None``, a scalar, a list of scalars (membership), or for
            ``BETWEEN`` a ``(low, high)`` pair.
        parameter: Explicit bind-parameter name.  Derived from *property*
            when omitted.
    """

    property: str
    operator: CriteriaOperator = CriteriaOperator.EQ
    value: Any = None
    parameter: str | None = None


@dataclass(frozen=True)
class SortSpec:
    """
    One ORDER BY entry.

    *direction* may be given as a string; ``sort_specs`` parses it and drops
    entries whose direction is empty.
    """

    property: str
    direction: SortDirection | str | None = SortDirection.ASC


def criteria_from_sequences(
    keys: Sequence[str | None],
    operators: Sequence[str | CriteriaOperator | None],
    values: Sequence[Any],
    *,
    between_source: BetweenSource = BetweenSource.LEADING,
) -> list[Criterion]:
    """
    Build ``Criterion`` records from parallel sequences.

    ``None`` keys are skipped.  Parameter names are suffixed with the index
    so that repeated keys stay distinct.  For ``BETWEEN`` the bounds come
    from ``values[0]``/``values[1]`` or ``values[i]``/``values[i + 1]``
    depending on *between_source*.

    *values* may be longer than *keys* (BETWEEN bounds trail the other
    values); anything shorter is rejected.

    Raises:
        CriteriaLengthMismatchError: If *operators* differs in length from
            *keys*, or *values* is shorter.
        InvalidOperatorError: If an operator symbol is unknown.
    """
    if len(operators) != len(keys) or len(values) < len(keys):
        raise CriteriaLengthMismatchError(len(keys), len(operators), len(values))

    records: list[Criterion] = []
    for i, key in enumerate(keys):
        if key is None:
            continue
        op = CriteriaOperator.parse(operators[i])
        value = values[i]
        if op is CriteriaOperator.BETWEEN:
            start = 0 if between_source is BetweenSource.LEADING else i
            value = tuple(values[start : start + 2])
        records.append(
            Criterion(
                property=key,
                operator=op,
                value=value,
                parameter=parameter_name(key, i),
            )
        )
    return records


def sort_specs(
    sorting: Mapping[str, str | SortDirection | None] | Iterable[SortSpec] | None,
) -> list[SortSpec]:
    """
    Normalise *sorting* into ``SortSpec`` records, preserving order.

    Entries with an empty direction are dropped, whether given as a
    mapping or as ``SortSpec`` records.

    Raises:
        InvalidSortDirectionError: If a direction is not ASC/DESC.
    """
    if not sorting:
        return []
    pairs = (
        sorting.items()
        if isinstance(sorting, Mapping)
        else ((spec.property, spec.direction) for spec in sorting)
    )

    specs: list[SortSpec] = []
    for prop, direction in pairs:
        if not direction:
            continue
        specs.append(SortSpec(prop, _parse_direction(prop, direction)))
    return specs


def _parse_direction(prop: str, direction: str | SortDirection) -> SortDirection:
    if isinstance(direction, SortDirection):
        return direction
    try:
        return SortDirection(str(direction).strip().upper())
    except ValueError:
        raise InvalidSortDirectionError(prop, direction) from None
