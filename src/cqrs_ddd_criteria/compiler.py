"""
Apply criteria and sorting to a :class:`QueryBuilder`.

Each operator is an isolated strategy in ``predicates/``, registered in a
``PredicateOperatorRegistry``.  The appliers qualify property names with the
query alias, resolve them to aliased columns, delegate predicate
construction to the registry and AND every predicate into the builder.

Three input shapes are supported:

- ``apply_criteria``: ``{property: value}``, equality only (``None`` →
  ``IS NULL``, list → ``IN``, ``""`` → skipped)
- ``apply_operator_criteria``: parallel ``keys`` / ``operators`` /
  ``values`` sequences
- ``apply_criterion_list``: ordered :class:`Criterion` records
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .criteria import criteria_from_sequences, sort_specs
from .operators import BetweenSource, CriteriaOperator, SortDirection
from .predicates import DEFAULT_REGISTRY
from .utils import parameter_name, qualify

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from .criteria import Criterion, SortSpec
    from .query import QueryBuilder
    from .strategy import Predicate, PredicateOperatorRegistry

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_predicate(
    column: Any,
    operator: CriteriaOperator | str | None,
    value: Any,
    parameter: str,
    *,
    registry: PredicateOperatorRegistry | None = None,
) -> Predicate | None:
    """
    Build one predicate for *column*.

    Args:
        column: Aliased column attribute.
        operator: Operator or operator symbol; ``None`` means equality.
        value: Criterion value.
        parameter: Bind-parameter name.
        registry: Optional custom registry.  Falls back to
            ``DEFAULT_REGISTRY``.

    Returns:
        The predicate, or ``None`` when the criterion is skipped.

    Raises:
        InvalidOperatorError: Unknown or unregistered operator.
        MalformedBetweenError: BETWEEN without two bounds.
    """
    reg = registry or DEFAULT_REGISTRY
    return reg.build(CriteriaOperator.parse(operator), column, value, parameter)


def apply_criteria(
    builder: QueryBuilder,
    alias: str,
    criteria: Mapping[str, Any] | None = None,
    *,
    registry: PredicateOperatorRegistry | None = None,
) -> QueryBuilder:
    """AND one equality predicate per ``{property: value}`` entry."""
    for prop, value in (criteria or {}).items():
        _apply(
            builder,
            qualify(alias, prop),
            CriteriaOperator.EQ,
            value,
            parameter_name(prop),
            registry,
        )
    return builder


def apply_operator_criteria(
    builder: QueryBuilder,
    alias: str,
    keys: Sequence[str | None] = (),
    operators: Sequence[str | CriteriaOperator | None] = (),
    values: Sequence[Any] = (),
    *,
    between_source: BetweenSource = BetweenSource.LEADING,
    registry: PredicateOperatorRegistry | None = None,
) -> QueryBuilder:
    """
    AND one predicate per index of the parallel sequences.

    ``None`` keys are skipped.  Parameters are named ``<key><index>``.
    """
    records = criteria_from_sequences(
        keys, operators, values, between_source=between_source
    )
    return apply_criterion_list(builder, alias, records, registry=registry)


def apply_criterion_list(
    builder: QueryBuilder,
    alias: str,
    criteria: Iterable[Criterion] = (),
    *,
    registry: PredicateOperatorRegistry | None = None,
) -> QueryBuilder:
    """AND one predicate per :class:`Criterion`, in order."""
    for index, criterion in enumerate(criteria):
        _apply(
            builder,
            qualify(alias, criterion.property),
            criterion.operator,
            criterion.value,
            criterion.parameter or parameter_name(criterion.property, index),
            registry,
        )
    return builder


def apply_sorting(
    builder: QueryBuilder,
    alias: str,
    sorting: Mapping[str, str | SortDirection | None] | Iterable[SortSpec] | None,
) -> QueryBuilder:
    """Append ORDER BY clauses in the given order; empty directions are skipped."""
    for spec in sort_specs(sorting):
        name = qualify(alias, spec.property)
        direction = SortDirection(spec.direction)
        builder.add_order_by(name, direction)
        logger.debug("ORDER BY %s %s", name, direction.value)
    return builder


# ---------------------------------------------------------------------------
# Internal
# ---------------------------------------------------------------------------


def _apply(
    builder: QueryBuilder,
    name: str,
    operator: CriteriaOperator | str | None,
    value: Any,
    parameter: str,
    registry: PredicateOperatorRegistry | None,
) -> None:
    column = builder.resolve(name)
    predicate = build_predicate(column, operator, value, parameter, registry=registry)
    if predicate is None:
        logger.debug("Skipped criterion on %s (empty value)", name)
        return
    builder.and_where(predicate)
    logger.debug("Applied %s criterion on %s", operator, name)
