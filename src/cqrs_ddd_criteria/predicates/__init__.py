"""
Predicate implementations and default registry.

Usage::

    from cqrs_ddd_criteria.predicates import DEFAULT_REGISTRY

    predicate = DEFAULT_REGISTRY.build(CriteriaOperator.GT, column, 18, "age0")
"""

from __future__ import annotations

from ..strategy import PredicateOperatorRegistry
from .set import BetweenOperator
from .standard import (
    EqualOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
)
from .string import LikeOperator


def build_default_registry() -> PredicateOperatorRegistry:
    """Create a registry with every built-in predicate operator."""
    registry = PredicateOperatorRegistry()
    registry.register_all(
        EqualOperator(),
        GreaterThanOperator(),
        LessThanOperator(),
        GreaterEqualOperator(),
        LessEqualOperator(),
        LikeOperator(),
        BetweenOperator(),
    )
    return registry


DEFAULT_REGISTRY: PredicateOperatorRegistry = build_default_registry()

__all__ = [
    "DEFAULT_REGISTRY",
    "BetweenOperator",
    "EqualOperator",
    "GreaterEqualOperator",
    "GreaterThanOperator",
    "LessEqualOperator",
    "LessThanOperator",
    "LikeOperator",
    "build_default_registry",
]
