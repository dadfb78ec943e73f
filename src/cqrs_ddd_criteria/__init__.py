"""Criteria-to-SQLAlchemy filtering, sorting and pagination."""

from __future__ import annotations

from .compiler import (
    apply_criteria,
    apply_criterion_list,
    apply_operator_criteria,
    apply_sorting,
    build_predicate,
)
from .criteria import Criterion, SortSpec, criteria_from_sequences, sort_specs
from .exceptions import (
    CriteriaError,
    CriteriaLengthMismatchError,
    DuplicateParameterError,
    InvalidOperatorError,
    InvalidSortDirectionError,
    MalformedBetweenError,
    NotValidCurrentPageError,
    NotValidMaxPerPageError,
    OutOfBoundsPositionError,
    OutOfRangeCurrentPageError,
    PaginationError,
    UnknownAliasError,
    UnknownPropertyError,
)
from .operators import BetweenSource, CriteriaOperator, SortDirection
from .options import PaginatorOptions
from .pagination import (
    PageSnapshot,
    Pager,
    PaginationAdapter,
    SelectAdapter,
    SequenceAdapter,
)
from .predicates import DEFAULT_REGISTRY, build_default_registry
from .query import QueryBuilder
from .repository import EntityRepository
from .strategy import Predicate, PredicateOperator, PredicateOperatorRegistry
from .utils import parameter_name, qualify

__all__ = [
    # Repository
    "EntityRepository",
    "PaginatorOptions",
    "QueryBuilder",
    # Criteria
    "BetweenSource",
    "Criterion",
    "CriteriaOperator",
    "SortDirection",
    "SortSpec",
    "criteria_from_sequences",
    "sort_specs",
    "parameter_name",
    "qualify",
    # Compilation
    "apply_criteria",
    "apply_criterion_list",
    "apply_operator_criteria",
    "apply_sorting",
    "build_predicate",
    "DEFAULT_REGISTRY",
    "build_default_registry",
    "Predicate",
    "PredicateOperator",
    "PredicateOperatorRegistry",
    # Pagination
    "PageSnapshot",
    "Pager",
    "PaginationAdapter",
    "SelectAdapter",
    "SequenceAdapter",
    # Exceptions
    "CriteriaError",
    "CriteriaLengthMismatchError",
    "DuplicateParameterError",
    "InvalidOperatorError",
    "InvalidSortDirectionError",
    "MalformedBetweenError",
    "NotValidCurrentPageError",
    "NotValidMaxPerPageError",
    "OutOfBoundsPositionError",
    "OutOfRangeCurrentPageError",
    "PaginationError",
    "UnknownAliasError",
    "UnknownPropertyError",
]
