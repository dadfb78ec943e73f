"""
Criteria and pagination exception hierarchy.

All exceptions inherit from ``CriteriaError`` and provide ``to_dict()``
for API-friendly error responses.  Lookup errors carry fuzzy-matched
suggestions.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class CriteriaError(Exception):
    """Base exception for all criteria and pagination errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


# ---------------------------------------------------------------------------
# Criteria compilation
# ---------------------------------------------------------------------------


class InvalidOperatorError(CriteriaError):
    """
    Unknown operator symbol.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    def __init__(self, operator: object, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(
            str(operator), valid_operators, n=3, cutoff=0.6
        )

        message = f"Unknown operator: '{operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid operators: {', '.join(sorted(valid_operators))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_OPERATOR",
            "operator": str(self.operator),
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }


class MalformedBetweenError(CriteriaError):
    """A BETWEEN predicate received fewer than two bounds."""

    def __init__(self, property_name: str, value: object) -> None:
        self.property_name = property_name
        self.value = value
        super().__init__(
            f"BETWEEN on '{property_name}' needs two bounds, got {value!r}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MALFORMED_BETWEEN",
            "property": self.property_name,
            "value": repr(self.value),
        }


class CriteriaLengthMismatchError(CriteriaError):
    """Parallel keys / operators / values sequences do not line up."""

    def __init__(self, keys: int, operators: int, values: int) -> None:
        self.lengths = {"keys": keys, "operators": operators, "values": values}
        super().__init__(
            "operators must match keys in length and values must not be "
            f"shorter (got {keys} keys, {operators} operators, {values} values)"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CRITERIA_LENGTH_MISMATCH",
            "lengths": dict(self.lengths),
        }


class InvalidSortDirectionError(CriteriaError):
    """Sort direction is neither ASC nor DESC."""

    def __init__(self, property_name: str, direction: object) -> None:
        self.property_name = property_name
        self.direction = direction
        super().__init__(
            f"Invalid sort direction {direction!r} for '{property_name}'. "
            "Expected 'ASC' or 'DESC'."
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_SORT_DIRECTION",
            "property": self.property_name,
            "direction": str(self.direction),
        }


class UnknownAliasError(CriteriaError):
    """A qualified name refers to an alias the query does not declare."""

    def __init__(self, alias: str, known_aliases: list[str]) -> None:
        self.alias = alias
        self.known_aliases = known_aliases
        self.suggestions = get_close_matches(alias, known_aliases, n=3, cutoff=0.6)

        message = f"Unknown alias '{alias}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Declared aliases: {', '.join(sorted(known_aliases))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNKNOWN_ALIAS",
            "alias": self.alias,
            "suggestions": self.suggestions,
            "known_aliases": sorted(self.known_aliases),
        }


class UnknownPropertyError(CriteriaError):
    """
    Qualified name does not resolve to a mapped attribute.

    Example error message::

        Unknown property 'nmae' on alias 'person' (PersonRecord).
        Did you mean: name?
    """

    def __init__(
        self,
        qualified_name: str,
        alias: str,
        model_name: str,
        available_fields: list[str],
    ) -> None:
        self.qualified_name = qualified_name
        self.alias = alias
        self.model_name = model_name
        self.available_fields = available_fields
        attr = qualified_name.partition(".")[2] or qualified_name
        self.suggestions = get_close_matches(attr, available_fields, n=3, cutoff=0.6)

        message = (
            f"Unknown property '{attr}' on alias '{alias}' ({model_name})."
        )
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNKNOWN_PROPERTY",
            "property": self.qualified_name,
            "alias": self.alias,
            "model": self.model_name,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }


class DuplicateParameterError(CriteriaError):
    """Two predicates on the same query bind one parameter name."""

    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(f"Parameter ':{parameter}' is already bound on this query")


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


class PaginationError(CriteriaError):
    """Base class for pager errors."""


class NotValidMaxPerPageError(PaginationError):
    """``max_per_page`` must be a positive integer."""


class NotValidCurrentPageError(PaginationError):
    """``current_page`` must be a positive integer."""


class OutOfRangeCurrentPageError(PaginationError):
    """Requested page is past the last page."""

    def __init__(self, page: int, nb_pages: int) -> None:
        self.page = page
        self.nb_pages = nb_pages
        super().__init__(f"Page {page} does not exist (last page is {nb_pages})")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OUT_OF_RANGE_PAGE",
            "page": self.page,
            "nb_pages": self.nb_pages,
        }


class OutOfBoundsPositionError(PaginationError):
    """Item position is past the end of the result set."""

    def __init__(self, position: int, nb_results: int) -> None:
        self.position = position
        self.nb_results = nb_results
        super().__init__(
            f"Item at position {position} does not exist ({nb_results} results)"
        )
