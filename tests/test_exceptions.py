"""Tests for exceptions module."""

from __future__ import annotations

from cqrs_ddd_criteria.exceptions import (
    CriteriaError,
    CriteriaLengthMismatchError,
    InvalidOperatorError,
    InvalidSortDirectionError,
    MalformedBetweenError,
    OutOfRangeCurrentPageError,
    PaginationError,
    UnknownAliasError,
    UnknownPropertyError,
)

# -- InvalidOperatorError ----------------------------------------------------


def test_invalid_operator_to_dict():
    err = InvalidOperatorError("gtt", ["eq", "gt", "gte"])
    d = err.to_dict()
    assert d["error"] == "INVALID_OPERATOR"
    assert d["operator"] == "gtt"
    assert "gt" in d["suggestions"]


def test_invalid_operator_no_matches():
    err = InvalidOperatorError("zzzzz", ["eq", "gt"])
    assert err.suggestions == []
    assert "Did you mean" not in str(err)


# -- UnknownPropertyError / UnknownAliasError -------------------------------


def test_unknown_property_fuzzy():
    err = UnknownPropertyError(
        "person.nme", "person", "PersonRecord", ["name", "age", "email"]
    )
    assert "nme" in str(err)
    assert "name" in err.suggestions
    d = err.to_dict()
    assert d["error"] == "UNKNOWN_PROPERTY"
    assert d["available_fields"] == ["age", "email", "name"]


def test_unknown_alias_fuzzy():
    err = UnknownAliasError("persn", ["person", "article"])
    assert err.suggestions == ["person"]
    assert err.to_dict()["known_aliases"] == ["article", "person"]


# -- misc --------------------------------------------------------------------


def test_malformed_between_to_dict():
    d = MalformedBetweenError("price", [10]).to_dict()
    assert d == {"error": "MALFORMED_BETWEEN", "property": "price", "value": "[10]"}


def test_length_mismatch_reports_lengths():
    err = CriteriaLengthMismatchError(2, 1, 2)
    assert err.to_dict()["lengths"] == {"keys": 2, "operators": 1, "values": 2}


def test_invalid_sort_direction_message():
    err = InvalidSortDirectionError("name", "up")
    assert "'up'" in str(err)
    assert err.to_dict()["direction"] == "up"


def test_pagination_errors_are_criteria_errors():
    err = OutOfRangeCurrentPageError(5, 3)
    assert isinstance(err, PaginationError)
    assert isinstance(err, CriteriaError)
    assert err.to_dict() == {"error": "OUT_OF_RANGE_PAGE", "page": 5, "nb_pages": 3}


def test_base_to_dict_uses_class_name():
    d = PaginationError("boom").to_dict()
    assert d == {"error": "PaginationError", "message": "boom"}
