from pytest_archon import archrule


def test_exceptions_are_leaf() -> None:
    """
    Exceptions are imported from everywhere and must not import back into
    the package or any third-party library.
    """
    (
        archrule("exceptions_are_leaf")
        .match("cqrs_ddd_criteria.exceptions")
        .should_not_import("cqrs_ddd_criteria.*")
        .should_not_import("sqlalchemy*")
        .should_not_import("pydantic*")
        .check("cqrs_ddd_criteria", only_direct_imports=True)
    )


def test_criteria_model_is_orm_free() -> None:
    """
    Operators, criterion records, options and name helpers describe a query
    without touching SQLAlchemy.
    """
    (
        archrule("criteria_model_is_orm_free")
        .match("cqrs_ddd_criteria.operators")
        .match("cqrs_ddd_criteria.criteria")
        .match("cqrs_ddd_criteria.options")
        .match("cqrs_ddd_criteria.utils")
        .should_not_import("sqlalchemy*")
        .check("cqrs_ddd_criteria", only_direct_imports=True)
    )


def test_predicates_do_not_know_about_pagination() -> None:
    """
    Predicate strategies and the compiler only build WHERE/ORDER BY clauses.
    """
    (
        archrule("predicate_layering")
        .match("cqrs_ddd_criteria.predicates*")
        .match("cqrs_ddd_criteria.strategy")
        .match("cqrs_ddd_criteria.compiler")
        .should_not_import("cqrs_ddd_criteria.pagination*")
        .should_not_import("cqrs_ddd_criteria.repository")
        .check("cqrs_ddd_criteria", only_direct_imports=True)
    )


def test_pagination_is_independent_of_criteria() -> None:
    """
    Pagers and adapters page any statement; they never compile criteria.
    """
    (
        archrule("pagination_layering")
        .match("cqrs_ddd_criteria.pagination*")
        .should_not_import("cqrs_ddd_criteria.compiler")
        .should_not_import("cqrs_ddd_criteria.predicates*")
        .should_not_import("cqrs_ddd_criteria.criteria")
        .should_not_import("cqrs_ddd_criteria.repository")
        .check("cqrs_ddd_criteria", only_direct_imports=True)
    )
