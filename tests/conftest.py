"""Shared fixtures: in-memory SQLite session seeded with people and articles."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from sample_models import ArticleRecord, Base, MembershipRecord, PersonRecord

if TYPE_CHECKING:
    from collections.abc import Generator

    from sqlalchemy import Engine


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    eng = create_engine("sqlite://")
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


def _seed(session: Session) -> None:
    alice = PersonRecord(id=1, name="Alice", age=30, email="alice@example.com")
    bob = PersonRecord(id=2, name="Bob", age=17, email=None)
    carol = PersonRecord(
        id=3, name="Carol", age=45, email="carol@example.com", status="archived"
    )
    dave = PersonRecord(id=4, name="Dave", age=None, email="dave@example.com")
    bobby = PersonRecord(id=5, name="Bobby", age=22, email="bobby@example.com")
    session.add_all([alice, bob, carol, dave, bobby])
    session.add_all(
        [
            ArticleRecord(id=1, title="SQL basics", price=10, author=alice),
            ArticleRecord(id=2, title="Joins", price=25, author=alice),
            ArticleRecord(id=3, title="Indexes", price=40, author=alice),
            ArticleRecord(id=4, title="Hello", price=5, author=bob),
            ArticleRecord(id=5, title="Archiving", price=15, author=carol),
            ArticleRecord(id=6, title="Retention", price=30, author=carol),
            ArticleRecord(id=7, title="Paging", price=50, author=bobby),
        ]
    )
    session.add_all(
        [
            MembershipRecord(group="admins", person_id=1, role="owner"),
            MembershipRecord(group="admins", person_id=3, role="member"),
            MembershipRecord(group="editors", person_id=1, role="member"),
        ]
    )
    session.commit()
    session.expunge_all()


@pytest.fixture
def session(engine: Engine) -> Generator[Session, None, None]:
    with Session(engine, expire_on_commit=False) as sess:
        _seed(sess)
        yield sess
