# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator
from datetime import UTC, datetime, timedelta
from itertools import count
from types import SimpleNamespace

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")

from community_reports.db.session import Base
from community_reports.db.session import get_db as app_get_session
from community_reports.main import app as fastapi_app
from community_reports.models import (
    Comment,
    CommentAggregates,
    CommentReport,
    Community,
    CommunityModerator,
    LocalUser,
    Person,
    Post,
    PostAggregates,
    PostReport,
)

TEST_DB_URL = "sqlite://"

# Reports get strictly increasing timestamps so ordering assertions are deterministic.
BASE_TIME = datetime(2024, 1, 1, tzinfo=UTC)


class EntityFactory:
    """Persist people, communities, content and reports for a test."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self._names = count(1)
        self._clock = count(1)

    def tick(self) -> datetime:
        """Return the next timestamp, one minute after the previous one."""
        return BASE_TIME + timedelta(minutes=next(self._clock))

    def _add(self, obj):
        self.db.add(obj)
        self.db.flush()
        self.db.refresh(obj)
        return obj

    def person(self, name: str | None = None, *, admin: bool = False) -> Person:
        person = self._add(Person(name=name or f"person_{next(self._names)}"))
        self._add(LocalUser(person_id=person.id, admin=admin))
        return person

    def community(self, name: str | None = None) -> Community:
        name = name or f"community_{next(self._names)}"
        return self._add(Community(name=name, title=name.title()))

    def moderator(self, community: Community, person: Person) -> CommunityModerator:
        return self._add(CommunityModerator(community_id=community.id, person_id=person.id))

    def post(self, creator: Person, community: Community, name: str = "A test post") -> Post:
        post = self._add(Post(name=name, creator_id=creator.id, community_id=community.id))
        self._add(PostAggregates(post_id=post.id))
        return post

    def comment(self, creator: Person, post: Post, content: str = "A test comment") -> Comment:
        comment = self._add(Comment(creator_id=creator.id, post_id=post.id, content=content))
        self._add(CommentAggregates(comment_id=comment.id))
        return comment

    def comment_report(
        self,
        reporter: Person,
        comment: Comment,
        reason: str = "spam",
    ) -> CommentReport:
        return self._add(
            CommentReport(
                creator_id=reporter.id,
                comment_id=comment.id,
                original_comment_text=comment.content,
                reason=reason,
                published=self.tick(),
            )
        )

    def post_report(self, reporter: Person, post: Post, reason: str = "spam") -> PostReport:
        return self._add(
            PostReport(
                creator_id=reporter.id,
                post_id=post.id,
                original_post_name=post.name,
                original_post_url=post.url,
                original_post_body=post.body,
                reason=reason,
                published=self.tick(),
            )
        )


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def factory(db_session: Session) -> EntityFactory:
    """Return an entity factory bound to the test session."""
    return EntityFactory(db_session)


@pytest.fixture()
def moderated_comment(factory: EntityFactory, db_session: Session) -> SimpleNamespace:
    """A comment by a moderator of its community, reported by two people.

    ``author`` moderates ``community`` and wrote ``comment``. ``first`` and
    ``second`` each filed one report, ``second`` one minute later.
    """
    author = factory.person("timmy")
    first_reporter = factory.person("sara")
    second_reporter = factory.person("jessica")
    community = factory.community("test_community")
    factory.moderator(community, author)
    post = factory.post(author, community)
    comment = factory.comment(author, post, "A test comment 32")
    first = factory.comment_report(first_reporter, comment, "from sara")
    second = factory.comment_report(second_reporter, comment, "from jessica")
    db_session.commit()
    return SimpleNamespace(
        author=author,
        first_reporter=first_reporter,
        second_reporter=second_reporter,
        community=community,
        post=post,
        comment=comment,
        first=first,
        second=second,
    )
