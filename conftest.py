"""Shared test fixtures: a throwaway SQLite database per test."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.api.deps import get_db
from app.crud import crud_blog_category, crud_blog_post, crud_blog_tag
from app.database import Base
from app.main import app
from app.models import User
from app.schemas import BlogCategoryCreate, BlogPostCreate, BlogTagCreate


@pytest.fixture
def engine(tmp_path):
    """File-backed SQLite so worker threads see the same data."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'blog_test.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def author(db):
    user = User(name="Ada Lovelace", email="ada@example.com", image="https://example.com/ada.png")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def other_author(db):
    user = User(name="Grace Hopper", email="grace@example.com")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def make_post(db, author):
    """Factory creating posts through the CRUD layer."""

    def _make_post(title="Hello World!", **fields):
        fields.setdefault("content", f"Body of {title}")
        fields.setdefault("author_id", author.id)
        return crud_blog_post.create_post(db, obj_in=BlogPostCreate(title=title, **fields))

    return _make_post


@pytest.fixture
def make_category(db):
    def _make_category(name="Tech", description=None):
        return crud_blog_category.create_category(
            db, obj_in=BlogCategoryCreate(name=name, description=description)
        )

    return _make_category


@pytest.fixture
def make_tag(db):
    def _make_tag(name):
        return crud_blog_tag.create_tag(db, obj_in=BlogTagCreate(name=name))

    return _make_tag


@pytest.fixture
def client(session_factory):
    """TestClient whose requests use the test database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
