"""Shared fixtures: a seeded campus store in a temp dir and an API client bound to it."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from campus_assistant.api.handlers import get_delegate
from campus_assistant.core.campus_db import CampusStore
from campus_assistant.main import create_app


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "campus.db"


@pytest.fixture
def store(db_path: Path) -> CampusStore:
    s = CampusStore(db_path)
    s.init(seed=True)
    return s


@pytest.fixture
def client(db_path: Path) -> Iterator[TestClient]:
    """Client with augmentation disabled regardless of env keys."""
    app = create_app(db_path=db_path, seed=True)
    app.dependency_overrides[get_delegate] = lambda: None
    with TestClient(app) as c:
        yield c
