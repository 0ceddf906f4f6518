# tests/conftest.py

import os

# Keep the module level engine off the developer's database file
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from tasktracker.board.backends import HttpTaskBackend
from tasktracker.db.config import build_engine, get_session
from tasktracker.db.init import init_db
from tasktracker.main import app
from tasktracker.services.task_service import TaskService


@pytest.fixture()
def engine():
    """A fresh in-memory database per test."""
    test_engine = build_engine("sqlite://")
    init_db(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as db:
        yield db


@pytest.fixture()
def service(session) -> TaskService:
    return TaskService(session)


@pytest.fixture()
def client(engine):
    """TestClient whose requests use the in-memory database."""
    def override_get_session():
        with Session(engine) as db:
            yield db

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def http_backend(client) -> HttpTaskBackend:
    # TestClient is an httpx.Client, so the real HTTP backend runs in-process
    return HttpTaskBackend(client)
