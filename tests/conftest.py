# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

os.environ.setdefault("LINKSHARE_STORE_BACKEND", "memory")

from linkshare.api.v1.dependencies import get_article_service_dep
from linkshare.main import app as fastapi_app
from linkshare.services.news import ArticleService
from linkshare.store.memory import InMemoryStore

START_TIME = 1_700_000_000


class FakeClock:
    """Controllable replacement for ``time.time``."""

    def __init__(self, start: float = START_TIME) -> None:
        self.now = float(start)

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> InMemoryStore:
    """Return an empty in-memory store sharing the test clock."""
    return InMemoryStore(clock=clock)


@pytest.fixture()
def service(store: InMemoryStore, clock: FakeClock) -> ArticleService:
    return ArticleService(store, clock, page_size=25)


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_service_dependency(app: FastAPI, service: ArticleService) -> Iterator[None]:
    app.dependency_overrides[get_article_service_dep] = lambda: service
    try:
        yield
    finally:
        app.dependency_overrides.pop(get_article_service_dep, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def posted(service: ArticleService, clock: FakeClock):
    """Post three articles one minute apart and return them oldest first."""
    articles = []
    for index, author in enumerate(["alice", "bob", "carol"]):
        articles.append(
            service.post_article(author, f"Article {index}", f"https://example.com/{index}")
        )
        clock.advance(60)
    return articles
