import random
from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from app.adapters.recommender.popular_random import PopularRandomRecommender
from app.domain.catalog import Catalog
from app.domain.models import Book
from app.main import create_app
from app.services.catalog import CatalogService

BASE = "http://test"


def _seed_books(n: int) -> list[Book]:
    """Books 1..n, one copy each, never checked out."""
    return [Book(id=i, title=f"B{i}") for i in range(1, n + 1)]


@pytest.fixture
def seed_books() -> Callable[[int], list[Book]]:
    return _seed_books


@pytest.fixture
def make_service() -> Callable[..., CatalogService]:
    def _make(books: list[Book], seed: int | None = None) -> CatalogService:
        recommender = PopularRandomRecommender(rng=random.Random(seed))
        return CatalogService(Catalog(books), recommender)

    return _make


@pytest.fixture
def service(make_service) -> CatalogService:
    return make_service(_seed_books(12), seed=7)


@pytest.fixture
async def client(service: CatalogService) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=create_app(service))
    async with AsyncClient(transport=transport, base_url=BASE) as c:
        yield c
