"""Shared fixtures: settings, an in-memory stub API and boards wired to it."""

from datetime import datetime, timedelta, timezone

import httpx
import pytest
import pytest_asyncio

from product_board.clients.products_client import ProductsClient
from product_board.core.config import Settings
from product_board.schemas.product import Product
from product_board.services.product_board import ProductBoard
from product_board.stub_api.main import create_app
from product_board.stub_api.schemas import ProductCreate
from product_board.stub_api.store import ProductStore

BASE_URL = "http://testserver"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        api_base_url=BASE_URL,
        products_path="/api/products",
        items_per_page=5,
        request_timeout=5,
        reset_page_on_search=False,
    )


@pytest.fixture
def store() -> ProductStore:
    return ProductStore()


@pytest.fixture
def stub_app(settings, store):
    return create_app(settings, store)


@pytest.fixture
def seed_store(store):
    """Insert `count` products named "Item A", "Item B", ..."""

    def _seed(count: int) -> list[str]:
        ids = []
        for i in range(count):
            product = store.create(
                ProductCreate(name=f"Item {chr(65 + i)}", weight=i + 1, price=1.5 * (i + 1))
            )
            ids.append(product.id)
        return ids

    return _seed


@pytest_asyncio.fixture
async def board(settings, stub_app):
    client = ProductsClient(settings, transport=httpx.ASGITransport(app=stub_app))
    async with client:
        yield ProductBoard(client)


@pytest.fixture
def recording_transport():
    """MockTransport that records requests and answers from a swappable handler."""

    class Recorder:
        def __init__(self) -> None:
            self.requests: list[httpx.Request] = []
            self.handler = lambda request: httpx.Response(200, json=[])

        async def __call__(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            result = self.handler(request)
            if hasattr(result, "__await__"):
                result = await result
            return result

    recorder = Recorder()
    recorder.transport = httpx.MockTransport(recorder)
    return recorder


@pytest_asyncio.fixture
async def mock_board(settings, recording_transport):
    client = ProductsClient(settings, transport=recording_transport.transport)
    async with client:
        yield ProductBoard(client)


@pytest.fixture
def make_product():
    """Build Product instances with sequential creation times."""
    start = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    counter = {"n": 0}

    def _make(name: str = "Widget", weight: float = 2, price: float = 9.99, id: str | None = None) -> Product:
        counter["n"] += 1
        n = counter["n"]
        return Product(
            id=id or f"p{n}",
            name=name,
            weight=weight,
            price=price,
            created_at=start + timedelta(minutes=n),
        )

    return _make
