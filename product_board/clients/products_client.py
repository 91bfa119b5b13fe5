"""Async HTTP client for the remote /api/products resource."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaError

from product_board.core.config import Settings, get_settings
from product_board.core.errors import ServerError, TransportError
from product_board.schemas.product import Product, ProductPayload

logger = logging.getLogger(__name__)

_product_list = TypeAdapter(list[Product])


class ProductsClient:
    """Thin wrapper around httpx.AsyncClient that speaks the products contract.

    Every method raises TransportError when no response arrives and
    ServerError for non-2xx statuses or bodies that fail the Product schema.
    Callers decide whether to surface or swallow those.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            base_url=self.settings.api_base_url,
            timeout=self.settings.request_timeout,
            transport=transport,
            headers={
                "Accept": "application/json",
                "User-Agent": "Product-Board/1.0",
            },
        )
        self._path = self.settings.products_path

    async def __aenter__(self) -> "ProductsClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    def _item_path(self, product_id: str) -> str:
        escaped = quote(product_id, safe="")
        return f"{self._path}/{escaped}"

    async def _send(
        self,
        operation: str,
        method: str,
        url: str,
        *,
        payload: ProductPayload | None = None,
    ) -> httpx.Response:
        try:
            response = await self._http.request(
                method,
                url,
                json=payload.model_dump() if payload is not None else None,
            )
        except httpx.TimeoutException as e:
            raise TransportError(
                f"Request timeout after {self.settings.request_timeout}s",
                operation=operation,
            ) from e
        except httpx.RequestError as e:
            raise TransportError(f"Request failed: {e}", operation=operation) from e

        if not response.is_success:
            raise ServerError(
                f"HTTP {response.status_code}: {response.text[:200]}",
                operation=operation,
                status_code=response.status_code,
            )
        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    @staticmethod
    def _json(response: httpx.Response, operation: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ServerError(
                "Response body is not valid JSON",
                operation=operation,
                status_code=response.status_code,
            ) from e

    def _parse_product(self, response: httpx.Response, operation: str) -> Product:
        data = self._json(response, operation)
        try:
            return Product.model_validate(data)
        except SchemaError as e:
            raise ServerError(
                f"Malformed product in response: {e.error_count()} error(s)",
                operation=operation,
                status_code=response.status_code,
            ) from e

    async def list_products(self) -> list[Product]:
        """GET the whole collection in server order."""
        response = await self._send("list", "GET", self._path)
        data = self._json(response, "list")
        try:
            return _product_list.validate_python(data)
        except SchemaError as e:
            raise ServerError(
                f"Malformed product list in response: {e.error_count()} error(s)",
                operation="list",
                status_code=response.status_code,
            ) from e

    async def create_product(self, payload: ProductPayload) -> Product:
        response = await self._send("create", "POST", self._path, payload=payload)
        return self._parse_product(response, "create")

    async def update_product(self, product_id: str, payload: ProductPayload) -> Product:
        response = await self._send(
            "update", "PUT", self._item_path(product_id), payload=payload
        )
        return self._parse_product(response, "update")

    async def delete_product(self, product_id: str) -> None:
        """DELETE one product; any 2xx status counts as success, the body is ignored."""
        await self._send("remove", "DELETE", self._item_path(product_id))
