"""In-memory product storage backing the stub API."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from product_board.stub_api.schemas import ProductCreate, ProductRead


class ProductStore:
    """Insertion-ordered dict of products keyed by a generated hex id."""

    def __init__(self) -> None:
        self._items: dict[str, ProductRead] = {}

    def __len__(self) -> int:
        return len(self._items)

    def list(self) -> list[ProductRead]:
        return list(self._items.values())

    def get(self, product_id: str) -> ProductRead | None:
        return self._items.get(product_id)

    def create(self, payload: ProductCreate) -> ProductRead:
        product = ProductRead(
            id=uuid.uuid4().hex,
            name=payload.name,
            weight=payload.weight,
            price=payload.price,
            created_at=datetime.now(timezone.utc),
        )
        self._items[product.id] = product
        return product

    def update(self, product_id: str, payload: ProductCreate) -> ProductRead | None:
        existing = self._items.get(product_id)
        if existing is None:
            return None
        updated = existing.model_copy(
            update={"name": payload.name, "weight": payload.weight, "price": payload.price}
        )
        self._items[product_id] = updated
        return updated

    def delete(self, product_id: str) -> bool:
        return self._items.pop(product_id, None) is not None

    def clear(self) -> None:
        self._items.clear()
