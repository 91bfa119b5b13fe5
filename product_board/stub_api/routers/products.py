"""CRUD endpoints for the in-memory products resource."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from product_board.stub_api.schemas import ProductCreate, ProductRead
from product_board.stub_api.store import ProductStore

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(request: Request) -> ProductStore:
    """FastAPI dependency returning the store attached to the app."""
    return request.app.state.store


@router.get(
    "",
    summary="List all products in insertion order",
    response_model=list[ProductRead],
)
async def list_products(store: ProductStore = Depends(get_store)) -> list[ProductRead]:
    return store.list()


@router.post(
    "",
    summary="Create a product",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductRead,
)
async def create_product(
    payload: ProductCreate,
    store: ProductStore = Depends(get_store),
) -> ProductRead:
    """Assign id and creation timestamp, then return the stored record."""
    product = store.create(payload)
    logger.info(f"Created product {product.id}")
    return product


@router.put(
    "/{product_id}",
    summary="Replace name, weight and price of a product",
    response_model=ProductRead,
)
async def update_product(
    product_id: str,
    payload: ProductCreate,
    store: ProductStore = Depends(get_store),
) -> ProductRead:
    product = store.update(product_id, payload)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    logger.info(f"Updated product {product_id}")
    return product


@router.delete(
    "/{product_id}",
    summary="Delete a product",
)
async def delete_product(
    product_id: str,
    store: ProductStore = Depends(get_store),
) -> Response:
    if not store.delete(product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    logger.info(f"Deleted product {product_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
