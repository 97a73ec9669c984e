# This project was developed with assistance from AI tools.
"""Product CRUD routes.

Missing required fields are rejected with 400 before the store is touched.
Store failures are logged and surfaced as 500 with a per-endpoint message;
the one exception is a single-product lookup that matches nothing (404).
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from ..schemas.product import Product, ProductCreate, ProductUpdate
from ..services.store import (
    PRODUCTS_TABLE,
    RecordNotFoundError,
    StoreError,
    TableStore,
    get_store,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _store_failure(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


@router.get("/products", response_model=list[Product])
async def list_products(store: TableStore = Depends(get_store)) -> list[dict[str, Any]]:
    """Return every product."""
    try:
        return await store.select_all(PRODUCTS_TABLE)
    except StoreError as exc:
        logger.exception("Failed to list products")
        raise _store_failure("Error fetching products") from exc


@router.get("/products/{sku}", response_model=Product)
async def get_product(sku: str, store: TableStore = Depends(get_store)) -> dict[str, Any]:
    """Return the product with the given SKU, or 404."""
    try:
        return await store.select_one(PRODUCTS_TABLE, "sku", sku)
    except RecordNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found.",
        ) from exc
    except StoreError as exc:
        logger.exception("Failed to fetch product sku=%s", sku)
        raise _store_failure("Error fetching product") from exc


@router.post("/products", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(
    body: ProductCreate, store: TableStore = Depends(get_store)
) -> dict[str, Any]:
    """Create a product. ``sku``, ``name`` and ``price`` are required."""
    if not body.is_complete():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="SKU, name and price are required.",
        )
    try:
        return await store.insert(PRODUCTS_TABLE, body.model_dump(exclude_unset=True))
    except StoreError as exc:
        logger.exception("Failed to create product sku=%s", body.sku)
        raise _store_failure("Error creating product") from exc


@router.put("/products/{sku}", response_model=Product | None)
async def update_product(
    sku: str, body: ProductUpdate, store: TableStore = Depends(get_store)
) -> dict[str, Any] | None:
    """Update name, price and (if sent) description of a product.

    An unknown SKU is an empty update: 200 with a ``null`` body.
    """
    if not body.is_complete():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Name and price are required.",
        )
    try:
        updated = await store.update(
            PRODUCTS_TABLE, "sku", sku, body.model_dump(exclude_unset=True)
        )
    except StoreError as exc:
        logger.exception("Failed to update product sku=%s", sku)
        raise _store_failure("Error updating product") from exc

    if updated is None:
        logger.warning("Update matched no product (sku=%s)", sku)
    return updated


@router.delete("/products/{sku}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(sku: str, store: TableStore = Depends(get_store)) -> None:
    """Delete the product with the given SKU. Unknown SKUs are a no-op."""
    try:
        await store.delete(PRODUCTS_TABLE, "sku", sku)
    except StoreError as exc:
        logger.exception("Failed to delete product sku=%s", sku)
        raise _store_failure("Error deleting product") from exc
