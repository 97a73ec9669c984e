# This project was developed with assistance from AI tools.
"""Product schemas."""

from pydantic import BaseModel


class Product(BaseModel):
    """A product row as returned to clients.

    ``id`` and ``created_at`` are store-managed columns, passed through when
    the row carries them.
    """

    id: int | None = None
    sku: str
    name: str
    description: str | None = None
    price: float
    created_at: str | None = None


class ProductCreate(BaseModel):
    """Body for POST /api/products.

    Every field is optional at the parsing layer so the route can answer a
    missing field with its own 400 message instead of a schema error.
    """

    sku: str | None = None
    name: str | None = None
    description: str | None = None
    price: float | None = None

    def is_complete(self) -> bool:
        return bool(self.sku and self.name and self.price)


class ProductUpdate(BaseModel):
    """Body for PUT /api/products/{sku}."""

    name: str | None = None
    description: str | None = None
    price: float | None = None

    def is_complete(self) -> bool:
        return bool(self.name and self.price)
