"""Product — an item the storefront sells."""

from pydantic import BaseModel, Field


class Product(BaseModel):
    id: str
    name: str
    price: float = Field(ge=0)
    description: str | None = None
    sku: str
    in_stock: bool = True
