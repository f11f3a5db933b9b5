"""FastAPI endpoints for the Catalogue domain."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from storefront.catalogue.product.product import Product
from storefront.catalogue.product.provider import CatalogueProvider


class ProductResponse(BaseModel):
    id: str
    name: str
    price: float
    description: str | None = None
    sku: str
    in_stock: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls.model_validate(product.model_dump())


def get_catalogue(request: Request) -> CatalogueProvider:
    return request.app.state.catalogue


product_router = APIRouter(prefix="/api/products", tags=["products"])


@product_router.get("", response_model=list[ProductResponse])
async def list_products(catalogue: CatalogueProvider = Depends(get_catalogue)):
    products = [ProductResponse.from_product(product) for product in catalogue.list_products()]
    return JSONResponse(content=[product.model_dump(by_alias=True) for product in products])


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, catalogue: CatalogueProvider = Depends(get_catalogue)):
    product = catalogue.get_product(product_id)
    if product is None:
        return JSONResponse(status_code=404, content={"error": "Product not found"})
    return JSONResponse(content=ProductResponse.from_product(product).model_dump(by_alias=True))
