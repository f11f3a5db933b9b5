"""Catalogue providers.

The ordering context only ever reads the catalogue. ``CatalogueProvider`` is
the seam; ``StaticCatalogue`` serves the fixed demo product list.
"""

from typing import Protocol

from storefront.catalogue.product.product import Product


class CatalogueProvider(Protocol):
    def list_products(self) -> list[Product]: ...

    def get_product(self, product_id: str) -> Product | None: ...


def _product(index: int, name: str, price: float, description: str, sku: str, in_stock: bool = True) -> Product:
    return Product(
        id=f"prod-{index}",
        name=name,
        price=price,
        description=description,
        sku=sku,
        in_stock=in_stock,
    )


DEMO_PRODUCTS = (
    _product(1, "4K Monitor", 399.99, "27-inch 4K UHD monitor with HDR support", "4K-27"),
    _product(2, "Business Laptop", 899.99, "Lightweight laptop perfect for professionals", "BL-01"),
    _product(3, "Cable Management Kit", 19.99, "Cable management kit for clean desk setups", "CM-05", in_stock=False),
    _product(4, "Desk Lamp", 54.99, "LED desk lamp with adjustable brightness", "DL-10"),
    _product(5, "Ergonomic Chair", 299.99, "Mesh office chair with lumbar support", "EC-22"),
    _product(6, "Gaming Computer", 1299.99, "High-performance gaming desktop with RGB lighting", "GC-88"),
    _product(7, "Gaming Headset", 89.99, "Surround sound headset with noise cancellation", "GH-19"),
    _product(8, "Graphics Tablet", 249.99, "Professional drawing tablet with pressure sensitivity", "GT-40"),
    _product(9, "HD Webcam", 79.99, "1080p webcam with built-in microphone", "HW-12", in_stock=False),
    _product(10, "Mechanical Keyboard", 129.99, "Mechanical keyboard with Cherry MX switches", "MK-33"),
    _product(11, "Portable SSD", 159.99, "1TB portable SSD with USB-C connectivity", "SSD-1TB"),
    _product(12, "Standing Desk", 449.99, "Electric adjustable standing desk with presets", "SD-55", in_stock=False),
    _product(13, "USB-C Hub", 39.99, "7-in-1 USB-C hub with HDMI and card reader", "HUB-07", in_stock=False),
    _product(14, "Wireless Charger", 29.99, "Wireless charging pad for phones and earbuds", "WC-09"),
    _product(15, "Wireless Mouse", 49.99, "Ergonomic mouse with precision tracking", "WM-15"),
)


class StaticCatalogue:
    def __init__(self, products=DEMO_PRODUCTS):
        self._products = {product.id: product for product in products}

    def list_products(self) -> list[Product]:
        return [product.model_copy() for product in self._products.values()]

    def get_product(self, product_id: str) -> Product | None:
        product = self._products.get(product_id)
        return product.model_copy() if product else None
