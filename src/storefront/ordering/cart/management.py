"""Cart state machine — add, increment, decrement, remove and clear.

Every operation re-reads the session first, mutates the cart, writes it back
together with the badge quantity, then notifies the ``on_change`` listener
(the view re-render). Removals, explicit or by decrementing below one, need
the ``confirm`` callback to agree; a declined removal leaves the cart as it
was and still notifies the listener.
"""

from collections.abc import Callable

from protean.exceptions import ValidationError

from storefront.catalogue.product.product import Product
from storefront.ordering.cart.cart import Cart, CartEntry, CartStatus
from storefront.ordering.cart.session import CartSession
from storefront.ordering.domain import logger

ConfirmRemoval = Callable[[CartEntry], bool]
CartListener = Callable[[Cart], None]


def _always_confirm(entry: CartEntry) -> bool:  # noqa: ARG001
    return True


class CartManager:
    def __init__(
        self,
        session: CartSession,
        confirm: ConfirmRemoval = _always_confirm,
        on_change: CartListener | None = None,
    ):
        self.session = session
        self._confirm = confirm
        self._on_change = on_change

    # -------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------
    @property
    def cart(self) -> Cart:
        return self.session.get()

    @property
    def entries(self) -> list[CartEntry]:
        return self.cart.entries

    @property
    def quantity(self) -> int:
        return self.session.quantity()

    @property
    def subtotal(self) -> float:
        return self.cart.subtotal

    @property
    def state(self) -> CartStatus:
        return self.cart.status

    def _save(self, cart: Cart) -> Cart:
        self.session.set(cart)
        return self._notify(cart)

    def _notify(self, cart: Cart) -> Cart:
        if self._on_change is not None:
            self._on_change(cart)
        return cart

    # -------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------
    def add(self, product: Product) -> Cart:
        """Add one unit of ``product``; an existing line for the product is incremented."""
        if not product.in_stock:
            raise ValidationError({"product": [f"{product.name} is out of stock"]})

        cart = self.cart
        existing = cart.find(product.id)
        if existing:
            existing.quantity += 1
        else:
            cart.entries.append(
                CartEntry(
                    id=product.id,
                    name=product.name,
                    sku=product.sku,
                    price=product.price,
                    description=product.description,
                    quantity=1,
                )
            )

        logger.debug("cart_item_added", product_id=product.id, quantity=cart.quantity)
        return self._save(cart)

    def increment(self, product_id: str) -> Cart:
        return self._adjust(product_id, 1)

    def decrement(self, product_id: str) -> Cart:
        return self._adjust(product_id, -1)

    def _adjust(self, product_id: str, delta: int) -> Cart:
        cart = self.cart
        target = cart.find(product_id)
        if target is None:
            return cart

        next_quantity = target.quantity + delta
        if next_quantity < 1:
            if not self._confirm(target):
                return self._notify(cart)
            return self._save(cart.without(product_id))

        target.quantity = next_quantity
        return self._save(cart)

    def remove(self, product_id: str) -> Cart:
        cart = self.cart
        target = cart.find(product_id)
        if target is None or not self._confirm(target):
            return self._notify(cart)
        return self._save(cart.without(product_id))

    def clear(self) -> Cart:
        self.session.clear()
        return self._notify(Cart())
