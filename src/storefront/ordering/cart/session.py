"""Cart session stores — local persisted cart state.

A ``CartSession`` is get/set/clear over a structured ``Cart``, independent of
where the cart is kept. ``FileCartSession`` is a durable key/value file with
two keys: the badge quantity (``qa-cart-qty``) and the entries
(``qa-cart-items``). When no durable store is usable the cart lives in
memory for the current process only.

Several processes may share one file; there is no locking, so a write from
one is only seen by another the next time it reads the file.
"""

import json
import os
from pathlib import Path
from typing import Any, Protocol

import pydantic

from storefront.ordering.cart.cart import Cart, CartEntry
from storefront.ordering.domain import logger

CART_QUANTITY_KEY = "qa-cart-qty"
CART_ITEMS_KEY = "qa-cart-items"
_PROBE_KEY = "__qa_cart_test"


class CartSession(Protocol):
    persistent: bool

    def get(self) -> Cart: ...

    def set(self, cart: Cart) -> None: ...

    def clear(self) -> None: ...

    def quantity(self) -> int: ...


class MemoryCartSession:
    """Non-persistent session; the cart is gone when the process exits."""

    persistent = False

    def __init__(self, cart: Cart | None = None):
        self._cart = cart or Cart()

    def get(self) -> Cart:
        return self._cart.model_copy(deep=True)

    def set(self, cart: Cart) -> None:
        self._cart = cart.model_copy(deep=True)

    def clear(self) -> None:
        self._cart = Cart()

    def quantity(self) -> int:
        return self._cart.quantity


def _parse_entries(raw: Any) -> list[CartEntry]:
    if not isinstance(raw, list):
        return []
    entries = []
    for item in raw:
        try:
            entries.append(CartEntry.model_validate(item))
        except pydantic.ValidationError:
            logger.warning("cart_entry_discarded", entry=item)
    return entries


class FileCartSession:
    """Durable JSON key/value file holding the cart quantity and entries."""

    persistent = True

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)

    # -------------------------------------------------------------------
    # Key/value access
    # -------------------------------------------------------------------
    def _read_all(self) -> dict[str, Any]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError):
            logger.warning("cart_store_unreadable", path=str(self.path))
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(data), encoding="utf-8")
        os.replace(tmp_path, self.path)

    def read(self, key: str) -> Any:
        return self._read_all().get(key)

    def write(self, key: str, value: Any) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)

    # -------------------------------------------------------------------
    # CartSession
    # -------------------------------------------------------------------
    def get(self) -> Cart:
        return Cart(entries=_parse_entries(self.read(CART_ITEMS_KEY)))

    def set(self, cart: Cart) -> None:
        data = self._read_all()
        data[CART_ITEMS_KEY] = [entry.model_dump() for entry in cart.entries]
        data[CART_QUANTITY_KEY] = cart.quantity
        self._write_all(data)

    def clear(self) -> None:
        self.set(Cart())

    def quantity(self) -> int:
        """The stored badge quantity; recomputed from entries when missing or invalid."""
        stored = self.read(CART_QUANTITY_KEY)
        if isinstance(stored, int | float) and not isinstance(stored, bool):
            return max(0, int(stored))
        return self.get().quantity


def open_cart_session(path: str | os.PathLike | None) -> CartSession:
    """A durable session at ``path`` if it is usable, else an in-memory one."""
    if path is None:
        return MemoryCartSession()

    session = FileCartSession(path)
    try:
        session.write(_PROBE_KEY, "1")
        session.remove(_PROBE_KEY)
    except OSError as exc:
        logger.warning("cart_store_unavailable", path=str(path), error=str(exc))
        return MemoryCartSession()
    return session
