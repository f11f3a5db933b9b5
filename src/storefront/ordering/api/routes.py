"""FastAPI routes for the Ordering domain — order intake, lookup and lifecycle."""

from collections.abc import Awaitable, Callable

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.ordering.api.schemas import (
    ErrorResponse,
    OrderCreatedResponse,
    OrderResponse,
    OrderStatusResponse,
)
from storefront.ordering.domain import logger
from storefront.ordering.exceptions import StorageError, summarize
from storefront.ordering.order.creation import create_orders
from storefront.ordering.order.lifecycle import cancel_order, complete_order, mark_processing
from storefront.ordering.order.numbering import OrderNumberGenerator
from storefront.ordering.order.order import Order
from storefront.ordering.order.queries import list_orders, lookup_orders
from storefront.ordering.storage.store import OrderStore
from storefront.shared.logging import add_context


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------
def get_order_store(request: Request) -> OrderStore:
    return request.app.state.order_store


def get_order_numbers(request: Request) -> OrderNumberGenerator:
    return request.app.state.order_numbers


def _error(status_code: int, message: str, details: dict[str, list[str]] | None = None) -> JSONResponse:
    body = ErrorResponse(error=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/api/orders", tags=["orders"])


@order_router.get("", response_model=list[OrderResponse])
async def list_all_orders(store: OrderStore = Depends(get_order_store)):
    try:
        orders = await list_orders(store)
    except StorageError:
        logger.exception("orders_fetch_failed")
        return _error(500, "Unable to fetch orders")
    return JSONResponse(content=[OrderResponse.from_order(order).to_json() for order in orders])


@order_router.get("/{identifier}")
async def lookup(identifier: str, store: OrderStore = Depends(get_order_store)):
    """Email lookup when ``identifier`` contains ``@`` (list), order-number lookup otherwise."""
    try:
        result = await lookup_orders(store, identifier)
    except ObjectNotFoundError as exc:
        return _error(404, str(exc))
    except StorageError:
        logger.exception("order_lookup_failed", identifier=identifier)
        return _error(500, "Unable to lookup order")

    if isinstance(result, list):
        return JSONResponse(content=[OrderResponse.from_order(order).to_json() for order in result])
    return JSONResponse(content=OrderResponse.from_order(result).to_json())


@order_router.post("", status_code=201, response_model=OrderCreatedResponse)
async def create_order(
    request: Request,
    store: OrderStore = Depends(get_order_store),
    numbers: OrderNumberGenerator = Depends(get_order_numbers),
):
    """Create one order, or every order of an array, in a single transaction."""
    try:
        body = await request.json()
    except ValueError:
        return _error(400, "Request body must be a JSON object or array")

    try:
        result = await create_orders(store, body, numbers)
    except ValidationError as exc:
        logger.info("order_rejected", problems=exc.messages)
        return _error(400, "Missing required order fields", exc.messages)
    except StorageError:
        logger.exception("order_create_failed")
        return _error(500, "Unable to create order")

    response = OrderCreatedResponse(order_number=result.order_number, order_numbers=result.order_numbers)
    return JSONResponse(status_code=201, content=response.to_json())


async def _change_status(
    store: OrderStore,
    order_number: str,
    change: Callable[[OrderStore, str], Awaitable[Order]],
    message: str,
) -> JSONResponse:
    add_context(order_number=order_number)
    try:
        order = await change(store, order_number)
    except ObjectNotFoundError:
        return _error(404, "Order not found")
    except ValidationError as exc:
        return _error(409, summarize(exc.messages), exc.messages)
    except StorageError:
        logger.exception("order_status_change_failed", order_number=order_number)
        return _error(500, "Unable to update order")

    response = OrderStatusResponse(message=message, order_number=order.order_number, status=order.status)
    return JSONResponse(status_code=200, content=response.to_json())


@order_router.post("/{order_number}/cancel", response_model=OrderStatusResponse)
async def cancel(order_number: str, store: OrderStore = Depends(get_order_store)):
    return await _change_status(store, order_number, cancel_order, "Order cancelled")


@order_router.post("/{order_number}/processing", response_model=OrderStatusResponse)
async def processing(order_number: str, store: OrderStore = Depends(get_order_store)):
    return await _change_status(store, order_number, mark_processing, "Order processing")


@order_router.post("/{order_number}/complete", response_model=OrderStatusResponse)
async def complete(order_number: str, store: OrderStore = Depends(get_order_store)):
    return await _change_status(store, order_number, complete_order, "Order completed")
