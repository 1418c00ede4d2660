from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sse_starlette.sse import EventSourceResponse
import asyncio
import json
import logging

from storefront.core.database import get_db
from storefront.core.dependencies import get_cart, get_cart_bus
from storefront.schemas.cart import CartResponse, CartAddRequest, CartQuantityRequest
from storefront.services.cart_service import CartEventBus, CartStore, cart_payload
from storefront.services.catalog_service import CatalogService
from storefront.utils.exceptions import (
    CartItemNotFoundException,
    ProductNotFoundException,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cart", tags=["Cart"])


@router.get("", response_model=CartResponse)
def get_cart_contents(cart: CartStore = Depends(get_cart)):
    return cart.snapshot()


@router.post("/items", response_model=CartResponse)
def add_to_cart(
    request: CartAddRequest,
    cart: CartStore = Depends(get_cart),
    db: Session = Depends(get_db),
):
    product = CatalogService(db).get_product(request.product_id)
    if not product:
        raise ProductNotFoundException()

    cart.add(product, request.quantity)
    return cart.snapshot()


@router.put("/items/{product_id}", response_model=CartResponse)
def set_cart_quantity(
    product_id: int,
    request: CartQuantityRequest,
    cart: CartStore = Depends(get_cart),
):
    if not cart.contains(product_id):
        raise CartItemNotFoundException(product_id)

    cart.set_quantity(product_id, request.quantity)
    return cart.snapshot()


@router.post("/items/{product_id}/increment", response_model=CartResponse)
def increment_cart_item(product_id: int, cart: CartStore = Depends(get_cart)):
    if not cart.contains(product_id):
        raise CartItemNotFoundException(product_id)

    cart.increment(product_id)
    return cart.snapshot()


@router.post("/items/{product_id}/decrement", response_model=CartResponse)
def decrement_cart_item(product_id: int, cart: CartStore = Depends(get_cart)):
    if not cart.contains(product_id):
        raise CartItemNotFoundException(product_id)

    cart.decrement(product_id)
    return cart.snapshot()


@router.delete("/items/{product_id}", response_model=CartResponse)
def remove_cart_item(product_id: int, cart: CartStore = Depends(get_cart)):
    cart.remove(product_id)
    return cart.snapshot()


@router.delete("", response_model=CartResponse)
def clear_cart(cart: CartStore = Depends(get_cart)):
    cart.clear()
    return cart.snapshot()


async def cart_events(cart: CartStore, bus: CartEventBus):
    """Cart snapshots for one key: the current one, then one per change."""
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue = asyncio.Queue()

    def on_change(key, lines):
        # Mutations run in the threadpool; hand the snapshot to the event loop.
        loop.call_soon_threadsafe(queue.put_nowait, lines)

    unsubscribe = bus.subscribe(cart.key, on_change)
    try:
        yield {"event": "cart", "data": json.dumps(cart.snapshot())}
        while True:
            lines = await queue.get()
            yield {"event": "cart", "data": json.dumps(cart_payload(cart.key, lines))}
    finally:
        unsubscribe()
        logger.debug(f"Cart event stream closed for {cart.key}")


@router.get("/events")
async def stream_cart_events(
    cart: CartStore = Depends(get_cart),
    bus: CartEventBus = Depends(get_cart_bus),
):
    return EventSourceResponse(cart_events(cart, bus))
