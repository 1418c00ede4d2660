"""
Cart store.

A cart is an ordered list of lines kept as one JSON record in local storage
under ``cart_<identity id>`` (or ``cart_guest``). ``CartStore`` is the only
code that touches those keys; everything else goes through its methods and
listens for changes through ``CartEventBus``.
"""

from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, List, Optional
import json
import logging
import threading

from storefront.services.local_storage import LocalStorage

logger = logging.getLogger(__name__)

GUEST_CART_KEY = "cart_guest"


def cart_key(identity_id: Optional[str]) -> str:
    if identity_id:
        return f"cart_{identity_id}"
    return GUEST_CART_KEY


@dataclass
class CartLine:
    product_id: int
    name: str
    price: float
    image: Optional[str]
    quantity: int

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CartLine":
        return cls(
            product_id=data["product_id"],
            name=data.get("name", ""),
            price=float(data.get("price") or 0),
            image=data.get("image"),
            quantity=int(data.get("quantity", 0)),
        )


def cart_payload(key: str, lines: List[CartLine]) -> Dict[str, Any]:
    total = 0.0
    for line in lines:
        total += line.price * line.quantity
    return {
        "key": key,
        "items": [asdict(line) for line in lines],
        "total": total,
        "count": sum(line.quantity for line in lines),
    }


CartListener = Callable[[str, List[CartLine]], None]


class CartEventBus:
    """Per-key change subscriptions."""

    def __init__(self):
        self._listeners: Dict[str, List[CartListener]] = {}
        self._lock = threading.Lock()

    def subscribe(self, key: str, listener: CartListener) -> Callable[[], None]:
        with self._lock:
            self._listeners.setdefault(key, []).append(listener)

        def unsubscribe():
            with self._lock:
                listeners = self._listeners.get(key, [])
                if listener in listeners:
                    listeners.remove(listener)
                if not listeners:
                    self._listeners.pop(key, None)

        return unsubscribe

    def listener_count(self, key: str) -> int:
        with self._lock:
            return len(self._listeners.get(key, []))

    def publish(self, key: str, lines: List[CartLine]) -> None:
        with self._lock:
            listeners = list(self._listeners.get(key, []))
        for listener in listeners:
            listener(key, list(lines))


class CartStore:
    def __init__(
        self,
        key: str,
        storage: LocalStorage,
        bus: Optional[CartEventBus] = None,
    ):
        self.key = key
        self.storage = storage
        self.bus = bus

    def items(self) -> List[CartLine]:
        raw = self.storage.get_item(self.key)
        if not raw:
            return []
        try:
            data = json.loads(raw)
            return [CartLine.from_dict(entry) for entry in data]
        except (ValueError, TypeError, KeyError) as e:
            logger.warning(f"Discarding unreadable cart record {self.key}: {e}")
            return []

    def _save(self, lines: List[CartLine]) -> List[CartLine]:
        self.storage.set_item(self.key, json.dumps([asdict(line) for line in lines]))
        self._notify(lines)
        return lines

    def _notify(self, lines: List[CartLine]) -> None:
        if self.bus is not None:
            self.bus.publish(self.key, lines)

    def _find(self, lines: List[CartLine], product_id: int) -> Optional[CartLine]:
        for line in lines:
            if line.product_id == product_id:
                return line
        return None

    def add(self, product: Any, delta: int = 1) -> List[CartLine]:
        """
        Add ``delta`` units of ``product`` (anything with id, name, price
        and image attributes).

        An existing line is adjusted and dropped once it reaches zero. A new
        line starts at ``max(delta, 0)`` and is only kept when positive.
        """
        lines = self.items()
        line = self._find(lines, product.id)

        if line is not None:
            line.quantity += delta
            if line.quantity <= 0:
                lines.remove(line)
        else:
            quantity = max(delta, 0)
            if quantity > 0:
                lines.append(
                    CartLine(
                        product_id=product.id,
                        name=product.name,
                        price=float(product.price or 0),
                        image=product.image,
                        quantity=quantity,
                    )
                )

        logger.debug(f"Cart {self.key}: add product {product.id} delta {delta}")
        return self._save(lines)

    def remove(self, product_id: int) -> List[CartLine]:
        lines = self.items()
        remaining = [line for line in lines if line.product_id != product_id]
        return self._save(remaining)

    def increment(self, product_id: int) -> List[CartLine]:
        lines = self.items()
        line = self._find(lines, product_id)
        if line is not None:
            line.quantity += 1
        return self._save(lines)

    def decrement(self, product_id: int) -> List[CartLine]:
        # The decrement control stops at 1; removal is a separate action.
        lines = self.items()
        line = self._find(lines, product_id)
        if line is not None and line.quantity > 1:
            line.quantity -= 1
        return self._save(lines)

    def set_quantity(self, product_id: int, quantity: int) -> List[CartLine]:
        lines = self.items()
        line = self._find(lines, product_id)
        if line is not None:
            if quantity <= 0:
                lines.remove(line)
            else:
                line.quantity = quantity
        return self._save(lines)

    def contains(self, product_id: int) -> bool:
        return self._find(self.items(), product_id) is not None

    def clear(self) -> List[CartLine]:
        self.storage.remove_item(self.key)
        self._notify([])
        return []

    def total(self) -> float:
        total = 0.0
        for line in self.items():
            total += line.price * line.quantity
        return total

    def count(self) -> int:
        return sum(line.quantity for line in self.items())

    def snapshot(self) -> Dict[str, Any]:
        return cart_payload(self.key, self.items())
