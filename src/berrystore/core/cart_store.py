"""
Session cart store.

One CartStore is created at the application root for each browser session and
handed to every page that reads or changes the cart. All cart mutations go
through its methods; pages never touch line items directly.
"""

import logging
from enum import Enum
from typing import Callable, List, Optional

from berrystore.core.errors import InvalidQuantityError
from berrystore.models.cart import Cart, CartItem
from berrystore.models.product import Product

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]


class QuantityDirection(str, Enum):
    INC = "inc"
    DEC = "dec"


def log_notifier(message: str):
    logger.info(f"[CART] {message}")


class CartStore:
    """
    Cart line items plus the UI flags that travel with them.

    Attributes:
        show_cart: whether the cart drawer is open
        active: secondary overlay flag (mobile menu etc.) sharing the scroll lock
        qty: staged quantity on the product page, never below 1
    """

    def __init__(self, notifier: Optional[Notifier] = None):
        self._cart = Cart()
        self._notify = notifier or log_notifier
        self.show_cart = False
        self.active = False
        self.qty = 1

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------
    @property
    def cart_items(self) -> List[CartItem]:
        return list(self._cart.items)

    @property
    def total_price(self) -> float:
        return self._cart.total_price

    @property
    def total_quantities(self) -> int:
        return self._cart.total_quantities

    @property
    def scroll_locked(self) -> bool:
        """Page scrolling is suspended while any overlay is open."""
        return self.show_cart or self.active

    def snapshot(self) -> Cart:
        return self._cart.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Cart mutations
    # ------------------------------------------------------------------
    def add(self, product: Product, quantity: int) -> CartItem:
        """
        Add `quantity` units of a product variant and notify the user.

        The confirmation reports the quantity actually added, which may differ
        from the staged `qty` selector.
        """
        if quantity < 1:
            raise InvalidQuantityError(quantity)

        item = self._cart.add_item(product, quantity)
        logger.info(
            f"[CART] Added {quantity} x {item.id}; "
            f"line quantity={item.quantity}, cart total={self.total_price:.2f}"
        )
        self._notify(f"{quantity} {product.name} ({product.weight}) added to the cart.")
        return item

    def remove(self, item_id: str):
        removed = self._cart.remove_item(item_id)
        if removed is None:
            logger.debug(f"[CART] Remove ignored, no line item {item_id}")
            return

        logger.info(f"[CART] Removed {removed.quantity} x {removed.id}")

    def toggle_item_quantity(self, item_id: str, direction):
        """Increase or decrease a line item by one. Quantity 1 is the floor."""
        direction = QuantityDirection(direction)

        if direction is QuantityDirection.INC:
            changed = self._cart.increment_item(item_id)
        else:
            changed = self._cart.decrement_item(item_id)

        if changed:
            logger.info(f"[CART] {direction.value} {item_id}")
        else:
            logger.debug(f"[CART] {direction.value} ignored for {item_id}")

    def clear(self):
        self._cart.clear()
        logger.info("[CART] Cart cleared")

    # ------------------------------------------------------------------
    # UI flags
    # ------------------------------------------------------------------
    def set_show_cart(self, show: bool):
        self.show_cart = bool(show)

    def set_active(self, active: bool):
        self.active = bool(active)

    def set_qty(self, qty: int):
        self.qty = max(1, int(qty))

    def inc_qty(self):
        self.qty += 1

    def dec_qty(self):
        self.qty = max(1, self.qty - 1)
