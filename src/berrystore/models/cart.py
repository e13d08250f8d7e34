"""
Shopping cart models.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .product import Product


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CartItem(BaseModel):
    """One product/weight pair in the cart."""
    id: str  # composite key: "<product id>-<weight>"
    name: str
    price: float = Field(gt=0)
    quantity: int = Field(default=1, ge=1)
    weight: str
    image: str = ""

    model_config = ConfigDict(validate_assignment=True)

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


class Cart(BaseModel):
    """
    Shopping cart with multiple line items.

    Totals are derived from the items on every read.
    """
    items: List[CartItem] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utcnow)
    last_updated: datetime = Field(default_factory=_utcnow)

    @computed_field
    @property
    def total_price(self) -> float:
        return sum(i.line_total for i in self.items)

    @computed_field
    @property
    def total_quantities(self) -> int:
        return sum(i.quantity for i in self.items)

    def find_item(self, item_id: str) -> Optional[CartItem]:
        return next((i for i in self.items if i.id == item_id), None)

    def add_item(self, product: Product, quantity: int) -> CartItem:
        """
        Add `quantity` units of a product variant.

        An existing line item for the same product/weight has its quantity
        increased; otherwise a new line item is appended. The product itself
        is left untouched.
        """
        existing = self.find_item(product.cart_key)
        if existing is not None:
            existing.quantity += quantity
            item = existing
        else:
            item = CartItem(
                id=product.cart_key,
                name=product.name,
                price=product.price,
                quantity=quantity,
                weight=product.weight,
                image=product.image,
            )
            self.items.append(item)

        self.last_updated = _utcnow()
        return item

    def remove_item(self, item_id: str) -> Optional[CartItem]:
        item = self.find_item(item_id)
        if item is None:
            return None

        self.items = [i for i in self.items if i.id != item_id]
        self.last_updated = _utcnow()
        return item

    def increment_item(self, item_id: str) -> bool:
        item = self.find_item(item_id)
        if item is None:
            return False

        item.quantity += 1
        self.last_updated = _utcnow()
        return True

    def decrement_item(self, item_id: str) -> bool:
        """Decrease quantity by one; items at quantity 1 stay as they are."""
        item = self.find_item(item_id)
        if item is None or item.quantity <= 1:
            return False

        item.quantity -= 1
        self.last_updated = _utcnow()
        return True

    def clear(self):
        self.items = []
        self.last_updated = _utcnow()
