"""
Product model for the storefront.
"""

from pydantic import BaseModel, ConfigDict, field_validator


class Product(BaseModel):
    """Sellable product variant as shown on the shop page."""
    id: str
    name: str
    price: float
    weight: str
    image: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator("price")
    @classmethod
    def check_positive(cls, v):
        if v <= 0:
            raise ValueError("Must be positive")
        return v

    @property
    def cart_key(self) -> str:
        """Composite key identifying this product/weight pair in the cart."""
        return f"{self.id}-{self.weight}"
