"""
Models package - data validation schemas for the storefront.
"""

# Product models
from .product import Product

# Cart models
from .cart import CartItem, Cart

# Article models
from .article import Article, SeoPage

# API models
from .api import SeoPagesResponse, HealthResponse

__all__ = [
    # Product
    "Product",
    # Cart
    "CartItem",
    "Cart",
    # Articles
    "Article",
    "SeoPage",
    # API
    "SeoPagesResponse",
    "HealthResponse",
]
