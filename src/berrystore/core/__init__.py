"""
Core module initialization.
"""

from .errors import (
    StorefrontError,
    APIError,
    TransientError,
    PermanentError,
    CartError,
    InvalidQuantityError,
)

from .cart_store import CartStore, QuantityDirection

from .db import get_db_connection, init_database, import_csv_data

__all__ = [
    # Errors
    "StorefrontError",
    "APIError",
    "TransientError",
    "PermanentError",
    "CartError",
    "InvalidQuantityError",
    # Cart
    "CartStore",
    "QuantityDirection",
    # Database
    "get_db_connection",
    "init_database",
    "import_csv_data",
]
