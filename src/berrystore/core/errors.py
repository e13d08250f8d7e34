"""
Exception hierarchy for the storefront.
API errors are split into transient (network, 5xx) and permanent
(malformed payload) failures so callers can report them differently.
"""


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class APIError(StorefrontError):
    """Base exception for remote content API errors."""

    def __init__(self, message: str, endpoint: str, retry_possible: bool = True):
        super().__init__(message, details={"endpoint": endpoint})
        self.endpoint = endpoint
        self.retry_possible = retry_possible


class TransientError(APIError):
    """Error that might be transient (temporary)."""
    pass


class PermanentError(APIError):
    """Error that won't be resolved by asking again."""

    def __init__(self, message: str, endpoint: str):
        super().__init__(message, endpoint, retry_possible=False)


class CartError(StorefrontError):
    """Base exception for cart errors."""
    pass


class InvalidQuantityError(CartError):
    """Raised when a quantity below 1 is added to the cart."""

    def __init__(self, quantity: int):
        super().__init__(
            f"Quantity must be at least 1, got {quantity}",
            details={"quantity": quantity}
        )
        self.quantity = quantity
