"""
Berry storefront: session cart and insights catalog.
"""

__version__ = "0.1.0"
