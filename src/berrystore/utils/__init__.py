"""
Utils module initialization.
"""

from .seo_api_utils import fetch_seo_pages
from .health import check_database, check_api_connectivity, health_check

__all__ = [
    # Content API client
    "fetch_seo_pages",
    # Health checks
    "check_database",
    "check_api_connectivity",
    "health_check",
]
