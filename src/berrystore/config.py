"""
Runtime configuration for the storefront.
Values come from the environment (or a local .env file) with sensible
defaults for running everything on one machine.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Existing environment variables win over .env entries
load_dotenv(".env", override=False)

PROJECT_ROOT = Path(__file__).parent.parent.parent

# Remote content API
SEO_API_BASE = os.environ.get("SEO_API_BASE", "http://localhost:8000")
SEO_API_TIMEOUT = float(os.environ.get("SEO_API_TIMEOUT", "10"))
SEO_PAGES_PATH = "/api/seo/all-pages"

# Database
DB_PATH = Path(os.environ.get("DB_PATH", PROJECT_ROOT / "data" / "berrystore.db"))
SEO_CSV_PATH = Path(os.environ.get("SEO_CSV_PATH", PROJECT_ROOT / "data" / "seo_pages.csv"))

# Insights listing
ITEMS_PER_PAGE = 12
MAX_PAGE_BUTTONS = 5

# Newsletter substitute
WHATSAPP_URL = (
    "https://wa.me/917047474942?text=Hi,%20I'd%20like%20to%20receive%20updates"
    "%20on%20blueberry%20farming%20insights"
)
