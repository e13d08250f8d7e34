"""
Health checks for the pieces the storefront depends on.
"""

import logging
import sqlite3

import requests

from berrystore import config
from berrystore.core.db import get_db_connection

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


def check_database() -> bool:
    """Check database connectivity and that the pages table is readable."""
    try:
        conn = get_db_connection()
        try:
            count = conn.execute("SELECT COUNT(*) FROM seo_pages").fetchone()[0]
        finally:
            conn.close()

        logger.info(f"[HEALTH] Database OK: {count} pages found")
        return True
    except sqlite3.Error as e:
        logger.error(f"[HEALTH] Database failed: {e}")
        return False


def check_api_connectivity() -> bool:
    """Check the content API answers on /health."""
    try:
        response = requests.get(f"{config.SEO_API_BASE}/health", timeout=5)
    except requests.RequestException as e:
        logger.error(f"[HEALTH] Content API failed: {e}")
        return False

    if response.status_code == 200:
        logger.info("[HEALTH] Content API OK")
        return True

    logger.error(f"[HEALTH] Content API returned {response.status_code}")
    return False


def health_check() -> dict:
    """Run all health checks."""
    return {
        "Database": check_database(),
        "Content API": check_api_connectivity(),
    }


if __name__ == "__main__":
    results = health_check()
    for name, ok in results.items():
        print(f"  {name}: {'PASS' if ok else 'FAIL'}")
