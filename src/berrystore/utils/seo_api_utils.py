"""
Remote content API client - fetches location guide records.
One request per call; callers decide what a failure means.
"""

import logging
from typing import Optional

import requests

from berrystore import config
from berrystore.core.errors import TransientError
from berrystore.core.validation import APIResponseValidator
from berrystore.models.api import SeoPagesResponse

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


def fetch_seo_pages(base_url: Optional[str] = None, timeout: Optional[float] = None) -> SeoPagesResponse:
    """
    Fetch every location guide page from the content API.

    Raises:
        TransientError: network failure or non-success HTTP status
        PermanentError: body is not a valid pages collection
    """
    url = f"{base_url or config.SEO_API_BASE}{config.SEO_PAGES_PATH}"
    try:
        logger.info(f"[SEO-API] Fetching pages from {url}")
        response = requests.get(url, timeout=timeout or config.SEO_API_TIMEOUT)
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.error(f"[SEO-API] Content API error: {str(e)}")
        raise TransientError(f"Content API error: {str(e)}", url)

    parsed = APIResponseValidator.validate_seo_pages_response(data, url)
    logger.info(f"[SEO-API] Content API returned {len(parsed.pages)} pages")
    return parsed
