"""
Validation of remote content API responses before they reach the catalog.
"""

import logging

from pydantic import ValidationError

from berrystore.core.errors import PermanentError
from berrystore.models.api import SeoPagesResponse

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


class APIResponseValidator:
    """Validates API responses before using them."""

    @staticmethod
    def validate_seo_pages_response(response, endpoint: str) -> SeoPagesResponse:
        """
        Validate the body of GET /api/seo/all-pages.

        A body without a "pages" field is a valid empty response.

        Args:
            response: decoded JSON body
            endpoint: endpoint URL, used in error reports

        Returns:
            Parsed SeoPagesResponse, raises PermanentError otherwise
        """
        if not isinstance(response, dict):
            raise PermanentError(f"Invalid response type: {type(response).__name__}", endpoint)

        pages = response.get("pages")
        if pages is None:
            logger.warning(f"[SEO-API] Response from {endpoint} has no 'pages' field")
            return SeoPagesResponse()

        if not isinstance(pages, list):
            raise PermanentError("'pages' must be a list", endpoint)

        try:
            parsed = SeoPagesResponse(pages=pages)
        except ValidationError as e:
            raise PermanentError(f"Invalid page record: {e.errors()[0].get('msg')}", endpoint)

        logger.info(f"[SEO-API] Response validation passed for {endpoint}")
        return parsed
