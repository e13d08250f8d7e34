"""
Insights catalog - merges editorial articles with remote location guides and
serves the search / category / page view over the combined list.
"""

import hashlib
import logging
import math
import re
from enum import Enum
from typing import Callable, Dict, List, Optional

from berrystore import config
from berrystore.core.content import LOCATION_CATEGORY, STATIC_ARTICLES, STOCK_IMAGES
from berrystore.models.api import SeoPagesResponse
from berrystore.models.article import Article, SeoPage
from berrystore.utils.seo_api_utils import fetch_seo_pages

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"

Fetcher = Callable[[], SeoPagesResponse]


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


def slugify(text: str) -> str:
    return re.sub(r"\s+", "-", text.lower())


def pick_stock_image(record_id: str) -> str:
    """Stable image choice: the same record always gets the same picture."""
    digest = hashlib.sha1(record_id.encode("utf-8")).hexdigest()
    return STOCK_IMAGES[int(digest, 16) % len(STOCK_IMAGES)]


def convert_seo_page(page: SeoPage) -> Article:
    """Convert a remote location guide record to the common article shape."""
    return Article(
        id=page.id,
        slug=f"../investment/{slugify(page.state)}/{slugify(page.city)}",
        title=page.meta_title,
        excerpt=page.meta_description,
        date=page.created_at.strftime("%B %Y"),
        read_time="10 min read",
        category=LOCATION_CATEGORY,
        image=pick_stock_image(page.id),
        tags=[page.city, page.state, "Investment Guide"],
        source="pseo",
    )


class ArticleCatalog:
    """
    View model behind the insights page.

    Static articles come first in authored order, remote ones follow in the
    order the API returned them. No de-duplication is done across sources.
    """

    def __init__(
        self,
        static_articles: Optional[List[Article]] = None,
        fetcher: Optional[Fetcher] = None,
        items_per_page: int = config.ITEMS_PER_PAGE,
    ):
        self.static_articles = list(STATIC_ARTICLES if static_articles is None else static_articles)
        self.remote_articles: List[Article] = []
        self.items_per_page = items_per_page
        self._fetcher = fetcher or fetch_seo_pages
        self.load_state = LoadState.IDLE
        self.closed = False

        self.search_query = ""
        self.selected_category = ALL_CATEGORIES
        self.current_page = 1

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    @property
    def loading(self) -> bool:
        return self.load_state in (LoadState.IDLE, LoadState.LOADING)

    def load(self):
        """
        Fetch remote location guides once.

        Any failure leaves the remote set empty; there is no retry. A result
        that arrives after close() is dropped.
        """
        if self.load_state is not LoadState.IDLE:
            logger.info(f"[CATALOG] Load skipped, state is {self.load_state.value}")
            return

        self.load_state = LoadState.LOADING
        try:
            response = self._fetcher()
            remote = [convert_seo_page(p) for p in response.pages]
        except Exception as e:
            logger.warning(f"[CATALOG] Failed to fetch location guides: {e}")
            if not self.closed:
                self.load_state = LoadState.FAILED
            return

        if self.closed:
            logger.info("[CATALOG] View closed before load finished, discarding result")
            return

        self.remote_articles = remote
        self.load_state = LoadState.LOADED
        self.current_page = self._clamp_page(self.current_page)
        logger.info(
            f"[CATALOG] Loaded {len(self.static_articles)} static + "
            f"{len(self.remote_articles)} remote articles"
        )

    def close(self):
        self.closed = True

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------
    @property
    def all_articles(self) -> List[Article]:
        return self.static_articles + self.remote_articles

    @property
    def categories(self) -> List[str]:
        """Sentinel first, then distinct categories in first-seen order."""
        seen = dict.fromkeys(a.category for a in self.all_articles)
        return [ALL_CATEGORIES] + [c for c in seen if c != ALL_CATEGORIES]

    def _search_matches(self) -> List[Article]:
        return [a for a in self.all_articles if a.matches(self.search_query)]

    def category_counts(self) -> Dict[str, int]:
        """Per-category counts over the search matches, every category listed."""
        matches = self._search_matches()
        counts = {c: 0 for c in self.categories}
        counts[ALL_CATEGORIES] = len(matches)
        for article in matches:
            counts[article.category] += 1
        return counts

    @property
    def filtered_articles(self) -> List[Article]:
        return [
            a for a in self._search_matches()
            if self.selected_category == ALL_CATEGORIES or a.category == self.selected_category
        ]

    @property
    def total_pages(self) -> int:
        return math.ceil(len(self.filtered_articles) / self.items_per_page)

    @property
    def page_articles(self) -> List[Article]:
        start = (self.current_page - 1) * self.items_per_page
        return self.filtered_articles[start:start + self.items_per_page]

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def page_buttons(self) -> List[int]:
        """First few page numbers, plus the last page when it is not among them."""
        total = self.total_pages
        buttons = list(range(1, min(config.MAX_PAGE_BUTTONS, total) + 1))
        if total > config.MAX_PAGE_BUTTONS:
            buttons.append(total)
        return buttons

    def results_summary(self) -> str:
        shown = len(self.page_articles)
        found = len(self.filtered_articles)
        noun = "article" if found == 1 else "articles"
        summary = f"Showing {shown} of {found} {noun}"
        if self.search_query:
            summary += f' for "{self.search_query}"'
        if self.selected_category != ALL_CATEGORIES:
            summary += f" in {self.selected_category}"
        return summary

    def source_summary(self) -> str:
        return (
            f"{len(self.static_articles)} editorial articles • "
            f"{len(self.remote_articles)} location guides"
        )

    # ------------------------------------------------------------------
    # User input
    # ------------------------------------------------------------------
    def search(self, text: str):
        self.search_query = text or ""
        self.current_page = 1

    def select_category(self, label: str):
        self.selected_category = label
        self.current_page = 1

    def _clamp_page(self, page: int) -> int:
        return min(max(1, page), max(self.total_pages, 1))

    def set_page(self, page: int):
        self.current_page = self._clamp_page(page)

    def next_page(self):
        self.set_page(self.current_page + 1)

    def previous_page(self):
        self.set_page(self.current_page - 1)
