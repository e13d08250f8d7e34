"""
Pytest configuration and fixtures shared by the storefront tests.
"""

import pytest

from berrystore.core.cart_store import CartStore
from berrystore.models.api import SeoPagesResponse
from berrystore.models.article import Article
from berrystore.models.product import Product


@pytest.fixture
def notifications():
    """Messages the cart store sent to the user."""
    return []


@pytest.fixture
def store(notifications):
    return CartStore(notifier=notifications.append)


@pytest.fixture
def berries_500g():
    return Product(id="p1", name="Fresh Blueberries", price=100, weight="500g")


@pytest.fixture
def berries_250g():
    return Product(id="p1", name="Fresh Blueberries", price=60, weight="250g")


@pytest.fixture
def jam():
    return Product(id="jam", name="Blueberry Jam", price=45.5, weight="200g")


def make_seo_page(page_id="pseo-1", state="West Bengal", city="Darjeeling",
                  created_at="2024-12-02T09:00:00Z"):
    return {
        "id": page_id,
        "state": state,
        "city": city,
        "metaTitle": f"Blueberry Farming Investment in {city}",
        "metaDescription": f"Why {city}, {state} suits blueberries.",
        "createdAt": created_at,
    }


def make_article(article_id, title="Blueberry guide", category="Farming Guide",
                 excerpt="All about berries.", tags=None):
    return Article(
        id=str(article_id),
        slug=f"article-{article_id}",
        title=title,
        excerpt=excerpt,
        date="December 2024",
        read_time="5 min read",
        category=category,
        image="/images/hero-desktop.jpg",
        tags=tags or ["Berries"],
    )


@pytest.fixture
def seo_response():
    return SeoPagesResponse(pages=[
        make_seo_page("pseo-1", "Himachal Pradesh", "Shimla"),
        make_seo_page("pseo-2", "Tamil Nadu", "Ooty"),
        make_seo_page("pseo-3", "Arunachal Pradesh", "Ziro"),
    ])
