"""
Unit Tests: ArticleCatalog

Covers merging static and remote articles, the load lifecycle, search,
category filtering and pagination.
"""

import pytest

from berrystore.core.catalog import ALL_CATEGORIES, ArticleCatalog, LoadState
from berrystore.core.content import STATIC_ARTICLES
from berrystore.core.errors import PermanentError, TransientError
from berrystore.models.api import SeoPagesResponse

from conftest import make_article, make_seo_page


def failing_fetcher():
    raise TransientError("Content API error: connection refused", "http://test/api/seo/all-pages")


def many_articles(n, category="Farming Guide"):
    return [make_article(i, title=f"Guide {i}", category=category) for i in range(n)]


class TestLoad:

    def test_merges_static_then_remote(self, seo_response):
        catalog = ArticleCatalog(fetcher=lambda: seo_response)

        catalog.load()

        n, m = len(STATIC_ARTICLES), len(seo_response.pages)
        assert len(catalog.all_articles) == n + m
        assert catalog.all_articles[:n] == STATIC_ARTICLES
        assert [a.id for a in catalog.all_articles[n:]] == ["pseo-1", "pseo-2", "pseo-3"]
        assert catalog.category_counts()[ALL_CATEGORIES] == n + m

    def test_no_dedup_across_sources(self):
        static = [make_article("dup", title="Darjeeling guide")]
        response = SeoPagesResponse(pages=[make_seo_page("dup")])
        catalog = ArticleCatalog(static_articles=static, fetcher=lambda: response)

        catalog.load()

        assert [a.id for a in catalog.all_articles] == ["dup", "dup"]

    def test_state_transitions_on_success(self, seo_response):
        seen = []
        catalog = ArticleCatalog(fetcher=lambda: seen.append(catalog.load_state) or seo_response)

        assert catalog.load_state is LoadState.IDLE
        assert catalog.loading is True

        catalog.load()

        assert seen == [LoadState.LOADING]
        assert catalog.load_state is LoadState.LOADED
        assert catalog.loading is False

    def test_failure_keeps_static_only(self, caplog):
        catalog = ArticleCatalog(fetcher=failing_fetcher)

        with caplog.at_level("WARNING"):
            catalog.load()

        assert catalog.load_state is LoadState.FAILED
        assert catalog.loading is False
        assert catalog.all_articles == STATIC_ARTICLES
        assert catalog.remote_articles == []
        assert "Failed to fetch location guides" in caplog.text

    def test_invalid_payload_is_a_failure(self):
        def bad_fetcher():
            raise PermanentError("'pages' must be a list", "http://test")

        catalog = ArticleCatalog(fetcher=bad_fetcher)
        catalog.load()

        assert catalog.load_state is LoadState.FAILED
        assert catalog.source_summary() == f"{len(STATIC_ARTICLES)} editorial articles • 0 location guides"

    def test_load_runs_once(self, seo_response):
        calls = []

        def fetcher():
            calls.append(1)
            return seo_response

        catalog = ArticleCatalog(fetcher=fetcher)
        catalog.load()
        catalog.load()

        assert len(calls) == 1

    def test_failed_load_is_not_retried(self):
        calls = []

        def fetcher():
            calls.append(1)
            return failing_fetcher()

        catalog = ArticleCatalog(fetcher=fetcher)
        catalog.load()
        catalog.load()

        assert len(calls) == 1
        assert catalog.load_state is LoadState.FAILED

    def test_result_after_close_is_discarded(self, seo_response):
        catalog = ArticleCatalog()

        def fetcher():
            catalog.close()
            return seo_response

        catalog._fetcher = fetcher
        catalog.load()

        assert catalog.remote_articles == []


class TestCategories:

    def test_sentinel_first_then_first_seen_order(self, seo_response):
        catalog = ArticleCatalog(fetcher=lambda: seo_response)
        catalog.load()

        cats = catalog.categories
        assert cats[0] == ALL_CATEGORIES
        assert cats[1:3] == ["Market Analysis", "Market Research"]
        assert cats.count("Location Investment") == 1
        assert len(cats) == len(set(cats))

    def test_select_category_filters(self):
        catalog = ArticleCatalog()

        catalog.select_category("Location Investment")

        assert {a.category for a in catalog.filtered_articles} == {"Location Investment"}
        assert len(catalog.filtered_articles) == 4

    def test_sentinel_matches_everything(self):
        catalog = ArticleCatalog()
        catalog.select_category("Technology")
        catalog.select_category(ALL_CATEGORIES)

        assert catalog.filtered_articles == STATIC_ARTICLES

    def test_categories_survive_search(self):
        catalog = ArticleCatalog()

        catalog.search("guwahati")
        counts = catalog.category_counts()

        assert "Market Analysis" in catalog.categories
        assert counts["Market Analysis"] == 0
        assert counts["Location Investment"] == 1
        assert counts[ALL_CATEGORIES] == 1

    def test_counts_ignore_selected_category(self):
        catalog = ArticleCatalog()
        catalog.select_category("Technology")

        assert catalog.category_counts()["Location Investment"] == 4


class TestSearch:

    def test_case_insensitive_title_match(self):
        catalog = ArticleCatalog()

        catalog.search("GUWAHATI")

        assert [a.id for a in catalog.filtered_articles] == ["9"]

    def test_matches_excerpt_and_tags(self):
        articles = [
            make_article(1, title="Soil", excerpt="Acidic POLYHOUSE soils"),
            make_article(2, title="Water", tags=["Polyhouse"]),
            make_article(3, title="Markets"),
        ]
        catalog = ArticleCatalog(static_articles=articles, fetcher=failing_fetcher)

        catalog.search("polyhouse")

        assert [a.id for a in catalog.filtered_articles] == ["1", "2"]

    def test_every_result_contains_term(self, seo_response):
        catalog = ArticleCatalog(fetcher=lambda: seo_response)
        catalog.load()

        catalog.search("invest")

        assert catalog.filtered_articles
        for a in catalog.filtered_articles:
            haystack = [a.title.lower(), a.excerpt.lower()] + [t.lower() for t in a.tags]
            assert any("invest" in h for h in haystack)

    def test_search_and_category_combine(self):
        catalog = ArticleCatalog()

        catalog.search("blueberry")
        catalog.select_category("Location Investment")

        assert catalog.filtered_articles
        assert all(a.category == "Location Investment" for a in catalog.filtered_articles)

    def test_no_results(self):
        catalog = ArticleCatalog()

        catalog.search("kiwifruit")

        assert catalog.filtered_articles == []
        assert catalog.total_pages == 0
        assert catalog.page_articles == []
        assert catalog.results_summary() == 'Showing 0 of 0 articles for "kiwifruit"'


class TestPagination:

    def test_twelve_per_page(self):
        catalog = ArticleCatalog(static_articles=many_articles(30), fetcher=failing_fetcher)

        assert catalog.total_pages == 3
        assert [a.id for a in catalog.page_articles] == [str(i) for i in range(12)]

        catalog.set_page(3)

        assert [a.id for a in catalog.page_articles] == [str(i) for i in range(24, 30)]

    @pytest.mark.parametrize("requested,expected", [(0, 1), (-3, 1), (2, 2), (99, 3)])
    def test_set_page_clamps(self, requested, expected):
        catalog = ArticleCatalog(static_articles=many_articles(30), fetcher=failing_fetcher)

        catalog.set_page(requested)

        assert catalog.current_page == expected

    def test_search_resets_page(self):
        catalog = ArticleCatalog(static_articles=many_articles(30), fetcher=failing_fetcher)
        catalog.set_page(3)

        catalog.search("guide")

        assert catalog.current_page == 1

    def test_category_resets_page(self):
        catalog = ArticleCatalog(static_articles=many_articles(30), fetcher=failing_fetcher)
        catalog.set_page(2)

        catalog.select_category("Farming Guide")

        assert catalog.current_page == 1

    def test_next_and_previous(self):
        catalog = ArticleCatalog(static_articles=many_articles(30), fetcher=failing_fetcher)

        assert not catalog.has_previous
        catalog.next_page()
        catalog.next_page()
        catalog.next_page()

        assert catalog.current_page == 3
        assert not catalog.has_next

        catalog.previous_page()

        assert catalog.current_page == 2

    def test_empty_view_stays_on_page_one(self):
        catalog = ArticleCatalog(static_articles=[], fetcher=failing_fetcher)

        catalog.set_page(4)

        assert catalog.current_page == 1

    def test_page_buttons_short(self):
        catalog = ArticleCatalog(static_articles=many_articles(30), fetcher=failing_fetcher)

        assert catalog.page_buttons() == [1, 2, 3]

    def test_page_buttons_long_include_last(self):
        catalog = ArticleCatalog(static_articles=many_articles(12 * 7), fetcher=failing_fetcher)

        assert catalog.page_buttons() == [1, 2, 3, 4, 5, 7]


class TestSummaries:

    def test_results_summary_plain(self):
        catalog = ArticleCatalog(static_articles=many_articles(30), fetcher=failing_fetcher)

        assert catalog.results_summary() == "Showing 12 of 30 articles"

    def test_results_summary_singular_with_filters(self):
        catalog = ArticleCatalog()
        catalog.search("Gangtok")
        catalog.select_category("Location Investment")

        assert catalog.results_summary() == 'Showing 1 of 1 article for "Gangtok" in Location Investment'

    def test_source_summary(self, seo_response):
        catalog = ArticleCatalog(fetcher=lambda: seo_response)
        catalog.load()

        assert catalog.source_summary() == f"{len(STATIC_ARTICLES)} editorial articles • 3 location guides"
