"""Tests for the paginated catalog search."""

import pytest

from slot_details.catalog.http import request_url
from slot_details.catalog.matcher import CatalogSettings, catalog_params, find_game
from slot_details.errors import CatalogConfigError
from slot_details.models import CatalogGame
from tests.fixtures.catalog import FakeCatalog, game, loadmore


API = "https://catalog.example.com/api/games"


def _settings(**kw):
    return CatalogSettings(url=kw.pop("url", API), **kw)


class TestParams:
    def test_fixed_query(self, playngo):
        assert catalog_params(playngo, 3) == {
            "vendor": "playngo",
            "mobile": "false",
            "orderBy": "name",
            "sortOrder": "asc",
            "page": 3,
        }

    def test_request_url(self):
        assert request_url(API, {"vendor": "pg", "page": 0}) == f"{API}?vendor=pg&page=0"
        assert request_url(API + "?key=1", {"page": 0}) == f"{API}?key=1&page=0"
        assert request_url(API, {}) == API


class TestFindGame:
    def test_match_on_first_page(self, playngo, events):
        catalog = FakeCatalog({0: [game("Book of Ra", "book-of-ra-pg", "pg_bookofra"), loadmore(0)]})
        got = find_game(playngo, "book of ra", settings=_settings(), get_json=catalog, progress_cb=events.append)

        assert got == CatalogGame(name="Book of Ra", url_slug="book-of-ra-pg", server_id="pg_bookofra")
        assert len(catalog.calls) == 1
        assert catalog.calls[0]["params"]["page"] == 0
        assert [e.kind for e in events] == ["searching", "page", "found"]

    def test_walks_pages_until_match(self, playngo):
        catalog = FakeCatalog({
            0: [game("Aztec Gold", "aztec-gold", "pg_aztecgold"), loadmore(10)],
            1: [game("Bonanza", "bonanza", "pg_bonanza"), loadmore(5)],
            2: [game("Book-of-Ra", "bor", "pg_bor"), loadmore(0)],
        })
        got = find_game(playngo, "Book of Ra", settings=_settings(), get_json=catalog)

        assert got.url_slug == "bor"
        assert [c["params"]["page"] for c in catalog.calls] == [0, 1, 2]

    def test_ignores_non_game_items(self, playngo):
        catalog = FakeCatalog({0: [{"type": "banner", "name": "Book of Ra"}, game("Other", "o", "o"), loadmore(0)]})
        assert find_game(playngo, "Book of Ra", settings=_settings(), get_json=catalog) is None

    def test_single_item_page_means_no_games(self, playngo, events):
        catalog = FakeCatalog({0: [loadmore(5)]})
        got = find_game(playngo, "Book of Ra", settings=_settings(), get_json=catalog, progress_cb=events.append)

        assert got is None
        assert len(catalog.calls) == 1
        assert events[-1].kind == "no_games"

    def test_exhausted_pages(self, playngo, events):
        catalog = FakeCatalog({0: [game("Aztec Gold", "a", "a"), loadmore(0)]})
        got = find_game(playngo, "Book of Ra", settings=_settings(), get_json=catalog, progress_cb=events.append)

        assert got is None
        assert len(catalog.calls) == 1
        assert events[-1].kind == "not_found"

    def test_missing_loadmore_means_last_page(self, playngo):
        catalog = FakeCatalog({0: [game("Aztec Gold", "a", "a"), game("Bonanza", "b", "b")]})
        assert find_game(playngo, "Book of Ra", settings=_settings(), get_json=catalog) is None
        assert len(catalog.calls) == 1

    def test_page_cap(self, playngo, events):
        endless = {n: [game(f"Game {n}", "x", "x"), loadmore(1)] for n in range(50)}
        catalog = FakeCatalog(endless)
        got = find_game(playngo, "Book of Ra", settings=_settings(max_pages=3), get_json=catalog, progress_cb=events.append)

        assert got is None
        assert len(catalog.calls) == 3
        assert events[-1].kind == "warning"

    def test_transport_failure_is_no_match(self, playngo, events):
        catalog = FakeCatalog(error=ConnectionError("connection refused"))
        got = find_game(playngo, "Book of Ra", settings=_settings(), get_json=catalog, progress_cb=events.append)

        assert got is None
        assert events[-1].kind == "warning"
        assert "connection refused" in events[-1].message

    def test_non_list_payload_is_no_match(self, playngo):
        catalog = FakeCatalog({0: {"error": "bad vendor"}})
        assert find_game(playngo, "Book of Ra", settings=_settings(), get_json=catalog) is None

    def test_timeout_passed_through(self, playngo):
        catalog = FakeCatalog({0: [loadmore(0)]})
        find_game(playngo, "Book of Ra", settings=_settings(timeout=5), get_json=catalog)
        assert catalog.calls[0]["timeout"] == 5
        assert catalog.calls[0]["url"] == API


class TestConfigErrors:
    def test_missing_url(self, playngo):
        catalog = FakeCatalog()
        with pytest.raises(CatalogConfigError):
            find_game(playngo, "Book of Ra", settings=_settings(url=""), get_json=catalog)
        assert catalog.calls == []

    def test_provider_without_vendor(self, providers):
        isoftbet = providers[2]
        catalog = FakeCatalog()
        with pytest.raises(CatalogConfigError, match="isoftbet"):
            find_game(isoftbet, "Book of Ra", settings=_settings(), get_json=catalog)
        assert catalog.calls == []
