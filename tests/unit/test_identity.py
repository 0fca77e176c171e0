"""Tests for serverId / gameKey resolution."""

from slot_details.catalog.matcher import CatalogSettings
from slot_details.identity import fallback_identity, resolve_identity
from slot_details.models import Identity, Provider
from tests.fixtures.catalog import FakeCatalog, game, loadmore


API = "https://catalog.example.com/api/games"


class TestFallbackIdentity:
    def test_empty_url_prefix(self, playngo):
        assert fallback_identity(playngo, "Book of Ra") == Identity(server_id="book-of-ra", game_key="pg_bookofra")

    def test_both_prefixes(self, providers):
        assert fallback_identity(providers[1], "Book of Ra") == Identity(server_id="mg-book-of-ra", game_key="mg_bookofra")

    def test_punctuation_dropped_not_split(self, playngo):
        assert fallback_identity(playngo, "Joker 2.0") == Identity(server_id="joker-20", game_key="pg_joker20")

    def test_empty_prefixes(self):
        bare = Provider(id="x", name="X")
        assert fallback_identity(bare, "Book of Ra") == Identity(server_id="book-of-ra", game_key="bookofra")


class TestResolveIdentity:
    def test_catalog_match_overrides(self, playngo):
        catalog = FakeCatalog({0: [game("Book of Ra", "book-of-ra-classic", "pg_bor_classic"), loadmore(0)]})
        got = resolve_identity(playngo, "Book of Ra", catalog=CatalogSettings(url=API), get_json=catalog)
        assert got == Identity(server_id="book-of-ra-classic", game_key="pg_bor_classic")

    def test_skip_catalog_keeps_fallback(self, playngo):
        catalog = FakeCatalog({0: [game("Book of Ra", "other", "other"), loadmore(0)]})
        got = resolve_identity(playngo, "Book of Ra", catalog=None, get_json=catalog)
        assert got == Identity(server_id="book-of-ra", game_key="pg_bookofra")
        assert catalog.calls == []

    def test_catalog_miss_keeps_fallback(self, playngo):
        catalog = FakeCatalog({0: [loadmore(0)]})
        got = resolve_identity(playngo, "Book of Ra", catalog=CatalogSettings(url=API), get_json=catalog)
        assert got == fallback_identity(playngo, "Book of Ra")

    def test_config_error_degrades_to_fallback(self, playngo, events):
        got = resolve_identity(
            playngo,
            "Book of Ra",
            catalog=CatalogSettings(url=""),
            get_json=FakeCatalog(),
            progress_cb=events.append,
        )
        assert got == fallback_identity(playngo, "Book of Ra")
        assert events[-1].kind == "warning"
