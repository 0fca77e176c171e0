# slot_details/catalog/matcher.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from slot_details.catalog.http import fetch_json, request_url
from slot_details.config import (
    CATALOG_MAX_PAGES,
    CATALOG_MIN_PAGE_ITEMS,
    CATALOG_ORDER_BY,
    CATALOG_SORT_ORDER,
    HTTP_TIMEOUT,
)
from slot_details.errors import CatalogConfigError
from slot_details.models import CatalogGame, ProgressCB, Provider, emit
from slot_details.utils import slug_equal
from slot_details.utils_debug import dbg


GetJson = Callable[..., Any]


@dataclass(frozen=True)
class CatalogSettings:
    url: str = ""
    max_pages: int = CATALOG_MAX_PAGES
    timeout: float = HTTP_TIMEOUT


def catalog_params(provider: Provider, page: int) -> Dict[str, Any]:
    return {
        "vendor": provider.db_name,
        "mobile": "false",
        "orderBy": CATALOG_ORDER_BY,
        "sortOrder": CATALOG_SORT_ORDER,
        "page": page,
    }


def _loadmore_count(items: list) -> int:
    for item in items:
        if isinstance(item, dict) and item.get("type") == "loadmore":
            try:
                return int(item.get("items") or 0)
            except (TypeError, ValueError):
                return 0
    # No sentinel at all: nothing left to load
    return 0


def _match_in_page(items: list, game_name: str) -> Optional[dict]:
    for item in items:
        if not isinstance(item, dict) or item.get("type") != "game":
            continue
        if slug_equal(item.get("name"), game_name):
            return item
    return None


def find_game(
    provider: Provider,
    game_name: str,
    *,
    settings: CatalogSettings,
    get_json: GetJson = fetch_json,
    progress_cb: Optional[ProgressCB] = None,
) -> Optional[CatalogGame]:
    """
    Walk the provider's catalog pages looking for `game_name`.

    Returns the matching CatalogGame, or None when the provider has no
    games, the pages run out, the page cap is hit or a request fails.
    Raises CatalogConfigError before any request if the endpoint or the
    provider's vendor id is not configured.
    """
    if not settings.url:
        raise CatalogConfigError("Catalog API URL is missing or empty")
    if not provider.db_name:
        raise CatalogConfigError(f"Provider with ID of {provider.id} has no catalog vendor id")

    emit(
        progress_cb,
        "searching",
        f"Searching for {game_name} game in {request_url(settings.url, catalog_params(provider, 0))}",
    )

    for page in range(max(settings.max_pages, 0)):
        params = catalog_params(provider, page)
        emit(progress_cb, "page", f"Checking page {page}...", page=page)

        try:
            items = get_json(settings.url, params=params, timeout=settings.timeout)
        except Exception as e:
            dbg("catalog_request_failed", url=settings.url, page=page, error=str(e))
            emit(progress_cb, "warning", f"Catalog request failed: {e}", page=page)
            return None

        if not isinstance(items, list):
            dbg("catalog_bad_payload", url=settings.url, page=page, payload_type=type(items).__name__)
            emit(progress_cb, "warning", "Catalog returned an unexpected payload", page=page)
            return None

        if len(items) < CATALOG_MIN_PAGE_ITEMS:
            emit(progress_cb, "no_games", f"No games of {provider.name} were found", page=page)
            return None

        hit = _match_in_page(items, game_name)
        if hit is not None:
            game = CatalogGame.from_item(hit)
            emit(progress_cb, "found", game.name, page=page)
            return game

        if _loadmore_count(items) <= 0:
            emit(
                progress_cb,
                "not_found",
                "serverId and gameKey for this game will be generated automatically",
                page=page,
            )
            return None

    dbg("catalog_page_cap", url=settings.url, max_pages=settings.max_pages)
    emit(
        progress_cb,
        "warning",
        f"Stopped after {settings.max_pages} catalog pages without a match",
        page=settings.max_pages - 1,
    )
    return None
