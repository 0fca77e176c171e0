# slot_details/identity.py
from __future__ import annotations

from typing import Optional

from .catalog.matcher import CatalogSettings, GetJson, find_game
from .catalog.http import fetch_json
from .errors import CatalogConfigError
from .models import Identity, ProgressCB, Provider, emit
from .utils import slugify
from .utils_debug import dbg


def _join(prefix: str, sep: str, slug: str) -> str:
    return f"{prefix}{sep}{slug}" if prefix else slug


def fallback_identity(provider: Provider, name: str) -> Identity:
    """
    Generated serverId / gameKey, used when the catalog has no match.

    prefix urlSlug "" + "Book of Ra"   -> serverId "book-of-ra"
    prefix serverId "pg" + "Book of Ra" -> gameKey "pg_bookofra"
    """
    return Identity(
        server_id=_join(provider.url_slug_prefix, "-", slugify(name)),
        game_key=_join(provider.server_id_prefix, "_", slugify(name, separator="")),
    )


def resolve_identity(
    provider: Provider,
    name: str,
    *,
    catalog: Optional[CatalogSettings] = None,
    get_json: GetJson = fetch_json,
    progress_cb: Optional[ProgressCB] = None,
) -> Identity:
    """
    Fallback identity, overridden by the catalog's urlSlug / serverId on a match.

    catalog=None skips the lookup entirely.
    """
    identity = fallback_identity(provider, name)
    if catalog is None:
        return identity

    try:
        game = find_game(provider, name, settings=catalog, get_json=get_json, progress_cb=progress_cb)
    except CatalogConfigError as e:
        dbg("catalog_config", provider=provider.id, error=str(e))
        emit(progress_cb, "warning", f"{e}; using generated serverId and gameKey")
        return identity

    if game is None:
        return identity
    return Identity(server_id=game.url_slug, game_key=game.server_id)
