# slot_details/pipeline.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional

from bs4 import Tag

from .catalog.http import fetch_json
from .catalog.matcher import CatalogSettings, GetJson
from .config import RECORD_VERSION
from .errors import MissingFieldError, ProviderNotFoundError
from .identity import resolve_identity
from .models import GameRecord, GameText, Identity, ProgressCB, Provider, emit
from .parse.document import load_document
from .parse.fields import add_characteristics, add_items, add_symbols, parse_meta
from .parse.sections import segment_document
from .providers import find_provider
from .storage.yaml_writer import output_path, write_record
from .utils_debug import dbg


def build_text(sections: Dict[str, List[Tag]]) -> GameText:
    def group(name: str) -> List[Tag]:
        return sections.get(name, [])

    return GameText(
        intro=add_items(group("intro")),
        expect=add_items(group("expect")),
        characteristics=add_characteristics(group("characteristics")),
        played=add_items(group("played")),
        odds=add_items(group("odds")),
        symbols=add_symbols(group("symbols")),
        test=add_items(group("test")),
        advantages=add_items(group("advantages")),
        advanced=[],
        play=add_items(group("play")),
    )


def build_record(
    sections: Dict[str, List[Tag]],
    meta: Dict[str, str],
    identity: Identity,
) -> GameRecord:
    return GameRecord(
        name=meta["name"],
        title=meta.get("title"),
        server_id=identity.server_id,
        game_key=identity.game_key,
        meta_description=meta.get("meta_description"),
        version=RECORD_VERSION,
        text=build_text(sections),
    )


def parse_game_file(
    path: Path,
    *,
    providers: Iterable[Provider],
    catalog: Optional[CatalogSettings] = None,
    get_json: GetJson = fetch_json,
    progress_cb: Optional[ProgressCB] = None,
) -> GameRecord:
    """
    HTML file -> GameRecord.

    Raises FileNotFoundError, MissingFieldError, ProviderNotFoundError.
    catalog=None skips the catalog lookup (generated identity only).
    """
    path = Path(path)
    emit(progress_cb, "reading", f"Reading file {path.name}")
    soup = load_document(path)

    emit(progress_cb, "parsing", "Parsing file")
    sections = segment_document(soup)
    meta = parse_meta(sections["meta"])
    dbg("meta", path=str(path), keys=sorted(meta))

    name = meta.get("name")
    if not name:
        raise MissingFieldError("Name")

    provider = find_provider(providers, meta.get("provider"))
    if provider is None:
        raise ProviderNotFoundError(meta.get("provider"))

    identity = resolve_identity(
        provider,
        name,
        catalog=catalog,
        get_json=get_json,
        progress_cb=progress_cb,
    )
    return build_record(sections, meta, identity)


def process_file(
    path: Path,
    *,
    providers: Iterable[Provider],
    catalog: Optional[CatalogSettings] = None,
    get_json: GetJson = fetch_json,
    progress_cb: Optional[ProgressCB] = None,
) -> Path:
    """Parse `path` and write the .yml next to it. Returns the written path."""
    record = parse_game_file(
        path,
        providers=providers,
        catalog=catalog,
        get_json=get_json,
        progress_cb=progress_cb,
    )

    emit(progress_cb, "writing", f"Writing file {output_path(path, record.name).name}")
    out = write_record(record, path)
    dbg("written", path=str(out))
    emit(progress_cb, "done", "File written successfully")
    return out
