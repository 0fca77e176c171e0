# slot_details/parse/fields.py
from __future__ import annotations

import html
import re
from typing import Dict, Iterable, List

from bs4 import Tag

from slot_details.utils import capitalize_first, slugify


LIST_TAGS = ("ul", "ol")


def meta_key(raw: str) -> str:
    """
    "GameProvider" -> "provider"
    "GameProviderName" -> "provider_name"
    "MetaDescription" -> "meta_description"
    """
    key = raw.strip().replace("Game", "", 1)
    parts = [p.strip() for p in re.split(r"(?=[A-Z])", key)]
    return "_".join(p for p in parts if p).lower()


def parse_meta(elements: Iterable[Tag]) -> Dict[str, str]:
    """One "Key: value" pair per element; only the first colon splits."""
    meta: Dict[str, str] = {}
    for el in elements:
        text = el.get_text()
        if ":" not in text:
            continue
        raw_key, value = text.split(":", 1)
        key = meta_key(raw_key)
        if key:
            # the value is kept as written, minus the space after ": "
            meta[key] = value.removeprefix(" ")
    return meta


def _unwrap_empty_links(el: Tag) -> None:
    for a in el.find_all("a"):
        if not (a.get("href") or "").strip():
            a.unwrap()


def item_markup(el: Tag) -> str:
    """Inner HTML of `el` with entities decoded and href-less links unwrapped."""
    _unwrap_empty_links(el)
    return html.unescape(el.decode_contents())


def add_items(elements: Iterable[Tag]) -> List[str]:
    out: List[str] = []
    for el in elements:
        if el.name in LIST_TAGS:
            out.extend(item_markup(li) for li in el.find_all("li", recursive=False))
        else:
            out.append(item_markup(el))
    return out


def add_characteristics(elements: Iterable[Tag]) -> List[str]:
    out: List[str] = []
    for el in elements:
        items = [el] if el.name == "li" else el.find_all("li")
        for li in items:
            text = li.get_text().strip()
            parts = text.split(": ")
            if len(parts) < 2:
                out.append(text)
                continue
            # "Key: value: extra" keeps only "value"
            out.append(f"{parts[0]}: {capitalize_first(parts[1])}")
    return out


def add_symbols(elements: Iterable[Tag]) -> List[dict]:
    """
    Even positions are symbol titles, odd positions the text for the
    title right before them. A trailing title gets no "text" key.
    """
    out: List[dict] = []
    for idx, el in enumerate(elements):
        text = el.get_text()
        if idx % 2 == 0:
            out.append({"key": slugify(text, separator=""), "title": text})
        else:
            out[-1]["text"] = text
    return out
