# slot_details/parse/sections.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from slot_details.utils_debug import dbg


KeepFn = Callable[[Tag], bool]

# How a group is collected relative to its anchor
MODE_INCLUDE = "include"  # anchor + following siblings up to stop
MODE_AFTER = "after"      # following siblings up to stop
MODE_SELF = "self"        # just the anchor element
MODE_ALL = "all"          # every following sibling


@dataclass(frozen=True)
class SectionSpec:
    name: str
    tag: str
    ordinal: int  # 0-based position among `tag` elements in document order
    stop: Optional[str] = None  # CSS selector ending the walk
    mode: str = MODE_AFTER


SECTION_LAYOUT: tuple[SectionSpec, ...] = (
    SectionSpec("meta", "p", 0, stop="h1", mode=MODE_INCLUDE),
    SectionSpec("intro", "h1", 0, stop="h2"),
    SectionSpec("expect", "h2", 0, stop="ul"),
    SectionSpec("characteristics", "ul", 0, mode=MODE_SELF),
    SectionSpec("played", "h2", 1, stop="h2"),
    SectionSpec("odds", "h2", 2, stop="h2"),
    SectionSpec("symbols", "h2", 3, stop="h2"),
    SectionSpec("test", "h2", 4, stop="h2"),
    SectionSpec("advantages", "h2", 5, stop="h2"),
    SectionSpec("play", "h2", 6, mode=MODE_ALL),
)


def _next_element(elem: Tag) -> Optional[Tag]:
    for sib in elem.next_siblings:
        if isinstance(sib, Tag):
            return sib
    return None


def find_anchor(soup: BeautifulSoup, tag: str, ordinal: int = 0) -> Optional[Tag]:
    found = soup.find_all(tag, limit=ordinal + 1)
    if len(found) <= ordinal:
        return None
    return found[ordinal]


def next_until(
    elem: Optional[Tag],
    selector: str,
    include_elem: bool = False,
    keep: Optional[KeepFn] = None,
) -> List[Tag]:
    """
    Following element siblings of `elem`, up to (not including) the first
    one matching `selector`.

    include_elem: start the walk at `elem` itself.
    keep: only collect siblings it accepts; rejected ones do not stop the walk.
    """
    siblings: List[Tag] = []
    if elem is None:
        return siblings

    cur = elem if include_elem else _next_element(elem)
    while cur is not None:
        if cur.css.match(selector):
            break
        if keep is None or keep(cur):
            siblings.append(cur)
        cur = _next_element(cur)

    return siblings


def next_all(elem: Optional[Tag]) -> List[Tag]:
    if elem is None:
        return []
    return [sib for sib in elem.next_siblings if isinstance(sib, Tag)]


def collect_section(soup: BeautifulSoup, spec: SectionSpec, keep: Optional[KeepFn] = None) -> List[Tag]:
    anchor = find_anchor(soup, spec.tag, spec.ordinal)
    if anchor is None:
        dbg("section_missing", name=spec.name, anchor_tag=spec.tag, ordinal=spec.ordinal)
        return []

    if spec.mode == MODE_SELF:
        return [anchor]
    if spec.mode == MODE_ALL:
        return next_all(anchor)
    if spec.stop is None:
        raise ValueError(f"Section {spec.name!r} needs a stop selector for mode {spec.mode!r}")
    return next_until(anchor, spec.stop, include_elem=(spec.mode == MODE_INCLUDE), keep=keep)


def segment_document(
    soup: BeautifulSoup,
    layout: tuple[SectionSpec, ...] = SECTION_LAYOUT,
    keep: Optional[KeepFn] = None,
) -> Dict[str, List[Tag]]:
    """Split the document into named element groups, in layout order."""
    return {spec.name: collect_section(soup, spec, keep=keep) for spec in layout}
