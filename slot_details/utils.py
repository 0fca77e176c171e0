# slot_details/utils.py
from __future__ import annotations

import re
import unicodedata
from pathlib import Path
from typing import Any

from .config import HTML_EXTENSIONS


# Applied to lowercased text, before accents are folded away
_SLUG_CHARMAP = {
    "&": "and",
    "$": "dollar",
    "%": "percent",
    "€": "euro",
    "£": "pound",
    "♥": "love",
    "|": "or",
    "<": "less",
    ">": "greater",
    "ß": "ss",
    "ø": "o",
    "æ": "ae",
    "œ": "oe",
    "đ": "d",
    "ł": "l",
    "þ": "th",
    "ð": "d",
}


def _strip_na(x: Any) -> str:
    if x is None:
        return ""
    return str(x).strip()


def safe_read_text_path(path) -> str:
    """Read a Path-like object as utf-8, replacing undecodable bytes."""
    return Path(path).read_text(encoding="utf-8", errors="replace")


def slugify(text: str | None, *, separator: str = "-") -> str:
    """
    Lowercase, strict ASCII-alphanumeric slug.

    Only whitespace (and the separator itself) splits words; every other
    non-alphanumeric character is dropped.

    "Book of Ra" -> "book-of-ra"
    "Book of Ra", separator="" -> "bookofra"
    "Rise & Shine" -> "rise-and-shine"
    "Joker 2.0" -> "joker-20"
    """
    s = (text or "").lower()
    for ch, repl in _SLUG_CHARMAP.items():
        s = s.replace(ch, repl)
    if separator:
        s = s.replace(separator, " ")

    s = unicodedata.normalize("NFKD", s).encode("ascii", "ignore").decode("ascii")
    s = re.sub(r"[^a-z0-9\s]", "", s)
    return separator.join(s.split())


def slug_equal(a: str | None, b: str | None) -> bool:
    return slugify(a, separator="") == slugify(b, separator="")


def capitalize_first(s: str) -> str:
    """Upper-case the first character only; the rest stays as written."""
    return s[:1].upper() + s[1:]


def is_html_path(path: str) -> bool:
    return Path(path).suffix.lower() in HTML_EXTENSIONS
