# slot_details/parse/document.py
from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup, NavigableString, Tag

from slot_details.utils import safe_read_text_path


def _node_text(node) -> str:
    if isinstance(node, Tag):
        return node.get_text()
    if isinstance(node, NavigableString):
        return str(node)
    return ""


def content_root(soup: BeautifulSoup) -> Tag:
    """<body> if the parser produced one, else the document itself (bare fragments)."""
    return soup.body or soup


def remove_empty_nodes(soup: BeautifulSoup) -> BeautifulSoup:
    """
    Drop direct children of the content root whose text is blank.

    Authoring tools sprinkle empty <p></p> and whitespace between blocks;
    those would otherwise show up as sections of their own.
    """
    root = content_root(soup)
    for node in list(root.children):
        if _node_text(node).strip() == "":
            node.extract()
    return soup


def parse_document(markup: str) -> BeautifulSoup:
    # lxml applies implied end tags: <p>a<p>b gives two sibling paragraphs
    return remove_empty_nodes(BeautifulSoup(markup, "lxml"))


def load_document(path: Path) -> BeautifulSoup:
    """
    Read + parse a local HTML file.

    Raises FileNotFoundError if the path is gone.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"This file does not exist: {path}")
    return parse_document(safe_read_text_path(path))
