# slot_details/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional


@dataclass(frozen=True)
class Provider:
    """
    One row of the provider table.

    url_slug_prefix / server_id_prefix feed the generated fallback
    serverId / gameKey; either may be empty.
    """
    id: str
    name: str
    db_name: str = ""
    url_slug_prefix: str = ""
    server_id_prefix: str = ""


@dataclass(frozen=True)
class CatalogGame:
    name: str
    url_slug: str
    server_id: str

    @classmethod
    def from_item(cls, item: dict) -> "CatalogGame":
        return cls(
            name=str(item.get("name") or ""),
            url_slug=str(item.get("urlSlug") or ""),
            server_id=str(item.get("serverId") or ""),
        )


@dataclass(frozen=True)
class Identity:
    server_id: str
    game_key: str


@dataclass
class GameText:
    intro: list[str] = field(default_factory=list)
    expect: list[str] = field(default_factory=list)
    characteristics: list[str] = field(default_factory=list)
    played: list[str] = field(default_factory=list)
    odds: list[str] = field(default_factory=list)
    symbols: list[dict] = field(default_factory=list)
    test: list[str] = field(default_factory=list)
    advantages: list[str] = field(default_factory=list)
    advanced: list[str] = field(default_factory=list)
    play: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        return {
            "intro": self.intro,
            "expect": self.expect,
            "characteristics": self.characteristics,
            "played": self.played,
            "odds": self.odds,
            "symbols": self.symbols,
            "test": self.test,
            "advantages": self.advantages,
            "advanced": self.advanced,
            "play": self.play,
        }


@dataclass(frozen=True)
class GameRecord:
    """
    Output row for a single game file.

    Key names and order in as_dict() are what ends up in the .yml file.
    """
    name: str
    title: Optional[str]
    server_id: str
    game_key: str
    meta_description: Optional[str]
    version: int
    text: GameText

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "serverId": self.server_id,
            "gameKey": self.game_key,
            "meta_description": self.meta_description,
            "version": self.version,
            "text": self.text.as_dict(),
        }


@dataclass(frozen=True)
class ProgressEvent:
    kind: str  # reading | parsing | searching | page | found | not_found | no_games | warning | writing | done
    message: str
    page: Optional[int] = None


ProgressCB = Callable[[ProgressEvent], None]


def emit(progress_cb: Optional[ProgressCB], kind: str, message: str, *, page: Optional[int] = None) -> None:
    if progress_cb:
        progress_cb(ProgressEvent(kind=kind, message=message, page=page))
