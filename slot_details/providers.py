# slot_details/providers.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

import pandas as pd

from .config import DEFAULT_PROVIDERS_FILE, PROVIDER_COLUMNS
from .models import Provider
from .utils import _strip_na, slugify


def load_providers(path: Path = DEFAULT_PROVIDERS_FILE) -> List[Provider]:
    """
    Load the provider table (CSV, one row per provider).

    Blank prefix / db_name cells come back as "" rather than NaN.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Provider table not found: {path}")

    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    missing = [c for c in PROVIDER_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Provider table {path} is missing columns: {', '.join(missing)}")

    out: List[Provider] = []
    for _, row in df.iterrows():
        pid = _strip_na(row.get("id"))
        if not pid:
            continue
        out.append(
            Provider(
                id=pid,
                name=_strip_na(row.get("name")),
                db_name=_strip_na(row.get("db_name")),
                url_slug_prefix=_strip_na(row.get("url_slug_prefix")),
                server_id_prefix=_strip_na(row.get("server_id_prefix")),
            )
        )
    return out


def find_provider(providers: Iterable[Provider], name: Optional[str]) -> Optional[Provider]:
    """Exact id match against the provider name's separator-less slug."""
    pid = slugify(name, separator="")
    if not pid:
        return None
    for p in providers:
        if p.id == pid:
            return p
    return None
