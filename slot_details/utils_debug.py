# slot_details/utils_debug.py
from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

_TRUTHY = {"1", "true", "yes", "on"}


def _enabled() -> bool:
    return os.getenv("SLOT_DETAILS_DEBUG", "").strip().lower() in _TRUTHY


def dbg(tag: str, **kv: Any) -> None:
    if not _enabled():
        return

    ts = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    parts = [f"{ts} [{tag}]"]
    for k, v in kv.items():
        parts.append(f"{k}={v!r}")
    line = " ".join(parts)

    log_path = os.getenv("SLOT_DETAILS_DEBUG_LOG", "").strip()
    if log_path:
        try:
            Path(log_path).parent.mkdir(parents=True, exist_ok=True)
            with open(log_path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError:
            # If file logging fails, fall back to stdout
            print(line)
    else:
        print(line)
