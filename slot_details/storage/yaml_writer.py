# slot_details/storage/yaml_writer.py
from __future__ import annotations

from pathlib import Path

import yaml

from slot_details.config import OUTPUT_EXTENSION
from slot_details.models import GameRecord
from slot_details.utils import slugify


def dump_record(record: GameRecord) -> str:
    """Block style, keys in record order, no line wrapping."""
    return yaml.dump(
        record.as_dict(),
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        width=float("inf"),
    )


def output_path(input_path: Path, name: str) -> Path:
    """book-of-ra.html + "Book of Ra" -> <same dir>/book-of-ra.yml"""
    return Path(input_path).parent / f"{slugify(name)}{OUTPUT_EXTENSION}"


def write_record(record: GameRecord, input_path: Path) -> Path:
    out = output_path(input_path, record.name)
    tmp = out.with_suffix(out.suffix + ".tmp")
    try:
        tmp.write_text(dump_record(record), encoding="utf-8")
        tmp.replace(out)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise
    return out
