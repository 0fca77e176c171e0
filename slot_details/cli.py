# slot_details/cli.py
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import find_dotenv, load_dotenv

from slot_details.catalog.matcher import CatalogSettings
from slot_details.config import (
    CATALOG_MAX_PAGES,
    DEFAULT_PROVIDERS_FILE,
    GAMES_API_ENV,
    HTTP_TIMEOUT,
)
from slot_details.errors import SlotDetailsError, UsageError
from slot_details.models import ProgressEvent
from slot_details.pipeline import process_file
from slot_details.providers import load_providers
from slot_details.utils import is_html_path
from slot_details.utils_debug import dbg


EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2

_LABELS = {
    "found": " FOUND ",
    "not_found": " NOT FOUND ",
    "no_games": " WARNING ",
    "warning": " WARNING ",
    "done": " DONE ",
}


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="slot-details",
        description="Convert a slot game HTML description into a YAML record.",
    )
    p.add_argument("path", nargs="?", help="Path to the .htm/.html file")
    p.add_argument(
        "--skip-catalog",
        action="store_true",
        help="Don't query the games catalog; always use generated serverId/gameKey",
    )
    p.add_argument(
        "--api-url",
        default=os.environ.get(GAMES_API_ENV, ""),
        help=f"Games catalog endpoint (default: ${GAMES_API_ENV})",
    )
    p.add_argument(
        "--providers",
        default=str(DEFAULT_PROVIDERS_FILE),
        help="Provider table CSV (default: bundled table)",
    )
    p.add_argument(
        "--max-pages",
        type=int,
        default=CATALOG_MAX_PAGES,
        help=f"Stop the catalog search after this many pages (default: {CATALOG_MAX_PAGES})",
    )
    p.add_argument(
        "--timeout",
        type=float,
        default=HTTP_TIMEOUT,
        help=f"Catalog request timeout in seconds (default: {HTTP_TIMEOUT})",
    )
    return p.parse_args(argv)


def validate_input_path(raw: Optional[str]) -> Path:
    if not raw or not is_html_path(raw):
        raise UsageError("Please provide a path to an HTML file")

    path = Path(raw).expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError("This file does not exist")
    return path


def print_event(event: ProgressEvent) -> None:
    # Page ticks overwrite each other on one line
    if event.kind == "page":
        sys.stdout.write(f"\r\033[K{event.message}")
        sys.stdout.flush()
        return

    prefix = "\r\033[K" if event.page is not None else ""
    label = _LABELS.get(event.kind)
    line = f"{label} {event.message}" if label else event.message
    print(prefix + line)


def load_env() -> None:
    """Pick up GAMES_API etc. from a .env in the working directory; real env vars win."""
    load_dotenv(find_dotenv(usecwd=True))


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_env()
    args = parse_args(argv)

    try:
        path = validate_input_path(args.path)
    except UsageError as e:
        print(f" ERROR  {e}")
        return EXIT_USAGE
    except FileNotFoundError as e:
        print(f" ERROR  {e}")
        return EXIT_FAILED

    catalog = None
    if not args.skip_catalog:
        catalog = CatalogSettings(
            url=(args.api_url or "").strip(),
            max_pages=args.max_pages,
            timeout=args.timeout,
        )

    try:
        providers = load_providers(Path(args.providers).expanduser())
        process_file(path, providers=providers, catalog=catalog, progress_cb=print_event)
    except (SlotDetailsError, OSError, ValueError) as e:
        dbg("run_failed", path=str(path), error=repr(e))
        print(f" ERROR  {e}")
        return EXIT_FAILED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
