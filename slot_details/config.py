# slot_details/config.py
from __future__ import annotations

from pathlib import Path


# -----------------------------
# Input / output
# -----------------------------

HTML_EXTENSIONS = (".htm", ".html")
OUTPUT_EXTENSION = ".yml"

# Bumped whenever the YAML layout changes shape
RECORD_VERSION = 2


# -----------------------------
# Provider table
# -----------------------------

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_PROVIDERS_FILE = DATA_DIR / "providers.csv"

PROVIDER_COLUMNS = [
    "id",
    "name",
    "db_name",
    "url_slug_prefix",
    "server_id_prefix",
]


# -----------------------------
# Catalog API
# -----------------------------

GAMES_API_ENV = "GAMES_API"

CATALOG_ORDER_BY = "name"
CATALOG_SORT_ORDER = "asc"

# Upper bound on pages walked per lookup
CATALOG_MAX_PAGES = 100

# A page this short holds only the loadmore sentinel
CATALOG_MIN_PAGE_ITEMS = 2


# -----------------------------
# HTTP
# -----------------------------

HTTP_TIMEOUT = 30

UA = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
)
