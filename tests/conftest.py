"""
Shared pytest fixtures for all tests.
"""

import shutil

import pytest

from slot_details.models import Provider
from slot_details.parse.document import parse_document
from tests.fixtures.documents import SAMPLE_HTML


# =============================================================================
# Documents
# =============================================================================

@pytest.fixture
def sample_html_path(tmp_path):
    """Copy of the Book of Ra page in a scratch dir (output lands beside it)."""
    dest = tmp_path / "book-of-ra.html"
    shutil.copy(SAMPLE_HTML, dest)
    return dest


@pytest.fixture
def sample_soup(sample_html_path):
    return parse_document(sample_html_path.read_text(encoding="utf-8"))


# =============================================================================
# Providers
# =============================================================================

@pytest.fixture
def playngo():
    return Provider(id="playngo", name="Play'n GO", db_name="playngo", url_slug_prefix="", server_id_prefix="pg")


@pytest.fixture
def providers(playngo):
    """
    Small provider table:
    - playngo: no urlSlug prefix, serverId prefix "pg"
    - microgaming: both prefixes set
    - isoftbet: no catalog vendor id
    """
    return [
        playngo,
        Provider(id="microgaming", name="Microgaming", db_name="microgaming", url_slug_prefix="mg", server_id_prefix="mg"),
        Provider(id="isoftbet", name="iSoftBet", db_name="", url_slug_prefix="", server_id_prefix="isb"),
    ]


@pytest.fixture
def events():
    """Collects ProgressEvents; pass `events.append` as progress_cb."""
    return []
