# slot_details/catalog/http.py
from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlencode

import cloudscraper

from slot_details.config import HTTP_TIMEOUT, UA


def request_url(url: str, params: Mapping[str, Any]) -> str:
    """Full GET URL, for display in status lines."""
    if not params:
        return url
    joiner = "&" if "?" in url else "?"
    return f"{url}{joiner}{urlencode(params)}"


def fetch_json(
    url: str,
    *,
    params: Mapping[str, Any],
    timeout: float = HTTP_TIMEOUT,
) -> Any:
    """
    GET `url` and return the decoded JSON body.

    - cloudscraper session, same browser profile as a desktop Chrome
    - single attempt, no retries
    - raises on transport errors, non-2xx status and undecodable bodies;
      callers decide whether that is fatal
    """
    headers = {
        "User-Agent": UA,
        "Accept": "application/json",
    }

    scraper = cloudscraper.create_scraper(
        browser={"browser": "chrome", "platform": "linux", "mobile": False}
    )
    resp = scraper.get(url, params=dict(params), headers=headers, timeout=timeout)
    resp.raise_for_status()
    return resp.json()
