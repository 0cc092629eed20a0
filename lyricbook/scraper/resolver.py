"""Song query → lyrics page URL, via the site's lyric search."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup

from lyricbook.config import settings
from lyricbook.scraper.fetcher import fetch_url
from lyricbook.scraper.models import SongQuery

log = logging.getLogger(__name__)

_RESULT_LINK = ".searchResult__title a"


def first_result(html: str, origin: str) -> Optional[str]:
    """Return the absolute URL of the first search result in *html*, or ``None``.

    No ranking happens here: whatever the site lists first wins.
    """
    soup = BeautifulSoup(html, "html.parser")
    link = soup.select_one(_RESULT_LINK)
    if link is None:
        return None
    href = (link.get("href") or "").strip()
    if not href:
        return None
    return urljoin(origin.rstrip("/") + "/", href)


def resolve(query: SongQuery, client: Optional[httpx.Client] = None) -> Optional[str]:
    """Search for *query* and return the lyrics page URL, or ``None`` when not found.

    Raises:
        FetchError: If the search request fails.
    """
    raw = fetch_url(
        settings.search_url,
        params={"artist_name": query.artist, "title": query.title},
        client=client,
    )
    url = first_result(raw.html, settings.origin)
    if url is None:
        log.info("No search results for %s", query)
    return url
