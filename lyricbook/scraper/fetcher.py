"""Blocking HTTP fetcher shared by the resolver and the extractor pipeline."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from lyricbook.config import settings
from lyricbook.exceptions import FetchError
from lyricbook.scraper.models import RawPage

log = logging.getLogger(__name__)


def make_client() -> httpx.Client:
    """Return an ``httpx.Client`` configured from :data:`settings`."""
    return httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout,
        follow_redirects=True,
    )


def _get(client: httpx.Client, url: str, params: Optional[Mapping[str, Any]]) -> RawPage:
    try:
        response = client.get(url, params=params)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise FetchError(url, str(exc)) from exc
    log.debug("GET %s -> %d", response.url, response.status_code)
    return RawPage(url=str(response.url), html=response.text, status_code=response.status_code)


def fetch_url(
    url: str,
    params: Optional[Mapping[str, Any]] = None,
    client: Optional[httpx.Client] = None,
) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    When *client* is given it is reused (the catalog shares one per run);
    otherwise a short-lived client is opened for this single request.

    Raises:
        FetchError: On transport failure or a 4xx/5xx status code.
    """
    if client is not None:
        return _get(client, url, params)
    with make_client() as own_client:
        return _get(own_client, url, params)
