"""Lyrics extraction: turns a lyrics page into a :class:`PrunedDocument`.

Each region is located by CSS selector and copied out of the parsed page, so
the page tree itself is never modified.  Unwanted substructure is then removed
from the copy:

* title     ``.newLyricTitle``  minus the ``.newLyricTitle_afterTxt`` suffix
* metadata  ``.lyricData``      minus ``.newLyricWorkFooter`` (tags, buttons),
                                with relative links made absolute
* body      ``.lyricBody``      minus every ``.romaji`` reading
"""

from __future__ import annotations

import copy
from typing import Optional

from bs4 import BeautifulSoup, Tag

from lyricbook.config import settings
from lyricbook.exceptions import MissingRegion
from lyricbook.scraper.models import PrunedDocument

TITLE_REGION = ".newLyricTitle"
TITLE_SUFFIX = ".newLyricTitle_afterTxt"
DATA_REGION = ".lyricData"
DATA_FOOTER = ".newLyricWorkFooter"
BODY_REGION = ".lyricBody"
BODY_ROMAJI = ".romaji"

PAGE_BREAK_CLASS = "page-break"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _copy_region(document: BeautifulSoup, selector: str, name: str) -> Tag:
    """Return a detached deep copy of the first element matching *selector*."""
    region = document.select_one(selector)
    if region is None:
        raise MissingRegion(name)
    return copy.copy(region)


def _drop(fragment: Tag, selector: str) -> None:
    for node in fragment.select(selector):
        node.decompose()


def _is_path_relative(href: str) -> bool:
    return href.startswith("/") and not href.startswith("//")


def absolutize_links(fragment: Tag, origin: str) -> int:
    """Prefix every path-relative ``href`` in *fragment* with *origin*.

    Already-absolute links are left alone, so a second pass changes nothing.
    Returns the number of links rewritten.
    """
    origin = origin.rstrip("/")
    rewritten = 0
    for link in fragment.select("a[href]"):
        href = link["href"]
        if _is_path_relative(href):
            link["href"] = origin + href
            rewritten += 1
    return rewritten


def extract_title(document: BeautifulSoup) -> Tag:
    """Title region without the trailing "の歌詞" label."""
    fragment = _copy_region(document, TITLE_REGION, "title")
    _drop(fragment, TITLE_SUFFIX)
    return fragment


def extract_data(document: BeautifulSoup, origin: str) -> Tag:
    """Metadata region without the footer controls, links made absolute."""
    fragment = _copy_region(document, DATA_REGION, "metadata")
    _drop(fragment, DATA_FOOTER)
    absolutize_links(fragment, origin)
    return fragment


def extract_body(document: BeautifulSoup) -> Tag:
    """Lyric body with the romanized reading removed."""
    fragment = _copy_region(document, BODY_REGION, "body")
    _drop(fragment, BODY_ROMAJI)
    return fragment


def _new_container(document: BeautifulSoup) -> Tag:
    """Copy of the page's ``<article>`` with no children, or a fresh one."""
    article = document.find("article")
    if article is None:
        return document.new_tag("article")
    container = copy.copy(article)
    container.clear()
    return container


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract(
    html: str,
    origin: Optional[str] = None,
    emit_page_break: Optional[bool] = None,
) -> PrunedDocument:
    """Extract title, metadata and body from a lyrics page and reassemble them.

    *origin* and *emit_page_break* default to the values in
    :data:`~lyricbook.config.settings`.

    Raises:
        MissingRegion: If the title, metadata or body region is absent.
    """
    if origin is None:
        origin = settings.origin
    if emit_page_break is None:
        emit_page_break = settings.emit_page_break

    document = BeautifulSoup(html, "html.parser")
    title = extract_title(document)
    data = extract_data(document, origin)
    body = extract_body(document)

    container = _new_container(document)
    container.append(title)
    container.append(data)
    container.append(body)
    if emit_page_break:
        container.append(
            document.new_tag(
                "div",
                attrs={"class": PAGE_BREAK_CLASS, "style": "page-break-after: always;"},
            )
        )
    return PrunedDocument(container=container)
