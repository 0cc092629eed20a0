"""Scraper package — lyric search, page fetch & region extraction."""

from lyricbook.scraper.extractor import extract
from lyricbook.scraper.fetcher import fetch_url
from lyricbook.scraper.models import Outcome, OutcomeStatus, PrunedDocument, RawPage, SongQuery
from lyricbook.scraper.resolver import resolve

__all__ = [
    "fetch_url",
    "resolve",
    "extract",
    "RawPage",
    "SongQuery",
    "PrunedDocument",
    "Outcome",
    "OutcomeStatus",
]
