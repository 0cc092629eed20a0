"""Catalog: the per-song pipeline and the manifest handed to the compiler.

``run`` drives every song through

    filename → skip if on disk → resolve → fetch → extract → persist

strictly in input order.  Faults inside one song are logged and reported as a
``FAILED`` outcome; the rest of the list is still processed.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional

import httpx

from lyricbook.config import settings
from lyricbook.exceptions import InputError, LyricbookError
from lyricbook.scraper.extractor import extract
from lyricbook.scraper.fetcher import fetch_url, make_client
from lyricbook.scraper.models import Outcome, OutcomeStatus, SongQuery
from lyricbook.scraper.resolver import resolve

log = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f\x7f]')

# Per component, so "<title> - <artist>.html" stays under the 255-byte name limit.
_MAX_COMPONENT_BYTES = 120


def _safe_component(text: str) -> str:
    cleaned = _UNSAFE_CHARS.sub("_", text)
    # Cut on a byte budget without splitting a multi-byte character.
    cleaned = cleaned.encode("utf-8")[:_MAX_COMPONENT_BYTES].decode("utf-8", "ignore")
    cleaned = cleaned.rstrip(". ")
    return cleaned or "_"


def song_filename(query: SongQuery, output_dir: Optional[Path] = None) -> Path:
    """Deterministic output path for *query*.

    ``Song A`` → ``lyrics/Song A.html``; ``Song A / Artist B`` →
    ``lyrics/Song A - Artist B.html``.  Characters that are not allowed in
    file names are replaced by ``_``.
    """
    if output_dir is None:
        output_dir = settings.output_dir
    name = _safe_component(query.title)
    if query.artist:
        name = f"{name} - {_safe_component(query.artist)}"
    return Path(output_dir) / f"{name}.html"


def read_songs(path: Path) -> List[SongQuery]:
    """Read the song list at *path*: one query per line, blanks and ``#`` comments skipped.

    Raises:
        InputError: If the file is missing, not valid UTF-8, or a line has no title.
    """
    try:
        # utf-8-sig drops the BOM some Windows editors write.
        text = Path(path).read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise InputError(f"Song list not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise InputError(f"Song list is not valid UTF-8: {path} ({exc})") from exc

    queries = []
    for line in text.splitlines():
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        queries.append(SongQuery.parse(line))
    return queries


def process_song(
    query: SongQuery,
    output_dir: Optional[Path] = None,
    client: Optional[httpx.Client] = None,
    emit_page_break: Optional[bool] = None,
) -> Outcome:
    """Run one song through the pipeline and report what happened."""
    path = song_filename(query, output_dir)
    url = None
    try:
        if path.exists():
            log.debug("Already downloaded: %s", path)
            return Outcome(query=query, status=OutcomeStatus.SKIPPED, path=path)

        url = resolve(query, client=client)
        if url is None:
            return Outcome(query=query, status=OutcomeStatus.NOT_FOUND)

        raw = fetch_url(url, client=client)
        html = extract(raw.html, emit_page_break=emit_page_break).serialize()

        # Exclusive create: never overwrite a file that appeared meanwhile.
        try:
            with open(path, "xb") as fh:
                fh.write(html)
        except FileExistsError:
            return Outcome(query=query, status=OutcomeStatus.SKIPPED, path=path, url=url)
    except (LyricbookError, OSError) as exc:
        log.warning("Failed to process %s: %s", query, exc)
        return Outcome(query=query, status=OutcomeStatus.FAILED, url=url, error=str(exc))

    log.info("Saved %s -> %s", url, path)
    return Outcome(query=query, status=OutcomeStatus.PERSISTED, path=path, url=url)


def run(
    queries: Iterable[SongQuery],
    output_dir: Optional[Path] = None,
    emit_page_break: Optional[bool] = None,
) -> List[Outcome]:
    """Process *queries* sequentially, in order, sharing one HTTP client."""
    if output_dir is None:
        output_dir = settings.output_dir
    Path(output_dir).mkdir(parents=True, exist_ok=True)

    outcomes: List[Outcome] = []
    with make_client() as client:
        for query in queries:
            outcomes.append(
                process_song(
                    query,
                    output_dir=output_dir,
                    client=client,
                    emit_page_break=emit_page_break,
                )
            )
    return outcomes


def manifest(outcomes: Iterable[Outcome]) -> List[Path]:
    """Paths of persisted and skipped songs, in input order.

    Two queries can map to the same file (a repeated line, or titles that only
    differ in sanitized characters); each path is listed once, at its first
    position.
    """
    seen: set[Path] = set()
    paths: List[Path] = []
    for o in outcomes:
        if o.in_manifest and o.path is not None and o.path not in seen:
            seen.add(o.path)
            paths.append(o.path)
    return paths
