"""Lyricbook CLI — download lyrics and compile them into an e-book.

Usage:
    python cli/main.py --help

Commands:
    download  → resolve, fetch and extract every song in the songs file
    build     → download, then compile ``lyrics/`` into an EPUB with pandoc
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from lyricbook.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import List, Optional

import typer
from rich.logging import RichHandler

from lyricbook.catalog import manifest, read_songs, run
from lyricbook.compiler import compile_book
from lyricbook.config import settings
from lyricbook.exceptions import CompilerInvocationError, InputError
from lyricbook.scraper.models import Outcome, OutcomeStatus

app = typer.Typer(
    name="lyricbook",
    help="Collect UtaTen lyrics into an e-book.",
    no_args_is_help=True,
)

_SONGS_HELP = (
    "Create a file named 'songs' with one song per line, e.g.\n"
    "    夜に駆ける\n"
    "    紅蓮華 / LiSA"
)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level="DEBUG" if verbose else "INFO",
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False, show_level=False)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _download(songs: Optional[Path], output_dir: Optional[Path], page_break: bool) -> List[Outcome]:
    songs = songs or settings.songs_file
    try:
        queries = read_songs(songs)
    except InputError as exc:
        typer.echo(f"[lyricbook] {exc}")
        typer.echo(_SONGS_HELP)
        raise typer.Exit(1)
    if not queries:
        typer.echo(f"[lyricbook] No songs listed in {songs}.")
        typer.echo(_SONGS_HELP)
        raise typer.Exit(1)

    outcomes = run(queries, output_dir=output_dir, emit_page_break=page_break)
    for o in outcomes:
        if o.status is OutcomeStatus.FAILED:
            typer.echo(f"  [{o.status.value}] {o.query}: {o.error}")
        elif o.path is not None:
            typer.echo(f"  [{o.status.value}] {o.query} -> {o.path}")
        else:
            typer.echo(f"  [{o.status.value}] {o.query}")

    counts = {s: sum(1 for o in outcomes if o.status is s) for s in OutcomeStatus}
    typer.echo(
        "[lyricbook] "
        + "  ".join(f"{s.value}: {n}" for s, n in counts.items())
    )
    if not manifest(outcomes):
        typer.echo("[lyricbook] No lyrics were found; nothing to compile.")
        raise typer.Exit(1)
    return outcomes


@app.command("download")
def download(
    songs: Optional[Path] = typer.Option(None, help="Song list file (default: ./songs)."),
    output_dir: Optional[Path] = typer.Option(None, help="Where to write lyrics HTML files."),
    page_break: bool = typer.Option(
        settings.emit_page_break, "--page-break/--no-page-break",
        help="Append a page-break marker after each song.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Download lyrics for every song in the list, skipping files already on disk."""
    _setup_logging(verbose)
    _download(songs, output_dir, page_break)


@app.command("build")
def build(
    songs: Optional[Path] = typer.Option(None, help="Song list file (default: ./songs)."),
    output_dir: Optional[Path] = typer.Option(None, help="Where to write lyrics HTML files."),
    page_break: bool = typer.Option(
        settings.emit_page_break, "--page-break/--no-page-break",
        help="Append a page-break marker after each song.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Download lyrics, then compile them into an e-book with pandoc."""
    _setup_logging(verbose)
    outcomes = _download(songs, output_dir, page_break)

    try:
        code = compile_book(manifest(outcomes))
    except CompilerInvocationError as exc:
        typer.echo(f"[lyricbook] {exc}")
        raise typer.Exit(1)
    if code == 0:
        typer.echo(f"[lyricbook] Wrote {settings.book_output}")
    raise typer.Exit(code)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
