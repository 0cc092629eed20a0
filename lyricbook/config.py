"""Centralised settings for Lyricbook.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_BROWSER_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Lyrics source
    # ------------------------------------------------------------------
    origin: str = field(
        default_factory=lambda: os.environ.get("LYRICBOOK_ORIGIN", "https://utaten.com")
    )
    search_path: str = field(
        default_factory=lambda: os.environ.get("LYRICBOOK_SEARCH_PATH", "/lyric/search")
    )

    @property
    def search_url(self) -> str:
        """Absolute URL of the lyric search endpoint."""
        return self.origin.rstrip("/") + self.search_path

    # ------------------------------------------------------------------
    # Input / output
    # ------------------------------------------------------------------
    songs_file: Path = field(
        default_factory=lambda: Path(os.environ.get("LYRICBOOK_SONGS_FILE", "songs"))
    )
    output_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("LYRICBOOK_OUTPUT_DIR", "lyrics"))
    )
    emit_page_break: bool = field(
        default_factory=lambda: _env_flag("LYRICBOOK_PAGE_BREAK", "true")
    )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("LYRICBOOK_USER_AGENT", _BROWSER_UA)
    )

    # ------------------------------------------------------------------
    # E-book compiler (pandoc)
    # ------------------------------------------------------------------
    pandoc_bin: str = field(
        default_factory=lambda: os.environ.get("PANDOC_BIN", "pandoc")
    )
    book_output: Path = field(
        default_factory=lambda: Path(os.environ.get("LYRICBOOK_BOOK", "lyrics.epub"))
    )
    stylesheet: Path = field(
        default_factory=lambda: Path(os.environ.get("LYRICBOOK_STYLESHEET", "style.css"))
    )
    metadata_file: Path = field(
        default_factory=lambda: Path(os.environ.get("LYRICBOOK_METADATA", "metadata.xml"))
    )
    embed_font: Path = field(
        default_factory=lambda: Path(os.environ.get("LYRICBOOK_FONT", "font.ttf"))
    )


# Module-level singleton — import this everywhere:
#   from lyricbook.config import settings
settings = Settings()
