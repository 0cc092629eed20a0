"""Data models for the lyrics pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from bs4 import Tag

from lyricbook.exceptions import InputError, SerializationError

SEPARATOR = " / "


@dataclass(frozen=True)
class SongQuery:
    """A song title, optionally paired with an artist name."""

    title: str
    artist: str = ""

    @classmethod
    def parse(cls, line: str) -> SongQuery:
        """Parse ``<title>`` or ``<title> / <artist>``.

        Only the first separator splits; anything after it belongs to the artist.

        Raises:
            InputError: If the title is empty after trimming.
        """
        title, _, artist = line.partition(SEPARATOR)
        title = title.strip()
        if not title:
            raise InputError(f"Song line has an empty title: {line!r}")
        return cls(title=title, artist=artist.strip())

    def __str__(self) -> str:
        if self.artist:
            return f"{self.title}{SEPARATOR}{self.artist}"
        return self.title


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class PrunedDocument:
    """The reassembled lyrics fragment: title, metadata and body in one container."""

    container: Tag

    def serialize(self) -> bytes:
        """Return the container as UTF-8 markup.

        Raises:
            SerializationError: If the tree cannot be encoded.
        """
        try:
            return self.container.encode("utf-8")
        except (UnicodeError, ValueError) as exc:
            raise SerializationError(f"Could not serialize lyrics document: {exc}") from exc


class OutcomeStatus(str, Enum):
    PERSISTED = "persisted"
    SKIPPED = "skipped"
    NOT_FOUND = "not found"
    FAILED = "failed"


@dataclass
class Outcome:
    """What happened to one song during a catalog run."""

    query: SongQuery
    status: OutcomeStatus
    path: Optional[Path] = None
    url: Optional[str] = None
    error: Optional[str] = None

    @property
    def in_manifest(self) -> bool:
        return self.status in (OutcomeStatus.PERSISTED, OutcomeStatus.SKIPPED)
