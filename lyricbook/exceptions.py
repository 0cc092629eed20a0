"""
Custom exceptions for Lyricbook, so callers can tell a per-song fault from a
run-level one.
"""


class LyricbookError(Exception):
    """Base exception for all application-specific errors."""


class InputError(LyricbookError):
    """Raised when the song list is missing, unreadable or holds an empty title."""


class FetchError(LyricbookError):
    """Raised when a search or page request fails at the transport or HTTP level."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class ExtractionError(LyricbookError):
    """Raised when a lyrics page does not have the expected structure."""


class MissingRegion(ExtractionError):
    """Raised when one of the title, metadata or body regions is absent."""

    def __init__(self, region: str):
        super().__init__(f"Region not found on page: {region}")
        self.region = region


class SerializationError(LyricbookError):
    """Raised when a pruned document cannot be encoded to bytes."""


class CompilerInvocationError(LyricbookError):
    """Raised when the external e-book compiler cannot be started."""
