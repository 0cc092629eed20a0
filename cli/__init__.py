"""Command-line interface for Lyricbook."""
