"""Hand the downloaded lyrics to pandoc to build the e-book."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from lyricbook.config import Settings, settings as default_settings
from lyricbook.exceptions import CompilerInvocationError

log = logging.getLogger(__name__)


def build_command(files: Sequence[Path], cfg: Settings) -> List[str]:
    """Return the pandoc argument vector for *files* (order preserved)."""
    return [
        cfg.pandoc_bin,
        "-o", str(cfg.book_output),
        "-f", "html",
        "--toc",
        "--css", str(cfg.stylesheet),
        "--epub-metadata", str(cfg.metadata_file),
        "--epub-embed-font", str(cfg.embed_font),
        *(str(f) for f in files),
    ]


def compile_book(files: Sequence[Path], cfg: Optional[Settings] = None) -> int:
    """Run pandoc over *files* and return its exit code.

    Raises:
        CompilerInvocationError: If there is nothing to compile or pandoc is
            not installed.
    """
    cfg = cfg or default_settings
    if not files:
        raise CompilerInvocationError("No lyrics files to compile.")
    if shutil.which(cfg.pandoc_bin) is None:
        raise CompilerInvocationError(
            f"{cfg.pandoc_bin!r} not found on PATH. Install pandoc or set PANDOC_BIN."
        )

    cmd = build_command(files, cfg)
    log.info("Compiling %d file(s) into %s", len(files), cfg.book_output)
    log.debug("Running: %s", " ".join(cmd))
    try:
        return subprocess.call(cmd)
    except OSError as exc:
        raise CompilerInvocationError(f"Could not run {cfg.pandoc_bin!r}: {exc}") from exc
