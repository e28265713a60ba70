"""Utility helpers for working with files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Collection, Iterator, Optional

LOGGER = logging.getLogger(__name__)


def _raise(error: OSError) -> None:
    raise error


def iter_named_files(
    root: Path, filename: str, *, excluded_dirs: Collection[str] = ()
) -> Iterator[Path]:
    """Yield files called ``filename`` under ``root`` in sorted walk order.

    Directories named in ``excluded_dirs`` are not descended into. Walk
    errors propagate as :class:`OSError`.
    """
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded_dirs)
        if filename in filenames:
            yield Path(dirpath) / filename


def read_text(path: Path) -> Optional[str]:
    """Read a UTF-8 file, returning ``None`` when it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.warning("Unable to read %s: %s", path, exc)
        return None
