"""Filesystem probes that treat every lookup failure as absence."""
from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from utils.logging import get_logger

LOGGER = get_logger(__name__)


def safe_stat(path: Path) -> Optional[os.stat_result]:
    try:
        return os.stat(path)
    except (OSError, ValueError) as exc:
        LOGGER.debug("stat failed: %s -> %s", path, exc)
        return None


def path_exists(path: Path) -> bool:
    """Return ``True`` when ``path`` can be stat'ed; never raises."""

    return safe_stat(path) is not None


def is_directory(path: Path) -> bool:
    try:
        return path.is_dir()
    except (OSError, ValueError):
        return False


def is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except (OSError, ValueError):
        return False


def has_file(directory: Path, filename: str) -> bool:
    return path_exists(directory / filename)


def has_readme(directory: Path) -> bool:
    return has_file(directory, "README.md")


def list_entries(path: Path) -> List[str]:
    """Return the names inside ``path`` sorted by name, or an empty list."""

    try:
        return sorted(os.listdir(path))
    except OSError as exc:
        LOGGER.warning("Failed to list %s: %s", path, exc)
        return []


def list_directories(path: Path) -> List[str]:
    """Return visible subdirectory names of ``path`` sorted by name."""

    return [
        name
        for name in list_entries(path)
        if not name.startswith(".") and is_directory(path / name)
    ]


def read_text(path: Path) -> Optional[str]:
    """Return the UTF-8 text of ``path`` or ``None`` when it cannot be read."""

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.debug("Cannot read %s: %s", path, exc)
        return None
