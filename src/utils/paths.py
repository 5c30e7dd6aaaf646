"""Path utility helpers."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


def normalise_path(path: Path) -> Path:
    """Return a normalised path handling Windows separators and ``~``."""

    return Path(str(path).replace("\\", "/")).expanduser().resolve()


def resolve_within(root: Path, relative: Optional[str]) -> Path:
    """Join ``relative`` onto ``root``; an empty value selects the root itself.

    Raises :class:`ValueError` if the joined path lies outside ``root``.
    """

    if not relative:
        return root
    target = root / relative.strip("/")
    resolved_root = Path(root).resolve()
    resolved = target.resolve()
    if resolved != resolved_root and resolved_root not in resolved.parents:
        raise ValueError(f"Path {relative!r} is outside {root}")
    return target
