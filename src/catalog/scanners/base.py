"""Base class for the local source scanners used by component discovery."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from ..probe import is_directory

if TYPE_CHECKING:  # pragma: no cover
    from ..reconcile import CatalogIndex
    from ..schema import ComponentRecord


@dataclass(slots=True)
class ScanContext:
    """Context shared with scanners during discovery."""

    root: Path
    index: "CatalogIndex"


class ComponentScanner(ABC):
    """Walk one directory convention below the source root and yield candidates."""

    #: Container path relative to the source root.
    relative_root: str = ""

    def container(self, context: ScanContext) -> Path:
        return context.root / self.relative_root

    def available(self, context: ScanContext) -> bool:
        """Return ``True`` if the scanner's container exists under ``context.root``."""

        return is_directory(self.container(context))

    @abstractmethod
    def scan(self, context: ScanContext) -> Iterator["ComponentRecord"]:
        """Yield candidate records; a missing container yields nothing."""
