"""Local discovery pipeline: run every scanner and reconcile its candidates."""
from __future__ import annotations

from importlib import metadata
from pathlib import Path
from typing import Dict, List, Optional

from utils.logging import get_logger

from .reconcile import CatalogIndex
from .scanners import (
    ComponentScanner,
    CoreComponentScanner,
    ExampleScanner,
    ScanContext,
    ThemedPackageScanner,
    ThemeTokenScanner,
    UnstyledPackageScanner,
)

LOGGER = get_logger(__name__)
SCANNER_ENTRYPOINT_GROUP = "gluestack_catalog.scanners"


class ComponentDiscovery:
    """Run the registered scanners in order against a local source root."""

    scanners: List[ComponentScanner]

    def __init__(self, scanners: Optional[List[ComponentScanner]] = None) -> None:
        self.scanners = list(scanners) if scanners is not None else self._load_scanners()

    def _load_scanners(self) -> List[ComponentScanner]:
        # Theme tokens only fill gaps, so that scanner always runs last.
        scanners: List[ComponentScanner] = [
            ExampleScanner(),
            CoreComponentScanner(),
            ThemedPackageScanner(),
            UnstyledPackageScanner(),
        ]
        for ep in metadata.entry_points().select(group=SCANNER_ENTRYPOINT_GROUP):
            try:
                loaded = ep.load()
                scanner = loaded() if isinstance(loaded, type) else loaded
            except Exception as exc:  # pragma: no cover - plugin safety
                LOGGER.warning("Failed to load scanner plugin %s: %s", ep.name, exc)
                continue
            if isinstance(scanner, ComponentScanner):
                scanners.append(scanner)
            else:  # pragma: no cover
                LOGGER.warning("Entry point %s did not yield a ComponentScanner", ep.name)
        scanners.append(ThemeTokenScanner())
        return scanners

    def discover(self, root: Path, index: Optional[CatalogIndex] = None) -> CatalogIndex:
        """Reconcile every candidate found below ``root`` into ``index`` and return it."""

        index = index if index is not None else CatalogIndex()
        context = ScanContext(root=Path(root), index=index)
        for scanner in self.scanners:
            outcomes: Dict[str, int] = {}
            for record in scanner.scan(context):
                outcome = index.add(record)
                outcomes[outcome] = outcomes.get(outcome, 0) + 1
            LOGGER.debug("%s: %s", type(scanner).__name__, outcomes or "nothing found")
        return index
