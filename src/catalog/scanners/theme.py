"""Scanner deriving themed components from design-token theme files."""
from __future__ import annotations

from typing import Iterator, List

from utils.logging import get_logger

from ..naming import extract_base_component_name
from ..probe import is_file, list_entries
from ..schema import ComponentMetadata, ComponentRecord
from .base import ComponentScanner, ScanContext

LOGGER = get_logger(__name__)

THEME_ROOT = "packages/config/src/theme"


def theme_base_names(filenames: List[str]) -> List[str]:
    """Return the distinct base component names for theme files, in first-seen order."""

    names: List[str] = []
    for filename in filenames:
        if not filename.endswith(".ts") or filename == "index.ts":
            continue
        base = extract_base_component_name(filename[: -len(".ts")])
        if base not in names:
            names.append(base)
    return names


class ThemeTokenScanner(ComponentScanner):
    relative_root = THEME_ROOT

    def scan(self, context: ScanContext) -> Iterator[ComponentRecord]:
        if not self.available(context):
            LOGGER.debug("Theme components path not found, skipping")
            return
        container = self.container(context)
        LOGGER.debug("Discovering theme-based components in %s", container)
        filenames = [name for name in list_entries(container) if is_file(container / name)]
        for name in theme_base_names(filenames):
            if name in context.index:
                continue
            yield ComponentRecord(
                name=name,
                variant="themed",
                locator=str(container / f"{name}.ts"),
                metadata=ComponentMetadata(
                    description=f"Themed variant of {name} component with Gluestack design tokens"
                ),
            )
