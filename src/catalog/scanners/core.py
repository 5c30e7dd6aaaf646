"""Scanner for the framework-native core component implementations."""
from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, List, Optional

from utils.logging import get_logger

from ..naming import kebab_to_pascal
from ..probe import has_file, list_directories, read_text
from ..schema import Capabilities, ComponentMetadata, ComponentRecord
from .base import ComponentScanner, ScanContext

LOGGER = get_logger(__name__)

CORE_ROOT = "example/storybook-nativewind/src/core-components/nativewind"
SKIPPED_DIRECTORIES = frozenset({"gluestack-ui-provider"})
NAMESPACE_PREFIX = "@gluestack-ui"
IMPORT_PATTERN = re.compile(r"""import\s+.*?\s+from\s+['"]([^'"]+)['"];?""", re.DOTALL)


def extract_namespace_imports(source: str, prefix: str = NAMESPACE_PREFIX) -> List[str]:
    """Return unique import specifiers starting with ``prefix`` in first-seen order."""

    seen: List[str] = []
    for specifier in IMPORT_PATTERN.findall(source):
        if specifier.startswith(prefix) and specifier not in seen:
            seen.append(specifier)
    return seen


class CoreComponentScanner(ComponentScanner):
    relative_root = CORE_ROOT
    variant = "nativewind"

    def scan(self, context: ScanContext) -> Iterator[ComponentRecord]:
        if not self.available(context):
            LOGGER.debug("NativeWind core components path not found, skipping")
            return
        container = self.container(context)
        LOGGER.debug("Discovering NativeWind core components in %s", container)
        for directory in list_directories(container):
            if directory in SKIPPED_DIRECTORIES:
                continue
            record = self._analyze(kebab_to_pascal(directory), container / directory)
            if record is not None:
                yield record

    def _analyze(self, name: str, path: Path) -> Optional[ComponentRecord]:
        if not has_file(path, "index.tsx"):
            return None
        source = read_text(path / "index.tsx") or ""
        return ComponentRecord(
            name=name,
            variant=self.variant,
            locator=str(path),
            # A separate styles file is the closest available signal for documentation.
            capabilities=Capabilities(has_docs=has_file(path, "styles.tsx")),
            metadata=ComponentMetadata(
                description=f"{self.variant} implementation of {name} component",
                dependencies=extract_namespace_imports(source),
            ),
        )
