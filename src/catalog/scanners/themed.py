"""Scanner for components re-exported by the themed package index."""
from __future__ import annotations

import posixpath
import re
from typing import Iterator

from utils.logging import get_logger

from ..probe import has_readme, read_text
from ..schema import Capabilities, ComponentRecord
from .base import ComponentScanner, ScanContext

LOGGER = get_logger(__name__)

THEMED_ROOT = "packages/themed/src"
EXPORT_PATTERN = re.compile(r"""export\s+\*\s+from\s+['"]([^'"]+)['"]""")


class ThemedPackageScanner(ComponentScanner):
    relative_root = THEMED_ROOT

    def scan(self, context: ScanContext) -> Iterator[ComponentRecord]:
        if not self.available(context):
            LOGGER.debug("Themed components path not found, skipping")
            return
        container = self.container(context)
        index_source = read_text(container / "index.ts")
        if index_source is None:
            LOGGER.warning("Failed to parse themed index.ts in %s", container)
            return
        LOGGER.debug("Discovering themed components in %s", container)
        for export_path in EXPORT_PATTERN.findall(index_source):
            name = posixpath.basename(export_path.rstrip("/")) or "Unknown"
            path = container / export_path
            yield ComponentRecord(
                name=name,
                variant="themed",
                locator=str(path),
                capabilities=Capabilities(has_docs=has_readme(path)),
            )
