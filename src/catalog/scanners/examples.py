"""Scanner for the storybook example components (one directory per component)."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Optional

from utils.logging import get_logger

from ..probe import list_directories
from ..schema import Capabilities, ComponentRecord
from .base import ComponentScanner, ScanContext

LOGGER = get_logger(__name__)

EXAMPLES_ROOT = "example/storybook-nativewind/src/components"
SKIPPED_DIRECTORIES = frozenset({"docs-components", "hooks"})


class ExampleScanner(ComponentScanner):
    relative_root = EXAMPLES_ROOT

    def scan(self, context: ScanContext) -> Iterator[ComponentRecord]:
        if not self.available(context):
            LOGGER.debug("NativeWind components path not found, skipping")
            return
        container = self.container(context)
        LOGGER.debug("Discovering NativeWind example components in %s", container)
        for name in list_directories(container):
            if name in SKIPPED_DIRECTORIES:
                continue
            record = self._analyze(name, container / name)
            if record is not None:
                yield record

    def _analyze(self, name: str, path: Path) -> Optional[ComponentRecord]:
        try:
            files = os.listdir(path)
        except OSError as exc:
            LOGGER.warning("Failed to analyze NativeWind component %s: %s", name, exc)
            return None
        stories = [f for f in files if f.endswith(".stories.tsx")]
        demos = [f for f in files if f.endswith(".tsx") and not f.endswith(".stories.tsx")]
        return ComponentRecord(
            name=name,
            variant="nativewind",
            locator=str(path),
            capabilities=Capabilities(
                has_demo=bool(demos),
                has_stories=bool(stories),
                has_docs=any(f.endswith(".mdx") for f in files),
            ),
        )
