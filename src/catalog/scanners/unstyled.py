"""Scanner for standalone headless component packages."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from utils.logging import get_logger

from ..probe import has_readme, list_directories
from ..schema import Capabilities, ComponentMetadata, ComponentRecord
from .base import ComponentScanner, ScanContext

LOGGER = get_logger(__name__)

UNSTYLED_ROOT = "packages/unstyled"
SKIPPED_DIRECTORIES = frozenset({"node_modules"})
NAMESPACE_PREFIX = "@gluestack-ui"
HOST_RUNTIME = "react"


def relevant_dependencies(manifest: Dict[str, Any]) -> List[str]:
    """Return ecosystem and runtime dependencies declared by a package manifest."""

    declared: List[str] = []
    for field in ("dependencies", "peerDependencies"):
        section = manifest.get(field) or {}
        if isinstance(section, dict):
            declared.extend(name for name in section if name not in declared)
    return [name for name in declared if name.startswith(NAMESPACE_PREFIX) or HOST_RUNTIME in name]


class UnstyledPackageScanner(ComponentScanner):
    relative_root = UNSTYLED_ROOT

    def scan(self, context: ScanContext) -> Iterator[ComponentRecord]:
        if not self.available(context):
            LOGGER.debug("Unstyled components path not found, skipping")
            return
        container = self.container(context)
        LOGGER.debug("Discovering unstyled components in %s", container)
        for name in list_directories(container):
            if name in SKIPPED_DIRECTORIES:
                continue
            record = self._analyze(name, container / name)
            if record is not None:
                yield record

    def _analyze(self, name: str, path: Path) -> Optional[ComponentRecord]:
        manifest_path = path / "package.json"
        try:
            manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as exc:
            LOGGER.warning("Ignoring unreadable manifest %s: %s", manifest_path, exc)
            return None
        if not isinstance(manifest, dict):
            LOGGER.warning("Ignoring manifest %s: expected a JSON object", manifest_path)
            return None
        return ComponentRecord(
            name=name,
            variant="unstyled",
            locator=str(path),
            capabilities=Capabilities(has_docs=has_readme(path)),
            metadata=ComponentMetadata(
                description=manifest.get("description"),
                dependencies=relevant_dependencies(manifest),
            ),
        )
