"""Query surface over the reconciled component catalog."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple

from utils.logging import get_logger
from utils.parallel import run_in_executor

from .errors import ComponentNotFoundError, RemoteError, RemoteNotFoundError
from .github import GitHubClient
from .probe import read_text
from .reconcile import CatalogIndex
from .scanner import ComponentDiscovery
from .scanners.remote import RemoteScanner, demo_paths, source_paths
from .schema import CONTENT_KINDS, VARIANTS, ComponentRecord, ContentKind, SourceMode

LOGGER = get_logger(__name__)


class CatalogState(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"


@dataclass(slots=True)
class CatalogConfig:
    """Where the catalog reads components from."""

    root: Path
    remote: bool = False
    github_token: Optional[str] = None

    def __post_init__(self) -> None:
        self.root = Path(self.root)


def local_candidates(name: str, kind: ContentKind) -> List[str]:
    """Filenames tried, in order, relative to a local record's locator."""

    if kind == "demo":
        return [f"{name}.stories.tsx", "demo.tsx", f"{name}.tsx"]
    return ["index.tsx", f"{name}.tsx"]


class ComponentCatalog:
    """Name- and variant-addressable view over every discovered component.

    ``initialize`` runs discovery once; concurrent callers share the same run. The
    index is read-only afterwards, apart from lazily resolved remote capabilities.
    """

    def __init__(
        self,
        config: CatalogConfig,
        *,
        discovery: Optional[ComponentDiscovery] = None,
        client: Optional[GitHubClient] = None,
    ) -> None:
        self.config = config
        self._discovery = discovery or ComponentDiscovery()
        self._client = client
        self._index = CatalogIndex()
        self._state = CatalogState.UNINITIALIZED
        self._pending: Optional["asyncio.Future[CatalogIndex]"] = None
        self._resolved: Set[Tuple[str, str]] = set()

    @property
    def state(self) -> CatalogState:
        return self._state

    @property
    def client(self) -> GitHubClient:
        if self._client is None:
            self._client = GitHubClient(self.config.github_token)
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()

    async def initialize(self) -> None:
        if self._state is CatalogState.READY:
            return
        if self._pending is None:
            self._state = CatalogState.INITIALIZING
            self._pending = asyncio.ensure_future(self._build_index())
        pending = self._pending
        try:
            self._index = await asyncio.shield(pending)
        except BaseException:
            if pending.done() and self._pending is pending:
                self._pending = None
                self._state = CatalogState.UNINITIALIZED
            raise
        self._state = CatalogState.READY

    async def _build_index(self) -> CatalogIndex:
        mode = "GitHub" if self.config.remote else "local"
        LOGGER.info("Initializing component discovery in %s mode...", mode)
        try:
            if self.config.remote:
                index = CatalogIndex()
                for record in await RemoteScanner(self.client).scan():
                    index.add(record)
            else:
                index = await run_in_executor(self._discovery.discover, self.config.root)
        except Exception:
            LOGGER.exception("Failed to initialize component discovery")
            raise
        LOGGER.info("Discovered %d components across all variants", len(index))
        return index

    def get_components(self) -> List[str]:
        return sorted(self._index.names())

    def get_component(self, name: str, variant: Optional[str] = None) -> Optional[ComponentRecord]:
        records = self._index.variants(name)
        if not records:
            return None
        if variant:
            return self._index.find(name, variant)
        for preferred in VARIANTS:
            record = self._index.find(name, preferred)
            if record is not None:
                return record
        return records[0]

    def get_component_variants(self, name: str) -> List[ComponentRecord]:
        return self._index.variants(name)

    def get_all_components(self) -> List[ComponentRecord]:
        return list(self._index)

    def get_source_mode(self) -> SourceMode:
        return "github" if self.config.remote else "local"

    async def get_component_content(
        self, name: str, variant: Optional[str] = None, kind: ContentKind = "source"
    ) -> Optional[str]:
        """Return the text of a component's source or demo, or ``None`` if unknown.

        In remote mode an exhausted template list raises :class:`ComponentNotFoundError`.
        An unsupported ``kind`` raises :class:`ValueError`.
        """

        if kind not in CONTENT_KINDS:
            raise ValueError(f"Unsupported content kind: {kind!r}")
        record = self.get_component(name, variant)
        if record is None:
            return None
        if self.config.remote:
            return await self._remote_content(record, kind)
        return await run_in_executor(self._local_content, record, kind)

    def _local_content(self, record: ComponentRecord, kind: ContentKind) -> Optional[str]:
        base = Path(record.locator)
        for filename in local_candidates(record.name, kind):
            content = read_text(base / filename)
            if content is not None:
                return content
        return None

    async def _remote_content(self, record: ComponentRecord, kind: ContentKind) -> str:
        paths = demo_paths(record.name) if kind == "demo" else source_paths(record.name, record.variant)
        for path in paths:
            try:
                content = await self.client.fetch_raw(path)
            except RemoteNotFoundError:
                LOGGER.debug("Component not found at %s", path)
                continue
            await self._resolve_capabilities(record, kind, path)
            return content
        raise ComponentNotFoundError(record.name, record.variant, kind)

    async def _resolve_capabilities(self, record: ComponentRecord, kind: ContentKind, path: str) -> None:
        if kind == "demo":
            # Demo templates are example paths, which belong to the nativewind record.
            owner = self._index.find(record.name, "nativewind")
            if owner is None:
                return
            if path.endswith(".stories.tsx"):
                owner.capabilities.has_stories = True
            else:
                owner.capabilities.has_demo = True
            return
        key = record.identity()
        if record.variant == "unstyled" and key not in self._resolved:
            self._resolved.add(key)
            record.capabilities.has_docs = await self.client.exists(f"packages/unstyled/{record.name}/README.md")

    async def get_rate_limit_info(self) -> Optional[Dict[str, Any]]:
        if not self.config.remote:
            return None
        try:
            return await self.client.rate_limit()
        except RemoteError as exc:
            LOGGER.error("Failed to get rate limit info: %s", exc)
            return None

