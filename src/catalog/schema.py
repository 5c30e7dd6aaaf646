"""Pydantic models describing catalogued UI components."""
from __future__ import annotations

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, Field

Variant = Literal["nativewind", "themed", "unstyled"]
ContentKind = Literal["source", "demo"]
SourceMode = Literal["local", "github"]

# Fixed priority used when a lookup does not name a variant.
VARIANTS: Tuple[str, ...] = ("nativewind", "themed", "unstyled")
CONTENT_KINDS: Tuple[str, ...] = ("source", "demo")


class Capabilities(BaseModel):
    """Which kinds of supporting content exist for a component."""

    has_demo: bool = False
    has_stories: bool = False
    has_docs: bool = False

    @property
    def richness(self) -> int:
        return int(self.has_demo) + int(self.has_stories) + int(self.has_docs)

    def labels(self) -> List[str]:
        labels = []
        if self.has_demo:
            labels.append("demo")
        if self.has_stories:
            labels.append("stories")
        if self.has_docs:
            labels.append("docs")
        return labels


class ComponentMetadata(BaseModel):
    """Optional descriptive data gathered while scanning."""

    description: Optional[str] = None
    props: List[str] = Field(default_factory=list)
    dependencies: List[str] = Field(default_factory=list)


class ComponentRecord(BaseModel):
    """One locatable realisation of a named component in a single variant.

    ``locator`` is a filesystem path in local mode or a ``github:<variant>:<name>`` key in
    remote mode. It is fixed at creation; capability flags may be filled in later.
    """

    name: str
    variant: Variant
    locator: str = Field(frozen=True)
    capabilities: Capabilities = Field(default_factory=Capabilities)
    metadata: Optional[ComponentMetadata] = None

    @property
    def feature_richness(self) -> int:
        return self.capabilities.richness

    @property
    def has_demo(self) -> bool:
        return self.capabilities.has_demo

    @property
    def has_stories(self) -> bool:
        return self.capabilities.has_stories

    @property
    def has_docs(self) -> bool:
        return self.capabilities.has_docs

    @property
    def description(self) -> Optional[str]:
        return self.metadata.description if self.metadata else None

    @property
    def dependencies(self) -> List[str]:
        return list(self.metadata.dependencies) if self.metadata else []

    def identity(self) -> Tuple[str, str]:
        return self.name, self.variant
