"""Catalog operations rendered as Markdown text for the tool router."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from catalog import CatalogError, ComponentCatalog, ComponentRecord
from repository import build_directory_tree, format_directory_tree
from utils.logging import get_logger
from utils.parallel import run_in_executor
from utils.paths import resolve_within

from .metadata import ExtractedMetadata, extract_imports, extract_story_names, parse_props

LOGGER = get_logger(__name__)

FEATURE_LABELS = {"demo": "Demo", "stories": "Stories", "docs": "Documentation"}
VARIANT_ADVICE = {
    "nativewind": "**For most projects:** Use `nativewind` variant - includes Tailwind CSS styling and examples\n",
    "themed": "**For styled-system projects:** Use `themed` variant - pre-styled with Gluestack design tokens\n",
    "unstyled": "**For custom styling:** Use `unstyled` variant - headless components with full styling control\n",
}


class ToolError(Exception):
    """A tool call failed; the message is meant for the end user."""


def _mode_label(catalog: ComponentCatalog) -> str:
    return "GitHub" if catalog.get_source_mode() == "github" else "Local"


def _not_found(catalog: ComponentCatalog, name: str) -> ToolError:
    available = ", ".join(catalog.get_components())
    return ToolError(f'Component "{name}" not found. Available components: {available}')


def _require(catalog: ComponentCatalog, name: str, variant: Optional[str]) -> ComponentRecord:
    record = catalog.get_component(name, variant)
    if record is None:
        raise _not_found(catalog, name)
    return record


def list_components(catalog: ComponentCatalog) -> str:
    names = catalog.get_components()
    by_variant: Dict[str, List[str]] = {}
    for record in catalog.get_all_components():
        by_variant.setdefault(record.variant, []).append(record.name)

    summary = [
        f"# Gluestack UI Components ({len(names)} total)\n",
        f"Available components: {', '.join(names)}\n\n",
        "## Component Variants:\n",
    ]
    for variant, members in by_variant.items():
        summary.append(f"**{variant.upper()}** ({len(members)}): {', '.join(sorted(set(members)))}\n")

    summary.append("\n## Component Details:\n")
    for name in names:
        summary.append(f"### {name}\n")
        for record in catalog.get_component_variants(name):
            features = record.capabilities.labels()
            summary.append(f"- **{record.variant}**: {', '.join(features) if features else 'basic'}\n")
        summary.append("\n")
    return "".join(summary)


async def get_component(catalog: ComponentCatalog, name: str, variant: Optional[str] = None) -> str:
    record = _require(catalog, name, variant)
    source = await catalog.get_component_content(name, variant, "source")
    if not source:
        raise ToolError(f'Source code not found for component "{name}" ({record.variant})')
    return f"# {record.name} ({record.variant}) {_mode_label(catalog)}\n\n```tsx\n{source}\n```"


async def get_component_demo(catalog: ComponentCatalog, name: str, variant: Optional[str] = None) -> str:
    record = _require(catalog, name, variant)
    demo = await catalog.get_component_content(name, variant, "demo")
    if not demo:
        raise ToolError(f'Demo not found for component "{name}" ({record.variant} variant)')
    return f"# {record.name} Demo ({record.variant}) {_mode_label(catalog)}\n\n```tsx\n{demo}\n```"


def list_component_variants(catalog: ComponentCatalog, name: str) -> str:
    records = catalog.get_component_variants(name)
    if not records:
        raise _not_found(catalog, name)

    summary = [f"# {name} - Available Variants\n\n"]
    for record in records:
        summary.append(f"## {record.variant.upper()}\n")
        summary.append(f"**Path:** `{record.locator}`\n")
        features = [f"✓ {FEATURE_LABELS[label]}" for label in record.capabilities.labels()]
        if features:
            summary.append(f"**Features:** {', '.join(features)}\n")
        if record.description:
            summary.append(f"**Description:** {record.description}\n")
        dependencies = record.dependencies
        if dependencies:
            more = "..." if len(dependencies) > 3 else ""
            summary.append(f"**Dependencies:** {', '.join(dependencies[:3])}{more}\n")
        summary.append("\n---\n\n")

    summary.append("## Recommended Usage\n\n")
    present = {record.variant for record in records}
    for variant, advice in VARIANT_ADVICE.items():
        if variant in present:
            summary.append(advice)
    return "".join(summary)


async def extract_metadata(catalog: ComponentCatalog, record: ComponentRecord) -> ExtractedMetadata:
    metadata = ExtractedMetadata(
        name=record.name,
        variant=record.variant,
        description=record.description,
    )
    try:
        source = await catalog.get_component_content(record.name, record.variant, "source")
        if source:
            metadata.props = parse_props(source)
        metadata.dependencies = record.dependencies or (extract_imports(source) if source else [])
        if record.has_stories:
            stories = await catalog.get_component_content(record.name, record.variant, "demo")
            if stories:
                metadata.examples = extract_story_names(stories)
    except CatalogError as exc:
        LOGGER.debug("Failed to extract detailed metadata for %s: %s", record.name, exc)
    # Remote records learn their capabilities while content is fetched above.
    metadata.features = [
        {"docs": "documentation"}.get(label, label) for label in record.capabilities.labels()
    ]
    return metadata


def format_metadata(metadata: ExtractedMetadata) -> str:
    sections = [f"# {metadata.name} ({metadata.variant}) - Metadata\n\n"]
    if metadata.description:
        sections.append(f"**Description:** {metadata.description}\n\n")
    if metadata.features:
        sections.append(f"**Features:** {', '.join(metadata.features)}\n\n")
    if metadata.props:
        sections.append("\n## Props\n\n")
        for prop in metadata.props:
            required = "(required)" if prop.required else "(optional)"
            sections.append(f"- **{prop.name}** {required}: `{prop.type}`\n")
    if metadata.dependencies:
        sections.append("\n## Dependencies\n\n")
        sections.extend(f"- `{dependency}`\n" for dependency in metadata.dependencies)
    if metadata.examples:
        sections.append("\n## Available Examples\n\n")
        sections.extend(f"- {example}\n" for example in metadata.examples)
    return "".join(sections)


async def get_component_metadata(
    catalog: ComponentCatalog, name: str, variant: Optional[str] = None
) -> str:
    record = _require(catalog, name, variant)
    return format_metadata(await extract_metadata(catalog, record))


async def get_directory_structure(root: Path, path: str = "", depth: int = 3, include_files: bool = True) -> str:
    try:
        target = resolve_within(root, path)
    except ValueError as exc:
        raise ToolError(str(exc)) from exc
    LOGGER.debug("Getting directory structure for: %s", target)
    try:
        tree = await run_in_executor(build_directory_tree, target, depth, include_files)
    except OSError as exc:
        raise ToolError(str(exc)) from exc
    return format_directory_tree(tree, root)
