"""Dispatch of named tool calls onto catalog and repository operations."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Type

from pydantic import ValidationError

from catalog import CatalogError, ComponentCatalog
from utils.logging import get_logger

from . import handlers
from .handlers import ToolError
from .models import (
    ComponentArguments,
    ComponentNameArguments,
    DirectoryArguments,
    NoArguments,
    TextContent,
    ToolArguments,
)

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    arguments: Type[ToolArguments]
    failure: str

    def input_schema(self) -> Dict[str, Any]:
        schema = self.arguments.model_json_schema(by_alias=True)
        schema.setdefault("properties", {})
        schema["required"] = schema.get("required", [])
        return schema


TOOLS: Dict[str, ToolSpec] = {
    spec.name: spec
    for spec in (
        ToolSpec(
            "list_components",
            "List all available Gluestack UI components with their variants and features",
            NoArguments,
            "Failed to list components",
        ),
        ToolSpec(
            "get_component",
            "Get the source code for a specific Gluestack UI component",
            ComponentArguments,
            'Failed to get component "{name}"',
        ),
        ToolSpec(
            "get_component_demo",
            "Get demo code illustrating how a Gluestack UI component should be used",
            ComponentArguments,
            'Failed to get component demo for "{name}"',
        ),
        ToolSpec(
            "get_component_metadata",
            "Get metadata for a specific Gluestack UI component including props, dependencies, and examples",
            ComponentArguments,
            'Failed to get component metadata for "{name}"',
        ),
        ToolSpec(
            "list_component_variants",
            "List all available variants (nativewind, themed, unstyled) for a specific Gluestack UI component",
            ComponentNameArguments,
            'Failed to list variants for component "{name}"',
        ),
        ToolSpec(
            "get_directory_structure",
            "Get the directory structure of the Gluestack UI repository or a specific path within it",
            DirectoryArguments,
            "Failed to get directory structure",
        ),
    )
}


class ToolRouter:
    """Validate tool arguments, run the matching operation and wrap its text."""

    def __init__(self, catalog: ComponentCatalog, root: Optional[Path] = None) -> None:
        self.catalog = catalog
        self.root = Path(root) if root is not None else catalog.config.root
        self._dispatch: Dict[str, Callable[[Any], Awaitable[str]]] = {
            "list_components": self._list_components,
            "get_component": self._get_component,
            "get_component_demo": self._get_component_demo,
            "get_component_metadata": self._get_component_metadata,
            "list_component_variants": self._list_component_variants,
            "get_directory_structure": self._get_directory_structure,
        }

    def list_tools(self) -> List[Dict[str, Any]]:
        return [
            {"name": spec.name, "description": spec.description, "inputSchema": spec.input_schema()}
            for spec in TOOLS.values()
        ]

    async def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> List[TextContent]:
        LOGGER.debug("Received call_tool request: %s %s", name, arguments)
        spec = TOOLS.get(name)
        if spec is None:
            raise ToolError(f"Unknown tool: {name}")
        try:
            parsed = spec.arguments.model_validate(dict(arguments or {}))
        except ValidationError as exc:
            raise ToolError(f"Invalid arguments for {name}: {exc}") from exc

        failure = spec.failure.format(name=getattr(parsed, "component_name", ""))
        try:
            text = await self._dispatch[name](parsed)
        except (ToolError, CatalogError) as exc:
            LOGGER.error("%s: %s", failure, exc)
            raise ToolError(f"{failure}: {exc}") from exc
        return [TextContent(text=text)]

    async def _list_components(self, _: NoArguments) -> str:
        await self.catalog.initialize()
        return handlers.list_components(self.catalog)

    async def _get_component(self, args: ComponentArguments) -> str:
        await self.catalog.initialize()
        return await handlers.get_component(self.catalog, args.component_name, args.variant)

    async def _get_component_demo(self, args: ComponentArguments) -> str:
        await self.catalog.initialize()
        return await handlers.get_component_demo(self.catalog, args.component_name, args.variant)

    async def _get_component_metadata(self, args: ComponentArguments) -> str:
        await self.catalog.initialize()
        return await handlers.get_component_metadata(self.catalog, args.component_name, args.variant)

    async def _list_component_variants(self, args: ComponentNameArguments) -> str:
        await self.catalog.initialize()
        return handlers.list_component_variants(self.catalog, args.component_name)

    async def _get_directory_structure(self, args: DirectoryArguments) -> str:
        return await handlers.get_directory_structure(
            self.root, args.path, args.depth, args.include_files
        )
