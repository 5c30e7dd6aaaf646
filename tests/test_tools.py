from __future__ import annotations

from pathlib import Path

import pytest

from catalog import CatalogConfig, ComponentCatalog
from tools import TOOLS, ToolError, ToolRouter
from tools.metadata import extract_imports, extract_story_names, parse_props


@pytest.fixture
def router(gluestack_root: Path) -> ToolRouter:
    return ToolRouter(ComponentCatalog(CatalogConfig(root=gluestack_root)))


def test_list_tools_publishes_argument_schemas(router: ToolRouter) -> None:
    tools = {tool["name"]: tool for tool in router.list_tools()}
    assert set(tools) == set(TOOLS) == {
        "list_components",
        "get_component",
        "get_component_demo",
        "get_component_metadata",
        "list_component_variants",
        "get_directory_structure",
    }
    component_schema = tools["get_component"]["inputSchema"]
    assert "componentName" in component_schema["properties"]
    assert component_schema["required"] == ["componentName"]
    assert tools["list_components"]["inputSchema"]["required"] == []
    assert "includeFiles" in tools["get_directory_structure"]["inputSchema"]["properties"]


@pytest.mark.asyncio
async def test_list_components_summary(router: ToolRouter) -> None:
    [block] = await router.call_tool("list_components")
    assert block.type == "text"
    assert block.text.startswith("# Gluestack UI Components (8 total)")
    assert "**THEMED** (5): Button, Card, Input, Modal, SliderFilled" in block.text
    assert "- **nativewind**: demo, stories, docs" in block.text
    assert "- **themed**: basic" in block.text


@pytest.mark.asyncio
async def test_get_component_returns_source_with_provenance(router: ToolRouter) -> None:
    [block] = await router.call_tool("get_component", {"componentName": "Button"})
    assert block.text.startswith("# Button (nativewind) Local")
    assert "```tsx\nexport const ButtonExample" in block.text


@pytest.mark.asyncio
async def test_unknown_component_lists_alternatives(router: ToolRouter) -> None:
    with pytest.raises(ToolError) as excinfo:
        await router.call_tool("get_component_demo", {"componentName": "Carousel"})
    message = str(excinfo.value)
    assert message.startswith('Failed to get component demo for "Carousel": Component "Carousel" not found.')
    assert "Available components: AlertDialog, Badge, Button" in message


@pytest.mark.asyncio
async def test_missing_content_is_reported(router: ToolRouter) -> None:
    with pytest.raises(ToolError, match=r'Source code not found for component "Card" \(themed\)'):
        await router.call_tool("get_component", {"componentName": "Card"})


@pytest.mark.asyncio
async def test_argument_validation(router: ToolRouter) -> None:
    with pytest.raises(ToolError, match="Invalid arguments for get_component"):
        await router.call_tool("get_component", {})
    with pytest.raises(ToolError, match="Invalid arguments for get_component"):
        await router.call_tool("get_component", {"componentName": "Button", "variant": "material"})
    with pytest.raises(ToolError, match="Invalid arguments for get_directory_structure"):
        await router.call_tool("get_directory_structure", {"depth": 11})
    with pytest.raises(ToolError, match="Unknown tool"):
        await router.call_tool("delete_everything", {})


@pytest.mark.asyncio
async def test_list_component_variants(router: ToolRouter) -> None:
    [block] = await router.call_tool("list_component_variants", {"componentName": "checkbox"})
    text = block.text
    assert text.startswith("# checkbox - Available Variants")
    assert "## UNSTYLED" in text
    assert "**Features:** ✓ Documentation" in text
    assert "**Dependencies:** @gluestack-ui/utils, react" in text
    assert "**For custom styling:**" in text
    assert "**For most projects:**" not in text


@pytest.mark.asyncio
async def test_component_metadata(router: ToolRouter) -> None:
    [block] = await router.call_tool("get_component_metadata", {"componentName": "Button"})
    text = block.text
    assert text.startswith("# Button (nativewind) - Metadata")
    assert "**Features:** demo, stories, documentation" in text
    assert "## Available Examples\n\n- Primary\n- Outline\n" in text


@pytest.mark.asyncio
async def test_directory_structure_tool(router: ToolRouter, gluestack_root: Path) -> None:
    [block] = await router.call_tool(
        "get_directory_structure", {"path": "packages", "depth": 1, "includeFiles": False}
    )
    assert "**Target Path**: `packages`" in block.text
    assert "**unstyled** *(0 items)*" in block.text

    with pytest.raises(ToolError, match="Failed to get directory structure"):
        await router.call_tool("get_directory_structure", {"path": "does/not/exist"})
    with pytest.raises(ToolError, match="Failed to get directory structure: .*outside"):
        await router.call_tool("get_directory_structure", {"path": "../../etc"})


def test_parse_props() -> None:
    source = (
        "interface ButtonProps {\n"
        "  // comment\n"
        "  size?: 'sm' | 'md';\n"
        "  isDisabled: boolean;\n"
        "}\n"
        "type IconProps = {\n  as: any;\n}\n"
    )
    props = [(prop.name, prop.type, prop.required) for prop in parse_props(source)]
    assert props == [
        ("size", "'sm' | 'md'", False),
        ("isDisabled", "boolean", True),
        ("as", "any", True),
    ]


def test_extract_imports_and_stories() -> None:
    source = (
        "import React from 'react';\n"
        "import { View } from 'react-native';\n"
        "import { cn } from '@gluestack-ui/utils';\n"
        "import local from './local';\n"
        "import again from 'react';\n"
    )
    assert extract_imports(source) == ["react", "react-native", "@gluestack-ui/utils"]
    assert extract_story_names("export const Basic = {};\nexport const WithIcon = () => null;") == [
        "Basic",
        "WithIcon",
    ]
