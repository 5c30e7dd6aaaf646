"""Markdown rendering of directory snapshots."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List

from .tree import DirectoryNode, tree_stats

COMMON_PATHS: Dict[str, str] = {
    "example/storybook-nativewind/src/components": "Example components with demos and stories",
    "example/storybook-nativewind/src/core-components": "Core NativeWind component implementations",
    "packages/config/src/theme": "Theme configuration and design tokens",
    "packages/unstyled": "Headless/unstyled component packages",
    "packages/styled": "Styled component implementations",
}


def _format_size_kb(size: int) -> str:
    return f"{round(size / 1024, 2):g}KB"


def _node_line(node: DirectoryNode, prefix: str, is_last: bool) -> str:
    connector = "└── " if is_last else "├── "
    line = f"{prefix}{connector}**{node.name}**"
    if node.is_directory:
        line += f" *({len(node.children)} items)*"
    else:
        if node.extension:
            line += f" *({node.extension})*"
        if node.size is not None:
            line += f" - {_format_size_kb(node.size)}"
    return line


def _render(node: DirectoryNode, lines: List[str], prefix: str = "", is_last: bool = True) -> None:
    lines.append(_node_line(node, prefix, is_last))
    child_prefix = prefix + ("    " if is_last else "│   ")
    for position, child in enumerate(node.children):
        _render(child, lines, child_prefix, position == len(node.children) - 1)


def format_directory_tree(tree: DirectoryNode, base_path: Path) -> str:
    """Render ``tree`` as an indented Markdown tree followed by summary tables."""

    relative = os.path.relpath(tree.path, base_path)
    lines = [
        "# Gluestack UI Directory Structure",
        f"**Base Path**: `{base_path}`",
        f"**Target Path**: `{relative}`\n",
    ]
    _render(tree, lines)

    stats = tree_stats(tree)
    lines.append("\n## Summary")
    lines.append(f"- **Directories**: {stats.directories}")
    lines.append(f"- **Files**: {stats.files}")
    lines.append(f"- **Total Size**: {stats.total_size / 1024:.1f}KB")
    lines.append(f"- **File Types**: {', '.join(sorted(stats.extensions))}")

    lines.append("\n## Common Paths")
    for path, description in COMMON_PATHS.items():
        lines.append(f"- `{path}` - {description}")
    return "\n".join(lines)
