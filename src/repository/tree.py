"""Depth- and size-bounded directory snapshots."""
from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set

from utils.logging import get_logger

LOGGER = get_logger(__name__)

MAX_ENTRIES_PER_DIRECTORY = 50
EXCLUDED_DIRECTORIES = frozenset({"node_modules", "build", "dist"})
RELEVANT_EXTENSIONS = frozenset({
    ".ts", ".tsx", ".js", ".jsx",
    ".json", ".md", ".yml", ".yaml",
    ".css", ".scss", ".sass",
})
ALWAYS_INCLUDED = frozenset({"README.md", "package.json", "tsconfig.json"})


def file_extension(name: str) -> Optional[str]:
    """Return the trailing dot-segment of ``name`` or ``None`` without a dot."""

    if "." not in name:
        return None
    return name.rsplit(".", 1)[-1]


def is_relevant_file(name: str) -> bool:
    extension = "." + (file_extension(name) or name)
    return extension.lower() in RELEVANT_EXTENSIONS or name in ALWAYS_INCLUDED


@dataclass(slots=True)
class DirectoryNode:
    """One filesystem entry of a snapshot."""

    name: str
    path: Path
    kind: str
    size: Optional[int] = None
    extension: Optional[str] = None
    children: List["DirectoryNode"] = field(default_factory=list)

    @property
    def is_directory(self) -> bool:
        return self.kind == "directory"

    def sort_children(self) -> None:
        self.children.sort(key=lambda node: (not node.is_directory, node.name))


@dataclass(slots=True)
class TreeStats:
    directories: int = 0
    files: int = 0
    total_size: int = 0
    extensions: Set[str] = field(default_factory=set)


def _file_node(path: Path, size: int) -> DirectoryNode:
    return DirectoryNode(
        name=path.name,
        path=path,
        kind="file",
        size=size,
        extension=file_extension(path.name),
    )


def build_directory_tree(
    root: Path,
    max_depth: int = 3,
    include_files: bool = True,
    current_depth: int = 0,
) -> DirectoryNode:
    """Snapshot ``root`` without descending more than ``max_depth`` levels.

    Hidden entries and build output directories are skipped, and only the first
    50 remaining entries of each listing are examined, in listing order.
    Raises :class:`OSError` if ``root`` itself cannot be stat'ed.
    """

    root = Path(root)
    info = os.stat(root)
    if not stat.S_ISDIR(info.st_mode):
        return _file_node(root, info.st_size)

    node = DirectoryNode(name=root.name or str(root), path=root, kind="directory")
    if current_depth >= max_depth:
        return node

    try:
        items = os.listdir(root)
    except OSError as exc:
        LOGGER.debug("Cannot read directory %s: %s", root, exc)
        return node

    visible = [item for item in items if not item.startswith(".") and item not in EXCLUDED_DIRECTORIES]
    for item in visible[:MAX_ENTRIES_PER_DIRECTORY]:
        item_path = root / item
        try:
            item_info = os.stat(item_path)
            if stat.S_ISDIR(item_info.st_mode):
                node.children.append(
                    build_directory_tree(item_path, max_depth, include_files, current_depth + 1)
                )
            elif include_files and is_relevant_file(item):
                node.children.append(_file_node(item_path, item_info.st_size))
        except OSError as exc:
            LOGGER.debug("Skipping item %s: %s", item_path, exc)

    node.sort_children()
    return node


def tree_stats(tree: DirectoryNode) -> TreeStats:
    stats = TreeStats()
    pending = [tree]
    while pending:
        node = pending.pop()
        if node.is_directory:
            stats.directories += 1
            pending.extend(node.children)
        else:
            stats.files += 1
            stats.total_size += node.size or 0
            if node.extension:
                stats.extensions.add(node.extension)
    return stats


def tree_depth(tree: DirectoryNode) -> int:
    """Number of levels below ``tree`` that hold at least one node."""

    if not tree.children:
        return 0
    return 1 + max(tree_depth(child) for child in tree.children)
