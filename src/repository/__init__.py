"""Bounded, statistics-annotated snapshots of the component repository tree."""

from .formatting import COMMON_PATHS, format_directory_tree
from .tree import DirectoryNode, TreeStats, build_directory_tree, tree_depth, tree_stats

__all__ = [
    "COMMON_PATHS",
    "DirectoryNode",
    "TreeStats",
    "build_directory_tree",
    "format_directory_tree",
    "tree_depth",
    "tree_stats",
]
