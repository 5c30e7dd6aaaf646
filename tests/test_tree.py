from __future__ import annotations

from pathlib import Path

import pytest

from repository import build_directory_tree, format_directory_tree, tree_depth, tree_stats
from repository.tree import MAX_ENTRIES_PER_DIRECTORY, file_extension, is_relevant_file


def _nested(root: Path, levels: int) -> Path:
    current = root
    for level in range(levels):
        current = current / f"level{level}"
        current.mkdir(parents=True)
        (current / f"file{level}.ts").write_text("x" * (level + 1))
    return root


@pytest.mark.parametrize("depth", [1, 2, 3, 5])
def test_tree_never_exceeds_max_depth(tmp_path: Path, depth: int) -> None:
    root = _nested(tmp_path / "root", 7)
    tree = build_directory_tree(root, depth, include_files=True)
    assert tree_depth(tree) <= depth
    assert tree_depth(tree) == depth


def test_entries_per_directory_are_capped(tmp_path: Path) -> None:
    for index in range(60):
        (tmp_path / f"component{index:02d}.tsx").write_text("export {};")
    tree = build_directory_tree(tmp_path, 2, include_files=True)
    assert len(tree.children) == MAX_ENTRIES_PER_DIRECTORY


def test_hidden_build_output_and_irrelevant_entries_are_skipped(tmp_path: Path) -> None:
    for name in (".git", "node_modules", "build", "dist", "src"):
        (tmp_path / name).mkdir()
    for name in (".env", "logo.png", "Makefile", "README.md", "index.ts", "styles.SCSS"):
        (tmp_path / name).write_text("data")
    tree = build_directory_tree(tmp_path, 2, include_files=True)
    assert [child.name for child in tree.children] == ["src", "README.md", "index.ts", "styles.SCSS"]

    no_files = build_directory_tree(tmp_path, 2, include_files=False)
    assert [child.name for child in no_files.children] == ["src"]


def test_children_sorted_directories_first(tmp_path: Path) -> None:
    (tmp_path / "b.ts").write_text("b")
    (tmp_path / "a.ts").write_text("a")
    (tmp_path / "zeta").mkdir()
    (tmp_path / "alpha").mkdir()
    tree = build_directory_tree(tmp_path, 1)
    assert [(child.name, child.kind) for child in tree.children] == [
        ("alpha", "directory"),
        ("zeta", "directory"),
        ("a.ts", "file"),
        ("b.ts", "file"),
    ]
    assert all(child.children == [] for child in tree.children if child.is_directory)


def test_file_root_and_missing_root(tmp_path: Path) -> None:
    target = tmp_path / "package.json"
    target.write_text("{}")
    node = build_directory_tree(target, 3)
    assert (node.kind, node.size, node.extension) == ("file", 2, "json")
    with pytest.raises(FileNotFoundError):
        build_directory_tree(tmp_path / "missing", 3)


def test_file_extension_and_relevance() -> None:
    assert file_extension("Button.stories.tsx") == "tsx"
    assert file_extension("Makefile") is None
    assert is_relevant_file("tsconfig.json")
    assert is_relevant_file("theme.YAML")
    assert not is_relevant_file("photo.png")
    assert not is_relevant_file("LICENSE")


def test_stats_and_formatting(tmp_path: Path) -> None:
    (tmp_path / "packages" / "unstyled").mkdir(parents=True)
    (tmp_path / "packages" / "unstyled" / "index.tsx").write_bytes(b"x" * 2048)
    (tmp_path / "README.md").write_bytes(b"y" * 1024)
    tree = build_directory_tree(tmp_path, 3)

    stats = tree_stats(tree)
    assert (stats.directories, stats.files, stats.total_size) == (3, 2, 3072)
    assert stats.extensions == {"md", "tsx"}

    text = format_directory_tree(tree, tmp_path)
    assert text.startswith("# Gluestack UI Directory Structure")
    assert "**Target Path**: `.`" in text
    assert "├── **packages** *(1 items)*" in text
    assert "└── **README.md** *(md)* - 1KB" in text
    assert "**index.tsx** *(tsx)* - 2KB" in text
    assert "- **Total Size**: 3.0KB" in text
    assert "- **File Types**: md, tsx" in text
    assert "`packages/unstyled` - Headless/unstyled component packages" in text
