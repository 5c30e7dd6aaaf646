from __future__ import annotations

from pathlib import Path

from catalog.reconcile import CatalogIndex
from catalog.scanner import ComponentDiscovery
from catalog.scanners import (
    CoreComponentScanner,
    ExampleScanner,
    ScanContext,
    ThemedPackageScanner,
    ThemeTokenScanner,
    UnstyledPackageScanner,
)
from catalog.scanners.unstyled import relevant_dependencies


def _scan(scanner, root: Path, index: CatalogIndex | None = None):
    return list(scanner.scan(ScanContext(root=root, index=index or CatalogIndex())))


def test_missing_containers_yield_nothing(tmp_path: Path) -> None:
    for scanner in (
        ExampleScanner(),
        CoreComponentScanner(),
        ThemedPackageScanner(),
        UnstyledPackageScanner(),
        ThemeTokenScanner(),
    ):
        assert _scan(scanner, tmp_path) == []


def test_example_scanner_probes_capabilities(gluestack_root: Path) -> None:
    records = {record.name: record for record in _scan(ExampleScanner(), gluestack_root)}
    assert sorted(records) == ["Badge", "Button"]
    button = records["Button"]
    assert button.variant == "nativewind"
    assert (button.has_demo, button.has_stories, button.has_docs) == (True, True, True)
    badge = records["Badge"]
    assert (badge.has_demo, badge.has_stories, badge.has_docs) == (True, False, False)


def test_core_scanner_normalises_names_and_requires_index(gluestack_root: Path) -> None:
    records = {record.name: record for record in _scan(CoreComponentScanner(), gluestack_root)}
    assert sorted(records) == ["AlertDialog", "Button"]
    assert records["Button"].has_docs is True
    assert records["AlertDialog"].has_docs is False
    assert records["AlertDialog"].dependencies == ["@gluestack-ui/alert-dialog", "@gluestack-ui/overlay"]
    assert records["Button"].description == "nativewind implementation of Button component"


def test_themed_package_scanner_reads_index_exports(gluestack_root: Path) -> None:
    records = _scan(ThemedPackageScanner(), gluestack_root)
    assert [(record.name, record.variant) for record in records] == [("Button", "themed"), ("Card", "themed")]
    assert [record.has_docs for record in records] == [False, True]


def test_unstyled_scanner_requires_readable_manifest(gluestack_root: Path) -> None:
    records = _scan(UnstyledPackageScanner(), gluestack_root)
    assert [record.name for record in records] == ["checkbox"]
    checkbox = records[0]
    assert checkbox.variant == "unstyled"
    assert checkbox.has_docs is True
    assert checkbox.description == "A universal headless checkbox"
    assert checkbox.dependencies == ["@gluestack-ui/utils", "react"]


def test_relevant_dependencies_filters_by_namespace_or_runtime() -> None:
    manifest = {
        "dependencies": {"@gluestack-ui/hooks": "1", "react-native-svg": "1", "clsx": "1"},
        "peerDependencies": {"react": "1"},
    }
    assert relevant_dependencies(manifest) == ["@gluestack-ui/hooks", "react-native-svg", "react"]
    assert relevant_dependencies({}) == []


def test_theme_scanner_only_fills_missing_names(gluestack_root: Path) -> None:
    index = CatalogIndex()
    for record in _scan(ThemedPackageScanner(), gluestack_root):
        index.add(record)
    records = _scan(ThemeTokenScanner(), gluestack_root, index)
    assert [record.name for record in records] == ["Input", "Modal", "SliderFilled"]
    modal = records[1]
    assert modal.variant == "themed"
    assert modal.locator.endswith("Modal.ts")
    assert modal.feature_richness == 0
    assert modal.description == "Themed variant of Modal component with Gluestack design tokens"


def test_discovery_reconciles_all_sources(gluestack_root: Path) -> None:
    index = ComponentDiscovery().discover(gluestack_root)
    assert sorted(index.names()) == [
        "AlertDialog", "Badge", "Button", "Card", "Input", "Modal", "SliderFilled", "checkbox",
    ]
    button = index.variants("Button")
    assert [record.variant for record in button] == ["nativewind", "themed"]
    # The core implementation lives under a differently named leaf, so the
    # richer example record keeps the nativewind slot.
    assert button[0].locator.endswith(str(Path("components") / "Button"))
    assert button[0].feature_richness == 3


def test_discovery_never_duplicates_name_variant_pairs(gluestack_root: Path) -> None:
    index = ComponentDiscovery().discover(gluestack_root)
    pairs = [record.identity() for record in index]
    assert len(pairs) == len(set(pairs))


def test_rerunning_discovery_is_idempotent(gluestack_root: Path) -> None:
    discovery = ComponentDiscovery()
    index = discovery.discover(gluestack_root)
    before = [(r.name, r.variant, r.locator, r.capabilities) for r in index]
    discovery.discover(gluestack_root, index)
    after = [(r.name, r.variant, r.locator, r.capabilities) for r in index]
    assert after == before
