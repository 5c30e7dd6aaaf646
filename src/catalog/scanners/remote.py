"""Discovery of component names from the hosted repository."""
from __future__ import annotations

from typing import Iterator, List, Set, Tuple

from utils.logging import get_logger

from ..errors import RemoteError
from ..github import GitHubClient
from ..naming import kebab_to_pascal, pascal_to_kebab
from ..schema import VARIANTS, ComponentMetadata, ComponentRecord

LOGGER = get_logger(__name__)

EXAMPLES_DIR = "example/storybook-nativewind/src/components"
CORE_DIR = "example/storybook-nativewind/src/core-components/nativewind"
DISCOVERY_PATHS: Tuple[str, ...] = (
    EXAMPLES_DIR,
    CORE_DIR,
    "packages/themed/src/components",
    "packages/unstyled",
)

FALLBACK_COMPONENTS: Tuple[str, ...] = (
    "Accordion", "ActionSheet", "Alert", "AlertDialog", "Avatar", "Badge", "Box",
    "Button", "Card", "Center", "Checkbox", "Divider", "Fab", "FormControl", "HStack",
    "Heading", "Image", "Input", "Link", "Menu", "Modal", "Popover", "Progress", "Radio",
    "Select", "Skeleton", "Slider", "Spinner", "Stack", "Switch", "Text", "Textarea",
    "Toast", "Tooltip", "VStack",
)

REMOTE_PREFIX = "github"


def remote_locator(variant: str, name: str) -> str:
    return f"{REMOTE_PREFIX}:{variant}:{name}"


def _directory_names(name: str) -> List[str]:
    names = [pascal_to_kebab(name)]
    if name.lower() not in names:
        names.append(name.lower())
    return names


def source_paths(name: str, variant: str) -> List[str]:
    """Ordered repository paths that may hold the source of ``name`` in ``variant``."""

    if variant == "nativewind":
        paths = [f"{CORE_DIR}/{directory}/index.tsx" for directory in _directory_names(name)]
        for directory in _directory_names(name):
            paths.append(f"{EXAMPLES_DIR}/{directory}/index.tsx")
            paths.append(f"{EXAMPLES_DIR}/{directory}/{name}.tsx")
        return paths
    if variant == "themed":
        return [
            f"packages/themed/src/components/{name}/index.tsx",
            f"packages/themed/src/{name}/index.ts",
        ]
    if variant == "unstyled":
        return [
            f"packages/unstyled/{name}/src/index.tsx",
            f"packages/unstyled/{name}/src/{name}.tsx",
        ]
    return []


def demo_paths(name: str) -> List[str]:
    """Ordered repository paths that may hold the demo of ``name``; stories come first."""

    paths: List[str] = []
    for directory in _directory_names(name):
        base = f"{EXAMPLES_DIR}/{directory}"
        paths.extend([f"{base}/{name}.stories.tsx", f"{base}/{name}.tsx", f"{base}/index.tsx"])
    return paths


def synthesize_records(name: str) -> Iterator[ComponentRecord]:
    """One placeholder record per variant; capabilities are resolved on first fetch."""

    for variant in VARIANTS:
        yield ComponentRecord(
            name=name,
            variant=variant,
            locator=remote_locator(variant, name),
            metadata=ComponentMetadata(
                description=f"{variant} variant of {name} component from GitHub",
            ),
        )


class RemoteScanner:
    """List the known container paths remotely and synthesise records per name."""

    def __init__(self, client: GitHubClient, paths: Tuple[str, ...] = DISCOVERY_PATHS) -> None:
        self.client = client
        self.paths = paths

    async def discover_names(self) -> List[str]:
        names: Set[str] = set()
        for path in self.paths:
            try:
                entries = await self.client.list_directory(path)
            except RemoteError as exc:
                LOGGER.warning("Failed to scan %s: %s", path, exc)
                continue
            for entry in entries:
                entry_name = str(entry.get("name", ""))
                if entry.get("type") != "dir" or not entry_name or entry_name.startswith("."):
                    continue
                names.add(kebab_to_pascal(entry_name))
        if not names:
            LOGGER.warning("No components found, using fallback list")
            return list(FALLBACK_COMPONENTS)
        return sorted(names)

    async def scan(self) -> List[ComponentRecord]:
        LOGGER.info("Discovering components from GitHub...")
        records: List[ComponentRecord] = []
        for name in await self.discover_names():
            records.extend(synthesize_records(name))
        return records
