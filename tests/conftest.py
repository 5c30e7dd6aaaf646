from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

EXAMPLES = "example/storybook-nativewind/src/components"
CORE = "example/storybook-nativewind/src/core-components/nativewind"


@pytest.fixture(autouse=True)
def _configure_test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for variable in ("GLUESTACK_PATH", "GITHUB_TOKEN", "USE_GITHUB_MODE", "LOG_LEVEL"):
        monkeypatch.delenv(variable, raising=False)


def _write(path: Path, text: str = "") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.fixture
def gluestack_root(tmp_path: Path) -> Path:
    """A miniature gluestack-ui checkout covering every local source layout."""

    root = tmp_path / "gluestack-ui"
    examples = root / EXAMPLES
    _write(examples / "Button" / "Button.tsx", "export const ButtonExample = () => null;\n")
    _write(
        examples / "Button" / "Button.stories.tsx",
        "export const Primary = {};\nexport const Outline = {};\n",
    )
    _write(examples / "Button" / "index.nativewind.mdx", "# Button\n")
    _write(examples / "Badge" / "Badge.tsx", "export const BadgeDemo = () => null;\n")
    _write(examples / "hooks" / "useThing.tsx")
    _write(examples / "docs-components" / "Wrapper.tsx")
    _write(examples / ".cache" / "Ignored.tsx")

    core = root / CORE
    _write(
        core / "button" / "index.tsx",
        "import { createButton } from '@gluestack-ui/button';\n"
        "import React from 'react';\n"
        "export interface ButtonProps {\n  size?: string;\n  isDisabled: boolean;\n}\n",
    )
    _write(core / "button" / "styles.tsx")
    _write(
        core / "alert-dialog" / "index.tsx",
        "import { createAlertDialog } from '@gluestack-ui/alert-dialog';\n"
        "import { Overlay } from '@gluestack-ui/overlay';\n"
        "import { createAlertDialog as again } from '@gluestack-ui/alert-dialog';\n",
    )
    _write(core / "gluestack-ui-provider" / "index.tsx")
    (core / "empty-dir").mkdir(parents=True)

    themed = root / "packages" / "themed" / "src"
    _write(themed / "index.ts", "export * from './Button';\nexport * from './Card';\n")
    _write(themed / "Card" / "README.md", "# Card\n")
    (themed / "Button").mkdir(parents=True)

    unstyled = root / "packages" / "unstyled"
    _write(
        unstyled / "checkbox" / "package.json",
        json.dumps(
            {
                "name": "@gluestack-ui/checkbox",
                "description": "A universal headless checkbox",
                "dependencies": {"@gluestack-ui/utils": "^0.1", "lodash": "^4"},
                "peerDependencies": {"react": ">=16", "typescript": "^5"},
            }
        ),
    )
    _write(unstyled / "checkbox" / "README.md", "# checkbox\n")
    _write(unstyled / "broken" / "package.json", "{not json")
    (unstyled / "nomanifest").mkdir(parents=True)

    theme = root / "packages" / "config" / "src" / "theme"
    for name in ("index", "Button", "ButtonText", "Card", "Input", "ModalCloseButton", "SliderFilledTrack"):
        _write(theme / f"{name}.ts", "export default {};\n")
    return root
