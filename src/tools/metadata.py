"""Lightweight extraction of props, imports and story names from component source."""
from __future__ import annotations

import re
from typing import List, Optional

from pydantic import BaseModel, Field

PROPS_BLOCK_PATTERNS = (
    re.compile(r"interface\s+(\w+Props)\s*\{([^}]+)\}"),
    re.compile(r"type\s+(\w+Props)\s*=\s*\{([^}]+)\}"),
)
PROP_LINE = re.compile(r"^(\w+)(\??):\s*([^;]+);?")
IMPORT_PATTERN = re.compile(r"""import\s+.*?\s+from\s+['"]([^'"]+)['"];?""", re.DOTALL)
STORY_PATTERN = re.compile(r"export\s+const\s+(\w+)\s*=")


class PropInfo(BaseModel):
    name: str
    type: str
    required: bool


class ExtractedMetadata(BaseModel):
    name: str
    variant: str
    description: Optional[str] = None
    features: List[str] = Field(default_factory=list)
    props: List[PropInfo] = Field(default_factory=list)
    dependencies: List[str] = Field(default_factory=list)
    examples: List[str] = Field(default_factory=list)


def parse_props(source: str) -> List[PropInfo]:
    """Return the members of every ``*Props`` interface or object type in ``source``."""

    props: List[PropInfo] = []
    for pattern in PROPS_BLOCK_PATTERNS:
        for match in pattern.finditer(source):
            for line in match.group(2).splitlines():
                stripped = line.strip()
                if not stripped or stripped.startswith(("//", "*")):
                    continue
                prop = PROP_LINE.match(stripped)
                if prop:
                    name, optional, type_ = prop.groups()
                    props.append(PropInfo(name=name, type=type_.strip(), required=not optional))
    return props


def extract_imports(source: str) -> List[str]:
    """Return scoped or react-related import specifiers, de-duplicated in order."""

    imports: List[str] = []
    for specifier in IMPORT_PATTERN.findall(source):
        if (specifier.startswith("@") or "react" in specifier) and specifier not in imports:
            imports.append(specifier)
    return imports


def extract_story_names(source: str) -> List[str]:
    return STORY_PATTERN.findall(source)
