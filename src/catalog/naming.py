"""Name normalisation rules shared by the local and remote scanners."""
from __future__ import annotations

import re
from typing import Tuple

# Walked in declared order; the first match wins, so "Track" is stripped before
# "FilledTrack" is ever considered.
THEME_SUFFIXES: Tuple[str, ...] = (
    "Content", "Header", "Footer", "Body", "Title", "Text", "Icon", "Backdrop",
    "Trigger", "Item", "Label", "Group", "Track", "Thumb", "FilledTrack",
    "Indicator", "Badge", "Image", "FallbackText", "CloseButton", "Arrow",
    "DragIndicator", "Separator", "ScrollView", "FlatList", "SectionList",
    "VirtualizedList", "ActionSheet", "HSpacer", "VSpacer", "Spinner",
    "Field", "Slot", "Input", "Error", "ErrorIcon", "ErrorText", "Helper",
    "HelperText", "LabelText", "AccessoryView",
)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def kebab_to_pascal(name: str) -> str:
    """``alert-dialog`` -> ``AlertDialog``; segments keep their remaining casing."""

    return "".join(segment[:1].upper() + segment[1:] for segment in name.split("-"))


def pascal_to_kebab(name: str) -> str:
    """``AlertDialog`` -> ``alert-dialog``."""

    return _CAMEL_BOUNDARY.sub("-", name).lower()


def extract_base_component_name(name: str) -> str:
    """Strip the first listed sub-component suffix from a theme file name.

    ``ButtonText`` becomes ``Button``; a name equal to a suffix (``Input``) is returned as is.
    """

    for suffix in THEME_SUFFIXES:
        if name.endswith(suffix) and name != suffix:
            return name[: -len(suffix)]
    return name
