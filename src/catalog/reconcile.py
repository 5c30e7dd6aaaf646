"""Merge policy applied while candidate records are added to the catalog index."""
from __future__ import annotations

import posixpath
from typing import Dict, Iterator, List, Optional

from utils.logging import get_logger

from .schema import ComponentRecord

LOGGER = get_logger(__name__)

INSERTED = "inserted"
APPENDED = "appended"
REPLACED = "replaced"
DISCARDED = "discarded"


def _leaf(locator: str) -> str:
    return posixpath.basename(locator.replace("\\", "/").rstrip("/"))


def locators_match(first: str, second: str) -> bool:
    """Heuristic test for two locators naming the same physical component.

    Matches on identical strings, identical final path segments, or two index files.
    Distinct components that share a leaf directory name also match.
    """

    if first == second:
        return True
    leaf_first, leaf_second = _leaf(first), _leaf(second)
    if leaf_first == leaf_second:
        return True
    return "index." in leaf_first and "index." in leaf_second


class CatalogIndex:
    """Name -> records mapping kept in discovery order."""

    def __init__(self) -> None:
        self._records: Dict[str, List[ComponentRecord]] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return sum(len(records) for records in self._records.values())

    def __iter__(self) -> Iterator[ComponentRecord]:
        for records in self._records.values():
            yield from records

    def names(self) -> List[str]:
        return list(self._records)

    def variants(self, name: str) -> List[ComponentRecord]:
        return list(self._records.get(name, ()))

    def find(self, name: str, variant: str) -> Optional[ComponentRecord]:
        for record in self._records.get(name, ()):
            if record.variant == variant:
                return record
        return None

    def add(self, candidate: ComponentRecord) -> str:
        """Reconcile ``candidate`` into the index and return what happened to it.

        A name seen for the first time starts a new list and a new variant is appended.
        A candidate repeating an existing (name, variant) pair never becomes a second
        entry: it replaces the existing record only when the locators match and it
        carries strictly more capability flags.
        """

        existing = self._records.get(candidate.name)
        if existing is None:
            self._records[candidate.name] = [candidate]
            return INSERTED

        same_variant = [
            position for position, record in enumerate(existing) if record.variant == candidate.variant
        ]
        if not same_variant:
            existing.append(candidate)
            return APPENDED

        for position in same_variant:
            current = existing[position]
            if not locators_match(current.locator, candidate.locator):
                continue
            if candidate.feature_richness > current.feature_richness:
                LOGGER.debug(
                    "Replacing %s (%s) at %s with richer record at %s",
                    candidate.name,
                    candidate.variant,
                    current.locator,
                    candidate.locator,
                )
                existing[position] = candidate
                return REPLACED
            break
        return DISCARDED
