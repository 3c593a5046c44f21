"""Wardrobe item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple

from models.taxonomy import normalise_seasons, validate_category


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


def _unique_strings(values: Iterable[Any]) -> Tuple[str, ...]:
    unique: List[str] = []
    for value in values:
        text = str(value).strip()
        if text and text not in unique:
            unique.append(text)
    return tuple(unique)


@dataclass(frozen=True)
class WardrobeItem:
    """Read-only snapshot of an item in the user's wardrobe.

    ``seasons`` left empty means the item is worn all year. ``scenario_ids``
    lists the lifestyle scenarios the user tagged the item for; an item with
    no scenarios is never counted towards a scenario.
    """

    item_id: str
    category: str
    seasons: Tuple[str, ...] = ()
    scenario_ids: Tuple[str, ...] = ()
    name: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", validate_category(self.category))
        object.__setattr__(self, "seasons", normalise_seasons(_ensure_list(self.seasons)))
        object.__setattr__(self, "scenario_ids", _unique_strings(_ensure_list(self.scenario_ids)))

    def applies_to(self, scenario_id: str, season: str) -> bool:
        """Return whether the item is usable for the scenario in the season."""

        if scenario_id not in self.scenario_ids:
            return False
        return not self.seasons or season in self.seasons


__all__ = ["WardrobeItem"]
