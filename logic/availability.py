"""Scenario and season filtering of wardrobe items, grouped by category."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from models.requirements import CategoryRequirement
from models.wardrobe_item import WardrobeItem


@dataclass(frozen=True)
class AvailabilityIndex:
    """Items usable for one scenario and season, bucketed by their own category.

    Buckets keep the relative order of the source item list so that sample
    combinations are reproducible.
    """

    scenario_id: str
    season: str
    by_category: Dict[str, Tuple[WardrobeItem, ...]] = field(default_factory=dict)

    def items_in(self, category: str) -> Tuple[WardrobeItem, ...]:
        return self.by_category.get(category, ())

    def available_for(self, requirement: CategoryRequirement) -> Tuple[WardrobeItem, ...]:
        """Items that may fill a requirement slot.

        The slot's own category comes first, followed by each interchangeable
        category in declaration order. Pools of different slots are not
        deduplicated against each other.
        """

        available: List[WardrobeItem] = list(self.items_in(requirement.category))
        for category in requirement.interchangeable_categories:
            available.extend(self.items_in(category))
        return tuple(available)

    def category_counts(self) -> Dict[str, int]:
        return {category: len(items) for category, items in self.by_category.items()}

    @property
    def item_count(self) -> int:
        return sum(len(items) for items in self.by_category.values())


def build_availability_index(items: Iterable[WardrobeItem], scenario_id: str, season: str) -> AvailabilityIndex:
    """Filter ``items`` to the scenario and season and group them by category."""

    grouped: Dict[str, List[WardrobeItem]] = {}
    for item in items:
        if item.applies_to(scenario_id, season):
            grouped.setdefault(item.category, []).append(item)
    return AvailabilityIndex(
        scenario_id=scenario_id,
        season=season,
        by_category={category: tuple(values) for category, values in grouped.items()},
    )


__all__ = ["AvailabilityIndex", "build_availability_index"]
