"""Interfaces to the wardrobe item store and the requirement catalogue."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from models.requirements import OutfitRequirement
from models.wardrobe_item import WardrobeItem


class WardrobeItemSource(ABC):
    """Supplies the current item snapshot for a user."""

    @abstractmethod
    def list_items(self, user_id: str) -> List[WardrobeItem]:
        """Return all wardrobe items for ``user_id``."""


class RequirementCatalogue(ABC):
    """Supplies outfit requirements with their resolved target quantities."""

    @abstractmethod
    def list_requirements(self, user_id: str) -> List[OutfitRequirement]:
        """Return the scenario/season requirements for ``user_id``."""


class StaticItemSource(WardrobeItemSource):
    """In-memory item source keyed by user id."""

    def __init__(self, items_by_user: Optional[Dict[str, Iterable[WardrobeItem]]] = None) -> None:
        self._items: Dict[str, List[WardrobeItem]] = {
            user_id: list(items) for user_id, items in (items_by_user or {}).items()
        }

    def add_items(self, user_id: str, items: Iterable[WardrobeItem]) -> None:
        self._items.setdefault(user_id, []).extend(items)

    def list_items(self, user_id: str) -> List[WardrobeItem]:
        return list(self._items.get(user_id, []))


class StaticRequirementCatalogue(RequirementCatalogue):
    """In-memory catalogue; users without an entry fall back to ``default``."""

    def __init__(
        self,
        requirements_by_user: Optional[Dict[str, Iterable[OutfitRequirement]]] = None,
        default: Iterable[OutfitRequirement] = (),
    ) -> None:
        self._requirements: Dict[str, List[OutfitRequirement]] = {
            user_id: list(requirements) for user_id, requirements in (requirements_by_user or {}).items()
        }
        self._default = list(default)

    def list_requirements(self, user_id: str) -> List[OutfitRequirement]:
        return list(self._requirements.get(user_id, self._default))


__all__ = [
    "WardrobeItemSource",
    "RequirementCatalogue",
    "StaticItemSource",
    "StaticRequirementCatalogue",
]
