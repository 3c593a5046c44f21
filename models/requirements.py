"""Outfit requirement templates supplied by the scenario catalogue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from models.taxonomy import validate_category, validate_season


class RequirementConfigurationError(ValueError):
    """Raised when a requirement template cannot be evaluated."""


def _category(value: str) -> str:
    try:
        return validate_category(value)
    except ValueError as exc:
        raise RequirementConfigurationError(str(exc)) from exc


@dataclass(frozen=True)
class CategoryRequirement:
    """Items of one category needed per outfit.

    Items from ``interchangeable_categories`` may fill the slot; they are
    consulted in the declared order.
    """

    category: str
    quantity: int = 1
    interchangeable_categories: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise RequirementConfigurationError(
                f"Requirement for '{self.category}' needs a positive integer quantity, got {self.quantity!r}"
            )
        object.__setattr__(self, "category", _category(self.category))
        object.__setattr__(
            self,
            "interchangeable_categories",
            tuple(_category(value) for value in self.interchangeable_categories),
        )


@dataclass(frozen=True)
class OutfitAlternative:
    """A named way of dressing for a scenario, e.g. ``"Smart casual"``.

    Optional requirements are informational and never affect outfit counts.
    """

    name: str
    required: Tuple[CategoryRequirement, ...] = ()
    optional: Tuple[CategoryRequirement, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "required", tuple(self.required))
        object.__setattr__(self, "optional", tuple(self.optional))


@dataclass(frozen=True)
class OutfitRequirement:
    """Outfit template for one scenario and season with its resolved target."""

    scenario_id: str
    scenario_name: str
    season: str
    target_quantity: int
    alternatives: Tuple[OutfitAlternative, ...] = ()

    def __post_init__(self) -> None:
        try:
            season = validate_season(self.season)
        except ValueError as exc:
            raise RequirementConfigurationError(str(exc)) from exc
        object.__setattr__(self, "season", season)
        if self.target_quantity < 0:
            raise RequirementConfigurationError(
                f"Scenario '{self.scenario_name}' has a negative target quantity {self.target_quantity}"
            )
        object.__setattr__(self, "alternatives", tuple(self.alternatives))


__all__ = [
    "RequirementConfigurationError",
    "CategoryRequirement",
    "OutfitAlternative",
    "OutfitRequirement",
]
