"""Bottleneck evaluation of a single outfit alternative."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from logic.availability import AvailabilityIndex
from models.requirements import OutfitAlternative, RequirementConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlternativeResult:
    alternative: OutfitAlternative
    possible_outfits: int
    missing_categories: Tuple[str, ...] = ()
    bottleneck_category: Optional[str] = None
    recommendations: Tuple[str, ...] = ()
    available_counts: Dict[str, int] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.alternative.name


def blocking_recommendation(quantity: int, category: str, alternative_name: str) -> str:
    return f"Add {quantity} {category} for {alternative_name}"


def evaluate_alternative(index: AvailabilityIndex, alternative: OutfitAlternative) -> AlternativeResult:
    """Compute how many outfits ``alternative`` can produce from ``index``.

    The count is the minimum over required slots of
    ``available // quantity``; the slot that first reaches that minimum is the
    bottleneck. Any slot with nothing available blocks the alternative
    entirely.
    """

    missing: List[str] = []
    recommendations: List[str] = []
    available_counts: Dict[str, int] = {}
    minimum: Optional[int] = None
    bottleneck: Optional[str] = None
    bottleneck_available = 0

    for requirement in alternative.required:
        if requirement.quantity < 1:
            raise RequirementConfigurationError(
                f"Requirement for '{requirement.category}' in '{alternative.name}' has quantity {requirement.quantity}"
            )
        available_count = len(index.available_for(requirement))
        available_counts[requirement.category] = available_count
        if available_count == 0:
            missing.append(requirement.category)
            recommendations.append(
                blocking_recommendation(requirement.quantity, requirement.category, alternative.name)
            )

        possible_from_category = available_count // requirement.quantity
        if minimum is None or possible_from_category < minimum:
            minimum = possible_from_category
            bottleneck = requirement.category
            bottleneck_available = len(index.items_in(requirement.category))

    if missing:
        logger.debug("Alternative '%s' blocked by missing %s", alternative.name, missing)
        return AlternativeResult(
            alternative=alternative,
            possible_outfits=0,
            missing_categories=tuple(missing),
            bottleneck_category=bottleneck,
            recommendations=tuple(recommendations),
            available_counts=available_counts,
        )

    possible_outfits = max(0, minimum or 0)
    if possible_outfits > 0 and bottleneck:
        recommendations.append(
            f"Add 1 more {bottleneck} to increase {alternative.name} options "
            f"(currently limited by {bottleneck}: {bottleneck_available} items)"
        )
    return AlternativeResult(
        alternative=alternative,
        possible_outfits=possible_outfits,
        bottleneck_category=bottleneck,
        recommendations=tuple(recommendations),
        available_counts=available_counts,
    )


__all__ = ["AlternativeResult", "evaluate_alternative", "blocking_recommendation"]
