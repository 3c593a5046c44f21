"""Deterministic sampling of concrete outfits for display."""

from __future__ import annotations

import logging
from typing import List

from logic.availability import AvailabilityIndex
from models.coverage import OutfitCombination
from models.requirements import OutfitAlternative
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

MAX_SAMPLE_COMBINATIONS = 10


def generate_combinations(
    index: AvailabilityIndex,
    alternative: OutfitAlternative,
    possible_outfits: int,
    limit: int = MAX_SAMPLE_COMBINATIONS,
) -> List[OutfitCombination]:
    """Build up to ``min(possible_outfits, limit)`` sample outfits.

    Outfit ``i`` takes the contiguous slice ``[i*q, i*q + q)`` from each
    required slot's available items. This is a small sample, not every
    possible assignment.
    """

    combinations: List[OutfitCombination] = []
    for position in range(max(0, min(possible_outfits, limit))):
        outfit: List[WardrobeItem] = []
        is_complete = True
        for requirement in alternative.required:
            available = index.available_for(requirement)
            start = position * requirement.quantity
            chosen = available[start:start + requirement.quantity]
            if len(chosen) < requirement.quantity:
                is_complete = False
                break
            outfit.extend(chosen)
        if is_complete and outfit:
            combinations.append(
                OutfitCombination(items=tuple(outfit), alternative_name=alternative.name, is_complete=True)
            )
        else:
            logger.debug("Skipped incomplete sample %s for '%s'", position, alternative.name)
    return combinations


__all__ = ["generate_combinations", "MAX_SAMPLE_COMBINATIONS"]
