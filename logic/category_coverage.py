"""Per-category needs, gaps and urgency for a scenario's target."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from logic.availability import AvailabilityIndex
from logic.coverage_calculator import rounded_percent
from logic.priority import CRITICAL, SATISFIED, SHORTFALL, classify_priority
from models.coverage import CategoryCoverage
from models.requirements import OutfitRequirement
from models.taxonomy import (
    ACCESSORY,
    BOTTOM,
    CATEGORIES,
    CRITICAL_CATEGORIES,
    FOOTWEAR,
    ONE_PIECE,
    OTHER,
    OUTERWEAR,
    TOP,
    display_name,
)

# Percent of the outfit target held per category as (min, ideal, max).
CATEGORY_NEED_RATIOS: Dict[str, Tuple[int, int, int]] = {
    TOP: (50, 80, 120),
    BOTTOM: (30, 60, 90),
    ONE_PIECE: (0, 30, 70),
    OUTERWEAR: (10, 20, 40),
    FOOTWEAR: (20, 40, 60),
    ACCESSORY: (0, 30, 50),
    OTHER: (0, 10, 30),
}


def _ceil_percent(outfits: int, percent: int) -> int:
    return -(-outfits * percent // 100)


def category_needs(category: str, outfits_needed: int) -> Tuple[int, int, int]:
    """Return ``(min, ideal, max)`` item counts for ``category``."""

    minimum, ideal, maximum = (_ceil_percent(outfits_needed, p) for p in CATEGORY_NEED_RATIOS[category])
    if category == FOOTWEAR:
        minimum = max(1, minimum)
    return minimum, ideal, maximum


def _recommendation(category: str, current: int, minimum: int, ideal: int, scenario_name: str, gap_type: str) -> str:
    if gap_type == CRITICAL:
        return (
            f"Critical: add {display_name(category)} for {scenario_name} - "
            "you can't create any outfits without them"
        )
    if current < minimum:
        return f"Add {minimum - current} more {category} to reach minimum for {scenario_name}"
    if current < ideal:
        return f"Consider {ideal - current} more {category} for optimal {scenario_name} variety"
    return f"Your {category} collection for {scenario_name} is well-covered"


def calculate_category_coverage(
    index: AvailabilityIndex, requirement: OutfitRequirement, category: str
) -> CategoryCoverage:
    current = len(index.items_in(category))
    minimum, ideal, maximum = category_needs(category, requirement.target_quantity)
    coverage_percent = 100 if ideal <= 0 else min(100, rounded_percent(current, ideal))
    gap_count = max(0, ideal - current)

    if current == 0 and category in CRITICAL_CATEGORIES:
        gap_type = CRITICAL
    elif gap_count > 0:
        gap_type = SHORTFALL
    else:
        gap_type = SATISFIED

    return CategoryCoverage(
        scenario_id=requirement.scenario_id,
        scenario_name=requirement.scenario_name,
        season=requirement.season,
        category=category,
        current_items=current,
        needed_min=minimum,
        needed_ideal=ideal,
        needed_max=maximum,
        coverage_percent=coverage_percent,
        gap_count=gap_count,
        gap_type=gap_type,
        priority_level=classify_priority(category, current, gap_count, gap_type),
        recommendations=(
            _recommendation(category, current, minimum, ideal, requirement.scenario_name, gap_type),
        ),
    )


def category_coverage_for_requirement(
    index: AvailabilityIndex, requirement: OutfitRequirement
) -> List[CategoryCoverage]:
    return [calculate_category_coverage(index, requirement, category) for category in CATEGORIES]


def rank_category_gaps(rows: Sequence[CategoryCoverage]) -> List[CategoryCoverage]:
    """Order rows by urgency, keeping input order within a priority level."""

    return sorted(rows, key=lambda row: row.priority_level)


def critical_gaps(rows: Sequence[CategoryCoverage], limit: int = 10) -> List[CategoryCoverage]:
    return rank_category_gaps([row for row in rows if row.is_critical])[:limit]


__all__ = [
    "CATEGORY_NEED_RATIOS",
    "category_needs",
    "calculate_category_coverage",
    "category_coverage_for_requirement",
    "rank_category_gaps",
    "critical_gaps",
]
