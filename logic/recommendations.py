"""Rule-ordered recommendation text for a scenario's outfit gap.

Entries are produced in a fixed priority order (blocking categories, bulk
quantity, alternative digest, volume note) and the list is truncated last, so
lower-priority rules are the first to be dropped.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

MAX_RECOMMENDATIONS = 5
MAX_BULK_RECOMMENDATION = 3
SHOPPING_SESSION_THRESHOLD = 5


def sufficient_message(scenario_name: str) -> str:
    return f"You have enough outfits for {scenario_name}!"


def generate_recommendations(
    scenario_name: str,
    possible_outfits: int,
    gap_count: int,
    missing_categories: Sequence[str] = (),
    bottleneck_category: Optional[str] = None,
    alternative_recommendations: Sequence[str] = (),
    max_entries: int = MAX_RECOMMENDATIONS,
    max_bulk: int = MAX_BULK_RECOMMENDATION,
    shopping_threshold: int = SHOPPING_SESSION_THRESHOLD,
) -> List[str]:
    if gap_count == 0:
        return [sufficient_message(scenario_name)]

    recommendations: List[str] = []
    for category in dict.fromkeys(missing_categories):
        recommendations.append(f"Priority: add {category} items to create any {scenario_name} outfits")

    if bottleneck_category and gap_count > 0:
        needed = min(gap_count, max_bulk)
        recommendations.append(
            f"Add {needed} more {bottleneck_category} to increase from {possible_outfits} "
            f"to {possible_outfits + needed} {scenario_name} outfits"
        )

    for text in alternative_recommendations:
        if not any(text in existing for existing in recommendations):
            recommendations.append(text)

    if gap_count > shopping_threshold:
        recommendations.append(f"Consider a shopping session focused on {scenario_name} essentials")
    elif gap_count > 0:
        recommendations.append(f"{gap_count} more outfits needed to reach your {scenario_name} target")

    return recommendations[:max_entries]


__all__ = ["generate_recommendations", "sufficient_message", "MAX_RECOMMENDATIONS"]
