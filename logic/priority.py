"""Urgency classification of category gaps (1 = most urgent, 4 = satisfied)."""

from __future__ import annotations

from models.taxonomy import BOTTOM, FOOTWEAR, TOP

CRITICAL = "critical"
SHORTFALL = "shortfall"
SATISFIED = "satisfied"

PRIORITY_CRITICAL = 1
PRIORITY_HIGH = 2
PRIORITY_MEDIUM = 3
PRIORITY_LOW = 4


def classify_priority(category: str, current_item_count: int, gap_count: int, gap_type: str) -> int:
    if gap_type == CRITICAL:
        return PRIORITY_CRITICAL
    if category == FOOTWEAR and current_item_count < 2:
        return PRIORITY_HIGH
    if category in (TOP, BOTTOM) and gap_count > 3:
        return PRIORITY_HIGH
    if gap_count > 0:
        return PRIORITY_MEDIUM
    return PRIORITY_LOW


__all__ = [
    "classify_priority",
    "CRITICAL",
    "SHORTFALL",
    "SATISFIED",
    "PRIORITY_CRITICAL",
    "PRIORITY_HIGH",
    "PRIORITY_MEDIUM",
    "PRIORITY_LOW",
]
