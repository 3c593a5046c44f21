"""Canonical taxonomy definitions for wardrobe coverage.

This module centralises the closed set of clothing categories and seasons.
Helper functions keep validation logic consistent across the models, the
payload validators and the coverage logic.
"""

from typing import Dict, Iterable, List, Tuple


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return str(value).strip().lower().replace(" ", "_").replace("-", "_")


TOP = "top"
BOTTOM = "bottom"
ONE_PIECE = "one_piece"
OUTERWEAR = "outerwear"
FOOTWEAR = "footwear"
ACCESSORY = "accessory"
OTHER = "other"

CATEGORIES: Tuple[str, ...] = (TOP, BOTTOM, ONE_PIECE, OUTERWEAR, FOOTWEAR, ACCESSORY, OTHER)

CATEGORY_ALIASES: Dict[str, str] = {
    "tops": TOP,
    "bottoms": BOTTOM,
    "dress": ONE_PIECE,
    "dresses": ONE_PIECE,
    "onepiece": ONE_PIECE,
    "shoes": FOOTWEAR,
    "accessories": ACCESSORY,
}

# Categories without which no outfit can be assembled at all.
CRITICAL_CATEGORIES: Tuple[str, ...] = (TOP, BOTTOM, FOOTWEAR)

SEASONS: Tuple[str, ...] = ("spring", "summer", "fall", "winter")

SEASON_ALIASES: Dict[str, str] = {
    "autumn": "fall",
}


def validate_category(value: str) -> str:
    """Validate and normalise a category value.

    Raises a :class:`ValueError` if the category is not part of the closed
    category set.
    """

    key = _normalize_key(value)
    key = CATEGORY_ALIASES.get(key, key)
    if key not in CATEGORIES:
        raise ValueError(f"Unsupported category '{value}'. Allowed: {list(CATEGORIES)}")
    return key


def validate_season(value: str) -> str:
    """Validate and normalise a season value."""

    key = _normalize_key(value)
    key = SEASON_ALIASES.get(key, key)
    if key not in SEASONS:
        raise ValueError(f"Unsupported season '{value}'. Allowed: {list(SEASONS)}")
    return key


def normalise_seasons(values: Iterable[str]) -> Tuple[str, ...]:
    """Normalise and deduplicate seasons, preserving the given order."""

    normalised: List[str] = []
    for value in values:
        key = validate_season(value)
        if key not in normalised:
            normalised.append(key)
    return tuple(normalised)


def display_name(category: str) -> str:
    """Human readable label for a category used in recommendation text."""

    if category == ONE_PIECE:
        return "dresses"
    return category


__all__ = [
    "TOP",
    "BOTTOM",
    "ONE_PIECE",
    "OUTERWEAR",
    "FOOTWEAR",
    "ACCESSORY",
    "OTHER",
    "CATEGORIES",
    "CRITICAL_CATEGORIES",
    "SEASONS",
    "validate_category",
    "validate_season",
    "normalise_seasons",
    "display_name",
]
