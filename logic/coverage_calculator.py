"""Coverage percentage and outfit gap against a target."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CoverageResult:
    coverage_percent: int
    gap_count: int


def rounded_percent(part: int, whole: int) -> int:
    """``round(100 * part / whole)`` with halves rounded up; 0 when ``whole`` is 0."""

    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def calculate_coverage(possible_outfits: int, target_quantity: int) -> CoverageResult:
    return CoverageResult(
        coverage_percent=rounded_percent(possible_outfits, target_quantity),
        gap_count=max(0, target_quantity - possible_outfits),
    )


__all__ = ["CoverageResult", "calculate_coverage", "rounded_percent"]
