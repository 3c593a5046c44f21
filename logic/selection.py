"""Best-alternative selection and gap merging across alternatives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from logic.alternatives import AlternativeResult


@dataclass(frozen=True)
class SelectionResult:
    best: Optional[AlternativeResult]
    missing_categories: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()

    @property
    def possible_outfits(self) -> int:
        return self.best.possible_outfits if self.best else 0

    @property
    def bottleneck_category(self) -> Optional[str]:
        return self.best.bottleneck_category if self.best else None


def _ordered_union(groups: Sequence[Sequence[str]]) -> Tuple[str, ...]:
    merged: List[str] = []
    for group in groups:
        for value in group:
            if value not in merged:
                merged.append(value)
    return tuple(merged)


def select_best_alternative(results: Sequence[AlternativeResult]) -> SelectionResult:
    """Pick the alternative with the most outfits; earlier alternatives win ties.

    Missing categories and recommendations are merged from every alternative,
    not only the winner, in first-seen order.
    """

    best: Optional[AlternativeResult] = None
    for result in results:
        if best is None or result.possible_outfits > best.possible_outfits:
            best = result
    return SelectionResult(
        best=best,
        missing_categories=_ordered_union([result.missing_categories for result in results]),
        recommendations=_ordered_union([result.recommendations for result in results]),
    )


__all__ = ["SelectionResult", "select_best_alternative"]
