"""Coverage result schemas produced by the coverage engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

from models.wardrobe_item import WardrobeItem


@dataclass(frozen=True)
class OutfitCombination:
    items: Tuple[WardrobeItem, ...]
    alternative_name: str
    is_complete: bool

    @property
    def item_ids(self) -> Tuple[str, ...]:
        return tuple(item.item_id for item in self.items)


@dataclass(frozen=True)
class OutfitAnalysis:
    """Coverage of one scenario in one season."""

    scenario_id: str
    scenario_name: str
    season: str
    target_quantity: int
    possible_outfits: int
    coverage_percent: int
    gap_count: int
    combinations: Tuple[OutfitCombination, ...] = ()
    missing_categories: Tuple[str, ...] = ()
    bottleneck_category: Optional[str] = None
    recommendations: Tuple[str, ...] = ()
    alternative_recommendations: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CoverageSummary:
    """Portfolio-level roll-up across scenarios."""

    overall_coverage_percent: int
    total_targets: int
    total_current: int
    total_gaps: int
    well_covered_scenarios: Tuple[str, ...] = ()
    poorly_covered_scenarios: Tuple[str, ...] = ()
    top_recommendations: Tuple[str, ...] = ()

    @property
    def well_covered_count(self) -> int:
        return len(self.well_covered_scenarios)

    @property
    def poorly_covered_count(self) -> int:
        return len(self.poorly_covered_scenarios)

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["well_covered_count"] = self.well_covered_count
        payload["poorly_covered_count"] = self.poorly_covered_count
        return payload


@dataclass(frozen=True)
class CategoryCoverage:
    """Per-category needs and gap for one scenario and season."""

    scenario_id: str
    scenario_name: str
    season: str
    category: str
    current_items: int
    needed_min: int
    needed_ideal: int
    needed_max: int
    coverage_percent: int
    gap_count: int
    gap_type: str
    priority_level: int
    recommendations: Tuple[str, ...] = ()

    @property
    def is_critical(self) -> bool:
        return self.gap_type == "critical"


@dataclass(frozen=True)
class CoverageReport:
    analyses: Tuple[OutfitAnalysis, ...]
    summary: CoverageSummary
    category_gaps: Tuple[CategoryCoverage, ...] = ()
    critical_gaps: Tuple[CategoryCoverage, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serialisable representation of the report."""

        return {
            "analyses": [asdict(analysis) for analysis in self.analyses],
            "summary": self.summary.to_dict(),
            "category_gaps": [asdict(row) for row in self.category_gaps],
            "critical_gaps": [asdict(row) for row in self.critical_gaps],
        }


__all__ = [
    "OutfitCombination",
    "OutfitAnalysis",
    "CoverageSummary",
    "CategoryCoverage",
    "CoverageReport",
]
