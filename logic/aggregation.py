"""Portfolio roll-up of per-scenario coverage."""

from __future__ import annotations

from typing import List, Sequence

from logic.coverage_calculator import rounded_percent
from models.coverage import CoverageSummary, OutfitAnalysis

WELL_COVERED_THRESHOLD = 80
POORLY_COVERED_THRESHOLD = 50
RECOMMENDATIONS_PER_POOR_SCENARIO = 2
TOP_RECOMMENDATIONS_LIMIT = 3


def summarize_coverage(
    analyses: Sequence[OutfitAnalysis],
    well_covered_threshold: int = WELL_COVERED_THRESHOLD,
    poorly_covered_threshold: int = POORLY_COVERED_THRESHOLD,
    per_scenario: int = RECOMMENDATIONS_PER_POOR_SCENARIO,
    limit: int = TOP_RECOMMENDATIONS_LIMIT,
) -> CoverageSummary:
    """Aggregate scenario analyses into a :class:`CoverageSummary`.

    Scenarios at or above ``well_covered_threshold`` percent are well covered,
    those below ``poorly_covered_threshold`` are poorly covered; anything in
    between is in neither list. Overall coverage is capped at 100 percent.
    The recommendation digest takes the first ``per_scenario`` entries of each
    poorly covered scenario in input order.
    """

    total_targets = sum(analysis.target_quantity for analysis in analyses)
    total_current = sum(analysis.possible_outfits for analysis in analyses)
    total_gaps = sum(max(0, analysis.target_quantity - analysis.possible_outfits) for analysis in analyses)

    well_covered = [a for a in analyses if a.coverage_percent >= well_covered_threshold]
    poorly_covered = [a for a in analyses if a.coverage_percent < poorly_covered_threshold]

    digest: List[str] = []
    for analysis in poorly_covered:
        digest.extend(analysis.recommendations[:per_scenario])

    return CoverageSummary(
        overall_coverage_percent=min(100, rounded_percent(total_current, total_targets)),
        total_targets=total_targets,
        total_current=total_current,
        total_gaps=total_gaps,
        well_covered_scenarios=tuple(a.scenario_name for a in well_covered),
        poorly_covered_scenarios=tuple(a.scenario_name for a in poorly_covered),
        top_recommendations=tuple(digest[:limit]),
    )


__all__ = ["summarize_coverage"]
