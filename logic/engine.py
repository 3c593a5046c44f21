"""Wardrobe coverage evaluation across scenarios.

Per requirement the stages run as: availability index, one evaluation per
alternative, best-alternative selection, sample combinations for the winner,
coverage, recommendations. Category gap rows and the portfolio summary are
computed once every scenario has been analysed.
"""

from __future__ import annotations

import contextvars
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence, Tuple

from coverage_app.config import CoverageConfig
from coverage_app.logging_config import get_logger, log_event, operation_context
from logic.aggregation import summarize_coverage
from logic.alternatives import evaluate_alternative
from logic.availability import AvailabilityIndex, build_availability_index
from logic.category_coverage import category_coverage_for_requirement, critical_gaps, rank_category_gaps
from logic.combinations import generate_combinations
from logic.coverage_calculator import calculate_coverage
from logic.recommendations import generate_recommendations
from logic.selection import select_best_alternative
from models.coverage import CategoryCoverage, CoverageReport, OutfitAnalysis
from models.requirements import OutfitRequirement
from models.wardrobe_item import WardrobeItem
from tools.observability import LoggingReporter, Reporter

LOGGER = get_logger(__name__)


class CoverageEngine:
    """Deterministic coverage evaluation with an injected event reporter."""

    def __init__(self, config: Optional[CoverageConfig] = None, reporter: Optional[Reporter] = None) -> None:
        self.config = config or CoverageConfig()
        self.reporter = reporter or LoggingReporter()

    def analyze_requirement(
        self, items: Sequence[WardrobeItem], requirement: OutfitRequirement, index: AvailabilityIndex | None = None
    ) -> OutfitAnalysis:
        """Analyse a single scenario/season requirement."""

        if index is None:
            index = self._index(items, requirement)
        results = []
        for alternative in requirement.alternatives:
            result = evaluate_alternative(index, alternative)
            self.reporter.record(
                "alternative_evaluated",
                {
                    "scenario_id": requirement.scenario_id,
                    "alternative": alternative.name,
                    "possible_outfits": result.possible_outfits,
                    "bottleneck_category": result.bottleneck_category,
                    "missing_categories": list(result.missing_categories),
                },
            )
            results.append(result)

        selection = select_best_alternative(results)
        combinations = []
        if selection.best is not None:
            combinations = generate_combinations(
                index,
                selection.best.alternative,
                selection.possible_outfits,
                limit=self.config.max_sample_combinations,
            )
            self.reporter.record(
                "alternative_selected",
                {
                    "scenario_id": requirement.scenario_id,
                    "alternative": selection.best.name,
                    "possible_outfits": selection.possible_outfits,
                    "sample_count": len(combinations),
                },
            )

        coverage = calculate_coverage(selection.possible_outfits, requirement.target_quantity)
        recommendations = generate_recommendations(
            requirement.scenario_name,
            selection.possible_outfits,
            coverage.gap_count,
            missing_categories=selection.missing_categories,
            bottleneck_category=selection.bottleneck_category,
            alternative_recommendations=selection.recommendations,
            max_entries=self.config.max_recommendations,
            max_bulk=self.config.max_bulk_recommendation,
            shopping_threshold=self.config.shopping_session_threshold,
        )
        analysis = OutfitAnalysis(
            scenario_id=requirement.scenario_id,
            scenario_name=requirement.scenario_name,
            season=requirement.season,
            target_quantity=requirement.target_quantity,
            possible_outfits=selection.possible_outfits,
            coverage_percent=coverage.coverage_percent,
            gap_count=coverage.gap_count,
            combinations=tuple(combinations),
            missing_categories=selection.missing_categories,
            bottleneck_category=selection.bottleneck_category,
            recommendations=tuple(recommendations),
            alternative_recommendations=selection.recommendations,
        )
        self.reporter.record(
            "scenario_analyzed",
            {
                "scenario_id": requirement.scenario_id,
                "season": requirement.season,
                "possible_outfits": analysis.possible_outfits,
                "target_quantity": analysis.target_quantity,
                "coverage_percent": analysis.coverage_percent,
            },
        )
        return analysis

    def evaluate(self, items: Iterable[WardrobeItem], requirements: Iterable[OutfitRequirement]) -> CoverageReport:
        """Evaluate every requirement and roll the results into a report."""

        items = tuple(items)
        requirements = tuple(requirements)
        with operation_context("evaluate_coverage") as correlation_id:
            log_event(
                LOGGER,
                logging.INFO,
                "coverage_evaluation_started",
                correlation_id=correlation_id,
                item_count=len(items),
                requirement_count=len(requirements),
            )
            if self.config.max_workers > 1 and len(requirements) > 1:
                contexts = [contextvars.copy_context() for _ in requirements]
                with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                    outcomes = list(
                        executor.map(
                            lambda context, requirement: context.run(self._evaluate_one, items, requirement),
                            contexts,
                            requirements,
                        )
                    )
            else:
                outcomes = [self._evaluate_one(items, requirement) for requirement in requirements]

            analyses = tuple(analysis for analysis, _ in outcomes)
            category_rows: List[CategoryCoverage] = [row for _, rows in outcomes for row in rows]
            ranked = rank_category_gaps(category_rows)
            critical = critical_gaps(ranked, limit=self.config.critical_gap_limit)
            self.reporter.record(
                "category_gaps_ranked",
                {
                    "row_count": len(ranked),
                    "critical_count": sum(1 for row in ranked if row.is_critical),
                    "critical_reported": len(critical),
                },
            )

            summary = summarize_coverage(
                analyses,
                well_covered_threshold=self.config.well_covered_threshold,
                poorly_covered_threshold=self.config.poorly_covered_threshold,
                per_scenario=self.config.recommendations_per_poor_scenario,
                limit=self.config.top_recommendations_limit,
            )
            self.reporter.record(
                "coverage_summarized",
                {
                    "overall_coverage_percent": summary.overall_coverage_percent,
                    "total_targets": summary.total_targets,
                    "total_current": summary.total_current,
                    "total_gaps": summary.total_gaps,
                },
            )
            log_event(
                LOGGER,
                logging.INFO,
                "coverage_evaluation_completed",
                correlation_id=correlation_id,
                scenario_count=len(analyses),
                overall_coverage_percent=summary.overall_coverage_percent,
            )
        return CoverageReport(
            analyses=analyses,
            summary=summary,
            category_gaps=tuple(ranked),
            critical_gaps=tuple(critical),
        )

    def _index(self, items: Sequence[WardrobeItem], requirement: OutfitRequirement) -> AvailabilityIndex:
        index = build_availability_index(items, requirement.scenario_id, requirement.season)
        self.reporter.record(
            "availability_indexed",
            {
                "scenario_id": requirement.scenario_id,
                "season": requirement.season,
                "item_count": index.item_count,
                "category_counts": index.category_counts(),
            },
        )
        return index

    def _evaluate_one(
        self, items: Sequence[WardrobeItem], requirement: OutfitRequirement
    ) -> Tuple[OutfitAnalysis, List[CategoryCoverage]]:
        index = self._index(items, requirement)
        analysis = self.analyze_requirement(items, requirement, index=index)
        return analysis, category_coverage_for_requirement(index, requirement)


def evaluate_coverage(
    items: Iterable[WardrobeItem],
    requirements: Iterable[OutfitRequirement],
    config: Optional[CoverageConfig] = None,
    reporter: Optional[Reporter] = None,
) -> CoverageReport:
    """Evaluate wardrobe coverage for every scenario requirement."""

    return CoverageEngine(config=config, reporter=reporter).evaluate(items, requirements)


__all__ = ["CoverageEngine", "evaluate_coverage"]
