"""Lightweight evaluation harness for deterministic coverage scenarios."""

from __future__ import annotations

from typing import Dict, List

from coverage_app.config import CoverageConfig
from evaluation.scenarios import EvaluationScenario, SCENARIOS
from logic.engine import CoverageEngine
from models.coverage import CoverageReport
from tools.observability import InMemoryReporter

_ANALYSIS_KEYS = ("possible_outfits", "coverage_percent", "gap_count", "bottleneck_category")
_SUMMARY_KEYS = ("well_covered_count", "poorly_covered_count", "overall_coverage_percent")


def _evaluate_expectations(expectations: Dict[str, object], report: CoverageReport) -> Dict[str, object]:
    checks: Dict[str, bool] = {}
    first = report.analyses[0] if report.analyses else None
    for key in _ANALYSIS_KEYS:
        if key in expectations:
            checks[key] = first is not None and getattr(first, key) == expectations[key]
    if "missing_categories" in expectations:
        checks["missing_categories"] = first is not None and list(first.missing_categories) == list(
            expectations["missing_categories"]
        )
    if "recommendation_contains" in expectations:
        needle = str(expectations["recommendation_contains"])
        checks["recommendation_contains"] = first is not None and any(
            needle in recommendation for recommendation in first.recommendations
        )
    for key in _SUMMARY_KEYS:
        if key in expectations:
            checks[key] = getattr(report.summary, key) == expectations[key]
    return {"passed": all(checks.values()), "checks": checks}


def run_scenario(scenario: EvaluationScenario, config: CoverageConfig | None = None) -> Dict[str, object]:
    reporter = InMemoryReporter()
    engine = CoverageEngine(config=config or CoverageConfig(), reporter=reporter)
    report = engine.evaluate(scenario.items, scenario.requirements)
    evaluation = _evaluate_expectations(scenario.expectations, report)
    return {
        "scenario": scenario.name,
        "passed": evaluation["passed"],
        "checks": evaluation["checks"],
        "analysis_count": len(report.analyses),
        "event_count": len(reporter.events),
        "report": report,
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
