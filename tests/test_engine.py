"""End-to-end tests for the coverage engine."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from coverage_app.config import CoverageConfig
from logic.engine import CoverageEngine, evaluate_coverage
from models.requirements import CategoryRequirement, OutfitAlternative, OutfitRequirement
from models.wardrobe_item import WardrobeItem
from tools.observability import InMemoryReporter, NullReporter


def _items(category: str, count: int, scenario_id: str = "office", seasons=()) -> List[WardrobeItem]:
    return [
        WardrobeItem(
            item_id=f"{scenario_id}-{category}-{index}",
            category=category,
            seasons=seasons,
            scenario_ids=(scenario_id,),
        )
        for index in range(1, count + 1)
    ]


def _separates(name: str = "Smart casual") -> OutfitAlternative:
    return OutfitAlternative(
        name=name,
        required=(
            CategoryRequirement("top"),
            CategoryRequirement("bottom"),
            CategoryRequirement("footwear"),
        ),
        optional=(CategoryRequirement("accessory"),),
    )


def _dress() -> OutfitAlternative:
    return OutfitAlternative(
        name="Dress", required=(CategoryRequirement("one_piece"), CategoryRequirement("footwear"))
    )


def _requirement(scenario_id: str, name: str, target: int, *alternatives: OutfitAlternative) -> OutfitRequirement:
    return OutfitRequirement(scenario_id, name, "winter", target, alternatives or (_separates(),))


def test_scenario_analysis_under_target() -> None:
    items = _items("top", 3) + _items("bottom", 2) + _items("footwear", 1)
    report = evaluate_coverage(items, [_requirement("office", "Office Work", 5)], reporter=NullReporter())
    analysis = report.analyses[0]

    assert analysis.possible_outfits == 1
    assert analysis.coverage_percent == 20
    assert analysis.gap_count == 4
    assert analysis.bottleneck_category == "footwear"
    assert analysis.missing_categories == ()
    assert [combo.item_ids for combo in analysis.combinations] == [
        ("office-top-1", "office-bottom-1", "office-footwear-1")
    ]
    assert any("Add 3 more footwear" in text for text in analysis.recommendations)


def test_missing_category_zeroes_outfits_regardless_of_abundance() -> None:
    items = _items("top", 20) + _items("bottom", 20)
    analysis = evaluate_coverage(items, [_requirement("office", "Office Work", 3)], reporter=NullReporter()).analyses[0]

    assert analysis.possible_outfits == 0
    assert analysis.combinations == ()
    assert analysis.missing_categories == ("footwear",)
    assert analysis.recommendations[0] == "Priority: add footwear items to create any Office Work outfits"
    assert len(analysis.recommendations) <= 5


def test_gaps_merge_across_alternatives_while_winner_supplies_counts() -> None:
    items = _items("top", 4) + _items("bottom", 4) + _items("footwear", 2)
    requirement = _requirement("office", "Office Work", 2, _dress(), _separates())
    analysis = evaluate_coverage(items, [requirement], reporter=NullReporter()).analyses[0]

    assert analysis.possible_outfits == 2
    assert analysis.bottleneck_category == "footwear"
    assert analysis.missing_categories == ("one_piece",)
    assert analysis.recommendations == ("You have enough outfits for Office Work!",)
    assert "Add 1 one_piece for Dress" in analysis.alternative_recommendations
    assert all(combo.alternative_name == "Smart casual" for combo in analysis.combinations)


def test_sample_combinations_are_capped_by_config() -> None:
    items = _items("top", 12) + _items("bottom", 12) + _items("footwear", 12)
    requirement = _requirement("office", "Office Work", 20)

    default = evaluate_coverage(items, [requirement], reporter=NullReporter()).analyses[0]
    assert default.possible_outfits == 12
    assert len(default.combinations) == 10

    narrow = evaluate_coverage(
        items, [requirement], config=CoverageConfig(max_sample_combinations=3), reporter=NullReporter()
    ).analyses[0]
    assert len(narrow.combinations) == 3


def test_empty_inputs_produce_empty_report() -> None:
    report = evaluate_coverage([], [], reporter=NullReporter())
    assert report.analyses == ()
    assert report.category_gaps == ()
    assert report.summary.overall_coverage_percent == 0
    assert report.summary.total_targets == 0

    no_items = evaluate_coverage([], [_requirement("office", "Office Work", 0)], reporter=NullReporter())
    analysis = no_items.analyses[0]
    assert analysis.coverage_percent == 0
    assert analysis.recommendations == ("You have enough outfits for Office Work!",)


def test_requirement_without_alternatives_reports_gap() -> None:
    requirement = OutfitRequirement("office", "Office Work", "winter", 2)
    analysis = evaluate_coverage(_items("top", 2), [requirement], reporter=NullReporter()).analyses[0]
    assert analysis.possible_outfits == 0
    assert analysis.bottleneck_category is None
    assert analysis.recommendations == ("2 more outfits needed to reach your Office Work target",)


def test_season_filtering_applies_per_requirement() -> None:
    items = _items("top", 2, seasons=("summer",)) + _items("bottom", 2) + _items("footwear", 2)
    summer = OutfitRequirement("office", "Office Work", "summer", 2, (_separates(),))
    winter = OutfitRequirement("office", "Office Work", "winter", 2, (_separates(),))
    report = evaluate_coverage(items, [summer, winter], reporter=NullReporter())

    assert [analysis.season for analysis in report.analyses] == ["summer", "winter"]
    assert report.analyses[0].possible_outfits == 2
    assert report.analyses[1].missing_categories == ("top",)


def test_portfolio_summary_and_category_gaps() -> None:
    items = (
        _items("top", 9) + _items("bottom", 9) + _items("footwear", 9)
        + _items("top", 3, "weekend") + _items("bottom", 3, "weekend") + _items("footwear", 3, "weekend")
    )
    report = evaluate_coverage(
        items,
        [_requirement("office", "Office Work", 10), _requirement("weekend", "Weekend", 10)],
        reporter=NullReporter(),
    )

    assert report.summary.well_covered_count == 1
    assert report.summary.poorly_covered_count == 1
    assert report.summary.poorly_covered_scenarios == ("Weekend",)
    assert report.summary.overall_coverage_percent == 60
    assert report.summary.top_recommendations == report.analyses[1].recommendations[:2]
    assert len(report.category_gaps) == 14
    levels = [row.priority_level for row in report.category_gaps]
    assert levels == sorted(levels)


def test_parallel_evaluation_preserves_input_order() -> None:
    items = []
    requirements = []
    for index in range(6):
        scenario_id = f"scenario-{index}"
        items += _items("top", index, scenario_id) + _items("bottom", index + 1, scenario_id)
        items += _items("footwear", 2, scenario_id)
        requirements.append(_requirement(scenario_id, f"Scenario {index}", 3))

    sequential = evaluate_coverage(items, requirements, reporter=NullReporter())
    parallel = evaluate_coverage(items, requirements, config=CoverageConfig(max_workers=4), reporter=NullReporter())

    assert [a.scenario_id for a in parallel.analyses] == [r.scenario_id for r in requirements]
    assert parallel.to_dict() == sequential.to_dict()


def test_reporter_receives_stage_events() -> None:
    reporter = InMemoryReporter()
    engine = CoverageEngine(reporter=reporter)
    items = _items("top", 2) + _items("bottom", 2) + _items("footwear", 2)
    engine.evaluate(items, [_requirement("office", "Office Work", 2, _dress(), _separates())])

    names = [name for name, _ in reporter.events]
    assert names[0] == "availability_indexed"
    assert names.count("alternative_evaluated") == 2
    assert names[-1] == "coverage_summarized"
    selected = reporter.named("alternative_selected")[0]
    assert selected["alternative"] == "Smart casual"
    assert selected["sample_count"] == 2
    assert reporter.named("availability_indexed")[0]["category_counts"] == {"top": 2, "bottom": 2, "footwear": 2}


def test_configuration_errors_are_fatal() -> None:
    with pytest.raises(ValueError):
        _requirement("office", "Office Work", 1, OutfitAlternative("Broken", (CategoryRequirement("top", 0),)))


def test_report_serialises_to_plain_dict() -> None:
    items = _items("top", 1) + _items("bottom", 1) + _items("footwear", 1)
    payload = evaluate_coverage(items, [_requirement("office", "Office Work", 1)], reporter=NullReporter()).to_dict()

    assert payload["summary"]["well_covered_count"] == 1
    combination = payload["analyses"][0]["combinations"][0]
    assert combination["items"][0]["item_id"] == "office-top-1"
    assert payload["category_gaps"][0]["priority_level"] >= 1


def test_critical_gaps_respect_configured_limit() -> None:
    requirements = [_requirement(f"scenario-{index}", f"Scenario {index}", 2) for index in range(3)]

    limited = evaluate_coverage(
        [], requirements, config=CoverageConfig(critical_gap_limit=1), reporter=NullReporter()
    )
    assert len(limited.critical_gaps) == 1
    assert limited.critical_gaps[0].gap_type == "critical"
    assert len(limited.to_dict()["critical_gaps"]) == 1

    default = evaluate_coverage([], requirements, reporter=NullReporter())
    assert len(default.critical_gaps) == 9
    assert all(row.priority_level == 1 for row in default.critical_gaps)
    assert len(default.category_gaps) == len(limited.category_gaps)
