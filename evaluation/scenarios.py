"""Golden coverage scenarios with expected outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from models.requirements import CategoryRequirement, OutfitAlternative, OutfitRequirement
from models.wardrobe_item import WardrobeItem


@dataclass
class EvaluationScenario:
    name: str
    description: str
    items: List[WardrobeItem]
    requirements: List[OutfitRequirement]
    expectations: Dict[str, object] = field(default_factory=dict)


def _items(
    category: str, count: int, scenario_id: str = "office", prefix: str | None = None, seasons: Sequence[str] = ()
) -> List[WardrobeItem]:
    prefix = prefix or category
    return [
        WardrobeItem(
            item_id=f"{prefix}-{index}", category=category, seasons=tuple(seasons), scenario_ids=(scenario_id,)
        )
        for index in range(1, count + 1)
    ]


def _separates(name: str = "Smart casual", top_interchangeable: Sequence[str] = ()) -> OutfitAlternative:
    return OutfitAlternative(
        name=name,
        required=(
            CategoryRequirement("top", 1, tuple(top_interchangeable)),
            CategoryRequirement("bottom", 1),
            CategoryRequirement("footwear", 1),
        ),
        optional=(CategoryRequirement("outerwear", 1), CategoryRequirement("accessory", 1)),
    )


def _office(target: int, *alternatives: OutfitAlternative) -> OutfitRequirement:
    return OutfitRequirement(
        scenario_id="office",
        scenario_name="Office Work",
        season="winter",
        target_quantity=target,
        alternatives=alternatives or (_separates(),),
    )


def _footwear_bottleneck() -> EvaluationScenario:
    return EvaluationScenario(
        name="footwear_bottleneck",
        description="Three tops, two bottoms and one pair of shoes make exactly one outfit.",
        items=_items("top", 3) + _items("bottom", 2) + _items("footwear", 1),
        requirements=[_office(1)],
        expectations={"possible_outfits": 1, "bottleneck_category": "footwear", "coverage_percent": 100},
    )


def _missing_footwear() -> EvaluationScenario:
    return EvaluationScenario(
        name="missing_footwear",
        description="Without footwear no outfit can be assembled.",
        items=_items("top", 4) + _items("bottom", 4),
        requirements=[_office(3)],
        expectations={"possible_outfits": 0, "missing_categories": ["footwear"]},
    )


def _under_target() -> EvaluationScenario:
    return EvaluationScenario(
        name="under_target",
        description="One possible outfit against a target of five.",
        items=_items("top", 3) + _items("bottom", 2) + _items("footwear", 1),
        requirements=[_office(5)],
        expectations={
            "possible_outfits": 1,
            "coverage_percent": 20,
            "gap_count": 4,
            "recommendation_contains": "Add 3 more footwear",
        },
    )


def _interchangeable_outerwear() -> EvaluationScenario:
    return EvaluationScenario(
        name="interchangeable_outerwear",
        description="Outerwear fills the top slot when no tops are tagged.",
        items=_items("outerwear", 2) + _items("bottom", 2) + _items("footwear", 2),
        requirements=[_office(2, _separates(top_interchangeable=("outerwear",)))],
        expectations={"possible_outfits": 2, "missing_categories": []},
    )


def _portfolio() -> EvaluationScenario:
    items = (
        _items("top", 9, prefix="office-top")
        + _items("bottom", 9, prefix="office-bottom")
        + _items("footwear", 9, prefix="office-shoe")
        + _items("top", 3, scenario_id="weekend", prefix="weekend-top")
        + _items("bottom", 3, scenario_id="weekend", prefix="weekend-bottom")
        + _items("footwear", 3, scenario_id="weekend", prefix="weekend-shoe")
    )
    requirements = [
        _office(10),
        OutfitRequirement(
            scenario_id="weekend",
            scenario_name="Weekend",
            season="winter",
            target_quantity=10,
            alternatives=(_separates("Relaxed"),),
        ),
    ]
    return EvaluationScenario(
        name="portfolio",
        description="A 90 percent covered office and a 30 percent covered weekend.",
        items=items,
        requirements=requirements,
        expectations={"well_covered_count": 1, "poorly_covered_count": 1, "overall_coverage_percent": 60},
    )


SCENARIOS: List[EvaluationScenario] = [
    _footwear_bottleneck(),
    _missing_footwear(),
    _under_target(),
    _interchangeable_outerwear(),
    _portfolio(),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
