"""Tests for alternative evaluation, selection and sample combinations."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.alternatives import AlternativeResult, evaluate_alternative
from logic.availability import build_availability_index
from logic.combinations import generate_combinations
from logic.selection import select_best_alternative
from models.requirements import CategoryRequirement, OutfitAlternative
from models.wardrobe_item import WardrobeItem


def _items(category: str, count: int) -> List[WardrobeItem]:
    return [
        WardrobeItem(item_id=f"{category}-{index}", category=category, scenario_ids=("office",))
        for index in range(1, count + 1)
    ]


def _separates(name: str = "Smart casual", top_interchangeable=()) -> OutfitAlternative:
    return OutfitAlternative(
        name=name,
        required=(
            CategoryRequirement("top", 1, top_interchangeable),
            CategoryRequirement("bottom", 1),
            CategoryRequirement("footwear", 1),
        ),
    )


def _index(items):
    return build_availability_index(items, "office", "winter")


def test_footwear_is_the_bottleneck() -> None:
    index = _index(_items("top", 3) + _items("bottom", 2) + _items("footwear", 1))
    result = evaluate_alternative(index, _separates())

    assert result.possible_outfits == 1
    assert result.bottleneck_category == "footwear"
    assert result.missing_categories == ()
    assert result.available_counts == {"top": 3, "bottom": 2, "footwear": 1}
    assert result.recommendations == (
        "Add 1 more footwear to increase Smart casual options (currently limited by footwear: 1 items)",
    )


def test_missing_category_blocks_the_alternative() -> None:
    index = _index(_items("top", 10) + _items("bottom", 10))
    result = evaluate_alternative(index, _separates())

    assert result.possible_outfits == 0
    assert result.missing_categories == ("footwear",)
    assert result.bottleneck_category == "footwear"
    assert result.recommendations == ("Add 1 footwear for Smart casual",)


def test_interchangeable_category_fills_the_slot() -> None:
    index = _index(_items("outerwear", 2) + _items("bottom", 3) + _items("footwear", 3))
    result = evaluate_alternative(index, _separates(top_interchangeable=("outerwear",)))

    assert result.available_counts["top"] == 2
    assert "top" not in result.missing_categories
    assert result.possible_outfits == 2
    assert result.bottleneck_category == "top"
    assert result.recommendations == (
        "Add 1 more top to increase Smart casual options (currently limited by top: 0 items)",
    )


def test_quantity_divides_availability_and_first_minimum_wins() -> None:
    alternative = OutfitAlternative(
        name="Layered",
        required=(
            CategoryRequirement("top", 2),
            CategoryRequirement("bottom", 1),
            CategoryRequirement("accessory", 3),
        ),
    )
    index = _index(_items("top", 5) + _items("bottom", 2) + _items("accessory", 7))
    result = evaluate_alternative(index, alternative)

    assert result.possible_outfits == 2
    assert result.bottleneck_category == "top"


def test_overlapping_pools_count_the_same_item_twice() -> None:
    alternative = OutfitAlternative(
        name="Layered",
        required=(CategoryRequirement("top", 1, ("outerwear",)), CategoryRequirement("outerwear", 1)),
    )
    index = _index(_items("outerwear", 1))
    result = evaluate_alternative(index, alternative)
    assert result.possible_outfits == 1

    combinations = generate_combinations(index, alternative, result.possible_outfits)
    assert combinations[0].item_ids == ("outerwear-1", "outerwear-1")


def test_adding_bottleneck_items_never_reduces_outfits() -> None:
    base = _items("top", 4) + _items("bottom", 3)
    previous = -1
    for shoes in range(0, 6):
        result = evaluate_alternative(_index(base + _items("footwear", shoes)), _separates())
        assert result.possible_outfits >= previous
        previous = result.possible_outfits
    assert previous == 3


def test_alternative_without_required_categories_yields_nothing() -> None:
    result = evaluate_alternative(_index(_items("top", 3)), OutfitAlternative(name="Empty"))
    assert result.possible_outfits == 0
    assert result.bottleneck_category is None
    assert generate_combinations(_index(_items("top", 3)), OutfitAlternative(name="Empty"), 3) == []


def test_combinations_take_contiguous_slices() -> None:
    alternative = OutfitAlternative(
        name="Pairs", required=(CategoryRequirement("top", 2), CategoryRequirement("footwear", 1))
    )
    index = _index(_items("top", 5) + _items("footwear", 4))
    combinations = generate_combinations(index, alternative, 2)

    assert [combo.item_ids for combo in combinations] == [
        ("top-1", "top-2", "footwear-1"),
        ("top-3", "top-4", "footwear-2"),
    ]
    assert all(combo.is_complete and combo.alternative_name == "Pairs" for combo in combinations)


def test_combinations_are_capped_and_skip_incomplete_samples() -> None:
    index = _index(_items("top", 12) + _items("bottom", 12) + _items("footwear", 12))
    assert len(generate_combinations(index, _separates(), 12)) == 10
    assert len(generate_combinations(index, _separates(), 12, limit=4)) == 4
    assert generate_combinations(index, _separates(), 0) == []

    short = _index(_items("top", 2) + _items("bottom", 2) + _items("footwear", 1))
    assert len(generate_combinations(short, _separates(), 2)) == 1


def test_selection_prefers_first_alternative_on_ties_and_merges_gaps() -> None:
    index = _index(_items("top", 2) + _items("bottom", 2) + _items("footwear", 2))
    dress = OutfitAlternative(
        name="Dress", required=(CategoryRequirement("one_piece", 1), CategoryRequirement("footwear", 1))
    )
    suit = OutfitAlternative(
        name="Suit", required=(CategoryRequirement("outerwear", 1), CategoryRequirement("footwear", 1))
    )
    results = [
        evaluate_alternative(index, dress),
        evaluate_alternative(index, _separates("First")),
        evaluate_alternative(index, _separates("Second")),
        evaluate_alternative(index, suit),
    ]
    selection = select_best_alternative(results)

    assert selection.best is not None and selection.best.name == "First"
    assert selection.possible_outfits == 2
    assert selection.bottleneck_category == "top"
    assert selection.missing_categories == ("one_piece", "outerwear")
    assert selection.recommendations[0] == "Add 1 one_piece for Dress"
    assert "Add 1 outerwear for Suit" in selection.recommendations


def test_selection_of_no_alternatives() -> None:
    selection = select_best_alternative([])
    assert selection.best is None
    assert selection.possible_outfits == 0
    assert selection.bottleneck_category is None
    assert selection.missing_categories == ()


def test_alternative_result_exposes_name() -> None:
    result = AlternativeResult(alternative=_separates("Named"), possible_outfits=0)
    assert result.name == "Named"
