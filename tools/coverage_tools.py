"""Instrumented entry points for coverage evaluation."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from logic.engine import CoverageEngine
from logic.validation import CoverageRequest, validation_failure
from tools.collaborators import (
    RequirementCatalogue,
    StaticItemSource,
    StaticRequirementCatalogue,
    WardrobeItemSource,
)
from tools.observability import instrument_tool


def _payload_rejected(exc) -> Dict[str, Any]:
    return validation_failure("Coverage request payload failed validation", exc)


class CoverageTools:
    """Thin wrapper exposing coverage evaluation over collaborators or raw payloads."""

    def __init__(
        self,
        item_source: Optional[WardrobeItemSource] = None,
        catalogue: Optional[RequirementCatalogue] = None,
        engine: Optional[CoverageEngine] = None,
    ) -> None:
        self.item_source = item_source or StaticItemSource()
        self.catalogue = catalogue or StaticRequirementCatalogue()
        self.engine = engine or CoverageEngine()

    @instrument_tool("evaluate_wardrobe_coverage")
    def evaluate_for_user(self, user_id: str) -> Dict[str, Any]:
        items = self.item_source.list_items(user_id)
        requirements = self.catalogue.list_requirements(user_id)
        return self.engine.evaluate(items, requirements).to_dict()

    @instrument_tool(
        "evaluate_coverage_payload",
        input_model=CoverageRequest,
        on_validation_error=_payload_rejected,
    )
    def evaluate_payload(
        self, *, items: List[Dict[str, Any]], requirements: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        request = CoverageRequest.model_validate({"items": items, "requirements": requirements})
        wardrobe_items, outfit_requirements = request.to_models()
        return self.engine.evaluate(wardrobe_items, outfit_requirements).to_dict()


__all__ = ["CoverageTools"]
