"""Pydantic schemas for validating raw item and requirement payloads."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from models.requirements import CategoryRequirement, OutfitAlternative, OutfitRequirement
from models.taxonomy import normalise_seasons, validate_category, validate_season
from models.wardrobe_item import WardrobeItem


def _as_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return value


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class WardrobeItemPayload(_Payload):
    """Item snapshot as delivered by the wardrobe item store."""

    item_id: str = Field(min_length=1, validation_alias=AliasChoices("item_id", "itemId", "id"))
    category: str = Field(min_length=1)
    seasons: List[str] = Field(default_factory=list, validation_alias=AliasChoices("seasons", "season"))
    scenario_ids: List[str] = Field(
        default_factory=list, validation_alias=AliasChoices("scenario_ids", "scenarioIds", "scenarios")
    )
    name: Optional[str] = None

    coerce_lists = field_validator("seasons", "scenario_ids", mode="before")(_as_list)

    @field_validator("category")
    @classmethod
    def _known_category(cls, value: str) -> str:
        return validate_category(value)

    @field_validator("seasons")
    @classmethod
    def _known_seasons(cls, values: List[str]) -> List[str]:
        return list(normalise_seasons(values))

    def to_model(self) -> WardrobeItem:
        return WardrobeItem(
            item_id=self.item_id,
            category=self.category,
            seasons=tuple(self.seasons),
            scenario_ids=tuple(self.scenario_ids),
            name=self.name,
        )


class CategoryRequirementPayload(_Payload):
    category: str = Field(min_length=1)
    quantity: int = 1
    interchangeable_categories: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("interchangeable_categories", "interchangeableCategories", "interchangeable"),
    )

    coerce_lists = field_validator("interchangeable_categories", mode="before")(_as_list)

    @field_validator("category")
    @classmethod
    def _known_category(cls, value: str) -> str:
        return validate_category(value)

    @field_validator("interchangeable_categories")
    @classmethod
    def _known_interchangeables(cls, values: List[str]) -> List[str]:
        return [validate_category(value) for value in values]

    def to_model(self) -> CategoryRequirement:
        return CategoryRequirement(
            category=self.category,
            quantity=self.quantity,
            interchangeable_categories=tuple(self.interchangeable_categories),
        )


class OutfitAlternativePayload(_Payload):
    name: str = Field(min_length=1)
    required: List[CategoryRequirementPayload] = Field(default_factory=list)
    optional: List[CategoryRequirementPayload] = Field(default_factory=list)

    def to_model(self) -> OutfitAlternative:
        return OutfitAlternative(
            name=self.name,
            required=tuple(requirement.to_model() for requirement in self.required),
            optional=tuple(requirement.to_model() for requirement in self.optional),
        )


class OutfitRequirementPayload(_Payload):
    scenario_id: str = Field(min_length=1, validation_alias=AliasChoices("scenario_id", "scenarioId"))
    scenario_name: str = Field(min_length=1, validation_alias=AliasChoices("scenario_name", "scenarioName"))
    season: str = Field(min_length=1)
    target_quantity: int = Field(validation_alias=AliasChoices("target_quantity", "targetQuantity"))
    alternatives: List[OutfitAlternativePayload] = Field(default_factory=list)

    @field_validator("season")
    @classmethod
    def _known_season(cls, value: str) -> str:
        return validate_season(value)

    def to_model(self) -> OutfitRequirement:
        return OutfitRequirement(
            scenario_id=self.scenario_id,
            scenario_name=self.scenario_name,
            season=self.season,
            target_quantity=self.target_quantity,
            alternatives=tuple(alternative.to_model() for alternative in self.alternatives),
        )


class CoverageRequest(_Payload):
    """Envelope for a raw coverage evaluation request."""

    items: List[WardrobeItemPayload] = Field(default_factory=list)
    requirements: List[OutfitRequirementPayload] = Field(default_factory=list)

    def to_models(self) -> Tuple[List[WardrobeItem], List[OutfitRequirement]]:
        return (
            [item.to_model() for item in self.items],
            [requirement.to_model() for requirement in self.requirements],
        )


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = exc.errors(include_url=False, include_context=False, include_input=False)
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "WardrobeItemPayload",
    "CategoryRequirementPayload",
    "OutfitAlternativePayload",
    "OutfitRequirementPayload",
    "CoverageRequest",
    "ValidationResult",
    "validation_failure",
]
