"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.coverage import (
    CategoryCoverage,
    CoverageReport,
    CoverageSummary,
    OutfitAnalysis,
    OutfitCombination,
)
from models.requirements import (
    CategoryRequirement,
    OutfitAlternative,
    OutfitRequirement,
    RequirementConfigurationError,
)
from models.wardrobe_item import WardrobeItem

__all__ = [
    "WardrobeItem",
    "CategoryRequirement",
    "OutfitAlternative",
    "OutfitRequirement",
    "RequirementConfigurationError",
    "OutfitCombination",
    "OutfitAnalysis",
    "CoverageSummary",
    "CategoryCoverage",
    "CoverageReport",
]
