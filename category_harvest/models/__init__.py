"""Data models for category-harvest."""

from category_harvest.models.model_classification import (
    CategorySpec,
    FieldSelector,
    OverrideCategory,
    PackageSuggestion,
    RankedCategory,
    Rule,
)
from category_harvest.models.model_package import PackageRecord
from category_harvest.models.model_storage import (
    HarvestOutput,
    HarvestSummary,
    SummaryEntry,
)

__all__ = [
    # Package models
    "PackageRecord",
    # Classification models
    "CategorySpec",
    "FieldSelector",
    "OverrideCategory",
    "PackageSuggestion",
    "RankedCategory",
    "Rule",
    # Storage models
    "HarvestOutput",
    "HarvestSummary",
    "SummaryEntry",
]
