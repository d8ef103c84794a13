"""Artifact models for the persisted harvest output."""

from pydantic import BaseModel, Field

from category_harvest.models.model_classification import PackageSuggestion


class SummaryEntry(BaseModel):
    """Number of packages assigned to one category."""

    category: str
    packages: int = Field(ge=0)


class HarvestSummary(BaseModel):
    """Metadata block of the harvest artifact."""

    generated_at: str = Field(description="UTC timestamp, second precision")
    total_packages: int = Field(ge=0)
    overrides_applied: int = Field(ge=0)
    summary: list[SummaryEntry] = Field(default_factory=list)


class HarvestOutput(BaseModel):
    """Root of data/generated/category_suggestions.json.

    Packages are sorted by name; summary entries by category name.
    """

    metadata: HarvestSummary
    packages: list[PackageSuggestion] = Field(default_factory=list)
