"""Assemble classification results into the harvest artifact."""

from collections import Counter
from datetime import datetime

from category_harvest.models.common import _utc_now, format_timestamp
from category_harvest.models.model_classification import PackageSuggestion
from category_harvest.models.model_storage import HarvestOutput, HarvestSummary, SummaryEntry


def summarize(suggestions: list[PackageSuggestion]) -> list[SummaryEntry]:
    """Count packages per category, ordered by category name."""
    counts = Counter(s.category for s in suggestions)
    return [
        SummaryEntry(category=category, packages=counts[category])
        for category in sorted(counts)
    ]


def build_output(
    suggestions: list[PackageSuggestion],
    overrides_applied: int,
    generated_at: datetime | None = None,
) -> HarvestOutput:
    """Build the versioned, timestamped artifact.

    Args:
        suggestions: One suggestion per package. Re-sorted by name here.
        overrides_applied: Number of suggestions forced by an override.
        generated_at: Generation time. Defaults to now (UTC).

    Returns:
        HarvestOutput ready for persistence.
    """
    ordered = sorted(suggestions, key=lambda s: s.pkgname)
    return HarvestOutput(
        metadata=HarvestSummary(
            generated_at=format_timestamp(generated_at or _utc_now()),
            total_packages=len(ordered),
            overrides_applied=overrides_applied,
            summary=summarize(ordered),
        ),
        packages=ordered,
    )
