"""Tests for data models."""

import math

import pytest
from pydantic import ValidationError

from category_harvest.models import (
    CategorySpec,
    FieldSelector,
    HarvestOutput,
    HarvestSummary,
    PackageSuggestion,
    RankedCategory,
    SummaryEntry,
)


class TestPackageSuggestion:
    """Tests for PackageSuggestion model."""

    def test_defaults(self) -> None:
        suggestion = PackageSuggestion(pkgname="foo", category="Other", score=0.0)

        assert suggestion.override_applied is False
        assert suggestion.reasons == []
        assert suggestion.alternatives == []
        assert suggestion.short_desc is None
        assert suggestion.template_path == ""

    def test_infinite_score_allowed(self) -> None:
        suggestion = PackageSuggestion(pkgname="foo", category="Chat", score=math.inf)
        assert math.isinf(suggestion.score)

    def test_negative_score_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PackageSuggestion(pkgname="foo", category="Other", score=-1.0)

    def test_too_many_alternatives_rejected(self) -> None:
        alternatives = [RankedCategory(category="Music", score=1.0) for _ in range(5)]

        with pytest.raises(ValidationError):
            PackageSuggestion(
                pkgname="foo", category="Video", score=9.0, alternatives=alternatives
            )

    def test_frozen(self) -> None:
        suggestion = PackageSuggestion(pkgname="foo", category="Other", score=0.0)

        with pytest.raises(ValidationError):
            suggestion.category = "Music"  # type: ignore[misc]


class TestHarvestOutput:
    """Tests for artifact models."""

    def test_model_dump_shape(self) -> None:
        output = HarvestOutput(
            metadata=HarvestSummary(
                generated_at="2024-05-01T12:00:00Z",
                total_packages=1,
                overrides_applied=0,
                summary=[SummaryEntry(category="Other", packages=1)],
            ),
            packages=[PackageSuggestion(pkgname="foo", category="Other", score=0.0)],
        )

        data = output.model_dump()

        assert set(data) == {"metadata", "packages"}
        assert set(data["metadata"]) == {
            "generated_at",
            "total_packages",
            "overrides_applied",
            "summary",
        }
        assert set(data["packages"][0]) == {
            "pkgname",
            "category",
            "score",
            "override_applied",
            "reasons",
            "alternatives",
            "short_desc",
            "homepage",
            "template_path",
        }

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SummaryEntry(category="Other", packages=-1)


class TestCategorySpec:
    """Tests for CategorySpec dataclass."""

    def test_is_fallback(self) -> None:
        assert CategorySpec("Other", (), 0.0).is_fallback
        assert not CategorySpec("Other", (), 1.0).is_fallback

    def test_field_labels(self) -> None:
        assert FieldSelector.NAME.label == "pkgname"
        assert FieldSelector.DEPENDS.label == "dependencies"
        assert FieldSelector.PATH.label == "template path"
