"""Tests for weighted rule scoring."""

from category_harvest.categorization.human_maintained import CATEGORY_SPECS
from category_harvest.categorization.scoring import rule_matches, score_category, score_package
from category_harvest.categorization.taxonomy import get_category_spec, scored_specs
from category_harvest.models.model_classification import CategorySpec, FieldSelector, Rule
from category_harvest.models.model_package import PackageRecord


class TestRuleMatches:
    """Tests for rule_matches function."""

    def test_substring_match(self, firefox_record: PackageRecord) -> None:
        assert rule_matches(Rule(FieldSelector.NAME, "fox", 1.0), firefox_record)

    def test_case_insensitive(self, firefox_record: PackageRecord) -> None:
        assert rule_matches(Rule(FieldSelector.SHORT_DESC, "Web Browser", 1.0), firefox_record)

    def test_list_field_any_element(self) -> None:
        record = PackageRecord(pkgname="x", depends=("glibc", "sdl2-devel"))
        assert rule_matches(Rule(FieldSelector.DEPENDS, "sdl", 1.0), record)

    def test_absent_field_never_matches(self) -> None:
        record = PackageRecord(pkgname="x")
        assert not rule_matches(Rule(FieldSelector.SHORT_DESC, "x", 1.0), record)
        assert not rule_matches(Rule(FieldSelector.HOMEPAGE, "x", 1.0), record)

    def test_homepage_and_maintainer(self, firefox_record: PackageRecord) -> None:
        assert rule_matches(Rule(FieldSelector.HOMEPAGE, "mozilla", 1.0), firefox_record)
        assert rule_matches(Rule(FieldSelector.MAINTAINER, "jane", 1.0), firefox_record)


class TestScoreCategory:
    """Tests for score_category function."""

    def test_browsers_score(self, firefox_record: PackageRecord) -> None:
        spec = get_category_spec("Browsers")
        assert spec is not None

        ranked = score_category(spec, firefox_record)

        assert ranked.category == "Browsers"
        assert ranked.score == 17.0
        assert ranked.reasons == [
            "short_desc contains 'web browser'",
            "short_desc contains 'browser'",
            "pkgname contains 'firefox'",
        ]

    def test_no_match_scores_zero(self, unknown_record: PackageRecord) -> None:
        spec = get_category_spec("Browsers")
        assert spec is not None

        ranked = score_category(spec, unknown_record)

        assert ranked.score == 0.0
        assert ranked.reasons == []


class TestScorePackage:
    """Tests for score_package function."""

    def test_floor_gates_candidates(self) -> None:
        # Kernels: pkgname 'rt' alone (4.5) stays below the 5.5 floor
        record = PackageRecord(pkgname="rtorrent", short_desc="BitTorrent downloader")

        assert score_package(record, scored_specs(CATEGORY_SPECS)) == []

    def test_score_exactly_at_floor_is_candidate(self) -> None:
        spec = CategorySpec("Video", (Rule(FieldSelector.DEPENDS, "gstreamer", 4.5),), 4.5)
        record = PackageRecord(pkgname="x", depends=("gstreamer1-devel",))

        candidates = score_package(record, (spec,))

        assert [c.category for c in candidates] == ["Video"]

    def test_zero_floor_needs_a_match(self) -> None:
        spec = CategorySpec("Music", (Rule(FieldSelector.NAME, "music", 1.0),), 0.0)
        record = PackageRecord(pkgname="editor")

        assert score_package(record, (spec,)) == []

    def test_candidates_in_declaration_order(self) -> None:
        record = PackageRecord(
            pkgname="clementine",
            short_desc="Modern music player and library organizer",
            depends=("gstreamer1-devel", "alsa-lib-devel"),
        )

        candidates = score_package(record, scored_specs(CATEGORY_SPECS))

        assert [(c.category, c.score) for c in candidates] == [("Music", 15.0), ("Video", 4.5)]
