"""Package classifier with weighted rule heuristics.

Classifies packages into categories using the following flow:
1. Override check (by lower-cased package name)
2. Weighted rule scoring against every category
3. Floor gating and ranking (winner + up to 4 alternatives)
4. Fallback to 'Other' when no category clears its floor
"""

import logging
import math
from collections.abc import Iterable
from typing import Final

from category_harvest.categorization.human_maintained import CATEGORY_SPECS
from category_harvest.categorization.overrides import OverrideTable
from category_harvest.categorization.scoring import score_package
from category_harvest.categorization.taxonomy import scored_specs, validate_specs
from category_harvest.consts import FALLBACK_CATEGORY, MAX_ALTERNATIVES, NO_MATCH_REASON
from category_harvest.models.model_classification import (
    CategorySpec,
    PackageSuggestion,
    RankedCategory,
)
from category_harvest.models.model_package import PackageRecord

logger = logging.getLogger(__name__)

OVERRIDE_SCORE: Final[float] = math.inf


def rank_candidates(
    candidates: list[RankedCategory],
    max_alternatives: int = MAX_ALTERNATIVES,
) -> tuple[RankedCategory | None, list[RankedCategory]]:
    """Order candidates by score and split off the winner.

    The sort is stable, so equal scores keep rule-table declaration order.

    Args:
        candidates: Categories that cleared their floor.
        max_alternatives: Maximum number of runner-up categories to keep.

    Returns:
        Tuple of (winner, alternatives). winner is None if there are no
        candidates.
    """
    if not candidates:
        return None, []
    ordered = sorted(candidates, key=lambda c: c.score, reverse=True)
    return ordered[0], ordered[1 : 1 + max_alternatives]


def override_reason(category: str) -> str:
    return f"override → {category}"


class Classifier:
    """Package classifier using weighted substring rules.

    Classification flow:
    1. Override check by package name
    2. Rule scoring and floor gating
    3. Ranking with declaration-order tie-break
    4. Fallback to Other

    The rule table and override table are owned by the instance and never
    mutated, so one classifier can be shared freely.
    """

    def __init__(
        self,
        specs: tuple[CategorySpec, ...] = CATEGORY_SPECS,
        overrides: OverrideTable | None = None,
        max_alternatives: int = MAX_ALTERNATIVES,
    ):
        """Initialize classifier.

        Args:
            specs: Rule table to score against. Defaults to the curated table.
            overrides: Manual overrides. Empty if not provided.
            max_alternatives: Runner-up categories kept per package (at most 4).

        Raises:
            ValueError: If the rule table names a category outside the taxonomy.
        """
        is_valid, error = validate_specs(specs)
        if not is_valid:
            raise ValueError(error)
        if not 0 <= max_alternatives <= MAX_ALTERNATIVES:
            raise ValueError(f"max_alternatives must be between 0 and {MAX_ALTERNATIVES}")

        self.specs = specs
        self.overrides = overrides or OverrideTable()
        self.max_alternatives = max_alternatives
        self._scored_specs = scored_specs(specs)

    def classify(self, record: PackageRecord) -> PackageSuggestion:
        """Classify one package.

        Args:
            record: Harvested package metadata.

        Returns:
            PackageSuggestion with category, score, reasons and alternatives.
        """
        # 1. Check overrides (scoring is skipped entirely)
        forced = self.overrides.lookup(record.pkgname)
        if forced is not None:
            logger.debug(f"Override applied for {record.pkgname}: {forced}")
            return PackageSuggestion(
                pkgname=record.pkgname,
                category=forced,
                score=OVERRIDE_SCORE,
                override_applied=True,
                reasons=[override_reason(forced)],
                alternatives=[],
                short_desc=record.short_desc,
                homepage=record.homepage,
                template_path=record.template_path,
            )

        # 2. Score and gate
        candidates = score_package(record, self._scored_specs)

        # 3. Rank
        winner, alternatives = rank_candidates(candidates, self.max_alternatives)

        if winner is not None:
            logger.debug(
                f"Classified {record.pkgname} as {winner.category} "
                f"(score: {winner.score:.1f}, {len(alternatives)} alternatives)"
            )
            return PackageSuggestion(
                pkgname=record.pkgname,
                category=winner.category,
                score=winner.score,
                override_applied=False,
                reasons=winner.reasons,
                alternatives=alternatives,
                short_desc=record.short_desc,
                homepage=record.homepage,
                template_path=record.template_path,
            )

        # 4. Fallback to Other
        logger.debug(f"No heuristic match for {record.pkgname}, falling back to {FALLBACK_CATEGORY}")
        return PackageSuggestion(
            pkgname=record.pkgname,
            category=FALLBACK_CATEGORY,
            score=0.0,
            override_applied=False,
            reasons=[NO_MATCH_REASON],
            alternatives=[],
            short_desc=record.short_desc,
            homepage=record.homepage,
            template_path=record.template_path,
        )

    def classify_all(self, records: Iterable[PackageRecord]) -> tuple[list[PackageSuggestion], int]:
        """Classify every package.

        Args:
            records: Harvested packages.

        Returns:
            Tuple of (suggestions sorted by package name, overrides applied).
        """
        suggestions = [self.classify(record) for record in records]
        suggestions.sort(key=lambda s: s.pkgname)
        overrides_used = sum(1 for s in suggestions if s.override_applied)
        logger.info(
            f"Classified {len(suggestions)} packages ({overrides_used} by override)"
        )
        return suggestions, overrides_used
