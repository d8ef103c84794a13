"""Categorization module for package classification."""

from category_harvest.categorization.assembler import build_output
from category_harvest.categorization.classifier import Classifier, rank_candidates
from category_harvest.categorization.human_maintained import CATEGORY_NAMES, CATEGORY_SPECS
from category_harvest.categorization.overrides import OverrideTable
from category_harvest.categorization.scoring import score_category, score_package
from category_harvest.categorization.taxonomy import (
    canonical_category,
    get_all_categories,
    is_valid_category,
)

__all__ = [
    # Taxonomy
    "CATEGORY_NAMES",
    "CATEGORY_SPECS",
    "canonical_category",
    "get_all_categories",
    "is_valid_category",
    # Scoring
    "score_category",
    "score_package",
    # Classifier
    "Classifier",
    "OverrideTable",
    "rank_candidates",
    # Output
    "build_output",
]
