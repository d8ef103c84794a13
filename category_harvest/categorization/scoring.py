"""Weighted rule scoring.

Scoring is a pure function of (record, rule table): no state is shared
between packages, so records can be scored in any order.
"""

from category_harvest.models.model_classification import CategorySpec, RankedCategory, Rule
from category_harvest.models.model_package import PackageRecord


def rule_matches(rule: Rule, record: PackageRecord) -> bool:
    """Check whether a rule's pattern occurs in the selected field.

    Matching is a case-insensitive substring test. For list fields the
    rule matches if any element contains the pattern.
    """
    pattern = rule.pattern.lower()
    return any(pattern in value for value in record.values_for(rule.field))


def score_category(spec: CategorySpec, record: PackageRecord) -> RankedCategory:
    """Sum the weights of every satisfied rule in a category.

    Args:
        spec: Category to score.
        record: Package to score against.

    Returns:
        RankedCategory with the total score and one reason per matched rule.
    """
    score = 0.0
    reasons: list[str] = []
    for rule in spec.rules:
        if rule_matches(rule, record):
            score += rule.weight
            reasons.append(rule.describe())
    return RankedCategory(category=spec.name, score=score, reasons=reasons)


def score_package(
    record: PackageRecord,
    specs: tuple[CategorySpec, ...],
) -> list[RankedCategory]:
    """Score a package against every category and keep the candidates.

    A category is a candidate only if its score reaches its floor. A
    category with no matching rule never becomes a candidate.

    Args:
        record: Package to score.
        specs: Scored (non-fallback) category specs.

    Returns:
        Candidate categories in declaration order (not yet ranked).
    """
    candidates: list[RankedCategory] = []
    for spec in specs:
        ranked = score_category(spec, record)
        if ranked.reasons and ranked.score >= spec.floor:
            candidates.append(ranked)
    return candidates
