"""Category taxonomy helpers.

The category set is closed: heuristics, overrides and the runtime lookup
all select from ``CATEGORY_NAMES``.
"""

from category_harvest.categorization.human_maintained import CATEGORY_NAMES, CATEGORY_SPECS
from category_harvest.consts import FALLBACK_CATEGORY
from category_harvest.models.model_classification import CategorySpec


def get_category_spec(name: str) -> CategorySpec | None:
    """Get category spec by exact name."""
    for spec in CATEGORY_SPECS:
        if spec.name == name:
            return spec
    return None


def get_all_categories() -> list[str]:
    """Get list of all category names, fallback included."""
    return list(CATEGORY_NAMES)


def canonical_category(name: str) -> str | None:
    """Return the correctly-cased category name, matching case-insensitively.

    Returns:
        Canonical category name, or None if ``name`` is not in the taxonomy.
    """
    lowered = name.strip().lower()
    for candidate in CATEGORY_NAMES:
        if candidate.lower() == lowered:
            return candidate
    return None


def is_valid_category(name: str) -> bool:
    """Check if category name is valid (case-insensitive)."""
    return canonical_category(name) is not None


def scored_specs(specs: tuple[CategorySpec, ...]) -> tuple[CategorySpec, ...]:
    """Specs that take part in scoring (everything but the fallback)."""
    return tuple(spec for spec in specs if spec.name != FALLBACK_CATEGORY)


def validate_specs(specs: tuple[CategorySpec, ...]) -> tuple[bool, str]:
    """Validate a rule table against the closed category set.

    Args:
        specs: Category specs to validate.

    Returns:
        Tuple of (is_valid, error_message). error_message is empty if valid.
    """
    seen: set[str] = set()
    for spec in specs:
        if spec.name not in CATEGORY_NAMES:
            return False, f"Unknown category in rule table: {spec.name}"
        if spec.name in seen:
            return False, f"Duplicate category in rule table: {spec.name}"
        if spec.floor < 0:
            return False, f"Negative floor for category {spec.name}: {spec.floor}"
        if spec.name == FALLBACK_CATEGORY and not spec.is_fallback:
            return False, f"Fallback category '{FALLBACK_CATEGORY}' must have no rules and a zero floor"
        seen.add(spec.name)

    return True, ""
