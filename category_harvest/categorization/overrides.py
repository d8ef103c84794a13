"""Manually curated package -> category overrides.

The override file maps each category to the packages forced into it:

    [Browsers]
    packages = ["qutebrowser", "nyxt"]

JSON files with the same shape (``{"Browsers": {"packages": [...]}}``) or
a bare list per category are accepted too. Category keys are matched
case-insensitively; any key outside the closed category set aborts the
load before a single package is classified.
"""

import json
import logging
import tomllib
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from category_harvest.categorization.taxonomy import canonical_category
from category_harvest.errors import OverrideConfigError
from category_harvest.models.model_classification import OverrideCategory

logger = logging.getLogger(__name__)


class OverrideTable:
    """Inverted override table: lower-cased package name -> category.

    Read-only after construction.
    """

    def __init__(self, assignments: dict[str, str] | None = None):
        """Initialize from an already inverted mapping.

        Args:
            assignments: Mapping of package name to canonical category.
                Keys are lower-cased here.
        """
        self._assignments = MappingProxyType(
            {pkg.lower(): category for pkg, category in (assignments or {}).items()}
        )

    @classmethod
    def from_mapping(cls, raw: dict[str, Any]) -> "OverrideTable":
        """Build from the category -> packages structure of the override file.

        Args:
            raw: Parsed override document.

        Returns:
            OverrideTable with every package mapped to its canonical category.

        Raises:
            OverrideConfigError: If a category is unknown or a section is malformed.
        """
        if not isinstance(raw, dict):
            raise OverrideConfigError("Override document must be a table of categories")

        assignments: dict[str, str] = {}
        for category, section in raw.items():
            canonical = canonical_category(category)
            if canonical is None:
                raise OverrideConfigError(f"Override references unknown category '{category}'")

            if isinstance(section, list):
                section = {"packages": section}
            try:
                entry = OverrideCategory.model_validate(section)
            except ValidationError as e:
                raise OverrideConfigError(
                    f"Invalid override section for category '{category}': {e}"
                ) from e

            for pkg in entry.packages:
                key = pkg.strip().lower()
                if not key:
                    continue
                existing = assignments.get(key)
                if existing is not None and existing != canonical:
                    logger.warning(
                        f"Package '{pkg}' overridden to both {existing} and {canonical}; "
                        f"keeping {existing}"
                    )
                    continue
                assignments[key] = canonical

        return cls(assignments)

    @classmethod
    def load(cls, path: Path | None) -> "OverrideTable":
        """Load overrides from a TOML or JSON file.

        A missing file yields an empty table.

        Args:
            path: Override file path (``.toml`` or ``.json``).

        Returns:
            Loaded OverrideTable.

        Raises:
            OverrideConfigError: If the file exists but cannot be read, parsed
                or validated.
        """
        if path is None or not Path(path).exists():
            logger.info("No override file found, continuing without overrides")
            return cls()

        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise OverrideConfigError(f"Failed to read override file {path}: {e}") from e

        try:
            if path.suffix == ".json":
                raw = json.loads(text)
            else:
                raw = tomllib.loads(text)
        except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
            raise OverrideConfigError(f"Failed to parse overrides from {path}: {e}") from e

        table = cls.from_mapping(raw)
        logger.info(f"Loaded {len(table)} package overrides from {path}")
        return table

    def lookup(self, pkgname: str) -> str | None:
        """Get the forced category for a package (case-insensitive)."""
        return self._assignments.get(pkgname.lower())

    def __contains__(self, pkgname: object) -> bool:
        return isinstance(pkgname, str) and pkgname.lower() in self._assignments

    def __len__(self) -> int:
        return len(self._assignments)
