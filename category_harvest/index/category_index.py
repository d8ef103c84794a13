"""Immutable, case-insensitive package -> category index."""

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from category_harvest.index.index_builder import load_category_map

logger = logging.getLogger(__name__)


class CategoryIndex:
    """Read-only lookup table from package name to category.

    Keys are stored lower-cased and lookups lower-case their input. The
    table is never mutated after construction, so it is safe to share
    between threads without locking.
    """

    def __init__(self, mapping: Mapping[str, str] | None = None):
        self._map: Mapping[str, str] = MappingProxyType(
            {name.lower(): category for name, category in (mapping or {}).items()}
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "CategoryIndex":
        return cls(mapping)

    @classmethod
    def from_artifact(cls, artifact_path: Path | str) -> "CategoryIndex":
        """Build an index from a harvest artifact on disk.

        A missing or corrupt artifact yields an empty index (every lookup
        then falls back) instead of an exception.

        Args:
            artifact_path: Path to category_suggestions.json.

        Returns:
            CategoryIndex, possibly empty.
        """
        try:
            mapping = load_category_map(artifact_path)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            logger.warning(f"Category artifact unavailable ({artifact_path}): {e}")
            return cls()
        return cls(mapping)

    @classmethod
    def from_compiled(cls) -> "CategoryIndex":
        """Build an index from the compiled ``generated_map`` module.

        A missing or broken module yields an empty index, like a missing
        artifact does.
        """
        try:
            from category_harvest.index.generated_map import CATEGORY_MAP
        except (ImportError, SyntaxError) as e:
            logger.warning(f"Compiled category index unavailable: {e}")
            return cls()

        return cls(CATEGORY_MAP)

    def get(self, pkgname: str) -> str | None:
        """Get the category for a package (case-insensitive)."""
        return self._map.get(pkgname.lower())

    def __contains__(self, pkgname: object) -> bool:
        return isinstance(pkgname, str) and pkgname.lower() in self._map

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)
