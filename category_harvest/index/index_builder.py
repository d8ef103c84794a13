"""Compile the harvest artifact into a static package -> category table.

The table is emitted as a Python module holding a ``MappingProxyType``
literal, so consumers get an immutable, constant-time lookup without
parsing JSON or touching the filesystem at startup.
"""

import json
import logging
import os
import tempfile
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from category_harvest.consts import DEFAULT_INDEX_MODULE_PATH

logger = logging.getLogger(__name__)

MODULE_HEADER = '''"""Compiled package -> category map.

Generated by `category-harvest build-index`; do not edit by hand.
"""

from types import MappingProxyType

'''


def build_category_map(packages: Iterable[Mapping[str, Any]]) -> dict[str, str]:
    """Reduce artifact package entries to lower-cased name -> category.

    Entries with an empty name or category are skipped. If two names
    collide case-insensitively, the first one wins.

    Args:
        packages: The ``packages`` list of a harvest artifact.

    Returns:
        Mapping of lower-cased package name to category name.
    """
    mapping: dict[str, str] = {}
    duplicates = 0
    for entry in packages:
        if not isinstance(entry, Mapping):
            continue
        name = entry.get("pkgname")
        category = entry.get("category")
        if not isinstance(name, str) or not isinstance(category, str):
            continue
        name = name.strip().lower()
        category = category.strip()
        if not name or not category:
            continue
        if name in mapping:
            duplicates += 1
            continue
        mapping[name] = category

    if duplicates:
        logger.warning(f"Skipped {duplicates} duplicate package names while building index")
    return mapping


def load_category_map(artifact_path: Path | str) -> dict[str, str]:
    """Read a harvest artifact and reduce it to a category map.

    Args:
        artifact_path: Path to category_suggestions.json.

    Returns:
        Mapping of lower-cased package name to category name.

    Raises:
        OSError: If the artifact cannot be read.
        ValueError: If the artifact is not valid JSON or has no package list.
    """
    data = json.loads(Path(artifact_path).read_text(encoding="utf-8"))
    if not isinstance(data, dict) or not isinstance(data.get("packages"), list):
        raise ValueError(f"Artifact has no 'packages' list: {artifact_path}")
    return build_category_map(data["packages"])


def render_index_module(mapping: Mapping[str, str]) -> str:
    """Render the category map as Python source, sorted by package name."""
    lines = [MODULE_HEADER, "CATEGORY_MAP = MappingProxyType({\n"]
    for name in sorted(mapping):
        lines.append(f"    {name!r}: {mapping[name]!r},\n")
    lines.append("})\n")
    return "".join(lines)


def write_index_module(
    mapping: Mapping[str, str],
    path: Path | str = DEFAULT_INDEX_MODULE_PATH,
) -> Path:
    """Write the compiled category module, replacing any previous one.

    Args:
        mapping: Lower-cased package name -> category.
        path: Destination module path.

    Returns:
        Path to the written module.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    source = render_index_module(mapping)

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(source)
        os.replace(tmp_name, path)
    except OSError:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.info(f"Wrote compiled category index: {path} ({len(mapping)} packages)")
    return path
