"""Build PackageRecords from a tree of package templates.

Harvesting is best effort: a template that cannot be read or has no
``pkgname`` is skipped, since the upstream tree is large and occasionally
malformed. Only a missing tree root is fatal.
"""

import logging
import os
from pathlib import Path

from category_harvest.consts import TEMPLATE_FILENAME
from category_harvest.errors import SourceTreeError
from category_harvest.models.model_package import PackageRecord
from category_harvest.parsing.template_parser import (
    collect_dependency_fields,
    extract_assignment,
    parse_list,
)

logger = logging.getLogger(__name__)


def _optional_field(raw: str, key: str) -> str | None:
    value = extract_assignment(raw, key)
    if value is None:
        return None
    value = value.strip()
    return value or None


def relative_template_dir(path: Path, tree_root: Path) -> str:
    """Slash-separated directory of ``path`` relative to ``tree_root``."""
    try:
        rel_dir = path.relative_to(tree_root).parent
    except ValueError:
        return ""
    return "" if rel_dir == Path(".") else rel_dir.as_posix()


def parse_template_text(raw: str, template_path: str = "") -> PackageRecord | None:
    """Build a record from template text.

    Args:
        raw: Template contents.
        template_path: Directory of the template relative to the tree root.

    Returns:
        PackageRecord, or None if the template assigns no pkgname.
    """
    pkgname = _optional_field(raw, "pkgname")
    if pkgname is None:
        return None

    categories = extract_assignment(raw, "categories")
    return PackageRecord(
        pkgname=pkgname,
        short_desc=_optional_field(raw, "short_desc"),
        homepage=_optional_field(raw, "homepage"),
        maintainer=_optional_field(raw, "maintainer"),
        template_path=template_path,
        template_categories=tuple(parse_list(categories)) if categories else (),
        depends=tuple(collect_dependency_fields(raw)),
    )


def parse_template(path: Path, tree_root: Path) -> PackageRecord | None:
    """Parse one template file.

    Args:
        path: Path to the template file.
        tree_root: Root of the template tree (e.g. srcpkgs/).

    Returns:
        PackageRecord, or None if the file is unreadable or has no pkgname.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Skipping unreadable template {path}: {e}")
        return None

    record = parse_template_text(raw, relative_template_dir(path, tree_root))
    if record is None:
        logger.debug(f"Skipping template without pkgname: {path}")
    return record


def iter_template_paths(tree_root: Path):
    """Yield every template file under ``tree_root`` in sorted order.

    Symlinked package directories (subpackage aliases) and symlinked
    template files are skipped.
    """
    for dirpath, dirnames, filenames in os.walk(tree_root):
        dirnames.sort()
        if TEMPLATE_FILENAME in filenames:
            candidate = Path(dirpath) / TEMPLATE_FILENAME
            if candidate.is_file() and not candidate.is_symlink():
                yield candidate


def harvest_packages(tree_root: Path) -> list[PackageRecord]:
    """Parse every template in the tree.

    Args:
        tree_root: Root of the template tree.

    Returns:
        One record per parsable template.

    Raises:
        SourceTreeError: If ``tree_root`` does not exist or is not a directory.
    """
    tree_root = Path(tree_root)
    if not tree_root.is_dir():
        raise SourceTreeError(f"Package template tree missing at {tree_root}")

    records: list[PackageRecord] = []
    skipped = 0
    for path in iter_template_paths(tree_root):
        record = parse_template(path, tree_root)
        if record is None:
            skipped += 1
            continue
        records.append(record)

    logger.info(f"Harvested {len(records)} templates from {tree_root} ({skipped} skipped)")
    return records
