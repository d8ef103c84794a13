"""Pipeline orchestration for the category harvest.

This module coordinates all steps of the harvest:
1. Load and validate manual overrides
2. Parse every package template in the source tree
3. Classify (overrides first, then weighted heuristics)
4. Assemble and store the artifact

Overrides are validated before any template is read, so a bad override
file aborts the run without doing any classification work.
"""

import logging
from datetime import UTC, datetime
from pathlib import Path

from category_harvest.categorization.assembler import build_output
from category_harvest.categorization.classifier import Classifier
from category_harvest.categorization.overrides import OverrideTable
from category_harvest.consts import (
    DEFAULT_INDEX_MODULE_PATH,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_OVERRIDES_PATH,
    DEFAULT_SOURCE_TREE,
)
from category_harvest.errors import SourceTreeError
from category_harvest.index.index_builder import load_category_map, write_index_module
from category_harvest.models.model_storage import HarvestOutput
from category_harvest.parsing.record_builder import harvest_packages
from category_harvest.storage.file_manager import FileManager

logger = logging.getLogger(__name__)


def run_harvest_pipeline(
    source_tree: Path | str = DEFAULT_SOURCE_TREE,
    overrides_path: Path | str | None = DEFAULT_OVERRIDES_PATH,
    output_path: Path | str = DEFAULT_OUTPUT_PATH,
) -> tuple[HarvestOutput, Path]:
    """Run full harvest: overrides → parse → classify → assemble → store.

    Args:
        source_tree: Root of the package template tree (srcpkgs/).
        overrides_path: Override file. A missing file means no overrides.
        output_path: Destination of the JSON artifact.

    Returns:
        Tuple of (artifact, path it was written to).

    Raises:
        SourceTreeError: If the source tree is missing.
        OverrideConfigError: If the override file is unparsable or invalid.
        OutputWriteError: If the artifact cannot be written.
    """
    source_tree = Path(source_tree)
    output_path = Path(output_path)
    logger.info(f"Starting harvest of {source_tree}")
    start_time = datetime.now(UTC)

    if not source_tree.is_dir():
        raise SourceTreeError(f"Package template tree missing at {source_tree}")

    # Step 1: Overrides
    logger.info("Step 1/4: Loading overrides...")
    overrides = OverrideTable.load(Path(overrides_path) if overrides_path else None)
    classifier = Classifier(overrides=overrides)

    # Step 2: Parse templates
    logger.info("Step 2/4: Parsing package templates...")
    records = harvest_packages(source_tree)

    # Step 3: Classify
    logger.info("Step 3/4: Classifying packages...")
    suggestions, overrides_used = classifier.classify_all(records)

    # Step 4: Assemble and store
    logger.info("Step 4/4: Writing artifact...")
    output = build_output(suggestions, overrides_used)
    file_manager = FileManager(output_path.parent)
    written = file_manager.save_output(output, output_path)

    duration = (datetime.now(UTC) - start_time).total_seconds()
    logger.info(
        f"Harvest complete in {duration:.1f}s: "
        f"{output.metadata.total_packages} packages, "
        f"{output.metadata.overrides_applied} overrides"
    )
    return output, written


def build_static_index(
    artifact_path: Path | str = DEFAULT_OUTPUT_PATH,
    module_path: Path | str = DEFAULT_INDEX_MODULE_PATH,
) -> tuple[int, Path]:
    """Compile the artifact into the generated lookup module.

    Args:
        artifact_path: Harvest artifact to compile.
        module_path: Destination Python module.

    Returns:
        Tuple of (number of packages indexed, module path).
    """
    mapping = load_category_map(artifact_path)
    path = write_index_module(mapping, module_path)
    return len(mapping), path
