"""File-based storage for the harvest artifact.

Directory structure:
    data/
    ├── category_overrides.toml                 # Manual category overrides
    └── generated/category_suggestions.json     # Harvest artifact
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from category_harvest.consts import DEFAULT_DATA_DIR
from category_harvest.errors import OutputWriteError
from category_harvest.models.model_storage import HarvestOutput

logger = logging.getLogger(__name__)

OUTPUT_FILENAME = "category_suggestions.json"


class FileManager:
    """File-based storage manager for harvest artifacts.

    Writes are all-or-nothing: the artifact is written to a temporary file
    next to its destination and renamed into place.
    """

    def __init__(self, data_dir: Path | str = DEFAULT_DATA_DIR):
        """Initialize FileManager with data directory.

        Args:
            data_dir: Root directory for data files.
        """
        self.data_dir = Path(data_dir)
        self._generated_dir = self.data_dir / "generated"

    @property
    def default_output_path(self) -> Path:
        return self._generated_dir / OUTPUT_FILENAME

    def _ensure_dirs(self, *dirs: Path) -> None:
        """Create directories if they don't exist."""
        for d in dirs:
            try:
                d.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise OutputWriteError(f"Failed to create output directory {d}: {e}") from e

    @staticmethod
    def serialize(output: HarvestOutput) -> str:
        """Render the artifact as pretty JSON.

        Override scores are infinite and are written as the ``Infinity``
        token, which ``json.loads`` reads back as ``float("inf")``.
        """
        return json.dumps(output.model_dump(), indent=2, ensure_ascii=False)

    def save_output(self, output: HarvestOutput, path: Path | str | None = None) -> Path:
        """Persist the harvest artifact.

        Args:
            output: Artifact to write.
            path: Destination. Defaults to data/generated/category_suggestions.json.

        Returns:
            Path to the written file.

        Raises:
            OutputWriteError: If the directory cannot be created or the file
                cannot be written. No partial file is left behind.
        """
        path = Path(path) if path is not None else self.default_output_path
        self._ensure_dirs(path.parent)

        content = self.serialize(output)
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise OutputWriteError(f"Failed to write {path}: {e}") from e

        logger.info(f"Saved harvest artifact: {path} ({output.metadata.total_packages} packages)")
        return path

    def load_output(self, path: Path | str | None = None) -> HarvestOutput | None:
        """Load a harvest artifact.

        Args:
            path: Artifact path. Defaults to data/generated/category_suggestions.json.

        Returns:
            HarvestOutput if found and valid, None otherwise.
        """
        path = Path(path) if path is not None else self.default_output_path
        if not path.exists():
            logger.warning(f"Harvest artifact not found: {path}")
            return None

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return HarvestOutput.model_validate(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Failed to load harvest artifact {path}: {e}")
            return None
