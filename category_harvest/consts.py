from pathlib import Path
from typing import Final

PROJECT_ROOT: Final[Path] = Path(__file__).parent.parent.resolve()
DEFAULT_DATA_DIR: Final[Path] = PROJECT_ROOT / "data"

# Package template tree (one `template` file per package directory)
DEFAULT_SOURCE_TREE: Final[Path] = PROJECT_ROOT / "vendor" / "void-packages" / "srcpkgs"
TEMPLATE_FILENAME: Final[str] = "template"

# Manual overrides and generated artifacts
DEFAULT_OVERRIDES_PATH: Final[Path] = DEFAULT_DATA_DIR / "category_overrides.toml"
DEFAULT_OUTPUT_PATH: Final[Path] = DEFAULT_DATA_DIR / "generated" / "category_suggestions.json"
DEFAULT_INDEX_MODULE_PATH: Final[Path] = Path(__file__).parent / "index" / "generated_map.py"

# Template fields folded into the single dependency list
DEPENDENCY_FIELDS: Final[tuple[str, ...]] = (
    "depends",
    "run_depends",
    "hostmakedepends",
    "makedepends",
    "checkdepends",
    "subpackages",
)

# Ranking
MAX_ALTERNATIVES: Final[int] = 4
FALLBACK_CATEGORY: Final[str] = "Other"
NO_MATCH_REASON: Final[str] = "no heuristic match"

# Display resources
ICON_RESOURCE_PREFIX: Final[str] = "/tech/geektoshi/Nebula/icons"
FALLBACK_ICON: Final[str] = f"{ICON_RESOURCE_PREFIX}/voidlinux.png"
