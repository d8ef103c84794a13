"""Runtime category lookup service.

Every query is total: unknown packages resolve to the fallback category
and unknown categories to the fallback icon. Nothing here raises.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Final

from category_harvest.consts import FALLBACK_CATEGORY, FALLBACK_ICON, ICON_RESOURCE_PREFIX
from category_harvest.index.category_index import CategoryIndex

# Display icon per category (fallback included)
ICON_RESOURCES: Final[MappingProxyType[str, str]] = MappingProxyType({
    "Books": f"{ICON_RESOURCE_PREFIX}/books.svg",
    "Browsers": f"{ICON_RESOURCE_PREFIX}/browsers.svg",
    "Chat": f"{ICON_RESOURCE_PREFIX}/chat.svg",
    "Development": f"{ICON_RESOURCE_PREFIX}/development.svg",
    "Education": f"{ICON_RESOURCE_PREFIX}/education.svg",
    "E-mail": f"{ICON_RESOURCE_PREFIX}/email.svg",
    "Finance": f"{ICON_RESOURCE_PREFIX}/finance.svg",
    "Gaming": f"{ICON_RESOURCE_PREFIX}/games.svg",
    "Graphics": f"{ICON_RESOURCE_PREFIX}/graphics.svg",
    "Kernels": f"{ICON_RESOURCE_PREFIX}/kernels.svg",
    "Music": f"{ICON_RESOURCE_PREFIX}/music.svg",
    "News": f"{ICON_RESOURCE_PREFIX}/news.svg",
    "Office": f"{ICON_RESOURCE_PREFIX}/office.svg",
    "Other": FALLBACK_ICON,
    "Photos": f"{ICON_RESOURCE_PREFIX}/photo.svg",
    "Productivity": f"{ICON_RESOURCE_PREFIX}/productivity.svg",
    "System": f"{ICON_RESOURCE_PREFIX}/system.svg",
    "Tools and Utilities": f"{ICON_RESOURCE_PREFIX}/tools.svg",
    "Video": f"{ICON_RESOURCE_PREFIX}/video.svg",
})


class CategoryService:
    """Package category and icon lookups backed by a CategoryIndex."""

    def __init__(self, index: CategoryIndex | None = None):
        self.index = index if index is not None else CategoryIndex()

    @classmethod
    def default(cls) -> "CategoryService":
        """Service backed by the compiled category table."""
        return cls(CategoryIndex.from_compiled())

    @classmethod
    def from_artifact(cls, artifact_path: Path | str) -> "CategoryService":
        """Service backed by a harvest artifact loaded at startup."""
        return cls(CategoryIndex.from_artifact(artifact_path))

    def category_for(self, pkgname: str) -> str:
        """Category of a package, or the fallback category if unknown."""
        return self.index.get(pkgname) or FALLBACK_CATEGORY

    def icon_for_category(self, category: str) -> str:
        """Icon resource for a category, or the fallback icon if unknown."""
        return ICON_RESOURCES.get(category, FALLBACK_ICON)

    def icon_for_package(self, pkgname: str) -> str:
        """Icon resource for a package's category."""
        return self.icon_for_category(self.category_for(pkgname))
