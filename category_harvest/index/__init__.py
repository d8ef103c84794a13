"""Static category index: build-time compilation and runtime lookups."""

from category_harvest.index.category_index import CategoryIndex
from category_harvest.index.index_builder import (
    build_category_map,
    load_category_map,
    render_index_module,
    write_index_module,
)
from category_harvest.index.service import ICON_RESOURCES, CategoryService

__all__ = [
    # Build time
    "build_category_map",
    "load_category_map",
    "render_index_module",
    "write_index_module",
    # Runtime
    "CategoryIndex",
    "CategoryService",
    "ICON_RESOURCES",
]
