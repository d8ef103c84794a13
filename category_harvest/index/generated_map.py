"""Compiled package -> category map.

Generated by `category-harvest build-index`; do not edit by hand.
"""

from types import MappingProxyType

CATEGORY_MAP = MappingProxyType({
})
