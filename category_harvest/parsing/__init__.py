"""Template parsing: field extraction and record building."""

from category_harvest.parsing.record_builder import harvest_packages, parse_template
from category_harvest.parsing.template_parser import (
    collect_dependency_fields,
    extract_assignment,
    parse_list,
    sanitize_token,
)

__all__ = [
    "collect_dependency_fields",
    "extract_assignment",
    "harvest_packages",
    "parse_list",
    "parse_template",
    "sanitize_token",
]
