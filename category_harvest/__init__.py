"""Rule-based package category harvester."""

__version__ = "0.1.0"
