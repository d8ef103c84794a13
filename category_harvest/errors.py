"""Fatal error types for the harvest run.

Per-template problems are never raised; they are logged and the template
is skipped. Everything here aborts the whole run.
"""


class HarvestError(Exception):
    """Base class for errors that abort a harvest run."""


class SourceTreeError(HarvestError):
    """Raised when the package template tree is missing."""


class OverrideConfigError(HarvestError):
    """Raised when the override file cannot be read, parsed or validated."""


class OutputWriteError(HarvestError):
    """Raised when the output artifact cannot be written."""
