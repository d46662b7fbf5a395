"""Exception hierarchy for generation runs.

Every failure is fatal: the generator either writes all of its outputs or
none of them.
"""

from __future__ import annotations


class GenerationError(RuntimeError):
    """Base class for errors that abort a generation run."""


class ConfigError(GenerationError):
    """Raised when the configuration file cannot be parsed."""


class TagSyntaxError(GenerationError):
    """Raised when an annotation string violates the tag grammar."""


class ScanError(GenerationError):
    """Raised when the source directory cannot be parsed."""


class DuplicateCommandError(ScanError):
    """Raised when two annotated types claim the same name or identifier."""


class RenderError(GenerationError):
    """Raised when a template fails to load or render against the metadata."""


class OutputError(GenerationError):
    """Raised when an existing output file cannot be read back for comparison."""


__all__ = [
    "ConfigError",
    "DuplicateCommandError",
    "GenerationError",
    "OutputError",
    "RenderError",
    "ScanError",
    "TagSyntaxError",
]
