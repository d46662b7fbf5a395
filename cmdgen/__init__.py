"""Generates command wrappers from annotated class definitions."""

from .actions import build_supported_actions
from .errors import (
    ConfigError,
    DuplicateCommandError,
    GenerationError,
    OutputError,
    RenderError,
    ScanError,
    TagSyntaxError,
)
from .extract import extract_command, extract_param
from .generator import GeneratedFile, GenerationResult, Generator
from .models import CommandMetadata, DryRunMode, ParamMetadata, RunMode
from .scanner import SpecScanner
from .tags import TagKeys, parse_tags

__all__ = [
    "CommandMetadata",
    "ConfigError",
    "DryRunMode",
    "DuplicateCommandError",
    "GeneratedFile",
    "GenerationError",
    "GenerationResult",
    "Generator",
    "OutputError",
    "ParamMetadata",
    "RenderError",
    "RunMode",
    "ScanError",
    "SpecScanner",
    "TagKeys",
    "TagSyntaxError",
    "build_supported_actions",
    "extract_command",
    "extract_param",
    "parse_tags",
]
