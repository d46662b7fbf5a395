"""Builds metadata records from parsed tag mappings."""

from __future__ import annotations

from typing import Mapping

from .models import CommandMetadata, ParamMetadata
from .tags import TagKeys

_MANUAL = "manual"


def extract_command(tags: Mapping[str, str], keys: TagKeys | None = None) -> CommandMetadata:
    """Return command metadata for the tags of a command marker field."""
    keys = keys or TagKeys()
    command = CommandMetadata(
        action=tags.get(keys.action, ""),
        entity=tags.get(keys.entity, ""),
        api=tags.get(keys.api, tags.get(keys.command, "")),
        call=tags.get(keys.call, ""),
        input=tags.get(keys.input, ""),
        output=tags.get(keys.output, ""),
    )
    if keys.dry_run in tags:
        command.has_dry_run = True
        command.gen_dry_run = tags[keys.dry_run].lower() != _MANUAL
    return command


def extract_param(tags: Mapping[str, str], keys: TagKeys | None = None) -> ParamMetadata:
    """Return parameter metadata for the tags of a parameter field."""
    keys = keys or TagKeys()
    return ParamMetadata(
        name=tags.get(keys.param, ""),
        aws_field=tags.get(keys.aws_field, ""),
        is_required=keys.required in tags,
    )


__all__ = ["extract_command", "extract_param"]
