"""Parser for the ``key:"value"`` annotation micro-language."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Mapping

from .errors import TagSyntaxError


@dataclass(frozen=True)
class TagKeys:
    """Tag keys recognised on command and parameter fields."""

    command: str = "awsAPI"
    api: str = "awsAPI"
    action: str = "action"
    entity: str = "entity"
    call: str = "awsCall"
    input: str = "awsInput"
    output: str = "awsOutput"
    dry_run: str = "awsDryRun"
    param: str = "templateName"
    required: str = "required"
    aws_field: str = "awsName"

    def __post_init__(self) -> None:
        for item in fields(self):
            key = getattr(self, item.name)
            if not key or " " in key or ":" in key:
                raise ValueError(f"Tag key for '{item.name}' must be a non-empty word, got '{key}'")

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, str]) -> "TagKeys":
        """Return default keys with the given roles renamed."""
        known = {item.name for item in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown tag roles: {', '.join(unknown)}")
        return cls(**{role: str(key) for role, key in overrides.items()})


def parse_tags(raw: str) -> Dict[str, str]:
    """Parse a delimited annotation string into a key to value mapping.

    The first and last characters of ``raw`` are the delimiters and are
    dropped. The remainder is split on single spaces into ``key:"value"``
    tokens; tokens without a colon are skipped and the last occurrence of a
    key wins.

    Raises:
        TagSyntaxError: if a value is not wrapped in double quotes.
    """
    tags: Dict[str, str] = {}
    for token in raw[1:-1].split(" "):
        key, sep, value = token.partition(":")
        if not sep:
            continue
        if len(value) < 2 or value[0] != '"' or value[-1] != '"':
            raise TagSyntaxError(f"malformed tag: '{key}':'{value}'")
        tags[key] = value[1:-1]
    return tags


__all__ = ["TagKeys", "parse_tags"]
