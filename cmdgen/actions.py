"""Action to entity index over the command collection."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Mapping

from .models import CommandMetadata


def build_supported_actions(commands: Mapping[str, CommandMetadata]) -> Dict[str, List[str]]:
    """Group entity names by action, each list sorted.

    Entities are not de-duplicated: two commands sharing an identifier both
    contribute an entry.
    """
    grouped: Dict[str, List[str]] = defaultdict(list)
    for command in commands.values():
        grouped[command.action].append(command.entity)
    return {action: sorted(entities) for action, entities in sorted(grouped.items())}


__all__ = ["build_supported_actions"]
