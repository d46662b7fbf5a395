"""Core data models shared across cmdgen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class RunMode(str, Enum):
    """How a command executes: a single generated client call or hand-written logic."""

    DIRECT = "direct"
    MANUAL = "manual"


class DryRunMode(str, Enum):
    """How a command dry-runs."""

    NONE = "none"
    GENERATED = "generated"
    MANUAL = "manual"


@dataclass
class ParamMetadata:
    """One annotated parameter field of a command type."""

    name: str = ""
    aws_field: str = ""
    is_required: bool = False


@dataclass
class CommandMetadata:
    """Metadata mined from one annotated command type."""

    action: str = ""
    entity: str = ""
    api: str = ""
    call: str = ""
    input: str = ""
    output: str = ""
    params: List[ParamMetadata] = field(default_factory=list)
    has_dry_run: bool = False
    gen_dry_run: bool = False
    module: str = ""
    lineno: int = 0

    @property
    def identifier(self) -> str:
        """Public identifier of the command, e.g. ``createvpc``."""
        return f"{self.action}{self.entity}"

    @property
    def run_mode(self) -> RunMode:
        return RunMode.DIRECT if self.call else RunMode.MANUAL

    @property
    def dry_run_mode(self) -> DryRunMode:
        if not self.has_dry_run:
            return DryRunMode.NONE
        if self.gen_dry_run:
            return DryRunMode.GENERATED
        return DryRunMode.MANUAL

    @property
    def required_params(self) -> List[str]:
        return [param.name for param in self.params if param.is_required]

    @property
    def extra_params(self) -> List[str]:
        return [param.name for param in self.params if not param.is_required]
