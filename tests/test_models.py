"""Tests for cmdgen.models."""

from __future__ import annotations

from cmdgen.models import CommandMetadata, DryRunMode, ParamMetadata, RunMode


def test_command_identifier_joins_action_and_entity() -> None:
    assert CommandMetadata(action="create", entity="vpc").identifier == "createvpc"


def test_command_modes_cover_every_combination() -> None:
    assert CommandMetadata(call="CreateVpc").run_mode is RunMode.DIRECT
    assert CommandMetadata().run_mode is RunMode.MANUAL
    assert CommandMetadata().dry_run_mode is DryRunMode.NONE
    assert CommandMetadata(has_dry_run=True, gen_dry_run=True).dry_run_mode is DryRunMode.GENERATED
    assert CommandMetadata(has_dry_run=True).dry_run_mode is DryRunMode.MANUAL


def test_command_splits_required_and_extra_params() -> None:
    command = CommandMetadata(
        params=[
            ParamMetadata(name="acl"),
            ParamMetadata(name="name", is_required=True),
            ParamMetadata(name="region"),
        ]
    )
    assert command.required_params == ["name"]
    assert command.extra_params == ["acl", "region"]
