"""Tests for cmdgen.extract."""

from __future__ import annotations

import pytest

from cmdgen.extract import extract_command, extract_param
from cmdgen.models import CommandMetadata, DryRunMode, ParamMetadata, RunMode
from cmdgen.tags import TagKeys


def test_extract_command_reads_all_fields() -> None:
    command = extract_command(
        {
            "awsAPI": "ec2",
            "action": "create",
            "entity": "vpc",
            "awsCall": "CreateVpc",
            "awsInput": "ec2.CreateVpcInput",
            "awsOutput": "ec2.CreateVpcOutput",
        }
    )
    assert command == CommandMetadata(
        action="create",
        entity="vpc",
        api="ec2",
        call="CreateVpc",
        input="ec2.CreateVpcInput",
        output="ec2.CreateVpcOutput",
    )
    assert command.run_mode is RunMode.DIRECT


def test_extract_command_leaves_missing_fields_empty() -> None:
    command = extract_command({"awsAPI": "s3", "action": "create", "entity": "bucket"})
    assert command.call == ""
    assert command.input == ""
    assert command.output == ""
    assert command.run_mode is RunMode.MANUAL


@pytest.mark.parametrize(
    ("tags", "has_dry_run", "gen_dry_run", "mode"),
    [
        ({}, False, False, DryRunMode.NONE),
        ({"awsDryRun": ""}, True, True, DryRunMode.GENERATED),
        ({"awsDryRun": "true"}, True, True, DryRunMode.GENERATED),
        ({"awsDryRun": "manual"}, True, False, DryRunMode.MANUAL),
        ({"awsDryRun": "MANUAL"}, True, False, DryRunMode.MANUAL),
    ],
)
def test_extract_command_dry_run_marker(tags, has_dry_run, gen_dry_run, mode) -> None:
    command = extract_command({"awsAPI": "ec2", **tags})
    assert command.has_dry_run is has_dry_run
    assert command.gen_dry_run is gen_dry_run
    assert command.dry_run_mode is mode


def test_extract_command_api_falls_back_to_command_marker() -> None:
    keys = TagKeys(command="command", api="api")
    assert extract_command({"command": "ec2"}, keys).api == "ec2"
    assert extract_command({"command": "ec2", "api": "iam"}, keys).api == "iam"


def test_extract_param_reads_fields() -> None:
    param = extract_param({"templateName": "cidr", "required": "", "awsName": "CidrBlock"})
    assert param == ParamMetadata(name="cidr", aws_field="CidrBlock", is_required=True)


def test_extract_param_required_ignores_value() -> None:
    assert extract_param({"templateName": "a", "required": "false"}).is_required is True
    assert extract_param({"templateName": "a"}).is_required is False
