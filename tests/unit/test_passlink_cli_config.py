"""CLI tests for the config commands."""

import json

import pytest
from typer.testing import CliRunner

from passlink.api.config.PasslinkConfig import PasslinkConfig
from passlink.cli._create_app import _create_app

pytestmark = pytest.mark.cli

runner = CliRunner()


def test_config_show_sections():
    result = runner.invoke(_create_app(), ["-d", "json", "config", "show"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["content"] == {"sections": ["link", "log"]}


def test_config_set_and_show():
    result = runner.invoke(_create_app(), ["config", "set", "link.separator", " | "])
    assert result.exit_code == 0
    assert PasslinkConfig.load().link.separator == " | "

    result = runner.invoke(_create_app(), ["-d", "json", "config", "show", "link"])
    assert json.loads(result.stdout)["content"]["separator"] == " | "


def test_config_set_delete():
    runner.invoke(_create_app(), ["config", "set", "link.include_catalog", "false"])
    assert PasslinkConfig.load().link.include_catalog is False

    result = runner.invoke(_create_app(), ["config", "set", "link.include_catalog", "--delete"])
    assert result.exit_code == 0
    assert PasslinkConfig.load().link.include_catalog is True


def test_config_set_invalid_exits_nonzero():
    result = runner.invoke(_create_app(), ["config", "set", "log.level", "LOUD"])
    assert result.exit_code == 1


def test_invalid_display_format():
    result = runner.invoke(_create_app(), ["-d", "xml", "config", "show"])
    assert result.exit_code == 1
    assert "--display must be 'json' or 'yaml'" in result.stderr


def test_config_version():
    result = runner.invoke(_create_app(), ["-d", "json", "config", "version"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["version"]
