"""Tests for the config commands."""

import json

from typer.testing import CliRunner

from usermgr_cli.main import app
from usermgr_cli.services.config_service import get_config_service

runner = CliRunner()


def test_show_json():
    result = runner.invoke(app, ["config", "show", "-o", "json"])

    assert result.exit_code == 0
    payload = result.stdout[: result.stdout.rindex("}") + 1]
    assert json.loads(payload)["api"]["endpoint"] == "http://localhost:4000/users"


def test_get_value():
    result = runner.invoke(app, ["config", "get", "output.format"])

    assert result.exit_code == 0
    assert "pretty" in result.stdout


def test_get_unknown_key():
    result = runner.invoke(app, ["config", "get", "api.nope"])

    assert result.exit_code == 5


def test_set_value():
    result = runner.invoke(app, ["config", "set", "api.endpoint", "http://remote:9000/users"])

    assert result.exit_code == 0
    assert get_config_service().config.api.endpoint == "http://remote:9000/users"


def test_set_invalid_value():
    result = runner.invoke(app, ["config", "set", "output.format", "xml"])

    assert result.exit_code == 2


def test_set_endpoint_with_bad_port():
    result = runner.invoke(app, ["config", "set", "api.endpoint", "http://localhost:99999/users"])

    assert result.exit_code == 2
    assert get_config_service().config.api.endpoint == "http://localhost:4000/users"


def test_set_unknown_key():
    result = runner.invoke(app, ["config", "set", "api.token", "secret"])

    assert result.exit_code == 5


def test_reset_with_yes():
    get_config_service().set("output.format", "json")

    result = runner.invoke(app, ["config", "reset", "--yes"])

    assert result.exit_code == 0
    assert get_config_service().config.output.format == "pretty"
