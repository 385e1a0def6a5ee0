"""Unit tests for services/config_service.py.

Uses a real ConfigService pointed at a tmp_path directory (see conftest).
"""

from __future__ import annotations

import json

import pytest

from usermgr_cli.constants import DEFAULT_ENDPOINT
from usermgr_cli.models.config_models import AppConfig
from usermgr_cli.services.config_service import ConfigService, get_config_service


@pytest.fixture()
def svc() -> ConfigService:
    """ConfigService backed by the temporary config directory."""
    service = ConfigService()
    _ = service.config
    return service


def test_first_load_writes_defaults(svc):
    assert svc.config == AppConfig()
    assert svc.config_path.exists()
    data = json.loads(svc.config_path.read_text())
    assert data["api"]["endpoint"] == DEFAULT_ENDPOINT
    assert data["output"]["format"] == "pretty"


def test_load_existing_file(svc):
    svc.config_path.write_text(
        json.dumps({"api": {"endpoint": "http://remote:8080/users"}}), encoding="utf-8"
    )

    fresh = ConfigService()

    assert fresh.config.api.endpoint == "http://remote:8080/users"
    assert fresh.config.output.format == "pretty"


def test_corrupt_file_raises(svc):
    svc.config_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(RuntimeError, match="Failed to load config"):
        ConfigService().load_config()


def test_get_dotted_key(svc):
    assert svc.get("api.endpoint") == DEFAULT_ENDPOINT
    assert svc.get("output.format") == "pretty"


@pytest.mark.parametrize("key", ["api.missing", "nope", "api.endpoint.deeper"])
def test_get_unknown_key_returns_none(svc, key):
    assert svc.get(key) is None


def test_set_persists(svc):
    svc.set("output.format", "json")

    assert svc.config.output.format == "json"
    assert ConfigService().config.output.format == "json"


def test_set_endpoint_is_normalized(svc):
    svc.set("api.endpoint", " http://localhost:5000/people/ ")

    assert svc.get("api.endpoint") == "http://localhost:5000/people"


def test_set_unknown_key_raises(svc):
    with pytest.raises(KeyError):
        svc.set("api.token", "abc")


def test_set_section_raises(svc):
    with pytest.raises(KeyError):
        svc.set("api", "x")


def test_set_invalid_value_raises(svc):
    with pytest.raises(ValueError, match="output.format"):
        svc.set("output.format", "xml")

    assert svc.config.output.format == "pretty"


@pytest.mark.parametrize(
    "endpoint",
    ["http://localhost:99999/users", "localhost:4000/users", "ftp://host/users", "not a url"],
)
def test_set_unusable_endpoint_raises(svc, endpoint):
    with pytest.raises(ValueError, match="api.endpoint"):
        svc.set("api.endpoint", endpoint)

    assert svc.get("api.endpoint") == "http://localhost:4000/users"


def test_reset_config(svc):
    svc.set("output.format", "yaml")

    svc.reset_config()

    assert svc.config == AppConfig()
    assert ConfigService().config.output.format == "pretty"


def test_get_config_service_is_cached():
    assert get_config_service() is get_config_service()
