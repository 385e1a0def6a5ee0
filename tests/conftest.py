"""Shared test fixtures and configuration.

Keeps config and log files inside a temporary directory and provides mocked
user API clients, healthy and unreachable.
"""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from usermgr_cli.api.client import APIClient
from usermgr_cli.api.users import UsersAPI
from usermgr_cli.services.user_service import UserService

# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point config and log directories at *tmp_path* for every test."""
    import usermgr_cli.utils.logger as logger_mod
    from usermgr_cli.services.config_service import get_config_service

    get_config_service.cache_clear()
    logger_mod._logger = None
    logging.getLogger("usermgr_cli").handlers.clear()

    with (
        patch(
            "usermgr_cli.services.config_service.user_config_dir",
            return_value=str(tmp_path / "config"),
        ),
        patch(
            "usermgr_cli.utils.logger.user_log_dir",
            return_value=str(tmp_path / "logs"),
        ),
    ):
        yield tmp_path

    get_config_service.cache_clear()
    for handler in logging.getLogger("usermgr_cli").handlers:
        handler.close()
    logging.getLogger("usermgr_cli").handlers.clear()
    logger_mod._logger = None


# ---------------------------------------------------------------------------
# Users API doubles
# ---------------------------------------------------------------------------


def make_users_api(remote_users: list[dict] | None = None) -> MagicMock:
    """Build a UsersAPI mock whose writes echo the payload back."""
    api = MagicMock(spec=UsersAPI)
    api.client = MagicMock(spec=APIClient)
    api.client.close = AsyncMock()
    api.list_users = AsyncMock(return_value=list(remote_users or []))
    api.create_user = AsyncMock(side_effect=lambda user: dict(user))
    api.update_user = AsyncMock(side_effect=lambda user_id, user: dict(user))
    api.delete_user = AsyncMock(return_value=None)
    return api


def make_offline_api() -> MagicMock:
    """Build a UsersAPI mock where every call fails to connect."""
    api = make_users_api()
    error = httpx.ConnectError("Connection refused")
    for name in ("list_users", "create_user", "update_user", "delete_user"):
        getattr(api, name).side_effect = error
    return api


@pytest.fixture
def users_api():
    """A reachable API with an empty collection."""
    return make_users_api()


@pytest.fixture
def offline_api():
    """An API that cannot be reached."""
    return make_offline_api()


@pytest.fixture
def offline_service(offline_api):
    """A UserService whose remote calls all fail."""
    return UserService(offline_api)


@pytest.fixture
def users_api_factory():
    """Factory for a reachable API preloaded with *remote_users*."""
    return make_users_api
