"""Tests for output formatters."""

import json

from usermgr_cli.utils.ui.formatters import (
    format_users,
    format_validation_errors,
)

USERS = [
    {
        "id": 1,
        "name": "fabian franco",
        "email": "fabian@example.com",
        "password": "123456",
        "birthday": "1990-01-01",
        "img_url": None,
    }
]


def test_empty_list_message(capsys):
    format_users([], "pretty")

    assert "No users yet" in capsys.readouterr().out


def test_empty_table_message(capsys):
    format_users([], "table")

    assert "No users yet" in capsys.readouterr().out


def test_pretty_shows_plain_password(capsys):
    format_users(USERS, "pretty")

    out = capsys.readouterr().out
    assert "Password: 123456" in out
    assert "Avatar" not in out


def test_json_output(capsys):
    format_users(USERS, "json")

    assert json.loads(capsys.readouterr().out) == USERS


def test_unknown_format_falls_back_to_pretty(capsys):
    format_users(USERS, "wide")

    assert "fabian franco" in capsys.readouterr().out


def test_validation_errors_in_form_order(capsys):
    format_validation_errors(
        {"birthday": "Invalid date format", "name": "Name must be at least 2 characters long"}
    )

    out = capsys.readouterr().out
    assert out.index("Full Name") < out.index("Birthday")
    assert "Invalid date format" in out
