"""User commands - list, create, update and delete users.

Each command is one session: the user list is loaded from the API, the
change is applied, and the resulting list is shown.
"""

import typer

from usermgr_cli.constants import AVATAR_OPTIONS
from usermgr_cli.services.config_service import get_config_service
from usermgr_cli.services.user_service import UserService, get_user_service
from usermgr_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from usermgr_cli.utils.ui.formatters import (
    format_avatars,
    format_info,
    format_success,
    format_users,
    format_validation_errors,
)

from .decorators import AppError, command_wrapper

OUTPUT_HELP = "Output format: pretty, table, json or yaml"
AVATAR_HELP = "Avatar number from 'usermgr avatars', or an image URL"


def resolve_avatar(value: str) -> str:
    """Turn a catalogue number into its URL; anything else is used as-is."""
    if not value.isdigit():
        return value
    index = int(value)
    if not 1 <= index <= len(AVATAR_OPTIONS):
        raise AppError(
            f"Avatar number must be between 1 and {len(AVATAR_OPTIONS)}",
            exit_code=ERROR_INVALID_ARGS,
        )
    return AVATAR_OPTIONS[index - 1]


def _render(service: UserService, output: str | None) -> None:
    output_format = output or get_config_service().config.output.format
    format_users([u.model_dump() for u in service.users], output_format)


async def _submit_form(service: UserService) -> None:
    result = await service.submit()
    if not result.valid:
        format_validation_errors(result.errors)
        raise AppError("", exit_code=ERROR_INVALID_ARGS)


@command_wrapper
async def list_users(
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """List all users."""
    service = get_user_service()
    try:
        await service.load()
        _render(service, output)
    finally:
        await service.close()


@command_wrapper
async def create_user(
    name: str = typer.Option(..., "--name", help="Full name"),
    email: str = typer.Option(..., "--email", help="Email address"),
    password: str = typer.Option(..., "--password", help="Password"),
    birthday: str = typer.Option(..., "--birthday", help="Birthday (YYYY-MM-DD)"),
    avatar: str | None = typer.Option(None, "--avatar", help=AVATAR_HELP),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """Create a new user."""
    service = get_user_service()
    try:
        await service.load()
        form = service.form
        form.set_field("name", name)
        form.set_field("email", email)
        form.set_field("password", password)
        form.set_field("birthday", birthday)
        if avatar:
            form.open_avatar_picker()
            form.select_avatar(resolve_avatar(avatar))

        await _submit_form(service)
        format_success(f"User created: {service.users[-1].id}")
        _render(service, output)
    finally:
        await service.close()


@command_wrapper
async def update_user(
    user_id: int = typer.Argument(..., help="User ID"),
    name: str | None = typer.Option(None, "--name", help="Full name"),
    email: str | None = typer.Option(None, "--email", help="Email address"),
    password: str | None = typer.Option(None, "--password", help="Password"),
    birthday: str | None = typer.Option(None, "--birthday", help="Birthday (YYYY-MM-DD)"),
    avatar: str | None = typer.Option(None, "--avatar", help=AVATAR_HELP),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """Update a user. Fields that are not given keep their current value."""
    service = get_user_service()
    try:
        await service.load()
        user = service.get_user(user_id)
        if user is None:
            raise AppError(f"User {user_id} not found", exit_code=ERROR_NOT_FOUND)

        service.begin_edit(user)
        changes = {"name": name, "email": email, "password": password, "birthday": birthday}
        for field_name, value in changes.items():
            if value is not None:
                service.form.set_field(field_name, value)
        if avatar:
            service.form.open_avatar_picker()
            service.form.select_avatar(resolve_avatar(avatar))

        await _submit_form(service)
        format_success(f"User updated: {user_id}")
        _render(service, output)
    finally:
        await service.close()


@command_wrapper
async def delete_user(
    user_id: int = typer.Argument(..., help="User ID"),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """Delete a user."""
    service = get_user_service()
    try:
        await service.load()
        if await service.delete(user_id):
            format_success(f"User deleted: {user_id}")
        else:
            format_info(f"No user with id {user_id}")
        _render(service, output)
    finally:
        await service.close()


@command_wrapper
def list_avatars() -> None:
    """List the avatars that can be picked with --avatar."""
    format_avatars(AVATAR_OPTIONS)
