"""Output formatters for users, validation errors and status messages."""

import json
from typing import Any

import yaml
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from usermgr_cli.models.user import DRAFT_FIELDS, FIELD_MESSAGES
from usermgr_cli.utils.ui.console import get_console

console = get_console()

_FIELD_LABELS = {
    "name": "Full Name",
    "email": "Email",
    "password": "Password",
    "birthday": "Birthday",
    "img_url": "Avatar",
}


def format_users(users: list[dict[str, Any]], output_format: str = "pretty") -> None:
    """Render a list of user dicts in the requested format."""
    if output_format == "json":
        print(json.dumps(users, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.dump(users, default_flow_style=False, sort_keys=False))
    elif output_format == "table":
        format_users_table(users)
    else:
        format_users_pretty(users)


def format_users_table(users: list[dict[str, Any]]) -> None:
    """Format users as a single table."""
    if not users:
        console.print("[dim]No users yet[/dim]")
        return

    table = Table(show_header=True, header_style="bold magenta", title="Users")
    table.add_column("ID", style="cyan", justify="right")
    for name in DRAFT_FIELDS:
        table.add_column(_FIELD_LABELS[name])

    for user in users:
        table.add_row(
            str(user.get("id", "")),
            *(str(user.get(name) or "") for name in DRAFT_FIELDS),
        )
    console.print(table)


def format_users_pretty(users: list[dict[str, Any]]) -> None:
    """Format each user as a card, the way the list below the form shows them."""
    console.print("[bold]Users[/bold]")
    if not users:
        console.print("[dim]No users yet[/dim]")
        return

    for user in users:
        body = Text()
        for name in ("name", "email", "password", "birthday"):
            body.append(f"{_FIELD_LABELS[name]}: ", style="bold")
            body.append(f"{user.get(name, '')}\n")
        if user.get("img_url"):
            body.append("Avatar: ", style="bold")
            body.append(str(user["img_url"]), style="blue underline")
        body.rstrip()
        console.print(Panel(body, title=f"#{user.get('id')}", expand=False))


def format_avatars(options: list[str]) -> None:
    """List the avatar catalogue with the index used to pick one."""
    table = Table(show_header=True, header_style="bold magenta", title="Avatars")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("URL")
    for index, url in enumerate(options, start=1):
        table.add_row(str(index), url)
    console.print(table)


def format_validation_errors(errors: dict[str, str]) -> None:
    """Show one message per invalid field, in form order."""
    ordered = [name for name in DRAFT_FIELDS if name in errors]
    ordered += [name for name in errors if name not in ordered]
    for name in ordered:
        label = _FIELD_LABELS.get(name, name)
        message = errors[name] or FIELD_MESSAGES.get(name, "Invalid value")
        console.print(f"[red]{label}:[/red] {message}")


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
