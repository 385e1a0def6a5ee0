"""Main entry point for usermgr."""

import typer

from usermgr_cli import __version__
from usermgr_cli.commands import config, users
from usermgr_cli.services.config_service import get_config_service
from usermgr_cli.utils.ui.console import get_console

app = typer.Typer(
    name="usermgr",
    help="Create, edit and delete users in a remote user collection",
    no_args_is_help=True,
)

console = get_console()

app.command("list")(users.list_users)
app.command("create")(users.create_user)
app.command("update")(users.update_user)
app.command("delete")(users.delete_user)
app.command("avatars")(users.list_avatars)

app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information and the configured endpoint."""
    console.print(f"[bold]usermgr[/bold] version [cyan]{__version__}[/cyan]")
    console.print(f"API endpoint: {get_config_service().config.api.endpoint}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
