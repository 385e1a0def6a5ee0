"""Configuration management commands."""

import json

import typer
import yaml

from usermgr_cli.services.config_service import get_config_service
from usermgr_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from usermgr_cli.utils.ui.console import get_console
from usermgr_cli.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


@app.command("show")
@command_wrapper
def show_config(
    output: str = typer.Option("yaml", "--output", "-o", help="Output format: yaml or json"),
) -> None:
    """Show the current configuration."""
    config_svc = get_config_service()
    data = config_svc.config.model_dump()
    if output == "json":
        print(json.dumps(data, indent=2))
    else:
        print(yaml.dump(data, default_flow_style=False, sort_keys=False), end="")
    console.print(f"[dim]{config_svc.config_path}[/dim]")


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., api.endpoint)"),
) -> None:
    """Get a configuration value."""
    value = get_config_service().get(key)
    if value is None:
        raise AppError(f"Configuration key '{key}' not found", exit_code=ERROR_NOT_FOUND)
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., api.endpoint)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    config_svc = get_config_service()
    try:
        config_svc.set(key, value)
    except KeyError as e:
        raise AppError(e.args[0], exit_code=ERROR_NOT_FOUND) from e
    except ValueError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{config_svc.get(key)}'")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Are you sure you want to reset the configuration?"):
        console.print("Cancelled")
        raise typer.Exit(0)
    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
