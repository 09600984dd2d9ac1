"""CLI application for kasten using Rich and Typer."""

import logging
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from kasten.core.config import KASTEN_CONFIG_FILE, KASTEN_DEBUG, KASTEN_VAULT, setup_logging
from kasten.core.context import ConfigContext
from kasten.core.defaults import build_default_config
from kasten.core.loader import setup_from_file
from kasten.core.search import detect_search_backend
from kasten.core.settings import ConfigError, KastenConfig

app = typer.Typer(
    name="kasten",
    help="kasten - resolve Zettelkasten vault configuration",
    no_args_is_help=True,
)

console = Console()


def _format_value(value: Any) -> str:
    if value is None:
        return "[dim]none[/dim]"
    if isinstance(value, bool):
        return "[green]true[/green]" if value else "[yellow]false[/yellow]"
    if isinstance(value, dict):
        return escape(", ".join(f"{k}={v}" for k, v in value.items()))
    if isinstance(value, list):
        return escape(" ".join(str(v) for v in value))
    return escape(str(value))


def print_config(config: KastenConfig, title: str) -> None:
    """Print every setting of a configuration as a table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for key, value in config.model_dump(mode="json").items():
        table.add_row(key, _format_value(value))

    console.print(table)


def _setup(config_file: Optional[str], vault: Optional[str], debug: bool) -> ConfigContext:
    """Run setup from the overrides file, exiting with 1 on config errors."""
    path = Path(config_file or KASTEN_CONFIG_FILE).expanduser()
    try:
        return setup_from_file(path, vault=vault or KASTEN_VAULT, debug=debug)
    except ConfigError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        console.print(f"[dim]Config file: {path}[/dim]")
        raise typer.Exit(1)


@app.command()
def show(
    config_file: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Overrides file (default: ~/.config/kasten/config.yaml or $KASTEN_CONFIG_FILE)",
    ),
    vault: Optional[str] = typer.Option(
        None,
        "--vault",
        "-v",
        help="Vault to activate (default: the file's default vault or $KASTEN_VAULT)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Echo merged settings and dump the resolved configuration",
    ),
):
    """Resolve and print the active configuration."""
    if debug or KASTEN_DEBUG:
        logging.getLogger().setLevel(logging.DEBUG)
        console.print("[dim]Debug logging enabled[/dim]")

    context = _setup(config_file, vault, debug or KASTEN_DEBUG)
    print_config(context.config, f"Vault: {context.active_vault}")


@app.command()
def vaults(
    config_file: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Overrides file",
    ),
):
    """List configured vaults."""
    context = _setup(config_file, None, False)

    table = Table(title="Vaults", show_header=True)
    table.add_column("Name")
    table.add_column("Home")
    table.add_column("Status")

    for name, entry in sorted(context.vaults.items()):
        status = "[green]active[/green]" if name == context.active_vault else ""
        table.add_row(name, str(entry.get("home", "")), status)

    console.print(table)


@app.command()
def defaults(
    home: Optional[str] = typer.Option(
        None,
        "--home",
        help="Vault home (default: ~/zettelkasten)",
    ),
):
    """Print the default configuration for a home directory."""
    print_config(build_default_config(home), "Defaults")


@app.command()
def doctor():
    """Check the optional search tool."""
    backend = detect_search_backend()
    find_command = backend.find_command()

    table = Table(title="Search Tool", show_header=True)
    table.add_column("Component", style="cyan")
    table.add_column("Status")
    table.add_column("Message")

    if find_command:
        table.add_row("Ripgrep", "[green]OK[/green]", " ".join(find_command))
        pcre2 = backend.supports_pcre2()
        table.add_row(
            "PCRE2",
            "[green]OK[/green]" if pcre2 else "[yellow]WARN[/yellow]",
            "available" if pcre2 else "rg built without --pcre2",
        )
    else:
        table.add_row("Ripgrep", "[yellow]WARN[/yellow]", "rg not found on PATH")

    console.print(table)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (default: $LOG_LEVEL or INFO)",
    ),
):
    """kasten - resolve Zettelkasten vault configuration."""
    setup_logging(log_level)
    logging.getLogger(__name__).debug("CLI started")


def run_cli():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run_cli()
