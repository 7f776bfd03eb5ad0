"""Main CLI entry point for the Firebase CLI."""

from __future__ import annotations

import sys
from typing import Annotated

import typer
from rich.console import Console

from firebase_cli import __version__
from firebase_cli.commands import projects
from firebase_cli.container import get_settings
from firebase_cli.exceptions import FirebaseError
from firebase_cli.logging_config import configure_logging

app = typer.Typer(
    name="firebase",
    help="Firebase CLI - manage Firebase projects from the command line",
    no_args_is_help=True,
    add_completion=False,
)

# Register command groups
app.add_typer(projects.app, name="projects")

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Firebase CLI version: {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Log HTTP requests and responses to stderr"),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    Firebase CLI - command-line interface for the Firebase platform.

    Use 'firebase COMMAND --help' for help with specific commands.
    """
    configure_logging(debug or get_settings().debug)


def cli_main() -> None:
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)
    except FirebaseError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        sys.exit(e.exit_code)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
