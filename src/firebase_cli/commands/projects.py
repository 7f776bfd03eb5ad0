"""Project commands.

This module provides CLI commands for Firebase projects:
- list: List the projects the account can access
- get: Show one project

Commands build a ClientSession for the invocation and go through the
shared ApiClient for every request.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Annotated, Any, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from firebase_cli.api import ApiClient
from firebase_cli.container import get_api_client, get_settings
from firebase_cli.exceptions import FirebaseError
from firebase_cli.session import ClientSession

app = typer.Typer(
    name="projects",
    help="List and inspect Firebase projects",
    no_args_is_help=True,
)

console = Console()

T = TypeVar("T")

TokenOption = Annotated[
    str | None,
    typer.Option(
        "--token",
        "-t",
        help="Refresh token to use instead of FIREBASE_TOKEN",
    ),
]
JsonOption = Annotated[
    bool,
    typer.Option(
        "--json",
        "-j",
        help="Output in JSON format",
    ),
]


def _session(token: str | None) -> ClientSession:
    session = ClientSession()
    session.set_token(token or get_settings().token)
    session.set_scopes([])
    return session


def _run(token: str | None, call: Callable[[ApiClient], Awaitable[T]]) -> T:
    """Run one API call for a command, exiting on FirebaseError."""

    async def runner() -> T:
        async with get_api_client(_session(token)) as client:
            return await call(client)

    try:
        return asyncio.run(runner())
    except FirebaseError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(e.exit_code)


@app.command("list")
def list_projects(
    token: TokenOption = None,
    json_output: JsonOption = False,
) -> None:
    """List Firebase projects.

    Examples:
        firebase projects list
        firebase projects list --json
    """
    projects: list[dict[str, Any]] = _run(token, lambda client: client.get_projects())

    if json_output:
        # Use print() for JSON to avoid Rich's text wrapping
        print(json.dumps(projects, indent=2))
        return

    if not projects:
        console.print("[yellow]No projects found[/yellow]")
        return

    table = Table(title="Projects")
    table.add_column("Project ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Permission")

    for project in projects:
        table.add_row(
            str(project.get("id", "")),
            str(project.get("name", "")),
            str(project.get("permission", "")),
        )

    console.print(table)


@app.command("get")
def get_project(
    project_id: Annotated[str, typer.Argument(help="Project ID")],
    token: TokenOption = None,
    json_output: JsonOption = False,
) -> None:
    """Show one Firebase project.

    Examples:
        firebase projects get my-app
    """
    project: dict[str, Any] = _run(token, lambda client: client.get_project(project_id))

    if json_output:
        print(json.dumps(project, indent=2))
        return

    for key, value in project.items():
        console.print(f"[bold]{key}:[/bold] {value}")
