"""Command line interface for gitco."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich import print
from rich.console import Console

from gitco import __version__
from gitco.git import GitError, GitRepo
from gitco.logger import setup_logging
from gitco.render import ConsoleRenderer
from gitco.session import InteractiveSession

app = typer.Typer(help="Interactive git branch switcher")
console = Console()


def get_repo(path: Path) -> GitRepo:
    """Get git repository instance."""
    try:
        return GitRepo(path)
    except GitError as err:
        print(f"[red]Error:[/red] {err}")
        raise typer.Exit(code=1) from err


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        print(f"gitco {__version__}")
        raise typer.Exit()


@app.command()
def main(
    path: Annotated[Path, typer.Option(help="Path to git repository")] = Path("."),
    remote: Annotated[bool, typer.Option("--remote/--local", help="Start with remote branches listed")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log git commands and input")] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
) -> None:
    """Pick a branch from a numbered list and check it out."""
    setup_logging("DEBUG" if verbose else "WARNING")
    repo = get_repo(path)

    session = InteractiveSession(repo, ConsoleRenderer(console))
    raise typer.Exit(code=session.run(include_remote=remote))


if __name__ == "__main__":
    app()
