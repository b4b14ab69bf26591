import typer
from pathlib import Path
from typing import Optional
from typing_extensions import Annotated
from rich.console import Console
from rich.markup import escape

from lps.config import ConfigError, build_request
from lps.search import WorkerError, run

app = typer.Typer(help="lps - find files by name and content")
console = Console()


@app.command()
def search(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show working directory, thread count and logs"),
    ] = False,
    filename: Annotated[
        Optional[str],
        typer.Option("--filename", "-f", help="Only files whose name contains this text"),
    ] = None,
    ignore_filename_case: Annotated[
        bool, typer.Option("--ignore-filename-case", help="Case-insensitive filename match")
    ] = False,
    content: Annotated[
        Optional[str],
        typer.Option("--content", "-c", help="Only files containing this text"),
    ] = None,
    ignore_content_case: Annotated[
        bool, typer.Option("--ignore-content-case", help="Case-insensitive content match")
    ] = False,
    dop: Annotated[
        Optional[str],
        typer.Option("--dop", help="Degree of parallelism (default: logical CPU count)"),
    ] = None,
    root: Annotated[
        Optional[Path],
        typer.Option("--root", "-r", help="Directory to search (default: current directory)"),
    ] = None,
    recursive: Annotated[
        bool,
        typer.Option("--recursive/--no-recursive", help="Scan subdirectories"),
    ] = True,
) -> None:
    """Search files under a directory by name and, optionally, by content."""
    try:
        request = build_request(
            verbose=verbose,
            filename=filename,
            ignore_filename_case=ignore_filename_case,
            content=content,
            ignore_content_case=ignore_content_case,
            dop=dop,
            root=root,
            recursive=recursive,
        )
    except ConfigError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    try:
        run(request)
    except WorkerError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)


def main() -> None:
    app()
