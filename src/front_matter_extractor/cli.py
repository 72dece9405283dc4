"""Command-line interface for front-matter-extractor."""

import logging
import sys
from typing import List, Optional

import typer
from rich.console import Console

from front_matter_extractor import __version__
from front_matter_extractor.matter import test as has_front_matter
from front_matter_extractor.reader import read_file
from front_matter_extractor.utils.front_matter import strip_front_matter
from front_matter_extractor.utils.logging import setup_logger

app = typer.Typer(
    help="Extract YAML/TOML front matter from text documents",
    add_completion=False,
)

console = Console()
logger = setup_logger(console=Console(stderr=True))


def _delimiters(delims: Optional[List[str]]) -> Optional[List[str]]:
    # typer passes an empty list when the option is not given
    return delims or None


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
):
    """Extract YAML/TOML front matter from text documents."""
    if verbose:
        logger.setLevel(logging.DEBUG)
        for handler in logger.handlers:
            handler.setLevel(logging.DEBUG)


@app.command()
def version():
    """Show version information."""
    console.print(f"front-matter-extractor version [bold]{__version__}[/bold]")


@app.command()
def parse(
    file: str = typer.Argument(
        ...,
        help="File to read front matter from",
        exists=True,
        dir_okay=False,
        file_okay=True,
    ),
    loose: bool = typer.Option(
        False,
        "--loose",
        "-l",
        help="Accept delimiters followed by other characters",
    ),
    lang: str = typer.Option(
        "yaml",
        "--lang",
        help="Language used when the header line names none",
    ),
    delims: Optional[List[str]] = typer.Option(
        None,
        "--delims",
        "-d",
        help="Header delimiter, given a second time for the footer delimiter",
    ),
    body: bool = typer.Option(
        False,
        "--body/--no-body",
        help="Also print the document body",
    ),
):
    """Print the parsed front matter as JSON."""
    try:
        result = read_file(file, loose=loose, lang=lang, delims=_delimiters(delims))
    except Exception as e:
        console.print(f"[red]Error reading front matter: {str(e)}[/red]")
        sys.exit(1)

    console.print_json(data=result.data, default=str)
    if body:
        typer.echo(result.body, nl=False)


@app.command()
def check(
    file: str = typer.Argument(
        ...,
        help="File to check",
        exists=True,
        dir_okay=False,
        file_okay=True,
    ),
    loose: bool = typer.Option(
        False,
        "--loose",
        "-l",
        help="Accept delimiters followed by other characters",
    ),
    delims: Optional[List[str]] = typer.Option(
        None,
        "--delims",
        "-d",
        help="Header delimiter, given a second time for the footer delimiter",
    ),
):
    """Exit with status 0 if the file has front matter, 1 otherwise."""
    try:
        with open(file, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except Exception as e:
        console.print(f"[red]Error reading {file}: {str(e)}[/red]")
        sys.exit(2)

    if has_front_matter(content, loose=loose, delims=_delimiters(delims)):
        console.print(f"[green]{file}: front matter found[/green]")
    else:
        console.print(f"[yellow]{file}: no front matter[/yellow]")
        sys.exit(1)


@app.command()
def strip(
    file: str = typer.Argument(
        ...,
        help="File to strip front matter from",
        exists=True,
        dir_okay=False,
        file_okay=True,
    ),
    loose: bool = typer.Option(
        False,
        "--loose",
        "-l",
        help="Accept delimiters followed by other characters",
    ),
    delims: Optional[List[str]] = typer.Option(
        None,
        "--delims",
        "-d",
        help="Header delimiter, given a second time for the footer delimiter",
    ),
):
    """Print the file content without its front matter."""
    try:
        with open(file, "r", encoding="utf-8", newline="") as f:
            content = f.read()
        body = strip_front_matter(content, loose=loose, delims=_delimiters(delims))
    except Exception as e:
        console.print(f"[red]Error stripping front matter: {str(e)}[/red]")
        sys.exit(1)

    typer.echo(body, nl=False)


if __name__ == "__main__":
    app()
