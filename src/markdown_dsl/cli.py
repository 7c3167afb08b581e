"""markdown-dsl CLI - render declarative documents to Markdown.

Commands:
- render: Build a YAML/JSON document description and print the Markdown
- check: Validate a document description and summarise its blocks
- init: Write an example settings file
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from markdown_dsl import __version__
from markdown_dsl.config import (
    DEFAULT_SETTINGS_FILE,
    load_settings,
    merge_overrides,
    save_example_settings,
)
from markdown_dsl.display import print_error, print_info, print_spec_summary, print_success
from markdown_dsl.exceptions import MarkdownDslError
from markdown_dsl.models import build_from_spec, load_document_spec

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="markdown-dsl - compose Markdown documents from typed building blocks.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"markdown-dsl {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging.")
    ] = False,
) -> None:
    """markdown-dsl - compose Markdown documents from typed building blocks."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command()
def render(
    spec_path: Annotated[Path, typer.Argument(help="YAML or JSON document description")],
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Write Markdown to this file")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help=f"Settings file (default: ./{DEFAULT_SETTINGS_FILE})"),
    ] = None,
    list_tag: Annotated[
        Optional[str], typer.Option("--list-tag", help="Unordered list tag: *, + or -")
    ] = None,
) -> None:
    """Render a document description to Markdown.

    Examples:
        markdown-dsl render notes.yaml
        markdown-dsl render notes.yaml -o NOTES.md --list-tag -
    """
    try:
        settings = merge_overrides(load_settings(config), unordered_list_tag=list_tag)
        document = build_from_spec(load_document_spec(spec_path), settings)
    except MarkdownDslError as e:
        print_error(e.message)
        raise typer.Exit(1) from None

    if output is None:
        typer.echo(document.content, nl=False)
        return

    output.write_text(document.content, encoding="utf-8")
    logger.debug("Wrote %d characters to %s", len(document.content), output)
    print_success(f"Wrote {output}")


@app.command()
def check(
    spec_path: Annotated[Path, typer.Argument(help="YAML or JSON document description")],
) -> None:
    """Validate a document description without rendering it."""
    try:
        spec = load_document_spec(spec_path)
    except MarkdownDslError as e:
        print_error(e.message)
        raise typer.Exit(1) from None

    print_spec_summary(spec_path, spec)


@app.command()
def init(
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite an existing settings file")
    ] = False,
) -> None:
    """Write an example markdown-dsl.yaml to the current directory."""
    path = Path.cwd() / DEFAULT_SETTINGS_FILE
    if path.exists() and not force:
        print_info(f"{DEFAULT_SETTINGS_FILE} already exists (use --force to overwrite)")
        raise typer.Exit(1)

    save_example_settings(path)
    print_success(f"Created {DEFAULT_SETTINGS_FILE}")


if __name__ == "__main__":
    app()
