"""Rich display utilities for the markdown-dsl CLI."""

from collections import Counter
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from markdown_dsl.models import DocumentSpec

console = Console()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]✓[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]✗[/] {escape(message)}", highlight=False, soft_wrap=True)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[bold blue]ℹ[/] {message}")


def print_spec_summary(path: Path, spec: DocumentSpec) -> None:
    """Print a table of block types found in a declarative document."""
    counts = Counter(block.type for block in spec.blocks)
    if spec.title:
        counts["title"] += 1

    table = Table(title=str(path), show_header=True, header_style="bold")
    table.add_column("Block", style="cyan")
    table.add_column("Count", justify="right")
    for block_type, count in sorted(counts.items()):
        table.add_row(block_type, str(count))

    console.print(table)
    print_success(f"{spec.block_count} top-level blocks")
