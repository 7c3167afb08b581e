"""Allow running as ``python -m markdown_dsl``."""

from markdown_dsl.cli import app

app()
