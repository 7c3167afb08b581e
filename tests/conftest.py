"""Shared pytest fixtures for markdown-dsl tests."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml


@pytest.fixture
def sample_spec() -> dict[str, Any]:
    """Declarative document covering titles, paragraphs and nested list items."""
    return {
        "title": "Release notes",
        "blocks": [
            {"type": "paragraph", "lines": ["Highlights of this release."]},
            {
                "type": "unordered_list",
                "tag": "-",
                "items": [
                    "Faster rendering",
                    {"blocks": [{"type": "paragraph", "lines": ["Nested lists", "with paragraphs"]}]},
                ],
            },
        ],
    }


SAMPLE_MARKDOWN = (
    "# Release notes\n"
    "\n"
    "Highlights of this release.\n"
    "\n"
    "-  Faster rendering\n"
    "\n"
    "-  Nested lists  \n"
    "   with paragraphs\n"
)


@pytest.fixture
def sample_markdown() -> str:
    """Markdown rendered from ``sample_spec``."""
    return SAMPLE_MARKDOWN


@pytest.fixture
def write_spec(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a document description to a YAML or JSON file.

    Returns:
        Function (data, name="doc.yaml") -> Path
    """

    def _write(data: Any, name: str = "doc.yaml") -> Path:
        path = tmp_path / name
        if path.suffix == ".json":
            path.write_text(json.dumps(data))
        else:
            path.write_text(yaml.safe_dump(data, sort_keys=False))
        return path

    return _write
