"""Tests for the markdown-dsl CLI."""

from pathlib import Path

import yaml
from typer.testing import CliRunner

from markdown_dsl.cli import app
from markdown_dsl.config import DEFAULT_SETTINGS_FILE

runner = CliRunner()


def test_version() -> None:
    """Test --version flag."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "markdown-dsl 0.1.0" in result.output


def test_help() -> None:
    """Test --help flag."""
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "compose Markdown documents" in result.output


def test_render_to_stdout(write_spec, sample_spec: dict, sample_markdown: str) -> None:
    path = write_spec(sample_spec)

    result = runner.invoke(app, ["render", str(path)])

    assert result.exit_code == 0
    assert result.output == sample_markdown


def test_render_to_file(tmp_path: Path, write_spec, sample_spec: dict, sample_markdown: str) -> None:
    path = write_spec(sample_spec)
    output = tmp_path / "NOTES.md"

    result = runner.invoke(app, ["render", str(path), "--output", str(output)])

    assert result.exit_code == 0
    assert "Wrote" in result.output
    assert output.read_text() == sample_markdown


def test_render_list_tag_override(write_spec) -> None:
    path = write_spec({"blocks": [{"type": "unordered_list", "items": ["A", "B"]}]})

    result = runner.invoke(app, ["render", str(path), "--list-tag", "+"])

    assert result.exit_code == 0
    assert result.output == "+  A\n+  B\n"


def test_render_with_config_file(tmp_path: Path, write_spec) -> None:
    path = write_spec({"blocks": [{"type": "heading", "text": "Title"}]})
    config = tmp_path / "settings.yaml"
    config.write_text(yaml.safe_dump({"markdown": {"heading_size": 2}}))

    result = runner.invoke(app, ["render", str(path), "-c", str(config)])

    assert result.exit_code == 0
    assert result.output == "## Title\n"


def test_render_invalid_spec(write_spec) -> None:
    path = write_spec({"blocks": [{"type": "table"}]})

    result = runner.invoke(app, ["render", str(path)])

    assert result.exit_code == 1
    assert "Invalid document spec" in result.output


def test_render_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["render", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1
    assert "file not found" in result.output


def test_render_invalid_list_tag(write_spec) -> None:
    path = write_spec({"blocks": []})

    result = runner.invoke(app, ["render", str(path), "--list-tag", "?"])

    assert result.exit_code == 1
    assert "Invalid settings override" in result.output


def test_render_verbose(write_spec, sample_spec: dict) -> None:
    path = write_spec(sample_spec)

    result = runner.invoke(app, ["--verbose", "render", str(path)])

    assert result.exit_code == 0


def test_check(write_spec, sample_spec: dict) -> None:
    path = write_spec(sample_spec)

    result = runner.invoke(app, ["check", str(path)])

    assert result.exit_code == 0
    assert "paragraph" in result.output
    assert "3 top-level blocks" in result.output


def test_check_invalid_spec(write_spec) -> None:
    path = write_spec({"blocks": [{"type": "line"}]})

    result = runner.invoke(app, ["check", str(path)])

    assert result.exit_code == 1
    assert "Invalid document spec" in result.output


def test_render_non_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "doc.yaml"
    path.write_bytes(b"title: caf\xe9\n")

    result = runner.invoke(app, ["render", str(path)])

    assert result.exit_code == 1
    assert "not valid UTF-8" in result.output


def test_check_non_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "doc.yaml"
    path.write_bytes(b"title: caf\xe9\n")

    result = runner.invoke(app, ["check", str(path)])

    assert result.exit_code == 1
    assert "not valid UTF-8" in result.output


def test_check_directory(tmp_path: Path) -> None:
    result = runner.invoke(app, ["check", str(tmp_path)])

    assert result.exit_code == 1
    assert "cannot read file" in result.output


def test_render_non_utf8_settings(tmp_path: Path, write_spec) -> None:
    path = write_spec({"blocks": []})
    config = tmp_path / "settings.yaml"
    config.write_bytes(b"markdown:\n  heading_size: \xff\n")

    result = runner.invoke(app, ["render", str(path), "-c", str(config)])

    assert result.exit_code == 1
    assert "not valid UTF-8" in result.output


def test_init_creates_settings(tmp_path: Path) -> None:
    with runner.isolated_filesystem(temp_dir=tmp_path):
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert Path(DEFAULT_SETTINGS_FILE).exists()

        again = runner.invoke(app, ["init"])
        assert again.exit_code == 1
        assert "already exists" in again.output

        forced = runner.invoke(app, ["init", "--force"])
        assert forced.exit_code == 0
