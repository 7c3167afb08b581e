"""Render settings schema and loading."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Annotated, Any

import yaml
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from markdown_dsl.elements.headings import HeadingSize, UnderlinedHeadingStyle
from markdown_dsl.elements.lists import UnorderedListTag
from markdown_dsl.exceptions import ConfigurationError, InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = "markdown-dsl.yaml"
SETTINGS_SECTION = "markdown"


def _coerced(coerce: Callable[[Any], Any]) -> BeforeValidator:
    """Pydantic validator around an enum ``coerce`` classmethod."""

    def validate(value: Any) -> Any:
        try:
            return coerce(value)
        except InvalidArgumentError as e:
            raise ValueError(e.reason) from e

    return BeforeValidator(validate)


HeadingSizeField = Annotated[HeadingSize, _coerced(HeadingSize.coerce)]
UnderlinedHeadingStyleField = Annotated[UnderlinedHeadingStyle, _coerced(UnderlinedHeadingStyle.coerce)]
UnorderedListTagField = Annotated[UnorderedListTag, _coerced(UnorderedListTag.coerce)]


class RenderSettings(BaseModel):
    """Defaults applied by builders when an operation omits a style argument.

    Loaded from the ``markdown:`` section of ``markdown-dsl.yaml``.
    Explicit arguments override settings with precedence:
    1. Builder arguments / CLI flags (highest)
    2. markdown-dsl.yaml
    3. Defaults (lowest)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    heading_size: HeadingSizeField = Field(
        default=HeadingSize.H1, description="Size used by heading() without an explicit size"
    )
    underlined_heading_style: UnderlinedHeadingStyleField = Field(
        default=UnderlinedHeadingStyle.H1,
        description="Style used by underlined_heading() without an explicit style",
    )
    unordered_list_tag: UnorderedListTagField = Field(
        default=UnorderedListTag.ASTERISK,
        description="Marker used by unordered_list() without an explicit tag",
    )


def load_settings(path: Path | None = None) -> RenderSettings:
    """Load render settings from a YAML file.

    Args:
        path: Settings file. Defaults to markdown-dsl.yaml in the cwd.

    Returns:
        RenderSettings with values from file or defaults

    Example:
        settings = load_settings()
        print(f"List tag: {settings.unordered_list_tag.tag}")
    """
    if path is None:
        path = Path.cwd() / DEFAULT_SETTINGS_FILE

    # Return defaults if no settings file
    if not path.exists():
        logger.debug("No settings file at %s, using defaults", path)
        return RenderSettings()

    try:
        with open(path, encoding="utf-8") as f:
            raw_settings = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Settings file {path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read settings file {path}: {e}") from e

    if not isinstance(raw_settings, dict):
        raise ConfigurationError(f"Invalid settings in {path}: expected a mapping")

    section = raw_settings.get(SETTINGS_SECTION) or {}

    try:
        settings = RenderSettings.model_validate(section)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings in {path}: {e}") from e

    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings


def merge_overrides(
    settings: RenderSettings,
    heading_size: HeadingSize | int | str | None = None,
    underlined_heading_style: UnderlinedHeadingStyle | int | str | None = None,
    unordered_list_tag: UnorderedListTag | str | None = None,
) -> RenderSettings:
    """Merge explicit overrides into settings.

    Returns:
        New RenderSettings with non-None overrides applied

    Example:
        settings = merge_overrides(load_settings(), unordered_list_tag="-")
    """
    overrides = {
        "heading_size": heading_size,
        "underlined_heading_style": underlined_heading_style,
        "unordered_list_tag": unordered_list_tag,
    }
    merged = settings.model_dump()
    merged.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return RenderSettings.model_validate(merged)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings override: {e}") from e


def save_example_settings(output_path: Path) -> None:
    """Save an example settings file.

    Args:
        output_path: Path to write markdown-dsl.yaml
    """
    example = {
        SETTINGS_SECTION: {
            "heading_size": HeadingSize.H1.name,
            "underlined_heading_style": UnderlinedHeadingStyle.H1.name,
            "unordered_list_tag": UnorderedListTag.ASTERISK.name.lower(),
        }
    }

    with open(output_path, "w") as f:
        yaml.dump(example, f, default_flow_style=False, sort_keys=False)
