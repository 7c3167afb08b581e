"""Pydantic models for declarative documents.

A document can be described as data (YAML or JSON) instead of code:

    title: Release notes
    blocks:
      - type: paragraph
        lines: ["Highlights of this release."]
      - type: unordered_list
        tag: "-"
        items:
          - Faster rendering
          - blocks:
              - type: paragraph
                lines: ["Nested lists", "with paragraphs"]

Every block applies itself through the builder API, so declarative and
programmatic documents render identically and obey the same nesting rules.
"""

import json
import logging
from abc import abstractmethod
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Annotated, Any, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from markdown_dsl.builders import ElementBuilder
from markdown_dsl.config import (
    HeadingSizeField,
    RenderSettings,
    UnderlinedHeadingStyleField,
    UnorderedListTagField,
)
from markdown_dsl.document import Document, DocumentBuilder
from markdown_dsl.exceptions import DocumentSpecError

logger = logging.getLogger(__name__)


class BlockSpec(BaseModel):
    """Base class for declarative blocks."""

    model_config = ConfigDict(extra="forbid")

    @abstractmethod
    def apply(self, builder: ElementBuilder) -> None:
        """Add this block to ``builder`` through its capability methods."""
        ...


class LineBlock(BlockSpec):
    """Raw line of text."""

    type: Literal["line"] = "line"
    text: str

    def apply(self, builder: ElementBuilder) -> None:
        builder.line(self.text)


class HeadingBlock(BlockSpec):
    """ATX heading."""

    type: Literal["heading"] = "heading"
    text: str
    size: HeadingSizeField | None = None

    def apply(self, builder: ElementBuilder) -> None:
        builder.heading(self.text, self.size)


class UnderlinedHeadingBlock(BlockSpec):
    """Setext heading."""

    type: Literal["underlined_heading"] = "underlined_heading"
    text: str
    style: UnderlinedHeadingStyleField | None = None

    def apply(self, builder: ElementBuilder) -> None:
        builder.underlined_heading(self.text, self.style)


class HorizontalRuleBlock(BlockSpec):
    """Horizontal rule."""

    type: Literal["horizontal_rule"] = "horizontal_rule"

    def apply(self, builder: ElementBuilder) -> None:
        builder.horizontal_rule()


class ParagraphBlock(BlockSpec):
    """Paragraph of hard-broken lines."""

    type: Literal["paragraph"] = "paragraph"
    lines: list[str] = Field(default_factory=list)

    def apply(self, builder: ElementBuilder) -> None:
        builder.paragraph(self.lines)


class BlockQuoteBlock(BlockSpec):
    """Block quote holding either raw text or nested blocks."""

    type: Literal["block_quote"] = "block_quote"
    text: str | None = None
    blocks: list["Block"] = Field(default_factory=list)

    @model_validator(mode="after")
    def _text_or_blocks(self) -> "BlockQuoteBlock":
        if self.text is not None and self.blocks:
            raise ValueError("block_quote takes either 'text' or 'blocks', not both")
        return self

    def apply(self, builder: ElementBuilder) -> None:
        if self.text is not None:
            builder.block_quote(self.text)
        else:
            builder.block_quote(_configure(self.blocks))


class ListItemSpec(BaseModel):
    """List item with nested blocks."""

    model_config = ConfigDict(extra="forbid")

    blocks: list["ItemBlock"] = Field(default_factory=list)


ItemEntry = Union[str, ListItemSpec]


def _configure_items(items: Sequence[ItemEntry]) -> Callable[[ElementBuilder], None]:
    def configure(builder: ElementBuilder) -> None:
        for entry in items:
            if isinstance(entry, str):
                builder.item(entry)
            else:
                builder.item(_configure(entry.blocks))

    return configure


class OrderedListBlock(BlockSpec):
    """Numbered list."""

    type: Literal["ordered_list"] = "ordered_list"
    items: list[ItemEntry] = Field(default_factory=list)

    def apply(self, builder: ElementBuilder) -> None:
        builder.ordered_list(_configure_items(self.items))


class UnorderedListBlock(BlockSpec):
    """Bulleted list."""

    type: Literal["unordered_list"] = "unordered_list"
    items: list[ItemEntry] = Field(default_factory=list)
    tag: UnorderedListTagField | None = None

    def apply(self, builder: ElementBuilder) -> None:
        builder.unordered_list(_configure_items(self.items), self.tag)


# Blocks allowed inside list items: everything except horizontal rules
ItemBlock = Annotated[
    Union[
        LineBlock,
        HeadingBlock,
        UnderlinedHeadingBlock,
        ParagraphBlock,
        BlockQuoteBlock,
        OrderedListBlock,
        UnorderedListBlock,
    ],
    Field(discriminator="type"),
]

Block = Annotated[
    Union[
        LineBlock,
        HeadingBlock,
        UnderlinedHeadingBlock,
        HorizontalRuleBlock,
        ParagraphBlock,
        BlockQuoteBlock,
        OrderedListBlock,
        UnorderedListBlock,
    ],
    Field(discriminator="type"),
]

BlockQuoteBlock.model_rebuild()
ListItemSpec.model_rebuild()
OrderedListBlock.model_rebuild()
UnorderedListBlock.model_rebuild()


def _configure(blocks: Sequence[BlockSpec]) -> Callable[[ElementBuilder], None]:
    def configure(builder: ElementBuilder) -> None:
        for block in blocks:
            block.apply(builder)

    return configure


class DocumentSpec(BaseModel):
    """Declarative description of a whole document."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    blocks: list[Block] = Field(default_factory=list)

    @property
    def block_count(self) -> int:
        return len(self.blocks) + (1 if self.title else 0)

    def build(self, settings: RenderSettings | None = None) -> Document:
        """Build the document; a title becomes a leading H1 heading."""
        builder = DocumentBuilder(settings=settings)
        if self.title:
            builder.heading(self.title, 1)
        _configure(self.blocks)(builder)
        return builder.build()


def build_from_spec(spec: DocumentSpec, settings: RenderSettings | None = None) -> Document:
    """Build a Document from a declarative spec."""
    return spec.build(settings)


def parse_document_spec(data: Any, source: str = "<data>") -> DocumentSpec:
    """Validate already-loaded data into a DocumentSpec.

    Raises:
        DocumentSpecError: If the data does not match the schema
    """
    if data is None:
        data = {}
    try:
        return DocumentSpec.model_validate(data)
    except ValidationError as e:
        raise DocumentSpecError(source, str(e)) from e


def load_document_spec(path: Path) -> DocumentSpec:
    """Load a declarative document from a YAML or JSON file.

    Args:
        path: File ending in .json (parsed as JSON) or anything else (YAML)

    Raises:
        DocumentSpecError: If the file is missing, unparsable or invalid
    """
    if not path.exists():
        raise DocumentSpecError(str(path), "file not found")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentSpecError(str(path), f"file is not valid UTF-8: {e}") from e
    except OSError as e:
        raise DocumentSpecError(str(path), f"cannot read file: {e}") from e

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentSpecError(str(path), f"cannot parse file: {e}") from e

    spec = parse_document_spec(data, source=str(path))
    logger.debug("Loaded document spec from %s with %d blocks", path, spec.block_count)
    return spec
