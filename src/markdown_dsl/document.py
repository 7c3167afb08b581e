"""Document root and the ``markdown()`` entry point."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from markdown_dsl.builders import (
    BlockQuoteCapable,
    HeadingCapable,
    HorizontalRuleCapable,
    ListCapable,
    ParagraphCapable,
    TextSpanCapable,
)
from markdown_dsl.config import RenderSettings
from markdown_dsl.elements import Element
from markdown_dsl.text import join_blocks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document(Element):
    """Top-level container of a Markdown document.

    Elements are separated by exactly one blank line and the text ends with a
    single newline. A document without content renders to an empty string.
    """

    children: tuple[Element, ...] = ()

    @property
    def content(self) -> str:
        """The fully rendered Markdown text."""
        return self.render()

    def render(self) -> str:
        body = join_blocks(child.render() for child in self.children)
        return body + "\n" if body else ""


class DocumentBuilder(
    TextSpanCapable,
    HeadingCapable,
    HorizontalRuleCapable,
    ParagraphCapable,
    BlockQuoteCapable,
    ListCapable,
):
    """Builder for ``Document``.

    Example:
        doc = (
            DocumentBuilder()
            .heading("Title")
            .paragraph(["Introduction."])
            .unordered_list(["First", "Second"])
            .build()
        )
    """

    def _finalize(self, children: tuple[Element, ...]) -> Document:
        logger.debug("Building document with %d top-level elements", len(children))
        return Document(children)


def markdown(
    configure: Callable[[DocumentBuilder], object] | None = None,
    *,
    settings: RenderSettings | None = None,
) -> Document:
    """Build a document by running ``configure`` on a fresh builder.

    Args:
        configure: Callable receiving the DocumentBuilder
        settings: Defaults for heading sizes and list tags

    Returns:
        The immutable Document; its ``content`` is the Markdown text

    Example:
        doc = markdown(
            lambda md: md.heading("Title").unordered_list(
                lambda ul: ul.item("A").item("B")
            )
        )
        print(doc.content)
    """
    builder = DocumentBuilder(settings=settings)
    if configure is not None:
        configure(builder)
    return builder.build()


build_document = markdown
