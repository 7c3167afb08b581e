"""markdown-dsl - compose Markdown documents from typed building blocks.

Headings, paragraphs, lists and block quotes are built as an immutable
element tree and rendered with consistent blank-line separation,
indentation and hard line breaks at any nesting depth.
"""

from markdown_dsl.builders import (
    BlockQuoteBuilder,
    ElementBuilder,
    ListItemBuilder,
    OrderedListBuilder,
    ParagraphBuilder,
    UnorderedListBuilder,
)
from markdown_dsl.config import RenderSettings, load_settings
from markdown_dsl.document import Document, DocumentBuilder, build_document, markdown
from markdown_dsl.elements import (
    BlockQuote,
    Element,
    Heading,
    HeadingSize,
    HorizontalRule,
    Line,
    ListItem,
    OrderedList,
    Paragraph,
    UnderlinedHeading,
    UnderlinedHeadingStyle,
    UnorderedList,
    UnorderedListTag,
)
from markdown_dsl.exceptions import (
    BuilderFinalizedError,
    ConfigurationError,
    ConstructionError,
    DocumentSpecError,
    InvalidArgumentError,
    MarkdownDslError,
    UnsupportedElementError,
)

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "markdown",
    "build_document",
    "Document",
    # Elements
    "Element",
    "Line",
    "Heading",
    "HeadingSize",
    "UnderlinedHeading",
    "UnderlinedHeadingStyle",
    "HorizontalRule",
    "Paragraph",
    "BlockQuote",
    "ListItem",
    "OrderedList",
    "UnorderedList",
    "UnorderedListTag",
    # Builders
    "ElementBuilder",
    "DocumentBuilder",
    "ParagraphBuilder",
    "BlockQuoteBuilder",
    "ListItemBuilder",
    "OrderedListBuilder",
    "UnorderedListBuilder",
    # Configuration
    "RenderSettings",
    "load_settings",
    # Exceptions
    "MarkdownDslError",
    "ConstructionError",
    "UnsupportedElementError",
    "BuilderFinalizedError",
    "InvalidArgumentError",
    "ConfigurationError",
    "DocumentSpecError",
]
