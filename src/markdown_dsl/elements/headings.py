"""ATX and Setext headings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from markdown_dsl.elements.base import Element
from markdown_dsl.exceptions import InvalidArgumentError
from markdown_dsl.text import collapse_lines


class HeadingSize(Enum):
    """ATX heading size; the value is the markdown tag.

    Renders as:

        # H1
        ## H2
        ...
        ###### H6
    """

    H1 = "#"
    H2 = "##"
    H3 = "###"
    H4 = "####"
    H5 = "#####"
    H6 = "######"

    @property
    def tag(self) -> str:
        return self.value

    @property
    def level(self) -> int:
        return len(self.value)

    @classmethod
    def coerce(cls, value: HeadingSize | int | str) -> HeadingSize:
        """Accept a member, a level (1-6), a name ("H2") or a tag ("##")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            if not 1 <= value <= 6:
                raise InvalidArgumentError("size", f"heading level must be between 1 and 6, got {value}")
            return cls("#" * value)
        if isinstance(value, str):
            for member in cls:
                if value.upper() == member.name or value == member.value:
                    return member
        raise InvalidArgumentError("size", f"unknown heading size {value!r}")


class UnderlinedHeadingStyle(Enum):
    """Setext heading style; the value is the underline character.

    Renders as:

        H1
        ==

        H2
        --
    """

    H1 = "="
    H2 = "-"

    @property
    def tag(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value: UnderlinedHeadingStyle | int | str) -> UnderlinedHeadingStyle:
        """Accept a member, a level (1 or 2), a name ("H1") or a character ("=")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            if value not in (1, 2):
                raise InvalidArgumentError("style", f"underlined heading level must be 1 or 2, got {value}")
            return cls.H1 if value == 1 else cls.H2
        if isinstance(value, str):
            for member in cls:
                if value.upper() == member.name or value == member.value:
                    return member
        raise InvalidArgumentError("style", f"unknown underlined heading style {value!r}")


@dataclass(frozen=True)
class Heading(Element):
    """ATX-style heading.

    Markdown headings cannot span lines, so the text is collapsed to a single
    line. The output starts with a blank line to separate the heading from
    whatever precedes it:

        heading("Heading", HeadingSize.H2)  ->  "\\n## Heading"
    """

    text: str
    size: HeadingSize = HeadingSize.H1

    leading_blank: ClassVar[bool] = True

    def render(self) -> str:
        text = collapse_lines(self.text)
        if not text:
            return "\n" + self.size.tag
        return f"\n{self.size.tag} {text}"


@dataclass(frozen=True)
class UnderlinedHeading(Element):
    """Setext-style heading.

    The underline is exactly as long as the collapsed text; blank text renders
    nothing, since an underline alone is not a heading:

        Heading 1
        =========
    """

    text: str
    style: UnderlinedHeadingStyle = UnderlinedHeadingStyle.H1

    leading_blank: ClassVar[bool] = True

    def render(self) -> str:
        text = collapse_lines(self.text)
        if not text:
            return ""
        return f"\n{text}\n{self.style.tag * len(text)}"
