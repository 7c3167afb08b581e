"""Tests for the document root and the markdown() entry point."""

import dataclasses

import pytest

from markdown_dsl import Document, DocumentBuilder, Heading, build_document, markdown


def test_empty_document_renders_empty_string() -> None:
    assert markdown().content == ""
    assert markdown(lambda md: None).content == ""


def test_document_without_leading_blank_line() -> None:
    content = markdown(lambda md: md.heading("Title").paragraph(["Body"])).content

    assert content == "# Title\n\nBody\n"


def test_horizontal_rule_between_paragraphs() -> None:
    content = markdown(lambda md: md.paragraph(["Above"]).horizontal_rule().paragraph(["Below"])).content

    assert content == "Above\n\n---\n\nBelow\n"


def test_top_level_lines_are_separated_by_blank_line() -> None:
    content = markdown(lambda md: md.line("a").line("b")).content

    assert content == "a\n\nb\n"


def test_elements_are_separated_by_exactly_one_blank_line() -> None:
    content = markdown(
        lambda md: md.heading("Title")
        .paragraph(["Intro"])
        .unordered_list(["A", "B"])
        .block_quote("Quote")
        .horizontal_rule()
        .underlined_heading("End", 2)
    ).content

    assert content == (
        "# Title\n"
        "\n"
        "Intro\n"
        "\n"
        "*  A\n"
        "*  B\n"
        "\n"
        "> Quote\n"
        "\n"
        "---\n"
        "\n"
        "End\n"
        "---\n"
    )
    assert content.count("\n\n") == 5
    assert "\n\n\n" not in content


def test_content_ends_with_single_newline() -> None:
    content = markdown(lambda md: md.paragraph(["Body"]).line("trailing\n\n\n")).content

    assert content.endswith("trailing\n")
    assert not content.endswith("\n\n")


def test_rendering_is_deterministic() -> None:
    document = markdown(lambda md: md.heading("T").ordered_list(["a", "b"]))

    assert document.render() == document.render() == document.content == str(document)


def test_document_is_immutable() -> None:
    document = markdown(lambda md: md.heading("T"))

    with pytest.raises(dataclasses.FrozenInstanceError):
        document.children = ()  # type: ignore[misc]


def test_builder_can_be_used_directly() -> None:
    document = DocumentBuilder().heading("Title").unordered_list(["First", "Second"]).build()

    assert isinstance(document, Document)
    assert document.content == "# Title\n\n*  First\n*  Second\n"


def test_build_document_alias() -> None:
    assert build_document is markdown
    assert build_document(lambda md: md.line("x")).content == "x\n"


def test_document_from_elements() -> None:
    document = Document((Heading("A"), Heading("B")))

    assert document.content == "# A\n\n# B\n"
