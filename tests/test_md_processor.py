import pytest

from quakecore.md_processor import embed_file, make_link_to_file, transform
from quakecore.references import NoteReference


def test_br_tag_in_html():
    assert transform("demo `<br />` demo") == "demo `<br />` demo"


def test_transform_page_link():
    assert transform("[[note::SourceCode]]") == "[note::SourceCode](note::SourceCode)"


def test_transform_page_file():
    assert transform("![[note::SourceCode]]") == "[note::SourceCode](note::SourceCode)"


def test_link_with_section_inside_text():
    assert transform("see [[Note#Sec]] here") == "see [Note > Sec](Note) here"


def test_link_to_section_only_has_empty_target():
    assert transform("[[#Heading|Label]]") == "[Label]()"


@pytest.mark.parametrize(
    "text",
    [
        "[x]",
        "[[]]",
        "a [b",
        "plain text",
        "`[[inside code]]`",
        "[link](target)",
    ],
)
def test_text_without_references_is_unchanged(text):
    assert transform(text) == text


def test_fenced_code_block_is_untouched():
    text = "before [[a]]\n```\n[[b]]\n```\nafter [[c]]\n"
    assert transform(text) == "before [a](a)\n```\n[[b]]\n```\nafter [c](c)\n"


def test_reference_does_not_span_lines():
    text = "[[a\nb]]"
    assert transform(text) == text


def test_make_link_to_file():
    reference = NoteReference(file="Note", section="Heading")
    assert make_link_to_file(reference) == "[Note > Heading](Note)"


def test_embed_file_renders_as_link():
    assert embed_file("image.png|Picture") == "[Picture](image.png)"
    assert embed_file("#Only") == "[Only]()"