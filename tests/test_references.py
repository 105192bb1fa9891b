import pytest

from quakecore.references import NoteReference, RefParser, RefParserState, RefType


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Just a note", NoteReference(file="Just a note")),
        ("A note?", NoteReference(file="A note?")),
        ("Note#with heading", NoteReference(file="Note", section="with heading")),
        (
            "Note#Heading|Label",
            NoteReference(file="Note", section="Heading", label="Label"),
        ),
        ("#Heading|Label", NoteReference(file=None, section="Heading", label="Label")),
    ],
)
def test_parse_note_refs_from_strings(text, expected):
    assert NoteReference.parse(text) == expected


@pytest.mark.parametrize(
    "reference, expected",
    [
        (NoteReference(file="Note"), "Note"),
        (NoteReference(file="Note", section="Heading"), "Note > Heading"),
        (NoteReference(section="Heading"), "Heading"),
        (NoteReference(file="Note", section="Heading", label="Label"), "Label"),
        (NoteReference(section="Heading", label="Label"), "Label"),
    ],
)
def test_display_of_note_refs(reference, expected):
    assert reference.display() == expected
    assert str(reference) == expected


def test_display_without_file_or_section_raises():
    with pytest.raises(ValueError):
        NoteReference().display()


def test_parse_rejects_bare_hash():
    with pytest.raises(ValueError):
        NoteReference.parse("#")


def test_parse_label_only():
    assert NoteReference.parse("|Label") == NoteReference(label="Label")


def test_ref_parser_transition_and_reset():
    parser = RefParser()
    assert parser.state is RefParserState.NO_STATE

    parser.ref_type = RefType.EMBED
    parser.ref_text = "note"
    parser.transition(RefParserState.EXPECT_REF_TEXT)
    assert parser.state is RefParserState.EXPECT_REF_TEXT

    parser.reset()
    assert parser.state is RefParserState.NO_STATE
    assert parser.ref_type is None
    assert parser.ref_text == ""