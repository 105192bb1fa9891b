from quakecore.meta import (
    Author,
    FieldKind,
    MetaField,
    entry_define_fields,
    parse_field_type,
)


def test_display_title():
    field = MetaField(FieldKind.TITLE, "Title")
    assert str(field) == "Title"


def test_custom_type():
    fields = entry_define_fields({"title": "Title"})
    assert fields["title"] == MetaField(FieldKind.TITLE, "Title")


def test_parse_known_types():
    assert parse_field_type("String") == MetaField(FieldKind.TEXT, "String")
    assert parse_field_type("Flow") == MetaField(FieldKind.FLOW, "Flow")
    assert parse_field_type("Date") == MetaField(FieldKind.DATE, "Date")
    assert parse_field_type("Searchable") == MetaField(FieldKind.SEARCHABLE, "string")
    assert parse_field_type("Filterable") == MetaField(FieldKind.FILTERABLE, "string")


def test_parse_unknown_type():
    assert parse_field_type("Body") == MetaField(FieldKind.UNKNOWN, "Body")


def test_entry_define_fields_keeps_order():
    fields = entry_define_fields({"title": "Title", "content": "Body", "author": "Author"})
    assert list(fields) == ["title", "content", "author"]


def test_filterable_display_is_quoted():
    assert str(parse_field_type("filterable")) == '"string"'


def test_array_display():
    assert str(MetaField(FieldKind.ARRAY, ["a", "b"])) == '["a", "b"]'


def test_author_from_name():
    author = Author.from_name("Phodal")
    assert author == Author(name="Phodal", email="")
    assert str(MetaField(FieldKind.AUTHOR, author)) == 'Author { name: "Phodal", email: "" }'