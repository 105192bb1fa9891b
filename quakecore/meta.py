"""Field kinds that an entry definition may declare."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Union

from quakecore.quake_change import _debug_quote


class FieldKind(Enum):
    """Kind of a declared entry field."""

    ARRAY = "Array"
    TITLE = "Title"
    BODY = "Body"
    AUTHOR = "Author"
    TEXT = "Text"
    SEARCHABLE = "Searchable"
    THEME = "Theme"
    EPIC = "Epic"
    DATE = "Date"
    FILTERABLE = "Filterable"
    PRIORITY = "Priority"
    ATTACHMENT = "Attachment"
    FLOW = "Flow"
    UNKNOWN = "Unknown"


class FormField(Enum):
    CHECKABLE = "Checkable"
    INPUTTABLE = "Inputtable"
    EDITABLE = "Editable"
    SELECTABLE = "Selectable"


class MetaType(Enum):
    SUMMARY = "Summary"
    NOTE = "Note"
    NORMAL = "Normal"
    REVIEW = "Review"


@dataclass
class Author:
    name: str
    email: str = ""

    @classmethod
    def from_name(cls, name: str) -> Author:
        return cls(name=name, email="")

    def __str__(self) -> str:
        return f"Author {{ name: {_debug_quote(self.name)}, email: {_debug_quote(self.email)} }}"


@dataclass
class MetaField:
    """A field kind together with its payload."""

    kind: FieldKind
    value: Union[str, list, Author]

    def __str__(self) -> str:
        if self.kind is FieldKind.ARRAY:
            return "[" + ", ".join(_debug_quote(item) for item in self.value) + "]"
        if self.kind is FieldKind.FILTERABLE:
            return _debug_quote(self.value)
        return str(self.value)


_KINDS_BY_NAME = {
    "text": FieldKind.TEXT,
    "title": FieldKind.TITLE,
    "flow": FieldKind.FLOW,
    "string": FieldKind.TEXT,
    "date": FieldKind.DATE,
}


def parse_field_type(value: str) -> MetaField:
    """Map a type name from an entry definition to its MetaField."""
    lowered = value.lower()
    if lowered == "searchable":
        return MetaField(FieldKind.SEARCHABLE, "string")
    if lowered == "filterable":
        return MetaField(FieldKind.FILTERABLE, "string")
    return MetaField(_KINDS_BY_NAME.get(lowered, FieldKind.UNKNOWN), value)


def entry_define_fields(mapping: Mapping[str, str]) -> dict[str, MetaField]:
    """Convert name-to-type-name pairs into name-to-MetaField, keeping order."""
    return {key: parse_field_type(value) for key, value in mapping.items()}