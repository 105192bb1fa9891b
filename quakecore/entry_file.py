"""Markdown entry files with YAML front matter."""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional

import yaml

from quakecore.errors import QuakeError
from quakecore.quake_change import QuakeChange
from quakecore.quake_time import date_now
from quakecore.slug import slugify


class _FrontMatterLoader(yaml.SafeLoader):
    """Resolves plain scalars like YAML 1.2: no timestamps, no sexagesimal numbers."""

    yaml_implicit_resolvers: dict = {}


_FrontMatterLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)
_FrontMatterLoader.add_implicit_resolver(
    "tag:yaml.org,2002:int",
    re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$"),
    list("-+0123456789"),
)
_FrontMatterLoader.add_implicit_resolver(
    "tag:yaml.org,2002:float",
    re.compile(
        r"^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?"
        r"|[-+]?\.(?:inf|Inf|INF)|\.(?:nan|NaN|NAN))$"
    ),
    list("-+.0123456789"),
)
_FrontMatterLoader.add_implicit_resolver(
    "tag:yaml.org,2002:null",
    re.compile(r"^(?:~|null|Null|NULL|)$"),
    ["~", "n", "N", ""],
)


def _construct_int(loader: yaml.SafeLoader, node: yaml.Node) -> int:
    text = loader.construct_scalar(node)
    if text.startswith("0x"):
        return int(text[2:], 16)
    if text.startswith("0o"):
        return int(text[2:], 8)
    return int(text)


_FrontMatterLoader.add_constructor("tag:yaml.org,2002:int", _construct_int)

_DIGITS = re.compile(r"\+?[0-9]+")


def _format_float(value: float) -> str:
    if math.isnan(value):
        return ".nan"
    if math.isinf(value):
        return ".inf" if value > 0 else "-.inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def value_to_string(value: Any) -> str:
    """Render a front-matter value as the text stored in an entry field."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join(value_to_string(item) for item in value)
    if isinstance(value, dict):
        return "todo: mapping"
    return str(value)


def value_to_changes(value: Any) -> list[QuakeChange]:
    """Status changes read from a `quake_change` list; unreadable items are skipped."""
    if not isinstance(value, (list, tuple)):
        return []
    changes = []
    for item in value:
        change = QuakeChange.parse(value_to_string(item))
        if change is not None:
            changes.append(change)
    return changes


def file_prefix(index: int) -> str:
    """Index padded with zeros to four digits."""
    return str(index).rjust(4, "0")


def file_name(index: int, text: str) -> str:
    """File name of an entry: padded index, slug of the title, `.md`."""
    return f"{file_prefix(index)}-{slugify(text)}.md"


def id_from_name(name: str) -> int:
    """Entry id from the first four characters of a file name."""
    raw = name.encode("utf-8")
    if len(raw) < 4:
        raise QuakeError("length < 4")
    try:
        prefix = raw[:4].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError("byte index 4 is not a char boundary") from exc
    if not _DIGITS.fullmatch(prefix):
        raise ValueError("invalid digit found in string")
    return int(prefix)


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _split_markdown(text: str) -> tuple[str, str]:
    in_front_matter = False
    front: list[str] = []
    others: list[str] = []
    for index, line in enumerate(_lines(text)):
        if index == 0 and line == "---":
            in_front_matter = True
            continue
        if line == "---":
            in_front_matter = False
            others.append("")
            continue
        (front if in_front_matter else others).append(line)
    others.append("")
    return "\n".join(front), "\n".join(others)


@dataclass
class EntryFile:
    """One entry: its front-matter fields, body and status history."""

    id: int = 1
    path: Optional[Path] = None
    name: str = ""
    fields: dict[str, str] = field(default_factory=dict)
    content: str = ""
    changes: list[QuakeChange] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str, index_id: int) -> EntryFile:
        """Read an entry from Markdown; text without front matter gives an empty entry."""
        if not text.startswith("---"):
            return cls()

        front_matter, content = _split_markdown(text)
        fields: dict[str, str] = {}
        changes: list[QuakeChange] = []
        try:
            documents = list(yaml.load_all(front_matter, Loader=_FrontMatterLoader))
        except yaml.YAMLError as exc:
            raise QuakeError(f"cannot parse front matter: {exc}") from exc

        for document in documents:
            if not isinstance(document, dict):
                continue
            for key, value in document.items():
                if key == "quake_change":
                    changes = value_to_changes(value)
                    continue
                fields[value_to_string(key)] = value_to_string(value)

        return cls(id=index_id, fields=fields, content=content, changes=changes)

    def _pairs(self) -> list[tuple[str, Any]]:
        pairs: list[tuple[str, Any]] = list(self.fields.items())
        pairs.append(("id", self.id))
        pairs.append(("content", self.content))
        if self.changes:
            pairs.append(("quake_change", [str(change) for change in self.changes]))
        return pairs

    def to_dict(self) -> dict[str, Any]:
        """Fields, then `id`, `content` and, if any, `quake_change`."""
        return dict(self._pairs())

    def to_json(self) -> str:
        """Compact JSON of the entry, keys in field order."""
        items = (
            f"{json.dumps(key, ensure_ascii=False)}:"
            f"{json.dumps(value, ensure_ascii=False, separators=(',', ':'))}"
            for key, value in self._pairs()
        )
        return "{" + ",".join(items) + "}"

    def __str__(self) -> str:
        lines = ["---\n"]
        lines.extend(f"{key}: {value}\n" for key, value in self.fields.items() if key != "content")
        if self.changes:
            lines.append("quake_change:\n")
            lines.extend(f"  - {change}\n" for change in self.changes)
        lines.append("---")
        lines.append(self.content)
        return "".join(lines)

    def header_column(self, index: int) -> tuple[list[str], list[str]]:
        """Field names and a row of values led by the index; `content` is left out."""
        header = [key for key in self.fields if key != "content"]
        column = [str(index)] + [self.fields[key] for key in header]
        return header, column

    def insert_id(self, value: int) -> None:
        self.fields["id"] = str(value)

    def field(self, name: str) -> Optional[str]:
        return self.fields.get(name)

    def add_field(self, key: str, value: str) -> None:
        self.fields[key] = value

    def set_fields(self, fields: dict[str, str]) -> None:
        self.fields = dict(fields)

    def update_field(self, name: str, value: str) -> None:
        """Change an existing field; unknown fields are ignored."""
        if name in self.fields:
            self.fields[name] = value

    def update_content(self, content: str) -> None:
        """Set the body, making sure it starts on a new line after the front matter."""
        if content.startswith("\n") or content.startswith("\r\n"):
            self.content = content
        else:
            self.content = "\n\n" + content

    def change(self, from_state: str, to_state: str) -> None:
        """Record a status change made now."""
        self.changes.append(
            QuakeChange(from_state=from_state, to_state=to_state, changed_date=date_now())
        )