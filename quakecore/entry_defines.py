"""The collection of entry definitions of a workspace."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from quakecore.entry_define import EntryDefine, parse_entry_defines
from quakecore.errors import QuakeError


def _defines_from_file(path: str | os.PathLike) -> list[EntryDefine]:
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise QuakeError(f"cannot parse {path}: {exc}") from exc
    if not isinstance(data, dict) or "entries" not in data:
        raise QuakeError(f"missing field `entries` in {path}")
    entries = data["entries"]
    if not isinstance(entries, list):
        raise QuakeError("invalid type for `entries`, expected sequence")
    return [EntryDefine.from_dict(item) for item in entries]


@dataclass
class EntryDefines:
    """All entry definitions, in file order."""

    entries: list[EntryDefine] = field(default_factory=list)

    @classmethod
    def from_yaml(cls, text: str) -> EntryDefines:
        """Read a bare YAML list of definitions."""
        return cls(entries=parse_entry_defines(text))

    @classmethod
    def from_path(cls, path: str | os.PathLike) -> EntryDefines:
        """Read a file holding a mapping with an `entries` list."""
        return cls(entries=_defines_from_file(path))

    def find(self, target_entry: str) -> Optional[EntryDefine]:
        """First definition of the given entry type, if any."""
        return next((d for d in self.entries if d.entry_type == target_entry), None)


def entries_define_from_path(config_path: str | os.PathLike) -> list[EntryDefine]:
    """Definitions listed under `entries` in the given file."""
    return _defines_from_file(config_path)