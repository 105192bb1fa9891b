"""Per-type counter of the last entry index used."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from quakecore.errors import QuakeError


@dataclass
class EntryNodeInfo:
    """Index of the last entry created for a type."""

    index: int = 0

    def inc(self) -> None:
        self.index += 1


def entry_info_from_path(entry_info_path: str | os.PathLike) -> EntryNodeInfo:
    """Load the node info, creating the file with a zero index if it is missing."""
    path = Path(entry_info_path)
    if not path.exists():
        info = EntryNodeInfo()
        path.write_text(yaml.safe_dump({"index": info.index}), encoding="utf-8")
        return info

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise QuakeError(f"cannot parse {path}: {exc}") from exc
    if not isinstance(data, dict) or "index" not in data:
        raise QuakeError("missing field `index`")
    index = data["index"]
    if isinstance(index, bool) or not isinstance(index, int) or index < 0:
        raise QuakeError("invalid value for `index`, expected non-negative integer")
    return EntryNodeInfo(index=index)