"""Locations of the files that belong to an entry type."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENTRIES_DEFINE = "entries-define.yaml"
ENTRIES_CSV = "entries.csv"
ENTRY_NODE_INFO = "entry-node-info.yaml"
QUAKE_DIR = "_quake"
TRANSFUNCS = "transfuncs.js"
TRANSFLOW = "transflows.yaml"


@dataclass
class EntryPaths:
    """Paths used for one entry type inside a workspace."""

    base: Path
    entry_node_info: Path
    entries_define: Path
    entries_csv: Path
    transflows: Path

    @classmethod
    def init(cls, path: str | os.PathLike, object_name: str) -> EntryPaths:
        """Paths for `object_name` under `path`; the type directory is created if possible."""
        root = Path(path)
        obj_dir = root / object_name
        try:
            obj_dir.mkdir()
        except OSError:
            pass

        return cls(
            base=obj_dir,
            entry_node_info=obj_dir / ENTRY_NODE_INFO,
            entries_define=root / ENTRIES_DEFINE,
            entries_csv=obj_dir / ENTRIES_CSV,
            transflows=root / TRANSFLOW,
        )