"""File-system helpers for locating entry files."""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import Iterator


def _descend(directory: str) -> Iterator[Path]:
    try:
        entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
    except OSError:
        return
    for entry in entries:
        yield Path(entry.path)
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if is_dir:
            yield from _descend(entry.path)


def filter_by_prefix(path: str | os.PathLike, prefix: str) -> list[Path]:
    """All paths under `path`, itself included, whose name starts with `prefix`."""
    root = Path(path)
    try:
        root.stat()
    except OSError:
        return []

    found = []
    if (root.name or str(root)).startswith(prefix):
        found.append(root)
    if root.is_dir():
        found.extend(p for p in _descend(str(root)) if p.name.startswith(prefix))
    return found


def type_from_md_path(path: str | os.PathLike) -> str | None:
    """Name of the directory holding the file, which is the entry type."""
    pure = PurePath(path)
    parent = pure.parent
    if parent == pure:
        return None
    name = parent.name
    if not name or name == "..":
        return None
    return name