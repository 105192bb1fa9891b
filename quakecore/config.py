"""Workspace configuration stored in `.quake`."""

from __future__ import annotations

from dataclasses import dataclass, fields

import yaml

from quakecore.errors import QuakeError


@dataclass
class QuakeConfig:
    """Settings loaded from the `.quake` file."""

    editor: str = ""
    workspace: str = ""
    search_url: str = ""
    server_location: str = ""
    port: int = 0


def load_config(text: str) -> QuakeConfig:
    """Parse YAML text into a QuakeConfig; every field is required."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise QuakeError(f"cannot parse config: {exc}") from exc

    if not isinstance(data, dict):
        raise QuakeError("config must be a mapping")

    values = {}
    for spec in fields(QuakeConfig):
        if spec.name not in data:
            raise QuakeError(f"missing field `{spec.name}`")
        value = data[spec.name]
        if spec.name == "port":
            if isinstance(value, bool) or not isinstance(value, int):
                raise QuakeError("invalid type for `port`, expected integer")
            if not 0 <= value < 2**32:
                raise QuakeError("`port` out of range")
        elif not isinstance(value, str):
            raise QuakeError(f"invalid type for `{spec.name}`, expected string")
        values[spec.name] = value

    return QuakeConfig(**values)