"""Transflows: how entry data is fetched, transformed and handed to a component."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import yaml

from quakecore.entry_define import EntryDefine
from quakecore.errors import QuakeError
from quakecore.quake import QuakeTransflowNode, Route

_NULLS = {"", "~", "null", "Null", "NULL"}


def _is_null(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value in _NULLS)


def _require(data: Any, key: str) -> Any:
    if not isinstance(data, dict):
        raise QuakeError("expected a mapping")
    if key not in data:
        raise QuakeError(f"missing field `{key}`")
    return data[key]


def _text(value: Any, what: str) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise QuakeError(f"invalid type for `{what}`, expected string")


def _text_list(value: Any, what: str) -> list[str]:
    if not isinstance(value, list):
        raise QuakeError(f"invalid type for `{what}`, expected sequence")
    return [_text(item, what) for item in value]


@dataclass
class Mapping:
    """Field renaming for one entry type: `source[i]` becomes `target[i]`."""

    entry: str
    source: list[str] = field(default_factory=list)
    target: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Mapping:
        return cls(
            entry=_text(_require(data, "entry"), "entry"),
            source=_text_list(_require(data, "source"), "source"),
            target=_text_list(_require(data, "target"), "target"),
        )

    def to_dict(self) -> dict:
        return {"entry": self.entry, "source": list(self.source), "target": list(self.target)}


@dataclass
class Flow:
    """One data step: read `sources`, optionally map fields, deliver to `to`."""

    name: str = ""
    sources: list[str] = field(default_factory=list)
    to: str = ""
    mappings: Optional[list[Mapping]] = None
    filter: str = ""

    @classmethod
    def from_route(cls, route: Route) -> Flow:
        return cls(
            name=route.name,
            sources=list(route.sources),
            to=route.to,
            mappings=None,
            filter=route.filter,
        )

    @classmethod
    def from_dict(cls, data: Any) -> Flow:
        raw_map = data.get("map") if isinstance(data, dict) else None
        if _is_null(raw_map):
            mappings = None
        elif isinstance(raw_map, list):
            mappings = [Mapping.from_dict(item) for item in raw_map]
        else:
            raise QuakeError("invalid type for `map`, expected sequence")
        return cls(
            name=_text(_require(data, "name"), "name"),
            sources=_text_list(_require(data, "from"), "from"),
            to=_text(_require(data, "to"), "to"),
            mappings=mappings,
            filter=_text(_require(data, "filter"), "filter"),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "from": list(self.sources),
            "to": self.to,
            "map": None if self.mappings is None else [m.to_dict() for m in self.mappings],
            "filter": self.filter,
        }


@dataclass
class Transflow:
    """A named data process flow ending in a target component."""

    name: str = ""
    defines_map: Optional[dict[str, EntryDefine]] = None
    flows: list[Flow] = field(default_factory=list)
    target: str = ""

    @classmethod
    def from_node(cls, defines: list[EntryDefine], node: QuakeTransflowNode) -> Transflow:
        """Build from a transflow node, keeping the definitions of the entry types it uses."""
        transflow = cls(name=node.name)
        by_type = {define.entry_type: define for define in defines}

        used: dict[str, EntryDefine] = {}
        for route in node.routes:
            if route.is_end_way:
                transflow.target = route.to
            elif route.to in by_type:
                used[route.to] = by_type[route.to]
            for source in route.sources:
                if source in by_type:
                    used[source] = by_type[source]
        transflow.defines_map = used

        transflow.flows = [Flow.from_route(route) for route in node.routes]
        return transflow

    @classmethod
    def from_dict(cls, data: Any) -> Transflow:
        raw_defines = data.get("defines_map") if isinstance(data, dict) else None
        if _is_null(raw_defines):
            defines_map = None
        elif isinstance(raw_defines, dict):
            defines_map = {
                _text(key, "defines_map"): EntryDefine.from_dict(value)
                for key, value in raw_defines.items()
            }
        else:
            raise QuakeError("invalid type for `defines_map`, expected mapping")

        raw_flows = _require(data, "flows")
        if not isinstance(raw_flows, list):
            raise QuakeError("invalid type for `flows`, expected sequence")
        return cls(
            name=_text(_require(data, "name"), "name"),
            defines_map=defines_map,
            flows=[Flow.from_dict(item) for item in raw_flows],
            target=_text(_require(data, "target"), "target"),
        )

    def to_dict(self) -> dict:
        """Serialisable form; the entry definitions are left out."""
        return {
            "name": self.name,
            "flows": [flow.to_dict() for flow in self.flows],
            "target": self.target,
        }


def load_transflows(text: str) -> list[Transflow]:
    """Parse a YAML list of transflows, as stored in `transflows.yaml`."""
    try:
        data = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise QuakeError(f"cannot parse transflows: {exc}") from exc
    if not isinstance(data, list):
        raise QuakeError("transflows must be a sequence")
    return [Transflow.from_dict(item) for item in data]