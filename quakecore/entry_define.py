"""Entry type definitions as declared in `entries-define.yaml`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import yaml

from quakecore.errors import QuakeError
from quakecore.meta import MetaField, entry_define_fields
from quakecore.quake_time import date_now

_NULLS = {"", "~", "null", "Null", "NULL"}


def _is_null(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value in _NULLS)


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


def _require(data: dict, key: str) -> Any:
    if key not in data:
        raise QuakeError(f"missing field `{key}`")
    return data[key]


@dataclass
class FlowField:
    """A field whose values move through a workflow, such as a kanban status."""

    field: str
    items: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> FlowField:
        if not isinstance(data, dict):
            raise QuakeError("flow definition must be a mapping")
        return cls(
            field=_text(_require(data, "field"), "field"),
            items=_text_list(_require(data, "items"), "items"),
        )

    def to_dict(self) -> dict:
        return {"field": self.field, "items": list(self.items)}


@dataclass
class EntryState(FlowField):
    """A field with a fixed set of values usable as a filter condition."""


@dataclass
class EntryDefine:
    """Declaration of one entry type: its fields, actions, flows and states."""

    entry_type: str = ""
    display: str = ""
    fields: list[dict[str, str]] = field(default_factory=list)
    actions: Optional[list[str]] = None
    flows: Optional[list[FlowField]] = None
    states: Optional[list[EntryState]] = None

    @classmethod
    def from_dict(cls, data: Any) -> EntryDefine:
        """Build a definition from a mapping with `type`, `display` and `fields`."""
        if not isinstance(data, dict):
            raise QuakeError("entry definition must be a mapping")

        raw_fields = _require(data, "fields")
        if not isinstance(raw_fields, list):
            raise QuakeError("invalid type for `fields`, expected sequence")
        fields_list = []
        for item in raw_fields:
            if not isinstance(item, dict):
                raise QuakeError("each item of `fields` must be a mapping")
            fields_list.append(
                {_text(key, "fields"): _text(value, "fields") for key, value in item.items()}
            )

        actions = data.get("actions")
        flows = data.get("flows")
        states = data.get("states")
        if not _is_null(flows) and not isinstance(flows, list):
            raise QuakeError("invalid type for `flows`, expected sequence")
        if not _is_null(states) and not isinstance(states, list):
            raise QuakeError("invalid type for `states`, expected sequence")

        return cls(
            entry_type=_text(_require(data, "type"), "type"),
            display=_text(_require(data, "display"), "display"),
            fields=fields_list,
            actions=None if _is_null(actions) else _text_list(actions, "actions"),
            flows=None if _is_null(flows) else [FlowField.from_dict(f) for f in flows],
            states=None if _is_null(states) else [EntryState.from_dict(s) for s in states],
        )

    def to_dict(self) -> dict:
        """Mapping in the YAML layout; absent optional parts are left out."""
        result: dict[str, Any] = {
            "type": self.entry_type,
            "display": self.display,
            "fields": [dict(item) for item in self.fields],
        }
        if self.actions is not None:
            result["actions"] = list(self.actions)
        if self.flows is not None:
            result["flows"] = [flow.to_dict() for flow in self.flows]
        if self.states is not None:
            result["states"] = [state.to_dict() for state in self.states]
        return result

    def to_field_type(self) -> dict[str, MetaField]:
        """Declared fields as name to MetaField, in declaration order."""
        merged: dict[str, str] = {}
        for item in self.fields:
            merged.update(item)
        return entry_define_fields(merged)

    def create_flows_and_states(self) -> dict[str, str]:
        """Default value of each flow and state field: its first item."""
        result: dict[str, str] = {}
        for group in (self.flows or [], self.states or []):
            for flow in group:
                if not flow.items:
                    raise QuakeError(f"`{flow.field}` has no items")
                result[flow.field] = flow.items[0]
        return result

    def create_title_and_date(self, title: str) -> dict[str, str]:
        """Title plus created and updated dates set to now."""
        now = date_now()
        return {"title": title, "created_date": now, "updated_date": now}

    def create_default_fields(self, title: str) -> dict[str, str]:
        """All declared fields filled with defaults for a new entry."""
        result = self.merge_to_fields(self.create_title_and_date(title))
        result.update(self.create_flows_and_states())
        return result

    def merge_to_fields(self, values: dict[str, str]) -> dict[str, str]:
        """Declared fields first, taking values from `values`, then the remaining values."""
        result: dict[str, str] = {}
        for item in self.fields:
            for key in item:
                result[key] = values.get(key, "")
        result.update(values)
        return result


def parse_entry_defines(text: str) -> list[EntryDefine]:
    """Parse a YAML list of entry definitions."""
    try:
        data = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise QuakeError(f"cannot parse entry defines: {exc}") from exc
    if not isinstance(data, list):
        raise QuakeError("entry defines must be a sequence")
    return [EntryDefine.from_dict(item) for item in data]