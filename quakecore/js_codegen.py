"""JavaScript code generation for transflows."""

from __future__ import annotations

from typing import Iterable, Optional

from quakecore.errors import QuakeError
from quakecore.flow import Flow, Mapping, Transflow
from quakecore.quake_change import _debug_quote
from quakecore.web_component import EventListener, WebComponentElement


def _params(flow: Flow) -> str:
    if not flow.sources:
        raise QuakeError(f"flow `{flow.name}` has no sources")
    return ", ".join(f"{source}s" for source in flow.sources)


def _query(item: str, filter_expr: str) -> str:
    options = ""
    if filter_expr:
        options = f", '', {{\n    filter: '{filter_expr}'\n  }}"
    return f"  let {item}s = await Quake.query('{item}'{options});\n\n"


def _data_attribute(flow: Flow, params: str) -> str:
    return (
        f"  let data = {flow.name}({params});\n"
        "  el.setAttribute('data', JSON.stringify(data));\n\n"
    )


def _events(events: Iterable[EventListener]) -> str:
    return "".join(
        f"  el.addEventListener('{event.event_name}', function (event) {{\n"
        "    let data = event.detail;\n"
        "    console.log(data);\n"
        "  });\n\n"
        for event in events
    )


def _mapping_object(mapping: Mapping) -> str:
    parts = [f"{{\n      type: {_debug_quote(mapping.entry)},"]
    if len(mapping.source) == len(mapping.target):
        lines = [
            f"\n      {target}: {mapping.entry}.{source}"
            for source, target in zip(mapping.source, mapping.target)
        ]
        parts.append(",".join(lines))
    parts.append("\n    }")
    return "".join(parts)


def _obj_mapping(mappings: Iterable[Mapping]) -> list[str]:
    return [
        f"  for (let {m.entry} of {m.entry}s) {{\n    results.push("
        f"{_mapping_object(m)})\n  }}\n"
        for m in mappings
    ]


def _obj_concat(entries: Iterable[str]) -> list[str]:
    return [f"  results = results.concat({entry}s);\n" for entry in entries]


def gen_element(trans: Transflow, element: Optional[WebComponentElement] = None) -> list[str]:
    """One `tl_<name>` function per flow that builds and fills the target element."""
    functions = []
    for flow in trans.flows:
        parts = [
            f"const tl_{trans.name} = async (context, commands) => {{\n",
            f"  const el = document.createElement('{flow.to}');\n",
            "\n",
        ]
        parts.extend(_query(item, flow.filter) for item in flow.sources)
        parts.append(_data_attribute(flow, _params(flow)))
        if element is not None:
            parts.append(_events(element.events))
        parts.append("  return el;\n")
        parts.append("}\n")
        functions.append("".join(parts))
    return functions


def gen_transform(trans: Transflow) -> list[str]:
    """One transform function per flow, merging or mapping its source lists."""
    functions = []
    for flow in trans.flows:
        params = _params(flow)
        parts = [f"function {flow.name}({params}) {{\n", "  let results = [];\n"]
        if flow.mappings is not None:
            parts.append("\n".join(_obj_mapping(flow.mappings)))
        else:
            parts.append("".join(_obj_concat(flow.sources)))
        parts.append("  return results;\n")
        parts.append("}\n")
        functions.append("".join(parts))
    return functions