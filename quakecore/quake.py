"""Syntax tree of the Quake DSL and the action and transflow nodes built from it."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Union

from quakecore.errors import QuakeParserError
from quakecore.quake_time import replace_to_unix

_INDEX = re.compile(r"\+?[0-9]+")


@dataclass
class Parameter:
    """A single argument in a DSL call."""

    value: str = ""


@dataclass
class ActionDecl:
    """`object.action(parameters): text`."""

    action: str = ""
    object: str = ""
    parameters: list[Parameter] = field(default_factory=list)
    text: str = ""


@dataclass
class Midway:
    """A flow step that feeds another entry type: `from(...).to('entry')`."""

    sources: list[Parameter] = field(default_factory=list)
    end: str = ""
    filter: str = ""


@dataclass
class Endway:
    """A flow step that ends in a component: `from(...).to(<component>)`."""

    sources: list[Parameter] = field(default_factory=list)
    component: str = ""
    filter: str = ""


TransflowWay = Union[Midway, Endway]


@dataclass
class TransflowDecl:
    """`transflow name { ... }` with its flow steps."""

    name: str = ""
    flows: list[TransflowWay] = field(default_factory=list)


@dataclass
class LayoutComponent:
    """One cell of a layout row."""

    name: str = ""
    is_empty: bool = False
    flow: Optional[str] = None
    size: int = 0


@dataclass
class SimpleLayoutDecl:
    """`layout name { ... }` made of rows of components."""

    name: str = ""
    rows: list[list[LayoutComponent]] = field(default_factory=list)


SourceUnitPart = Union[ActionDecl, TransflowDecl, SimpleLayoutDecl]


@dataclass
class SourceUnit:
    """All declarations of one DSL text, in order."""

    parts: list[SourceUnitPart] = field(default_factory=list)


@dataclass
class Route:
    """One step of a transflow, with the name of the function that runs it."""

    name: str = ""
    sources: list[str] = field(default_factory=list)
    to: str = ""
    filter: str = ""
    is_end_way: bool = False

    def naming(self) -> None:
        """Derive the route function name from its sources and target."""
        self.name = f"from_{'_'.join(self.sources)}_to_{self.to.replace('-', '_')}"


@dataclass
class QuakeActionNode:
    """An action to run on an entry type."""

    object: str = ""
    action: str = ""
    text: str = ""
    parameters: list[str] = field(default_factory=list)

    @classmethod
    def from_unit(cls, unit: SourceUnit) -> QuakeActionNode:
        """First action of the unit; actions are handled one at a time."""
        actions = quake_from_unit(unit).actions
        if not actions:
            raise QuakeParserError("not match action")
        return actions[0]

    def index_from_parameter(self) -> int:
        """The first parameter read as an entry index."""
        if not self.parameters:
            raise QuakeParserError("action has no parameter")
        raw = self.parameters[0]
        if not _INDEX.fullmatch(raw):
            raise ValueError(f"invalid index: {raw!r}")
        return int(raw)


@dataclass
class QuakeTransflowNode:
    """A named transflow and its routes."""

    name: str = ""
    routes: list[Route] = field(default_factory=list)

    @classmethod
    def from_unit(cls, unit: SourceUnit) -> QuakeTransflowNode:
        """First transflow of the unit."""
        transflows = quake_from_unit(unit).transflows
        if not transflows:
            raise QuakeParserError("not match transflows")
        return transflows[0]


@dataclass
class QuakeIt:
    """Actions and transflows gathered from a source unit."""

    actions: list[QuakeActionNode] = field(default_factory=list)
    transflows: list[QuakeTransflowNode] = field(default_factory=list)


def quake_from_unit(unit: SourceUnit) -> QuakeIt:
    """Collect actions and transflows; layouts are not part of the result."""
    result = QuakeIt()
    for part in unit.parts:
        if isinstance(part, ActionDecl):
            result.actions.append(
                QuakeActionNode(
                    object=part.object,
                    action=part.action,
                    text=part.text,
                    parameters=[param.value for param in part.parameters],
                )
            )
        elif isinstance(part, TransflowDecl):
            result.transflows.append(build_transflow(part))
    return result


def build_transflow(decl: TransflowDecl) -> QuakeTransflowNode:
    """Turn a transflow declaration into named routes with timestamp filters."""
    node = QuakeTransflowNode(name=decl.name)
    for way in decl.flows:
        if isinstance(way, Midway):
            target, is_end = way.end, False
        elif isinstance(way, Endway):
            target, is_end = way.component, True
        else:
            raise TypeError(f"unknown flow step: {way!r}")
        route = Route(
            sources=[param.value for param in way.sources],
            to=target,
            filter=replace_to_unix(way.filter),
            is_end_way=is_end,
        )
        route.naming()
        node.routes.append(route)
    return node