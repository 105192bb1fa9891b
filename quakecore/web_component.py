"""Description of a web component: its input attributes and output events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional


@dataclass
class Attribute:
    """An input attribute, such as `data` in `<quake-dashboard data="">`."""

    name: str
    type_name: Optional[str] = None


EventValue = Attribute


@dataclass
class EventListener:
    """An event the component emits; `event_data` describes `event.detail`."""

    event_name: str
    event_data: Optional[list[EventValue]] = None


@dataclass
class WebComponentElement:
    """A custom element such as `<quake-dashboard>`."""

    id: str = ""
    attributes: list[Attribute] = field(default_factory=list)
    events: list[EventListener] = field(default_factory=list)

    @classmethod
    def from_js(
        cls, element: str, attributes: Iterable[str], events: Iterable[str]
    ) -> WebComponentElement:
        """Build from an element name and lists of attribute and event names."""
        return cls(
            id=element,
            attributes=[Attribute(name=name) for name in attributes],
            events=[EventListener(event_name=name) for name in events],
        )

    def add_event(self, event_name: str) -> None:
        self.events.append(EventListener(event_name=event_name))