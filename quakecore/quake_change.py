"""Status change records kept in an entry's front matter."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

_STATUS_CHANGE = re.compile(
    r'(?P<time>\d{4}-\d{2}-\d{2}\s\d{2}:\d{2}:\d{2})\s"(?P<source>.*)" -> "(?P<target>.*)"'
)

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}
_HIDDEN_CATEGORIES = {"Cc", "Cf", "Cs", "Co", "Cn", "Zl", "Zp"}


def _debug_quote(text: str) -> str:
    """Quote a string with escapes for quotes, backslashes and control characters."""
    parts = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif unicodedata.category(ch) in _HIDDEN_CATEGORIES:
            parts.append(f"\\u{{{ord(ch):x}}}")
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


@dataclass
class QuakeChange:
    """One status transition with the time it happened."""

    from_state: str
    to_state: str
    changed_date: str

    @classmethod
    def parse(cls, text: str) -> QuakeChange | None:
        """Read a change from `DATE TIME "from" -> "to"`; None if it does not match."""
        match = _STATUS_CHANGE.search(text)
        if match is None:
            return None
        return cls(
            from_state=match.group("source"),
            to_state=match.group("target") or "",
            changed_date=match.group("time"),
        )

    def __str__(self) -> str:
        if not self.to_state:
            return f"{self.changed_date} {_debug_quote(self.from_state)}"
        return (
            f"{self.changed_date} {_debug_quote(self.from_state)}"
            f" -> {_debug_quote(self.to_state)}"
        )