"""Wiki-style note references: `[[note]]` links and `![[note]]` embeds."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

_NOTE_LINK_RE = re.compile(
    r"^(?P<file>[^#|]+)??(#(?P<section>.+?))??(\|(?P<label>.+?))??$"
)


@dataclass(frozen=True)
class NoteReference:
    """The parts of a `[[file#section|label]]` reference."""

    file: Optional[str] = None
    section: Optional[str] = None
    label: Optional[str] = None

    @classmethod
    def parse(cls, text: str) -> NoteReference:
        """Split reference text into file, section and label."""
        match = _NOTE_LINK_RE.match(text)
        if match is None:
            raise ValueError(f"note link regex didn't match - bad input? {text!r}")
        return cls(
            file=match.group("file"),
            section=match.group("section"),
            label=match.group("label"),
        )

    def display(self) -> str:
        """Text shown for the reference."""
        return str(self)

    def __str__(self) -> str:
        if self.label is not None:
            return self.label
        if self.file is not None and self.section is not None:
            return f"{self.file} > {self.section}"
        if self.file is not None:
            return self.file
        if self.section is not None:
            return self.section
        raise ValueError("Reference exists without file or section!")


class RefParserState(Enum):
    """States the reference parser moves through."""

    NO_STATE = auto()
    EXPECT_SECOND_OPEN_BRACKET = auto()
    EXPECT_REF_TEXT = auto()
    EXPECT_REF_TEXT_OR_CLOSE_BRACKET = auto()
    EXPECT_FINAL_CLOSE_BRACKET = auto()
    RESETTING = auto()


class RefType(Enum):
    """Whether a reference is a link (`[[note]]`) or an embed (`![[note]]`)."""

    LINK = auto()
    EMBED = auto()


@dataclass
class RefParser:
    """State kept while recognising a reference across several text pieces."""

    state: RefParserState = RefParserState.NO_STATE
    ref_type: Optional[RefType] = None
    ref_text: str = ""

    def transition(self, new_state: RefParserState) -> None:
        self.state = new_state

    def reset(self) -> None:
        self.state = RefParserState.NO_STATE
        self.ref_type = None
        self.ref_text = ""