"""Rewrite wiki references in Markdown into ordinary inline links."""

from __future__ import annotations

import re
from typing import Iterator

from quakecore.references import NoteReference, RefParser, RefParserState, RefType

_FENCE_OPEN = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})")
_INLINE_PATTERN = re.compile(
    r"(?P<code>(?P<ticks>`+)(?s:.*?)(?<!`)(?P=ticks)(?!`))"
    r"|(?P<escape>\\.)"
    r"|(?P<bracket>!\[|\[|\])"
    r"|(?P<newline>\r?\n)"
)


def make_link_to_file(reference: NoteReference) -> str:
    """Markdown inline link for a reference."""
    return f"[{reference.display()}]({reference.file or ''})"


def embed_file(link_text: str) -> str:
    """Markdown for an embed; embeds are rendered as links."""
    return make_link_to_file(NoteReference.parse(link_text))


def _pieces(text: str) -> Iterator[tuple[bool, str]]:
    """Yield (is_text, piece) pairs; code spans and line breaks are not text."""
    position = 0
    for match in _INLINE_PATTERN.finditer(text):
        if match.start() > position:
            yield True, text[position:match.start()]
        if match.group("code") is not None or match.group("newline") is not None:
            yield False, match.group(0)
        else:
            yield True, match.group(0)
        position = match.end()
    if position < len(text):
        yield True, text[position:]


def _rewrite_inline(text: str) -> str:
    parser = RefParser()
    out: list[str] = []
    buffer: list[str] = []

    for is_text, piece in _pieces(text):
        if parser.state is RefParserState.RESETTING:
            out.extend(buffer)
            buffer.clear()
            parser.reset()
        buffer.append(piece)

        state = parser.state
        if state is RefParserState.NO_STATE:
            if is_text and piece == "![":
                parser.ref_type = RefType.EMBED
                parser.transition(RefParserState.EXPECT_SECOND_OPEN_BRACKET)
            elif is_text and piece == "[":
                parser.ref_type = RefType.LINK
                parser.transition(RefParserState.EXPECT_SECOND_OPEN_BRACKET)
            else:
                out.append(piece)
                buffer.clear()
        elif state is RefParserState.EXPECT_SECOND_OPEN_BRACKET:
            if is_text and piece == "[":
                parser.transition(RefParserState.EXPECT_REF_TEXT)
            else:
                parser.transition(RefParserState.RESETTING)
        elif state is RefParserState.EXPECT_REF_TEXT:
            if is_text and piece == "]":
                parser.transition(RefParserState.RESETTING)
            elif is_text:
                parser.ref_text += piece
                parser.transition(RefParserState.EXPECT_REF_TEXT_OR_CLOSE_BRACKET)
            else:
                parser.transition(RefParserState.RESETTING)
        elif state is RefParserState.EXPECT_REF_TEXT_OR_CLOSE_BRACKET:
            if is_text and piece == "]":
                parser.transition(RefParserState.EXPECT_FINAL_CLOSE_BRACKET)
            elif is_text:
                parser.ref_text += piece
            else:
                parser.transition(RefParserState.RESETTING)
        elif state is RefParserState.EXPECT_FINAL_CLOSE_BRACKET:
            if is_text and piece == "]":
                if parser.ref_type is RefType.LINK:
                    out.append(make_link_to_file(NoteReference.parse(parser.ref_text)))
                elif parser.ref_type is RefType.EMBED:
                    out.append(embed_file(parser.ref_text))
                else:
                    raise RuntimeError("reference closed without a reference type")
                buffer.clear()
                parser.transition(RefParserState.RESETTING)
            else:
                parser.transition(RefParserState.RESETTING)

    out.extend(buffer)
    return "".join(out)


def _segments(content: str) -> Iterator[tuple[bool, str]]:
    """Yield (is_prose, chunk), separating fenced code blocks from the rest."""
    prose: list[str] = []
    fence: str | None = None
    code: list[str] = []

    for line in content.splitlines(keepends=True):
        if fence is None:
            opener = _FENCE_OPEN.match(line)
            if opener:
                if prose:
                    yield True, "".join(prose)
                    prose = []
                fence = opener.group("fence")
                code = [line]
            else:
                prose.append(line)
        else:
            code.append(line)
            stripped = line.strip()
            if (
                stripped
                and set(stripped) == {fence[0]}
                and len(stripped) >= len(fence)
                and len(line) - len(line.lstrip(" ")) <= 3
            ):
                yield False, "".join(code)
                fence = None
                code = []

    if fence is not None:
        yield False, "".join(code)
    if prose:
        yield True, "".join(prose)


def transform(content: str) -> str:
    """Turn `[[note]]` and `![[note]]` references into `[label](file)` links.

    Code spans and fenced code blocks are left untouched.
    """
    return "".join(
        _rewrite_inline(chunk) if is_prose else chunk
        for is_prose, chunk in _segments(content)
    )