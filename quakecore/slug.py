"""Turn titles into file-name slugs."""

import re

_SPECIAL = re.compile(r"[\s_-]+")
_LEADING = re.compile(r"^-+|-+$")

_REPLACEMENTS = (
    (",", ""),
    ("。", ""),
    (" ", "-"),
    ("?", "-"),
    ("#", "-"),
    (":", "-"),
    ("-/-", ""),
    ("/", ""),
    ("——", "-"),
)


def slugify(text: str) -> str:
    """Lower-case the text and collapse separators into single hyphens."""
    result = _SPECIAL.sub("-", text.strip().lower())
    result = _LEADING.sub("", result)
    for old, new in _REPLACEMENTS:
        result = result.replace(old, new)
    return result