from typing import Iterable, Optional

from .groups import ParliamentaryGroup
from .lexer import ESCAPE, SYMBOLS


def _escape(text: Optional[str]) -> str:
    if not text:
        return ""
    specials = set(SYMBOLS) | {ESCAPE}
    # Whitespace at either end would be stripped by the lexer unless escaped.
    lead = len(text) - len(text.lstrip())
    trail = len(text.rstrip())
    return "".join(
        ESCAPE + ch if ch in specials or i < lead or i >= trail else ch for i, ch in enumerate(text)
    )


def format_color(color: int) -> str:
    return f"{color:06X}"


def format_group(group: ParliamentaryGroup) -> str:
    """Return the compact encoding of ``group``, dropping empty trailing fields."""

    fields = [
        str(group.size),
        ":".join(format_color(c) for c in group.colors),
        _escape(group.name),
        _escape(group.character),
    ]
    while len(fields) > 2 and not fields[-1]:
        fields.pop()
    return ".".join(fields)


def print_groups(groups: Iterable[ParliamentaryGroup]) -> str:
    return ",".join(format_group(group) for group in groups)
