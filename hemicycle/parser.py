import re
from typing import List, Optional, Tuple

from .groups import GroupSize, ParliamentaryGroup
from .lexer import Token, tokenize

_SIZE_RE = re.compile(r'(\d+)(?:-(\d+))?(?:-(\d+))?')
_COLOR_RE = re.compile(r'[0-9A-Fa-f]{6}')

Field = Tuple[str, int]  # (value, col)


def _error(group_no: int, col: int, message: str) -> SyntaxError:
    return SyntaxError(f'[group {group_no}, col {col}] {message}')


def _split_groups(tokens: List[Token]) -> List[List[Field]]:
    groups: List[List[Field]] = [[]]
    for kind, value, col in tokens:
        if kind == 'FIELD':
            groups[-1].append((value, col))
        elif kind == 'COMMA':
            groups.append([])
    return groups


def parse_size(field: Field, group_no: int) -> GroupSize:
    text, col = field
    m = _SIZE_RE.fullmatch(text)
    if not m:
        raise _error(group_no, col, f'invalid group size {text!r}')
    lower, median, total = m.groups()
    try:
        if median is None:
            return GroupSize.simple(int(lower))
        return GroupSize.differentiated(int(lower), int(median), int(total) if total is not None else None)
    except ValueError as exc:
        raise _error(group_no, col, str(exc)) from exc


def parse_colors(field: Field, group_no: int) -> Tuple[int, ...]:
    text, col = field
    colors = []
    offset = 0
    for part in text.split(':'):
        if not _COLOR_RE.fullmatch(part):
            raise _error(group_no, col + offset, f'invalid RGB color {part!r}, expected six hex digits')
        colors.append(int(part, 16))
        offset += len(part) + 1
    return tuple(colors)


def parse_character(field: Field, group_no: int) -> Optional[str]:
    text, col = field
    if not text:
        return None
    if len(text) > 1:
        raise _error(group_no, col, f'group character must be a single character, got {text!r}')
    return text


def parse_group(fields: List[Field], group_no: int) -> ParliamentaryGroup:
    if not 2 <= len(fields) <= 4:
        col = fields[0][1] if fields else 1
        raise _error(group_no, col, f'expected size.color[.name[.character]], got {len(fields)} field(s)')
    size = parse_size(fields[0], group_no)
    colors = parse_colors(fields[1], group_no)
    name = fields[2][0] if len(fields) > 2 and fields[2][0] else None
    character = parse_character(fields[3], group_no) if len(fields) > 3 else None
    return ParliamentaryGroup(size, colors, name, character)


def parse_groups(text: str) -> List[ParliamentaryGroup]:
    """Parse a comma-separated list of ``size.color[.name[.character]]`` groups."""
    if not text.strip():
        raise SyntaxError('[group 1, col 1] no parliamentary groups given')
    tokens = tokenize(text)
    return [parse_group(fields, idx) for idx, fields in enumerate(_split_groups(tokens), start=1)]
