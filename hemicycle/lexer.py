from typing import List, Tuple

Token = Tuple[str, str, int]  # (type, value, col)

SYMBOLS = {
    '.': 'DOT',
    ',': 'COMMA',
}

ESCAPE = '\\'


def _field_value(buf: List[Tuple[str, bool]]) -> str:
    # Unescaped whitespace at either end is not part of the field.
    start, end = 0, len(buf)
    while start < end and not buf[start][1] and buf[start][0].isspace():
        start += 1
    while end > start and not buf[end - 1][1] and buf[end - 1][0].isspace():
        end -= 1
    return ''.join(ch for ch, _ in buf[start:end])


def tokenize(s: str) -> List[Token]:
    """Split a compact group encoding into FIELD tokens and separators.

    The result always starts and ends with a FIELD token (possibly empty) and
    alternates fields with DOT/COMMA separators. A backslash makes the next
    character part of the field, including whitespace at its ends.
    """
    tokens: List[Token] = []
    buf: List[Tuple[str, bool]] = []
    start_col = 1
    i = 0
    n = len(s)
    while i < n:
        ch = s[i]
        col = i + 1
        if ch == ESCAPE:
            if i + 1 >= n:
                raise SyntaxError(f'[col {col}] dangling escape character at end of input')
            buf.append((s[i + 1], True))
            i += 2
            continue
        if ch in SYMBOLS:
            tokens.append(('FIELD', _field_value(buf), start_col))
            tokens.append((SYMBOLS[ch], ch, col))
            buf = []
            start_col = col + 1
            i += 1
            continue
        buf.append((ch, False))
        i += 1
    tokens.append(('FIELD', _field_value(buf), start_col))
    return tokens
