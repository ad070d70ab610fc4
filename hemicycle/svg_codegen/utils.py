from typing import Dict, List, Optional
from xml.sax.saxutils import escape, quoteattr


def format_float(value: float) -> str:
    """Render ``value`` with at most six decimals and no trailing zeros."""

    text = f"{value:.6f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def format_color(color: int) -> str:
    return f"#{color:06X}"


def _attr_value(value: object) -> str:
    if isinstance(value, float):
        return format_float(value)
    return str(value)


def render_attributes(attrs: Dict[str, object]) -> str:
    parts: List[str] = []
    for key in sorted(attrs):
        value = attrs[key]
        if value is None:
            continue
        parts.append(f"{key}={quoteattr(_attr_value(value))}")
    return " ".join(parts)


def element(tag: str, attrs: Dict[str, object], text: Optional[str] = None, indent: str = "  ") -> str:
    """Render one SVG element on a single line, attributes sorted by name."""

    rendered = render_attributes(attrs)
    if text is None:
        return f"{indent}<{tag} {rendered}/>"
    return f"{indent}<{tag} {rendered}>{escape(text)}</{tag}>"
