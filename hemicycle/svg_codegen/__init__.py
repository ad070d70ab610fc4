"""Hemicycle → SVG code generation helpers."""

from .generator import (
    copyright_text,
    generate_layout_svg,
    generate_seating_plan_svg,
)

__all__ = [
    "copyright_text",
    "generate_layout_svg",
    "generate_seating_plan_svg",
]
