"""Group sizes and parliamentary groups."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple


class GroupSizeKind(Enum):
    SIMPLE = "simple"
    DIFFERENTIATED = "differentiated"


@dataclass(frozen=True)
class GroupSize:
    """Seat count of a group, either exact or a (lower bound, median, total) interval.

    A simple size stores its single value in all three bounds, so ``full_size``
    is ``total`` for both variants. Consumers branch on ``kind``.
    """

    kind: GroupSizeKind
    lower_bound: int
    median: int
    total: int

    def __post_init__(self) -> None:
        if not 0 <= self.lower_bound <= self.median <= self.total:
            raise ValueError(
                f"group size must satisfy 0 <= lower bound <= median <= total, "
                f"got ({self.lower_bound}, {self.median}, {self.total})"
            )
        if self.kind is GroupSizeKind.SIMPLE and not self.lower_bound == self.median == self.total:
            raise ValueError("a simple group size has a single value")

    @classmethod
    def simple(cls, size: int) -> "GroupSize":
        return cls(GroupSizeKind.SIMPLE, size, size, size)

    @classmethod
    def differentiated(cls, lower_bound: int, median: int, total: Optional[int] = None) -> "GroupSize":
        """Build an interval size; ``total`` defaults to ``median``."""

        return cls(
            GroupSizeKind.DIFFERENTIATED,
            lower_bound,
            median,
            median if total is None else total,
        )

    @property
    def full_size(self) -> int:
        return self.total

    @property
    def size(self) -> int:
        if self.kind is not GroupSizeKind.SIMPLE:
            raise AttributeError("only simple group sizes have a single size")
        return self.total

    @property
    def is_uncertain(self) -> bool:
        """Return ``True`` when the size yields likely or unlikely seats."""

        return self.kind is GroupSizeKind.DIFFERENTIATED and self.total > self.lower_bound

    def __str__(self) -> str:
        if self.kind is GroupSizeKind.SIMPLE:
            return str(self.total)
        return f"{self.lower_bound}-{self.median}-{self.total}"


@dataclass(frozen=True)
class ParliamentaryGroup:
    """A group to be seated, with its display attributes.

    ``colors`` holds 0xRRGGBB integers; the first one is the main colour.
    """

    size: GroupSize
    colors: Tuple[int, ...]
    name: Optional[str] = None
    character: Optional[str] = None

    def __post_init__(self) -> None:
        colors = tuple(self.colors)
        if not colors:
            raise ValueError("a parliamentary group needs at least one color")
        for color in colors:
            if not 0 <= color <= 0xFFFFFF:
                raise ValueError(f"color out of RGB range: {color!r}")
        object.__setattr__(self, "colors", colors)
        # An empty name or character is the same as none at all.
        if self.name == "":
            object.__setattr__(self, "name", None)
        if self.character == "":
            object.__setattr__(self, "character", None)
        if self.character is not None and len(self.character) > 1:
            raise ValueError(f"group character must be a single character, got {self.character!r}")

    @classmethod
    def of(
        cls,
        size: GroupSize,
        *colors: int,
        name: Optional[str] = None,
        character: Optional[str] = None,
    ) -> "ParliamentaryGroup":
        return cls(size, tuple(colors), name, character)

    @property
    def color(self) -> int:
        return self.colors[0]

    @property
    def full_size(self) -> int:
        return self.size.full_size


def total_seats(groups: Sequence[ParliamentaryGroup]) -> int:
    return sum(group.full_size for group in groups)


__all__ = [
    "GroupSizeKind",
    "GroupSize",
    "ParliamentaryGroup",
    "total_seats",
]
