"""A character grid the interface is drawn on, and rectangles to lay it out."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from fractions import Fraction
from typing import List, Optional, Sequence, Union

Constraint = Union[int, Fraction, None]


def _sizes(total: int, constraints: Sequence[Constraint]) -> List[int]:
    """Share ``total`` cells out between constraints.

    An int is a fixed length, a Fraction a share of the total and None
    fills whatever is left.
    """
    if not constraints:
        raise ValueError("at least one constraint is needed")
    sizes: List[int] = []
    fills: List[int] = []
    for index, constraint in enumerate(constraints):
        if constraint is None:
            fills.append(index)
            sizes.append(0)
        elif isinstance(constraint, bool):
            raise TypeError(f"unsupported constraint {constraint!r}")
        elif isinstance(constraint, int):
            if constraint < 0:
                raise ValueError("a length cannot be negative")
            sizes.append(constraint)
        elif isinstance(constraint, Fraction):
            if not 0 <= constraint <= 1:
                raise ValueError("a ratio must lie between 0 and 1")
            sizes.append(int(total * constraint))
        else:
            raise TypeError(f"unsupported constraint {constraint!r}")

    excess = sum(sizes) - total
    for index in reversed(range(len(sizes))):
        if excess <= 0:
            break
        cut = min(excess, sizes[index])
        sizes[index] -= cut
        excess -= cut

    leftover = total - sum(sizes)
    if leftover > 0:
        if fills:
            share, extra = divmod(leftover, len(fills))
            for position, index in enumerate(fills):
                sizes[index] += share + (1 if position >= len(fills) - extra else 0)
        else:
            sizes[-1] += leftover
    return sizes


@dataclass(frozen=True)
class Rect:
    """A rectangle of cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("a rectangle cannot have a negative size")

    def inner(self, horizontal: int, vertical: int) -> "Rect":
        """The rectangle shrunk by a margin on every side; empty if it does not fit."""
        if horizontal < 0 or vertical < 0:
            raise ValueError("a margin cannot be negative")
        if self.width < 2 * horizontal or self.height < 2 * vertical:
            return Rect()
        return Rect(
            self.x + horizontal,
            self.y + vertical,
            self.width - 2 * horizontal,
            self.height - 2 * vertical,
        )

    def split_vertical(self, *constraints: Constraint) -> List["Rect"]:
        """Stack rectangles from top to bottom, one per constraint."""
        result = []
        y = self.y
        for size in _sizes(self.height, constraints):
            result.append(Rect(self.x, y, self.width, size))
            y += size
        return result

    def split_horizontal(self, *constraints: Constraint) -> List["Rect"]:
        """Place rectangles from left to right, one per constraint."""
        result = []
        x = self.x
        for size in _sizes(self.width, constraints):
            result.append(Rect(x, self.y, size, self.height))
            x += size
        return result


_TOP_LEFT, _TOP_RIGHT = "┌", "┐"
_BOTTOM_LEFT, _BOTTOM_RIGHT = "└", "┘"
_HORIZONTAL, _VERTICAL = "─", "│"


class Canvas:
    """A grid of characters, blank to begin with."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("a canvas cannot have a negative size")
        self.width = width
        self.height = height
        self._cells = [[" "] * width for _ in range(height)]

    def write(self, x: int, y: int, text: str, max_width: Optional[int] = None) -> int:
        """Write one line of text, clipped to the canvas; return the cells written."""
        if not 0 <= y < self.height:
            return 0
        limit = self.width - x if max_width is None else min(max_width, self.width - x)
        row = self._cells[y]
        written = 0
        for column, char in enumerate(text[: max(limit, 0)], start=x):
            if column < 0:
                continue
            row[column] = " " if char in "\r\n\t" else char
            written += 1
        return written

    def clear(self, area: Rect) -> None:
        """Blank every cell of ``area``."""
        for y in range(area.y, area.y + area.height):
            self.write(area.x, y, " " * area.width)

    def draw_box(self, area: Rect, title: Optional[str] = None) -> Rect:
        """Draw a border around ``area`` and return the space inside it."""
        if area.width < 2 or area.height < 2:
            return area.inner(1, 1)
        bottom = area.y + area.height - 1
        right = area.x + area.width - 1
        middle = _HORIZONTAL * (area.width - 2)
        self.write(area.x, area.y, _TOP_LEFT + middle + _TOP_RIGHT)
        self.write(area.x, bottom, _BOTTOM_LEFT + middle + _BOTTOM_RIGHT)
        for y in range(area.y + 1, bottom):
            self.write(area.x, y, _VERTICAL)
            self.write(right, y, _VERTICAL)
        if title:
            self.write(area.x + 1, area.y, title, area.width - 2)
        return area.inner(1, 1)

    def write_wrapped(self, area: Rect, text: str) -> int:
        """Write text wrapped at word boundaries inside ``area``; return rows used."""
        if area.width == 0 or area.height == 0:
            return 0
        rows: List[str] = []
        for paragraph in text.split("\n"):
            rows.extend(textwrap.wrap(paragraph, width=area.width, replace_whitespace=False) or [""])
        rows = rows[: area.height]
        for offset, row in enumerate(rows):
            self.write(area.x, area.y + offset, row, area.width)
        return len(rows)

    def write_centered(self, area: Rect, text: str) -> int:
        """Write each line of text centred horizontally in ``area``; return rows used."""
        rows = text.splitlines()[: area.height]
        for offset, row in enumerate(rows):
            indent = max((area.width - len(row)) // 2, 0)
            self.write(area.x + indent, area.y + offset, row, area.width - indent)
        return len(rows)

    def lines(self) -> List[str]:
        """The rows of the canvas with trailing blanks removed."""
        return ["".join(row).rstrip() for row in self._cells]