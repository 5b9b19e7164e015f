"""Grid layout: canvas size and per-thumbnail placement.

Cells are ``thumbnail_size`` wide and ``thumbnail_size + text_height`` tall,
where ``text_height = font_size + 10`` leaves room for the label. Cells are
separated by ``spacing`` and the whole grid is inset by ``edge_spacing``::

    width  = (S + P) * K - P + 2E
    height = (S + P + T) * rows - P + 2E
    top    = row * (S + P + T) + E
    left   = col * (S + P) + E

with ``row = i // K`` and ``col = i % K``.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from flagpreview.config import PreviewConfig

# Vertical room under each thumbnail beyond the font size itself
LABEL_PADDING = 10


def text_height(font_size: int) -> int:
    return font_size + LABEL_PADDING


@dataclass(frozen=True)
class GridLayout:
    count: int
    per_row: int
    thumbnail_size: int
    spacing: int
    edge_spacing: int
    font_size: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")
        if self.per_row < 1:
            raise ValueError(f"per_row must be at least 1, got {self.per_row}")

    @classmethod
    def for_config(cls, count: int, config: PreviewConfig) -> GridLayout:
        return cls(
            count=count,
            per_row=config.flags_per_row,
            thumbnail_size=config.thumbnail_size,
            spacing=config.spacing,
            edge_spacing=config.edge_spacing,
            font_size=config.font_size,
        )

    @property
    def text_height(self) -> int:
        return text_height(self.font_size)

    @property
    def cell_height(self) -> int:
        return self.thumbnail_size + self.text_height

    @property
    def cell_size(self) -> tuple[int, int]:
        return (self.thumbnail_size, self.cell_height)

    @property
    def rows(self) -> int:
        return math.ceil(self.count / self.per_row)

    @property
    def width(self) -> int:
        return (self.thumbnail_size + self.spacing) * self.per_row - self.spacing + 2 * self.edge_spacing

    @property
    def height(self) -> int:
        row_pitch = self.thumbnail_size + self.spacing + self.text_height
        return row_pitch * self.rows - self.spacing + 2 * self.edge_spacing

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def placement(self, index: int) -> tuple[int, int]:
        """Return ``(top, left)`` of the cell holding thumbnail ``index``."""
        if not 0 <= index < self.count:
            raise IndexError(f"index {index} out of range for {self.count} cell(s)")
        row, col = divmod(index, self.per_row)
        top = row * (self.thumbnail_size + self.spacing + self.text_height) + self.edge_spacing
        left = col * (self.thumbnail_size + self.spacing) + self.edge_spacing
        return top, left

    def placements(self) -> Iterator[tuple[int, int]]:
        for index in range(self.count):
            yield self.placement(index)
