"""Terrain map: a passability bitmap laid over world meters."""

from __future__ import annotations

import math

# A spot is adjacent when it is clear at its radius but touches terrain
# within this factor of it.
ADJACENCY_FACTOR = 1.1


class TerrainMap:
    """2D passability grid backed by a flat list. Row 0 is the bottom row."""

    __slots__ = ("width", "height", "columns", "rows", "_cell_w", "_cell_h", "_cells")

    def __init__(self, width: float, height: float, columns: int, rows: int, passable: bool = True) -> None:
        self.width = width
        self.height = height
        self.columns = columns
        self.rows = rows
        self._cell_w = width / columns
        self._cell_h = height / rows
        self._cells: list[bool] = [passable] * (columns * rows)

    @classmethod
    def from_rows(cls, width: float, height: float, rows: list[str]) -> TerrainMap:
        """Build from text rows listed top to bottom; ``#`` marks solid ground."""
        terrain = cls(width, height, len(rows[0]), len(rows))
        for i, line in enumerate(rows):
            row = len(rows) - 1 - i
            for col, ch in enumerate(line):
                terrain.set_cell(col, row, ch != "#")
        return terrain

    # -- cell access --

    def _idx(self, col: int, row: int) -> int:
        return row * self.columns + col

    def in_bounds_cell(self, col: int, row: int) -> bool:
        return 0 <= col < self.columns and 0 <= row < self.rows

    def cell(self, col: int, row: int) -> bool:
        """Passability of a cell; cells outside the map are open air."""
        if not self.in_bounds_cell(col, row):
            return True
        return self._cells[self._idx(col, row)]

    def set_cell(self, col: int, row: int, passable: bool) -> None:
        if self.in_bounds_cell(col, row):
            self._cells[self._idx(col, row)] = passable

    def cell_at(self, x: float, y: float) -> tuple[int, int]:
        return int(math.floor(x / self._cell_w)), int(math.floor(y / self._cell_h))

    def fill_column(self, col: int, ground_rows: int) -> None:
        """Make the bottom *ground_rows* cells of *col* solid."""
        for row in range(self.rows):
            self.set_cell(col, row, row >= ground_rows)

    # -- circle queries --

    def is_passable(self, x: float, y: float, radius: float) -> bool:
        """True when every cell whose center lies inside the circle is open."""
        c0, r0 = self.cell_at(x - radius, y - radius)
        c1, r1 = self.cell_at(x + radius, y + radius)
        r_sq = radius * radius
        for row in range(r0, r1 + 1):
            cy = (row + 0.5) * self._cell_h - y
            for col in range(c0, c1 + 1):
                cx = (col + 0.5) * self._cell_w - x
                if cx * cx + cy * cy <= r_sq and not self.cell(col, row):
                    return False
        # Circles smaller than a cell may contain no cell center at all
        return self.cell(*self.cell_at(x, y))

    def is_adjacent(self, x: float, y: float, radius: float) -> bool:
        return self.is_passable(x, y, radius) and not self.is_passable(x, y, radius * ADJACENCY_FACTOR)

    def ground_height(self, x: float) -> float:
        """Top of the highest solid cell in the column under *x*, or 0."""
        col, _ = self.cell_at(x, 0.0)
        for row in range(self.rows - 1, -1, -1):
            if not self.cell(col, row):
                return (row + 1) * self._cell_h
        return 0.0
