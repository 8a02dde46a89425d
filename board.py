from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple
from rules import CONWAY

Grid = Tuple[Tuple[bool, ...], ...]

# (dx, dy) in the order get_neighbors reports them.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class InvalidDimensions(ValueError):
    """Raised for a grid with no rows, no columns, or rows of unequal length."""


@dataclass(frozen=True)
class Board:
    """
    One generation of Conway's Game of Life.

    `cells` is row-major: cells[y][x], `height` rows of `width` cells each.
    The input grid is copied into a tuple of tuples, so a Board never shares
    mutable storage with its caller or with other generations.

    With `wrap` enabled the grid is a torus; without it every coordinate
    outside [0, width) x [0, height) reads as dead.
    """
    cells: Grid
    wrap: bool = True

    def __post_init__(self) -> None:
        rows = tuple(tuple(bool(c) for c in row) for row in self.cells)
        if len(rows) == 0 or len(rows[0]) == 0:
            raise InvalidDimensions(
                f"board must be at least 1x1, got "
                f"{len(rows[0]) if rows else 0}x{len(rows)}"
            )
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise InvalidDimensions(
                    f"row {y} has {len(row)} cells, expected {width}"
                )
        object.__setattr__(self, "cells", rows)
        object.__setattr__(self, "wrap", bool(self.wrap))

    @classmethod
    def from_alive(
        cls,
        width: int,
        height: int,
        alive: Iterable[Tuple[int, int]],
        wrap: bool = True,
    ) -> "Board":
        """
        Build a board of the given size with exactly the listed (x, y) cells alive.
        """
        if width <= 0 or height <= 0:
            raise InvalidDimensions(f"board must be at least 1x1, got {width}x{height}")
        grid = [[False] * width for _ in range(height)]
        for x, y in alive:
            if not (0 <= x < width and 0 <= y < height):
                raise ValueError(f"cell ({x}, {y}) lies outside a {width}x{height} board")
            grid[y][x] = True
        return cls(grid, wrap=wrap)

    @property
    def width(self) -> int:
        return len(self.cells[0])

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def population(self) -> int:
        return sum(sum(row) for row in self.cells)

    def get_cell(self, x: int, y: int) -> bool:
        """
        State of the cell at (x, y); any integers are accepted.
        """
        # % with a positive modulus is already floored in Python.
        x_mod = x % self.width
        y_mod = y % self.height

        if not self.wrap and (x != x_mod or y != y_mod):
            return False

        return self.cells[y_mod][x_mod]

    def get_neighbors(self, x: int, y: int) -> Tuple[bool, ...]:
        """The 8 Moore neighbors of (x, y), in NEIGHBOR_OFFSETS order."""
        return tuple(self.get_cell(x + dx, y + dy) for dx, dy in NEIGHBOR_OFFSETS)

    def alive_neighbor_count(self, x: int, y: int) -> int:
        return sum(self.get_neighbors(x, y))

    def next_cell(self, x: int, y: int) -> bool:
        """State of (x, y) in the next generation."""
        return CONWAY(self.get_cell(x, y), self.alive_neighbor_count(x, y))

    def next_generation(self) -> "Board":
        """
        One synchronous update. Every cell is computed from this board into a
        fresh grid; the result keeps this board's size and wrap flag.
        """
        nxt = [
            [self.next_cell(x, y) for x in range(self.width)]
            for y in range(self.height)
        ]
        return Board(nxt, wrap=self.wrap)

    def alive_cells(self) -> List[Tuple[int, int]]:
        return sorted(
            (x, y)
            for y, row in enumerate(self.cells)
            for x, cell in enumerate(row)
            if cell
        )

    def with_wrap(self, wrap: bool) -> "Board":
        return replace(self, wrap=wrap)

    def to_grid(self) -> List[List[int]]:
        """Row-major 0/1 nested lists, as written to JSONL."""
        return [[int(c) for c in row] for row in self.cells]
