from __future__ import annotations
from typing import Dict, FrozenSet, List, Tuple
import numpy as np
from board import Board, InvalidDimensions
from simulate import step

# Alive cells as (dx, dy) offsets from the pattern's top-left corner.
PATTERNS: Dict[str, FrozenSet[Tuple[int, int]]] = {
    # still lifes
    "block":   frozenset({(0, 0), (1, 0), (0, 1), (1, 1)}),
    "beehive": frozenset({(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)}),
    # period-2 oscillators
    "blinker": frozenset({(0, 0), (1, 0), (2, 0)}),
    "toad":    frozenset({(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)}),
    "beacon":  frozenset({(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)}),
    # travels one cell diagonally (+x, +y) every 4 generations
    "glider":  frozenset({(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)}),
}


def place_pattern(name: str, width: int, height: int, *, x: int = 0, y: int = 0, wrap: bool = True) -> Board:
    """
    Return a width x height board holding only the named pattern, with the
    pattern's top-left corner at (x, y). On a wrapping board the pattern may
    straddle the edges; otherwise it has to fit.
    """
    try:
        offsets = PATTERNS[name]
    except KeyError:
        raise ValueError(
            f"unknown pattern {name!r}; choose from {', '.join(sorted(PATTERNS))}"
        ) from None
    if width <= 0 or height <= 0:
        raise InvalidDimensions(f"board must be at least 1x1, got {width}x{height}")

    cells = [(x + dx, y + dy) for dx, dy in offsets]
    if wrap:
        cells = [(cx % width, cy % height) for cx, cy in cells]
    return Board.from_alive(width, height, cells, wrap=wrap)


class BoardGenerator:
    """
    Random initial configurations.
    Each cell starts alive independently with probability `density`.
    """
    def __init__(self, height: int, width: int, *, seed: int = 42, density: float = 0.5, wrap: bool = True):
        if height <= 0 or width <= 0:
            raise InvalidDimensions(f"board must be at least 1x1, got {width}x{height}")
        if not (0.0 <= density <= 1.0):
            raise ValueError(f"density must be within [0, 1], got {density}")
        self.h = height
        self.w = width
        self.density = density
        self.wrap = wrap
        self.rng = np.random.default_rng(seed)

    def _make_grid(self) -> List[List[bool]]:
        return (self.rng.random((self.h, self.w)) < self.density).tolist()

    def generate(self) -> Board:
        return Board(self._make_grid(), wrap=self.wrap)

    def is_trivial(self, board: Board) -> bool:
        """
        True for boards that are all dead, all alive, or already a still life.
        """
        if board.population in (0, board.width * board.height):
            return True
        return step(board) == board

    def generate_batch(
        self,
        num_boards: int,
        trim_trivial: bool = True,
        max_attempts_factor: int = 10,
    ) -> List[Board]:
        """
        Generate `num_boards` random boards, skipping trivial ones if trim_trivial.
        """
        boards: List[Board] = []
        attempts = 0
        max_attempts = max_attempts_factor * num_boards

        while attempts < max_attempts and len(boards) < num_boards:
            board = self.generate()
            if not trim_trivial or not self.is_trivial(board):
                boards.append(board)
            attempts += 1

        if len(boards) < num_boards:
            raise RuntimeError(
                f"Could only create {len(boards)}/{num_boards} nontrivial boards "
                f"in {max_attempts} attempts."
            )

        return boards
