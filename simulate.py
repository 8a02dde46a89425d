from __future__ import annotations
from typing import Dict, Iterator, Optional, Tuple
from board import Board


def step(board: Board) -> Board:
    '''
    One generation, same edge mode as the input board.
    '''
    return board.next_generation()


def simulate(board: Board, generations: int = 1, *, stop_when_stable: bool = False) -> Board:
    """
    Advance `generations` steps. With stop_when_stable the loop ends as soon
    as a generation equals its predecessor, since nothing can change after that.
    """
    if generations < 0:
        raise ValueError("generations must be non-negative")
    curr = board
    for _ in range(generations):
        nxt = step(curr)
        if stop_when_stable and nxt == curr:
            break
        curr = nxt
    return curr


def history(board: Board, generations: int) -> Iterator[Board]:
    """Yield the starting board followed by each of the next `generations` boards."""
    if generations < 0:
        raise ValueError("generations must be non-negative")
    curr = board
    yield curr
    for _ in range(generations):
        curr = step(curr)
        yield curr


def find_cycle(board: Board, max_generations: int) -> Optional[Tuple[int, int]]:
    """
    Return (start, period): the first generation that belongs to the cycle and
    the cycle length. Still lifes have period 1. Returns None if no board
    repeats within `max_generations` steps.
    """
    seen: Dict[Board, int] = {}
    for gen, curr in enumerate(history(board, max_generations)):
        if curr in seen:
            start = seen[curr]
            return start, gen - start
        seen[curr] = gen
    return None
