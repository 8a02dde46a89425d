import pytest
from board import Board
from generate import place_pattern
from simulate import find_cycle, history, simulate, step


def test_step_is_next_generation():
    board = place_pattern("toad", 6, 6, x=1, y=2)
    assert step(board) == board.next_generation()


def test_multi_step_consistency():
    board = place_pattern("glider", 10, 10, x=1, y=1)
    one = step(board)
    two = step(one)
    assert simulate(board, 2) == two


def test_zero_generations_returns_input():
    board = place_pattern("blinker", 5, 5, x=1, y=2)
    assert simulate(board, 0) is board


def test_negative_generations_rejected():
    board = place_pattern("block", 4, 4)
    with pytest.raises(ValueError):
        simulate(board, -1)
    with pytest.raises(ValueError):
        list(history(board, -1))


def test_blinker_returns_after_two():
    board = place_pattern("blinker", 5, 5, x=1, y=2)
    assert simulate(board, 2) == board
    assert simulate(board, 3) == simulate(board, 1)


def test_glider_translates_on_bounded_board():
    """Four generations move a glider one cell down and to the right."""
    start = place_pattern("glider", 10, 10, x=1, y=1, wrap=False)
    moved = place_pattern("glider", 10, 10, x=2, y=2, wrap=False)
    assert simulate(start, 4) == moved


def test_stop_when_stable():
    # a lone cell dies, after which nothing changes
    board = Board.from_alive(5, 5, [(2, 2)])
    assert simulate(board, 50, stop_when_stable=True).population == 0
    block = place_pattern("block", 4, 4, x=1, y=1)
    assert simulate(block, 10, stop_when_stable=True) is block


def test_history_length_and_order():
    board = place_pattern("blinker", 5, 5, x=1, y=2)
    boards = list(history(board, 3))
    assert len(boards) == 4
    assert boards[0] is board
    assert boards[1] == step(board)
    assert boards[2] == board


def test_find_cycle_still_life():
    assert find_cycle(place_pattern("block", 4, 4, x=1, y=1), 5) == (0, 1)


def test_find_cycle_oscillator():
    assert find_cycle(place_pattern("blinker", 5, 5, x=1, y=2), 5) == (0, 2)


def test_find_cycle_glider_on_torus():
    """An 8x8 torus brings the glider home after 8 diagonal moves."""
    assert find_cycle(place_pattern("glider", 8, 8, x=1, y=1), 40) == (0, 32)


def test_find_cycle_transient():
    board = Board.from_alive(5, 5, [(2, 2)])
    assert find_cycle(board, 5) == (1, 1)


def test_find_cycle_gives_up():
    assert find_cycle(place_pattern("glider", 8, 8, x=1, y=1), 10) is None
