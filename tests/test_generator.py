import pytest
from board import Board, InvalidDimensions
from generate import PATTERNS, BoardGenerator, place_pattern
from simulate import find_cycle


def test_deterministic_seed():
    g1 = BoardGenerator(4, 5, seed=123, density=0.4)
    g2 = BoardGenerator(4, 5, seed=123, density=0.4)

    b1 = g1.generate()
    b2 = g2.generate()

    assert b1 == b2
    assert (b1.width, b1.height) == (5, 4)


def test_density_bounds():
    h, w = 64, 64
    density = 0.3
    board = BoardGenerator(h, w, seed=0, density=density).generate()

    actual = board.population / (h * w)
    assert abs(actual - density) < 0.03      # within ±3 pp


def test_wrap_flag_passed_through():
    assert BoardGenerator(3, 3, wrap=False).generate().wrap is False
    assert BoardGenerator(3, 3).generate().wrap is True


def test_batch_nontrivial():
    gen = BoardGenerator(6, 6, seed=1, density=0.5)
    batch = gen.generate_batch(10)
    assert len(batch) == 10
    assert not any(gen.is_trivial(b) for b in batch)


def test_batch_gives_up_on_empty_boards():
    gen = BoardGenerator(4, 4, seed=1, density=0.0)
    with pytest.raises(RuntimeError):
        gen.generate_batch(3)
    assert len(gen.generate_batch(3, trim_trivial=False)) == 3


def test_is_trivial():
    gen = BoardGenerator(4, 4)
    assert gen.is_trivial(Board([[0] * 4] * 4))
    assert gen.is_trivial(Board([[1] * 4] * 4))
    assert gen.is_trivial(place_pattern("block", 4, 4, x=1, y=1))
    assert not gen.is_trivial(place_pattern("blinker", 5, 5, x=1, y=2))


@pytest.mark.parametrize("kwargs", [{"density": -0.1}, {"density": 1.5}])
def test_invalid_density(kwargs):
    with pytest.raises(ValueError):
        BoardGenerator(4, 4, **kwargs)


def test_invalid_size():
    with pytest.raises(InvalidDimensions):
        BoardGenerator(0, 4)
    with pytest.raises(InvalidDimensions):
        place_pattern("block", 4, 0)


def test_unknown_pattern():
    with pytest.raises(ValueError, match="unknown pattern"):
        place_pattern("spaceship", 8, 8)


def test_pattern_must_fit_bounded_board():
    with pytest.raises(ValueError):
        place_pattern("glider", 5, 5, x=3, y=3, wrap=False)


def test_pattern_straddles_torus_edges():
    board = place_pattern("block", 5, 5, x=4, y=4)
    assert board.alive_cells() == [(0, 0), (0, 4), (4, 0), (4, 4)]
    # still a block once the edges are joined
    assert board.next_generation() == board


@pytest.mark.parametrize(
    "name,period",
    [("block", 1), ("beehive", 1), ("blinker", 2), ("toad", 2), ("beacon", 2)],
)
def test_pattern_periods(name, period):
    board = place_pattern(name, 10, 10, x=3, y=3, wrap=False)
    assert board.population == len(PATTERNS[name])
    assert find_cycle(board, 10) == (0, period)
