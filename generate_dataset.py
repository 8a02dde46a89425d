"""
generate_dataset.py

Write Game of Life boards and their evolved states as JSONL.

Example (random boards)
-------
python generate_dataset.py --mode random \
       --n 128 --height 16 --width 16 --timesteps 4 \
       --density 0.35 --seed 42 \
       --outfile data/random16.jsonl

Example (single named pattern, bounded edges)
-------
python generate_dataset.py --mode pattern \
       --pattern glider --height 10 --width 10 --x 1 --y 1 \
       --timesteps 8 --no-wrap \
       --outfile data/glider.jsonl
"""

from __future__ import annotations
import argparse, json, pathlib, sys
from typing import List, Sequence
from board import Board
from generate import PATTERNS, BoardGenerator, place_pattern
from simulate import simulate


def board_to_jsonl(board: Board, timesteps: int, *, stop_when_stable: bool = False) -> str:
    """
    Serialize a starting board (+ its state after `timesteps` generations)
    as one compact JSON line.
    """
    target = simulate(board, timesteps, stop_when_stable=stop_when_stable)
    return json.dumps(
        {
            "wrap": board.wrap,
            "timesteps": timesteps,
            "init": board.to_grid(),
            "target": target.to_grid(),
            "population": target.population,
        },
        separators=(",", ":"),
    )


def write_jsonl(boards: Sequence[Board], timesteps: int, outfile: pathlib.Path, *, stop_when_stable: bool = False) -> None:
    outfile.parent.mkdir(parents=True, exist_ok=True)
    with outfile.open("w", encoding="utf-8") as f:
        for board in boards:
            f.write(board_to_jsonl(board, timesteps, stop_when_stable=stop_when_stable) + "\n")


def _fail(msg: str) -> None:
    print(f"Error: {msg}", file=sys.stderr)
    sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Generate a JSONL file of random Game of Life boards.")

    p.add_argument("--n", type=int, required=True, help="Number of boards to generate.")
    p.add_argument("--height", type=int, default=16, help="Grid height.")
    p.add_argument("--width", type=int, default=16, help="Grid width.")
    p.add_argument("--timesteps", type=int, default=1, help="Generations to evolve each board.")
    p.add_argument("--density", type=float, default=0.5, help="Probability a cell starts alive.")
    p.add_argument("--seed", type=int, default=42, help="RNG seed for reproducibility.")
    p.add_argument("--no-wrap", action="store_true", help="Treat cells beyond the edges as dead instead of wrapping.")
    p.add_argument("--stop-when-stable", action="store_true", help="Stop evolving a board once it stops changing.")
    p.add_argument("--outfile", type=pathlib.Path, required=True, help="Where to write the JSONL.")
    return p


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    if args.timesteps < 0:
        _fail("--timesteps must be non-negative")

    try:
        gen = BoardGenerator(
            height=args.height,
            width=args.width,
            seed=args.seed,
            density=args.density,
            wrap=not args.no_wrap,
        )
        batch = gen.generate_batch(num_boards=args.n, trim_trivial=True)
    except (ValueError, RuntimeError) as e:
        _fail(str(e))

    write_jsonl(batch, args.timesteps, args.outfile, stop_when_stable=args.stop_when_stable)
    print(f"Wrote {len(batch):,} boards to {args.outfile}")


def build_parser_pattern() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Write a single named Game of Life pattern and its evolution as JSONL."
    )
    p.add_argument("--pattern", choices=sorted(PATTERNS), required=True, help="Pattern to place.")
    p.add_argument("--height", type=int, default=8, help="Grid height.")
    p.add_argument("--width", type=int, default=8, help="Grid width.")
    p.add_argument("--x", type=int, default=0, help="Column of the pattern's top-left corner.")
    p.add_argument("--y", type=int, default=0, help="Row of the pattern's top-left corner.")
    p.add_argument("--timesteps", type=int, default=1, help="Generations to evolve.")
    p.add_argument("--no-wrap", action="store_true", help="Treat cells beyond the edges as dead instead of wrapping.")
    p.add_argument("--outfile", type=pathlib.Path, required=True, help="Output JSONL.")
    return p


def main_pattern(argv: List[str] | None = None) -> None:
    """
    CLI entry point for single-pattern output.
    """
    args = build_parser_pattern().parse_args(argv)
    if args.timesteps < 0:
        _fail("--timesteps must be non-negative")

    try:
        board = place_pattern(
            args.pattern, args.width, args.height,
            x=args.x, y=args.y, wrap=not args.no_wrap,
        )
    except ValueError as e:  # includes InvalidDimensions
        _fail(str(e))

    write_jsonl([board], args.timesteps, args.outfile)
    print(f"Wrote 1 board ({args.pattern}) to {args.outfile}")


def dispatch_main(argv: List[str] | None = None) -> None:
    """
    Dispatcher that invokes either the random or the pattern writer based on --mode.
    """
    # parse only --mode, leave the rest of arguments for the specific main
    top = argparse.ArgumentParser(add_help=False)
    top.add_argument(
        "--mode",
        choices=["random", "pattern"],
        default="random",
        help="Random boards or a single named pattern",
    )
    args, remaining = top.parse_known_args(argv)
    if args.mode == "pattern":
        main_pattern(remaining)
    else:
        main(remaining)


if __name__ == "__main__":
    dispatch_main()
