#!/usr/bin/env python
"""
orchestrator.py
---------------
Build and summarize every dataset listed in life.yaml:

1. For each dataset:
    - (optional) generate the JSONL if a "gen" block is present and the file is missing
    - summarize the boards (populations, extinctions, unchanged boards)
    - append the summary to results/summary.csv
    - append the same record to logs/runs.log
"""
from __future__ import annotations

import argparse
import csv
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List
import yaml

from generate_dataset import dispatch_main as gen_cli
from run_logger import log_run

# Paths & Globals
ROOT       = Path(__file__).resolve().parent
DATA_DIR   = ROOT / "data"
LOG_DIR    = ROOT / "logs"
RESULT_DIR = ROOT / "results"

SUMMARY_FIELDS = [
    "date_utc",
    "dataset",
    "boards",
    "mean_init_population",
    "mean_final_population",
    "extinct",
    "unchanged",
]


# Helpers
def gen_argv(gen_cfg: Dict[str, Any], outfile: Path) -> List[str]:
    """Translate a config "gen" block into generate_dataset.py arguments."""
    cfg  = dict(gen_cfg)
    mode = cfg.pop("mode", "random")
    wrap = cfg.pop("wrap", True)

    argv = ["--mode", mode, "--outfile", str(outfile)]
    for k, v in cfg.items():
        flag = f"--{k.replace('_', '-')}"
        if isinstance(v, bool):
            # store_true switches take no value
            if v:
                argv.append(flag)
        else:
            argv += [flag, str(v)]
    if not wrap:
        argv.append("--no-wrap")
    return argv


def population(grid: List[List[int]]) -> int:
    return sum(sum(row) for row in grid)


def summarize(path: Path) -> Dict[str, Any]:
    """Aggregate statistics over one JSONL dataset."""
    boards = 0
    init_total = 0
    final_total = 0
    extinct = 0
    unchanged = 0

    with path.open(encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            rec = json.loads(line)
            boards += 1
            init_total += population(rec["init"])
            final_pop = population(rec["target"])
            final_total += final_pop
            if final_pop == 0:
                extinct += 1
            if rec["init"] == rec["target"]:
                unchanged += 1

    return {
        "boards": boards,
        "mean_init_population": init_total / boards if boards else 0.0,
        "mean_final_population": final_total / boards if boards else 0.0,
        "extinct": extinct,
        "unchanged": unchanged,
    }


# Main orchestration
def run(
    cfg_path: Path,
    *,
    data_dir: Path = DATA_DIR,
    result_dir: Path = RESULT_DIR,
    log_dir: Path = LOG_DIR,
    only: str | None = None,
) -> None:
    cfg = yaml.safe_load(cfg_path.read_text())
    if not cfg or "datasets" not in cfg:
        sys.exit(f"{cfg_path}: no 'datasets' list found")

    for d in (data_dir, result_dir, log_dir):
        d.mkdir(parents=True, exist_ok=True)

    summary_path = result_dir / "summary.csv"
    first_write  = not summary_path.exists()

    with summary_path.open("a", newline="") as fp_summary:
        writer = csv.writer(fp_summary)
        if first_write:
            writer.writerow(SUMMARY_FIELDS)

        for ds in cfg["datasets"]:
            # skip datasets not matching --dataset (if provided)
            if only is not None and ds["name"] != only:
                continue

            outfile = data_dir / ds.get("path", f"{ds['name']}.jsonl")
            if "gen" in ds:
                if not outfile.exists():
                    print(f"Generating dataset {ds['name']} → {outfile}")
                    gen_cli(gen_argv(ds["gen"], outfile))
                else:
                    print(f"Dataset {ds['name']} already exists; skipping generation")

            if not outfile.exists():
                print("Dataset not found:", outfile, file=sys.stderr)
                continue

            stats = summarize(outfile)
            writer.writerow([
                datetime.now(timezone.utc).isoformat(timespec="seconds"),
                ds["name"],
                stats["boards"],
                f"{stats['mean_init_population']:.2f}",
                f"{stats['mean_final_population']:.2f}",
                stats["extinct"],
                stats["unchanged"],
            ])
            fp_summary.flush()
            log_run(ds["name"], stats, log_file=log_dir / "runs.log")

            print(
                f"Finished {ds['name']} — {stats['boards']} boards, "
                f"population {stats['mean_init_population']:.2f} → "
                f"{stats['mean_final_population']:.2f}, "
                f"{stats['extinct']} extinct"
            )


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate and summarize Game of Life datasets")
    parser.add_argument(
        "--config",
        type=Path,
        default=ROOT / "life.yaml",
        help="Path to life.yaml",
    )
    parser.add_argument(
        "--dataset",
        help="If set, only process this dataset (must match one of the names in life.yaml)",
    )
    args = parser.parse_args(argv)
    run(args.config, only=args.dataset)


if __name__ == "__main__":
    main()
