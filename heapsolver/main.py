"""
Heap game solver
Main entry point: solve every position and dump the classification table.
"""

from __future__ import annotations

import argparse
import time
from typing import List, Optional

from . import stats
from .config import HEAP_BOUNDS
from .report import print_round, print_table, write_json
from .solver import RetrogradeSolver
from .space import GameStateSpace
from .theory import find_mismatches, print_mismatches


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Classify every position of the (1, 3, 5, 7) heap game.")
    parser.add_argument("--trace", action="store_true", help="Print the table after every round")
    parser.add_argument("--stats", action="store_true", help="Print run counters and solve time")
    parser.add_argument("--check", action="store_true", help="Cross-check the result against misère Nim theory")
    parser.add_argument("--out", type=str, default="", help="Optional JSON output path")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    stats.reset_counters()
    space = GameStateSpace(HEAP_BOUNDS)
    solver = RetrogradeSolver(space, on_round=print_round if args.trace else None)

    t0 = time.perf_counter()
    rounds = solver.solve()
    t1 = time.perf_counter()

    print_table(space)

    if args.stats:
        print(f"Solved {len(space)} states in {t1 - t0:.3f}s")
        stats.print_stats()

    if args.out:
        out_path = write_json(space, args.out, rounds)
        print(f"Wrote JSON: {out_path}")

    if args.check:
        mismatches = find_mismatches(space)
        print_mismatches(mismatches)
        if mismatches:
            return 1
    return 0
