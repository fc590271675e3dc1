#!/usr/bin/env python3
"""
Solve a generalized Tower of Hanoi puzzle with BFS.

Input (stdin or --input file), whitespace-delimited, 1-based pegs:
    numDisks numPegs start[0..numDisks) end[0..numDisks)

Example:
    echo "3 3 1 1 1 3 3 3" | python scripts/solve_hanoi.py
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (ROOT, SRC):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from hanoi.errors import HanoiError
from hanoi.solver import solve
from hanoi.utils.puzzle_io import format_configuration, read_puzzle, write_solution


def main() -> int:
    parser = argparse.ArgumentParser(description="Minimum-move solver for generalized Tower of Hanoi.")
    parser.add_argument("--input", default=None, help="Puzzle file (default: stdin)")
    parser.add_argument("--max-vertices", type=int, default=None, help="Abort if the state graph grows past this")
    parser.add_argument("--verify", action="store_true", help="Replay the moves and check they reach the goal")
    parser.add_argument("--verbose", action="store_true", help="Print search statistics")
    args = parser.parse_args()

    try:
        puzzle = read_puzzle(args.input if args.input else sys.stdin)
        if args.verbose:
            print(f"start {format_configuration(puzzle.start)}")
            print(f"goal  {format_configuration(puzzle.goal)}")
        solution = solve(
            puzzle,
            max_vertices=args.max_vertices,
            verify=args.verify,
            verbose=args.verbose,
        )
    except HanoiError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    write_solution(solution, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
