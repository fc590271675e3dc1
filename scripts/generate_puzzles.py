#!/usr/bin/env python3
"""
Generate a batch of random generalized Hanoi puzzles.

Example:
    python scripts/generate_puzzles.py \
        --num-disks 5 \
        --num-pegs 4 \
        --count 20 \
        --seed 42 \
        --output data/puzzles_5x4.json
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

from hanoi.utils.puzzle_gen import generate_random_puzzles, save_puzzles


def main():
    parser = argparse.ArgumentParser(description="Generate random Hanoi puzzles.")
    parser.add_argument("--num-disks", type=int, required=True, help="Disks per puzzle")
    parser.add_argument("--num-pegs", type=int, default=3, help="Pegs per puzzle")
    parser.add_argument("--count", type=int, default=10, help="Number of puzzles")
    parser.add_argument("--seed", type=int, default=0, help="RNG seed")
    parser.add_argument("--output", required=True, help="Output JSON file")
    args = parser.parse_args()

    puzzles = generate_random_puzzles(
        count=args.count,
        num_disks=args.num_disks,
        num_pegs=args.num_pegs,
        seed=args.seed,
    )
    output_path = save_puzzles(puzzles, args.output)
    print(f"Saved {len(puzzles)} puzzles to {output_path}")


if __name__ == "__main__":
    main()
