from __future__ import annotations

import json
from pathlib import Path
from typing import List

import numpy as np

from hanoi.configuration import Configuration
from hanoi.puzzle import Puzzle
from hanoi.utils.puzzle_io import configurations_to_wire, wire_to_configuration


def classic_puzzle(num_disks: int, num_pegs: int = 3) -> Puzzle:
    """All disks on the first peg, all disks wanted on the last peg."""
    return Puzzle(
        num_disks=num_disks,
        num_pegs=num_pegs,
        start=Configuration((0,) * num_disks),
        goal=Configuration((num_pegs - 1,) * num_disks),
    )


def random_configuration(rng: np.random.Generator, num_disks: int, num_pegs: int) -> Configuration:
    """
    Any assignment of disks to pegs is a legal configuration, since each
    peg's stack order is implied by disk size.
    """
    pegs = rng.integers(0, num_pegs, size=num_disks)
    return Configuration.from_pegs(int(p) for p in pegs)


def generate_random_puzzles(
    count: int,
    num_disks: int,
    num_pegs: int,
    *,
    seed: int = 0,
) -> List[Puzzle]:
    """
    Generate random well-formed puzzles.

    Args:
        count: number of puzzles
        num_disks: disks per puzzle
        num_pegs: pegs per puzzle (>= 3 keeps every pair reachable)
        seed: RNG seed for reproducibility
    """
    if count <= 0:
        raise ValueError("count must be > 0")
    if num_disks < 1 or num_pegs < 2:
        raise ValueError("num_disks must be >= 1 and num_pegs >= 2")

    rng = np.random.default_rng(seed)
    puzzles = []
    for _ in range(count):
        start = random_configuration(rng, num_disks, num_pegs)
        goal = random_configuration(rng, num_disks, num_pegs)
        puzzles.append(Puzzle(num_disks=num_disks, num_pegs=num_pegs, start=start, goal=goal))
    return puzzles


def save_puzzles(puzzles: List[Puzzle], json_path: str | Path) -> Path:
    """Write puzzles as JSON with 1-based pegs."""
    data = {
        "puzzles": [
            {
                "num_disks": p.num_disks,
                "num_pegs": p.num_pegs,
                "start": configurations_to_wire([p.start])[0],
                "goal": configurations_to_wire([p.goal])[0],
            }
            for p in puzzles
        ]
    }
    output_path = Path(json_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))
    return output_path


def load_puzzles(json_path: str | Path) -> List[Puzzle]:
    """Load puzzles written by save_puzzles."""
    data = json.loads(Path(json_path).read_text())
    entries = data.get("puzzles")
    if not isinstance(entries, list):
        raise ValueError(f"JSON {json_path} does not contain 'puzzles' list")

    puzzles = []
    for entry in entries:
        num_pegs = int(entry["num_pegs"])
        puzzle = Puzzle(
            num_disks=int(entry["num_disks"]),
            num_pegs=num_pegs,
            start=wire_to_configuration(entry["start"], num_pegs),
            goal=wire_to_configuration(entry["goal"], num_pegs),
        )
        puzzle.validate()
        puzzles.append(puzzle)
    return puzzles
