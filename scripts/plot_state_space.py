"""
Plot how the BFS state graph grows with the number of disks.

- Varies number of disks (1..MAX_DISKS)
- Runs the classic puzzle (all disks peg 1 -> last peg) for each peg count
- Saves vertices / edges / runtime plots to the output directory
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, List

import matplotlib.pyplot as plt
import numpy as np

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from hanoi.solver import solve
from hanoi.utils.puzzle_gen import classic_puzzle


# Configuration
MAX_DISKS = 7
PEG_COUNTS = [3, 4, 5]
MAX_VERTICES = 200_000
OUTPUT_DIR = Path("state_space_plots")


def collect(peg_counts: List[int], max_disks: int) -> Dict[int, Dict[str, List[float]]]:
    results: Dict[int, Dict[str, List[float]]] = {}
    for pegs in peg_counts:
        series = {"disks": [], "distance": [], "vertices": [], "edges": [], "runtime": []}
        for disks in range(1, max_disks + 1):
            solution = solve(classic_puzzle(disks, pegs), max_vertices=MAX_VERTICES)
            series["disks"].append(disks)
            series["distance"].append(solution.distance)
            series["vertices"].append(solution.stats["vertices_created"])
            series["edges"].append(solution.stats["edges"])
            series["runtime"].append(solution.stats["runtime_seconds"])
            print(
                f"pegs={pegs} disks={disks}: distance={solution.distance}, "
                f"vertices={solution.stats['vertices_created']}, "
                f"runtime={solution.stats['runtime_seconds']:.3f}s"
            )
        results[pegs] = series
    return results


def plot(results: Dict[int, Dict[str, List[float]]], output_dir: Path) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    for key, ylabel, log in (
        ("distance", "minimum moves", False),
        ("vertices", "vertices created", True),
        ("runtime", "runtime, s", True),
    ):
        fig, ax = plt.subplots(figsize=(6, 4))
        for pegs, series in results.items():
            ys = np.asarray(series[key], dtype=float)
            ax.plot(series["disks"], ys, marker="o", label=f"{pegs} pegs")
        if log:
            ax.set_yscale("log")
        ax.set_xlabel("disks")
        ax.set_ylabel(ylabel)
        ax.grid(True, alpha=0.3)
        ax.legend()
        fig.tight_layout()
        path = output_dir / f"{key}.png"
        fig.savefig(path, dpi=150)
        plt.close(fig)
        print(f"Saved {path}")


def main():
    parser = argparse.ArgumentParser(description="Plot BFS state-space growth.")
    parser.add_argument("--max-disks", type=int, default=MAX_DISKS)
    parser.add_argument("--pegs", type=int, nargs="+", default=PEG_COUNTS)
    parser.add_argument("--output-dir", default=str(OUTPUT_DIR))
    args = parser.parse_args()

    results = collect(args.pegs, args.max_disks)
    plot(results, Path(args.output_dir))


if __name__ == "__main__":
    main()
