from __future__ import annotations

import io
from pathlib import Path
from typing import Iterable, List, Sequence, TextIO

from hanoi.configuration import Configuration
from hanoi.errors import MalformedPuzzleError
from hanoi.puzzle import Puzzle
from hanoi.solver import Solution


def parse_tokens(text: str) -> List[int]:
    """Split whitespace/newline-delimited text into integers."""
    tokens = []
    for raw in text.split():
        try:
            tokens.append(int(raw))
        except ValueError:
            raise MalformedPuzzleError(f"Expected an integer, got {raw!r}") from None
    return tokens


def parse_puzzle(text: str) -> Puzzle:
    """
    Parse the puzzle wire format:

        numDisks numPegs start[0] ... start[D-1] end[0] ... end[D-1]

    Pegs are 1-based on the wire and converted to 0-based. The returned
    puzzle is validated.
    """
    tokens = parse_tokens(text)
    if len(tokens) < 2:
        raise MalformedPuzzleError("Input must start with numDisks and numPegs")

    num_disks, num_pegs = tokens[0], tokens[1]
    if num_disks < 1:
        raise MalformedPuzzleError(f"numDisks must be positive, got {num_disks}")

    expected = 2 + 2 * num_disks
    if len(tokens) != expected:
        raise MalformedPuzzleError(
            f"Expected {expected} integers for {num_disks} disks, got {len(tokens)}"
        )

    start = Configuration.from_pegs(p - 1 for p in tokens[2:2 + num_disks])
    goal = Configuration.from_pegs(p - 1 for p in tokens[2 + num_disks:])
    puzzle = Puzzle(num_disks=num_disks, num_pegs=num_pegs, start=start, goal=goal)
    puzzle.validate()
    return puzzle


def read_puzzle(source: str | Path | TextIO) -> Puzzle:
    """Read a puzzle from a file path or an open text stream."""
    if isinstance(source, (str, Path)):
        text = Path(source).read_text()
    else:
        text = source.read()
    return parse_puzzle(text)


def format_puzzle(puzzle: Puzzle) -> str:
    """Render a puzzle back into the wire format (one line per section)."""
    start = " ".join(str(p + 1) for p in puzzle.start.pegs)
    goal = " ".join(str(p + 1) for p in puzzle.goal.pegs)
    return f"{puzzle.num_disks} {puzzle.num_pegs}\n{start}\n{goal}\n"


def format_configuration(config: Configuration) -> str:
    """Render a configuration with 1-based pegs, e.g. 'state = 1 1 3'."""
    return "state = " + " ".join(str(p + 1) for p in config.pegs)


def format_moves(moves: Iterable) -> List[str]:
    return [str(move) for move in moves]


def format_solution(solution: Solution) -> str:
    """Move count on the first line, then one 'source dest' line per move."""
    out = io.StringIO()
    write_solution(solution, out)
    return out.getvalue()


def write_solution(solution: Solution, stream: TextIO) -> None:
    stream.write(f"{solution.distance}\n")
    for line in format_moves(solution.moves):
        stream.write(line + "\n")


def configurations_to_wire(configs: Sequence[Configuration]) -> List[List[int]]:
    """Convert configurations to 1-based peg lists (JSON-friendly)."""
    return [[p + 1 for p in config.pegs] for config in configs]


def wire_to_configuration(pegs: Sequence[int], num_pegs: int) -> Configuration:
    """Convert a 1-based peg list into a Configuration, checking the range."""
    for p in pegs:
        if not 1 <= int(p) <= num_pegs:
            raise MalformedPuzzleError(f"Peg {p} outside 1..{num_pegs}")
    return Configuration.from_pegs(int(p) - 1 for p in pegs)
