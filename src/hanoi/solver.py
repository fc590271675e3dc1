from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from hanoi.configuration import Configuration
from hanoi.errors import IllegalMoveError, PathReconstructionError
from hanoi.puzzle import Puzzle
from hanoi.state_graph import StateGraph
from hanoi.strategies.generators.legal_moves import disk_is_movable, is_legal_destination
from hanoi.vertex import Move


@dataclass
class Solution:
    """Результат: минимальное число ходов и сами ходы (1-based стержни)."""

    distance: int
    moves: List[Move]
    stats: Dict[str, float] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.moves)


def reconstruct_moves(graph: StateGraph, goal_id: int, distance: int) -> List[Move]:
    """
    Пройти по predecessor от цели к старту, собрать last_move
    и развернуть в хронологический порядок.
    """
    moves: List[Move] = []
    vertex = graph.vertex(goal_id)
    while vertex.predecessor is not None:
        moves.append(vertex.last_move)
        vertex = graph.vertex(vertex.predecessor)
        if len(moves) > distance:
            break

    if len(moves) != distance:
        raise PathReconstructionError(
            f"predecessor chain has {len(moves)} moves, search reported {distance}"
        )
    moves.reverse()
    return moves


def replay_moves(start: Configuration, moves: Iterable[Move], num_pegs: int) -> Configuration:
    """
    Применить ходы к start с полной проверкой правил.
    Каждый ход снимает верхний диск исходного стержня.
    """
    config = start
    for step, move in enumerate(moves, 1):
        source, dest = move.source_peg - 1, move.dest_peg - 1
        if not (0 <= source < num_pegs and 0 <= dest < num_pegs):
            raise IllegalMoveError(f"step {step}: peg out of range in move {move}")

        on_source = config.stacks(num_pegs)[source]
        if not on_source:
            raise IllegalMoveError(f"step {step}: peg {move.source_peg} is empty")
        disk = on_source[0]

        if not disk_is_movable(config, disk) or not is_legal_destination(config, disk, dest):
            raise IllegalMoveError(
                f"step {step}: cannot move disk {disk} from peg {move.source_peg} "
                f"to peg {move.dest_peg} in {config.pegs}"
            )
        config = config.with_disk_on(disk, dest)
    return config


@dataclass
class HanoiSolver:
    """
    Поиск кратчайшего решения обобщённой Ханойской башни через BFS.

    Параметры:
        puzzle        : Puzzle         — размеры, старт и цель
        max_vertices  : int | None     — потолок числа вершин графа
        verify        : bool           — переиграть найденные ходы и сверить с целью

    Главный метод:
        run() -> Solution
    """

    puzzle: Puzzle
    max_vertices: Optional[int] = None
    verify: bool = False

    def __post_init__(self):
        # некорректный ввод отсекаем до выделения ресурсов
        self.puzzle.validate()
        self.graph = StateGraph(self.puzzle.num_disks, self.puzzle.num_pegs)

    def run(self, verbose: bool = False) -> Solution:
        puzzle = self.puzzle
        distance = self.graph.explore_and_find_distance(
            puzzle.start,
            puzzle.goal,
            max_vertices=self.max_vertices,
            verbose=verbose,
        )
        if verbose:
            print(f"num moves = {distance}")

        goal_id = self.graph.lookup_settled_vertex(puzzle.goal)
        moves = reconstruct_moves(self.graph, goal_id, distance)

        if self.verify:
            final = replay_moves(puzzle.start, moves, puzzle.num_pegs)
            if final != puzzle.goal:
                raise PathReconstructionError(
                    f"replayed moves end in {final.pegs}, expected {puzzle.goal.pegs}"
                )

        return Solution(distance=distance, moves=moves, stats=self.graph.stats())


def solve(
    puzzle: Puzzle,
    *,
    max_vertices: Optional[int] = None,
    verify: bool = False,
    verbose: bool = False,
) -> Solution:
    """Короткая обёртка над HanoiSolver."""
    return HanoiSolver(puzzle, max_vertices=max_vertices, verify=verify).run(verbose=verbose)
