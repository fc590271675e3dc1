from __future__ import annotations
import time
from typing import Dict, List, Optional, Set

from hanoi.configuration import Configuration
from hanoi.errors import (
    ConfigurationNotFoundError,
    SearchLimitExceededError,
    UnreachableGoalError,
)
from hanoi.graph.base import GraphBase
from hanoi.strategies.frontier.fifo import FifoFrontier
from hanoi.strategies.generators.base import MoveGenerator
from hanoi.strategies.generators.legal_moves import LegalMoveGenerator
from hanoi.vertex import Move, Vertex, VisitState


class StateGraph(GraphBase):
    """
    Неявный граф состояний Ханойской башни, который строится по ходу BFS.

    Вершины живут в арене (list[Vertex]), индекс вершины = её позиция.
    Поиск вершины по конфигурации — через dict[Configuration, int].
    Рёбра хранятся как множества индексов соседей на обоих концах.

    Главный метод:
        explore_and_find_distance(start, goal) -> int
    """

    def __init__(
        self,
        num_disks: int,
        num_pegs: int,
        generator: Optional[MoveGenerator] = None,
    ):
        self.num_disks = num_disks
        self.num_pegs = num_pegs
        self.generator = generator if generator is not None else LegalMoveGenerator(num_pegs)

        self._vertices: List[Vertex] = []
        self._index: Dict[Configuration, int] = {}
        self._num_edges = 0
        self._metrics: Dict[str, float] = {}
        self._reset_metrics()

    # ------------------------------------------------------------
    # Вершины и рёбра
    # ------------------------------------------------------------
    def reset(self) -> None:
        """Выбросить все вершины и рёбра разом."""
        self._vertices.clear()
        self._index.clear()
        self._num_edges = 0
        self._reset_metrics()

    def get_or_create_vertex(self, configuration: Configuration) -> int:
        """
        Найти вершину по конфигурации или создать новую (UNVISITED,
        distance=0, predecessor=None). Всегда успешно.
        """
        vertex_id = self._index.get(configuration)
        if vertex_id is not None:
            return vertex_id

        vertex_id = len(self._vertices)
        self._vertices.append(Vertex(configuration=configuration, index=vertex_id))
        self._index[configuration] = vertex_id
        return vertex_id

    def lookup_settled_vertex(self, configuration: Configuration) -> int:
        """Индекс существующей вершины; ошибка, если её никогда не создавали."""
        vertex_id = self._index.get(configuration)
        if vertex_id is None:
            raise ConfigurationNotFoundError(
                f"no vertex for configuration {configuration.pegs}"
            )
        return vertex_id

    def add_edge(self, u: int, v: int) -> bool:
        """
        Записать ребро u—v на обоих концах.
        Возвращает False, если ребро уже было.
        """
        if v in self._vertices[u].neighbors:
            return False
        self._vertices[u].neighbors.add(v)
        self._vertices[v].neighbors.add(u)
        self._num_edges += 1
        return True

    def vertex(self, vertex_id: int) -> Vertex:
        return self._vertices[vertex_id]

    def neighbors(self, v: int) -> Set[int]:
        return self._vertices[v].neighbors

    def num_vertices(self) -> int:
        return len(self._vertices)

    def num_edges(self) -> int:
        return self._num_edges

    def stats(self) -> Dict[str, float]:
        """Счётчики последнего поиска (для отладки и бенчмарков)."""
        stats = dict(self._metrics)
        stats["vertices_created"] = len(self._vertices)
        stats["edges"] = self._num_edges
        return stats

    # ------------------------------------------------------------
    # BFS
    # ------------------------------------------------------------
    def explore_and_find_distance(
        self,
        start: Configuration,
        goal: Configuration,
        max_vertices: Optional[int] = None,
        verbose: bool = False,
    ) -> int:
        """
        BFS от start до goal, граф строится на лету.

        Возвращает:
            минимальное число ходов от start до goal.

        Ошибки:
            UnreachableGoalError       — фронт опустел, goal не найден
            SearchLimitExceededError   — создано больше max_vertices вершин
        """
        self.reset()
        t0 = time.perf_counter()

        start_id = self.get_or_create_vertex(start)
        self._vertices[start_id].mark_frontier(distance=0)

        frontier = FifoFrontier()
        frontier.push(start_id)

        while not frontier.empty():
            current = self._vertices[frontier.pop()]

            for source, peg, new_config in self.generator.neighbors(current.configuration):
                neighbor_id = self.get_or_create_vertex(new_config)
                if max_vertices is not None and len(self._vertices) > max_vertices:
                    raise SearchLimitExceededError(
                        f"search exceeded {max_vertices} vertices "
                        f"({self.num_disks} disks, {self.num_pegs} pegs)"
                    )

                # ребро уже было → сосед уже найден раньше
                if not self.add_edge(current.index, neighbor_id):
                    continue

                neighbor = self._vertices[neighbor_id]
                if neighbor.visit_state is VisitState.UNVISITED:
                    neighbor.mark_frontier(
                        distance=current.distance + 1,
                        predecessor=current.index,
                        last_move=Move(source + 1, peg + 1),
                    )
                    frontier.push(neighbor_id)
                    self._metrics["max_frontier"] = max(self._metrics["max_frontier"], len(frontier))

            current.mark_settled()
            self._metrics["vertices_settled"] += 1

            if current.configuration == goal:
                self._metrics["runtime_seconds"] = time.perf_counter() - t0
                if verbose:
                    print(
                        f"  BFS: goal settled at distance {current.distance}, "
                        f"vertices={len(self._vertices)}, edges={self._num_edges}, "
                        f"max_frontier={self._metrics['max_frontier']}"
                    )
                return current.distance

        self._metrics["runtime_seconds"] = time.perf_counter() - t0
        if verbose:
            print(f"  BFS: frontier empty after {self._metrics['vertices_settled']} vertices")
        raise UnreachableGoalError(
            f"goal {goal.pegs} is not reachable from {start.pegs} "
            f"({len(self._vertices)} vertices explored)"
        )

    def _reset_metrics(self) -> None:
        self._metrics = {
            "vertices_settled": 0,
            "max_frontier": 1,
            "runtime_seconds": 0.0,
        }

    def __repr__(self):
        return (
            f"StateGraph(disks={self.num_disks}, pegs={self.num_pegs}, "
            f"vertices={len(self._vertices)}, edges={self._num_edges})"
        )
