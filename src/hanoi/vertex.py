from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Set

from hanoi.configuration import Configuration
from hanoi.errors import InvalidStateTransitionError


class VisitState(Enum):
    """
    Состояние вершины в BFS (бывшие white / grey / black).

    Переходы только вперёд:
        UNVISITED → FRONTIER → SETTLED
    """
    UNVISITED = 0
    FRONTIER = 1
    SETTLED = 2


@dataclass(frozen=True)
class Move:
    """Перекладывание одного диска: стержни в 1-based нумерации."""

    source_peg: int
    dest_peg: int

    def __str__(self) -> str:
        return f"{self.source_peg} {self.dest_peg}"


@dataclass(eq=False)
class Vertex:
    """
    Вершина графа состояний.

    Содержит:
        configuration : Configuration
            Конфигурация дисков, которую представляет вершина.

        index         : int
            Порядковый номер вершины в StateGraph (позиция в арене).

        visit_state   : VisitState
            Прогресс BFS.

        distance      : int
            Глубина BFS от стартовой вершины. Имеет смысл только
            после выхода из UNVISITED.

        predecessor   : int | None
            Индекс вершины, из которой эту вершину нашли впервые.
            Это не владение, а слабая ссылка внутри одного StateGraph.

        last_move     : Move | None
            Ход, который привёл сюда из predecessor (None у старта).

        neighbors     : set[int]
            Индексы смежных вершин (граф неориентированный).
    """

    configuration: Configuration
    index: int
    visit_state: VisitState = VisitState.UNVISITED
    distance: int = 0
    predecessor: Optional[int] = None
    last_move: Optional[Move] = None
    neighbors: Set[int] = field(default_factory=set)

    def mark_frontier(
        self,
        distance: int,
        predecessor: Optional[int] = None,
        last_move: Optional[Move] = None,
    ) -> None:
        """
        Первое обнаружение вершины. distance / predecessor / last_move
        записываются ровно один раз, здесь.
        """
        if self.visit_state is not VisitState.UNVISITED:
            raise InvalidStateTransitionError(
                f"vertex {self.index} is {self.visit_state.name}, expected UNVISITED"
            )
        self.distance = distance
        self.predecessor = predecessor
        self.last_move = last_move
        self.visit_state = VisitState.FRONTIER

    def mark_settled(self) -> None:
        """Все соседи вершины обработаны."""
        if self.visit_state is not VisitState.FRONTIER:
            raise InvalidStateTransitionError(
                f"vertex {self.index} is {self.visit_state.name}, expected FRONTIER"
            )
        self.visit_state = VisitState.SETTLED

    def __repr__(self):
        return (
            f"Vertex(index={self.index}, pegs={self.configuration.pegs}, "
            f"state={self.visit_state.name}, distance={self.distance})"
        )
