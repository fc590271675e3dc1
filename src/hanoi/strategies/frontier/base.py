from __future__ import annotations
from typing import Protocol


class Frontier(Protocol):
    """
    Интерфейс фронта BFS: вершины найдены, но ещё не раскрыты.

    Frontier определяет:
      - как добавлять вершины (push)
      - как извлекать (pop / peek)
      - как проверять пустоту

    Храним индексы вершин, а не сами Vertex.
    """

    def push(self, vertex_id: int) -> None:
        """Добавить вершину во фронт."""
        ...

    def pop(self) -> int:
        """Удалить и вернуть следующую вершину."""
        ...

    def peek(self) -> int:
        """Посмотреть на следующую вершину, НЕ удаляя."""
        ...

    def empty(self) -> bool:
        """True если фронт пуст."""
        ...

    def __len__(self) -> int:
        ...
