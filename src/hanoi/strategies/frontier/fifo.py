from __future__ import annotations
from collections import deque
from typing import Deque

from .base import Frontier


class FifoFrontier(Frontier):
    """
    Фронт как очередь (FIFO).

    Только FIFO даёт кратчайшие пути на невзвешенном графе.
    """

    def __init__(self):
        self._queue: Deque[int] = deque()

    def push(self, vertex_id: int) -> None:
        self._queue.append(vertex_id)

    def pop(self) -> int:
        return self._queue.popleft()

    def peek(self) -> int:
        return self._queue[0]

    def empty(self) -> bool:
        return len(self._queue) == 0

    def __len__(self) -> int:
        return len(self._queue)
