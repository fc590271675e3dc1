from typing import Protocol, Iterable

class GraphBase(Protocol):
    def neighbors(self, v: int) -> Iterable[int]:
        """Возвращает смежные вершины для v."""
        ...

    def num_vertices(self) -> int:
        """Количество вершин в графе."""
        ...

    def num_edges(self) -> int:
        """Количество неориентированных рёбер."""
        ...
