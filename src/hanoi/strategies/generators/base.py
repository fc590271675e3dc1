from __future__ import annotations
from typing import Protocol, Iterator, Tuple

from hanoi.configuration import Configuration


class MoveGenerator(Protocol):
    """
    Интерфейс генератора соседних конфигураций.

    Генератор отвечает за:
        - проверку, какие диски можно снять (верхние на стержне)
        - проверку, куда их можно положить
        - построение новой Configuration для каждого допустимого хода

    Важно:
        neighbors() делает РОВНО ОДИН ход одним диском.
    """

    num_pegs: int

    def neighbors(
        self,
        config: Configuration,
    ) -> Iterator[Tuple[int, int, Configuration]]:
        """
        Перечислить соседей конфигурации.

        Возвращает итератор троек:
            (исходный стержень, целевой стержень, новая Configuration)
        Стержни 0-based. Порядок: диск по возрастанию индекса,
        затем стержень по возрастанию.
        """
        ...
