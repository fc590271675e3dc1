from __future__ import annotations
from typing import Iterator, Tuple

from hanoi.configuration import Configuration
from .base import MoveGenerator


def peg_has_smaller_disk(config: Configuration, disk: int, peg: int) -> bool:
    """
    True если на стержне peg лежит хотя бы один из дисков 0..disk-1.

    Индекс диска работает как радиус: диск 0 самый маленький.
    """
    for other in range(disk - 1, -1, -1):
        if config[other] == peg:
            return True
    return False


def disk_is_movable(config: Configuration, disk: int) -> bool:
    """Диск можно снять, если среди дисков 0..disk-1 никто не делит с ним стержень."""
    return not peg_has_smaller_disk(config, disk, config[disk])


def is_legal_destination(config: Configuration, disk: int, peg: int) -> bool:
    """Стержень подходит, если он другой и на нём нет дисков 0..disk-1."""
    return peg != config[disk] and not peg_has_smaller_disk(config, disk, peg)


class LegalMoveGenerator(MoveGenerator):
    """
    Генератор ходов по правилам обобщённой Ханойской башни.

    Перебор: диск по возрастанию индекса, затем стержень по возрастанию.
    Порядок влияет только на то, какой из равных по длине путей
    будет найден, но не на саму длину.
    """

    def __init__(self, num_pegs: int):
        self.num_pegs = num_pegs

    def neighbors(
        self,
        config: Configuration,
    ) -> Iterator[Tuple[int, int, Configuration]]:
        for disk in range(len(config)):
            if not disk_is_movable(config, disk):
                continue
            source = config[disk]
            for peg in range(self.num_pegs):
                if not is_legal_destination(config, disk, peg):
                    continue
                yield source, peg, config.with_disk_on(disk, peg)
