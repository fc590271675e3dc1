from __future__ import annotations
from dataclasses import dataclass

from hanoi.configuration import Configuration
from hanoi.errors import MalformedPuzzleError


@dataclass(frozen=True)
class Puzzle:
    """
    Входные данные задачи: размеры и две конфигурации (стержни 0-based).
    """

    num_disks: int
    num_pegs: int
    start: Configuration
    goal: Configuration

    def validate(self) -> None:
        """Проверить корректность до запуска поиска."""
        if self.num_disks < 1:
            raise MalformedPuzzleError(f"num_disks must be positive, got {self.num_disks}")
        if self.num_pegs < 2:
            raise MalformedPuzzleError(f"num_pegs must be at least 2, got {self.num_pegs}")
        for name, config in (("start", self.start), ("goal", self.goal)):
            if len(config) != self.num_disks:
                raise MalformedPuzzleError(
                    f"{name} configuration has {len(config)} entries, expected {self.num_disks}"
                )
            for disk, peg in enumerate(config.pegs):
                if not 0 <= peg < self.num_pegs:
                    raise MalformedPuzzleError(
                        f"{name} configuration puts disk {disk} on peg {peg + 1}, "
                        f"valid pegs are 1..{self.num_pegs}"
                    )
