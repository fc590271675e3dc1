from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Iterable, List, Dict


@dataclass(frozen=True)
class Configuration:
    """
    Конфигурация головоломки: на каком стержне лежит каждый диск.

    Хранится как tuple[int], где pegs[i] = стержень (0-based) диска i.
    Индекс диска работает как радиус: диск i можно снять, только если
    ни один из дисков 0..i-1 не лежит на том же стержне.
    Immutable → можно безопасно класть в dict / set.
    """
    pegs: Tuple[int, ...]   # стержни дисков

    @classmethod
    def from_pegs(cls, pegs: Iterable[int]) -> Configuration:
        return cls(tuple(int(p) for p in pegs))

    # ------------------------------------------------------------
    # Доступ к данным
    # ------------------------------------------------------------
    def __getitem__(self, disk: int) -> int:
        """Стержень конкретного диска."""
        return self.pegs[disk]

    def with_disk_on(self, disk: int, peg: int) -> Configuration:
        """
        Создать новую конфигурацию, переложив один диск на другой стержень.

        Пример:
            new_conf = old_conf.with_disk_on(2, 0)
        """
        pegs = list(self.pegs)
        pegs[disk] = peg
        return Configuration(tuple(pegs))

    def stacks(self, num_pegs: int) -> Dict[int, List[int]]:
        """
        Разложить диски по стержням: peg → [диски сверху вниз].
        Нужно для отладки и проверки ходов.
        """
        result: Dict[int, List[int]] = {peg: [] for peg in range(num_pegs)}
        for disk, peg in enumerate(self.pegs):
            result.setdefault(peg, []).append(disk)
        return result

    def __len__(self) -> int:
        """Число дисков."""
        return len(self.pegs)

    def __repr__(self) -> str:
        return f"Configuration(pegs={self.pegs})"
