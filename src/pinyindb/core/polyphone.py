"""
多音字 (Polyphone)

一個字最多三個讀音，依資料來源的順序存放在三個 16 位元槽位；
未使用的槽位為 0（空音節）。槽位 0 一定有值，是該字的預設讀音。
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .syllable import Syllable

MAX_READINGS = 3


@dataclass(frozen=True)
class Polyphone:
    slots: Tuple[int, int, int] = (0, 0, 0)

    @classmethod
    def from_syllables(cls, syllables: Iterable[Syllable]) -> "Polyphone":
        """
        由 1~3 個音節建立多音字，第一個即預設讀音

        Raises:
            ValueError: 沒有音節、超過三個音節，或含有空音節
        """
        values = [s.to_u16() for s in syllables]
        if not values:
            raise ValueError("polyphone requires at least one syllable")
        if len(values) > MAX_READINGS:
            raise ValueError(
                f"polyphone holds at most {MAX_READINGS} syllables, got {len(values)}"
            )
        if 0 in values:
            raise ValueError("empty syllable cannot be stored in a polyphone")
        values.extend([0] * (MAX_READINGS - len(values)))
        return cls(tuple(values))

    @classmethod
    def from_u16s(cls, first: int, second: int = 0, third: int = 0) -> "Polyphone":
        return cls((first, second, third))

    def to_u16s(self) -> Tuple[int, int, int]:
        return self.slots

    def first(self) -> Syllable:
        return Syllable.from_u16(self.slots[0])

    def iter(self) -> Iterator[Syllable]:
        for value in self.slots:
            if value != 0:
                yield Syllable.from_u16(value)

    def __iter__(self) -> Iterator[Syllable]:
        return self.iter()

    def __len__(self) -> int:
        return sum(1 for value in self.slots if value != 0)

    @property
    def is_empty(self) -> bool:
        return self.slots == (0, 0, 0)
