"""
拼音音節 (Syllable)

一個音節由聲母 (Initial)、韻母 (Final)、聲調 (Tone) 組成，
可無損地打包成 16 位元整數：

    bit  0-2   聲調 (3 bits)
    bit  3-7   聲母 (5 bits)
    bit  8-15  韻母 (8 bits)

全為 0 的值（無聲調、無聲母、無韻母）是「空」哨兵值，
資料庫以它表示「沒有資料」。解析器產生的音節一定有韻母，因此不會與哨兵值衝突。
"""

from dataclasses import dataclass
from enum import IntEnum

TONE_BITS = 3
INITIAL_BITS = 5
FINAL_BITS = 8

TONE_SHIFT = 0
INITIAL_SHIFT = TONE_SHIFT + TONE_BITS
FINAL_SHIFT = INITIAL_SHIFT + INITIAL_BITS

TONE_MASK = (1 << TONE_BITS) - 1
INITIAL_MASK = (1 << INITIAL_BITS) - 1
FINAL_MASK = (1 << FINAL_BITS) - 1

U16_MAX = 0xFFFF


class Initial(IntEnum):
    """聲母（NONE 表示零聲母，如 "a"、"ēr"）"""

    NONE = 0
    B = 1
    P = 2
    M = 3
    F = 4
    D = 5
    T = 6
    N = 7
    L = 8
    G = 9
    K = 10
    H = 11
    J = 12
    Q = 13
    X = 14
    ZH = 15
    CH = 16
    SH = 17
    R = 18
    Z = 19
    C = 20
    S = 21
    Y = 22
    W = 23

    @property
    def spelling(self) -> str:
        if self is Initial.NONE:
            return ""
        return self.name.lower()


class Final(IntEnum):
    """
    韻母（書寫形式）

    取的是去掉聲母後實際寫出來的部分，例如 "yuán" 是 Y + UAN、"jū" 是 J + U。
    NONE 只用於哨兵值，解析結果永遠不會是 NONE。
    """

    NONE = 0
    A = 1
    O = 2
    E = 3
    EH = 4
    I = 5
    U = 6
    V = 7
    AI = 8
    EI = 9
    AO = 10
    OU = 11
    AN = 12
    EN = 13
    ANG = 14
    ENG = 15
    ONG = 16
    ER = 17
    IA = 18
    IE = 19
    IAO = 20
    IU = 21
    IAN = 22
    IN = 23
    IANG = 24
    ING = 25
    IONG = 26
    UA = 27
    UO = 28
    UAI = 29
    UI = 30
    UAN = 31
    UN = 32
    UANG = 33
    UENG = 34
    UE = 35
    VE = 36
    VAN = 37
    M = 38
    N = 39
    NG = 40

    @property
    def spelling(self) -> str:
        """不帶聲調的寫法"""
        return _FINAL_SPELLINGS.get(self, self.name.lower())


_FINAL_SPELLINGS = {
    Final.NONE: "",
    Final.EH: "ê",
    Final.V: "ü",
    Final.VE: "üe",
    Final.VAN: "üan",
}


class Tone(IntEnum):
    """聲調（NONE 為輕聲/無調）"""

    NONE = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4


@dataclass(frozen=True)
class Syllable:
    """一個拼音音節；相等性為結構相等"""

    initial: Initial
    final: Final
    tone: Tone

    def to_u16(self) -> int:
        return (
            (int(self.tone) << TONE_SHIFT)
            | (int(self.initial) << INITIAL_SHIFT)
            | (int(self.final) << FINAL_SHIFT)
        )

    @classmethod
    def from_u16(cls, value: int) -> "Syllable":
        """
        由 16 位元整數還原音節

        Raises:
            ValueError: 數值超出 16 位元，或任一欄位不是已定義的列舉值
        """
        if not 0 <= value <= U16_MAX:
            raise ValueError(f"syllable value out of range: {value!r}")
        return cls(
            initial=Initial((value >> INITIAL_SHIFT) & INITIAL_MASK),
            final=Final((value >> FINAL_SHIFT) & FINAL_MASK),
            tone=Tone((value >> TONE_SHIFT) & TONE_MASK),
        )

    @property
    def is_empty(self) -> bool:
        return self.to_u16() == 0

    def __int__(self) -> int:
        return self.to_u16()

    def __str__(self) -> str:
        from .formatter import DisplayStyle, render

        return render(self, DisplayStyle.UNICODE_TONE)


EMPTY = Syllable(Initial.NONE, Final.NONE, Tone.NONE)


def syllable(initial: Initial, final: Final, tone: Tone = Tone.NONE) -> Syllable:
    """建立音節（純打包；各欄位須為已定義的列舉值）"""
    return Syllable(Initial(initial), Final(final), Tone(tone))
