"""
測試多音字 (Polyphone)
"""

import pytest

from pinyindb.core.polyphone import Polyphone
from pinyindb.core.syllable import Final, Initial, Tone, syllable


LING = syllable(Initial.L, Final.ING, Tone.TWO)
YUAN = syllable(Initial.Y, Final.UAN, Tone.TWO)
XING = syllable(Initial.X, Final.ING, Tone.ONE)


class TestPolyphone:
    """測試多音字建立與迭代"""

    def test_single_syllable(self):
        p = Polyphone.from_syllables([LING])
        assert p.to_u16s() == (LING.to_u16(), 0, 0)
        assert p.first() == LING
        assert len(p) == 1

    def test_order_is_preserved(self):
        p = Polyphone.from_syllables([LING, YUAN, XING])
        assert list(p) == [LING, YUAN, XING]
        assert p.first() == LING

    def test_iter_is_restartable(self):
        p = Polyphone.from_syllables([LING, YUAN])
        assert list(p.iter()) == list(p.iter()) == [LING, YUAN]

    def test_iter_skips_empty_slots(self):
        p = Polyphone.from_u16s(LING.to_u16(), 0, XING.to_u16())
        assert list(p) == [LING, XING]

    def test_empty_polyphone_iterates_nothing(self):
        p = Polyphone.from_u16s(0, 0, 0)
        assert p.is_empty
        assert list(p) == []

    def test_no_syllables_rejected(self):
        with pytest.raises(ValueError):
            Polyphone.from_syllables([])

    def test_too_many_syllables_rejected(self):
        with pytest.raises(ValueError):
            Polyphone.from_syllables([LING, YUAN, XING, LING])

    def test_equality(self):
        assert Polyphone.from_syllables([LING, YUAN]) == Polyphone.from_u16s(
            LING.to_u16(), YUAN.to_u16()
        )
