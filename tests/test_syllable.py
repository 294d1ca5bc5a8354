"""
測試音節編碼 (Syllable)

驗證：
1. 16 位元打包/還原無損
2. 哨兵值為 0
3. 非法數值不會被默默轉換
"""

import pytest

from pinyindb.core.syllable import EMPTY, Final, Initial, Syllable, Tone, syllable


class TestSyllableEncoding:
    """測試 16 位元打包"""

    def test_round_trip_all_combinations(self):
        """所有 (聲母, 韻母, 聲調) 組合都能無損還原"""
        for initial in Initial:
            for final in Final:
                for tone in Tone:
                    s = syllable(initial, final, tone)
                    value = s.to_u16()
                    assert 0 <= value <= 0xFFFF
                    assert Syllable.from_u16(value) == s

    def test_bit_layout(self):
        """聲調在 bit 0-2，聲母在 bit 3-7，韻母在 bit 8-15"""
        s = syllable(Initial.ZH, Final.ONG, Tone.ONE)
        assert s.to_u16() == (Final.ONG << 8) | (Initial.ZH << 3) | Tone.ONE

    def test_empty_sentinel_is_zero(self):
        assert EMPTY.to_u16() == 0
        assert EMPTY.is_empty
        assert Syllable.from_u16(0) == EMPTY

    def test_parsed_syllables_never_zero(self):
        """只要有韻母，打包結果就不會是 0"""
        s = syllable(Initial.NONE, Final.A, Tone.NONE)
        assert s.to_u16() != 0
        assert not s.is_empty

    def test_accessors(self):
        s = syllable(Initial.X, Final.IANG, Tone.THREE)
        assert s.initial is Initial.X
        assert s.final is Final.IANG
        assert s.tone is Tone.THREE
        assert int(s) == s.to_u16()

    def test_structural_equality(self):
        a = syllable(Initial.B, Final.A, Tone.TWO)
        b = Syllable(Initial.B, Final.A, Tone.TWO)
        assert a == b
        assert hash(a) == hash(b)
        assert a != syllable(Initial.B, Final.A, Tone.THREE)


class TestInvalidValues:
    """非法數值應拋出 ValueError"""

    def test_undefined_tone(self):
        with pytest.raises(ValueError):
            Syllable.from_u16(7)

    def test_undefined_initial(self):
        with pytest.raises(ValueError):
            Syllable.from_u16(31 << 3)

    def test_undefined_final(self):
        with pytest.raises(ValueError):
            Syllable.from_u16(0xFF << 8)

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            Syllable.from_u16(0x10000)
        with pytest.raises(ValueError):
            Syllable.from_u16(-1)


class TestSpellings:
    """測試聲母/韻母的拼寫"""

    def test_initial_spelling(self):
        assert Initial.NONE.spelling == ""
        assert Initial.B.spelling == "b"
        assert Initial.ZH.spelling == "zh"

    def test_final_spelling(self):
        assert Final.A.spelling == "a"
        assert Final.ENG.spelling == "eng"
        assert Final.V.spelling == "ü"
        assert Final.VE.spelling == "üe"
        assert Final.VAN.spelling == "üan"
        assert Final.EH.spelling == "ê"

    def test_str_uses_tone_marks(self):
        assert str(syllable(Initial.NONE, Final.A, Tone.NONE)) == "a"
        assert str(syllable(Initial.B, Final.ENG, Tone.NONE)) == "beng"
        assert str(syllable(Initial.ZH, Final.V, Tone.ONE)) == "zhǖ"
        assert str(syllable(Initial.NONE, Final.ER, Tone.ONE)) == "ēr"
