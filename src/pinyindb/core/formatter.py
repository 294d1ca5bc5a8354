"""
拼音輸出格式

把 Syllable 轉成字串，支援四種樣式：
- UNICODE_TONE:  zhōng（聲調符號）
- NUMBERED_TONE: zhong1（數字聲調）
- NO_TONES:      zhong（去除聲調）
- FIRST_LETTER:  z（首字母）

TONED_FINALS 是「韻母 × 聲調 → 帶調寫法」的封閉表，
解析器的韻母查找表也是由這張表反向產生，兩者永遠一致。
"""

from enum import Enum
from typing import Dict, Optional, Tuple, Union

from pinyindb.utils.cache import cached_function

from .syllable import Final, Initial, Syllable, Tone


class ToneRepresentation(Enum):
    """pinyin() 的聲調表示方式（預設 UNICODE）"""

    NONE = "None"
    NUMBERED = "Numbered"
    UNICODE = "Unicode"

    @classmethod
    def default(cls) -> "ToneRepresentation":
        return cls.UNICODE

    @classmethod
    def parse(cls, value: Union[str, "ToneRepresentation", None]) -> "ToneRepresentation":
        """
        由外部參數（如 HTTP query string）解析，名稱不分大小寫

        None 或空字串回傳預設值；無法辨識時拋出 ValueError。
        """
        if isinstance(value, cls):
            return value
        if value is None or not str(value).strip():
            return cls.default()
        key = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"unknown tone representation {value!r} (expected one of: {choices})")

    @property
    def display_style(self) -> "DisplayStyle":
        return _TONE_TO_STYLE[self]


class DisplayStyle(Enum):
    UNICODE_TONE = "unicode_tone"
    NUMBERED_TONE = "numbered_tone"
    NO_TONES = "no_tones"
    FIRST_LETTER = "first_letter"


_TONE_TO_STYLE = {
    ToneRepresentation.NONE: DisplayStyle.NO_TONES,
    ToneRepresentation.NUMBERED: DisplayStyle.NUMBERED_TONE,
    ToneRepresentation.UNICODE: DisplayStyle.UNICODE_TONE,
}


# =============================================================================
# 韻母帶調寫法（一、二、三、四聲）
# =============================================================================
# 標調位置：有 a 標 a；沒有 a 時 e/o 優先；iu、ui 標在後一個字母。
# 無法預先組合的字元（m̄、n̄、ê̄ 等）以 combining mark 表示。

TONED_FINALS: Dict[Final, Tuple[str, str, str, str]] = {
    Final.A: ("ā", "á", "ǎ", "à"),
    Final.O: ("ō", "ó", "ǒ", "ò"),
    Final.E: ("ē", "é", "ě", "è"),
    Final.EH: ("ê̄", "ế", "ê̌", "ề"),
    Final.I: ("ī", "í", "ǐ", "ì"),
    Final.U: ("ū", "ú", "ǔ", "ù"),
    Final.V: ("ǖ", "ǘ", "ǚ", "ǜ"),
    Final.AI: ("āi", "ái", "ǎi", "ài"),
    Final.EI: ("ēi", "éi", "ěi", "èi"),
    Final.AO: ("āo", "áo", "ǎo", "ào"),
    Final.OU: ("ōu", "óu", "ǒu", "òu"),
    Final.AN: ("ān", "án", "ǎn", "àn"),
    Final.EN: ("ēn", "én", "ěn", "èn"),
    Final.ANG: ("āng", "áng", "ǎng", "àng"),
    Final.ENG: ("ēng", "éng", "ěng", "èng"),
    Final.ONG: ("ōng", "óng", "ǒng", "òng"),
    Final.ER: ("ēr", "ér", "ěr", "èr"),
    Final.IA: ("iā", "iá", "iǎ", "ià"),
    Final.IE: ("iē", "ié", "iě", "iè"),
    Final.IAO: ("iāo", "iáo", "iǎo", "iào"),
    Final.IU: ("iū", "iú", "iǔ", "iù"),
    Final.IAN: ("iān", "ián", "iǎn", "iàn"),
    Final.IN: ("īn", "ín", "ǐn", "ìn"),
    Final.IANG: ("iāng", "iáng", "iǎng", "iàng"),
    Final.ING: ("īng", "íng", "ǐng", "ìng"),
    Final.IONG: ("iōng", "ióng", "iǒng", "iòng"),
    Final.UA: ("uā", "uá", "uǎ", "uà"),
    Final.UO: ("uō", "uó", "uǒ", "uò"),
    Final.UAI: ("uāi", "uái", "uǎi", "uài"),
    Final.UI: ("uī", "uí", "uǐ", "uì"),
    Final.UAN: ("uān", "uán", "uǎn", "uàn"),
    Final.UN: ("ūn", "ún", "ǔn", "ùn"),
    Final.UANG: ("uāng", "uáng", "uǎng", "uàng"),
    Final.UENG: ("uēng", "uéng", "uěng", "uèng"),
    Final.UE: ("uē", "ué", "uě", "uè"),
    Final.VE: ("üē", "üé", "üě", "üè"),
    Final.VAN: ("üān", "üán", "üǎn", "üàn"),
    Final.M: ("m̄", "ḿ", "m̌", "m̀"),
    Final.N: ("n̄", "ń", "ň", "ǹ"),
    Final.NG: ("n̄g", "ńg", "ňg", "ǹg"),
}


def toned_final(final: Final, tone: Tone) -> str:
    """
    韻母的帶調寫法；tone 為 NONE 時回傳不帶調寫法

    Raises:
        ValueError: final 為 NONE（哨兵值不可輸出）
    """
    if final is Final.NONE:
        raise ValueError("cannot render an empty final")
    if tone is Tone.NONE:
        return final.spelling
    return TONED_FINALS[final][tone - 1]


@cached_function(maxsize=4096)
def render(syllable: Syllable, style: DisplayStyle = DisplayStyle.UNICODE_TONE) -> str:
    """
    依樣式輸出音節

    Raises:
        ValueError: 音節沒有韻母（空音節或非法組合）
    """
    initial = syllable.initial
    final = syllable.final
    tone = syllable.tone
    if final is Final.NONE:
        raise ValueError(f"cannot render syllable without final: {syllable!r}")

    if style is DisplayStyle.UNICODE_TONE:
        return initial.spelling + toned_final(final, tone)
    if style is DisplayStyle.NUMBERED_TONE:
        digit = "" if tone is Tone.NONE else str(int(tone))
        return initial.spelling + final.spelling + digit
    if style is DisplayStyle.NO_TONES:
        return initial.spelling + final.spelling
    if style is DisplayStyle.FIRST_LETTER:
        if initial is not Initial.NONE:
            return initial.spelling[0]
        return final.spelling[0]
    raise ValueError(f"unknown display style: {style!r}")


def render_tone(syllable: Syllable, tone_repr: Optional[ToneRepresentation] = None) -> str:
    """依 ToneRepresentation 輸出（pinyin() 使用）"""
    return render(syllable, (tone_repr or ToneRepresentation.default()).display_style)
