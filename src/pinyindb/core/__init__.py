"""
核心資料型別

- Syllable: 16 位元打包的拼音音節
- Polyphone: 最多三個讀音的多音字
- formatter: 音節輸出樣式
"""

from .formatter import DisplayStyle, ToneRepresentation, render, render_tone
from .polyphone import MAX_READINGS, Polyphone
from .syllable import EMPTY, Final, Initial, Syllable, Tone, syllable

__all__ = [
    "Syllable",
    "Initial",
    "Final",
    "Tone",
    "EMPTY",
    "syllable",
    "Polyphone",
    "MAX_READINGS",
    "DisplayStyle",
    "ToneRepresentation",
    "render",
    "render_tone",
]
