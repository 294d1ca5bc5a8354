"""
拼音資料檔解析器

資料檔每行一筆：

    U+4E2D: zhōng,zhòng  # 中

- 空白行與以 # 開頭的註解行會被忽略
- 一個字最多三個讀音，以逗號分隔，依序存入 Polyphone
- 每筆資料之後只能接註解或換行，其他殘留文字都視為錯誤

聲母以最長優先比對（zh/ch/sh 先於 z/c/s），若剩下的部分不是合法韻母，
就改用較短的聲母，最後才嘗試零聲母（例如 "ng"、"n"、"m̀"）。
韻母 + 聲調只接受封閉查找表中的寫法。
"""

import re
import string
import unicodedata
from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple

from pinyindb.core.formatter import TONED_FINALS
from pinyindb.core.polyphone import MAX_READINGS, Polyphone
from pinyindb.core.syllable import Final, Initial, Syllable, Tone
from pinyindb.errors import ParseError
from pinyindb.utils.logger import get_logger

logger = get_logger("db.parser")

MAX_CODE_POINT = 0x10FFFF

_CODE_POINT_RE = re.compile(r"U\+([0-9A-Fa-f]+): ")


def _nfc(text: str) -> str:
    return unicodedata.normalize("NFC", text)


def _build_final_table() -> Dict[str, Tuple[Final, Tone]]:
    table: Dict[str, Tuple[Final, Tone]] = {}
    for final in Final:
        if final is Final.NONE:
            continue
        table[_nfc(final.spelling)] = (final, Tone.NONE)
        for index, spelling in enumerate(TONED_FINALS[final]):
            table[_nfc(spelling)] = (final, Tone(index + 1))
    return table


# 韻母寫法 → (韻母, 聲調)，由輸出表反向產生
FINAL_TABLE: Dict[str, Tuple[Final, Tone]] = _build_final_table()

# 可以出現在音節裡的字元
PINYIN_CHARS: FrozenSet[str] = frozenset(string.ascii_letters) | frozenset(
    ch for spelling in FINAL_TABLE for ch in spelling
)

# 最長優先：zh/ch/sh 在 z/c/s 之前
_INITIAL_CANDIDATES: List[Initial] = sorted(
    (initial for initial in Initial if initial is not Initial.NONE),
    key=lambda initial: -len(initial.spelling),
)


def is_pinyin_char(ch: str) -> bool:
    return ch in PINYIN_CHARS


def parse_code_point(hex_digits: str) -> str:
    """
    把十六進位碼位轉成字元

    Raises:
        ParseError: 不是合法的 Unicode 純量值（超出範圍或為代理碼位）
    """
    value = int(hex_digits, 16)
    if value > MAX_CODE_POINT or 0xD800 <= value <= 0xDFFF:
        raise ParseError("invalid unicode scalar value", text=f"U+{hex_digits}")
    return chr(value)


def parse_final_and_tone(text: str) -> Optional[Tuple[Final, Tone]]:
    """查韻母表；不在表中回傳 None"""
    if not text:
        return None
    return FINAL_TABLE.get(_nfc(text))


def split_syllable(word: str) -> Optional[Syllable]:
    """
    把一個完整的拼音字（如 "zhōng"）拆成聲母、韻母、聲調

    Returns:
        Syllable，無法辨識時回傳 None
    """
    for initial in _INITIAL_CANDIDATES:
        if word.startswith(initial.spelling):
            found = parse_final_and_tone(word[len(initial.spelling):])
            if found is not None:
                return Syllable(initial, found[0], found[1])
    found = parse_final_and_tone(word)
    if found is not None:
        return Syllable(Initial.NONE, found[0], found[1])
    return None


def is_syllable(text: str) -> bool:
    """text 是否為資料檔可接受的完整音節"""
    return bool(text) and all(ch in PINYIN_CHARS for ch in text) and split_syllable(text) is not None


def parse_syllable(text: str) -> Syllable:
    """
    解析單一音節字串

    Raises:
        ParseError: 不是合法的拼音音節
    """
    result = split_syllable(text)
    if result is None:
        raise ParseError("unrecognized syllable", text=text)
    return result


def _scan_syllable(line: str, pos: int, lineno: int) -> Tuple[Syllable, int]:
    end = pos
    while end < len(line) and line[end] in PINYIN_CHARS:
        end += 1
    word = line[pos:end]
    if not word:
        raise ParseError("expected syllable", lineno, pos + 1, line[pos:])
    result = split_syllable(word)
    if result is None:
        raise ParseError("unrecognized syllable", lineno, pos + 1, word)
    return result, end


def parse_line(line: str, lineno: int = 1) -> Optional[Tuple[str, Polyphone]]:
    """
    解析一行（不含換行字元）

    Returns:
        (字元, Polyphone)；空白行或註解行回傳 None

    Raises:
        ParseError: 格式錯誤
    """
    if line.endswith("\r"):
        line = line[:-1]

    stripped = line.lstrip(" \t")
    if not stripped or stripped.startswith("#"):
        return None

    match = _CODE_POINT_RE.match(line)
    if match is None:
        raise ParseError("expected 'U+<hex>: '", lineno, 1, line)
    try:
        character = parse_code_point(match.group(1))
    except ParseError as exc:
        raise ParseError(exc.message, lineno, 1, exc.text) from None

    syllables: List[Syllable] = []
    pos = match.end()
    while True:
        syllable, pos = _scan_syllable(line, pos, lineno)
        syllables.append(syllable)
        if pos < len(line) and line[pos] == ",":
            pos += 1
            continue
        break

    rest = line[pos:].lstrip(" \t")
    if rest and not rest.startswith("#"):
        raise ParseError("unexpected trailing text", lineno, len(line) - len(rest) + 1, rest)

    if len(syllables) > MAX_READINGS:
        raise ParseError(
            f"too many readings ({len(syllables)} > {MAX_READINGS})", lineno, 1, line
        )

    return character, Polyphone.from_syllables(syllables)


def iter_records(text: str) -> Iterator[Tuple[str, Polyphone]]:
    """
    逐行解析整份資料檔

    Yields:
        (字元, Polyphone)

    Raises:
        ParseError: 任一行格式錯誤（資料檔損毀）
    """
    for lineno, line in enumerate(text.split("\n"), start=1):
        record = parse_line(line, lineno)
        if record is not None:
            yield record


def parse_records(text: str) -> List[Tuple[str, Polyphone]]:
    records = list(iter_records(text))
    logger.debug("parsed %d records", len(records))
    return records
