"""
公開查詢 API

- pinyin(text, tone_repr): 每個字輸出預設讀音，以空白分隔
- first_letters(text): 每個字輸出首字母，不加分隔
- readings(character, tone_repr): 一個字的全部讀音

資料庫在第一次使用時由內建資料檔建立（每個行程只建一次），之後唯讀共享。
"""

import threading
from typing import List, Optional, Union

from .config import DEFAULT_CONFIG, PinyinConfig
from .core.formatter import DisplayStyle, ToneRepresentation, render, render_tone
from .core.polyphone import Polyphone
from .db.database import PinyinDatabase
from .resource import read_resource
from .utils.logger import TimingContext, get_logger

logger = get_logger("api")

_database: Optional[PinyinDatabase] = None
_database_lock = threading.Lock()

ToneInput = Union[ToneRepresentation, str, None]


def build_database(config: Optional[PinyinConfig] = None) -> PinyinDatabase:
    """
    依配置建立新的資料庫（不影響全域資料庫）

    Raises:
        ParseError: 資料檔格式錯誤
    """
    config = config or DEFAULT_CONFIG
    with TimingContext("build_database", callback=config.on_timing):
        text = read_resource(config.resource_path)
        return PinyinDatabase.load(text, polyphone=config.polyphone)


def init_database(config: Optional[PinyinConfig] = None) -> PinyinDatabase:
    """明確建立並設定全域資料庫（取代既有的）"""
    global _database
    database = build_database(config)
    logger.debug("replacing default database (%d characters)", len(database))
    with _database_lock:
        _database = database
    return database


def get_database() -> PinyinDatabase:
    """取得全域資料庫；尚未建立時以預設配置建立"""
    global _database
    database = _database
    if database is not None:
        return database
    with _database_lock:
        if _database is None:
            logger.debug("building default database")
            _database = build_database(DEFAULT_CONFIG)
        return _database


def reset_database() -> None:
    """丟棄全域資料庫（下次使用時重建）"""
    global _database
    with _database_lock:
        _database = None


def pinyin(
    text: str,
    tone_repr: ToneInput = ToneRepresentation.UNICODE,
    database: Optional[PinyinDatabase] = None,
) -> str:
    """
    回傳每個字的拼音（預設讀音），每個字後面接一個空白

    查不到的字元原樣輸出，後面同樣接一個空白。

    範例:
        >>> pinyin("你好")
        'nǐ hǎo '
        >>> pinyin("你好", ToneRepresentation.NUMBERED)
        'ni3 hao3 '
    """
    tone_repr = ToneRepresentation.parse(tone_repr)
    if database is None:
        database = get_database()
    parts = []
    for ch in text:
        found = database.get_syllable(ch)
        parts.append(render_tone(found, tone_repr) if found is not None else ch)
        parts.append(" ")
    return "".join(parts)


def first_letters(text: str, database: Optional[PinyinDatabase] = None) -> str:
    """
    把每個字換成拼音首字母，不加分隔；查不到的字元原樣輸出

    範例:
        >>> first_letters("你l好")
        'nlh'
    """
    if database is None:
        database = get_database()
    parts = []
    for ch in text:
        found = database.get_syllable(ch)
        parts.append(render(found, DisplayStyle.FIRST_LETTER) if found is not None else ch)
    return "".join(parts)


def readings(
    character: str,
    tone_repr: ToneInput = ToneRepresentation.UNICODE,
    database: Optional[PinyinDatabase] = None,
) -> List[str]:
    """一個字的全部讀音（依資料檔順序）；查不到時回傳空列表"""
    tone_repr = ToneRepresentation.parse(tone_repr)
    if database is None:
        database = get_database()
    found = database.get(character)
    if found is None:
        return []
    syllables = list(found) if isinstance(found, Polyphone) else [found]
    return [render_tone(s, tone_repr) for s in syllables]
