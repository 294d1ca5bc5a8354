"""
pinyindb - 漢字轉拼音 (Chinese Character to Pinyin)

核心概念：
- 每個音節（聲母 + 韻母 + 聲調）打包成 16 位元整數
- 每個字最多三個讀音（Polyphone），第一個為預設讀音
- 以碼位分頁的查找表存放全部漢字，由內建資料檔建立一次後唯讀共享

官方入口（穩定 API）：
- `pinyindb.pinyin`
- `pinyindb.first_letters`
- `pinyindb.readings`
"""

# =============================================================================
# 查詢 API（官方入口）
# =============================================================================
from pinyindb.api import (
    build_database,
    first_letters,
    get_database,
    init_database,
    pinyin,
    readings,
    reset_database,
)

# =============================================================================
# 配置與例外
# =============================================================================
from pinyindb.config import PinyinConfig
from pinyindb.errors import DuplicateEntryError, ParseError, PinyinDataError

# =============================================================================
# 核心型別（進階用途）
# =============================================================================
from pinyindb.core import (
    DisplayStyle,
    Final,
    Initial,
    Polyphone,
    Syllable,
    Tone,
    ToneRepresentation,
    render,
    syllable,
)
from pinyindb.db import PinyinDatabase

# =============================================================================
# 日誌工具
# =============================================================================
from pinyindb.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # API
    "pinyin",
    "first_letters",
    "readings",
    "get_database",
    "init_database",
    "build_database",
    "reset_database",
    # Config / errors
    "PinyinConfig",
    "PinyinDataError",
    "ParseError",
    "DuplicateEntryError",
    # Core types (advanced)
    "Syllable",
    "Initial",
    "Final",
    "Tone",
    "syllable",
    "Polyphone",
    "DisplayStyle",
    "ToneRepresentation",
    "render",
    "PinyinDatabase",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"
