"""
例外類別

- PinyinDataError: 拼音資料相關錯誤的基底類別
- ParseError: 資料檔格式錯誤（載入時即失敗）
- DuplicateEntryError: 同一字元重複寫入資料庫
"""

from typing import Optional


class PinyinDataError(Exception):
    """拼音資料錯誤基底類別"""


class ParseError(PinyinDataError, ValueError):
    """
    資料檔解析失敗

    屬性:
        line: 行號（從 1 開始），未知時為 None
        column: 欄位（從 1 開始），未知時為 None
        text: 出錯的片段
    """

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        text: str = "",
    ):
        self.message = message
        self.line = line
        self.column = column
        self.text = text
        super().__init__(self._format())

    def _format(self) -> str:
        location = ""
        if self.line is not None:
            location = f"line {self.line}"
            if self.column is not None:
                location += f", column {self.column}"
            location += ": "
        snippet = f" ({self.text[:20]!r})" if self.text else ""
        return f"{location}{self.message}{snippet}"


class DuplicateEntryError(PinyinDataError):
    """同一個碼位已經有資料"""

    def __init__(self, character: str):
        self.character = character
        super().__init__(f"duplicate entry for U+{ord(character):04X} ({character})")
