"""
拼音資料庫

以碼位索引每個字的讀音。資料分頁存放：

- 頁碼 = 碼位 >> 8，頁內位移 = 碼位 & 0xFF
- 每頁固定 256 格，第一次寫入該頁時才建立（全部填 0）
- 格子內容為 0 表示「沒有資料」

中日韓文字集中在連續的 Unicode 區塊，用到的頁很密、沒用到的頁不配置，
查詢是 O(1)。

每頁是 array('H')：多音字模式每格 3 個 16 位元槽位，單音模式每格 1 個。
資料庫建好之後只讀不寫，可在多執行緒間共享。
"""

from array import array
from typing import Dict, Iterator, Optional, Tuple, Union

from pinyindb.core.polyphone import MAX_READINGS, Polyphone
from pinyindb.core.syllable import Syllable
from pinyindb.errors import DuplicateEntryError
from pinyindb.utils.logger import TimingContext, get_logger

from .parser import iter_records

PAGE_SIZE = 256
PAGE_SHIFT = 8
OFFSET_MASK = PAGE_SIZE - 1
MAX_CODE_POINT = 0xFFFFFF


def _split(character: str) -> Tuple[int, int]:
    code_point = ord(character)
    if code_point > MAX_CODE_POINT:
        raise ValueError(f"code point out of range: U+{code_point:X}")
    return code_point >> PAGE_SHIFT, code_point & OFFSET_MASK


class PinyinDatabase:
    """
    碼位 → Polyphone（或單一 Syllable）的分頁查找表

    建立方式:
        db = PinyinDatabase.load(text)
        db.get("中")  # Polyphone
    """

    def __init__(self, polyphone: bool = True):
        self._polyphone = polyphone
        self._width = MAX_READINGS if polyphone else 1
        self._pages: Dict[int, array] = {}
        self._count = 0
        self._logger = get_logger("db")

    @property
    def polyphone(self) -> bool:
        return self._polyphone

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, character: object) -> bool:
        if not isinstance(character, str) or len(character) != 1:
            return False
        return self.get_syllable(character) is not None

    # ========== 寫入 ==========

    def _new_page(self) -> array:
        return array("H", bytes(2 * PAGE_SIZE * self._width))

    def insert(self, character: str, polyphone: Polyphone, overwrite: bool = False) -> None:
        """
        寫入一個字的讀音；該頁不存在時先建立

        Raises:
            DuplicateEntryError: 該字已有資料且 overwrite 為 False
            ValueError: 碼位超過 0xFFFFFF，或 polyphone 為空
        """
        if polyphone.is_empty:
            raise ValueError("cannot insert an empty polyphone")
        page_id, offset = _split(character)
        page = self._pages.get(page_id)
        if page is None:
            page = self._new_page()
            self._pages[page_id] = page

        start = offset * self._width
        occupied = page[start] != 0
        if occupied and not overwrite:
            raise DuplicateEntryError(character)

        if self._polyphone:
            page[start:start + MAX_READINGS] = array("H", polyphone.to_u16s())
        else:
            page[start] = polyphone.to_u16s()[0]
        if not occupied:
            self._count += 1

    def compact(self) -> None:
        """
        建立完成後整理儲存空間

        重建頁表字典以釋放成長過程中多配置的空間，對 get() 沒有可見影響。
        """
        self._pages = dict(sorted(self._pages.items()))

    # ========== 查詢 ==========

    def get(self, character: str) -> Optional[Union[Polyphone, Syllable]]:
        """
        查詢一個字

        Returns:
            多音字模式回傳 Polyphone，單音模式回傳 Syllable；沒有資料回傳 None
        """
        page_id, offset = _split(character)
        page = self._pages.get(page_id)
        if page is None:
            return None
        start = offset * self._width
        if page[start] == 0:
            return None
        if self._polyphone:
            return Polyphone.from_u16s(*page[start:start + MAX_READINGS])
        return Syllable.from_u16(page[start])

    def get_syllable(self, character: str) -> Optional[Syllable]:
        """查詢一個字的預設讀音（兩種模式皆可用）"""
        found = self.get(character)
        if found is None:
            return None
        if isinstance(found, Polyphone):
            return found.first()
        return found

    def items(self) -> Iterator[Tuple[str, Union[Polyphone, Syllable]]]:
        """依碼位順序列出所有資料"""
        for page_id in sorted(self._pages):
            for offset in range(PAGE_SIZE):
                character = chr((page_id << PAGE_SHIFT) | offset)
                found = self.get(character)
                if found is not None:
                    yield character, found

    def stats(self) -> Dict[str, int]:
        return {
            "entries": self._count,
            "pages": len(self._pages),
            "slot_bytes": sum(page.itemsize * len(page) for page in self._pages.values()),
        }

    # ========== 建立 ==========

    @classmethod
    def load(cls, text: str, polyphone: bool = True, overwrite: bool = False) -> "PinyinDatabase":
        """
        解析資料檔並建立資料庫

        Raises:
            ParseError: 資料檔格式錯誤
            DuplicateEntryError: 同一字出現兩次且 overwrite 為 False
        """
        db = cls(polyphone=polyphone)
        with TimingContext("PinyinDatabase.load"):
            for character, entry in iter_records(text):
                db.insert(character, entry, overwrite=overwrite)
            db.compact()
        db._logger.info("loaded %d characters into %d pages", len(db), db.page_count)
        return db
