"""
全域配置模組

使用方式:
    from pinyindb import PinyinConfig, init_database

    # 開啟 verbose 模式並指定資料檔
    db = init_database(PinyinConfig(verbose=True, resource_path=Path("pinyin.txt")))

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("pinyindb").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)
    # 否則不主動設定，讓使用者透過標準 logging 控制


@dataclass
class PinyinConfig:
    """
    資料庫配置

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        resource_path: 資料檔路徑，None 表示使用內建資料檔
        polyphone: 是否保存全部讀音（False 時每字只保存預設讀音）
    """

    verbose: bool = False
    on_timing: Optional[Callable[[str, float], None]] = None
    resource_path: Optional[Path] = None
    polyphone: bool = True

    def __post_init__(self):
        if self.resource_path is not None:
            self.resource_path = Path(self.resource_path)
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = PinyinConfig(verbose=False)
