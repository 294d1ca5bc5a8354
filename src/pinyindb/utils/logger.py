"""
日誌工具

所有 logger 皆位於 "pinyindb" 命名空間下。
函式庫本身不主動加入 handler，由使用者（或 verbose=True / CLI --debug）決定。

使用方式:
    from pinyindb.utils.logger import get_logger, TimingContext

    logger = get_logger("db")
    logger.info("...")

    # 計時一律寫入 "pinyindb.timing"
    with TimingContext("load"):
        ...
"""

import logging
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "pinyindb"
TIMING_LOGGER_NAME = f"{ROOT_LOGGER_NAME}.timing"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 pinyindb 命名空間下的 logger

    Args:
        name: 子 logger 名稱（如 "db.parser"），None 表示根 logger

    Returns:
        logging.Logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + ".") or name == ROOT_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為根 logger 加上 StreamHandler（重複呼叫只會調整 level）

    Args:
        level: 日誌等級
        fmt: 輸出格式

    Returns:
        根 logger
    """
    global _handler

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(_handler)
    _handler.setLevel(level)
    logger.setLevel(level)
    return logger


def enable_debug_logging() -> None:
    """開啟全部 DEBUG 日誌"""
    setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> None:
    """只開啟計時日誌"""
    setup_logger(level=logging.DEBUG)
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.WARNING)
    logging.getLogger(TIMING_LOGGER_NAME).setLevel(logging.DEBUG)


class TimingContext:
    """
    計時 context manager

    離開區塊時把耗時寫入 logger，並呼叫選用的 callback(operation, elapsed)。
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or logging.getLogger(TIMING_LOGGER_NAME)
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, "[Timing] %s: %.3fms", self.operation, self.elapsed * 1000)
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False
