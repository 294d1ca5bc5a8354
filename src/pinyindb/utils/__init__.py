"""
工具模組

提供日誌、計時、快取等通用工具。
"""

from .cache import (
    cached_function,
    clear_all_caches,
    get_cache_stats,
    get_hit_rate,
    reset_cache_stats,
)
from .logger import (
    TimingContext,
    enable_debug_logging,
    enable_timing_logging,
    get_logger,
    setup_logger,
)

__all__ = [
    # 日誌工具
    "get_logger",
    "setup_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    "TimingContext",

    # 快取工具
    "cached_function",
    "get_cache_stats",
    "get_hit_rate",
    "reset_cache_stats",
    "clear_all_caches",
]
