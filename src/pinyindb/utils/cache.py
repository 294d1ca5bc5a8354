"""
快取工具

提供附帶命中統計的 LRU 快取裝飾器。

用法：
    from pinyindb.utils.cache import cached_function, get_cache_stats

    @cached_function(maxsize=4096)
    def render(syllable, style) -> str:
        ...
"""

from functools import lru_cache, wraps
from typing import Any, Callable, Dict, Optional
import threading


# 全域快取統計
_cache_stats_lock = threading.Lock()
_cache_stats: Dict[str, Dict[str, int]] = {}
_cache_clearers: Dict[str, Callable[[], None]] = {}


def _empty_stats(maxsize: int) -> Dict[str, int]:
    return {"hits": 0, "misses": 0, "size": 0, "maxsize": maxsize}


def cached_function(maxsize: int = 4096):
    """
    為純函式加上 LRU 快取的裝飾器

    與 functools.lru_cache 不同，這個裝飾器：
    1. 把命中/未命中次數記錄到全域統計（get_cache_stats）
    2. 參數不可雜湊時直接呼叫原函式，不拋錯

    Args:
        maxsize: 最大快取項數量（預設 4096）

    範例：
        >>> @cached_function(maxsize=100)
        ... def double(x):
        ...     return x * 2
        >>> double(5)
        10
        >>> double(5)  # 第二次從快取返回
        10
    """
    def decorator(func: Callable) -> Callable:
        cache_key = f"{func.__module__}.{func.__qualname__}"

        with _cache_stats_lock:
            _cache_stats[cache_key] = _empty_stats(maxsize)

        cached_func = lru_cache(maxsize=maxsize)(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            before = cached_func.cache_info()
            try:
                result = cached_func(*args, **kwargs)
            except TypeError:
                # 參數不可雜湊
                with _cache_stats_lock:
                    _cache_stats[cache_key]["misses"] += 1
                return func(*args, **kwargs)

            after = cached_func.cache_info()
            with _cache_stats_lock:
                stats = _cache_stats[cache_key]
                if after.hits > before.hits:
                    stats["hits"] += 1
                else:
                    stats["misses"] += 1
                stats["size"] = after.currsize
            return result

        def cache_clear() -> None:
            cached_func.cache_clear()
            with _cache_stats_lock:
                _cache_stats[cache_key] = _empty_stats(maxsize)

        wrapper.cache_info = cached_func.cache_info
        wrapper.cache_clear = cache_clear
        wrapper.cache_key = cache_key

        with _cache_stats_lock:
            _cache_clearers[cache_key] = cache_clear

        return wrapper

    return decorator


def get_cache_stats(func_name: Optional[str] = None) -> Dict[str, Any]:
    """
    取得快取統計

    Args:
        func_name: 函式名稱（如 "render"），None 表示回傳全部統計摘要

    Returns:
        Dict: 指定函式時包含 hits / misses / hit_rate / size / maxsize；
              否則包含 overall_hit_rate / total_hits / total_misses / total_calls / functions
    """
    with _cache_stats_lock:
        if func_name:
            total_hits = 0
            total_misses = 0
            total_size = 0
            maxsize = 0
            matched = []

            for key, stats in _cache_stats.items():
                if key.rsplit(".", 1)[-1] == func_name or func_name == key:
                    total_hits += stats["hits"]
                    total_misses += stats["misses"]
                    total_size = max(total_size, stats["size"])
                    maxsize = max(maxsize, stats["maxsize"])
                    matched.append(key)

            if not matched:
                return {}
            total = total_hits + total_misses
            return {
                "functions": matched,
                "hits": total_hits,
                "misses": total_misses,
                "hit_rate": total_hits / total if total > 0 else 0.0,
                "size": total_size,
                "maxsize": maxsize,
            }

        total_hits = sum(s["hits"] for s in _cache_stats.values())
        total_misses = sum(s["misses"] for s in _cache_stats.values())
        total_calls = total_hits + total_misses
        return {
            "overall_hit_rate": total_hits / total_calls if total_calls > 0 else 0.0,
            "total_hits": total_hits,
            "total_misses": total_misses,
            "total_calls": total_calls,
            "functions": {key: dict(stats) for key, stats in _cache_stats.items()},
        }


def clear_all_caches() -> None:
    """清除所有快取內容與統計"""
    with _cache_stats_lock:
        clearers = list(_cache_clearers.values())
    for clear in clearers:
        clear()


def reset_cache_stats() -> None:
    """
    重置快取統計（用於測試隔離）

    只重置計數，不清除快取內容
    """
    with _cache_stats_lock:
        for stats in _cache_stats.values():
            stats["hits"] = 0
            stats["misses"] = 0


def get_hit_rate(func_name: Optional[str] = None) -> float:
    """取得快取命中率（0.0-1.0）"""
    stats = get_cache_stats(func_name)
    if not stats:
        return 0.0
    if func_name:
        return stats["hit_rate"]
    return stats["overall_hit_rate"]
