"""
拼音資料庫與資料檔解析器
"""

from .database import PinyinDatabase
from .parser import iter_records, parse_line, parse_records, parse_syllable

__all__ = [
    "PinyinDatabase",
    "iter_records",
    "parse_line",
    "parse_records",
    "parse_syllable",
]
