"""
內建資料檔

- read_resource(): 讀取內建（或指定路徑的）拼音資料檔
- build_resource(): 由 pypinyin 附帶的 pinyin_dict 重新產生資料檔

注意：build_resource 使用延遲導入 (Lazy Import)，
僅在實際重建資料檔時才會載入 pypinyin。
"""

import unicodedata
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Dict, List, Optional, Union

from pinyindb.core.polyphone import MAX_READINGS
from pinyindb.db.parser import is_syllable
from pinyindb.utils.logger import TimingContext, get_logger

RESOURCE_PACKAGE = "pinyindb"
RESOURCE_NAME = "pinyin.txt"

BUILD_INSTALL_HINT = (
    "缺少 pypinyin。請執行:\n"
    "  pip install \"pinyindb[build]\""
)

logger = get_logger("resource")


def resource_path() -> Path:
    """內建資料檔路徑"""
    return Path(str(resources.files(RESOURCE_PACKAGE) / "data" / RESOURCE_NAME))


def read_resource(path: Optional[Union[str, Path]] = None) -> str:
    """
    讀取資料檔（UTF-8）

    Args:
        path: 資料檔路徑，None 表示內建資料檔
    """
    if path is None:
        return (resources.files(RESOURCE_PACKAGE) / "data" / RESOURCE_NAME).read_text(
            encoding="utf-8"
        )
    return Path(path).read_text(encoding="utf-8")


# =============================================================================
# 由 pypinyin 重建
# =============================================================================

def _get_pinyin_dict() -> Dict[int, str]:
    """延遲載入 pypinyin 的單字拼音表"""
    try:
        from pypinyin.pinyin_dict import pinyin_dict
    except ImportError:
        raise ImportError(BUILD_INSTALL_HINT)
    return pinyin_dict


@dataclass
class BuildReport:
    """重建資料檔的統計"""

    records: int = 0
    truncated: List[str] = field(default_factory=list)
    dropped_readings: Dict[str, List[str]] = field(default_factory=dict)
    skipped: List[str] = field(default_factory=list)


def format_record(character: str, readings: List[str]) -> str:
    return f"U+{ord(character):04X}: {','.join(readings)}  # {character}"


def convert_pinyin_dict(pinyin_dict: Dict[int, str], report: Optional[BuildReport] = None) -> str:
    """
    把 {碼位: "líng,yuán,xīng"} 形式的表轉成資料檔文字

    - 無法解析的讀音會被略過並記錄
    - 超過三個讀音時只保留前三個並記錄
    - 沒有任何合法讀音的字不輸出
    """
    report = report if report is not None else BuildReport()
    lines = [
        "# pinyindb character readings",
        "# generated from pypinyin.pinyin_dict",
        "",
    ]
    for code_point in sorted(pinyin_dict):
        character = chr(code_point)
        readings: List[str] = []
        for reading in pinyin_dict[code_point].split(","):
            reading = unicodedata.normalize("NFC", reading.strip())
            if not reading or reading in readings:
                continue
            if not is_syllable(reading):
                report.dropped_readings.setdefault(character, []).append(reading)
                logger.debug("U+%04X: dropped unrecognized reading %r", code_point, reading)
                continue
            readings.append(reading)

        if not readings:
            report.skipped.append(character)
            logger.debug("U+%04X: no usable reading, skipped", code_point)
            continue
        if len(readings) > MAX_READINGS:
            report.truncated.append(character)
            logger.debug(
                "U+%04X: %d readings truncated to %d", code_point, len(readings), MAX_READINGS
            )
            readings = readings[:MAX_READINGS]

        lines.append(format_record(character, readings))
        report.records += 1

    return "\n".join(lines) + "\n"


def build_resource(output: Optional[Union[str, Path]] = None) -> BuildReport:
    """
    由 pypinyin 重新產生資料檔

    Args:
        output: 輸出路徑，None 表示覆寫內建資料檔

    Returns:
        BuildReport
    """
    pinyin_dict = _get_pinyin_dict()
    report = BuildReport()
    target = Path(output) if output is not None else resource_path()

    with TimingContext("build_resource"):
        text = convert_pinyin_dict(pinyin_dict, report)
        target.write_text(text, encoding="utf-8")

    logger.info(
        "wrote %d records to %s (%d truncated, %d skipped)",
        report.records,
        target,
        len(report.truncated),
        len(report.skipped),
    )
    return report
