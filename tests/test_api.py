"""
測試公開查詢 API

驗證：
1. pinyin() 三種聲調表示與分隔規則
2. first_letters() 不加分隔
3. 查不到的字元原樣輸出
4. 全域資料庫只建立一次
"""

import threading

import pytest

import pinyindb
from pinyindb import (
    PinyinConfig,
    ToneRepresentation,
    first_letters,
    get_database,
    init_database,
    pinyin,
    readings,
    reset_database,
)
from pinyindb.errors import ParseError


@pytest.fixture(autouse=True)
def fresh_database():
    reset_database()
    yield
    reset_database()


class TestPinyin:
    """測試 pinyin()"""

    def test_unicode(self):
        assert pinyin("你好", ToneRepresentation.UNICODE) == "nǐ hǎo "

    def test_numbered(self):
        assert pinyin("你好", ToneRepresentation.NUMBERED) == "ni3 hao3 "

    def test_no_tones(self):
        assert pinyin("你好", ToneRepresentation.NONE) == "ni hao "

    def test_default_is_unicode(self):
        assert pinyin("中国") == "zhōng guó "

    def test_tone_repr_from_string(self):
        assert pinyin("你好", "Numbered") == "ni3 hao3 "
        with pytest.raises(ValueError):
            pinyin("你好", "bogus")

    def test_unmapped_characters_pass_through(self):
        assert pinyin("a☃你") == "a ☃ nǐ "

    def test_empty(self):
        assert pinyin("") == ""

    def test_uses_default_reading(self):
        """多音字只取第一個讀音"""
        assert pinyin("〇") == "líng "
        assert pinyin("长") == "zhǎng "

    def test_supplementary_plane(self):
        assert pinyin("\U00020000") == "hē "


class TestFirstLetters:
    """測試 first_letters()"""

    def test_mixed(self):
        assert first_letters("你l好") == "nlh"

    def test_keeps_case_and_symbols(self):
        assert first_letters("A中B!") == "AzB!"

    def test_zero_initial(self):
        assert first_letters("爱儿") == "ae"


class TestReadings:
    """測試 readings()"""

    def test_all_readings_in_order(self):
        assert readings("〇") == ["líng", "yuán", "xīng"]
        assert readings("〇", ToneRepresentation.NUMBERED) == ["ling2", "yuan2", "xing1"]

    def test_unmapped(self):
        assert readings("x") == []


class TestGlobalDatabase:
    """測試全域資料庫生命週期"""

    def test_built_once(self):
        assert get_database() is get_database()

    def test_concurrent_first_use(self):
        results = []

        def worker():
            results.append(get_database())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len({id(db) for db in results}) == 1

    def test_bundled_resource_loads(self):
        db = pinyindb.build_database()
        assert len(db) > 20902
        assert "中" in db

    def test_init_with_custom_resource(self, tmp_path):
        path = tmp_path / "custom.txt"
        path.write_text("U+4E2D: zhòng\n", encoding="utf-8")
        db = init_database(PinyinConfig(resource_path=path))
        assert get_database() is db
        assert pinyin("中你") == "zhòng 你 "

    def test_init_single_reading(self):
        init_database(PinyinConfig(polyphone=False))
        assert readings("〇") == ["líng"]
        assert pinyin("你好") == "nǐ hǎo "

    def test_malformed_resource_fails_fast(self, tmp_path):
        path = tmp_path / "broken.txt"
        path.write_text("U+4E2D zhōng\n", encoding="utf-8")
        with pytest.raises(ParseError):
            init_database(PinyinConfig(resource_path=path))

    def test_timing_callback(self):
        calls = []
        pinyindb.build_database(PinyinConfig(on_timing=lambda op, elapsed: calls.append(op)))
        assert calls == ["build_database"]
