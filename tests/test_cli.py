"""
測試命令列介面
"""

import pytest

from pinyindb import reset_database
from pinyindb.__main__ import get_parser, main
from pinyindb.core.formatter import ToneRepresentation


@pytest.fixture(autouse=True)
def fresh_database():
    reset_database()
    yield
    reset_database()


class TestParser:
    """測試參數解析"""

    def test_tone_repr_option(self):
        args = get_parser().parse_args(["pinyin", "你好", "-t", "numbered"])
        assert args.tone_repr is ToneRepresentation.NUMBERED

    def test_bad_tone_repr(self):
        with pytest.raises(SystemExit):
            get_parser().parse_args(["pinyin", "你好", "-t", "bogus"])

    def test_serve_defaults(self):
        args = get_parser().parse_args(["serve"])
        assert args.host == "0.0.0.0"
        assert args.port == 3030

    def test_command_required(self):
        with pytest.raises(SystemExit):
            get_parser().parse_args([])


class TestMain:
    """測試子命令輸出"""

    def test_pinyin(self, capsys):
        assert main(["pinyin", "你好"]) == 0
        assert capsys.readouterr().out == "nǐ hǎo \n"

    def test_pinyin_numbered(self, capsys):
        assert main(["pinyin", "你好", "--tone-repr", "Numbered"]) == 0
        assert capsys.readouterr().out == "ni3 hao3 \n"

    def test_first_letters(self, capsys):
        assert main(["first-letters", "你l好"]) == 0
        assert capsys.readouterr().out == "nlh\n"

    def test_custom_resource(self, tmp_path, capsys):
        path = tmp_path / "data.txt"
        path.write_text("U+4E2D: zhòng\n", encoding="utf-8")
        assert main(["--resource", str(path), "pinyin", "中"]) == 0
        assert capsys.readouterr().out == "zhòng \n"

    def test_malformed_resource(self, tmp_path):
        path = tmp_path / "broken.txt"
        path.write_text("U+4E2D zhōng\n", encoding="utf-8")
        assert main(["--resource", str(path), "pinyin", "中"]) == 1

    def test_build_resource(self, tmp_path, capsys):
        output = tmp_path / "pinyin.txt"
        assert main(["build-resource", str(output)]) == 0
        assert output.read_text(encoding="utf-8").startswith("# pinyindb")
        assert "records" in capsys.readouterr().out
