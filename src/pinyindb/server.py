"""
HTTP 服務

    GET /pinyin/<text>?t=Unicode|Numbered|None   每個字的拼音，以空白分隔
    GET /first-letter/<text>                      每個字的首字母

路徑參數由 Flask 進行 URL 解碼。
"""

from typing import Optional

from flask import Flask, Response, request

from .api import first_letters, get_database, pinyin
from .core.formatter import ToneRepresentation
from .db.database import PinyinDatabase
from .utils.logger import get_logger

_LOGGER = get_logger("server")

TONE_QUERY_KEYS = ("t", "tone_repr")


def _text_response(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def create_app(database: Optional[PinyinDatabase] = None) -> Flask:
    """
    建立 Flask app

    Args:
        database: 使用的資料庫，None 表示全域資料庫（在此建立，啟動時即檢查資料檔）
    """
    if database is None:
        database = get_database()

    app = Flask(__name__)

    @app.route("/pinyin/<path:text>", methods=["GET"])
    def app_pinyin(text: str) -> Response:
        value = None
        for key in TONE_QUERY_KEYS:
            if key in request.args:
                value = request.args[key]
                break
        try:
            tone_repr = ToneRepresentation.parse(value)
        except ValueError as exc:
            return _text_response(str(exc), status=400)

        _LOGGER.debug("pinyin: %s (%s)", text, tone_repr.value)
        return _text_response(pinyin(text, tone_repr, database=database))

    @app.route("/first-letter/<path:text>", methods=["GET"])
    def app_first_letters(text: str) -> Response:
        _LOGGER.debug("first-letter: %s", text)
        return _text_response(first_letters(text, database=database))

    return app
