"""
測試 HTTP 服務
"""

from urllib.parse import quote

import pytest

from pinyindb.db.database import PinyinDatabase
from pinyindb.server import create_app


DATA = (
    "U+4F60: nǐ  # 你\n"
    "U+597D: hǎo,hào  # 好\n"
)


@pytest.fixture
def client():
    app = create_app(PinyinDatabase.load(DATA))
    app.config["TESTING"] = True
    return app.test_client()


class TestPinyinRoute:
    """GET /pinyin/<text>"""

    def test_default_unicode(self, client):
        response = client.get("/pinyin/" + quote("你好"))
        assert response.status_code == 200
        assert response.mimetype == "text/plain"
        assert response.get_data(as_text=True) == "nǐ hǎo "

    def test_tone_query(self, client):
        response = client.get("/pinyin/" + quote("你好") + "?t=Numbered")
        assert response.get_data(as_text=True) == "ni3 hao3 "

        response = client.get("/pinyin/" + quote("你好") + "?tone_repr=None")
        assert response.get_data(as_text=True) == "ni hao "

    def test_url_encoded_space(self, client):
        response = client.get("/pinyin/" + quote("你 好"))
        assert response.get_data(as_text=True) == "nǐ   hǎo "

    def test_bad_tone_query(self, client):
        response = client.get("/pinyin/" + quote("你好") + "?t=bogus")
        assert response.status_code == 400


class TestFirstLetterRoute:
    """GET /first-letter/<text>"""

    def test_first_letters(self, client):
        response = client.get("/first-letter/" + quote("你l好"))
        assert response.status_code == 200
        assert response.get_data(as_text=True) == "nlh"

    def test_unknown_route(self, client):
        assert client.get("/hello/world").status_code == 404
