import json

import pytest
import requests

from app import app as flask_app


SAMPLE_ADS = [
    {"title": "✨ Bright mornings", "description": "☀️ Fresh coffee\n⚡ Fast brew\n🌿 Organic beans", "cta": "Buy now 👇"},
    {"title": "☕ Your daily ritual", "description": "🔥 Rich aroma\n🕒 Ready in 2 min\n💚 Fair trade", "cta": "Order now"},
    {"title": "⚡ Energy in a cup", "description": "💪 Strong taste\n🎁 Free shipping\n⭐ Top rated", "cta": "Buy now"},
]


@pytest.fixture
def sample_ads():
    return [dict(ad) for ad in SAMPLE_ADS]


@pytest.fixture
def ads_json(sample_ads):
    return json.dumps({"ads": sample_ads}, ensure_ascii=False)


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")


@pytest.fixture
def client():
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as c:
        yield c


class FakeResponse:
    """Mimics requests: text/* without a charset decodes as ISO-8859-1."""

    def __init__(self, text="", status_code=200, content_type="text/html", body=None):
        self.content = body if body is not None else text.encode("utf-8")
        self.status_code = status_code
        self.headers = {"Content-Type": content_type}
        if "charset=" in content_type:
            self.encoding = content_type.split("charset=", 1)[1].strip()
        else:
            self.encoding = "ISO-8859-1"
        self.text = self.content.decode(self.encoding, errors="replace")

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")


@pytest.fixture
def fake_response():
    return FakeResponse
