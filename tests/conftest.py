import pytest

from core import nws


class FakeNWS:
    """Stands in for core.nws.make_nws_request and records every URL."""

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.urls = []

    async def __call__(self, url, transport=None):
        self.urls.append(url)
        return self.responses.get(url)


@pytest.fixture
def fake_nws(monkeypatch):
    fake = FakeNWS()
    monkeypatch.setattr(nws, "make_nws_request", fake)
    return fake
