import pytest
import requests
from fastapi.testclient import TestClient

from card_server.server import app


class FakeResponse:
    """Just enough of requests.Response for the proxy and the client."""

    def __init__(self, status_code=200, body=None, unparsable=False):
        self.status_code = status_code
        self._body = body
        self._unparsable = unparsable

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._unparsable:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body


class FakeUpstream:
    """Stands in for requests.get and remembers every call."""

    def __init__(self, response=None, exc=None):
        self.response = response or FakeResponse(200, {"items": []})
        self.exc = exc
        self.calls = []

    def __call__(self, url, headers=None, **kwargs):
        self.calls.append({"url": url, "headers": headers, **kwargs})
        if self.exc is not None:
            raise self.exc
        return self.response


class RecordingLogger:
    """Collects (level, event, fields) tuples instead of printing."""

    def __init__(self):
        self.records = []

    def info(self, msg, **data):
        self.records.append(("INFO", msg, data))

    def debug(self, msg, **data):
        self.records.append(("DEBUG", msg, data))

    def warning(self, msg, **data):
        self.records.append(("WARN", msg, data))

    def error(self, msg, **data):
        self.records.append(("ERROR", msg, data))

    def events(self):
        return [msg for _, msg, _ in self.records]


def make_card(card_id, name, rarity="Common", cost=3, icon=True, **stats):
    card = {
        "id": card_id,
        "name": name,
        "elixirCost": cost,
        "rarity": rarity,
        "maxLevel": 14,
        "iconUrls": {"medium": f"https://api-assets.clashroyale.com/cards/300/{card_id}.png"} if icon else {},
    }
    card.update(stats)
    return card


@pytest.fixture
def sample_cards():
    return [
        make_card(26000000, "Knight", "Common", 3, hitpoints=1766, damage=202),
        make_card(26000021, "Hog Rider", "Rare", 4, hitpoints=1696, damage=318),
        make_card(28000004, "Goblin Barrel", "Epic", 3),
        make_card(26000037, "Inferno Dragon", "Legendary", 4, hitpoints=1070),
        make_card(26000072, "Archer Queen", "Champion", 5, hitpoints=1000, damage=225),
        make_card(26000010, "Skeletons", "Common", 1, hitpoints=81, damage=81),
        make_card(28000000, "Fireball", "Rare", 4),
        make_card(26000004, "P.E.K.K.A.", "Epic", 7, hitpoints=3760, damage=816),
        make_card(26000003, "Giant", "Rare", 5, hitpoints=4091, damage=254),
        make_card(26000011, "Valkyrie", "Rare", 4, hitpoints=1907, damage=267),
    ]


@pytest.fixture
def fake_upstream(monkeypatch):
    fake = FakeUpstream()
    monkeypatch.setattr(requests, "get", fake)
    return fake


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("SUPERCELL_API_KEY", "test-key")
    monkeypatch.delenv("CARDS_API_URL", raising=False)
    return "test-key"


@pytest.fixture
def api():
    return TestClient(app)


@pytest.fixture
def route_log(monkeypatch):
    recorder = RecordingLogger()
    monkeypatch.setattr("card_server.server.server_logger", recorder)
    return recorder
