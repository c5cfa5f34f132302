import io

import pytest

from gallery_client import client as client_module
from gallery_client.client import FETCH_FALLBACK_MESSAGE, CardsClient, gallery_main
from gallery_client.gallery import DECK_SIZE, GalleryFetchError, GalleryView
from gallery_client.utils.animations import animate_until_done, spinner_frames

from conftest import FakeResponse, FakeUpstream


@pytest.fixture
def cards_client():
    c = CardsClient("http://localhost:8000/")
    c.session.get = FakeUpstream()
    return c


def feed_input(monkeypatch, *answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


def test_get_cards_unwraps_payload(cards_client, sample_cards):
    cards_client.session.get.response = FakeResponse(200, {"cards": sample_cards})

    assert cards_client.get_cards() == sample_cards
    assert cards_client.session.get.calls[0]["url"] == "http://localhost:8000/api/cards"


def test_get_cards_raises_with_server_message(cards_client):
    cards_client.session.get.response = FakeResponse(403, {"message": "invalid key"})

    with pytest.raises(GalleryFetchError, match="invalid key"):
        cards_client.get_cards()


def test_get_cards_falls_back_when_body_unreadable(cards_client):
    cards_client.session.get.response = FakeResponse(502, unparsable=True)

    with pytest.raises(GalleryFetchError, match=FETCH_FALLBACK_MESSAGE):
        cards_client.get_cards()


def test_gallery_loop_builds_a_deck(monkeypatch, sample_cards):
    view = GalleryView()
    view.load(lambda: sample_cards)
    picks = [str(i) for i in range(1, DECK_SIZE + 1)]
    feed_input(monkeypatch, "m", *picks, "b", "q")

    gallery_main(view)

    assert len(view.selection) == DECK_SIZE
    assert len(view.recommended_deck) == DECK_SIZE


def test_gallery_loop_explorer_overlay(monkeypatch, capsys, sample_cards):
    view = GalleryView()
    view.load(lambda: sample_cards)
    feed_input(monkeypatch, "4", "", "q")  # Inferno Dragon, then close

    gallery_main(view)

    out = capsys.readouterr().out
    assert "Inferno Dragon - Video Preview" in out
    assert "not available yet" in out
    assert view.overlay_card is None


def test_gallery_loop_rejects_bad_input(monkeypatch, capsys, sample_cards):
    view = GalleryView()
    view.load(lambda: sample_cards)
    feed_input(monkeypatch, "99", "abc", "b", "q")

    gallery_main(view)

    out = capsys.readouterr().out
    assert "Invalid selection." in out
    assert out.count("Invalid input.") == 2
    assert view.recommended_deck == []


def test_main_reports_fetch_error(monkeypatch, capsys):
    def failing_get(self):
        raise GalleryFetchError("API key is not configured on the server.")

    monkeypatch.setattr(CardsClient, "get_cards", failing_get)
    monkeypatch.setattr(client_module, "animate_until_done", lambda worker: worker.join())

    assert client_module.main(["http://example.invalid"]) == 1
    out = capsys.readouterr().out
    assert "An Error Occurred" in out
    assert "API key is not configured on the server." in out


class FinishedWorker:
    def is_alive(self):
        return False

    def join(self):
        pass


def test_spinner_stops_when_worker_done():
    out = io.StringIO()
    assert animate_until_done(FinishedWorker(), out=out) == 0
    assert out.getvalue().endswith("\033[?25h")


def test_spinner_frames_cycle():
    frames = spinner_frames("Loading Cards...")
    first = [next(frames) for _ in range(5)]
    assert all("Loading Cards..." in f for f in first)
    assert first[0] != first[1]


def test_get_cards_rejects_payload_without_list(cards_client):
    cards_client.session.get.response = FakeResponse(200, {"cards": None})

    with pytest.raises(GalleryFetchError, match=FETCH_FALLBACK_MESSAGE):
        cards_client.get_cards()
