from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from wordhunt import main
from wordhunt.dictionary import Dictionary
from wordhunt.managers.game import GameManager


@pytest.fixture
def client(monkeypatch, dictionary):
    monkeypatch.setattr(main, "games", GameManager(AsyncMock(), dictionary))
    return TestClient(main.app)


def start(client, puzzle="apple"):
    resp = client.post("/game/start", json={"playerName": "Test Student"})
    assert resp.status_code == 201
    game_id = resp.json()["id"]
    # pin the puzzle so the game is predictable
    session = main.games.get(game_id)
    session.puzzle = puzzle
    main.games.store.save(session)
    return game_id


def test_full_game(client):
    game_id = start(client)

    resp = client.post(f"/game/{game_id}/submit", json={"word": "PAL"})
    assert resp.status_code == 200
    assert resp.json() == {"message": "Word accepted", "points": 3, "score": 3}

    resp = client.post(f"/game/{game_id}/finish")
    assert resp.status_code == 200
    body = resp.json()
    assert body["finalScore"] == 3
    assert sorted(body["remainingLetters"]) == ["e", "p"]
    assert body["possibleRemainingWords"] == []

    assert client.get(f"/game/{game_id}").json()["completed"] is True


@pytest.mark.parametrize("word,reason", [
    ("ppa", "invalid_word"),
    ("lava", "letters_unavailable"),
])
def test_rejections_are_distinct(client, word, reason):
    game_id = start(client)
    resp = client.post(f"/game/{game_id}/submit", json={"word": word})
    assert resp.status_code == 400
    assert resp.json()["detail"]["reason"] == reason


@pytest.mark.parametrize("word", ["a", "abcdefghijklmno", "pa1"])
def test_bad_input_is_422(client, word):
    game_id = start(client)
    resp = client.post(f"/game/{game_id}/submit", json={"word": word})
    assert resp.status_code == 422


def test_unknown_game_is_404(client):
    assert client.post("/game/nope/submit", json={"word": "pal"}).status_code == 404
    assert client.post("/game/nope/finish").status_code == 404
    assert client.get("/game/nope").status_code == 404


def test_leaderboard(client):
    game_id = start(client)
    client.post(f"/game/{game_id}/submit", json={"word": "apple"})
    assert client.get("/leaderboard").json() == [{"word": "apple", "score": 5}]
    players = client.get("/leaderboard/players").json()
    assert players[0]["playerName"] == "Test Student" and players[0]["score"] == 5


def test_validate_and_health(client):
    assert client.get("/dict/validate", params={"word": "Apple"}).json() == {"word": "apple", "valid": True}
    assert client.get("/health").json()["status"] == "ok"


def test_health_reports_degraded_dictionary(monkeypatch):
    monkeypatch.setattr(main, "games", GameManager(AsyncMock(), Dictionary(error="missing")))
    body = TestClient(main.app).get("/health").json()
    assert body == {"status": "degraded", "dictionaryLoaded": False, "dictionarySize": 0}


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_blank_player_name_is_422(client, name):
    assert client.post("/game/start", json={"playerName": name}).status_code == 422


def test_player_name_is_trimmed(client):
    resp = client.post("/game/start", json={"playerName": "  Ann  "})
    assert resp.status_code == 201
    assert resp.json()["playerName"] == "Ann"
