import pytest
from fastapi.testclient import TestClient

import main
from rack_logic.word_list import WordList


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(main, "word_list",
                        WordList.from_words(["CAT", "DOG", "CATS", "ACT", "ZAX"]))
    monkeypatch.setattr(main, "rack_session", None)
    return TestClient(main.app)


def test_state_before_any_rack(client):
    response = client.get("/api/rack/state")
    assert response.status_code == 404


def test_solve_rack(client):
    response = client.post("/api/rack/solve", json={"rack": "catsdo?"})
    assert response.status_code == 200
    data = response.json()
    assert data["rack"] == ["C", "A", "T", "S", "D", "O", " "]
    assert data["blanks"] == 1
    assert data["playable_words"] == ["CAT", "DOG", "CATS", "ACT"]
    assert data["best_word"] == "CATS"
    assert data["best_points"] == 6
    assert data["message"] == "Best word is CATS with 6 points."

    state = client.get("/api/rack/state").json()
    assert state == data


def test_solve_invalid_rack(client):
    response = client.post("/api/rack/solve", json={"rack": "ABCDEFGH"})
    assert response.status_code == 400
    response = client.post("/api/rack/solve", json={"rack": "AB3"})
    assert response.status_code == 400


def test_new_rack(client):
    response = client.get("/api/rack/new")
    assert response.status_code == 200
    assert len(response.json()["rack"]) == 7


def test_benchmark(client):
    response = client.get("/api/rack/benchmark", params={"trials": 2})
    assert response.status_code == 200
    data = response.json()
    assert data["trials"] == 2
    assert len(data["timings"]) == 2
    assert client.get("/api/rack/benchmark", params={"trials": 0}).status_code == 422
