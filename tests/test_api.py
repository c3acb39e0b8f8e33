"""Tests for the HTTP routes."""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from flashdeck.core.config import settings
from flashdeck.core.database import get_session
from flashdeck.main import app
from flashdeck.services.active_deck_cache import ActiveDeckCache
from flashdeck.services.review_session_service import ReviewSessionController


@pytest.fixture
def client(engine):
    def override_get_session():
        with Session(engine) as session:
            yield session

    previous_controller = app.state.review_controller
    app.dependency_overrides[get_session] = override_get_session
    app.state.review_controller = ReviewSessionController(
        ActiveDeckCache(), user_id=settings.default_user_id
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
    app.state.review_controller = previous_controller


@pytest.fixture
def seeded(client):
    """User 1 with one deck holding three unrated cards."""
    client.post("/api/users", json={"name": "glencoden", "email": "glen@coden.io"})
    client.post("/api/decks", json={"from_language": "de", "to_language_primary": "en"})
    deck_id = client.get("/api/decks").json()[0]["id"]
    for word in ("eins", "zwei", "drei"):
        client.post(f"/api/cards/{deck_id}", json={"from_text": word, "to_text_primary": word})
    return deck_id


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "running"
    assert client.get("/health").json() == {"status": "healthy"}


def test_user_crud(client):
    response = client.post("/api/users", json={"name": "ada", "email": "ada@example.com"})
    assert response.status_code == 201
    assert response.json() == {"rows_affected": 1}

    user_id = client.get("/api/users").json()[0]["id"]
    assert client.put(f"/api/users/{user_id}", json={"name": "ada l."}).json() == {"rows_affected": 1}
    assert client.get(f"/api/users/{user_id}").json()["name"] == "ada l."

    assert client.delete(f"/api/users/{user_id}").json() == {"rows_affected": 1}
    assert client.get(f"/api/users/{user_id}").status_code == 404


def test_create_user_missing_fields(client):
    response = client.post("/api/users", json={"name": "ada"})
    assert response.status_code == 400
    assert response.json()["type"] == "ValidationError"


def test_deck_crud(client, seeded):
    deck = client.get(f"/api/decks/{seeded}").json()
    assert deck["from_language"] == "de"
    assert deck["user_id"] == settings.default_user_id

    assert client.put(f"/api/decks/{seeded}", json={"design_key": "blue"}).json() == {"rows_affected": 1}
    assert client.get(f"/api/decks/{seeded}").json()["design_key"] == "blue"

    assert client.put(f"/api/decks/{seeded}", json={}).status_code == 400
    assert client.get("/api/decks/999").status_code == 404


def test_card_crud(client, seeded):
    cards = client.get(f"/api/cards/{seeded}").json()
    assert [card["from_text"] for card in cards] == ["eins", "zwei", "drei"]

    card_id = cards[0]["id"]
    assert client.put(f"/api/cards/{seeded}/{card_id}", json={"rating": 3}).json() == {"rows_affected": 1}
    card = client.get(f"/api/cards/{seeded}/{card_id}").json()
    assert card["rating"] == 3
    assert card["prev_rating"] == 0

    assert client.delete(f"/api/cards/{seeded}/{card_id}").json() == {"rows_affected": 1}
    assert client.get(f"/api/cards/{seeded}/{card_id}").status_code == 404


def test_card_rating_out_of_range(client, seeded):
    card_id = client.get(f"/api/cards/{seeded}").json()[0]["id"]
    response = client.put(f"/api/cards/{seeded}/{card_id}", json={"rating": 5})
    assert response.status_code == 422


def test_action_flow(client, seeded):
    first = client.get(f"/action/{seeded}/0/from").json()
    assert first["num_cards"] == 3
    assert first["index"] == 0
    assert first["display_side"] in ("from", "to")

    seen = [first["card"]["id"]]
    for index in (1, 2):
        step = client.get(f"/action/{seeded}/{index}/to").json()
        assert step["index"] == index
        seen.append(step["card"]["id"])
    assert len(set(seen)) == 3

    end = client.get(f"/action/{seeded}/3/to").json()
    assert end["card"]["from_text"] == "The End"
    assert end["num_cards"] == 0


def test_action_unknown_deck(client):
    response = client.get("/action/42/0/from")
    assert response.status_code == 200
    assert response.json()["card"]["id"] == 0


def test_action_rejects_invalid_side_and_index(client, seeded):
    assert client.get(f"/action/{seeded}/0/sideways").status_code == 422
    assert client.get(f"/action/{seeded}/-1/from").status_code == 422


def test_deleting_deck_ends_its_session(client, seeded):
    client.get(f"/action/{seeded}/0/from")
    assert client.delete(f"/api/decks/{seeded}").json() == {"rows_affected": 1}
    assert seeded not in app.state.review_controller.cache
    assert client.get(f"/action/{seeded}/1/to").json()["card"]["from_text"] == "The End"


def test_access_token(client, seeded, monkeypatch):
    monkeypatch.setattr(settings, "access_token", "secret")

    assert client.get("/api/decks").status_code == 401
    assert client.get("/api/decks", params={"uuid": "wrong"}).status_code == 401
    assert client.get("/api/decks", params={"uuid": "secret"}).status_code == 200

    assert client.get("/home").json() == {"decks": []}
    assert len(client.get("/home", params={"uuid": "secret"}).json()["decks"]) == 1

    # The review flow is not token-gated
    assert client.get(f"/action/{seeded}/0/from").json()["num_cards"] == 3


def test_home_without_configured_token(client, seeded):
    decks = client.get("/home").json()["decks"]
    assert [deck["id"] for deck in decks] == [seeded]
