"""End-to-end tests of the HTTP routes, following links the way a client would."""

from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from numguess.db.memory_registry import InMemoryGameRegistry

HTML = {"Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"}


def create(client: TestClient) -> dict:
    response = client.post("/games")
    assert response.status_code == 201
    return response.json()


def secret_of(registry: InMemoryGameRegistry, game_id: str) -> int:
    game = registry.get_game(UUID(game_id))
    assert game is not None
    return game.secret


def wrong_guess(secret: int) -> int:
    return secret + 1 if secret < 100 else secret - 1


# --- ROOT / COLLECTION ---
def test_api_root(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert set(body["_links"]) == {"self", "games"}
    assert body["_links"]["games"]["href"] == "http://testserver/games"


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_games_collection(client: TestClient) -> None:
    create(client)
    body = client.get("/games").json()
    assert body["totalGames"] == 1
    assert body["bestScore"] is None
    assert set(body["_links"]) == {"self", "create-game", "root"}
    assert body["_links"]["create-game"]["method"] == "POST"


def test_games_collection_html(client: TestClient) -> None:
    response = client.get("/games", headers=HTML)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert 'action="http://testserver/games"' in response.text


# --- CREATE ---
def test_create_game(client: TestClient) -> None:
    response = client.post("/games")
    assert response.status_code == 201
    body = response.json()
    game_id = body["gameId"]
    assert response.headers["location"] == f"http://testserver/games/{game_id}"
    assert body["href"] == response.headers["location"]
    assert set(body["_links"]) == {"self", "submit-guess", "delete", "new-game", "games"}
    assert "secret" not in response.text


def test_create_game_from_browser_redirects(client: TestClient) -> None:
    response = client.post("/games", headers=HTML, follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"].startswith("http://testserver/games/")


# --- PLAY BY FOLLOWING LINKS ---
def test_play_until_won_following_links(
    client: TestClient, registry: InMemoryGameRegistry
) -> None:
    """Client only uses hrefs it was given, and stops when submit-guess disappears."""
    created = create(client)
    secret = secret_of(registry, created["gameId"])
    submit = created["_links"]["submit-guess"]
    assert submit["method"] == "POST"
    assert submit["type"] == "application/x-www-form-urlencoded"

    miss = client.post(submit["href"], data={"guess": wrong_guess(secret)})
    assert miss.status_code == 201
    body = miss.json()
    assert body["result"] in ("too_low", "too_high")
    assert body["active"] is True
    assert "submit-guess" in body["_links"]

    hit = client.post(body["_links"]["submit-guess"]["href"], data={"guess": secret})
    assert hit.status_code == 201
    body = hit.json()
    assert body["result"] == "correct"
    assert body["numGuesses"] == 2
    assert body["active"] is False
    assert body["newBestScore"] is True
    assert body["bestScore"] == 2
    assert "submit-guess" not in body["_links"]

    state = client.get(body["_links"]["self"]["href"]).json()
    assert state["active"] is False
    assert state["status"] == "complete"
    assert state["lastOutcome"] == "correct"
    assert "submit-guess" not in state["_links"]

    assert client.get("/games").json()["bestScore"] == 2


def test_game_state(client: TestClient) -> None:
    created = create(client)
    response = client.get(f"/games/{created['gameId']}")
    assert response.status_code == 200
    body = response.json()
    assert body["gameId"] == created["gameId"]
    assert body["numGuesses"] == 0
    assert body["active"] is True
    assert body["status"] == "active"
    assert body["lastOutcome"] is None
    assert "submit-guess" in body["_links"]


# --- ERRORS ---
@pytest.mark.parametrize("form", [{"guess": 0}, {"guess": 101}, {"guess": "abc"}, {}])
def test_invalid_guess(client: TestClient, form: dict) -> None:
    created = create(client)
    response = client.post(f"/games/{created['gameId']}", data=form)
    assert response.status_code == 400
    body = response.json()
    assert body["status"] == 400
    assert body["error"]


def test_unknown_game(client: TestClient) -> None:
    unknown = uuid4()
    response = client.get(f"/games/{unknown}")
    assert response.status_code == 404
    assert response.json()["status"] == 404

    assert client.post(f"/games/{unknown}", data={"guess": 5}).status_code == 404


def test_malformed_game_id(client: TestClient) -> None:
    response = client.get("/games/not-a-uuid")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request", "status": 400}


def test_guess_after_win_conflicts(client: TestClient, registry: InMemoryGameRegistry) -> None:
    created = create(client)
    secret = secret_of(registry, created["gameId"])
    client.post(f"/games/{created['gameId']}", data={"guess": secret})

    response = client.post(f"/games/{created['gameId']}", data={"guess": secret})
    assert response.status_code == 409
    assert response.json()["status"] == 409
    assert registry.get_game(UUID(created["gameId"])).num_guesses == 1


# --- DELETE ---
def test_delete_game(client: TestClient) -> None:
    created = create(client)
    delete = created["_links"]["delete"]
    assert delete["method"] == "DELETE"

    response = client.delete(delete["href"])
    assert response.status_code == 204
    assert client.get(created["_links"]["self"]["href"]).status_code == 404
    assert client.delete(delete["href"]).status_code == 404
    assert client.get("/games").json()["totalGames"] == 0


# --- HTML ---
def test_html_game_page_shows_form_only_while_active(
    client: TestClient, registry: InMemoryGameRegistry
) -> None:
    created = create(client)
    game_url = f"/games/{created['gameId']}"
    secret = secret_of(registry, created["gameId"])

    page = client.get(game_url, headers=HTML)
    assert page.status_code == 200
    assert 'name="guess"' in page.text

    redirect = client.post(
        game_url, data={"guess": wrong_guess(secret)}, headers=HTML, follow_redirects=False
    )
    assert redirect.status_code == 303
    page = client.get(redirect.headers["location"], headers=HTML)
    assert "Try a" in page.text
    assert 'name="guess"' in page.text

    client.post(game_url, data={"guess": secret}, headers=HTML, follow_redirects=False)
    page = client.get(game_url, headers=HTML)
    assert "You guessed the correct number in 2 tries!" in page.text
    assert 'name="guess"' not in page.text
