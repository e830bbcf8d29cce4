from fastapi.testclient import TestClient

from main import app
from partsearch import config

client = TestClient(app)


def test_search_end_to_end(fake_web) -> None:
    fake_web.serve(
        "https://example.com/search?q=Arduino%20Uno",
        '<div class="product"><h3>Arduino Uno R3</h3><a href="/p/1">link</a></div>',
    )

    response = client.post(
        "/api/search",
        json={"partName": "Arduino Uno", "partNumber": "", "websites": ["https://example.com"]},
    )

    assert response.status_code == 200
    assert response.json() == {
        "results": [
            {
                "title": "Arduino Uno R3",
                "url": "https://example.com/p/1",
                "description": "No description available",
                "source": "example.com",
            }
        ],
        "count": 1,
    }


def test_search_merges_duplicate_urls_across_sites(fake_web) -> None:
    card = '<div class="product"><h3>LM358 op amp</h3><a href="https://cdn.example.com/lm358">x</a></div>'
    fake_web.serve("https://a.example.com/search?q=LM358", card)
    fake_web.serve("https://b.example.com/search?q=LM358", card)

    response = client.post(
        "/api/search",
        json={"partName": "", "partNumber": "LM358", "websites": ["https://a.example.com", "https://b.example.com"]},
    )

    body = response.json()
    assert response.status_code == 200
    assert body["count"] == 1
    assert body["results"][0]["url"] == "https://cdn.example.com/lm358"
    assert body["results"][0]["source"] == "b.example.com"


def test_search_returns_fallback_for_unreachable_site(fake_web) -> None:
    response = client.post(
        "/api/search",
        json={"partName": "Capacitor", "partNumber": "", "websites": ["https://nowhere.example"]},
    )

    body = response.json()
    assert response.status_code == 200
    assert body["count"] == 1
    assert body["results"][0]["url"] == "https://nowhere.example/search?q=Capacitor"


def test_search_rejects_missing_terms() -> None:
    response = client.post(
        "/api/search",
        json={"partName": "", "partNumber": "", "websites": ["https://example.com"]},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Part name or part number is required"}


def test_search_rejects_empty_websites() -> None:
    response = client.post("/api/search", json={"partName": "LM358", "partNumber": "", "websites": []})

    assert response.status_code == 400
    assert response.json() == {"error": "At least one website is required"}


def test_search_malformed_body_is_server_error() -> None:
    response = client.post(
        "/api/search",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_default_websites() -> None:
    response = client.get("/api/websites")

    assert response.status_code == 200
    assert response.json() == {"websites": config.DEFAULT_WEBSITES}


def test_health() -> None:
    response = client.get("/health")

    assert response.json() == {"status": "ok"}


def test_app_starts_and_stops_cleanly() -> None:
    with TestClient(app) as running:
        assert running.get("/health").status_code == 200
