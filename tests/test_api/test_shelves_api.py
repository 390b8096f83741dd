# tests/test_api/test_shelves_api.py

import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient
from api.main import app
from api.routes.shelves import get_shelf_service
from shelves.errors import StoreUnavailable

@pytest.fixture
def client(service):
    app.dependency_overrides[get_shelf_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()

def test_list_smart_shelves(client, sample_user, make_book, add_reading, add_favorite):
    book = make_book(title="Dune", authors=["Frank Herbert"])
    add_reading(sample_user, book, status="finished")
    add_favorite(sample_user, make_book())

    response = client.get(f"/user/{sample_user.id}/smart-shelves")
    assert response.status_code == 200
    shelves = response.json()["shelves"]
    assert [s["key"] for s in shelves] == ["finished", "reading", "to-read", "favorites", "top-rated", "recent"]
    assert shelves[0] == {"key": "finished", "title": "Finished", "count": 1, "sample_book": None}
    assert shelves[3]["count"] == 1
    assert shelves[5]["count"] is None
    assert shelves[5]["sample_book"]["title"] == "Dune"
    assert shelves[5]["sample_book"]["authors"] == ["Frank Herbert"]

def test_get_smart_shelf(client, sample_user, make_book, add_favorite):
    for i in range(5):
        add_favorite(sample_user, make_book(), created=i, note=f"note {i}")

    response = client.get(f"/user/{sample_user.id}/smart-shelves/favorites", params={"page": 2, "limit": 2})
    assert response.status_code == 200
    data = response.json()
    assert data["page"] == 2
    assert data["limit"] == 2
    assert data["total"] == 5
    assert [item["note"] for item in data["items"]] == ["note 2", "note 1"]
    assert all(item["source"] == "favorite" for item in data["items"])
    assert set(data["items"][0]["book"]) == {"id", "external_id", "title", "authors", "cover"}

def test_get_smart_shelf_clamps_paging(client, sample_user):
    response = client.get(f"/user/{sample_user.id}/smart-shelves/recent", params={"page": 0, "limit": 500})
    assert response.status_code == 200
    data = response.json()
    assert data["page"] == 1
    assert data["limit"] == 100
    assert data["items"] == []

def test_unknown_shelf_type(client, sample_user):
    response = client.get(f"/user/{sample_user.id}/smart-shelves/bogus")
    assert response.status_code == 400
    assert "bogus" in response.json()["detail"]

def test_store_failure(client, service, sample_user, monkeypatch):
    def fail(*args, **kwargs):
        raise StoreUnavailable("database is down")
    monkeypatch.setattr(service, "get_shelf", fail)

    response = client.get(f"/user/{sample_user.id}/smart-shelves/finished")
    assert response.status_code == 503
    assert response.json()["detail"] == "database is down"

def test_logging_is_configured_on_startup(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    with patch("api.main.configure_logging") as configure, patch("api.main.get_database"):
        configure.assert_not_called()
        with TestClient(app):
            pass
    configure.assert_called_once_with("WARNING")
