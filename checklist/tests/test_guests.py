from urllib.parse import unquote

from fastapi.testclient import TestClient
from sqlmodel import Session

from checklist.app.db.models import Guest


def test_create_guest(client: TestClient):
    response = client.post("/api/guests/", json={"name": "Zoe Park", "guest_of": " ", "contact": "zoe@example.com", "month": "August"})
    assert response.status_code == 201, response.text
    data = response.json()
    assert data["guest_of"] is None
    assert data["month"] == "August"


def test_create_guest_requires_name_and_month(client: TestClient):
    assert client.post("/api/guests/", json={"name": "No Month"}).status_code == 422
    assert client.post("/api/guests/", json={"name": "", "month": "May"}).status_code == 422


def test_create_guest_rejects_unknown_month(client: TestClient):
    response = client.post("/api/guests/", json={"name": "Zoe", "month": "Smarch"})
    assert response.status_code == 422


def test_update_guest(client: TestClient, may_guests):
    guest = may_guests[1]
    response = client.put(f"/api/guests/{guest.id}", json={"contact": "adam@example.com", "month": "June"})
    assert response.status_code == 200
    assert response.json()["contact"] == "adam@example.com"
    assert response.json()["month"] == "June"


def test_update_guest_rejects_null_name(client: TestClient, may_guests):
    response = client.put(f"/api/guests/{may_guests[0].id}", json={"name": None})
    assert response.status_code == 422


def test_guests_by_month_door_list(client: TestClient, session: Session, may_guests):
    session.add(Guest(name="amy Ortiz", month="June"))
    session.commit()

    door = client.get("/api/guests/by-month").json()

    assert list(door) == ["May", "June"]
    assert [g["name"] for g in door["May"]] == ["Adam Lee", "Mia Chen", "Zoe Park"]
    assert [g["name"] for g in door["June"]] == ["amy Ortiz"]


def test_grouped_guests_sorted_by_name(client: TestClient, may_guests):
    buckets = client.get("/api/guests/grouped").json()

    assert [b["heading"] for b in buckets] == ["May - Lounge", "May - Main Room"]
    assert [g["name"] for g in buckets[0]["items"]] == ["Adam Lee", "Zoe Park"]


def test_advancement_details(client: TestClient, may_lineup, may_guests):
    response = client.get("/api/guests/advancement", params={"month": "May", "room": "lounge"})
    assert response.status_code == 200
    data = response.json()

    assert data["title"] == "May - Lounge"
    content = data["content"]
    assert content.startswith("ADVANCEMENT DETAILS FOR MAY\n")
    # Main room artist and guest stay out of the lounge summary
    assert "Headliner" not in content
    assert "Mia Chen" not in content
    assert "Adam Lee / " in content
    assert "Zoe Park / zoe@example.com" in content
    assert content.rstrip().endswith("8:00 - 10:00: Bob Jones")

    assert data["mailto"].startswith("mailto:")
    assert unquote(data["mailto"].split("&body=")[1]) == content


def test_delete_guest(client: TestClient, may_guests):
    response = client.delete(f"/api/guests/{may_guests[0].id}")
    assert response.status_code == 204
    assert len(client.get("/api/guests/").json()) == 2
