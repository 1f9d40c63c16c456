"""
Tests para endpoints de recordatorios
"""
import pytest
from fastapi import status

def test_create_reminder(client, reminder_data):
    """Test de creación: pet_name resuelto y racha a cero"""
    response = client.post("/reminders", json=reminder_data)
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["pet_name"] == "Browny"
    assert data["is_completed"] is False
    assert data["streak"] == 0
    assert data["start_date"] == "2025-01-01"
    assert "id" in data

def test_create_reminder_unknown_pet(client, reminder_data):
    reminder_data["pet_id"] = "404"
    response = client.post("/reminders", json=reminder_data)
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["pet_name"] == ""

@pytest.mark.parametrize("field,value", [
    ("title", ""),
    ("title", "x" * 101),
    ("time", "7am"),
    ("time", "24:00"),
    ("category", "Food"),
    ("frequency", "Yearly"),
    ("start_date", "mañana"),
])
def test_create_reminder_invalid(client, reminder_data, field, value):
    """Test de validación del formulario"""
    reminder_data[field] = value
    response = client.post("/reminders", json=reminder_data)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

def test_get_update_delete_flow(client, reminder_data):
    rid = client.post("/reminders", json=reminder_data).json()["id"]

    response = client.get(f"/reminders/{rid}")
    assert response.status_code == status.HTTP_200_OK

    response = client.put(f"/reminders/{rid}", json={"title": "Long walk", "time": "18:30"})
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["title"] == "Long walk"
    assert data["time"] == "18:30"
    assert data["category"] == "Lifestyle"

    response = client.delete(f"/reminders/{rid}")
    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"/reminders/{rid}").status_code == status.HTTP_404_NOT_FOUND

def test_not_found(client):
    assert client.get("/reminders/missing").status_code == status.HTTP_404_NOT_FOUND
    assert client.put("/reminders/missing", json={"title": "x"}).status_code == status.HTTP_404_NOT_FOUND
    assert client.patch("/reminders/missing/complete").status_code == status.HTTP_404_NOT_FOUND
    assert client.delete("/reminders/missing").status_code == status.HTTP_404_NOT_FOUND
    assert client.get("/reminders/missing/streak").status_code == status.HTTP_404_NOT_FOUND

def test_toggle_complete_and_streak(client, reminder_data):
    rid = client.post("/reminders", json=reminder_data).json()["id"]

    data = client.patch(f"/reminders/{rid}/complete").json()
    assert data["is_completed"] is True
    assert data["streak"] == 1
    assert data["completed_at"] is not None
    assert client.get(f"/reminders/{rid}/streak").json() == {"id": rid, "streak": 1}

    data = client.patch(f"/reminders/{rid}/complete").json()
    assert data["is_completed"] is False
    assert data["streak"] == 0
    assert data["completed_at"] is None

def test_list_sorted_and_filtered(client, reminder_data):
    for title, at, category in [("Dinner", "19:00", "General"), ("Walk", "07:00", "Lifestyle"), ("Pill", "22:00", "Health")]:
        client.post("/reminders", json={**reminder_data, "title": title, "time": at, "category": category})

    titles = [r["title"] for r in client.get("/reminders").json()]
    assert titles == ["Walk", "Dinner", "Pill"]

    titles = [r["title"] for r in client.get("/reminders", params={"category": "Health"}).json()]
    assert titles == ["Pill"]

    titles = [r["title"] for r in client.get("/reminders", params={"time_slot": "evening"}).json()]
    assert titles == ["Dinner"]

    assert client.get("/reminders", params={"status": "completed"}).json() == []

def test_today_agenda(client, reminder_data):
    client.post("/reminders", json={**reminder_data, "title": "Vet", "time": "13:00", "frequency": "Once"})
    client.post("/reminders", json={**reminder_data, "title": "Walk", "time": "07:00"})
    done = client.post("/reminders", json={**reminder_data, "title": "Meds", "time": "21:30"}).json()
    client.patch(f"/reminders/{done['id']}/complete")

    data = client.get("/reminders/today", params={"day": "2025-01-01"}).json()
    assert data["pending_count"] == 2
    assert [r["title"] for r in data["pending_by_slot"]["morning"]] == ["Walk"]
    assert [r["title"] for r in data["pending_by_slot"]["afternoon"]] == ["Vet"]
    assert "night" not in data["pending_by_slot"]
    assert [r["title"] for r in data["completed"]] == ["Meds"]

    data = client.get("/reminders/today", params={"day": "2025-01-02"}).json()
    assert list(data["pending_by_slot"]) == ["morning"]

def test_today_agenda_uses_store_filters(client, reminder_data):
    client.post("/reminders", json={**reminder_data, "title": "Walk"})
    client.post("/reminders", json={**reminder_data, "title": "Vitamins", "category": "Health"})
    client.put("/view/filters", json={"category": "Health"})

    data = client.get("/reminders/today", params={"day": "2025-01-01"}).json()
    assert [r["title"] for r in data["pending_by_slot"]["morning"]] == ["Vitamins"]

def test_by_frequency(client, reminder_data):
    client.post("/reminders", json=reminder_data)
    client.post("/reminders", json={**reminder_data, "frequency": "Weekly"})
    data = client.get("/reminders/by-frequency").json()
    assert set(data) == {"Daily", "Weekly"}

def test_create_reminder_rate_limited(client, reminder_data, monkeypatch):
    """Test de rate limiting con un limiter real"""
    from slowapi import Limiter
    from slowapi.util import get_remote_address
    from petminder.main import app
    from petminder.routers import reminders

    monkeypatch.setattr(reminders.settings, "create_rate_limit", "2/minute")
    app.state.limiter = Limiter(key_func=get_remote_address)
    try:
        assert client.post("/reminders", json=reminder_data).status_code == status.HTTP_201_CREATED
        assert client.post("/reminders", json=reminder_data).status_code == status.HTTP_201_CREATED
        response = client.post("/reminders", json=reminder_data)
        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        assert "2/minute" in response.json()["detail"]
    finally:
        app.state.limiter = None

@pytest.mark.parametrize("body", [
    {"title": None},
    {"category": None},
    {"streak": None},
    {"is_completed": None},
    {"time": None, "title": "Long walk"},
])
def test_update_ignores_null_for_required_fields(client, reminder_data, body):
    """Test de null explícito en campos obligatorios: no rompe ni borra"""
    rid = client.post("/reminders", json=reminder_data).json()["id"]
    response = client.put(f"/reminders/{rid}", json=body)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["title"] == (body.get("title") or "Walk")
    assert data["category"] == "Lifestyle"
    assert data["streak"] == 0
    assert data["is_completed"] is False
    assert data["time"] == "07:00"

def test_update_can_clear_optional_fields(client, reminder_data):
    rid = client.post("/reminders", json={**reminder_data, "notes": "park"}).json()["id"]
    client.put(f"/reminders/{rid}", json={"completed_dates": ["2025-01-01"]})
    response = client.put(f"/reminders/{rid}", json={"notes": None, "completed_dates": None})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["notes"] is None
    assert response.json()["completed_dates"] is None
