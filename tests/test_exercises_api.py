from __future__ import annotations

import asyncio
from datetime import date

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from models.memory_store import MemoryDocumentStore
from utils.helpers import format_exercise_date


def test_create_exercise_with_date(client: TestClient, alice: dict) -> None:
    response = client.post(
        f"/api/users/{alice['id']}/exercises",
        json={"description": "run", "duration": 30, "date": "2024-01-01"},
    )

    assert response.status_code == 200, response.text
    assert response.json() == {
        "username": "alice",
        "description": "run",
        "duration": 30,
        "date": "Mon Jan 01 2024",
        "id": alice["id"],
    }


def test_create_exercise_without_date_uses_today(client: TestClient, alice: dict) -> None:
    response = client.post(
        f"/api/users/{alice['id']}/exercises",
        json={"description": "swim", "duration": 45},
    )

    assert response.status_code == 200, response.text
    assert response.json()["date"] == format_exercise_date(date.today())


def test_create_exercise_from_form_coerces_duration(client: TestClient, alice: dict) -> None:
    response = client.post(
        f"/api/users/{alice['id']}/exercises",
        data={"description": "bike", "duration": "25", "date": ""},
    )

    assert response.status_code == 200, response.text
    payload = response.json()
    assert payload["duration"] == 25
    assert payload["date"] == format_exercise_date(date.today())


def test_create_exercise_keeps_fractional_duration(client: TestClient, alice: dict) -> None:
    response = client.post(
        f"/api/users/{alice['id']}/exercises",
        data={"description": "walk", "duration": "12.5"},
    )

    assert response.status_code == 200, response.text
    assert response.json()["duration"] == 12.5


def test_create_exercise_for_unknown_user_is_soft_error(
    client: TestClient, store: MemoryDocumentStore
) -> None:
    unknown_id = str(ObjectId())
    response = client.post(
        f"/api/users/{unknown_id}/exercises",
        json={"description": "run", "duration": 30},
    )

    assert response.status_code == 200
    assert response.json() == {"error": "The user does not exist in the database!"}
    assert asyncio.run(store.find_exercises(unknown_id)) == []


def test_body_user_id_takes_precedence_over_path(client: TestClient, alice: dict) -> None:
    bob = client.post("/api/users", json={"username": "bob"}).json()

    response = client.post(
        f"/api/users/{alice['id']}/exercises",
        data={":_id": bob["id"], "description": "row", "duration": "20"},
    )

    assert response.status_code == 200, response.text
    assert response.json()["username"] == "bob"
    assert response.json()["id"] == bob["id"]
    assert client.get(f"/api/users/{bob['id']}/logs").json()["count"] == 1
    assert client.get(f"/api/users/{alice['id']}/logs").json()["count"] == 0


def test_create_exercise_requires_description(client: TestClient, alice: dict) -> None:
    response = client.post(
        f"/api/users/{alice['id']}/exercises",
        json={"duration": 30},
    )

    assert response.status_code == 400
    assert "description" in response.json()["error"]


@pytest.mark.parametrize("duration", ["half an hour", "nan", "inf", "-inf", "1e400"])
def test_create_exercise_rejects_non_numeric_duration(
    client: TestClient, alice: dict, duration: str
) -> None:
    response = client.post(
        f"/api/users/{alice['id']}/exercises",
        data={"description": "run", "duration": duration},
    )

    assert response.status_code == 400
    assert "duration" in response.json()["error"]


def test_create_exercise_rejects_boolean_duration(
    client: TestClient, alice: dict, store: MemoryDocumentStore
) -> None:
    response = client.post(
        f"/api/users/{alice['id']}/exercises",
        json={"description": "run", "duration": True},
    )

    assert response.status_code == 400
    assert "duration" in response.json()["error"]
    assert asyncio.run(store.find_exercises(alice["id"])) == []


def test_create_exercise_rejects_malformed_date(client: TestClient, alice: dict) -> None:
    response = client.post(
        f"/api/users/{alice['id']}/exercises",
        json={"description": "run", "duration": 30, "date": "not-a-date"},
    )

    assert response.status_code == 400
    assert "date" in response.json()["error"]


def test_end_to_end_flow(client: TestClient) -> None:
    today = format_exercise_date(date.today())

    user = client.post("/api/users", json={"username": "alice"}).json()
    user_id = user["id"]
    assert user == {"username": "alice", "id": user_id}

    created = client.post(
        f"/api/users/{user_id}/exercises",
        json={"description": "run", "duration": 30},
    ).json()
    assert created == {
        "username": "alice",
        "description": "run",
        "duration": 30,
        "date": today,
        "id": user_id,
    }

    log = client.get(f"/api/users/{user_id}/logs").json()
    assert log == {
        "username": "alice",
        "count": 1,
        "id": user_id,
        "log": [{"description": "run", "duration": 30, "date": today}],
    }
