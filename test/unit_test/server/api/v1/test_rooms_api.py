"""
Unit tests for the multiplayer room endpoints.
"""

import uuid
from unittest.mock import patch

import pytest
from httpx import AsyncClient

from intelliq_api.core.database.entities import Room
from intelliq_api.core.database.repositories import RoomRepository
from intelliq_api.server.main import app
from intelliq_api.server.services import deps

ROOMS_URL = "/api/v1/rooms"


@pytest.fixture
async def room(session, current_user) -> Room:
    return await RoomRepository(session).create(
        Room(code="Hx7k", host_id=current_user.id, max_players=6, num_questions=5)
    )


class TestGetRoom:
    async def test_capacity(self, client: AsyncClient, room):
        response = await client.get(f"{ROOMS_URL}/Hx7k")

        assert response.status_code == 200
        assert response.json() == {"maxPlayers": 6}

    async def test_not_found(self, client: AsyncClient):
        response = await client.get(f"{ROOMS_URL}/Zzzz")

        assert response.status_code == 404
        assert response.json() == {"error": "Room not found"}

    async def test_code_too_short(self, client: AsyncClient):
        response = await client.get(f"{ROOMS_URL}/abc")

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation error"
        assert "roomCode" in body["details"]

    async def test_details(self, client: AsyncClient, room, current_user):
        response = await client.get(f"{ROOMS_URL}/Hx7k/details")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == str(room.id)
        assert body["hostId"] == str(current_user.id)
        assert body["maxPlayers"] == 6
        assert body["numQuestions"] == 5
        assert body["timeLimit"] == 30
        assert body["code"] == "Hx7k"
        assert body["quizId"] is None
        assert body["endedAt"] is None

    async def test_details_not_found(self, client: AsyncClient):
        response = await client.get(f"{ROOMS_URL}/Zzzz/details")

        assert response.status_code == 404

    async def test_reading_needs_no_authentication(self, client: AsyncClient, room):
        del app.dependency_overrides[deps.get_current_user]

        response = await client.get(f"{ROOMS_URL}/Hx7k")

        assert response.status_code == 200


class TestCreateRoom:
    async def test_create_with_generated_code(self, client: AsyncClient, current_user):
        response = await client.post(ROOMS_URL, json={"maxPlayers": 8, "numQuestions": 3})

        assert response.status_code == 201
        body = response.json()
        assert len(body["code"]) == 4
        assert body["hostId"] == str(current_user.id)
        assert body["maxPlayers"] == 8
        assert body["numQuestions"] == 3
        assert body["language"] == "en"

    async def test_create_with_defaults(self, client: AsyncClient):
        response = await client.post(ROOMS_URL, json={})

        assert response.status_code == 201
        body = response.json()
        assert (body["maxPlayers"], body["numQuestions"], body["timeLimit"]) == (5, 5, 30)

    async def test_create_with_explicit_code(self, client: AsyncClient):
        response = await client.post(ROOMS_URL, json={"code": "MyRoom"})

        assert response.status_code == 201
        assert response.json()["code"] == "MyRoom"

    async def test_explicit_code_taken(self, client: AsyncClient, room):
        response = await client.post(ROOMS_URL, json={"code": "Hx7k"})

        assert response.status_code == 409
        assert response.json() == {"error": "Room code already taken"}

    async def test_generated_code_collision_is_retried(self, client: AsyncClient, room):
        with patch("intelliq_api.server.api.v1.rooms.generate_room_code", side_effect=["Hx7k", "Np3q"]):
            response = await client.post(ROOMS_URL, json={})

        assert response.status_code == 201
        assert response.json()["code"] == "Np3q"

    async def test_code_space_exhausted(self, client: AsyncClient, room):
        with patch("intelliq_api.server.api.v1.rooms.generate_room_code", return_value="Hx7k"):
            response = await client.post(ROOMS_URL, json={})

        assert response.status_code == 500
        assert "unique room code" in response.json()["error"]

    async def test_invalid_body(self, client: AsyncClient):
        response = await client.post(ROOMS_URL, json={"maxPlayers": 1})

        assert response.status_code == 400
        assert "maxPlayers" in response.json()["details"]

    async def test_requires_authentication(self, client: AsyncClient):
        del app.dependency_overrides[deps.get_current_user]

        response = await client.post(ROOMS_URL, json={})

        assert response.status_code == 401


class TestUpdateRoomSettings:
    async def test_host_updates_setting(self, client: AsyncClient, room):
        response = await client.patch(f"{ROOMS_URL}/Hx7k/settings", json={"type": "maxPlayers", "value": 9})

        assert response.status_code == 200
        assert response.json()["maxPlayers"] == 9

    async def test_time_limit(self, client: AsyncClient, room):
        response = await client.patch(f"{ROOMS_URL}/Hx7k/settings", json={"type": "timeLimit", "value": 45})

        assert response.status_code == 200
        assert response.json()["timeLimit"] == 45

    async def test_non_host_is_forbidden(self, client: AsyncClient, session):
        await RoomRepository(session).create(Room(code="Othr", host_id=uuid.uuid4(), num_questions=5))

        response = await client.patch(f"{ROOMS_URL}/Othr/settings", json={"type": "maxPlayers", "value": 9})

        assert response.status_code == 403

    async def test_unknown_room(self, client: AsyncClient):
        response = await client.patch(f"{ROOMS_URL}/Zzzz/settings", json={"type": "maxPlayers", "value": 9})

        assert response.status_code == 404

    async def test_value_out_of_range(self, client: AsyncClient, room):
        response = await client.patch(f"{ROOMS_URL}/Hx7k/settings", json={"type": "numQuestions", "value": 50})

        assert response.status_code == 400
        assert response.json()["error"] == "Validation error"

    async def test_unknown_setting(self, client: AsyncClient, room):
        response = await client.patch(f"{ROOMS_URL}/Hx7k/settings", json={"type": "language", "value": 1})

        assert response.status_code == 400
        assert "type" in response.json()["details"]
