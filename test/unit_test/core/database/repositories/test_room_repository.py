"""
Unit tests for RoomRepository.

Runs against an in-memory SQLite database.
"""

import uuid

import pytest
from sqlalchemy.exc import IntegrityError

from intelliq_api.core.database.entities import Room
from intelliq_api.core.database.repositories import RoomRepository
from intelliq_api.core.models.domain.enums import RoomSetting


@pytest.fixture
def repository(session):
    return RoomRepository(session)


def make_room(code: str = "AbC4", **kwargs) -> Room:
    defaults = {"host_id": uuid.uuid4(), "num_questions": 5}
    defaults.update(kwargs)
    return Room(code=code, **defaults)


class TestRoomRepository:
    async def test_create_populates_defaults(self, repository):
        room = await repository.create(make_room())

        assert isinstance(room.id, uuid.UUID)
        assert room.max_players == 4
        assert room.time_limit == 30
        assert room.language == "en"
        assert room.created_at is not None
        assert room.ended_at is None

    async def test_get_by_code(self, repository):
        created = await repository.create(make_room("Zx9k"))

        found = await repository.get_by_code("Zx9k")

        assert found is not None
        assert found.id == created.id

    async def test_get_by_code_is_case_sensitive(self, repository):
        await repository.create(make_room("Zx9k"))

        assert await repository.get_by_code("ZX9K") is None

    async def test_get_by_code_missing(self, repository):
        assert await repository.get_by_code("none") is None

    async def test_code_exists(self, repository):
        await repository.create(make_room("Qwer"))

        assert await repository.code_exists("Qwer") is True
        assert await repository.code_exists("Asdf") is False

    async def test_duplicate_code_violates_unique_constraint(self, repository, session):
        await repository.create(make_room("Dupe"))

        with pytest.raises(IntegrityError):
            await repository.create(make_room("Dupe"))
        await session.rollback()

    @pytest.mark.parametrize(
        "setting, column, value",
        [
            (RoomSetting.max_players, "max_players", 8),
            (RoomSetting.num_questions, "num_questions", 10),
            (RoomSetting.time_limit, "time_limit", 45),
        ],
    )
    async def test_update_setting(self, repository, setting, column, value):
        await repository.create(make_room("Setx"))

        room = await repository.update_setting("Setx", setting, value)

        assert room is not None
        assert getattr(room, column) == value
        reloaded = await repository.get_by_code("Setx")
        assert getattr(reloaded, column) == value

    async def test_update_setting_unknown_room(self, repository):
        assert await repository.update_setting("Nope", RoomSetting.max_players, 3) is None

    async def test_end_sets_timestamp_once(self, repository):
        await repository.create(make_room("Endx"))

        first = await repository.end("Endx")
        ended_at = first.ended_at
        second = await repository.end("Endx")

        assert ended_at is not None
        assert second.ended_at == ended_at

    async def test_end_unknown_room(self, repository):
        assert await repository.end("Gone") is None

    async def test_end_links_quiz(self, repository):
        await repository.create(make_room("Link"))
        quiz_id = uuid.uuid4()

        room = await repository.end("Link", quiz_id=quiz_id)

        assert room.quiz_id == quiz_id
        assert room.ended_at is not None
