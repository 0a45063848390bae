"""
Multiplayer Room Endpoints.

Rooms are addressed by their short invite code. Reading a room is public so
that invited players can join before signing in; creating a room and
changing its settings require an authenticated user.
"""

from fastapi import APIRouter, HTTPException, Path, status
from sqlalchemy.exc import IntegrityError

from intelliq_api.core.database.entities import Room
from intelliq_api.core.logging_config import get_logger
from intelliq_api.core.models.io.rooms import (
    ROOM_CODE_MIN_LENGTH,
    RoomCapacityRead,
    RoomCreate,
    RoomRead,
    RoomSettingsUpdate,
)
from intelliq_api.server.services.deps import CurrentUserDep, RoomRepositoryDep
from intelliq_api.server.services.errors import RoomCodeExhaustedError
from intelliq_api.server.services.room_codes import generate_room_code

logger = get_logger(__name__)

router = APIRouter()

MAX_CODE_ATTEMPTS = 10
ROOM_NOT_FOUND = "Room not found"


def _room_code_path():
    return Path(..., alias="roomCode", min_length=ROOM_CODE_MIN_LENGTH, description="Invite code of the room")


@router.get(
    "/{roomCode}",
    response_model=RoomCapacityRead,
    summary="Get Room Capacity",
    description="Return the maximum number of players of a room.",
    responses={404: {"description": "Room not found"}},
)
async def get_room(repository: RoomRepositoryDep, room_code: str = _room_code_path()):
    room = await repository.get_by_code(room_code)
    if room is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ROOM_NOT_FOUND)
    return RoomCapacityRead(max_players=room.max_players)


@router.get(
    "/{roomCode}/details",
    response_model=RoomRead,
    summary="Get Room Details",
    description="Return the full room record.",
    responses={404: {"description": "Room not found"}},
)
async def get_room_details(repository: RoomRepositoryDep, room_code: str = _room_code_path()):
    room = await repository.get_by_code(room_code)
    if room is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ROOM_NOT_FOUND)
    return RoomRead.model_validate(room)


@router.post(
    "",
    response_model=RoomRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Room",
    description="Create a multiplayer room hosted by the caller.",
    responses={409: {"description": "Room code already taken"}},
)
async def create_room(room_in: RoomCreate, user: CurrentUserDep, repository: RoomRepositoryDep):
    """
    Create a room.

    Without an explicit ``code`` a random invite code is generated; a
    generated code that is already in use is replaced by a new one.
    """
    explicit_code = room_in.code is not None
    attempts = 1 if explicit_code else MAX_CODE_ATTEMPTS

    for _ in range(attempts):
        code = room_in.code if explicit_code else generate_room_code()
        if await repository.code_exists(code):
            if explicit_code:
                raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Room code already taken")
            logger.debug(f"Generated room code {code} is taken, retrying")
            continue

        room = Room(
            host_id=user.id,
            code=code,
            max_players=room_in.max_players,
            num_questions=room_in.num_questions,
            time_limit=room_in.time_limit,
            language=room_in.language.value,
        )
        try:
            room = await repository.create(room)
        except IntegrityError:
            # Another request inserted the same code between the check and the insert.
            await repository.session.rollback()
            if explicit_code:
                raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Room code already taken")
            continue

        logger.info(f"User {user.id} created room {room.code}")
        return RoomRead.model_validate(room)

    raise RoomCodeExhaustedError(MAX_CODE_ATTEMPTS)


@router.patch(
    "/{roomCode}/settings",
    response_model=RoomRead,
    summary="Update Room Setting",
    description="Change the number of questions, the player limit or the time limit of a room.",
    responses={
        403: {"description": "Caller is not the host"},
        404: {"description": "Room not found"},
    },
)
async def update_room_settings(
    update: RoomSettingsUpdate,
    user: CurrentUserDep,
    repository: RoomRepositoryDep,
    room_code: str = _room_code_path(),
):
    room = await repository.get_by_code(room_code)
    if room is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ROOM_NOT_FOUND)
    if room.host_id != user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only the host can change room settings")

    room = await repository.update_setting(room_code, update.type, update.value)
    if room is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ROOM_NOT_FOUND)
    logger.info(f"Room {room_code}: {update.type.value} set to {update.value}")
    return RoomRead.model_validate(room)
