"""
Quiz Submission Endpoints.

Finished quizzes are sent back here and stored as a row of the ``quizzes``
table, which is what the history page lists. A multiplayer submission is
sent by the host once the room's quiz is over; it links the quiz to the room
and ends the room.
"""

from fastapi import APIRouter, HTTPException, Path, status

from intelliq_api.core.database.entities import Quiz
from intelliq_api.core.logging_config import get_logger
from intelliq_api.core.models.domain.enums import QuizType
from intelliq_api.core.models.io.rooms import ROOM_CODE_MIN_LENGTH
from intelliq_api.core.models.io.submissions import (
    AnsweredQuestion,
    MultiplayerSubmission,
    MultiplayerSubmissionResult,
    QuizSubmissionBase,
    QuizSubmissionResult,
    SingleplayerSubmission,
    count_correct_answers,
    has_passed,
)
from intelliq_api.server.services.deps import (
    CurrentUserDep,
    QuizRepositoryDep,
    RoomRepositoryDep,
)

logger = get_logger(__name__)

router = APIRouter()


def _build_quiz(submission: QuizSubmissionBase, user_id, quiz_type: QuizType) -> Quiz:
    user_score = getattr(submission, "user_score", None)
    questions_count = len(submission.questions)
    passed = None
    if user_score is not None:
        passed = has_passed(user_score, questions_count, submission.passing_score)
    return Quiz(
        user_id=user_id,
        title=submission.quiz_title,
        description=submission.description,
        topic=submission.topic,
        tags=submission.tags,
        passing_score=submission.passing_score,
        type=quiz_type,
        questions_count=questions_count,
        correct_answers_count=count_correct_answers(submission.questions),
        user_score=user_score,
        passed=passed,
        total_time_taken=getattr(submission, "time_taken", None),
    )


def _result_fields(quiz: Quiz, submission: QuizSubmissionBase) -> dict:
    return {
        "quiz_id": quiz.id,
        "quiz_title": quiz.title,
        "quiz_score": quiz.user_score,
        "total_time": quiz.total_time_taken,
        "correct_answers_count": quiz.correct_answers_count or 0,
        "total_questions": quiz.questions_count,
        "passing_score": quiz.passing_score,
        "passed": quiz.passed,
        "questions": [
            AnsweredQuestion(
                text=question.text,
                correct_answer=question.correct_answer,
                user_answer=question.user_answer,
            )
            for question in submission.questions
        ],
    }


@router.post(
    "/singleplayer",
    response_model=QuizSubmissionResult,
    status_code=status.HTTP_201_CREATED,
    summary="Submit Singleplayer Quiz",
    description="Store a finished singleplayer quiz together with the caller's result.",
)
async def submit_singleplayer(
    submission: SingleplayerSubmission,
    user: CurrentUserDep,
    repository: QuizRepositoryDep,
):
    quiz = await repository.create(_build_quiz(submission, user.id, QuizType.singleplayer))
    logger.info(
        f"User {user.id} submitted quiz {quiz.id}: {quiz.user_score}/{quiz.questions_count}, passed={quiz.passed}"
    )
    return QuizSubmissionResult(**_result_fields(quiz, submission))


@router.post(
    "/multiplayer/{roomCode}",
    response_model=MultiplayerSubmissionResult,
    status_code=status.HTTP_201_CREATED,
    summary="Submit Multiplayer Quiz",
    description="Store the quiz played in a room, link it to the room and end the room. Host only.",
    responses={
        403: {"description": "Caller is not the host"},
        404: {"description": "Room not found"},
        409: {"description": "Room already ended"},
    },
)
async def submit_multiplayer(
    submission: MultiplayerSubmission,
    user: CurrentUserDep,
    quiz_repository: QuizRepositoryDep,
    room_repository: RoomRepositoryDep,
    room_code: str = Path(..., alias="roomCode", min_length=ROOM_CODE_MIN_LENGTH, description="Invite code of the room"),
):
    room = await room_repository.get_by_code(room_code)
    if room is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")
    if room.host_id != user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only the host can submit the room's quiz")
    if room.ended_at is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Room already ended")

    quiz = await quiz_repository.create(_build_quiz(submission, room.host_id, QuizType.multiplayer))
    room = await room_repository.end(room_code, quiz_id=quiz.id)
    logger.info(f"Room {room_code} ended with quiz {quiz.id}")
    return MultiplayerSubmissionResult(
        **_result_fields(quiz, submission),
        room_code=room.code,
        ended_at=room.ended_at,
    )
