"""
Quiz Generation Endpoints.

``GET /quizzes/generate`` asks the LLM for a quiz, records the tokens spent in
a usage row and, for languages other than English, translates the quiz
before returning it.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Query
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from intelliq_api.core.database.entities import UserUsageData
from intelliq_api.core.logging_config import get_logger
from intelliq_api.core.models.domain.enums import SupportedLanguage
from intelliq_api.core.models.io.quizzes import (
    GeneratedQuiz,
    QuizGenerationRequest,
    QuizGenerationResponse,
)
from intelliq_api.core.monitoring import log_quiz_generation
from intelliq_api.server.services.deps import (
    CurrentUserDep,
    QuizGeneratorDep,
    RateLimitDep,
    TranslatorDep,
    UsageRepositoryDep,
)
from intelliq_api.server.services.translator import translate_quiz

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/generate",
    response_model=QuizGenerationResponse,
    summary="Generate a quiz",
    description="Generate a quiz based on the given topic and description.",
    response_description="The generated quiz.",
    responses={
        400: {"description": "Invalid query parameters"},
        401: {"description": "Missing or invalid access token"},
        429: {"description": "Too many requests"},
        500: {"description": "Quiz generation or translation failed"},
    },
)
async def generate_quiz(
    user: CurrentUserDep,
    _rate_limit: RateLimitDep,
    generator: QuizGeneratorDep,
    translator: TranslatorDep,
    usage_repository: UsageRepositoryDep,
    quiz_topic: Optional[str] = Query(None, alias="quizTopic", description="Topic of the quiz"),
    quiz_description: Optional[str] = Query(None, alias="quizDescription", description="Overview of the quiz"),
    number_of_questions: Optional[str] = Query(
        None, alias="numberOfQuestions", description="Number of questions (1-10, default 4)"
    ),
    quiz_tags: Optional[str] = Query(None, alias="quizTags", description="Comma separated tags"),
    language: Optional[str] = Query(None, description="Language code of the quiz (default en)"),
    quiz_type: Optional[str] = Query(None, alias="quizType", description="Quiz type (default singleplayer)"),
):
    """
    Generate a quiz.

    The usage row is stored right after the LLM call, so the tokens are
    accounted for even when the translation afterwards fails.
    """
    raw: Dict[str, Any] = {
        "quizTopic": quiz_topic,
        "quizDescription": quiz_description,
        "numberOfQuestions": number_of_questions,
        "quizTags": quiz_tags,
        "language": language,
        "quizType": quiz_type,
    }
    try:
        request = QuizGenerationRequest.model_validate({key: value for key, value in raw.items() if value is not None})
    except ValidationError as e:
        raise RequestValidationError(e.errors()) from e

    logger.info(
        f"User {user.id} requested {request.number_of_questions} questions on '{request.quiz_topic}' "
        f"({request.language.value})"
    )
    result = await generator.generate(
        request.quiz_topic,
        request.number_of_questions,
        request.quiz_tags,
        request.quiz_description,
    )

    await usage_repository.create(
        UserUsageData(
            user_id=user.id,
            prompt_tokens=result.metrics.usage.prompt_tokens,
            completion_tokens=result.metrics.usage.completion_tokens,
            total_tokens=result.metrics.usage.total_tokens,
            used_model=result.metrics.model,
            count_questions=request.number_of_questions,
            response_time_taken=result.metrics.duration_in_seconds,
            prompt=request.quiz_topic,
            language=request.language.value,
            quiz_type=request.quiz_type,
        )
    )
    log_quiz_generation(
        model=result.metrics.model,
        total_tokens=result.metrics.usage.total_tokens,
        duration_seconds=result.metrics.duration_in_seconds,
        language=request.language.value,
    )

    quiz = result.quiz
    if request.language != SupportedLanguage.en:
        translated = await translate_quiz(quiz.model_dump(by_alias=True), request.language.value, translator)
        quiz = GeneratedQuiz.model_validate(translated)

    return QuizGenerationResponse(quiz=quiz)
