"""Quiz translation through AWS Translate.

Generated quizzes are always written in English; when another language is
requested the user-facing strings are translated afterwards. Only the keys
in :data:`TRANSLATABLE_KEYS` are sent to the service, everything else
(ids, numbers, nested containers) is copied as-is.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from intelliq_api.core.logging_config import get_logger
from intelliq_api.server.core.config import AWSTranslateConfig

from .errors import TranslationConfigError, TranslationError

logger = get_logger(__name__)

SOURCE_LANGUAGE = "en"
TRANSLATABLE_KEYS = frozenset({"quizTitle", "questionTitle", "text", "options", "correctAnswer"})


class TranslatorClient:
    """Async facade over a boto3 ``translate`` client.

    boto3 is blocking, so every call is moved to a worker thread.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    async def translate_text(self, text: str, target_language: str) -> str:
        """
        Translate ``text`` from English into ``target_language``.

        Returns the input unchanged when the service answers without text.

        Raises:
            TranslationError: AWS Translate rejected or failed the request
        """
        if not text:
            return text
        try:
            response = await asyncio.to_thread(
                self._client.translate_text,
                Text=text,
                SourceLanguageCode=SOURCE_LANGUAGE,
                TargetLanguageCode=target_language,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"AWS Translate failed for target '{target_language}': {e}")
            raise TranslationError(f"Translation failed: {e}", target_language=target_language) from e
        return response.get("TranslatedText") or text


def create_translate_client(config: AWSTranslateConfig) -> TranslatorClient:
    """
    Build a :class:`TranslatorClient` from settings.

    Raises:
        TranslationConfigError: region or credentials are missing
    """
    missing = [
        name
        for name, value in (
            ("AMAZON_REGION", config.region),
            ("AMAZON_ACCESS_KEY_ID", config.access_key_id),
            ("AMAZON_SECRET_ACCESS_KEY", config.secret_access_key),
        )
        if not value
    ]
    if missing:
        raise TranslationConfigError(missing)

    client = boto3.client(
        "translate",
        region_name=config.region,
        aws_access_key_id=config.access_key_id,
        aws_secret_access_key=config.secret_access_key,
    )
    return TranslatorClient(client)


async def _translate_value(value: Any, target_language: str, client: TranslatorClient) -> Any:
    if isinstance(value, str):
        return await client.translate_text(value, target_language)
    if isinstance(value, list):
        # Options are independent of each other; translate them together.
        return list(
            await asyncio.gather(*(_translate_value(item, target_language, client) for item in value))
        )
    return await translate_quiz(value, target_language, client)


async def translate_quiz(quiz: Any, target_language: str, client: Optional[TranslatorClient]) -> Any:
    """
    Return a translated copy of a quiz structure.

    Args:
        quiz: A JSON-like value (dict, list or scalar), typically a quiz
            dumped with camelCase aliases
        target_language: Language code to translate into
        client: Translator used for the individual strings

    Returns:
        A new structure of the same shape; the input is never mutated
    """
    if client is None:
        raise TranslationError("No translator configured", target_language=target_language)

    if isinstance(quiz, list):
        return [await translate_quiz(item, target_language, client) for item in quiz]
    if isinstance(quiz, dict):
        translated: dict[str, Any] = {}
        for key, value in quiz.items():
            if key in TRANSLATABLE_KEYS:
                translated[key] = await _translate_value(value, target_language, client)
            else:
                translated[key] = await translate_quiz(value, target_language, client)
        return translated
    return quiz
