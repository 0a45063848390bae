"""Quiz generation through a pydantic-ai agent.

``QuizGenerator`` performs exactly one structured-output LLM call per quiz.
The agent's ``output_type`` is :class:`GeneratedQuiz`, so the model answers
with ``quizTitle`` and ``questions[{questionTitle, text, options,
correctAnswer}]`` and pydantic-ai validates the result before it reaches us.

The model is normally built from settings (``OPENAI_API_KEY``/``GPT_MODEL``).
Tests inject a pydantic-ai ``TestModel`` or ``FunctionModel`` instead.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from pydantic_ai import Agent, ModelSettings
from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider

from intelliq_api.core.logging_config import get_logger
from intelliq_api.core.models.io.quizzes import GeneratedQuiz
from intelliq_api.server.core.config import OpenAIConfig

from .errors import QuizGenerationError
from .prompts import SYSTEM_PROMPT, generate_quiz_prompt

logger = get_logger(__name__)


@dataclass
class TokenUsage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass
class GenerationMetrics:
    """Timing and token accounting of one generation call."""

    model: str
    duration_in_seconds: float
    usage: TokenUsage = field(default_factory=TokenUsage)


@dataclass
class QuizGenerationResult:
    quiz: GeneratedQuiz
    metrics: GenerationMetrics


def build_model(config: OpenAIConfig) -> Model:
    """Create the OpenAI chat model described by ``config``."""
    if not config.api_key:
        raise QuizGenerationError("OPENAI_API_KEY environment variable is not set")
    logger.debug(f"Creating OpenAI model: {config.model}")
    return OpenAIChatModel(config.model, provider=OpenAIProvider(api_key=config.api_key))


class QuizGenerator:
    """Generate quizzes with a single LLM call.

    Args:
        config: OpenAI settings; used for the model name and token cap.
        model: Optional pre-built pydantic-ai model. When omitted the model
            is created from ``config``.
    """

    def __init__(self, config: OpenAIConfig, *, model: Optional[Model | str] = None) -> None:
        self._config = config
        self._model = model if model is not None else build_model(config)
        self._agent: Agent[None, GeneratedQuiz] = Agent(
            self._model,
            output_type=GeneratedQuiz,
            system_prompt=SYSTEM_PROMPT,
        )

    @property
    def model_name(self) -> str:
        if isinstance(self._model, str):
            return self._model
        return getattr(self._model, "model_name", self._config.model)

    async def generate(
        self,
        topic: str,
        number_of_questions: int,
        tags: Sequence[str] = (),
        description: str = "",
    ) -> QuizGenerationResult:
        """
        Generate a quiz.

        Args:
            topic: Quiz topic
            number_of_questions: Requested number of questions
            tags: Optional tags to weave into the questions
            description: Free-form overview of the quiz

        Returns:
            The validated quiz plus timing and token usage

        Raises:
            QuizGenerationError: The LLM call failed or produced invalid output
        """
        prompt = generate_quiz_prompt(topic, description, number_of_questions, tags)
        start_time = time.perf_counter()
        try:
            result = await self._agent.run(
                prompt,
                model_settings=ModelSettings(max_tokens=self._config.max_tokens),
            )
            duration = time.perf_counter() - start_time
            usage = result.usage()
            metrics = GenerationMetrics(
                model=self.model_name,
                duration_in_seconds=duration,
                usage=TokenUsage(
                    prompt_tokens=usage.input_tokens or 0,
                    completion_tokens=usage.output_tokens or 0,
                    total_tokens=usage.total_tokens or 0,
                ),
            )
        except Exception as e:
            context: dict[str, Any] = {
                "topic": topic,
                "description": description,
                "number_of_questions": number_of_questions,
                "tags": list(tags),
            }
            logger.error(f"Quiz generation failed: {e}", exc_info=True, extra={"quiz_request": context})
            raise QuizGenerationError(f"Failed to generate quiz: {e}") from e

        logger.info(
            f"Generated quiz '{result.output.quiz_title}' with {len(result.output.questions)} questions "
            f"in {duration:.2f}s ({metrics.usage.total_tokens} tokens)"
        )
        return QuizGenerationResult(quiz=result.output, metrics=metrics)
