"""
Unit tests for quiz I/O models.
"""

import pytest
from pydantic import ValidationError

from intelliq_api.core.models.domain.enums import QuizType, SupportedLanguage
from intelliq_api.core.models.io.quizzes import GeneratedQuiz, QuizGenerationRequest


class TestQuizGenerationRequest:
    def test_defaults(self):
        request = QuizGenerationRequest.model_validate({"quizTopic": "Space", "quizDescription": "Planets"})

        assert request.number_of_questions == 4
        assert request.quiz_tags == []
        assert request.language == SupportedLanguage.en
        assert request.quiz_type == QuizType.singleplayer

    def test_query_strings_are_coerced(self):
        request = QuizGenerationRequest.model_validate(
            {
                "quizTopic": "Space",
                "quizDescription": "Planets",
                "numberOfQuestions": "7",
                "quizTags": "astronomy, physics,,",
                "language": "DE",
                "quizType": "multiplayer",
            }
        )

        assert request.number_of_questions == 7
        assert request.quiz_tags == ["astronomy", "physics"]
        assert request.language == SupportedLanguage.de
        assert request.quiz_type == QuizType.multiplayer

    @pytest.mark.parametrize("count", ["0", "11", "-1"])
    def test_number_of_questions_bounds(self, count):
        with pytest.raises(ValidationError) as exc_info:
            QuizGenerationRequest.model_validate(
                {"quizTopic": "Space", "quizDescription": "Planets", "numberOfQuestions": count}
            )

        assert exc_info.value.errors()[0]["loc"] == ("numberOfQuestions",)

    def test_missing_topic(self):
        with pytest.raises(ValidationError) as exc_info:
            QuizGenerationRequest.model_validate({"quizDescription": "Planets"})

        assert [error["loc"] for error in exc_info.value.errors()] == [("quizTopic",)]

    def test_empty_topic(self):
        with pytest.raises(ValidationError):
            QuizGenerationRequest.model_validate({"quizTopic": "", "quizDescription": "Planets"})

    def test_unsupported_language(self):
        with pytest.raises(ValidationError):
            QuizGenerationRequest.model_validate({"quizTopic": "Space", "quizDescription": "x", "language": "xx"})


class TestGeneratedQuiz:
    def test_dumps_camel_case(self, quiz_payload):
        quiz = GeneratedQuiz.model_validate(quiz_payload)

        assert quiz.quiz_title == "The Solar System"
        assert quiz.questions[0].correct_answer == "b) Mars"
        assert quiz.model_dump(by_alias=True) == quiz_payload

    def test_json_schema_uses_wire_names(self):
        schema = GeneratedQuiz.model_json_schema(by_alias=True)

        assert set(schema["properties"]) == {"quizTitle", "questions"}
