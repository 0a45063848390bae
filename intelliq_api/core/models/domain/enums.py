"""Domain enums shared by entities and API models."""

from __future__ import annotations

from enum import Enum


class QuizType(str, Enum):
    """How a quiz was created and played."""

    singleplayer = "singleplayer"
    multiplayer = "multiplayer"
    document = "document"
    random = "random"


class SupportedLanguage(str, Enum):
    """
    Languages a generated quiz can be delivered in.

    Quizzes are always generated in English and translated afterwards.
    """

    en = "en"
    de = "de"
    fr = "fr"
    es = "es"
    it = "it"
    ja = "ja"
    ro = "ro"
    sr = "sr"
    tl = "tl"
    pl = "pl"


class RoomSetting(str, Enum):
    """Room fields a host may change after creation. Values are API names."""

    num_questions = "numQuestions"
    max_players = "maxPlayers"
    time_limit = "timeLimit"

    @property
    def column(self) -> str:
        """Name of the ``rooms`` column backing this setting."""
        return {
            RoomSetting.num_questions: "num_questions",
            RoomSetting.max_players: "max_players",
            RoomSetting.time_limit: "time_limit",
        }[self]
