"""Prompt builders for quiz generation."""

from __future__ import annotations

from typing import Sequence

SYSTEM_PROMPT = (
    "You are an expert quiz author. You write engaging multiple-choice quizzes "
    "and always answer with the requested JSON structure."
)


def generate_quiz_prompt(
    topic: str,
    description: str,
    number_of_questions: int,
    tags: Sequence[str] = (),
) -> str:
    """
    Build the user prompt for a quiz.

    Args:
        topic: Quiz topic
        description: Free-form overview of what the quiz should cover
        number_of_questions: How many questions to ask for
        tags: Optional tags the questions should touch on

    Returns:
        The prompt text
    """
    lines = [
        f"Create a quiz about: {topic}.",
        f"Quiz overview: {description}.",
        f"Number of questions: {number_of_questions}.",
    ]
    if tags:
        lines.append(f"Cover these tags where possible: {', '.join(tags)}.")
    lines.extend(
        [
            "",
            "Rules:",
            "- Keep the quiz title stable and descriptive of the topic.",
            "- Give every question a unique, creative questionTitle.",
            '- Never use titles like "Question 1" or "Question Number".',
            "- Every question has exactly four options labelled a), b), c) and d).",
            "- correctAnswer repeats one of the options exactly as written.",
            "- Vary the position of the correct answer between questions.",
        ]
    )
    return "\n".join(lines)
