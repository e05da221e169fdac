"""
Response parsing for generated lessons.

The model is asked for bare JSON. Nothing is stripped before parsing, so a
reply wrapped in a markdown fence is a parse failure.
"""

from __future__ import annotations

import json
from typing import Any

from src.lessons.errors import LessonParseError


def parse_lesson_content(text: str) -> dict[str, Any]:
    """
    Parse generated text into a lesson dictionary.

    Raises:
        LessonParseError: if the text is not valid JSON or not a JSON object
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LessonParseError(f"Invalid JSON in generated lesson: {e}") from e

    if not isinstance(data, dict):
        raise LessonParseError(
            f"Generated lesson must be a JSON object, got {type(data).__name__}"
        )
    return data
