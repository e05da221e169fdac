"""Lesson templates, prompts, slugs and content models.

Usage:
    from src.lessons import LESSON_TEMPLATES, build_seed_prompt, slugify

    for template in LESSON_TEMPLATES:
        prompt = build_seed_prompt(template.profession, template.topic, template.difficulty)
"""
from src.lessons.errors import (
    GenerationError,
    LessonParseError,
    LessonSchemaError,
    PersistenceError,
    SeedError,
)
from src.lessons.prompts import build_lesson_prompt, build_seed_prompt
from src.lessons.schemas import (
    LessonContent,
    LessonRow,
    LessonSection,
    Profession,
    build_lesson_row,
    validate_lesson_content,
)
from src.lessons.slugs import slugify
from src.lessons.templates import (
    DIFFICULTIES,
    LESSON_TEMPLATES,
    PROFESSION_LABELS,
    LessonTemplate,
    get_profession_label,
    templates_for,
)

__all__ = [
    "DIFFICULTIES",
    "LESSON_TEMPLATES",
    "PROFESSION_LABELS",
    "GenerationError",
    "LessonContent",
    "LessonParseError",
    "LessonRow",
    "LessonSchemaError",
    "LessonSection",
    "LessonTemplate",
    "PersistenceError",
    "Profession",
    "SeedError",
    "build_lesson_prompt",
    "build_lesson_row",
    "build_seed_prompt",
    "get_profession_label",
    "slugify",
    "templates_for",
    "validate_lesson_content",
]
