"""
Seeding errors.

Each stage of the seeding pipeline raises its own subclass so the driving loop
can record which stage a template failed in.
"""

from __future__ import annotations


class SeedError(Exception):
    """Base class for lesson seeding failures."""

    stage = "unknown"


class GenerationError(SeedError):
    """The generation API call failed or returned an unusable response."""

    stage = "generation"


class LessonParseError(SeedError):
    """The generated text is not a JSON object."""

    stage = "parse"


class LessonSchemaError(SeedError):
    """The generated JSON is missing required lesson fields."""

    stage = "validation"

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []


class PersistenceError(SeedError):
    """The backend rejected a read or write."""

    stage = "persistence"
