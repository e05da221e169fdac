"""
Lesson content and row models.

``LessonContent`` mirrors the JSON shape requested from the model. Field
names are snake_case in Python; the camelCase keys used in the prompt and in
the stored blob are accepted through aliases.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import LessonSchemaError


class LessonSection(BaseModel):
    """A titled block of lesson content with an optional worked example."""

    heading: str = Field(min_length=1)
    content: str = Field(min_length=1)
    example: str | None = None


class LessonContent(BaseModel):
    """Structured lesson returned by the generation API."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: str = Field(min_length=1)
    introduction: str = Field(min_length=1)
    sections: list[LessonSection] = Field(min_length=1)
    key_takeaways: list[str] = Field(alias="keyTakeaways", min_length=1)
    practice_prompt: str | None = Field(default=None, alias="practicePrompt")


class Profession(BaseModel):
    """A profession row, looked up by slug."""

    id: str
    name: str
    slug: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Profession":
        # ids may come back as ints or UUIDs depending on the backend
        return cls(id=str(row["id"]), name=row["name"], slug=row.get("slug"))


class LessonRow(BaseModel):
    """Payload inserted into the lessons table."""

    profession_id: str
    title: str | None  # column is NOT NULL; the store rejects a missing title
    slug: str
    content: dict[str, Any]
    difficulty: str
    estimated_minutes: int
    order_index: int
    is_published: bool = True

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()


def _error_fields(error: ValidationError) -> list[str]:
    return sorted({".".join(str(p) for p in err["loc"]) for err in error.errors()})


def validate_lesson_content(data: dict[str, Any]) -> LessonContent:
    """
    Validate parsed JSON against the lesson shape.

    Raises:
        LessonSchemaError: listing every field that failed validation
    """
    try:
        return LessonContent.model_validate(data)
    except ValidationError as e:
        fields = _error_fields(e)
        raise LessonSchemaError(
            f"Lesson content failed validation: {', '.join(fields)}", fields=fields
        ) from e


def build_lesson_row(**values: Any) -> LessonRow:
    """
    Build the insert payload from raw column values.

    Raises:
        LessonSchemaError: if a column value has the wrong type
    """
    try:
        return LessonRow(**values)
    except ValidationError as e:
        fields = _error_fields(e)
        raise LessonSchemaError(
            f"Lesson row failed validation: {', '.join(fields)}", fields=fields
        ) from e
