"""
Lesson store interface.

Both backends (PostgREST over HTTP and direct SQL) implement this protocol;
the seeder only depends on it.
"""

from __future__ import annotations

from typing import Any, Protocol

from src.lessons.schemas import LessonRow, Profession


class LessonStore(Protocol):
    """Reads professions and writes lessons."""

    def get_profession(self, slug: str) -> Profession | None:
        """Return the profession with this slug, or None if absent."""
        ...

    def insert_lesson(self, row: LessonRow) -> None:
        """Insert one lesson row. Raises PersistenceError if rejected."""
        ...

    def lesson_exists(self, profession_id: str, slug: str) -> bool:
        ...

    def list_lessons(self, profession_id: str, published_only: bool = True) -> list[dict[str, Any]]:
        ...

    def list_professions(
        self, active_only: bool = True, launch_wave: int | None = None
    ) -> list[Profession]:
        ...

    def close(self) -> None:
        ...
