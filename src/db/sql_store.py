"""
SQL Lesson Store - direct database access through SQLAlchemy.

Used when the seeder connects straight to Postgres instead of the REST API,
and for local runs against SQLite.
"""

from __future__ import annotations

from typing import Any

from loguru import logger
from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from src.db.database import build_engine, build_session_factory, init_db, session_scope
from src.db.models import Lesson, Profession as ProfessionModel
from src.lessons.errors import PersistenceError
from src.lessons.schemas import LessonRow, Profession


class SqlLessonStore:
    """LessonStore backed by a SQLAlchemy engine."""

    def __init__(self, engine: Engine, create_tables: bool = False):
        self.engine = engine
        self._sessions = build_session_factory(engine)
        if create_tables:
            init_db(engine)

    @classmethod
    def from_url(cls, database_url: str, create_tables: bool = False) -> "SqlLessonStore":
        return cls(build_engine(database_url), create_tables=create_tables)

    def close(self) -> None:
        self.engine.dispose()

    @staticmethod
    def _to_profession(model: ProfessionModel) -> Profession:
        return Profession(id=str(model.id), name=model.name, slug=model.slug)

    @staticmethod
    def _lesson_dict(model: Lesson) -> dict[str, Any]:
        return {
            "id": model.id,
            "profession_id": model.profession_id,
            "title": model.title,
            "slug": model.slug,
            "content": model.content,
            "difficulty": model.difficulty,
            "estimated_minutes": model.estimated_minutes,
            "order_index": model.order_index,
            "is_published": model.is_published,
        }

    # =========================================================================
    # Professions
    # =========================================================================

    def get_profession(self, slug: str) -> Profession | None:
        try:
            with session_scope(self._sessions) as session:
                model = session.scalars(
                    select(ProfessionModel).where(ProfessionModel.slug == slug).limit(1)
                ).first()
                return self._to_profession(model) if model else None
        except SQLAlchemyError as e:
            raise PersistenceError(f"Profession lookup failed: {e}") from e

    def list_professions(
        self, active_only: bool = True, launch_wave: int | None = None
    ) -> list[Profession]:
        stmt = select(ProfessionModel).order_by(ProfessionModel.name)
        if active_only:
            stmt = stmt.where(ProfessionModel.is_active.is_(True))
        if launch_wave is not None:
            stmt = stmt.where(ProfessionModel.launch_wave == launch_wave)
        try:
            with session_scope(self._sessions) as session:
                return [self._to_profession(m) for m in session.scalars(stmt)]
        except SQLAlchemyError as e:
            raise PersistenceError(f"Profession listing failed: {e}") from e

    def add_profession(self, name: str, slug: str, **fields: Any) -> Profession:
        """Create a profession row (local setup and tests)."""
        try:
            with session_scope(self._sessions) as session:
                model = ProfessionModel(name=name, slug=slug, **fields)
                session.add(model)
                session.flush()
                return self._to_profession(model)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Profession insert failed: {e}") from e

    # =========================================================================
    # Lessons
    # =========================================================================

    def insert_lesson(self, row: LessonRow) -> None:
        try:
            with session_scope(self._sessions) as session:
                session.add(Lesson(**row.to_payload()))
        except SQLAlchemyError as e:
            raise PersistenceError(f"Lesson insert failed: {e}") from e
        logger.debug(f"Inserted lesson {row.slug} for profession {row.profession_id}")

    def lesson_exists(self, profession_id: str, slug: str) -> bool:
        stmt = (
            select(Lesson.id)
            .where(Lesson.profession_id == profession_id, Lesson.slug == slug)
            .limit(1)
        )
        try:
            with session_scope(self._sessions) as session:
                return session.scalars(stmt).first() is not None
        except SQLAlchemyError as e:
            raise PersistenceError(f"Lesson lookup failed: {e}") from e

    def list_lessons(self, profession_id: str, published_only: bool = True) -> list[dict[str, Any]]:
        stmt = select(Lesson).where(Lesson.profession_id == profession_id).order_by(Lesson.order_index)
        if published_only:
            stmt = stmt.where(Lesson.is_published.is_(True))
        try:
            with session_scope(self._sessions) as session:
                return [self._lesson_dict(m) for m in session.scalars(stmt)]
        except SQLAlchemyError as e:
            raise PersistenceError(f"Lesson listing failed: {e}") from e
