"""
Lesson catalog models.

Implements:
- Profession: launch professions, looked up by slug when seeding
- Lesson: generated lesson with its content blob

The content column stores the lesson JSON exactly as generated:
    {
        "title": "...",
        "introduction": "...",
        "sections": [{"heading": "...", "content": "...", "example": "..."}],
        "keyTakeaways": ["..."],
        "practicePrompt": "..."
    }
"""
from __future__ import annotations

from datetime import datetime
from uuid import uuid4

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


def _new_id() -> str:
    return str(uuid4())


class Profession(Base):
    """A profession learners choose during onboarding."""

    __tablename__ = "professions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    launch_wave: Mapped[int] = mapped_column(Integer, default=1)


class Lesson(Base):
    """A published lesson for one profession."""

    __tablename__ = "lessons"
    __table_args__ = (UniqueConstraint("profession_id", "slug", name="uq_lessons_profession_slug"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    profession_id: Mapped[str] = mapped_column(
        ForeignKey("professions.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False)

    # JSONB on Postgres, JSON elsewhere (SQLite for local runs)
    content: Mapped[dict] = mapped_column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)

    difficulty: Mapped[str] = mapped_column(Text, nullable=False)
    estimated_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False)
    is_published: Mapped[bool] = mapped_column(Boolean, default=False)

    created_at: Mapped[datetime] = mapped_column(default=func.now())
