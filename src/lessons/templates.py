"""
Built-in lesson templates and profession labels.

Centralizes the lessons seeded for each launch profession so the CLI, the
seeder and the tests all read from one list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .slugs import slugify

Difficulty = Literal["beginner", "intermediate", "advanced"]

DIFFICULTIES: tuple[str, ...] = ("beginner", "intermediate", "advanced")


@dataclass(frozen=True)
class LessonTemplate:
    """One lesson to generate for a profession."""

    profession: str  # profession slug
    topic: str
    difficulty: Difficulty
    estimated_minutes: int
    order_index: int

    @property
    def slug(self) -> str:
        """Slug of the lesson derived from its topic."""
        return slugify(self.topic)


# =============================================================================
# Profession Labels
# =============================================================================
# Display labels used inside generation prompts. Slugs missing here are
# interpolated as-is.
PROFESSION_LABELS: dict[str, str] = {
    "k12-educator": "K-12 educator",
    "recruiter": "recruiter",
    "retiree": "retiree (someone retired and learning for personal enrichment)",
}


def get_profession_label(profession: str) -> str:
    """Return the prompt label for a profession slug."""
    return PROFESSION_LABELS.get(profession, profession)


# =============================================================================
# Lesson Templates
# =============================================================================
LESSON_TEMPLATES: tuple[LessonTemplate, ...] = (
    # K-12 Educator
    LessonTemplate("k12-educator", "What is AI and How Does It Learn?", "beginner", 8, 1),
    LessonTemplate(
        "k12-educator", "AI as a Teaching Assistant: Lesson Planning and Grading", "beginner", 10, 2
    ),
    LessonTemplate("k12-educator", "Personalized Learning with AI Tools", "intermediate", 12, 3),
    # Recruiter
    LessonTemplate(
        "recruiter", "Understanding AI Basics Through Talent Matching", "beginner", 8, 1
    ),
    LessonTemplate(
        "recruiter", "AI-Powered Resume Screening and Candidate Sourcing", "beginner", 10, 2
    ),
    LessonTemplate("recruiter", "Using AI to Write Better Job Descriptions", "intermediate", 12, 3),
    # Retiree
    LessonTemplate("retiree", "AI Basics: What Everyone Should Know", "beginner", 8, 1),
    LessonTemplate("retiree", "Using AI to Stay Connected and Informed", "beginner", 10, 2),
    LessonTemplate("retiree", "AI for Health, Finance, and Daily Life", "intermediate", 12, 3),
)


def templates_for(profession: str | None = None) -> list[LessonTemplate]:
    """Return built-in templates, optionally limited to one profession slug."""
    if profession is None:
        return list(LESSON_TEMPLATES)
    return [t for t in LESSON_TEMPLATES if t.profession == profession]
