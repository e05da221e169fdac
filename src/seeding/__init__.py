"""Sequential lesson seeding."""
from src.seeding.pipeline import LessonSeeder, SeedOutcome, SeedReport, SeedStatus

__all__ = ["LessonSeeder", "SeedOutcome", "SeedReport", "SeedStatus"]
