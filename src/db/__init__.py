"""Lesson persistence backends."""
from src.db.rest_store import RestLessonStore
from src.db.sql_store import SqlLessonStore
from src.db.store import LessonStore

__all__ = ["LessonStore", "RestLessonStore", "SqlLessonStore"]
