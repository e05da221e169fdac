# SQLAlchemy models
from .base import Base
from .lessons import Lesson, Profession

__all__ = ["Base", "Lesson", "Profession"]
