"""LLM-based lesson generation.

Pipeline:
1. LessonGenerator sends the prompt to Claude and returns the reply text
2. parse_lesson_content turns the text into a dict (no fence stripping)

Usage:
    from src.generation import LessonGenerator, parse_lesson_content

    generator = LessonGenerator(api_key=settings.anthropic_api_key)
    lesson = parse_lesson_content(generator.generate(prompt))
"""
from src.generation.claude_client import LessonGenerator
from src.generation.parser import parse_lesson_content

__all__ = [
    "LessonGenerator",
    "parse_lesson_content",
]
