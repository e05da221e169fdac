"""
Unit tests for prompt building and the built-in templates.
"""

import pytest

from src.lessons.prompts import (
    build_lesson_prompt,
    build_seed_prompt,
    difficulty_framing,
)
from src.lessons.templates import (
    LESSON_TEMPLATES,
    PROFESSION_LABELS,
    get_profession_label,
    templates_for,
)


class TestDifficultyFraming:
    """Tests for difficulty wording."""

    @pytest.mark.parametrize("difficulty,phrase", [
        ("beginner", "accessible with no prior AI knowledge"),
        ("intermediate", "builds on basic AI concepts"),
        ("advanced", "explores advanced applications"),
    ])
    def test_known_difficulties(self, difficulty, phrase):
        assert difficulty_framing(difficulty) == phrase

    @pytest.mark.parametrize("difficulty", ["expert", "", "Beginner"])
    def test_unknown_difficulty_falls_to_advanced(self, difficulty):
        assert difficulty_framing(difficulty) == "explores advanced applications"


class TestSeedPrompt:
    """Tests for the seeding prompt."""

    def test_uses_profession_label(self):
        prompt = build_seed_prompt("retiree", "AI Basics", "beginner")
        assert "lesson for a retiree (someone retired and learning for personal enrichment)." in prompt
        assert "from the retiree (someone retired" in prompt

    def test_k12_label(self):
        prompt = build_seed_prompt("k12-educator", "Grading", "beginner")
        assert "AI literacy lesson for a K-12 educator." in prompt

    def test_unknown_profession_interpolated_verbatim(self):
        prompt = build_seed_prompt("nurse", "Charting", "beginner")
        assert "AI literacy lesson for a nurse." in prompt

    def test_topic_and_difficulty_verbatim(self):
        prompt = build_seed_prompt("recruiter", "Sourcing {weird} <topic>", "expert")
        assert "Topic: Sourcing {weird} <topic>" in prompt
        assert "Difficulty: expert" in prompt
        assert "- Is explores advanced applications" in prompt

    def test_requests_json_shape(self):
        prompt = build_seed_prompt("recruiter", "Job Descriptions", "intermediate")
        assert "Return ONLY valid JSON" in prompt
        for key in ('"title"', '"introduction"', '"sections"', '"heading"', '"content"',
                    '"example"', '"keyTakeaways"', '"practicePrompt"'):
            assert key in prompt
        assert "- Is builds on basic AI concepts" in prompt


class TestLessonPrompt:
    """Tests for the on-demand prompt."""

    def test_profession_used_as_given(self):
        prompt = build_lesson_prompt("bank teller", "Phishing", "beginner")
        assert "AI literacy lesson for a bank teller." in prompt
        assert "from the bank teller profession" in prompt
        assert "valuable for a bank teller." in prompt

    def test_not_mapped_through_labels(self):
        prompt = build_lesson_prompt("retiree", "Phishing", "beginner")
        assert "personal enrichment" not in prompt


class TestTemplates:
    """Tests for the built-in template list."""

    def test_nine_templates_three_per_profession(self):
        assert len(LESSON_TEMPLATES) == 9
        for profession in PROFESSION_LABELS:
            assert [t.order_index for t in templates_for(profession)] == [1, 2, 3]

    def test_templates_are_frozen(self):
        with pytest.raises(AttributeError):
            LESSON_TEMPLATES[0].topic = "changed"

    def test_metadata_valid(self):
        for t in LESSON_TEMPLATES:
            assert t.difficulty in ("beginner", "intermediate", "advanced")
            assert t.estimated_minutes > 0
            assert t.order_index > 0

    def test_slugs_unique_per_profession(self):
        pairs = [(t.profession, t.slug) for t in LESSON_TEMPLATES]
        assert len(pairs) == len(set(pairs))

    def test_filter_unknown_profession(self):
        assert templates_for("astronaut") == []

    def test_label_fallback(self):
        assert get_profession_label("nurse") == "nurse"
