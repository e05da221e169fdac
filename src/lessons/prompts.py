"""
Prompt templates for lesson generation.

Two prompt variants:
- build_seed_prompt: used by the seeder, maps profession slugs to labels
- build_lesson_prompt: on-demand generation for an arbitrary profession name
"""

from __future__ import annotations

from .templates import get_profession_label

# =============================================================================
# Shared Fragments
# =============================================================================

DIFFICULTY_FRAMING = {
    "beginner": "accessible with no prior AI knowledge",
    "intermediate": "builds on basic AI concepts",
}
ADVANCED_FRAMING = "explores advanced applications"

SEED_JSON_SHAPE = """{
  "title": "Engaging lesson title",
  "introduction": "2-3 sentences that hook them and connect to their world",
  "sections": [
    {
      "heading": "Section heading",
      "content": "Main content (2-3 clear paragraphs, newlines between paragraphs)",
      "example": "Concrete, specific example from their world"
    }
  ],
  "keyTakeaways": ["Actionable takeaway 1", "Actionable takeaway 2", "Actionable takeaway 3"],
  "practicePrompt": "A practical prompt they can copy-paste into ChatGPT/Claude to try this concept themselves"
}"""

LESSON_JSON_SHAPE = """{
  "title": "Lesson title",
  "introduction": "2-3 sentence intro that connects to their world",
  "sections": [
    {
      "heading": "Section heading",
      "content": "Main content (2-3 paragraphs)",
      "example": "Concrete example from their profession"
    }
  ],
  "keyTakeaways": ["Takeaway 1", "Takeaway 2", "Takeaway 3"],
  "practicePrompt": "A prompt they can try with an AI tool to practice this concept"
}"""


def difficulty_framing(difficulty: str) -> str:
    """Describe the expected depth; unknown values get the advanced framing."""
    return DIFFICULTY_FRAMING.get(difficulty, ADVANCED_FRAMING)


# =============================================================================
# Prompt Builders
# =============================================================================


def build_seed_prompt(profession: str, topic: str, difficulty: str) -> str:
    """
    Build the seeding prompt for one lesson template.

    Args:
        profession: Profession slug (e.g. "k12-educator")
        topic: Lesson topic, interpolated verbatim
        difficulty: beginner / intermediate / advanced

    Returns:
        Prompt text asking for a single JSON lesson object
    """
    label = get_profession_label(profession)
    return f"""You are creating an AI literacy lesson for a {label}.

Topic: {topic}
Difficulty: {difficulty}

Create a lesson that:
- Uses examples and analogies from the {label} world
- Is {difficulty_framing(difficulty)}
- Is practical and immediately applicable to their life/work
- Avoids jargon unless explaining it in their terms
- Is warm, engaging, and conversational

Return ONLY valid JSON with this exact structure (no markdown, no code blocks):
{SEED_JSON_SHAPE}

Make it genuinely useful and engaging for a {label}."""


def build_lesson_prompt(profession: str, topic: str, difficulty: str) -> str:
    """Build the on-demand prompt, using the profession name as given."""
    return f"""You are creating an AI literacy lesson for a {profession}.

Topic: {topic}
Difficulty: {difficulty}

Create a lesson that:
- Uses examples and analogies from the {profession} profession
- Is {difficulty_framing(difficulty)}
- Is practical and immediately applicable to their work
- Avoids jargon unless explaining it in their terms

Return ONLY valid JSON with this structure:
{LESSON_JSON_SHAPE}

Make it engaging, clear, and valuable for a {profession}."""
