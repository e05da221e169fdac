"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
External services are replaced with in-memory fakes.
"""
import json
import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import Mock

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.lessons.errors import PersistenceError  # noqa: E402
from src.lessons.schemas import Profession  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


# =============================================================================
# Fakes
# =============================================================================


def text_response(text):
    """Build a Messages API response with a single text block."""
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=text)])


def make_messages_client(*responses):
    """Client whose messages.create returns the given responses in order."""
    client = Mock()
    client.messages.create.side_effect = list(responses)
    return client


class FakeStore:
    """In-memory LessonStore recording every call."""

    def __init__(self, professions=None, existing=None, insert_error=None):
        self.professions = professions or {}
        self.existing = set(existing or ())
        self.insert_error = insert_error
        self.inserted = []
        self.lookups = []
        self.closed = False

    def get_profession(self, slug):
        self.lookups.append(slug)
        return self.professions.get(slug)

    def insert_lesson(self, row):
        if self.insert_error:
            raise PersistenceError(self.insert_error)
        self.inserted.append(row.to_payload())

    def lesson_exists(self, profession_id, slug):
        return (profession_id, slug) in self.existing

    def list_lessons(self, profession_id, published_only=True):
        rows = [r for r in self.inserted if r["profession_id"] == profession_id]
        if published_only:
            rows = [r for r in rows if r["is_published"]]
        return sorted(rows, key=lambda r: r["order_index"])

    def list_professions(self, active_only=True, launch_wave=None):
        return sorted(self.professions.values(), key=lambda p: p.name)

    def close(self):
        self.closed = True


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def sample_lesson():
    """A well-formed generated lesson."""
    return {
        "title": "AI Basics: Your Friendly Guide",
        "introduction": "AI is already part of your day. Let's see how.",
        "sections": [
            {
                "heading": "What AI Is",
                "content": "AI finds patterns in examples.\n\nIt does not think like you do.",
                "example": "Your email spam filter learned from millions of messages.",
            },
            {
                "heading": "Where You Meet It",
                "content": "Voice assistants, photo apps and map directions all use AI.",
            },
        ],
        "keyTakeaways": [
            "AI learns from examples",
            "You already use AI every day",
            "Always double-check important answers",
        ],
        "practicePrompt": "Explain how a spam filter works as if I were a retired teacher.",
    }


@pytest.fixture
def sample_lesson_json(sample_lesson):
    return json.dumps(sample_lesson)


@pytest.fixture
def all_professions():
    """Profession rows for every built-in template profession."""
    return {
        "k12-educator": Profession(id="p-k12", name="K-12 Educator", slug="k12-educator"),
        "recruiter": Profession(id="p-rec", name="Recruiter", slug="recruiter"),
        "retiree": Profession(id="abc123", name="retiree", slug="retiree"),
    }


@pytest.fixture
def fake_store(all_professions):
    return FakeStore(professions=dict(all_professions))


@pytest.fixture
def reply():
    """Factory for text responses."""
    return text_response


@pytest.fixture
def messages_client():
    """Factory for fake Anthropic clients."""
    return make_messages_client


@pytest.fixture
def store_factory():
    """Factory for FakeStore instances."""
    return FakeStore
