"""
Lesson Seeding Pipeline.

Sequential orchestration of lesson generation and persistence:
1. Look up the template's profession by slug
2. Build the prompt
3. Generate the lesson text (one request per template)
4. Parse (and optionally validate) the JSON
5. Derive the slug and insert the lesson row
6. Pause after the template, success or failure

Every template ends in exactly one SeedOutcome; a failure in one template
never stops the run.

Usage:
    seeder = LessonSeeder(store=store, generator=generator)
    report = seeder.run(LESSON_TEMPLATES)
    print(report.summary())
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from loguru import logger

from src.db.store import LessonStore
from src.generation.claude_client import LessonGenerator
from src.generation.parser import parse_lesson_content
from src.lessons.errors import SeedError
from src.lessons.prompts import build_seed_prompt
from src.lessons.schemas import build_lesson_row, validate_lesson_content
from src.lessons.templates import LessonTemplate


class SeedStatus(str, Enum):
    """Final state of one template."""

    CREATED = "created"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class SeedOutcome:
    """Result of seeding a single template."""

    template: LessonTemplate
    status: SeedStatus
    slug: str | None = None
    title: str | None = None
    stage: str | None = None  # where a skip/failure happened
    error: str | None = None
    dry_run: bool = False
    payload: dict[str, Any] | None = None

    @property
    def ok(self) -> bool:
        return self.status != SeedStatus.FAILED


@dataclass
class SeedReport:
    """Aggregated outcomes of a seeding run."""

    started_at: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None
    outcomes: list[SeedOutcome] = field(default_factory=list)

    def _count(self, status: SeedStatus) -> int:
        return sum(1 for o in self.outcomes if o.status == status)

    @property
    def created(self) -> int:
        return self._count(SeedStatus.CREATED)

    @property
    def skipped(self) -> int:
        return self._count(SeedStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(SeedStatus.FAILED)

    @property
    def has_failures(self) -> bool:
        return self.failed > 0

    def summary(self) -> str:
        return (
            f"{len(self.outcomes)} templates: {self.created} created, "
            f"{self.skipped} skipped, {self.failed} failed"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "created": self.created,
            "skipped": self.skipped,
            "failed": self.failed,
            "outcomes": [
                {
                    "profession": o.template.profession,
                    "topic": o.template.topic,
                    "status": o.status.value,
                    "slug": o.slug,
                    "title": o.title,
                    "stage": o.stage,
                    "error": o.error,
                    "dry_run": o.dry_run,
                }
                for o in self.outcomes
            ],
        }


class LessonSeeder:
    """
    Generates and stores one lesson per template, strictly in order.

    At most one generation request is in flight at any time. The pause
    after each template is the only rate limiting.
    """

    def __init__(
        self,
        store: LessonStore,
        generator: LessonGenerator,
        delay_seconds: float = 2.0,
        validate_schema: bool = True,
        dry_run: bool = False,
        skip_existing: bool = False,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.store = store
        self.generator = generator
        self.delay_seconds = delay_seconds
        self.validate_schema = validate_schema
        self.dry_run = dry_run
        self.skip_existing = skip_existing
        self._sleep = sleep

    def seed_template(self, template: LessonTemplate) -> SeedOutcome:
        """Run the full pipeline for one template and report how it ended."""
        slug = template.slug
        stage = "lookup"
        try:
            profession = self.store.get_profession(template.profession)
            if profession is None:
                logger.warning(f"Profession not found: {template.profession}")
                return SeedOutcome(
                    template, SeedStatus.SKIPPED, slug=slug, stage="lookup",
                    error=f"Profession not found: {template.profession}",
                )

            if self.skip_existing and self.store.lesson_exists(profession.id, slug):
                logger.info(f"Lesson already exists, skipping: {slug}")
                return SeedOutcome(template, SeedStatus.SKIPPED, slug=slug, stage="exists")

            logger.info(f"Generating: {template.topic} ({profession.name})...")
            prompt = build_seed_prompt(template.profession, template.topic, template.difficulty)

            stage = "generation"
            text = self.generator.generate(prompt)

            stage = "parse"
            content = parse_lesson_content(text)

            stage = "validation"
            if self.validate_schema:
                validate_lesson_content(content)

            row = build_lesson_row(
                profession_id=profession.id,
                title=content.get("title"),
                slug=slug,
                content=content,
                difficulty=template.difficulty,
                estimated_minutes=template.estimated_minutes,
                order_index=template.order_index,
                is_published=True,
            )

            if self.dry_run:
                logger.info(f"Dry run, not inserting: {row.title}")
            else:
                stage = "persistence"
                self.store.insert_lesson(row)
                logger.success(f"Created: {row.title}")

            return SeedOutcome(
                template, SeedStatus.CREATED, slug=slug, title=row.title,
                dry_run=self.dry_run, payload=row.to_payload(),
            )

        except SeedError as e:
            failed_stage = "lookup" if stage == "lookup" else e.stage
            logger.error(f"Error ({failed_stage}) for {template.topic}: {e}")
            return SeedOutcome(
                template, SeedStatus.FAILED, slug=slug, stage=failed_stage, error=str(e)
            )
        except Exception as e:  # Intentionally broad - one template must not end the run
            logger.exception(f"Unexpected error for {template.topic}")
            return SeedOutcome(
                template, SeedStatus.FAILED, slug=slug, stage=stage, error=str(e)
            )

    def iter_outcomes(self, templates: Iterable[LessonTemplate]) -> Iterator[SeedOutcome]:
        """Seed templates in order, yielding each outcome as it completes."""
        for template in templates:
            yield self.seed_template(template)
            if self.delay_seconds > 0:
                self._sleep(self.delay_seconds)

    def run(
        self,
        templates: Iterable[LessonTemplate],
        on_outcome: Callable[[SeedOutcome], None] | None = None,
    ) -> SeedReport:
        """Seed all templates and return the aggregated report."""
        report = SeedReport()
        logger.info("Starting lesson seeding...")
        for outcome in self.iter_outcomes(templates):
            report.outcomes.append(outcome)
            if on_outcome is not None:
                on_outcome(outcome)
        report.completed_at = datetime.now()
        logger.info(f"Lesson seeding complete: {report.summary()}")
        return report
