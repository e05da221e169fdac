"""
Lesson Seeder CLI

Generates AI-literacy lessons with Claude and seeds them into the lessons
table of the hosted backend.

Usage:
    lesson-seeder seed                     # Seed every built-in template
    lesson-seeder seed -p retiree          # Only one profession
    lesson-seeder seed --dry-run           # Generate without inserting
    lesson-seeder templates                # List built-in templates
    lesson-seeder generate "AI Basics" -p nurse -d beginner
    lesson-seeder lessons retiree          # List published lessons
"""

from __future__ import annotations

import json
import sys
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from config import Settings, get_settings
from src.db.rest_store import RestLessonStore
from src.db.sql_store import SqlLessonStore
from src.db.store import LessonStore
from src.generation.claude_client import LessonGenerator
from src.generation.parser import parse_lesson_content
from src.lessons.errors import SeedError
from src.lessons.prompts import build_lesson_prompt, build_seed_prompt
from src.lessons.schemas import validate_lesson_content
from src.lessons.slugs import slugify
from src.lessons.templates import DIFFICULTIES, templates_for
from src.seeding.pipeline import LessonSeeder, SeedOutcome, SeedReport, SeedStatus

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="lesson-seeder",
    help="🌱 Lesson Seeder - generate and seed AI-literacy lessons",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()

LOG_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}"


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)


def build_store(settings: Settings) -> LessonStore:
    """Create the configured persistence backend."""
    if settings.lesson_backend == "sql":
        return SqlLessonStore.from_url(settings.database_url)
    return RestLessonStore(
        settings.supabase_url,
        settings.supabase_service_role_key,
        timeout=settings.backend_timeout_seconds,
    )


def build_generator(settings: Settings) -> LessonGenerator:
    return LessonGenerator(
        api_key=settings.anthropic_api_key,
        model_name=settings.ai_model,
        max_tokens=settings.ai_max_tokens,
    )


def _check_difficulty(value: str) -> str:
    if value not in DIFFICULTIES:
        raise typer.BadParameter(f"must be one of: {', '.join(DIFFICULTIES)}")
    return value


# =============================================================================
# Seeding
# =============================================================================


def _print_outcome(outcome: SeedOutcome) -> None:
    if outcome.status == SeedStatus.CREATED:
        suffix = " [dim](dry run)[/]" if outcome.dry_run else ""
        console.print(f"[green]✅ Created: {outcome.title}[/]{suffix}")
    elif outcome.status == SeedStatus.SKIPPED:
        reason = outcome.error or "Lesson already exists"
        console.print(f"[yellow]⏭  Skipped: {reason} ({outcome.slug})[/]")
    else:
        console.print(f"[red]❌ Error ({outcome.stage}): {outcome.error}[/]")


def _print_report(report: SeedReport) -> None:
    table = Table(title="Seeding Results")
    table.add_column("Profession", style="cyan")
    table.add_column("Slug")
    table.add_column("Status")
    table.add_column("Detail", style="dim")

    styles = {
        SeedStatus.CREATED: "green",
        SeedStatus.SKIPPED: "yellow",
        SeedStatus.FAILED: "red",
    }
    for outcome in report.outcomes:
        style = styles[outcome.status]
        detail = outcome.title if outcome.status == SeedStatus.CREATED else (outcome.error or outcome.stage or "")
        table.add_row(
            outcome.template.profession,
            outcome.slug or "",
            f"[{style}]{outcome.status.value}[/]",
            detail or "",
        )
    console.print(table)


@app.command()
def seed(
    profession: Annotated[
        str | None, typer.Option("--profession", "-p", help="Only seed templates for this profession slug")
    ] = None,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Generate and parse, but do not insert")
    ] = False,
    skip_existing: Annotated[
        bool, typer.Option("--skip-existing", help="Skip templates whose lesson slug already exists")
    ] = False,
    delay: Annotated[
        float | None, typer.Option("--delay", help="Seconds to wait after each template")
    ] = None,
    no_validate: Annotated[
        bool, typer.Option("--no-validate", help="Persist parseable JSON without schema checks")
    ] = False,
    strict: Annotated[
        bool, typer.Option("--strict", help="Exit with code 1 if any template failed")
    ] = False,
    report_path: Annotated[
        str | None, typer.Option("--report", help="Write the run report as JSON to this path")
    ] = None,
) -> None:
    """
    Generate and insert a lesson for each built-in template.

    Examples:
        lesson-seeder seed
        lesson-seeder seed -p recruiter --dry-run
        lesson-seeder seed --skip-existing --strict
    """
    settings = get_settings()
    templates = templates_for(profession)
    if not templates:
        console.print(f"[yellow]No templates for profession: {profession}[/]")
        raise typer.Exit(code=1)

    gen_config = settings.get_generation_config()
    delay_seconds = gen_config["delay_seconds"] if delay is None else delay
    validate_schema = bool(gen_config["validate_schema"]) and not no_validate

    console.print(
        Panel(
            f"[bold cyan]LESSON SEEDING[/]\n"
            f"Templates: {len(templates)}\n"
            f"Model: {gen_config['model']}\n"
            f"Backend: {settings.lesson_backend}\n"
            f"Mode: {'DRY RUN' if dry_run else 'INSERT'}",
            title="🌱",
            border_style="cyan",
        )
    )

    store = build_store(settings)
    try:
        seeder = LessonSeeder(
            store=store,
            generator=build_generator(settings),
            delay_seconds=delay_seconds,
            validate_schema=validate_schema,
            dry_run=dry_run,
            skip_existing=skip_existing,
        )
        report = seeder.run(templates, on_outcome=_print_outcome)
    finally:
        store.close()

    _print_report(report)
    console.print(f"\n[bold green]✅ Lesson seeding complete![/] {report.summary()}")

    if report_path:
        with open(report_path, "w", encoding="utf-8") as f:
            json.dump(report.to_dict(), f, indent=2)
        console.print(f"[dim]Report written to {report_path}[/]")

    if strict and report.has_failures:
        raise typer.Exit(code=1)


# =============================================================================
# Templates & Prompts
# =============================================================================


@app.command()
def templates(
    profession: Annotated[
        str | None, typer.Option("--profession", "-p", help="Filter by profession slug")
    ] = None,
) -> None:
    """List the built-in lesson templates."""
    table = Table(title="Lesson Templates")
    table.add_column("#", justify="right")
    table.add_column("Profession", style="cyan")
    table.add_column("Topic")
    table.add_column("Slug", style="dim")
    table.add_column("Difficulty")
    table.add_column("Minutes", justify="right")

    for template in templates_for(profession):
        table.add_row(
            str(template.order_index),
            template.profession,
            template.topic,
            template.slug,
            template.difficulty,
            str(template.estimated_minutes),
        )
    console.print(table)


@app.command()
def prompt(
    topic: Annotated[str, typer.Argument(help="Lesson topic")],
    profession: Annotated[str, typer.Option("--profession", "-p", help="Profession slug")],
    difficulty: Annotated[
        str, typer.Option("--difficulty", "-d", help="beginner / intermediate / advanced")
    ] = "beginner",
) -> None:
    """Print the seeding prompt for a topic without calling the API."""
    typer.echo(build_seed_prompt(profession, topic, difficulty))


@app.command()
def slug(text: Annotated[str, typer.Argument(help="Topic text")]) -> None:
    """Print the slug derived from a topic."""
    typer.echo(slugify(text))


# =============================================================================
# Generation
# =============================================================================


@app.command()
def generate(
    topic: Annotated[str, typer.Argument(help="Lesson topic")],
    profession: Annotated[
        str, typer.Option("--profession", "-p", help="Profession name, used as given in the prompt")
    ],
    difficulty: Annotated[
        str,
        typer.Option(
            "--difficulty", "-d", help="beginner / intermediate / advanced", callback=_check_difficulty
        ),
    ] = "beginner",
) -> None:
    """
    Generate a single lesson and print its JSON. Nothing is stored.

    Examples:
        lesson-seeder generate "Spotting AI-written phishing" -p "bank teller"
    """
    settings = get_settings()
    generator = build_generator(settings)
    try:
        text = generator.generate(build_lesson_prompt(profession, topic, difficulty))
        content = parse_lesson_content(text)
        if settings.validate_lesson_schema:
            validate_lesson_content(content)
    except SeedError as e:
        console.print(f"[red]❌ Error ({e.stage}): {e}[/]")
        raise typer.Exit(code=1)

    typer.echo(json.dumps(content, indent=2, ensure_ascii=False))


# =============================================================================
# Catalog
# =============================================================================


@app.command()
def lessons(
    profession_slug: Annotated[str, typer.Argument(help="Profession slug")],
    include_drafts: Annotated[
        bool, typer.Option("--all", help="Include unpublished lessons")
    ] = False,
) -> None:
    """List lessons for a profession in reading order."""
    settings = get_settings()
    store = build_store(settings)
    try:
        profession = store.get_profession(profession_slug)
        if profession is None:
            console.print(f"[red]❌ Profession not found: {profession_slug}[/]")
            raise typer.Exit(code=1)
        rows = store.list_lessons(profession.id, published_only=not include_drafts)
    except SeedError as e:
        console.print(f"[red]❌ Error: {e}[/]")
        raise typer.Exit(code=1)
    finally:
        store.close()

    if not rows:
        console.print(f"[yellow]No lessons yet for {profession.name}[/]")
        return

    table = Table(title=f"Lessons - {profession.name}")
    table.add_column("#", justify="right")
    table.add_column("Title", style="cyan")
    table.add_column("Slug", style="dim")
    table.add_column("Difficulty")
    table.add_column("Minutes", justify="right")
    for row in rows:
        table.add_row(
            str(row.get("order_index", "")),
            str(row.get("title", "")),
            str(row.get("slug", "")),
            str(row.get("difficulty", "")),
            str(row.get("estimated_minutes", "")),
        )
    console.print(table)


@app.command()
def professions(
    wave: Annotated[
        int | None, typer.Option("--wave", help="Only professions in this launch wave")
    ] = None,
) -> None:
    """List active professions."""
    settings = get_settings()
    store = build_store(settings)
    try:
        rows = store.list_professions(active_only=True, launch_wave=wave)
    except SeedError as e:
        console.print(f"[red]❌ Error: {e}[/]")
        raise typer.Exit(code=1)
    finally:
        store.close()

    table = Table(title="Professions")
    table.add_column("Slug", style="cyan")
    table.add_column("Name")
    table.add_column("ID", style="dim")
    for row in rows:
        table.add_row(row.slug or "", row.name, row.id)
    console.print(table)


# =============================================================================
# Entry Point
# =============================================================================


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Debug logging")
    ] = False,
) -> None:
    """
    🌱 Lesson Seeder - generate and seed AI-literacy lessons

    \b
    Quick Start:
      lesson-seeder templates        # See what will be generated
      lesson-seeder seed --dry-run   # Generate without inserting
      lesson-seeder seed             # Generate and insert
    """
    configure_logging("DEBUG" if verbose else get_settings().log_level)


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
