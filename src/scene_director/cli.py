"""CLI entry point for scene-director."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from scene_director.generator import generate_plan, seed_for_idea, trim_idea
from scene_director.tables import DEFAULT_IDEA, EMPTY_IDEA_SEED_TEXT
from scene_director.validator import ValidationError, validate_plan_dict, validate_plan_file
from scene_director.writer import dump_json, render_text, write_json


class IdeaInputError(Exception):
    """Raised when the idea text cannot be read."""


def read_idea(idea: str | None, idea_path: str | None) -> str:
    """Resolve the idea from --idea / --idea-file, defaulting to DEFAULT_IDEA."""
    if idea is not None and idea_path is not None:
        raise click.UsageError("--idea and --idea-file are mutually exclusive")
    if idea_path is not None:
        try:
            return Path(idea_path).read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise IdeaInputError(f"Cannot read idea file: {exc}") from exc
    if idea is not None:
        return idea
    return DEFAULT_IDEA


@click.group()
def main() -> None:
    """scene-director — deterministic idea-to-production planner."""


@main.command("plan")
@click.option("--idea", default=None, help="Idea text (default: built-in sample idea)")
@click.option(
    "--idea-file",
    "idea_path",
    default=None,
    type=click.Path(),
    help="Read the idea text from a file",
)
@click.option(
    "--out",
    "out_path",
    default=None,
    type=click.Path(),
    help="Output path (default: stdout)",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "text"]),
    default="json",
    show_default=True,
    help="Output format",
)
def plan(idea: str | None, idea_path: str | None, out_path: str | None, fmt: str) -> None:
    """Generate a production plan from an idea."""
    try:
        text = read_idea(idea, idea_path)
    except IdeaInputError as exc:
        click.echo(f"ERROR: {exc}", err=True)
        sys.exit(1)

    if not trim_idea(text):
        click.echo(f"WARNING: empty idea, seeding from {EMPTY_IDEA_SEED_TEXT!r}", err=True)

    data = generate_plan(text).to_dict()

    try:
        validate_plan_dict(data)
    except ValidationError:
        click.echo("ERROR: generated plan violates contract", err=True)
        sys.exit(1)

    if out_path is None:
        click.echo(dump_json(data) if fmt == "json" else render_text(data), nl=False)
    elif fmt == "json":
        write_json(data, out_path)
    else:
        out = Path(out_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(render_text(data), encoding="utf-8", newline="\n")
    sys.exit(0)


@main.command("validate")
@click.option(
    "--plan",
    "plan_path",
    required=True,
    type=click.Path(exists=True),
    help="Path to a ProductionPlan JSON file",
)
def validate(plan_path: str) -> None:
    """Check a stored plan file against the ProductionPlan contract."""
    try:
        validate_plan_file(plan_path)
    except ValidationError as exc:
        click.echo(f"ERROR: invalid ProductionPlan: {exc}", err=True)
        sys.exit(1)

    click.echo(f"OK: {plan_path}")
    sys.exit(0)


@main.command("seed")
@click.option("--idea", required=True, help="Idea text")
def seed(idea: str) -> None:
    """Print the seed an idea hashes to."""
    click.echo(str(seed_for_idea(idea)))
