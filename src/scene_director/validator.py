"""Contract validation for ProductionPlan dicts and stored plan files."""

from __future__ import annotations

import json
from pathlib import Path

import jsonschema

from scene_director.tables import STAGES

_SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"
_PLAN_SCHEMA_PATH = _SCHEMAS_DIR / "ProductionPlan.v1.json"

_EXPECTED_TITLES = [f"Scene {i + 1}: {title}" for i, (title, _, _) in enumerate(STAGES)]


class ValidationError(Exception):
    """Raised when a plan violates the ProductionPlan contract."""


def validate_plan_dict(data: dict) -> dict:
    """Validate an in-memory plan dict against the contract schema and semantic rules.

    Returns *data* unchanged on success.
    Raises ValidationError on any problem.
    """
    # 1. Schema validation against ProductionPlan.v1.json
    schema = json.loads(_PLAN_SCHEMA_PATH.read_text(encoding="utf-8"))
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as exc:
        raise ValidationError(f"plan violates contract schema: {exc.message}") from exc

    # ── Semantic rules (constraints JSON Schema cannot express) ───────────────

    # 2. Scenes appear in structural order
    titles = [scene["title"] for scene in data["scenes"]]
    if titles != _EXPECTED_TITLES:
        raise ValidationError(f"scene titles must be {_EXPECTED_TITLES}, got {titles}")

    # 3. Script beats: narrator, hero, ally, hero
    _, hero, ally, closer = (line["speaker"] for line in data["script"])
    if closer != hero:
        raise ValidationError("script lines 2 and 4 must share the protagonist as speaker")
    if ally == hero:
        raise ValidationError("protagonist and ally must be distinct")

    # 4. Location, time of day and palette are shared across scenes
    for field in ("location", "time_of_day", "visual_palette"):
        if len({scene[field] for scene in data["scenes"]}) != 1:
            raise ValidationError(f"'{field}' must be identical across scenes")

    return data


def validate_plan_file(path: str) -> dict:
    """Read a plan JSON file, then validate it via validate_plan_dict.

    Returns the parsed plan dict on success.
    Raises ValidationError on any problem.
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ValidationError(f"Cannot read file: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Invalid JSON: {exc}") from exc

    return validate_plan_dict(data)
