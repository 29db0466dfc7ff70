"""Tests for the scene-director CLI."""

from __future__ import annotations

import json
from pathlib import Path

import jsonschema
from click.testing import CliRunner

from scene_director.cli import main

# Path to ProductionPlan.v1.json: tests/ -> repo root -> src/scene_director/schemas/
_PLAN_SCHEMA_PATH = (
    Path(__file__).resolve().parents[1] / "src/scene_director/schemas/ProductionPlan.v1.json"
)

REQUIRED_TOP_LEVEL = {"logline", "tone", "script", "scenes"}
REQUIRED_SCENE = {
    "title", "location", "time_of_day", "logline",
    "visual_palette", "beats", "image_prompt", "video_prompt",
}


# ---------------------------------------------------------------------------
# Test 1 — plan writes a contract-conforming JSON file
# ---------------------------------------------------------------------------


def test_plan_writes_json(tmp_path):
    runner = CliRunner()
    out = tmp_path / "nested" / "plan.json"
    result = runner.invoke(main, ["plan", "--idea", "A ghost haunts a seaside diner", "--out", str(out)])
    assert result.exit_code == 0, f"plan failed: {result.output}"

    data = json.loads(out.read_text(encoding="utf-8"))
    assert set(data) == REQUIRED_TOP_LEVEL
    for scene in data["scenes"]:
        assert set(scene) == REQUIRED_SCENE

    schema = json.loads(_PLAN_SCHEMA_PATH.read_text(encoding="utf-8"))
    jsonschema.validate(data, schema)


# ---------------------------------------------------------------------------
# Test 2 — Byte-identical across runs
# ---------------------------------------------------------------------------


def test_byte_identical_across_runs(tmp_path):
    runner = CliRunner()
    out1 = tmp_path / "plan1.json"
    out2 = tmp_path / "plan2.json"

    r1 = runner.invoke(main, ["plan", "--idea", "A heist in space", "--out", str(out1)])
    assert r1.exit_code == 0, f"Run 1 failed: {r1.output}"
    r2 = runner.invoke(main, ["plan", "--idea", "A heist in space   ", "--out", str(out2)])
    assert r2.exit_code == 0, f"Run 2 failed: {r2.output}"

    assert out1.read_bytes() == out2.read_bytes(), "Outputs are not byte-identical"
    assert out1.read_bytes().endswith(b"}\n")


# ---------------------------------------------------------------------------
# Test 3 — Idea sources
# ---------------------------------------------------------------------------


def test_plan_defaults_to_sample_idea(golden_plan):
    runner = CliRunner()
    result = runner.invoke(main, ["plan"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == golden_plan


def test_plan_reads_idea_file(idea_file):
    runner = CliRunner()
    from_file = runner.invoke(main, ["plan", "--idea-file", str(idea_file("A neon city chase\n"))])
    inline = runner.invoke(main, ["plan", "--idea", "A neon city chase"])
    assert from_file.exit_code == 0
    assert from_file.stdout == inline.stdout


def test_plan_idea_file_with_bom(idea_file):
    runner = CliRunner()
    from_file = runner.invoke(main, ["plan", "--idea-file", str(idea_file("\ufeffA neon city chase\n"))])
    inline = runner.invoke(main, ["plan", "--idea", "A neon city chase"])
    assert from_file.exit_code == 0
    assert from_file.stdout == inline.stdout


def test_plan_rejects_both_idea_sources(idea_file):
    runner = CliRunner()
    result = runner.invoke(
        main, ["plan", "--idea", "x", "--idea-file", str(idea_file("y"))]
    )
    assert result.exit_code == 2


def test_plan_missing_idea_file(tmp_path):
    runner = CliRunner()
    result = runner.invoke(main, ["plan", "--idea-file", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1
    assert result.stderr.startswith("ERROR: Cannot read idea file")


def test_plan_empty_idea_warns():
    runner = CliRunner()
    result = runner.invoke(main, ["plan", "--idea", "   "])
    assert result.exit_code == 0
    assert result.stderr.strip() == "WARNING: empty idea, seeding from 'default'"
    assert json.loads(result.stdout)["logline"].startswith("Phoenix and Sage")


# ---------------------------------------------------------------------------
# Test 4 — Text format
# ---------------------------------------------------------------------------


def test_plan_text_format(tmp_path):
    runner = CliRunner()
    out = tmp_path / "plan.txt"
    result = runner.invoke(
        main,
        ["plan", "--idea", "A detective wanders a neon city street", "--format", "text", "--out", str(out)],
    )
    assert result.exit_code == 0

    text = out.read_text(encoding="utf-8")
    assert text.startswith("STORY CORE\n")
    assert "Tone:    Noir-inspired, moody, deliberate" in text
    assert "Downtown rooftop overlooking the city · Night" in text
    for title in ("Scene 1: Spark", "Scene 2: Escalation", "Scene 3: Resolution"):
        assert f"\n{title}\n" in text
    assert text.count("\n  - ") == 9


def test_plan_text_format_stdout():
    runner = CliRunner()
    result = runner.invoke(main, ["plan", "--idea", "A detective wanders a neon city street", "--format", "text"])
    assert result.exit_code == 0
    assert result.stdout.startswith("STORY CORE\n")
    assert result.stdout.endswith("anamorphic lens flares\n")
    assert "Scene 3: Resolution" in result.stdout
    assert result.stdout.count("\n  - ") == 9


# ---------------------------------------------------------------------------
# Test 5 — validate command
# ---------------------------------------------------------------------------


def test_validate_accepts_generated_plan(tmp_path, golden_plan):
    p = tmp_path / "plan.json"
    p.write_text(json.dumps(golden_plan), encoding="utf-8")

    result = CliRunner().invoke(main, ["validate", "--plan", str(p)])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"OK: {p}"


def _assert_invalid(tmp_path: Path, payload: str) -> None:
    p = tmp_path / "bad.json"
    p.write_text(payload, encoding="utf-8")
    result = CliRunner().invoke(main, ["validate", "--plan", str(p)])
    assert result.exit_code == 1, f"Expected exit code 1, got {result.exit_code}"
    assert result.stderr.startswith("ERROR: invalid ProductionPlan:"), (
        f"Unexpected stderr: {result.stderr!r}"
    )


def test_validate_malformed_json(tmp_path):
    _assert_invalid(tmp_path, "{ not valid json }")


def test_validate_non_utf8_file(tmp_path):
    p = tmp_path / "bad.json"
    p.write_bytes(b'{"logline": "\xff\xfe"}')
    result = CliRunner().invoke(main, ["validate", "--plan", str(p)])
    assert result.exit_code == 1
    assert result.stderr.startswith("ERROR: invalid ProductionPlan: Cannot read file")


def test_validate_missing_scene(tmp_path, golden_plan):
    _assert_invalid(tmp_path, json.dumps({**golden_plan, "scenes": golden_plan["scenes"][:2]}))


def test_validate_extra_field(tmp_path, golden_plan):
    _assert_invalid(tmp_path, json.dumps({**golden_plan, "seed": 42}))


def test_validate_scene_order(tmp_path, golden_plan):
    scenes = list(reversed(golden_plan["scenes"]))
    _assert_invalid(tmp_path, json.dumps({**golden_plan, "scenes": scenes}))


def test_validate_same_hero_and_ally(tmp_path, golden_plan):
    script = [dict(line) for line in golden_plan["script"]]
    script[2]["speaker"] = script[1]["speaker"]
    _assert_invalid(tmp_path, json.dumps({**golden_plan, "script": script}))


def test_validate_mismatched_location(tmp_path, golden_plan):
    scenes = [dict(scene) for scene in golden_plan["scenes"]]
    scenes[2]["location"] = "Somewhere else"
    _assert_invalid(tmp_path, json.dumps({**golden_plan, "scenes": scenes}))


# ---------------------------------------------------------------------------
# Test 6 — seed command
# ---------------------------------------------------------------------------


def test_seed_command():
    result = CliRunner().invoke(main, ["seed", "--idea", ""])
    assert result.exit_code == 0
    assert result.stdout.strip() == "1544803905"
