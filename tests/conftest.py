"""Shared pytest fixtures for scene-director tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from scene_director.generator import generate_plan
from scene_director.tables import DEFAULT_IDEA


@pytest.fixture()
def golden_plan() -> dict:
    """Serialised plan for the sample archivist idea."""
    return generate_plan(DEFAULT_IDEA).to_dict()


@pytest.fixture()
def idea_file(tmp_path: Path):
    """Factory fixture: write idea text to a uniquely-named temp file, return the Path."""
    counter = {"n": 0}

    def _make(text: str) -> Path:
        counter["n"] += 1
        p = tmp_path / f"idea_{counter['n']}.txt"
        p.write_text(text, encoding="utf-8")
        return p

    return _make
