"""Byte-stable JSON output and plain-text rendering."""

from __future__ import annotations

import json
from pathlib import Path


def dump_json(data: dict) -> str:
    """Serialise *data* as byte-stable JSON with a single trailing newline.

    Guarantees:
    - sort_keys=True  → eliminates dict ordering non-determinism
    - ensure_ascii=True → no locale-dependent unicode variation
    """
    return json.dumps(data, sort_keys=True, indent=2, ensure_ascii=True) + "\n"


def write_json(data: dict, path: str) -> None:
    """Write *data* to *path* as byte-stable, POSIX-compliant JSON."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(dump_json(data), encoding="utf-8", newline="\n")


def render_text(plan: dict) -> str:
    """Render a plan dict as a readable brief, story core first, then scenes."""
    lines = [
        "STORY CORE",
        "",
        f"Logline: {plan['logline']}",
        f"Tone:    {plan['tone']}",
        "",
        "Script Draft",
    ]
    lines.extend(f"  {entry['speaker'].upper()}: {entry['line']}" for entry in plan["script"])

    for scene in plan["scenes"]:
        lines += [
            "",
            scene["title"],
            f"{scene['location']} · {scene['time_of_day']}",
            scene["logline"],
            "",
            "Key Beats",
        ]
        lines.extend(f"  - {beat}" for beat in scene["beats"])
        lines += [
            "",
            f"Visual Palette: {scene['visual_palette']}",
            f"Image Prompt:   {scene['image_prompt']}",
            f"Video Prompt:   {scene['video_prompt']}",
        ]

    return "\n".join(lines) + "\n"
