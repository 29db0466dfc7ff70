"""Immutable value objects produced by the generator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Cast:
    protagonist: str
    ally: str
    second_ally: str


@dataclass(frozen=True)
class ScriptLine:
    speaker: str
    line: str

    def to_dict(self) -> dict:
        return {"speaker": self.speaker, "line": self.line}


@dataclass(frozen=True)
class SceneBreakdown:
    title: str
    location: str
    time_of_day: str
    logline: str
    visual_palette: str
    beats: tuple[str, ...]
    image_prompt: str
    video_prompt: str

    def to_dict(self) -> dict:
        return {
            "title":          self.title,
            "location":       self.location,
            "time_of_day":    self.time_of_day,
            "logline":        self.logline,
            "visual_palette": self.visual_palette,
            "beats":          list(self.beats),
            "image_prompt":   self.image_prompt,
            "video_prompt":   self.video_prompt,
        }


@dataclass(frozen=True)
class ProductionPlan:
    logline: str
    tone: str
    script: tuple[ScriptLine, ...]
    scenes: tuple[SceneBreakdown, ...]

    def to_dict(self) -> dict:
        """Return a JSON-ready dict matching the ProductionPlan.v1.json contract."""
        return {
            "logline": self.logline,
            "tone":    self.tone,
            "script":  [line.to_dict() for line in self.script],
            "scenes":  [scene.to_dict() for scene in self.scenes],
        }
