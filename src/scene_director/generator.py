"""Deterministic plan assembly — no I/O, no randomness, no timestamps."""

from __future__ import annotations

from scene_director.inference import infer_location, infer_tone
from scene_director.keywords import extract_keywords
from scene_director.models import Cast, ProductionPlan, SceneBreakdown, ScriptLine
from scene_director.seeding import hash_text, select_one, select_unique
from scene_director.tables import (
    EMPTY_IDEA_SEED_TEXT,
    FALLBACK_BEAT_WORDS,
    NARRATOR_ROLES,
    PROTAGONIST_NAMES,
    STAGES,
    SUPPORTING_NAMES,
    TRIM_CHARS,
    VISUAL_MOODS,
)

_BEAT_SEED_STRIDE = 13
_BEAT_SEED_MODULUS = 9973

_IMAGE_STYLE = "hyper-realistic photography"
_IMAGE_CAMERA = "shot on IMAX 65mm, shallow depth of field, volumetric lighting, fine film grain"
_VIDEO_STYLE = "cinematic video"
_VIDEO_FRAMING = "tracking shot with Steadicam"
_VIDEO_MOTION = "dynamic camera movement, immersive spatial audio, 24fps, anamorphic lens flares"


def trim_idea(idea: str) -> str:
    """Strip leading and trailing whitespace from *idea*, BOM included."""
    return idea.strip(TRIM_CHARS)


def seed_for_idea(idea: str) -> int:
    """Seed for *idea*; an idea that trims to empty hashes as ``"default"``."""
    return hash_text(trim_idea(idea) or EMPTY_IDEA_SEED_TEXT)


def assign_names(seed: int) -> Cast:
    [protagonist] = select_unique(PROTAGONIST_NAMES, seed, 1)
    ally, second_ally = select_unique(SUPPORTING_NAMES, seed, 2)
    return Cast(protagonist=protagonist, ally=ally, second_ally=second_ally)


def build_logline(idea: str, hero: str, ally: str, tone: str) -> str:
    focus = ", ".join(extract_keywords(idea)[:3]) or "an unexpected revelation"
    return f"{hero} and {ally} navigate {focus} with a {tone.lower()} sensibility."


def craft_script(idea: str, hero: str, ally: str, tone: str, seed: int) -> tuple[ScriptLine, ...]:
    """Four fixed dialogue beats; only the substituted fragments vary."""
    keywords = extract_keywords(idea)
    stakes    = " & ".join(keywords[:2]) or "the moment"
    catalyst  = " & ".join(keywords[2:4]) or "a fragile connection"
    mood_hint = tone.split(",")[0].lower()
    narrator  = select_one(NARRATOR_ROLES, seed, 5)

    return (
        ScriptLine(narrator, f"Camera drifts in, catching {hero} as they center themselves amid {stakes}."),
        ScriptLine(hero, f'"If we misread {catalyst}, everything fractures."'),
        ScriptLine(ally, '"Then we don\'t misread it—we choreograph every beat."'),
        ScriptLine(hero, f'"Stay sharp. The air feels {mood_hint}, and the world is finally watching."'),
    )


def craft_scenes(idea: str, hero: str, ally: str, tone: str, seed: int) -> tuple[SceneBreakdown, ...]:
    """Build the Spark / Escalation / Resolution breakdowns.

    Location, time of day and palette are resolved once and shared by all
    three scenes.  *tone* is accepted for signature symmetry with the other
    crafters; scene text does not currently depend on it.
    """
    location, time_of_day = infer_location(idea, seed)
    palette = select_one(VISUAL_MOODS, seed, 3)
    beat_words = extract_keywords(idea) or list(FALLBACK_BEAT_WORDS)

    scenes = []
    for idx, (title, lead, verbs) in enumerate(STAGES):
        beat_seed = (seed + idx * _BEAT_SEED_STRIDE) % _BEAT_SEED_MODULUS
        beats = tuple(
            f"{verb} {beat_words[(beat_seed + beat_idx) % len(beat_words)]}"
            for beat_idx, verb in enumerate(verbs)
        )

        image_prompt = ", ".join([
            f"{title} of a cinematic narrative",
            _IMAGE_STYLE,
            f"featuring {hero} and {ally}",
            location.lower(),
            f"{time_of_day.lower()} ambience",
            palette,
            _IMAGE_CAMERA,
        ])
        video_prompt = ", ".join([
            f"{title} sequence",
            _VIDEO_STYLE,
            _VIDEO_FRAMING,
            f"{hero} and {ally} in {location.lower()}",
            f"{time_of_day.lower()} light",
            palette,
            _VIDEO_MOTION,
        ])

        scenes.append(SceneBreakdown(
            title=f"Scene {idx + 1}: {title}",
            location=location,
            time_of_day=time_of_day,
            logline=f"{lead} as {hero} and {ally} maneuver through {idea.lower()}.",
            visual_palette=palette,
            beats=beats,
            image_prompt=image_prompt,
            video_prompt=video_prompt,
        ))

    return tuple(scenes)


def generate_plan(idea: str) -> ProductionPlan:
    """Generate a deterministic ProductionPlan from free-text *idea*.

    Never raises for a ``str``; empty input still yields a full plan.
    """
    trimmed = trim_idea(idea)
    seed = seed_for_idea(trimmed)
    cast = assign_names(seed)
    tone = infer_tone(trimmed)

    return ProductionPlan(
        logline=build_logline(trimmed, cast.protagonist, cast.ally, tone),
        tone=tone,
        script=craft_script(trimmed, cast.protagonist, cast.ally, tone, seed),
        scenes=craft_scenes(trimmed, cast.protagonist, cast.ally, tone, seed),
    )
