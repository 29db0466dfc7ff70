"""Keyword extraction from idea text."""

from __future__ import annotations

import re

from scene_director.tables import MAX_KEYWORDS, STOP_WORDS

_NON_WORD = re.compile(r"[^a-z0-9\s]")


def extract_keywords(idea: str) -> list[str]:
    """Return up to eight salient lowercase tokens in first-occurrence order.

    Anything outside ASCII ``[a-z0-9]`` and whitespace becomes a word break,
    so accented letters split a word rather than joining it.
    """
    cleaned = _NON_WORD.sub(" ", idea.lower())
    words = [w for w in cleaned.split() if len(w) > 3 and w not in STOP_WORDS]
    return words[:MAX_KEYWORDS]
