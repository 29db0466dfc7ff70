"""Seed derivation and seeded selection — no randomness, no global state."""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def _to_int32(value: int) -> int:
    """Wrap *value* into the signed 32-bit range."""
    value &= _INT32_MASK
    return value - 0x100000000 if value & _INT32_SIGN else value


def _code_units(text: str):
    """Yield the UTF-16 code units of *text* (astral chars give a surrogate pair)."""
    raw = text.encode("utf-16-le", errors="surrogatepass")
    for i in range(0, len(raw), 2):
        yield raw[i] | (raw[i + 1] << 8)


def hash_text(text: str) -> int:
    """Fold *text* into a non-negative seed.

    Runs ``h = h * 31 + unit`` over the UTF-16 code units, wrapping to a signed
    32-bit integer after each step, and returns ``abs(h)``.  Never fails;
    collisions are acceptable.
    """
    h = 0
    for unit in _code_units(text):
        h = _to_int32((h << 5) - h + unit)
    return abs(h)


def select_one(items: Sequence[T], seed: int, offset: int = 0) -> T:
    """Return ``items[(seed + offset) % len(items)]``."""
    return items[(seed + offset) % len(items)]


def select_unique(items: Sequence[T], seed: int, count: int) -> list[T]:
    """Collect *count* distinct elements of *items*, walking offsets from 0.

    Raises ValueError if *items* holds fewer than *count* distinct elements.
    """
    if count > len(set(items)):
        raise ValueError(
            f"cannot select {count} unique items from {len(set(items))} distinct candidates"
        )

    chosen: list[T] = []
    offset = 0
    while len(chosen) < count:
        candidate = select_one(items, seed, offset)
        if candidate not in chosen:
            chosen.append(candidate)
        offset += 1
    return chosen
