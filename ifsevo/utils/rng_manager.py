"""Random sources for ifsevo.

Two interchangeable implementations of :class:`RandomSource` are provided:

- :class:`Mulberry32`: deterministic 32-bit generator. The bit sequence
  matches the reference mulberry32 algorithm, so a shared seed recreates
  the same initial population on any implementation.
- :class:`DefaultRandomSource`: wraps :class:`random.Random` for live
  evolution where reproducibility is not required.

:class:`RNGManager` hands out per-context sources so callers never depend
on hidden global random state.
"""

from __future__ import annotations

import math
import random as _random
import zlib
from typing import Any, MutableSequence

from ifsevo.utils.validation import ValidationError

_MASK32 = 0xFFFFFFFF
_TWO_POW_32 = 4294967296.0
MAX_SEED = 2147483647


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK32


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +inf."""
    return int(math.floor(value + 0.5))


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """Convert HSL (h in degrees, s/l in [0, 1]) to integer RGB channels."""
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs(((h / 60) % 2) - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return (
        round_half_up((r + m) * 255),
        round_half_up((g + m) * 255),
        round_half_up((b + m) * 255),
    )


class RandomSource:
    """Base class for random streams.

    Subclasses implement :meth:`random`; every derived draw is built on it so
    the consumption order of a stream is fully determined by the caller.
    """

    def random(self) -> float:  # pragma: no cover - abstract
        raise NotImplementedError

    def uniform(self, a: float, b: float) -> float:
        return self.random() * (b - a) + a

    def randrange(self, n: int) -> int:
        if n <= 0:
            raise ValidationError("empty_range", "randrange() requires n > 0", n=n)
        return min(int(math.floor(self.random() * n)), n - 1)

    def random_color(self) -> tuple[int, int, int]:
        h = self.random() * 360
        s = self.uniform(0.6, 1)
        l = self.uniform(0.4, 0.7)
        return hsl_to_rgb(h, s, l)

    def shuffle(self, seq: MutableSequence[Any]) -> None:
        # Fisher-Yates, one draw per position from the end
        for i in range(len(seq) - 1, 0, -1):
            j = self.randrange(i + 1)
            seq[i], seq[j] = seq[j], seq[i]


class Mulberry32(RandomSource):
    """Deterministic mulberry32 stream over a 32-bit state."""

    def __init__(self, seed: int) -> None:
        seed = int(seed)
        if seed < 0 or seed > _MASK32:
            raise ValidationError("invalid_seed", "Seed must fit in 32 unsigned bits", seed=seed)
        self._state = seed

    def random(self) -> float:
        self._state = (self._state + 0x6D2B79F5) & _MASK32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
        return ((t ^ (t >> 14)) & _MASK32) / _TWO_POW_32

    def get_state(self) -> int:
        return self._state

    def set_state(self, state: int) -> None:
        self._state = int(state) & _MASK32


class DefaultRandomSource(RandomSource):
    """Non-deterministic (or optionally seeded) stream backed by :mod:`random`."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = _random.Random(seed)

    def random(self) -> float:
        return self._rng.random()

    def get_state(self) -> Any:
        return self._rng.getstate()

    def set_state(self, state: Any) -> None:
        self._rng.setstate(state)


def generate_random_seed() -> int:
    """Return a fresh seed in ``[0, 2**31 - 1)``."""
    return _random.randrange(MAX_SEED)


class RNGManager:
    """Per-context random sources.

    With a seed, each named context owns a :class:`Mulberry32` stream seeded
    from ``seed`` and the CRC32 of the context name, so contexts never
    interleave. Without a seed, contexts share nothing and draw from
    :class:`DefaultRandomSource`.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is not None and (int(seed) < 0 or int(seed) > _MASK32):
            raise ValidationError("invalid_seed", "Seed must fit in 32 unsigned bits", seed=seed)
        self.seed = None if seed is None else int(seed)
        self._contexts: dict[str, RandomSource] = {}

    def _derive_seed(self, context: str) -> int:
        assert self.seed is not None
        return (self.seed ^ zlib.crc32(context.encode("utf-8"))) & _MASK32

    def get_context_rng(self, context: str) -> RandomSource:
        rng = self._contexts.get(context)
        if rng is None:
            if self.seed is None:
                rng = DefaultRandomSource()
            else:
                rng = Mulberry32(self._derive_seed(context))
            self._contexts[context] = rng
        return rng

    def get_state(self) -> dict[str, Any]:
        return {name: rng.get_state() for name, rng in self._contexts.items()}  # type: ignore[attr-defined]

    def set_state(self, state: dict[str, Any]) -> None:
        for name, value in state.items():
            self.get_context_rng(name).set_state(value)  # type: ignore[attr-defined]


__all__ = [
    "RandomSource",
    "Mulberry32",
    "DefaultRandomSource",
    "RNGManager",
    "generate_random_seed",
    "hsl_to_rgb",
    "round_half_up",
    "MAX_SEED",
]
