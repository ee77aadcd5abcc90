"""Crossover and mutation operators on transform lists.

All operators are pure: they take transform sequences (never genomes),
leave their inputs untouched and return new lists. Wrapping results into
genomes (ids, generation, parents) is done by :mod:`ifsevo.evolution.engine`.
"""

from __future__ import annotations

import math
from dataclasses import replace
from enum import Enum
from typing import Sequence

from ifsevo.core.algebra import (
    DEFAULT_MAX_CONTRACTIVITY,
    decompose_matrix,
    enforce_contractivity,
    reconstruct_matrix,
)
from ifsevo.core.transform import Transform
from ifsevo.repair.repair import clamp_transform_count
from ifsevo.utils.rng_manager import RandomSource, round_half_up
from ifsevo.utils.validation import ValidationError

MIN_SCALE = 0.1
MAX_SCALE = 0.85
MAX_SHEAR = 0.3
MIN_PROBABILITY = 0.1
# Floor for blend fade-out so a faded transform keeps a positive weight
MIN_FADED_PROBABILITY = 1e-6


class CrossoverType(str, Enum):
    UNIFORM = "uniform"
    BLEND = "blend"
    PARAMETER = "parameter"
    SINGLE_POINT = "single-point"

    @classmethod
    def parse(cls, value: "CrossoverType | str") -> "CrossoverType":
        try:
            return cls(value)
        except ValueError as exc:
            raise ValidationError("unknown_crossover_type", f"Unknown crossover type: {value!r}", value=value) from exc


class MutationType(str, Enum):
    RANDOM = "random"
    STRUCTURED = "structured"
    ROTATION = "rotation"
    SCALE = "scale"
    TRANSLATION = "translation"
    COLOR = "color"

    @classmethod
    def parse(cls, value: "MutationType | str") -> "MutationType":
        try:
            return cls(value)
        except ValueError as exc:
            raise ValidationError("unknown_mutation_type", f"Unknown mutation type: {value!r}", value=value) from exc


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _clamp_color(value: float) -> float:
    return _clamp(value, 0.0, 255.0)


# ---------------------------------------------------------------------------
# Crossover
# ---------------------------------------------------------------------------

def uniform_crossover(a: Sequence[Transform], b: Sequence[Transform], rng: RandomSource) -> list[Transform]:
    """Pick whole transforms per index with a fair coin.

    Where only one parent has a transform at an index, that one is taken.
    """
    result: list[Transform] = []
    for i in range(max(len(a), len(b))):
        use_a = rng.random() < 0.5
        if use_a and i < len(a):
            source = a[i]
        elif not use_a and i < len(b):
            source = b[i]
        else:
            source = a[i] if i < len(a) else b[i]
        result.append(replace(source))
    return result


def blend_crossover(
    a: Sequence[Transform],
    b: Sequence[Transform],
    rng: RandomSource,
    alpha: float | None = None,
) -> list[Transform]:
    """Interpolate shared indices as ``A * alpha + B * (1 - alpha)``.

    Transforms present in only one parent are copied with their probability
    faded by ``alpha`` (from A) or ``1 - alpha`` (from B).

    Args:
        a: Parent A transforms
        b: Parent B transforms
        rng: Random source, consumed only when ``alpha`` is omitted
        alpha: Blend factor in [0, 1]; uniform random when omitted
    """
    if alpha is None:
        alpha = rng.random()
    if not 0.0 <= alpha <= 1.0:
        raise ValidationError("invalid_blend_factor", "Blend factor must be in [0, 1]", alpha=alpha)
    beta = 1 - alpha

    result: list[Transform] = []
    for i in range(max(len(a), len(b))):
        t_a = a[i] if i < len(a) else None
        t_b = b[i] if i < len(b) else None

        if t_a is not None and t_b is not None:
            result.append(Transform(
                m=tuple(va * alpha + vb * beta for va, vb in zip(t_a.m, t_b.m)),
                tx=t_a.tx * alpha + t_b.tx * beta,
                ty=t_a.ty * alpha + t_b.ty * beta,
                tz=t_a.tz * alpha + t_b.tz * beta,
                probability=t_a.probability * alpha + t_b.probability * beta,
                color=tuple(round_half_up(ca * alpha + cb * beta) for ca, cb in zip(t_a.color, t_b.color)),
            ))
        else:
            source = t_a if t_a is not None else t_b
            fade = alpha if t_a is not None else beta
            result.append(replace(source, probability=max(MIN_FADED_PROBABILITY, source.probability * fade)))
    return result


def parameter_crossover(a: Sequence[Transform], b: Sequence[Transform], rng: RandomSource) -> list[Transform]:
    """Flip a coin per numeric field at each shared index."""
    def pick(va: float, vb: float) -> float:
        return va if rng.random() < 0.5 else vb

    result: list[Transform] = []
    for i in range(max(len(a), len(b))):
        t_a = a[i] if i < len(a) else None
        t_b = b[i] if i < len(b) else None

        if t_a is not None and t_b is not None:
            m = tuple(pick(va, vb) for va, vb in zip(t_a.m, t_b.m))
            tx = pick(t_a.tx, t_b.tx)
            ty = pick(t_a.ty, t_b.ty)
            tz = pick(t_a.tz, t_b.tz)
            probability = pick(t_a.probability, t_b.probability)
            color = tuple(pick(ca, cb) for ca, cb in zip(t_a.color, t_b.color))
            result.append(Transform(m=m, tx=tx, ty=ty, tz=tz, probability=probability, color=color))
        else:
            result.append(replace(t_a if t_a is not None else t_b))
    return result


def single_point_crossover(a: Sequence[Transform], b: Sequence[Transform], rng: RandomSource) -> list[Transform]:
    """``a[:k] + b[k:]`` for a cut point ``k`` in ``[0, min(len a, len b))``.

    The child takes B's length.
    """
    cross_point = int(math.floor(rng.random() * min(len(a), len(b))))
    return [replace(t) for t in a[:cross_point]] + [replace(t) for t in b[cross_point:]]


def crossover(
    a: Sequence[Transform],
    b: Sequence[Transform],
    crossover_type: CrossoverType | str,
    rng: RandomSource,
    alpha: float | None = None,
) -> list[Transform]:
    """Dispatch to a crossover strategy and repair the result to 2-8 transforms."""
    crossover_type = CrossoverType.parse(crossover_type)

    if crossover_type is CrossoverType.UNIFORM:
        result = uniform_crossover(a, b, rng)
    elif crossover_type is CrossoverType.BLEND:
        result = blend_crossover(a, b, rng, alpha)
    elif crossover_type is CrossoverType.PARAMETER:
        result = parameter_crossover(a, b, rng)
    else:
        result = single_point_crossover(a, b, rng)

    return clamp_transform_count(result, rng)


# ---------------------------------------------------------------------------
# Mutation
# ---------------------------------------------------------------------------

def _mutate_placement(t: Transform, m: Sequence[float], strength: float, rng: RandomSource) -> Transform:
    """Gated translation / probability / color perturbation around a new matrix."""
    span = strength * 2
    tx = t.tx + (rng.uniform(-span, span) if rng.random() < 0.4 else 0)
    ty = t.ty + (rng.uniform(-span, span) if rng.random() < 0.4 else 0)
    tz = t.tz + (rng.uniform(-span, span) if rng.random() < 0.4 else 0)
    probability = max(MIN_PROBABILITY, t.probability + (rng.uniform(-0.2, 0.2) if rng.random() < 0.3 else 0))
    if rng.random() < 0.2:
        color = tuple(_clamp_color(c + rng.uniform(-40, 40)) for c in t.color)
    else:
        color = t.color
    return Transform(m=m, tx=tx, ty=ty, tz=tz, probability=probability, color=color)


def random_mutation(t: Transform, strength: float, rng: RandomSource) -> Transform:
    """Perturb each matrix cell with probability 0.5, then the placement fields."""
    m = list(t.m)
    for i in range(9):
        if rng.random() < 0.5:
            m[i] += rng.uniform(-strength, strength)
    m = enforce_contractivity(tuple(m), DEFAULT_MAX_CONTRACTIVITY)
    return _mutate_placement(t, m, strength, rng)


def structured_mutation(t: Transform, strength: float, rng: RandomSource) -> Transform:
    """Mutate decomposed scale, rotation and shear, then the placement fields."""
    params = decompose_matrix(t.m)

    if rng.random() < 0.4:
        params = replace(
            params,
            scale_x=_clamp(params.scale_x + rng.uniform(-strength, strength), MIN_SCALE, MAX_SCALE),
            scale_y=_clamp(params.scale_y + rng.uniform(-strength, strength), MIN_SCALE, MAX_SCALE),
            scale_z=_clamp(params.scale_z + rng.uniform(-strength, strength), MIN_SCALE, MAX_SCALE),
        )

    if rng.random() < 0.5:
        span = strength * math.pi
        params = replace(
            params,
            rotation_x=params.rotation_x + rng.uniform(-span, span),
            rotation_y=params.rotation_y + rng.uniform(-span, span),
            rotation_z=params.rotation_z + rng.uniform(-span, span),
        )

    if rng.random() < 0.3:
        span = strength * 0.5
        params = replace(
            params,
            shear_xy=_clamp(params.shear_xy + rng.uniform(-span, span), -MAX_SHEAR, MAX_SHEAR),
            shear_xz=_clamp(params.shear_xz + rng.uniform(-span, span), -MAX_SHEAR, MAX_SHEAR),
            shear_yz=_clamp(params.shear_yz + rng.uniform(-span, span), -MAX_SHEAR, MAX_SHEAR),
        )

    m = enforce_contractivity(reconstruct_matrix(params), DEFAULT_MAX_CONTRACTIVITY)
    return _mutate_placement(t, m, strength, rng)


def rotation_mutation(t: Transform, strength: float, rng: RandomSource) -> Transform:
    """Rotate all three Euler angles by up to ``strength * pi``; nothing else changes."""
    params = decompose_matrix(t.m)
    span = strength * math.pi
    params = replace(
        params,
        rotation_x=params.rotation_x + rng.uniform(-span, span),
        rotation_y=params.rotation_y + rng.uniform(-span, span),
        rotation_z=params.rotation_z + rng.uniform(-span, span),
    )
    m = enforce_contractivity(reconstruct_matrix(params), DEFAULT_MAX_CONTRACTIVITY)
    return replace(t, m=m)


def scale_mutation(t: Transform, strength: float, rng: RandomSource) -> Transform:
    """Uniform (factor ``1 +/- strength``) or per-axis (``+/- strength``) rescale."""
    params = decompose_matrix(t.m)

    if rng.random() < 0.5:
        factor = 1 + rng.uniform(-strength, strength)
        params = replace(
            params,
            scale_x=_clamp(params.scale_x * factor, MIN_SCALE, MAX_SCALE),
            scale_y=_clamp(params.scale_y * factor, MIN_SCALE, MAX_SCALE),
            scale_z=_clamp(params.scale_z * factor, MIN_SCALE, MAX_SCALE),
        )
    else:
        params = replace(
            params,
            scale_x=_clamp(params.scale_x + rng.uniform(-strength, strength), MIN_SCALE, MAX_SCALE),
            scale_y=_clamp(params.scale_y + rng.uniform(-strength, strength), MIN_SCALE, MAX_SCALE),
            scale_z=_clamp(params.scale_z + rng.uniform(-strength, strength), MIN_SCALE, MAX_SCALE),
        )

    m = enforce_contractivity(reconstruct_matrix(params), DEFAULT_MAX_CONTRACTIVITY)
    return replace(t, m=m)


def translation_mutation(t: Transform, strength: float, rng: RandomSource) -> Transform:
    return replace(
        t,
        tx=t.tx + rng.uniform(-strength, strength),
        ty=t.ty + rng.uniform(-strength, strength),
        tz=t.tz + rng.uniform(-strength, strength),
    )


def color_mutation(t: Transform, strength: float, rng: RandomSource) -> Transform:
    """Shift each channel by up to ``strength * 400``, clamped to [0, 255]."""
    span = strength * 400
    return replace(t, color=tuple(_clamp_color(c + rng.uniform(-span, span)) for c in t.color))


def mutate_transform(
    t: Transform,
    mutation_type: MutationType | str,
    strength: float,
    rng: RandomSource,
) -> Transform:
    """Dispatch to a mutation strategy.

    Args:
        t: Transform to mutate (left unchanged)
        mutation_type: Strategy tag
        strength: Mutation strength in (0, 1]
        rng: Random source
    """
    mutation_type = MutationType.parse(mutation_type)
    if not 0.0 < strength <= 1.0:
        raise ValidationError("invalid_mutation_strength", "Mutation strength must be in (0, 1]", strength=strength)

    if mutation_type is MutationType.RANDOM:
        return random_mutation(t, strength, rng)
    if mutation_type is MutationType.STRUCTURED:
        return structured_mutation(t, strength, rng)
    if mutation_type is MutationType.ROTATION:
        return rotation_mutation(t, strength, rng)
    if mutation_type is MutationType.SCALE:
        return scale_mutation(t, strength, rng)
    if mutation_type is MutationType.TRANSLATION:
        return translation_mutation(t, strength, rng)
    return color_mutation(t, strength, rng)


def mutate_transforms(
    transforms: Sequence[Transform],
    mutation_type: MutationType | str,
    strength: float,
    rng: RandomSource,
) -> list[Transform]:
    return [mutate_transform(t, mutation_type, strength, rng) for t in transforms]


__all__ = [
    "CrossoverType",
    "MutationType",
    "uniform_crossover",
    "blend_crossover",
    "parameter_crossover",
    "single_point_crossover",
    "crossover",
    "random_mutation",
    "structured_mutation",
    "rotation_mutation",
    "scale_mutation",
    "translation_mutation",
    "color_mutation",
    "mutate_transform",
    "mutate_transforms",
]
