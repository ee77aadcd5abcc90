"""Silent structural repairs applied to bred transform lists.

Operators can produce lists outside the 2-8 transform bound (single-point
crossover, structural mutation) or matrices past the contractivity bound.
These helpers bring them back without raising.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ifsevo.core.algebra import DEFAULT_MAX_CONTRACTIVITY, enforce_transform_contractivity
from ifsevo.core.factory import random_transform
from ifsevo.core.genome import MAX_TRANSFORMS, MIN_TRANSFORMS
from ifsevo.core.transform import Transform
from ifsevo.utils.rng_manager import RandomSource


def pad_transforms(transforms: Sequence[Transform], rng: RandomSource, min_transforms: int = MIN_TRANSFORMS) -> list[Transform]:
    """Append fresh random transforms until ``min_transforms`` is reached."""
    result = list(transforms)
    added = 0
    while len(result) < min_transforms:
        result.append(random_transform(rng))
        added += 1
    if added:
        logging.debug(f"Padded transform list with {added} random transforms")
    return result


def clamp_transform_count(transforms: Sequence[Transform], rng: RandomSource) -> list[Transform]:
    """Pad short lists and truncate long ones to the 2-8 bound."""
    result = pad_transforms(transforms, rng)
    if len(result) > MAX_TRANSFORMS:
        logging.debug(f"Truncated transform list from {len(result)} to {MAX_TRANSFORMS}")
        result = result[:MAX_TRANSFORMS]
    return result


def enforce_transforms_contractivity(
    transforms: Sequence[Transform],
    max_contractivity: float = DEFAULT_MAX_CONTRACTIVITY,
) -> list[Transform]:
    return [enforce_transform_contractivity(t, max_contractivity) for t in transforms]


__all__ = [
    'pad_transforms',
    'clamp_transform_count',
    'enforce_transforms_contractivity',
]
