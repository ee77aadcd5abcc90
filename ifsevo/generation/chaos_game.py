"""Chaos-game sampling of an IFS attractor.

Implements:
- select_transform: weighted draw over transform probabilities
- iterate_points: raw ``(x, y, z, color)`` samples after the transient skip
- normalize_points: bounding-box fit into the cube [-1, 1]^3
- generate_points: full run returning a normalized :class:`PointCloud`

Divergent iterations (non-finite coordinates) are recovered locally by
reseeding the running point. A run that emits nothing yields an empty cloud,
which callers treat as "genome failed to render".
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence

import numpy as np

from ifsevo.core.genome import Genome
from ifsevo.core.transform import Color, Transform
from ifsevo.utils.rng_manager import DefaultRandomSource, RandomSource
from ifsevo.utils.validation import ValidationError

DEFAULT_ITERATIONS = 50000
DEFAULT_SKIP_ITERATIONS = 20


@dataclass
class ChaosGameMetrics:
    """Counters collected during one chaos-game run."""

    iterations: int = 0
    emitted: int = 0
    skipped: int = 0
    divergences: int = 0


@dataclass(frozen=True)
class PointCloud:
    """Normalized attractor sample.

    Attributes:
        positions: ``(N, 3)`` float32 array inside [-1, 1]^3
        colors: ``(N, 3)`` float32 array of RGB in [0, 1]
        metrics: Counters from the run that produced the cloud
    """

    positions: np.ndarray
    colors: np.ndarray
    metrics: ChaosGameMetrics = field(default_factory=ChaosGameMetrics)

    @property
    def count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def empty(self) -> bool:
        return self.count == 0

    @classmethod
    def empty_cloud(cls, metrics: ChaosGameMetrics | None = None) -> "PointCloud":
        return cls(
            positions=np.zeros((0, 3), dtype=np.float32),
            colors=np.zeros((0, 3), dtype=np.float32),
            metrics=metrics or ChaosGameMetrics(),
        )


def _transforms_of(source: Genome | Sequence[Transform]) -> Sequence[Transform]:
    return source.transforms if isinstance(source, Genome) else tuple(source)


def select_transform(transforms: Sequence[Transform], rng: RandomSource) -> int:
    """Pick an index with probability proportional to ``Transform.probability``.

    Falls back to the last index when rounding leaves ``r`` positive.
    """
    total = sum(t.probability for t in transforms)
    r = rng.random() * total
    for i, t in enumerate(transforms):
        r -= t.probability
        if r <= 0:
            return i
    return len(transforms) - 1


def _random_point(rng: RandomSource) -> tuple[float, float, float]:
    return (rng.random() * 2 - 1, rng.random() * 2 - 1, rng.random() * 2 - 1)


def iterate_points(
    source: Genome | Sequence[Transform],
    iterations: int = DEFAULT_ITERATIONS,
    skip_iterations: int = DEFAULT_SKIP_ITERATIONS,
    rng: RandomSource | None = None,
    metrics: ChaosGameMetrics | None = None,
) -> Iterator[tuple[float, float, float, Color]]:
    """Yield raw attractor samples.

    Args:
        source: Genome, or a bare transform sequence
        iterations: Number of map applications
        skip_iterations: Transient iterations discarded before emitting
        rng: Random source; a non-deterministic one is used when omitted
        metrics: Optional counters updated in place

    Yields:
        ``(x, y, z, color)`` tuples tagged with the color of the map just applied.
    """
    if iterations < 0:
        raise ValidationError("invalid_iterations", "Iteration count must be >= 0", iterations=iterations)
    if skip_iterations < 0:
        raise ValidationError("invalid_iterations", "Skip count must be >= 0", skip_iterations=skip_iterations)

    transforms = _transforms_of(source)
    if not transforms:
        return
    rng = rng or DefaultRandomSource()
    metrics = metrics if metrics is not None else ChaosGameMetrics()

    x, y, z = _random_point(rng)
    for i in range(iterations):
        metrics.iterations += 1
        t = transforms[select_transform(transforms, rng)]
        x, y, z = t.apply(x, y, z)

        if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(z)):
            metrics.divergences += 1
            x, y, z = _random_point(rng)
            continue

        if i >= skip_iterations:
            metrics.emitted += 1
            yield x, y, z, t.color
        else:
            metrics.skipped += 1


def normalize_points(positions: np.ndarray) -> np.ndarray:
    """Recenter and uniformly rescale points into [-1, 1]^3.

    ``scale = 2 / max(range_x, range_y, range_z)``; a zero range on an axis
    is replaced by 1.
    """
    positions = np.asarray(positions, dtype=np.float64)
    if positions.size == 0:
        return positions.reshape(0, 3)

    mins = positions.min(axis=0)
    maxs = positions.max(axis=0)
    ranges = maxs - mins
    ranges[ranges == 0] = 1.0
    scale = 2.0 / ranges.max()
    center = (mins + maxs) / 2.0
    return (positions - center) * scale


def generate_points(
    source: Genome | Sequence[Transform],
    iterations: int = DEFAULT_ITERATIONS,
    skip_iterations: int = DEFAULT_SKIP_ITERATIONS,
    rng: RandomSource | None = None,
    normalize: bool = True,
) -> PointCloud:
    """Run the chaos game and return a (normalized) point cloud."""
    metrics = ChaosGameMetrics()
    raw: list[tuple[float, float, float]] = []
    colors: list[Any] = []
    for x, y, z, color in iterate_points(source, iterations, skip_iterations, rng, metrics):
        raw.append((x, y, z))
        colors.append(color)

    if metrics.divergences:
        logging.debug(f"Chaos game reseeded {metrics.divergences} divergent points")
    if not raw:
        logging.warning(f"Chaos game produced no points after {metrics.iterations} iterations")
        return PointCloud.empty_cloud(metrics)

    positions = np.asarray(raw, dtype=np.float64)
    if normalize:
        positions = normalize_points(positions)
    return PointCloud(
        positions=positions.astype(np.float32),
        colors=(np.asarray(colors, dtype=np.float64) / 255.0).astype(np.float32),
        metrics=metrics,
    )


__all__ = [
    'ChaosGameMetrics',
    'PointCloud',
    'select_transform',
    'iterate_points',
    'normalize_points',
    'generate_points',
    'DEFAULT_ITERATIONS',
    'DEFAULT_SKIP_ITERATIONS',
]
