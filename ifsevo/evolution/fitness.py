"""Fitness scoring and per-genome statistics."""

from __future__ import annotations

from dataclasses import dataclass

from ifsevo.core.algebra import decompose_matrix, is_contractive, spectral_radius
from ifsevo.core.genome import Genome, Rating

RATING_FACTORS = {Rating.UP: 3.0, Rating.DOWN: 0.1}
CONTRACTIVITY_BONUS = 1.2
CONTRACTIVITY_BONUS_THRESHOLD = 0.7


def calculate_fitness(genome: Genome) -> float:
    """``base * contractivity bonus * size factor * rating factor``.

    Deterministic: depends only on the genome's transforms and rating.
    """
    fitness = 1.0

    avg_contractivity = sum(spectral_radius(t.m) for t in genome.transforms) / len(genome.transforms)
    if avg_contractivity < CONTRACTIVITY_BONUS_THRESHOLD:
        fitness *= CONTRACTIVITY_BONUS

    fitness *= 1 + (len(genome.transforms) - 3) * 0.1

    # rating factor last: liked and disliked scores are exact multiples of the unrated score
    return fitness * RATING_FACTORS.get(genome.rating, 1.0)


@dataclass(frozen=True)
class GenomeStats:
    transform_count: int
    avg_contractivity: float
    avg_scale: float
    color_diversity: float
    is_valid: bool


def genome_stats(genome: Genome) -> GenomeStats:
    """Summary figures for display next to a genome."""
    transforms = genome.transforms
    contractivities = [spectral_radius(t.m) for t in transforms]

    scales = []
    for t in transforms:
        params = decompose_matrix(t.m)
        scales.append((params.scale_x + params.scale_y + params.scale_z) / 3)

    # mean pairwise L1 color distance, normalized by the max distance (3 * 255)
    colors = [t.color for t in transforms]
    diff = 0.0
    for i in range(len(colors)):
        for j in range(i + 1, len(colors)):
            diff += sum(abs(a - b) for a, b in zip(colors[i], colors[j]))
    pairs = len(colors) * (len(colors) - 1) / 2
    color_diversity = diff / pairs / 765 if pairs else 0.0

    return GenomeStats(
        transform_count=len(transforms),
        avg_contractivity=sum(contractivities) / len(contractivities),
        avg_scale=sum(scales) / len(scales),
        color_diversity=color_diversity,
        is_valid=all(is_contractive(t) for t in transforms),
    )


__all__ = ["calculate_fitness", "GenomeStats", "genome_stats"]
