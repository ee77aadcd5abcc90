"""Parent selection strategies."""

from __future__ import annotations

from typing import Callable, Sequence

from ifsevo.core.genome import Genome
from ifsevo.evolution.fitness import calculate_fitness
from ifsevo.utils.rng_manager import RandomSource
from ifsevo.utils.validation import ValidationError

FitnessFn = Callable[[Genome], float]


def _require_population(population: Sequence[Genome]) -> None:
    if not population:
        raise ValidationError("empty_population", "Cannot select from an empty population")


def roulette_select(
    population: Sequence[Genome],
    rng: RandomSource,
    fitness_fn: FitnessFn = calculate_fitness,
) -> Genome:
    """Fitness-proportionate selection; falls back to the last genome."""
    _require_population(population)
    weights = [fitness_fn(g) for g in population]
    r = rng.random() * sum(weights)
    for genome, w in zip(population, weights):
        r -= w
        if r <= 0:
            return genome
    return population[-1]


def tournament_select(
    population: Sequence[Genome],
    rng: RandomSource,
    tournament_size: int,
    fitness_fn: FitnessFn = calculate_fitness,
) -> Genome:
    """Best of ``tournament_size`` uniform draws with replacement.

    Ties keep the earliest drawn contestant.
    """
    _require_population(population)
    if tournament_size < 1:
        raise ValidationError("invalid_tournament_size", "Tournament size must be >= 1", tournament_size=tournament_size)

    best: Genome | None = None
    best_fitness = float("-inf")
    for _ in range(tournament_size):
        contestant = population[rng.randrange(len(population))]
        f = fitness_fn(contestant)
        if best is None or f > best_fitness:
            best, best_fitness = contestant, f
    assert best is not None
    return best


def select_parent(
    population: Sequence[Genome],
    rng: RandomSource,
    tournament_size: int = 1,
    fitness_fn: FitnessFn = calculate_fitness,
) -> Genome:
    """Tournament selection when ``tournament_size > 1``, else roulette."""
    if tournament_size > 1:
        return tournament_select(population, rng, tournament_size, fitness_fn)
    return roulette_select(population, rng, fitness_fn)


__all__ = ["roulette_select", "tournament_select", "select_parent"]
