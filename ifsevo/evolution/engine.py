"""Generation scheduler: genome-level breeding and one-generation advance."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ifsevo.core.algebra import spectral_radius
from ifsevo.core.factory import random_genome, random_transform
from ifsevo.core.genome import MAX_TRANSFORMS, MIN_TRANSFORMS, Genome, Rating, child_generation
from ifsevo.core.transform import Transform
from ifsevo.evolution.config import DEFAULT_CONFIG, EvolutionConfig
from ifsevo.evolution.fitness import calculate_fitness, genome_stats
from ifsevo.evolution.operators import CrossoverType, MutationType, crossover, mutate_transforms
from ifsevo.evolution.selection import select_parent
from ifsevo.repair.repair import enforce_transforms_contractivity
from ifsevo.utils.id_provider import IDProvider, UUIDProvider
from ifsevo.utils.rng_manager import DefaultRandomSource, RandomSource
from ifsevo.utils.validation import ValidationError

ELITE_STRENGTH_FACTOR = 0.3


def _structural_mutation(transforms: list[Transform], rate: float, rng: RandomSource) -> list[Transform]:
    """Independently maybe drop one transform, then maybe append a fresh one."""
    if rng.random() < rate and len(transforms) > MIN_TRANSFORMS:
        del transforms[rng.randrange(len(transforms))]
    if rng.random() < rate and len(transforms) < MAX_TRANSFORMS:
        transforms.append(random_transform(rng))
    return transforms


def _mutated_transforms(
    transforms: Sequence[Transform],
    mutation_type: MutationType | str,
    strength: float,
    rng: RandomSource,
    structural_rate: float,
) -> list[Transform]:
    result = mutate_transforms(transforms, mutation_type, strength, rng)
    if structural_rate > 0:
        result = _structural_mutation(result, structural_rate, rng)
    return result


def mutate_genome(
    genome: Genome,
    rng: RandomSource,
    mutation_type: MutationType | str = MutationType.STRUCTURED,
    strength: float = DEFAULT_CONFIG.mutation_strength,
    structural_rate: float = 0.0,
    ids: IDProvider | None = None,
) -> Genome:
    """Mutate every transform of ``genome`` and wrap the result as its child.

    Args:
        genome: Parent genome (left unchanged)
        rng: Random source
        mutation_type: Per-transform mutation strategy
        strength: Mutation strength in (0, 1]
        structural_rate: Chance of each structural remove/add; 0 disables them
        ids: Id provider for the child

    Returns:
        New unrated genome with ``parent_ids == (genome.genome_id,)`` and
        ``generation == genome.generation + 1``.
    """
    ids = ids or UUIDProvider()
    transforms = _mutated_transforms(genome.transforms, mutation_type, strength, rng, structural_rate)
    return Genome(
        genome_id=ids.next_id(),
        transforms=tuple(transforms),
        generation=child_generation([genome]),
        parent_ids=(genome.genome_id,),
    )


def crossover_genomes(
    a: Genome,
    b: Genome,
    rng: RandomSource,
    crossover_type: CrossoverType | str = CrossoverType.BLEND,
    ids: IDProvider | None = None,
    enforce_contractivity: bool = True,
) -> Genome:
    """Cross two genomes into an unrated child one generation past the older parent."""
    ids = ids or UUIDProvider()
    transforms = crossover(a.transforms, b.transforms, crossover_type, rng)
    if enforce_contractivity:
        transforms = enforce_transforms_contractivity(transforms)
    return Genome(
        genome_id=ids.next_id(),
        transforms=tuple(transforms),
        generation=child_generation([a, b]),
        parent_ids=(a.genome_id, b.genome_id),
    )


def evolve_generation(
    population: Sequence[Genome],
    config: EvolutionConfig = DEFAULT_CONFIG,
    rng: RandomSource | None = None,
    ids: IDProvider | None = None,
) -> list[Genome]:
    """Advance ``population`` by one generation.

    Order of construction: lightly mutated up-rated elites, fresh random
    genomes, then bred children until ``config.population_size`` is reached.
    Every returned genome is tagged with ``max(generation) + 1``.

    Args:
        population: Current (possibly rated) population; must be non-empty
        config: Evolution parameters
        rng: Random source for all breeding draws; non-deterministic when omitted
        ids: Id provider for new genomes

    Returns:
        New population of exactly ``config.population_size`` unrated genomes.
    """
    if not population:
        raise ValidationError("empty_population", "Cannot evolve an empty population")
    rng = rng or DefaultRandomSource()
    ids = ids or UUIDProvider()

    next_gen = max(g.generation for g in population) + 1
    structural_rate = config.structural_mutation_rate if config.allow_structural_mutation else 0.0
    ranked = sorted(population, key=calculate_fitness, reverse=True)

    new_population: list[Genome] = []

    elites = [g for g in ranked[:config.elite_count] if g.rating == Rating.UP]
    if config.elite_count and not elites:
        logging.debug(f"Generation {next_gen}: no up-rated genomes among the top {config.elite_count}")
    for elite in elites:
        transforms = _mutated_transforms(
            elite.transforms,
            config.mutation_type,
            config.mutation_strength * ELITE_STRENGTH_FACTOR,
            rng,
            0.0,
        )
        new_population.append(Genome(
            genome_id=ids.next_id(),
            transforms=tuple(transforms),
            generation=next_gen,
            parent_ids=(elite.genome_id,),
        ))

    for _ in range(config.random_injection):
        new_population.append(random_genome(rng, ids, generation=next_gen))

    bred = 0
    while len(new_population) < config.population_size:
        parent1 = select_parent(ranked, rng, config.tournament_size)

        if rng.random() < config.crossover_rate:
            parent2 = select_parent(ranked, rng, config.tournament_size)
            child = crossover_genomes(
                parent1,
                parent2,
                rng,
                config.crossover_type,
                ids,
                config.enforce_contractivity,
            )
            transforms = child.transforms
            if rng.random() < config.mutation_rate:
                transforms = tuple(_mutated_transforms(
                    transforms,
                    config.mutation_type,
                    config.mutation_strength,
                    rng,
                    structural_rate,
                ))
            # mutation of a crossover child keeps both crossover parents
            child = Genome(
                genome_id=child.genome_id,
                transforms=transforms,
                generation=next_gen,
                parent_ids=child.parent_ids,
            )
        else:
            child = mutate_genome(
                parent1,
                rng,
                config.mutation_type,
                config.mutation_strength,
                structural_rate,
                ids,
            ).with_generation(next_gen)

        new_population.append(child)
        bred += 1

    if len(new_population) > config.population_size:
        logging.warning(
            f"Generation {next_gen}: elites and random injection exceed population size "
            f"{config.population_size}; truncating"
        )
        new_population = new_population[:config.population_size]

    logging.info(
        f"Generation {next_gen}: elites={len(elites)} random={config.random_injection} bred={bred}"
    )
    return new_population


@dataclass(frozen=True)
class GenerationStats:
    generation: int
    size: int
    liked: int
    disliked: int
    mean_fitness: float
    best_fitness: float
    mean_transform_count: float
    mean_contractivity: float
    valid_fraction: float


def generation_stats(population: Sequence[Genome]) -> GenerationStats:
    """Aggregate figures over a population, for progress displays and logs."""
    if not population:
        raise ValidationError("empty_population", "Cannot summarize an empty population")

    size = len(population)
    fitnesses = [calculate_fitness(g) for g in population]
    contractivities = [
        sum(spectral_radius(t.m) for t in g.transforms) / len(g.transforms) for g in population
    ]
    return GenerationStats(
        generation=max(g.generation for g in population),
        size=size,
        liked=sum(1 for g in population if g.rating == Rating.UP),
        disliked=sum(1 for g in population if g.rating == Rating.DOWN),
        mean_fitness=sum(fitnesses) / size,
        best_fitness=max(fitnesses),
        mean_transform_count=sum(len(g.transforms) for g in population) / size,
        mean_contractivity=sum(contractivities) / size,
        valid_fraction=sum(1 for g in population if genome_stats(g).is_valid) / size,
    )


__all__ = [
    "mutate_genome",
    "crossover_genomes",
    "evolve_generation",
    "GenerationStats",
    "generation_stats",
    "ELITE_STRENGTH_FACTOR",
]
