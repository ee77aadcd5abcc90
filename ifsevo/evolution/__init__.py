"""Evolutionary engine for ifsevo."""

from .fitness import GenomeStats, calculate_fitness, genome_stats
from .selection import roulette_select, select_parent, tournament_select
from .operators import (
    CrossoverType,
    MutationType,
    blend_crossover,
    crossover,
    mutate_transform,
    parameter_crossover,
    single_point_crossover,
    uniform_crossover,
)
from .config import DEFAULT_CONFIG, PRESETS, EvolutionConfig, get_preset
from .engine import (
    GenerationStats,
    crossover_genomes,
    evolve_generation,
    generation_stats,
    mutate_genome,
)

__all__ = [
    "GenomeStats",
    "calculate_fitness",
    "genome_stats",
    "roulette_select",
    "select_parent",
    "tournament_select",
    "CrossoverType",
    "MutationType",
    "blend_crossover",
    "crossover",
    "mutate_transform",
    "parameter_crossover",
    "single_point_crossover",
    "uniform_crossover",
    "DEFAULT_CONFIG",
    "PRESETS",
    "EvolutionConfig",
    "get_preset",
    "GenerationStats",
    "crossover_genomes",
    "evolve_generation",
    "generation_stats",
    "mutate_genome",
]
