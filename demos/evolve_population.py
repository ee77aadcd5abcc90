"""
Fractal Evolution Demo (ifsevo)

Summary:
- Builds a seeded initial population from the seed library plus random genomes
- Simulates a user: renders every genome with a short chaos-game run, likes
  the most colorful well-spread attractors and dislikes broken ones
- Evolves for N generations and logs per-generation statistics to CSV

Use --quick for a short sanity run.
"""

from __future__ import annotations

import argparse
import csv
import logging
from typing import List

import numpy as np

from ifsevo.core.genome import Genome, Rating
from ifsevo.core.library import create_initial_population
from ifsevo.evolution.config import get_preset
from ifsevo.evolution.engine import evolve_generation, generation_stats
from ifsevo.evolution.fitness import genome_stats
from ifsevo.generation.chaos_game import generate_points
from ifsevo.utils.id_provider import CounterIDProvider
from ifsevo.utils.rng_manager import RNGManager


def spread(genome: Genome, iterations: int, rng) -> float:
    """Mean distance from the attractor centroid; 0 for an empty attractor."""
    cloud = generate_points(genome, iterations=iterations, rng=rng)
    if cloud.empty:
        return 0.0
    centered = cloud.positions - cloud.positions.mean(axis=0)
    return float(np.linalg.norm(centered, axis=1).mean())


def simulate_ratings(population: List[Genome], iterations: int, likes: int, rng_manager: RNGManager) -> List[Genome]:
    render_rng = rng_manager.get_context_rng('render')
    scores = []
    for g in population:
        stats = genome_stats(g)
        score = spread(g, iterations, render_rng) * (0.5 + stats.color_diversity)
        scores.append(score if stats.is_valid else 0.0)

    order = sorted(range(len(population)), key=lambda i: scores[i], reverse=True)
    liked = set(order[:likes])
    disliked = {i for i, s in enumerate(scores) if s == 0.0}

    rated = []
    for i, g in enumerate(population):
        if i in disliked:
            rated.append(g.with_rating(Rating.DOWN))
        elif i in liked:
            rated.append(g.with_rating(Rating.UP))
        else:
            rated.append(g)
    return rated


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument('--pop', type=int, default=16)
    ap.add_argument('--gens', type=int, default=10)
    ap.add_argument('--seed', type=int, default=42)
    ap.add_argument('--preset', default='balanced', help='conservative, exploratory, balanced, colorFocused or structural')
    ap.add_argument('--iterations', type=int, default=5000, help='chaos-game iterations per simulated render')
    ap.add_argument('--likes', type=int, default=3, help='genomes liked per generation')
    ap.add_argument('--csv', default='demos/evolution_log.csv')
    ap.add_argument('--quick', action='store_true', help='use a tiny config for sanity-run')
    args = ap.parse_args()

    if args.quick:
        args.pop = 8
        args.gens = 2
        args.iterations = 500

    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(message)s')

    rng = RNGManager(seed=args.seed)
    ids = CounterIDProvider()
    config = get_preset(args.preset).replace(population_size=args.pop)

    population = create_initial_population(args.pop, seed=args.seed, ids=ids)

    rows: List[dict] = []
    for gen in range(args.gens):
        population = simulate_ratings(population, args.iterations, args.likes, rng)
        stats = generation_stats(population)
        print(
            f"gen={gen} liked={stats.liked} disliked={stats.disliked} "
            f"best_fitness={stats.best_fitness:.3f} mean_transforms={stats.mean_transform_count:.2f} "
            f"valid={stats.valid_fraction:.2f}"
        )
        rows.append({
            'generation': stats.generation,
            'size': stats.size,
            'liked': stats.liked,
            'disliked': stats.disliked,
            'mean_fitness': round(stats.mean_fitness, 6),
            'best_fitness': round(stats.best_fitness, 6),
            'mean_transform_count': round(stats.mean_transform_count, 6),
            'mean_contractivity': round(stats.mean_contractivity, 6),
            'valid_fraction': round(stats.valid_fraction, 6),
        })
        population = evolve_generation(population, config, rng.get_context_rng('breeding'), ids)

    with open(args.csv, 'w', newline='') as f:
        w = csv.DictWriter(f, fieldnames=list(rows[0]) if rows else ['generation'])
        w.writeheader()
        w.writerows(rows)
    print('csv_log:', args.csv)


if __name__ == '__main__':
    main()
