"""
Evolution Loop Tutorial

Goals:
- Build a reproducible initial population from a seed
- Rate genomes the way a user would (like / dislike)
- Advance generations with a preset configuration
"""

from ifsevo.core.genome import toggle_rating
from ifsevo.core.library import create_initial_population
from ifsevo.evolution.config import get_preset
from ifsevo.evolution.engine import evolve_generation, generation_stats
from ifsevo.utils.id_provider import CounterIDProvider
from ifsevo.utils.rng_manager import Mulberry32


def main():
    ids = CounterIDProvider()
    population = create_initial_population(16, seed=42, ids=ids)
    config = get_preset('balanced')
    rng = Mulberry32(7)

    for gen in range(3):
        # Like the first two genomes, dislike the last one
        population[0] = toggle_rating(population[0], 'up')
        population[1] = toggle_rating(population[1], 'up')
        population[-1] = toggle_rating(population[-1], 'down')

        stats = generation_stats(population)
        print(f'gen={stats.generation} liked={stats.liked} disliked={stats.disliked} best={stats.best_fitness:.2f}')

        population = evolve_generation(population, config, rng, ids)

    # Elites (lightly mutated liked genomes) come first in each new generation
    print('first genome parents:', population[0].parent_ids)
    print('generation:', population[0].generation, 'size:', len(population))


if __name__ == '__main__':
    main()
