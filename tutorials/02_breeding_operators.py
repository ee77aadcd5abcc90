"""
Breeding Operators Tutorial

Goals:
- Cross two seed genomes with every crossover strategy
- Mutate a single transform with every mutation strategy
- Wrap results into child genomes with lineage
"""

from ifsevo.core.library import spiral, tetrahedron
from ifsevo.evolution.engine import crossover_genomes, mutate_genome
from ifsevo.evolution.operators import CrossoverType, MutationType, crossover, mutate_transform
from ifsevo.utils.id_provider import CounterIDProvider
from ifsevo.utils.rng_manager import RNGManager


def main():
    rng = RNGManager(seed=42)
    ids = CounterIDProvider()

    a = tetrahedron(ids)  # 4 transforms
    b = spiral(ids)  # 2 transforms

    r = rng.get_context_rng('crossover')
    for crossover_type in CrossoverType:
        child = crossover(a.transforms, b.transforms, crossover_type, r)
        print(f'{crossover_type.value}: {len(child)} transforms')

    r = rng.get_context_rng('mutation')
    t = a.transforms[0]
    for mutation_type in MutationType:
        mutated = mutate_transform(t, mutation_type, 0.2, r)
        print(f'{mutation_type.value}: tx {t.tx:.3f} -> {mutated.tx:.3f}, color {tuple(round(c) for c in mutated.color)}')

    # Genome-level helpers assign ids, parents and generation
    child = crossover_genomes(a, b, r, 'blend', ids)
    print('crossover child:', child.genome_id, child.parent_ids, 'generation', child.generation)
    grandchild = mutate_genome(child, r, 'structured', 0.12, structural_rate=0.5, ids=ids)
    print('mutated child:', grandchild.genome_id, grandchild.parent_ids, 'generation', grandchild.generation)


if __name__ == '__main__':
    main()
