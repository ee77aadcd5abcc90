"""
Determinism Tutorial

Goals:
- Show that a seed recreates the same initial population
- Use RNGManager contexts so independent consumers never share a stream
- Snapshot and restore random state
"""

from ifsevo.core.library import create_initial_population
from ifsevo.utils.rng_manager import RNGManager


def fingerprint(population):
    return [tuple(round(v, 6) for t in g.transforms for v in t.m) for g in population]


def main():
    first = create_initial_population(16, seed=1234)
    second = create_initial_population(16, seed=1234)
    print('same_population:', fingerprint(first) == fingerprint(second))

    rng = RNGManager(seed=1234)
    breeding = rng.get_context_rng('breeding')
    render = rng.get_context_rng('render')
    print('independent_streams:', breeding.random() != render.random())

    state = rng.get_state()
    expected = [breeding.random() for _ in range(3)]
    rng.set_state(state)
    print('restored:', [breeding.random() for _ in range(3)] == expected)


if __name__ == '__main__':
    main()
