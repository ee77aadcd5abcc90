import pytest

from ifsevo.core.factory import random_genome, random_transform
from ifsevo.core.genome import Genome
from ifsevo.core.library import (
    SEED_GENERATORS,
    create_all_seed_fractals,
    create_initial_population,
    get_seed_constructor,
    seed_names,
    tetrahedron,
)
from ifsevo.utils.id_provider import CounterIDProvider
from ifsevo.utils.rng_manager import Mulberry32
from ifsevo.utils.validation import ValidationError


def _snapshot(population):
    return [[t.to_dict() for t in g.transforms] for g in population]


def test_seed_catalog_enumerates_all_constructors():
    names = seed_names()
    assert len(SEED_GENERATORS) == 35
    assert len(set(names)) == len(names)
    assert "barnsley_fern" in names and "fern_frond" in names


def test_every_seed_is_a_valid_generation_zero_genome():
    genomes = create_all_seed_fractals(CounterIDProvider())
    assert len(genomes) == 35
    for g in genomes:
        assert isinstance(g, Genome)
        assert 2 <= len(g.transforms) <= 8
        assert g.generation == 0
        assert g.parent_ids == ()
        assert g.rating is None


def test_seed_constructors_are_pure_apart_from_ids():
    a = tetrahedron(CounterIDProvider("a"))
    b = tetrahedron(CounterIDProvider("b"))
    assert a.genome_id == "a-0"
    assert b.genome_id == "b-0"
    assert a.transforms == b.transforms


def test_get_seed_constructor():
    assert get_seed_constructor("tetrahedron") is tetrahedron
    with pytest.raises(ValidationError) as exc:
        get_seed_constructor("teapot")
    assert exc.value.code == "unknown_seed_fractal"


def test_random_transform_and_genome_ranges():
    rng = Mulberry32(17)
    for _ in range(50):
        t = random_transform(rng)
        assert -0.5 <= t.tx < 0.5 and -0.5 <= t.ty < 0.5 and -0.5 <= t.tz < 0.5
        assert 0.3 <= t.probability < 1
        assert all(0 <= c <= 255 for c in t.color)
    for _ in range(50):
        g = random_genome(rng, CounterIDProvider(), generation=2)
        assert 3 <= len(g.transforms) <= 6
        assert g.generation == 2


def test_initial_population_is_reproducible_for_a_seed():
    first = create_initial_population(16, seed=42, ids=CounterIDProvider())
    second = create_initial_population(16, seed=42, ids=CounterIDProvider())
    assert len(first) == 16
    assert _snapshot(first) == _snapshot(second)
    assert [g.genome_id for g in first] == [g.genome_id for g in second]

    other = create_initial_population(16, seed=43, ids=CounterIDProvider())
    assert _snapshot(other) != _snapshot(first)


def test_initial_population_mixes_seed_library_and_random_genomes():
    library = {tuple(g.transforms) for g in create_all_seed_fractals()}

    population = create_initial_population(16, seed=1)
    from_library = [g for g in population if tuple(g.transforms) in library]
    assert len(from_library) == 12
    # the library part comes first
    assert all(tuple(g.transforms) in library for g in population[:12])

    large = create_initial_population(60, seed=1)
    assert sum(1 for g in large if tuple(g.transforms) in library) == 35
    assert all(g.generation == 0 for g in large)


def test_initial_population_without_seed():
    population = create_initial_population(4)
    assert len(population) == 4


@pytest.mark.parametrize("size", [0, -3])
def test_initial_population_rejects_non_positive_size(size):
    with pytest.raises(ValidationError) as exc:
        create_initial_population(size, seed=1)
    assert exc.value.code == "invalid_population_size"
