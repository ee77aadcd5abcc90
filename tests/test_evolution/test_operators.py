import pytest

from ifsevo.core.algebra import spectral_radius
from ifsevo.core.factory import random_transform
from ifsevo.core.library import tetrahedron, spiral
from ifsevo.core.transform import Transform
from ifsevo.evolution.operators import (
    CrossoverType,
    MutationType,
    blend_crossover,
    color_mutation,
    crossover,
    mutate_transform,
    parameter_crossover,
    single_point_crossover,
    translation_mutation,
    uniform_crossover,
)
from ifsevo.utils.id_provider import CounterIDProvider
from ifsevo.utils.rng_manager import Mulberry32
from ifsevo.utils.validation import ValidationError


def _parents():
    a = list(tetrahedron(CounterIDProvider()).transforms)  # 4 transforms
    b = list(spiral(CounterIDProvider()).transforms)  # 2 transforms
    return a, b


def _snapshot(transforms):
    return [t.to_dict() for t in transforms]


def test_blend_alpha_one_returns_parent_a():
    a, b = _parents()
    assert blend_crossover(a, b, Mulberry32(1), alpha=1.0) == a


def test_blend_rounds_non_integer_colors_of_shared_transforms():
    a = [Transform(m=(0.3,) * 9, tx=0.2, probability=0.6, color=(188.09, 0.0, 82.5))]
    b = [Transform(m=(0.1,) * 9, color=(10, 20, 30))]
    (t,) = blend_crossover(a, b, Mulberry32(1), alpha=1.0)
    assert t.m == a[0].m
    assert t.translation == a[0].translation
    assert t.probability == a[0].probability
    assert t.color == (188.0, 0.0, 83.0)


def test_blend_alpha_zero_returns_parent_b_on_shared_indices():
    a, b = _parents()
    child = blend_crossover(a, b, Mulberry32(1), alpha=0.0)
    assert len(child) == len(a)
    assert child[:len(b)] == b
    # transforms only A has are faded, but stay selectable
    for t, original in zip(child[len(b):], a[len(b):]):
        assert 0 < t.probability < original.probability
        assert t.m == original.m


def test_blend_midpoint_interpolates():
    a = [Transform(m=(0.2,) * 9, tx=0, probability=1.0, color=(0, 0, 0))]
    b = [Transform(m=(0.4,) * 9, tx=1, probability=0.5, color=(255, 255, 255))]
    (t,) = blend_crossover(a, b, Mulberry32(1), alpha=0.5)
    assert t.m == pytest.approx((0.3,) * 9)
    assert t.tx == pytest.approx(0.5)
    assert t.probability == pytest.approx(0.75)
    # 127.5 rounds half up
    assert t.color == (128.0, 128.0, 128.0)


def test_blend_rejects_alpha_outside_unit_interval():
    a, b = _parents()
    with pytest.raises(ValidationError):
        blend_crossover(a, b, Mulberry32(1), alpha=1.5)


def test_uniform_crossover_takes_whole_transforms_from_either_parent():
    a, b = _parents()
    child = uniform_crossover(a, b, Mulberry32(3))
    assert len(child) == 4
    for i, t in enumerate(child):
        assert t == a[i] or (i < len(b) and t == b[i])


def test_parameter_crossover_mixes_fields_per_index():
    a, b = _parents()
    child = parameter_crossover(a, b, Mulberry32(3))
    assert len(child) == 4
    for i in range(2):
        for k, value in enumerate(child[i].m):
            assert value in (a[i].m[k], b[i].m[k])
        assert child[i].tx in (a[i].tx, b[i].tx)
    assert child[2:] == a[2:]


def test_single_point_crossover_takes_b_length():
    a, b = _parents()
    for seed in range(20):
        child = single_point_crossover(a, b, Mulberry32(seed))
        assert len(child) == len(b)
        assert child[-1] == b[-1]


@pytest.mark.parametrize("crossover_type", list(CrossoverType))
def test_crossover_output_stays_within_transform_bounds(crossover_type):
    rng = Mulberry32(10)
    for _ in range(30):
        a = [random_transform(rng) for _ in range(rng.randrange(7) + 2)]
        b = [random_transform(rng) for _ in range(rng.randrange(7) + 2)]
        child = crossover(a, b, crossover_type, rng)
        assert 2 <= len(child) <= 8


@pytest.mark.parametrize("crossover_type", ["uniform", "blend", "parameter", "single-point"])
def test_crossover_does_not_mutate_parents(crossover_type):
    a, b = _parents()
    before = (_snapshot(a), _snapshot(b))
    crossover(a, b, crossover_type, Mulberry32(2))
    assert (_snapshot(a), _snapshot(b)) == before


def test_unknown_operator_tags_raise():
    a, b = _parents()
    with pytest.raises(ValidationError) as exc:
        crossover(a, b, "two-point", Mulberry32(1))
    assert exc.value.code == "unknown_crossover_type"

    with pytest.raises(ValidationError) as exc:
        mutate_transform(a[0], "twist", 0.1, Mulberry32(1))
    assert exc.value.code == "unknown_mutation_type"


@pytest.mark.parametrize("mutation_type", list(MutationType))
def test_mutation_keeps_transform_valid_and_input_untouched(mutation_type):
    rng = Mulberry32(21)
    for _ in range(30):
        original = random_transform(rng)
        before = original.to_dict()
        mutated = mutate_transform(original, mutation_type, 0.5, rng)
        assert original.to_dict() == before
        assert isinstance(mutated, Transform)
        assert mutated.probability > 0
        assert all(0 <= c <= 255 for c in mutated.color)
        if mutation_type not in (MutationType.TRANSLATION, MutationType.COLOR):
            assert spectral_radius(mutated.m) <= 0.85 + 1e-9


def test_translation_mutation_only_moves_translation():
    t = Transform(m=(0.5,) * 9, tx=0.1, ty=0.2, tz=0.3, probability=0.7, color=(10, 20, 30))
    mutated = translation_mutation(t, 0.1, Mulberry32(4))
    assert mutated.m == t.m
    assert mutated.probability == t.probability
    assert mutated.color == t.color
    assert abs(mutated.tx - t.tx) <= 0.1 + 1e-12


def test_color_mutation_clamps_channels():
    t = Transform(m=(0.5,) * 9, color=(0, 255, 128))
    rng = Mulberry32(8)
    for _ in range(50):
        t = color_mutation(t, 1.0, rng)
        assert all(0 <= c <= 255 for c in t.color)
    assert t.m == (0.5,) * 9


@pytest.mark.parametrize("strength", [0.0, -0.1, 1.5])
def test_mutation_strength_must_be_in_range(strength):
    with pytest.raises(ValidationError) as exc:
        mutate_transform(Transform(m=(0.5,) * 9), "random", strength, Mulberry32(1))
    assert exc.value.code == "invalid_mutation_strength"
