import math

import pytest

from ifsevo.core.genome import Genome, Rating, child_generation, toggle_rating
from ifsevo.core.transform import Transform
from ifsevo.utils.validation import ValidationError


def _transform(scale=0.5, **kwargs):
    return Transform(m=(scale, 0, 0, 0, scale, 0, 0, 0, scale), **kwargs)


def _genome(n=3, genome_id="g", **kwargs):
    return Genome(genome_id=genome_id, transforms=[_transform() for _ in range(n)], **kwargs)


def test_transform_defaults_and_coercion():
    t = Transform(m=[1, 0, 0, 0, 1, 0, 0, 0, 1])
    assert t.m == (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)
    assert t.translation == (0.0, 0.0, 0.0)
    assert t.probability == 1.0
    assert t.color == (255.0, 255.0, 255.0)


def test_transform_apply():
    t = Transform(m=(1, 2, 3, 4, 5, 6, 7, 8, 9), tx=1, ty=-1, tz=0.5)
    assert t.apply(1, 0, -1) == (1 - 3 + 1, 4 - 6 - 1, 7 - 9 + 0.5)


@pytest.mark.parametrize(
    "kwargs, code",
    [
        ({"m": (1, 0, 0)}, "invalid_matrix"),
        ({"m": (0.5,) * 9, "probability": 0}, "invalid_probability"),
        ({"m": (0.5,) * 9, "probability": -1}, "invalid_probability"),
        ({"m": (0.5,) * 9, "tx": math.inf}, "non_finite_transform"),
        ({"m": (math.nan,) + (0.5,) * 8}, "non_finite_transform"),
        ({"m": (0.5,) * 9, "color": (1, 2)}, "invalid_color"),
        ({"m": (0.5,) * 9, "color": (300, -5, 0)}, "invalid_color"),
        ({"m": (0.5,) * 9, "color": (0, 255.5, 0)}, "invalid_color"),
    ],
)
def test_transform_validation(kwargs, code):
    with pytest.raises(ValidationError) as exc:
        Transform(**kwargs)
    assert exc.value.code == code


@pytest.mark.parametrize("n", [0, 1, 9])
def test_genome_rejects_transform_count_outside_bounds(n):
    with pytest.raises(ValidationError) as exc:
        _genome(n)
    assert exc.value.code == "invalid_transform_count"
    assert exc.value.context["count"] == n


def test_genome_accepts_bounds():
    assert _genome(2).transform_count == 2
    assert _genome(8).transform_count == 8


def test_genome_rejects_three_parents_and_negative_generation():
    with pytest.raises(ValidationError):
        _genome(parent_ids=("a", "b", "c"))
    with pytest.raises(ValidationError):
        _genome(generation=-1)


def test_genome_export_surface():
    g = _genome(2, genome_id="x", generation=3, parent_ids=["p1", "p2"], rating="up", comment="nice")
    data = g.to_dict()
    assert data["id"] == "x"
    assert data["generation"] == 3
    assert data["parent_ids"] == ["p1", "p2"]
    assert data["rating"] == "up"
    assert len(data["transforms"]) == 2
    assert data["transforms"][0]["m"] == [0.5, 0, 0, 0, 0.5, 0, 0, 0, 0.5]
    assert Genome.from_dict(data) == g


def test_rating_helpers():
    g = _genome()
    liked = g.with_rating(Rating.UP)
    assert liked.rating is Rating.UP
    assert g.rating is None

    # rating the same way twice clears it
    assert toggle_rating(liked, "up").rating is None
    assert toggle_rating(liked, "down").rating is Rating.DOWN
    assert toggle_rating(g, "down").rating is Rating.DOWN

    with pytest.raises(ValidationError):
        g.with_rating("sideways")


def test_child_generation():
    assert child_generation([]) == 0
    assert child_generation([_genome(generation=3), _genome(generation=5)]) == 6
    assert child_generation([_genome(generation=4)]) == 5


def test_transform_accepts_color_channel_bounds():
    t = Transform(m=(0.5,) * 9, color=(0, 255, 127.5))
    assert t.color == (0.0, 255.0, 127.5)
