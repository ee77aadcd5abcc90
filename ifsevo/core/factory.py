"""Random transform and genome constructors."""

from __future__ import annotations

import math

from ifsevo.core.algebra import rotation_matrix
from ifsevo.core.genome import Genome
from ifsevo.core.transform import Transform
from ifsevo.utils.id_provider import IDProvider, UUIDProvider
from ifsevo.utils.rng_manager import RandomSource


def random_transform(rng: RandomSource) -> Transform:
    """Draw a contractive random transform.

    Draw order (fixed, seeded populations depend on it): scale, three
    angles, shear, translation, probability, color.
    """
    scale = rng.uniform(0.2, 0.6)
    angle_x = rng.uniform(0, math.pi * 2)
    angle_y = rng.uniform(0, math.pi * 2)
    angle_z = rng.uniform(0, math.pi * 2)

    m = list(rotation_matrix(angle_x, angle_y, angle_z, scale))
    shear = rng.uniform(-0.2, 0.2)
    m[1] += shear
    m[3] += shear

    return Transform(
        m=tuple(m),
        tx=rng.uniform(-0.5, 0.5),
        ty=rng.uniform(-0.5, 0.5),
        tz=rng.uniform(-0.5, 0.5),
        probability=rng.uniform(0.3, 1),
        color=rng.random_color(),
    )


def random_genome(rng: RandomSource, ids: IDProvider | None = None, generation: int = 0) -> Genome:
    """Build a parentless genome of 3-6 random transforms."""
    ids = ids or UUIDProvider()
    count = int(math.floor(rng.uniform(3, 7)))
    transforms = tuple(random_transform(rng) for _ in range(count))
    return Genome(genome_id=ids.next_id(), transforms=transforms, generation=generation)


__all__ = ["random_transform", "random_genome"]
