"""Seed library of hand-tuned starting genomes.

Classic IFS solids and curves (after Paul Bourke's IFS collection) plus a
set of botanical forms. Every constructor is pure apart from id assignment
and returns a generation-0 genome without parents.
"""

from __future__ import annotations

import logging
import math
from typing import Callable

from ifsevo.core.factory import random_genome
from ifsevo.core.genome import Genome
from ifsevo.core.transform import Transform
from ifsevo.utils.id_provider import IDProvider, UUIDProvider
from ifsevo.utils.rng_manager import Mulberry32, generate_random_seed
from ifsevo.utils.validation import ValidationError

SeedConstructor = Callable[..., Genome]


def _t(m, tx=0.0, ty=0.0, tz=0.0, probability=1.0, color=(255, 255, 255)) -> Transform:
    return Transform(m=m, tx=tx, ty=ty, tz=tz, probability=probability, color=color)


def _diag(s: float) -> tuple[float, ...]:
    return (s, 0, 0, 0, s, 0, 0, 0, s)


def _seed(ids: IDProvider | None, *transforms: Transform) -> Genome:
    ids = ids or UUIDProvider()
    return Genome(genome_id=ids.next_id(), transforms=transforms)


# ---------------------------------------------------------------------------
# Classic / geometric
# ---------------------------------------------------------------------------

def tetrahedron(ids: IDProvider | None = None) -> Genome:
    """Sierpinski tetrahedron: four half-scale maps to the vertices."""
    m = _diag(0.5)
    return _seed(
        ids,
        _t(m, 0, 0, 0.5, 1, (255, 100, 100)),
        _t(m, 0.47, 0, -0.17, 1, (100, 255, 100)),
        _t(m, -0.24, 0.41, -0.17, 1, (100, 100, 255)),
        _t(m, -0.24, -0.41, -0.17, 1, (255, 255, 100)),
    )


def spiral(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t((0.6, -0.3, 0, 0.3, 0.6, 0, 0, 0, 0.6), 0.1, 0.1, 0.2, 1, (200, 100, 255)),
        _t((0.5, 0, 0.2, 0, 0.5, 0.1, -0.2, -0.1, 0.5), -0.2, 0.1, -0.1, 1, (100, 200, 255)),
    )


def tree(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t((0.05, 0, 0, 0, 0.6, 0, 0, 0, 0.05), 0, 0, 0, 0.1, (139, 90, 43)),
        _t((0.45, -0.35, 0, 0.35, 0.45, 0, 0, 0, 0.45), 0, 0.4, 0, 0.35, (50, 180, 50)),
        _t((0.45, 0.35, 0, -0.35, 0.45, 0, 0, 0, 0.45), 0, 0.4, 0, 0.35, (80, 200, 80)),
        _t((0.45, 0, 0.35, 0, 0.45, 0, -0.35, 0, 0.45), 0, 0.4, 0, 0.2, (60, 220, 60)),
    )


def barnsley_fern(ids: IDProvider | None = None) -> Genome:
    """Barnsley fern extended with depth."""
    return _seed(
        ids,
        _t((0, 0, 0, 0, 0.16, 0, 0, 0, 0), 0, 0, 0, 0.01, (60, 100, 40)),
        _t((0.85, 0.04, 0, -0.04, 0.85, 0.1, 0, -0.1, 0.85), 0, 1.6, 0, 0.85, (34, 139, 34)),
        _t((0.2, -0.26, 0.1, 0.23, 0.22, 0, -0.1, 0, 0.2), 0, 1.0, 0.1, 0.07, (50, 205, 50)),
        _t((-0.15, 0.28, -0.1, 0.26, 0.24, 0, 0.1, 0, 0.2), 0, 0.44, -0.1, 0.07, (0, 200, 0)),
    )


def cantor_dust(ids: IDProvider | None = None) -> Genome:
    """3D Cantor dust: eight corner cubes."""
    m, d = _diag(0.33), 0.5
    return _seed(
        ids,
        _t(m, -d, -d, -d, 1, (255, 200, 100)),
        _t(m, d, -d, -d, 1, (255, 150, 100)),
        _t(m, -d, d, -d, 1, (255, 100, 100)),
        _t(m, d, d, -d, 1, (200, 100, 150)),
        _t(m, -d, -d, d, 1, (150, 100, 200)),
        _t(m, d, -d, d, 1, (100, 100, 255)),
        _t(m, -d, d, d, 1, (100, 150, 255)),
        _t(m, d, d, d, 1, (100, 200, 255)),
    )


def octahedron(ids: IDProvider | None = None) -> Genome:
    m = _diag(0.5)
    return _seed(
        ids,
        _t(m, 0, 0.5, 0, 1, (255, 50, 50)),
        _t(m, 0, -0.5, 0, 1, (50, 255, 50)),
        _t(m, 0.5, 0, 0, 1, (50, 50, 255)),
        _t(m, -0.5, 0, 0, 1, (255, 255, 50)),
        _t(m, 0, 0, 0.5, 1, (50, 255, 255)),
        _t(m, 0, 0, -0.5, 1, (255, 50, 255)),
    )


def vicsek(ids: IDProvider | None = None) -> Genome:
    """Cross-shaped Vicsek fractal."""
    m = _diag(0.33)
    return _seed(
        ids,
        _t(m, 0, 0, 0, 1, (255, 255, 255)),
        _t(m, 0.66, 0, 0, 1, (255, 100, 100)),
        _t(m, -0.66, 0, 0, 1, (100, 255, 100)),
        _t(m, 0, 0.66, 0, 1, (100, 100, 255)),
        _t(m, 0, -0.66, 0, 1, (255, 255, 100)),
        _t(m, 0, 0, 0.66, 1, (100, 255, 255)),
        _t(m, 0, 0, -0.66, 1, (255, 100, 255)),
    )


def double_helix(ids: IDProvider | None = None) -> Genome:
    c, s = math.cos(math.pi / 6), math.sin(math.pi / 6)
    return _seed(
        ids,
        _t((0.7 * c, -0.7 * s, 0, 0.7 * s, 0.7 * c, 0, 0, 0, 0.7), 0.15, 0, 0.15, 0.5, (0, 150, 255)),
        _t((0.7 * c, 0.7 * s, 0, -0.7 * s, 0.7 * c, 0, 0, 0, 0.7), -0.15, 0, 0.15, 0.5, (255, 100, 150)),
    )


def flame_swirl(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t((0.5, -0.4, 0.1, 0.4, 0.5, 0.1, -0.1, -0.1, 0.5), 0.1, 0.1, 0, 0.6, (255, 100, 50)),
        _t((0.4, 0.3, -0.2, -0.3, 0.4, 0.2, 0.2, -0.2, 0.4), -0.2, 0.2, 0.1, 0.4, (255, 200, 100)),
        _t((0.3, 0, 0.3, 0, 0.3, 0, -0.3, 0, 0.3), 0, -0.1, -0.2, 0.3, (255, 255, 150)),
    )


def crystal(ids: IDProvider | None = None) -> Genome:
    m = _diag(0.4)
    return _seed(
        ids,
        _t(m, 0, 0.5, 0.3, 1, (200, 220, 255)),
        _t(m, 0, 0.5, -0.3, 1, (180, 200, 255)),
        _t(m, 0.5, 0.3, 0, 1, (160, 180, 255)),
        _t(m, -0.5, 0.3, 0, 1, (140, 160, 255)),
        _t(m, 0.3, 0, 0.5, 1, (120, 140, 255)),
        _t(m, -0.3, 0, 0.5, 1, (100, 120, 255)),
    )


def dragon(ids: IDProvider | None = None) -> Genome:
    r = math.sqrt(2) / 2
    c, s = math.cos(math.pi / 4), math.sin(math.pi / 4)
    return _seed(
        ids,
        _t((r * c, -r * s, 0, r * s, r * c, 0, 0, 0, r), 0, 0, 0.1, 0.5, (50, 200, 100)),
        _t((-r * c, -r * s, 0, r * s, -r * c, 0, 0, 0, r), 1, 0, -0.1, 0.5, (100, 50, 200)),
    )


def koch(ids: IDProvider | None = None) -> Genome:
    s = 0.33
    return _seed(
        ids,
        _t(_diag(s), -0.33, 0, 0, 1, (200, 230, 255)),
        _t(_diag(s), 0.33, 0, 0, 1, (150, 200, 255)),
        _t((s * 0.866, -s * 0.5, 0, s * 0.5, s * 0.866, 0, 0, 0, s), -0.08, 0.2, 0.15, 1, (100, 150, 255)),
        _t((s * 0.866, s * 0.5, 0, -s * 0.5, s * 0.866, 0, 0, 0, s), 0.08, 0.2, -0.15, 1, (50, 100, 255)),
    )


def menger_sponge(ids: IDProvider | None = None) -> Genome:
    """Menger sponge reduced to its eight corner cubes."""
    m, d = _diag(0.33), 0.33
    return _seed(
        ids,
        _t(m, -d, -d, -d, 1, (255, 200, 150)),
        _t(m, d, -d, -d, 1, (255, 180, 130)),
        _t(m, -d, d, -d, 1, (255, 160, 110)),
        _t(m, d, d, -d, 1, (255, 140, 90)),
        _t(m, -d, -d, d, 1, (255, 120, 70)),
        _t(m, d, -d, d, 1, (255, 100, 50)),
        _t(m, -d, d, d, 1, (255, 80, 30)),
        _t(m, d, d, d, 1, (255, 60, 10)),
    )


def galaxy_spiral(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t(_diag(0.3), 0, 0, 0, 0.2, (255, 255, 200)),
        _t((0.7, -0.2, 0, 0.2, 0.7, 0, 0, 0, 0.7), 0.2, 0.1, 0.02, 0.4, (150, 100, 255)),
        _t((0.7, 0.2, 0, -0.2, 0.7, 0, 0, 0, 0.7), -0.2, -0.1, -0.02, 0.4, (255, 150, 200)),
    )


def nested_cubes(ids: IDProvider | None = None) -> Genome:
    s = 0.45
    c, sn = math.cos(math.pi / 8), math.sin(math.pi / 8)
    inner = _diag(s * 0.4)
    return _seed(
        ids,
        _t((s * c, -s * sn, 0, s * sn, s * c, 0, 0, 0, s), 0, 0, 0, 0.5, (255, 100, 100)),
        _t(inner, 0.4, 0, 0, 0.2, (100, 255, 100)),
        _t(inner, -0.4, 0, 0, 0.2, (100, 100, 255)),
        _t(inner, 0, 0.4, 0, 0.1, (255, 255, 100)),
    )


def apollonian(ids: IDProvider | None = None) -> Genome:
    """Apollonian gasket approximation (nested spheres)."""
    m = _diag(0.5)
    return _seed(
        ids,
        _t(m, 0, 0, 0.4, 1, (255, 180, 180)),
        _t(m, 0.35, 0.2, -0.2, 1, (180, 255, 180)),
        _t(m, -0.35, 0.2, -0.2, 1, (180, 180, 255)),
        _t(m, 0, -0.4, -0.2, 1, (255, 255, 180)),
        _t(_diag(0.25), 0, 0, 0, 0.5, (200, 200, 200)),
    )


def palm_fern(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t((0.02, 0, 0, 0, 0.5, 0, 0, 0, 0.02), 0, -0.2, 0, 0.05, (101, 67, 33)),
        _t((0.8, 0, 0.05, 0, 0.8, 0, -0.05, 0, 0.8), 0, 0.4, 0, 0.6, (34, 139, 34)),
        _t((0.3, -0.3, 0.1, 0.3, 0.3, 0, -0.1, 0, 0.3), -0.15, 0.5, 0.05, 0.15, (50, 205, 50)),
        _t((0.3, 0.3, -0.1, -0.3, 0.3, 0, 0.1, 0, 0.3), 0.15, 0.5, -0.05, 0.15, (60, 179, 60)),
        _t((0.3, 0, 0.3, 0, 0.3, 0, -0.3, 0, 0.3), 0, 0.5, 0.15, 0.05, (46, 139, 46)),
    )


# ---------------------------------------------------------------------------
# Botanical
# ---------------------------------------------------------------------------

def romanesco(ids: IDProvider | None = None) -> Genome:
    golden_angle = math.pi * (3 - math.sqrt(5))
    c, s = math.cos(golden_angle * 0.3), math.sin(golden_angle * 0.3)
    return _seed(
        ids,
        _t((0.7 * c, -0.7 * s, 0, 0.7 * s, 0.7 * c, 0.1, 0, -0.1, 0.7), 0, 0.2, 0, 0.5, (144, 238, 144)),
        _t((0.4, 0, 0.2, 0, 0.4, 0, -0.2, 0, 0.4), 0.25, 0.1, 0, 0.25, (124, 205, 124)),
        _t((0.4, 0, -0.2, 0, 0.4, 0, 0.2, 0, 0.4), -0.25, 0.1, 0, 0.25, (100, 180, 100)),
    )


def oak_tree(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t((0.05, 0, 0, 0, 0.4, 0, 0, 0, 0.05), 0, -0.3, 0, 0.08, (101, 67, 33)),
        _t(_diag(0.6), 0, 0.5, 0, 0.25, (85, 107, 47)),
        _t((0.45, -0.3, 0, 0.3, 0.45, 0, 0, 0, 0.45), -0.3, 0.4, 0, 0.2, (107, 142, 35)),
        _t((0.45, 0.3, 0, -0.3, 0.45, 0, 0, 0, 0.45), 0.3, 0.4, 0, 0.2, (85, 130, 50)),
        _t((0.4, 0, 0.2, 0, 0.4, 0, -0.2, 0, 0.4), 0, 0.35, 0.25, 0.15, (120, 160, 60)),
        _t((0.4, 0, -0.2, 0, 0.4, 0, 0.2, 0, 0.4), 0, 0.35, -0.25, 0.12, (100, 140, 50)),
    )


def pine_tree(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t((0.03, 0, 0, 0, 0.5, 0, 0, 0, 0.03), 0, -0.4, 0, 0.05, (79, 46, 23)),
        _t(_diag(0.7), 0, 0.35, 0, 0.35, (34, 85, 51)),
        _t((0.35, -0.2, 0, 0.15, 0.35, -0.1, 0, 0.1, 0.35), -0.2, 0.2, 0, 0.15, (46, 100, 60)),
        _t((0.35, 0.2, 0, -0.15, 0.35, -0.1, 0, 0.1, 0.35), 0.2, 0.2, 0, 0.15, (40, 90, 55)),
        _t((0.35, 0, 0.2, 0, 0.35, -0.1, -0.15, 0.1, 0.35), 0, 0.2, 0.2, 0.15, (50, 110, 65)),
        _t((0.35, 0, -0.2, 0, 0.35, -0.1, 0.15, 0.1, 0.35), 0, 0.2, -0.2, 0.15, (38, 88, 52)),
    )


def weeping_willow(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t((0.06, 0, 0, 0, 0.45, 0, 0, 0, 0.06), 0, -0.25, 0, 0.08, (90, 70, 40)),
        _t(_diag(0.55), 0, 0.4, 0, 0.2, (154, 205, 50)),
        _t((0.4, -0.25, 0, 0.2, 0.35, -0.15, 0, 0.15, 0.4), -0.25, 0.3, 0, 0.18, (173, 223, 70)),
        _t((0.4, 0.25, 0, -0.2, 0.35, -0.15, 0, 0.15, 0.4), 0.25, 0.3, 0, 0.18, (144, 200, 55)),
        _t((0.4, 0, 0.25, 0, 0.35, -0.15, -0.2, 0.15, 0.4), 0, 0.3, 0.25, 0.18, (160, 210, 60)),
        _t((0.4, 0, -0.25, 0, 0.35, -0.15, 0.2, 0.15, 0.4), 0, 0.3, -0.25, 0.18, (138, 195, 48)),
    )


def coral(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t((0.15, 0, 0, 0, 0.35, 0, 0, 0, 0.15), 0, -0.2, 0, 0.1, (255, 127, 80)),
        _t((0.5, 0.1, 0, -0.1, 0.5, 0, 0, 0, 0.5), 0, 0.35, 0, 0.25, (255, 99, 71)),
        _t((0.4, -0.2, 0.1, 0.2, 0.4, 0, -0.1, 0, 0.4), -0.2, 0.25, 0.1, 0.2, (255, 160, 122)),
        _t((0.4, 0.2, -0.1, -0.2, 0.4, 0, 0.1, 0, 0.4), 0.2, 0.25, -0.1, 0.2, (250, 128, 114)),
        _t((0.3, 0, 0.15, 0, 0.35, 0, -0.15, 0, 0.3), 0.15, 0.2, 0.15, 0.25, (255, 182, 193)),
    )


def seaweed(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t((0.65, 0.15, 0, -0.1, 0.7, 0, 0, 0, 0.65), 0, 0.35, 0, 0.5, (60, 120, 60)),
        _t((0.35, -0.25, 0.05, 0.2, 0.35, 0, -0.05, 0, 0.35), -0.15, 0.2, 0, 0.25, (80, 140, 80)),
        _t((0.35, 0.25, -0.05, -0.2, 0.35, 0, 0.05, 0, 0.35), 0.15, 0.2, 0, 0.25, (70, 130, 70)),
    )


def bush(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t(_diag(0.5), 0, 0.15, 0, 0.2, (50, 120, 50)),
        _t((0.45, -0.15, 0, 0.15, 0.45, 0, 0, 0, 0.45), -0.25, 0.1, 0, 0.16, (60, 135, 60)),
        _t((0.45, 0.15, 0, -0.15, 0.45, 0, 0, 0, 0.45), 0.25, 0.1, 0, 0.16, (55, 125, 55)),
        _t((0.45, 0, 0.15, 0, 0.45, 0, -0.15, 0, 0.45), 0, 0.1, 0.25, 0.16, (65, 140, 65)),
        _t((0.45, 0, -0.15, 0, 0.45, 0, 0.15, 0, 0.45), 0, 0.1, -0.25, 0.16, (52, 118, 52)),
        _t((0.4, 0, 0, 0, 0.45, 0, 0, 0, 0.4), 0, 0.3, 0, 0.16, (70, 150, 70)),
    )


def ivy(ids: IDProvider | None = None) -> Genome:
    c, s = math.cos(math.pi / 8), math.sin(math.pi / 8)
    return _seed(
        ids,
        _t((0.65 * c, -0.65 * s, 0, 0.65 * s, 0.65 * c, 0.05, 0, -0.05, 0.65), 0.05, 0.35, 0, 0.45, (60, 100, 50)),
        _t((0.35, -0.2, 0, 0.2, 0.35, 0, 0, 0, 0.35), -0.2, 0.15, 0.05, 0.2, (80, 140, 60)),
        _t((0.35, 0.2, 0, -0.2, 0.35, 0, 0, 0, 0.35), 0.2, 0.15, -0.05, 0.2, (70, 130, 55)),
        _t((0.3, 0, 0.1, 0, 0.25, -0.1, -0.1, 0.1, 0.3), 0.1, -0.1, 0.1, 0.15, (90, 150, 70)),
    )


def grass(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t((0.15, 0, 0, 0, 0.7, 0, 0, 0, 0.15), 0, 0.3, 0, 0.25, (100, 180, 80)),
        _t((0.15, -0.1, 0, 0.08, 0.68, 0, 0, 0, 0.15), -0.08, 0.28, 0, 0.2, (90, 165, 70)),
        _t((0.15, 0.1, 0, -0.08, 0.68, 0, 0, 0, 0.15), 0.08, 0.28, 0, 0.2, (110, 190, 90)),
        _t((0.15, 0, 0.08, 0, 0.68, 0, -0.08, 0, 0.15), 0, 0.28, 0.08, 0.2, (95, 170, 75)),
        _t((0.15, 0, -0.08, 0, 0.68, 0, 0.08, 0, 0.15), 0, 0.28, -0.08, 0.15, (105, 185, 85)),
    )


def flower(ids: IDProvider | None = None) -> Genome:
    petal = (0.35, 0, 0, 0, 0.35, 0.15, 0, -0.1, 0.35)
    return _seed(
        ids,
        _t((0.04, 0, 0, 0, 0.5, 0, 0, 0, 0.04), 0, -0.35, 0, 0.08, (80, 140, 60)),
        _t(_diag(0.25), 0, 0.35, 0, 0.15, (255, 220, 100)),
        _t(petal, 0.25, 0.3, 0, 0.15, (255, 105, 180)),
        _t(petal, -0.25, 0.3, 0, 0.15, (255, 130, 190)),
        _t(petal, 0, 0.3, 0.25, 0.15, (255, 120, 185)),
        _t(petal, 0, 0.3, -0.25, 0.15, (255, 140, 195)),
        _t((0.35, 0, 0, 0, 0.4, 0.1, 0, -0.1, 0.35), 0, 0.45, 0, 0.17, (255, 115, 182)),
    )


def mushroom(ids: IDProvider | None = None) -> Genome:
    cap = (0.4, 0, 0, 0, 0.15, -0.1, 0, 0.05, 0.4)
    return _seed(
        ids,
        _t((0.12, 0, 0, 0, 0.45, 0, 0, 0, 0.12), 0, -0.2, 0, 0.2, (245, 235, 220)),
        _t((0.45, 0, 0, 0, 0.2, 0, 0, 0, 0.45), 0, 0.35, 0, 0.25, (180, 50, 50)),
        _t(cap, 0.2, 0.3, 0, 0.15, (200, 70, 70)),
        _t(cap, -0.2, 0.3, 0, 0.15, (190, 60, 60)),
        _t(cap, 0, 0.3, 0.2, 0.15, (210, 80, 80)),
        _t((0.15, 0, 0, 0, 0.1, 0, 0, 0, 0.15), 0.1, 0.4, 0.05, 0.1, (255, 255, 255)),
    )


def cactus(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t((0.15, 0, 0, 0, 0.6, 0, 0, 0, 0.15), 0, 0.25, 0, 0.4, (60, 140, 70)),
        _t((0.12, 0, 0, 0, 0.35, 0, 0, 0, 0.12), -0.2, 0.15, 0, 0.15, (70, 150, 80)),
        _t((0.12, 0, 0, 0.1, 0.35, 0, 0, 0, 0.12), -0.25, 0.35, 0, 0.15, (65, 145, 75)),
        _t((0.12, 0, 0, 0, 0.35, 0, 0, 0, 0.12), 0.2, 0.2, 0, 0.15, (55, 135, 65)),
        _t((0.12, 0, 0, -0.1, 0.35, 0, 0, 0, 0.12), 0.25, 0.4, 0, 0.15, (75, 155, 85)),
    )


def roots(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t((0.1, 0, 0, 0, 0.55, 0, 0, 0, 0.1), 0, -0.3, 0, 0.2, (139, 90, 43)),
        _t((0.4, -0.2, 0, 0.15, 0.4, -0.15, 0, 0.1, 0.4), -0.2, -0.2, 0, 0.2, (160, 110, 60)),
        _t((0.4, 0.2, 0, -0.15, 0.4, -0.15, 0, 0.1, 0.4), 0.2, -0.2, 0, 0.2, (150, 100, 55)),
        _t((0.4, 0, 0.2, 0, 0.4, -0.15, -0.15, 0.1, 0.4), 0, -0.2, 0.2, 0.2, (145, 95, 50)),
        _t((0.4, 0, -0.2, 0, 0.4, -0.15, 0.15, 0.1, 0.4), 0, -0.2, -0.2, 0.2, (155, 105, 58)),
    )


def moss(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t((0.4, 0, 0, 0, 0.35, 0, 0, 0, 0.4), 0, 0.08, 0, 0.25, (85, 130, 70)),
        _t((0.35, -0.1, 0, 0.1, 0.3, 0, 0, 0, 0.35), -0.15, 0.05, 0, 0.15, (95, 140, 80)),
        _t((0.35, 0.1, 0, -0.1, 0.3, 0, 0, 0, 0.35), 0.15, 0.05, 0, 0.15, (90, 135, 75)),
        _t((0.35, 0, 0.1, 0, 0.3, 0, -0.1, 0, 0.35), 0, 0.05, 0.15, 0.15, (100, 145, 85)),
        _t((0.35, 0, -0.1, 0, 0.3, 0, 0.1, 0, 0.35), 0, 0.05, -0.15, 0.15, (88, 132, 72)),
        _t((0.2, 0, 0, 0, 0.3, 0, 0, 0, 0.2), 0.05, 0.15, 0.05, 0.15, (110, 160, 95)),
    )


def succulent(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t((0.4, 0, 0, 0, 0.35, 0, 0, 0, 0.4), 0, 0.1, 0, 0.2, (120, 180, 140)),
        _t((0.4, -0.15, 0, 0.12, 0.4, 0.05, 0, -0.05, 0.4), -0.18, 0.08, 0, 0.15, (140, 200, 160)),
        _t((0.4, 0.15, 0, -0.12, 0.4, 0.05, 0, -0.05, 0.4), 0.18, 0.08, 0, 0.15, (130, 190, 150)),
        _t((0.4, 0, 0.15, 0, 0.4, 0.05, -0.12, -0.05, 0.4), 0, 0.08, 0.18, 0.15, (150, 210, 170)),
        _t((0.4, 0, -0.15, 0, 0.4, 0.05, 0.12, -0.05, 0.4), 0, 0.08, -0.18, 0.15, (125, 185, 145)),
        _t((0.3, 0, 0, 0, 0.35, 0.1, 0, -0.08, 0.3), 0, 0.2, 0, 0.2, (160, 220, 180)),
    )


def bonsai(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t((0.08, -0.05, 0, 0.04, 0.4, 0, 0, 0, 0.08), -0.05, -0.15, 0, 0.1, (100, 70, 40)),
        _t((0.5, 0, 0, 0, 0.45, 0, 0, 0, 0.5), 0.1, 0.35, 0, 0.25, (50, 100, 50)),
        _t((0.4, -0.2, 0, 0.15, 0.35, 0, 0, 0, 0.4), -0.25, 0.25, 0, 0.2, (60, 115, 60)),
        _t((0.35, 0.15, 0, -0.1, 0.35, 0, 0, 0, 0.35), 0.3, 0.3, 0, 0.15, (55, 108, 55)),
        _t((0.25, 0, 0.1, 0, 0.25, -0.05, -0.1, 0.05, 0.25), -0.15, 0.4, 0.1, 0.15, (65, 120, 65)),
        _t((0.3, 0, 0, 0, 0.2, 0, 0, 0, 0.3), 0.2, 0.45, 0.05, 0.15, (70, 130, 70)),
    )


def vine_with_leaves(ids: IDProvider | None = None) -> Genome:
    c, s = math.cos(math.pi / 6), math.sin(math.pi / 6)
    return _seed(
        ids,
        _t((0.7 * c, -0.7 * s, 0, 0.7 * s, 0.7 * c, 0.08, 0, -0.05, 0.7), 0, 0.25, 0, 0.4, (80, 120, 60)),
        _t((0.3, -0.1, 0, 0.1, 0.35, 0, 0, 0, 0.3), -0.2, 0.15, 0, 0.2, (100, 160, 80)),
        _t((0.3, 0.1, 0, -0.1, 0.35, 0, 0, 0, 0.3), 0.2, 0.2, 0, 0.2, (90, 150, 70)),
        _t((0.2, -0.15, 0.05, 0.1, 0.2, 0, -0.05, 0, 0.2), -0.15, 0.1, 0.08, 0.1, (110, 170, 90)),
        _t((0.2, 0.15, -0.05, -0.1, 0.2, 0, 0.05, 0, 0.2), 0.15, 0.15, -0.08, 0.1, (105, 165, 85)),
    )


def fern_frond(ids: IDProvider | None = None) -> Genome:
    return _seed(
        ids,
        _t((0.04, 0, 0, 0, 0.7, 0, 0, 0, 0.04), 0, 0.25, 0, 0.15, (70, 110, 50)),
        _t((0.3, -0.25, 0, 0.2, 0.35, 0, 0, 0, 0.3), -0.12, 0.2, 0, 0.2, (80, 140, 60)),
        _t((0.3, 0.25, 0, -0.2, 0.35, 0, 0, 0, 0.3), 0.12, 0.25, 0, 0.2, (85, 145, 65)),
        _t((0.28, -0.22, 0, 0.18, 0.32, 0, 0, 0, 0.28), -0.1, 0.35, 0, 0.15, (75, 135, 55)),
        _t((0.28, 0.22, 0, -0.18, 0.32, 0, 0, 0, 0.28), 0.1, 0.4, 0, 0.15, (90, 150, 70)),
        _t((0.25, -0.15, 0, 0.12, 0.25, 0.1, 0, -0.08, 0.25), 0, 0.5, 0.05, 0.15, (95, 155, 75)),
    )


SEED_GENERATORS: tuple[tuple[str, SeedConstructor], ...] = (
    ("tetrahedron", tetrahedron),
    ("spiral", spiral),
    ("tree", tree),
    ("barnsley_fern", barnsley_fern),
    ("cantor_dust", cantor_dust),
    ("octahedron", octahedron),
    ("vicsek", vicsek),
    ("double_helix", double_helix),
    ("flame_swirl", flame_swirl),
    ("crystal", crystal),
    ("dragon", dragon),
    ("koch", koch),
    ("menger_sponge", menger_sponge),
    ("galaxy_spiral", galaxy_spiral),
    ("nested_cubes", nested_cubes),
    ("apollonian", apollonian),
    ("palm_fern", palm_fern),
    ("romanesco", romanesco),
    ("oak_tree", oak_tree),
    ("pine_tree", pine_tree),
    ("weeping_willow", weeping_willow),
    ("coral", coral),
    ("seaweed", seaweed),
    ("bush", bush),
    ("ivy", ivy),
    ("grass", grass),
    ("flower", flower),
    ("mushroom", mushroom),
    ("cactus", cactus),
    ("roots", roots),
    ("moss", moss),
    ("succulent", succulent),
    ("bonsai", bonsai),
    ("vine_with_leaves", vine_with_leaves),
    ("fern_frond", fern_frond),
)


def seed_names() -> list[str]:
    return [name for name, _ in SEED_GENERATORS]


def get_seed_constructor(name: str) -> SeedConstructor:
    for seed_name, ctor in SEED_GENERATORS:
        if seed_name == name:
            return ctor
    raise ValidationError("unknown_seed_fractal", f"Unknown seed fractal: {name}", name=name)


def create_all_seed_fractals(ids: IDProvider | None = None) -> list[Genome]:
    """One genome per seed constructor, in catalog order."""
    ids = ids or UUIDProvider()
    return [ctor(ids) for _, ctor in SEED_GENERATORS]


def create_initial_population(size: int, seed: int | None = None, ids: IDProvider | None = None) -> list[Genome]:
    """Build a generation-0 population from the seed library plus random genomes.

    All randomness comes from one :class:`Mulberry32` stream, consumed in a
    fixed order: the shuffle of the seed catalog first, then the random
    genomes in population order. The same ``seed`` therefore yields the same
    transforms on every run.

    Args:
        size: Population size (> 0)
        seed: 32-bit seed; a fresh one is drawn when omitted
        ids: Id provider for the new genomes

    Returns:
        List of ``size`` genomes; up to 3/4 come from the seed library.
    """
    if int(size) <= 0:
        raise ValidationError("invalid_population_size", "Population size must be > 0", size=size)
    if seed is None:
        seed = generate_random_seed()
    ids = ids or UUIDProvider()
    rng = Mulberry32(seed)

    shuffled = list(SEED_GENERATORS)
    rng.shuffle(shuffled)

    seed_count = min(int(math.floor(size * 0.75)), len(shuffled))
    population = [ctor(ids) for _, ctor in shuffled[:seed_count]]
    while len(population) < size:
        population.append(random_genome(rng, ids))

    logging.info(f"Initial population: seed={seed} library={seed_count} random={size - seed_count}")
    return population


__all__ = [
    "SEED_GENERATORS",
    "seed_names",
    "get_seed_constructor",
    "create_all_seed_fractals",
    "create_initial_population",
] + [name for name, _ in SEED_GENERATORS]
