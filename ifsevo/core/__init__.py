"""Genome model, transform algebra and genome constructors."""

from .algebra import (
    MatrixParams,
    decompose_matrix,
    determinant3x3,
    enforce_contractivity,
    enforce_transform_contractivity,
    is_contractive,
    reconstruct_matrix,
    rotation_matrix,
    spectral_radius,
)
from .factory import random_genome, random_transform
from .genome import MAX_TRANSFORMS, MIN_TRANSFORMS, Genome, Rating, toggle_rating
from .library import (
    SEED_GENERATORS,
    create_all_seed_fractals,
    create_initial_population,
    get_seed_constructor,
    seed_names,
)
from .transform import Transform

__all__ = [
    "MatrixParams",
    "decompose_matrix",
    "determinant3x3",
    "enforce_contractivity",
    "enforce_transform_contractivity",
    "is_contractive",
    "reconstruct_matrix",
    "rotation_matrix",
    "spectral_radius",
    "random_genome",
    "random_transform",
    "MAX_TRANSFORMS",
    "MIN_TRANSFORMS",
    "Genome",
    "Rating",
    "toggle_rating",
    "SEED_GENERATORS",
    "create_all_seed_fractals",
    "create_initial_population",
    "get_seed_constructor",
    "seed_names",
    "Transform",
]
