"""Attractor point generation for ifsevo."""

from .chaos_game import (  # noqa: F401
    ChaosGameMetrics,
    PointCloud,
    generate_points,
    iterate_points,
    normalize_points,
    select_transform,
)

__all__ = [
    'ChaosGameMetrics',
    'PointCloud',
    'generate_points',
    'iterate_points',
    'normalize_points',
    'select_transform',
]
