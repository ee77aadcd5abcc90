"""3x3 transform algebra: contractivity and approximate decomposition.

The spectral radius is approximated by a scaled Frobenius norm instead of
solving the characteristic cubic. The decomposition is likewise an
approximation (not an SVD); shear leaks into the rotation estimate and
``reconstruct_matrix(decompose_matrix(m))`` only approximately returns ``m``.
Mutation behavior depends on both approximations staying exactly as they are.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from ifsevo.core.transform import Matrix3, Transform

DEFAULT_CONTRACTIVE_THRESHOLD = 0.95
DEFAULT_MAX_CONTRACTIVITY = 0.85


def spectral_radius(m: Sequence[float]) -> float:
    """Approximate spectral radius: ``sqrt(sum(m[i]^2) / 3)``."""
    return math.sqrt(sum(v * v for v in m) / 3)


def determinant3x3(m: Sequence[float]) -> float:
    return (
        m[0] * (m[4] * m[8] - m[5] * m[7])
        - m[1] * (m[3] * m[8] - m[5] * m[6])
        + m[2] * (m[3] * m[7] - m[4] * m[6])
    )


def is_contractive(t: Transform, threshold: float = DEFAULT_CONTRACTIVE_THRESHOLD) -> bool:
    return spectral_radius(t.m) < threshold and abs(determinant3x3(t.m)) < threshold


def enforce_contractivity(m: Sequence[float], max_contractivity: float = DEFAULT_MAX_CONTRACTIVITY) -> Sequence[float]:
    """Uniformly shrink ``m`` so its spectral radius is at most ``max_contractivity``.

    Matrices already within the bound are returned as-is (same object).
    """
    sr = spectral_radius(m)
    if sr > max_contractivity:
        scale = max_contractivity / sr
        return tuple(v * scale for v in m)
    return m


def enforce_transform_contractivity(t: Transform, max_contractivity: float = DEFAULT_MAX_CONTRACTIVITY) -> Transform:
    m = enforce_contractivity(t.m, max_contractivity)
    if m is t.m:
        return t
    return Transform(m=m, tx=t.tx, ty=t.ty, tz=t.tz, probability=t.probability, color=t.color)


@dataclass(frozen=True)
class MatrixParams:
    scale_x: float
    scale_y: float
    scale_z: float
    rotation_x: float
    rotation_y: float
    rotation_z: float
    shear_xy: float
    shear_xz: float
    shear_yz: float


def decompose_matrix(m: Sequence[float]) -> MatrixParams:
    """Split ``m`` into per-column scale, Euler angles and residual shear.

    Zero-norm columns divide by 1 instead of 0.
    """
    scale_x = math.sqrt(m[0] * m[0] + m[3] * m[3] + m[6] * m[6])
    scale_y = math.sqrt(m[1] * m[1] + m[4] * m[4] + m[7] * m[7])
    scale_z = math.sqrt(m[2] * m[2] + m[5] * m[5] + m[8] * m[8])

    dx = scale_x or 1.0
    dy = scale_y or 1.0
    dz = scale_z or 1.0

    # asin domain guard against rounding just past +/-1
    rotation_y = math.asin(max(-1.0, min(1.0, -m[6] / dx)))
    rotation_x = math.atan2(m[7] / dy, m[8] / dz)
    rotation_z = math.atan2(m[3] / dx, m[0] / dx)

    return MatrixParams(
        scale_x=scale_x,
        scale_y=scale_y,
        scale_z=scale_z,
        rotation_x=rotation_x,
        rotation_y=rotation_y,
        rotation_z=rotation_z,
        shear_xy=m[1] / dy - math.sin(rotation_z),
        shear_xz=m[2] / dz,
        shear_yz=m[5] / dz,
    )


def reconstruct_matrix(params: MatrixParams) -> Matrix3:
    """Rebuild a matrix from X-Y-Z Euler rotation, column scale and shear."""
    cx, sx = math.cos(params.rotation_x), math.sin(params.rotation_x)
    cy, sy = math.cos(params.rotation_y), math.sin(params.rotation_y)
    cz, sz = math.cos(params.rotation_z), math.sin(params.rotation_z)

    r = (
        cy * cz, -cy * sz, sy,
        sx * sy * cz + cx * sz, -sx * sy * sz + cx * cz, -sx * cy,
        -cx * sy * cz + sx * sz, cx * sy * sz + sx * cz, cx * cy,
    )

    return (
        r[0] * params.scale_x,
        r[1] * params.scale_y + params.shear_xy * params.scale_y,
        r[2] * params.scale_z + params.shear_xz * params.scale_z,
        r[3] * params.scale_x,
        r[4] * params.scale_y,
        r[5] * params.scale_z + params.shear_yz * params.scale_z,
        r[6] * params.scale_x,
        r[7] * params.scale_y,
        r[8] * params.scale_z,
    )


def rotation_matrix(angle_x: float, angle_y: float, angle_z: float, scale: float = 1.0) -> Matrix3:
    """Uniformly scaled Z-Y-X rotation used by the random transform constructor."""
    cx, sx = math.cos(angle_x), math.sin(angle_x)
    cy, sy = math.cos(angle_y), math.sin(angle_y)
    cz, sz = math.cos(angle_z), math.sin(angle_z)

    return (
        scale * cy * cz,
        scale * (sx * sy * cz - cx * sz),
        scale * (cx * sy * cz + sx * sz),
        scale * cy * sz,
        scale * (sx * sy * sz + cx * cz),
        scale * (cx * sy * sz - sx * cz),
        scale * -sy,
        scale * sx * cy,
        scale * cx * cy,
    )


__all__ = [
    "spectral_radius",
    "determinant3x3",
    "is_contractive",
    "enforce_contractivity",
    "enforce_transform_contractivity",
    "MatrixParams",
    "decompose_matrix",
    "reconstruct_matrix",
    "rotation_matrix",
    "DEFAULT_CONTRACTIVE_THRESHOLD",
    "DEFAULT_MAX_CONTRACTIVITY",
]
