"""Affine transform of a 3D IFS genome."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Sequence

from ifsevo.utils.validation import ValidationError

Matrix3 = tuple[float, float, float, float, float, float, float, float, float]
Color = tuple[float, float, float]


def _as_matrix(values: Sequence[float]) -> Matrix3:
    if len(values) != 9:
        raise ValidationError("invalid_matrix", "Matrix must have exactly 9 entries", length=len(values))
    return tuple(float(v) for v in values)  # type: ignore[return-value]


@dataclass(frozen=True)
class Transform:
    """A weighted affine map ``p' = M p + t``.

    Attributes:
        m: 3x3 linear part, row-major
        tx, ty, tz: Translation
        probability: Relative selection weight within a genome (> 0, unnormalized)
        color: RGB channels in [0, 255]
    """

    m: Matrix3
    tx: float = 0.0
    ty: float = 0.0
    tz: float = 0.0
    probability: float = 1.0
    color: Color = field(default=(255.0, 255.0, 255.0))

    def __post_init__(self) -> None:
        object.__setattr__(self, "m", _as_matrix(self.m))
        if len(self.color) != 3:
            raise ValidationError("invalid_color", "Color must have 3 channels", length=len(self.color))
        object.__setattr__(self, "color", tuple(float(c) for c in self.color))
        for name in ("tx", "ty", "tz", "probability"):
            object.__setattr__(self, name, float(getattr(self, name)))

        values = list(self.m) + [self.tx, self.ty, self.tz, self.probability] + list(self.color)
        if not all(math.isfinite(v) for v in values):
            raise ValidationError("non_finite_transform", "Transform fields must be finite", transform=repr(self))
        if self.probability <= 0:
            raise ValidationError("invalid_probability", "Transform probability must be > 0", probability=self.probability)
        if not all(0.0 <= c <= 255.0 for c in self.color):
            raise ValidationError("invalid_color", "Color channels must be in [0, 255]", color=self.color)

    @property
    def translation(self) -> tuple[float, float, float]:
        return (self.tx, self.ty, self.tz)

    def apply(self, x: float, y: float, z: float) -> tuple[float, float, float]:
        m = self.m
        return (
            m[0] * x + m[1] * y + m[2] * z + self.tx,
            m[3] * x + m[4] * y + m[5] * z + self.ty,
            m[6] * x + m[7] * y + m[8] * z + self.tz,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "m": list(self.m),
            "tx": self.tx,
            "ty": self.ty,
            "tz": self.tz,
            "probability": self.probability,
            "color": list(self.color),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Transform":
        return cls(
            m=tuple(data["m"]),
            tx=data.get("tx", 0.0),
            ty=data.get("ty", 0.0),
            tz=data.get("tz", 0.0),
            probability=data.get("probability", 1.0),
            color=tuple(data.get("color", (255, 255, 255))),
        )


__all__ = ["Transform", "Matrix3", "Color"]
