"""Genome: the evolvable unit, an ordered set of weighted transforms."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Sequence

from ifsevo.core.transform import Transform
from ifsevo.utils.validation import ValidationError

MIN_TRANSFORMS = 2
MAX_TRANSFORMS = 8


class Rating(str, Enum):
    UP = "up"
    DOWN = "down"


def parse_rating(value: Any) -> Rating | None:
    if value is None or isinstance(value, Rating):
        return value
    try:
        return Rating(str(value).lower())
    except ValueError as exc:
        raise ValidationError("invalid_rating", f"Unknown rating: {value!r}", rating=value) from exc


@dataclass(frozen=True)
class Genome:
    """Immutable IFS genome.

    Attributes:
        genome_id: Opaque unique identifier
        transforms: 2-8 transforms
        generation: Generation index (0 for seed/random genomes)
        parent_ids: 0 (seed/random), 1 (mutation) or 2 (crossover) parent ids
        rating: ``Rating.UP``, ``Rating.DOWN`` or ``None`` when unrated
        comment: Free-form user note carried alongside the genome
    """

    genome_id: str
    transforms: tuple[Transform, ...]
    generation: int = 0
    parent_ids: tuple[str, ...] = field(default_factory=tuple)
    rating: Rating | None = None
    comment: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "transforms", tuple(self.transforms))
        object.__setattr__(self, "parent_ids", tuple(self.parent_ids))
        object.__setattr__(self, "rating", parse_rating(self.rating))

        count = len(self.transforms)
        if count < MIN_TRANSFORMS or count > MAX_TRANSFORMS:
            raise ValidationError(
                "invalid_transform_count",
                f"Genome must have {MIN_TRANSFORMS}-{MAX_TRANSFORMS} transforms",
                genome_id=self.genome_id,
                count=count,
            )
        if len(self.parent_ids) > 2:
            raise ValidationError("invalid_parents", "Genome has at most two parents", parent_ids=self.parent_ids)
        if self.generation < 0:
            raise ValidationError("invalid_generation", "Generation must be >= 0", generation=self.generation)

    @property
    def transform_count(self) -> int:
        return len(self.transforms)

    def with_rating(self, rating: Rating | str | None) -> "Genome":
        return replace(self, rating=parse_rating(rating))

    def with_generation(self, generation: int) -> "Genome":
        return replace(self, generation=int(generation))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.genome_id,
            "transforms": [t.to_dict() for t in self.transforms],
            "generation": self.generation,
            "parent_ids": list(self.parent_ids),
            "rating": self.rating.value if self.rating is not None else None,
            "comment": self.comment,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Genome":
        return cls(
            genome_id=str(data["id"]),
            transforms=tuple(Transform.from_dict(t) for t in data["transforms"]),
            generation=int(data.get("generation", 0)),
            parent_ids=tuple(data.get("parent_ids", ())),
            rating=data.get("rating"),
            comment=data.get("comment"),
        )


def toggle_rating(genome: Genome, rating: Rating | str) -> Genome:
    """Apply a like/dislike click: rating the same way twice clears it."""
    rating = parse_rating(rating)
    return genome.with_rating(None if genome.rating == rating else rating)


def child_generation(parents: Sequence[Genome]) -> int:
    if not parents:
        return 0
    return max(p.generation for p in parents) + 1


__all__ = [
    "Genome",
    "Rating",
    "parse_rating",
    "toggle_rating",
    "child_generation",
    "MIN_TRANSFORMS",
    "MAX_TRANSFORMS",
]
