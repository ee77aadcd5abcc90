"""Evolution configuration and named presets."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping

from ifsevo.evolution.operators import CrossoverType, MutationType
from ifsevo.utils.validation import ValidationError


def _invalid(field_name: str, value: Any, message: str) -> ValidationError:
    return ValidationError("invalid_config", f"{field_name}: {message}", field=field_name, value=value)


@dataclass(frozen=True)
class EvolutionConfig:
    """Parameters consumed by :func:`ifsevo.evolution.engine.evolve_generation`.

    Attributes:
        population_size: Target size of each new generation (> 0)
        mutation_rate: Chance a crossover child is additionally mutated
        crossover_rate: Chance a child is bred by crossover instead of mutation
        mutation_strength: Mutation magnitude in (0, 1]
        mutation_type: Per-transform mutation strategy
        crossover_type: Crossover strategy
        elite_count: Max number of up-rated genomes carried over
        random_injection: Fresh random genomes added per generation
        tournament_size: Tournament size; 1 switches to roulette selection
        enforce_contractivity: Rescale crossover output to the contractivity bound
        allow_structural_mutation: Allow adding/removing whole transforms
        structural_mutation_rate: Chance of each structural add/remove
    """

    population_size: int = 16
    mutation_rate: float = 0.8
    crossover_rate: float = 0.6
    mutation_strength: float = 0.12
    mutation_type: MutationType = MutationType.STRUCTURED
    crossover_type: CrossoverType = CrossoverType.BLEND
    elite_count: int = 2
    random_injection: int = 1
    tournament_size: int = 3
    enforce_contractivity: bool = True
    allow_structural_mutation: bool = True
    structural_mutation_rate: float = 0.08

    def __post_init__(self) -> None:
        object.__setattr__(self, "mutation_type", MutationType.parse(self.mutation_type))
        object.__setattr__(self, "crossover_type", CrossoverType.parse(self.crossover_type))

        for name in ("population_size", "elite_count", "random_injection", "tournament_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise _invalid(name, value, "must be an integer")
        for name in ("enforce_contractivity", "allow_structural_mutation"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise _invalid(name, value, "must be a boolean")

        if self.population_size <= 0:
            raise _invalid("population_size", self.population_size, "must be > 0")
        for name in ("mutation_rate", "crossover_rate", "structural_mutation_rate"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise _invalid(name, value, "must be in [0, 1]")
        if not 0.0 < self.mutation_strength <= 1.0:
            raise _invalid("mutation_strength", self.mutation_strength, "must be in (0, 1]")
        if self.elite_count < 0:
            raise _invalid("elite_count", self.elite_count, "must be >= 0")
        if self.random_injection < 0:
            raise _invalid("random_injection", self.random_injection, "must be >= 0")
        if self.tournament_size < 1:
            raise _invalid("tournament_size", self.tournament_size, "must be >= 1")

    def replace(self, **changes: Any) -> "EvolutionConfig":
        return self.from_dict({**self.to_dict(), **changes})

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["mutation_type"] = self.mutation_type.value
        data["crossover_type"] = self.crossover_type.value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EvolutionConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValidationError("unknown_config_key", f"Unknown config keys: {unknown}", keys=unknown)
        return cls(**dict(data))


DEFAULT_CONFIG = EvolutionConfig()

PRESETS: dict[str, EvolutionConfig] = {
    "conservative": replace(
        DEFAULT_CONFIG,
        mutation_rate=0.5,
        mutation_strength=0.06,
        crossover_rate=0.4,
        elite_count=4,
        random_injection=0,
        allow_structural_mutation=False,
    ),
    "exploratory": replace(
        DEFAULT_CONFIG,
        mutation_rate=1.0,
        mutation_strength=0.3,
        mutation_type=MutationType.RANDOM,
        crossover_rate=0.8,
        crossover_type=CrossoverType.PARAMETER,
        elite_count=1,
        random_injection=3,
        structural_mutation_rate=0.2,
    ),
    "balanced": DEFAULT_CONFIG,
    "colorFocused": replace(
        DEFAULT_CONFIG,
        mutation_type=MutationType.COLOR,
        mutation_strength=0.2,
        crossover_type=CrossoverType.UNIFORM,
    ),
    "structural": replace(
        DEFAULT_CONFIG,
        mutation_type=MutationType.STRUCTURED,
        mutation_strength=0.2,
        crossover_type=CrossoverType.SINGLE_POINT,
        structural_mutation_rate=0.25,
    ),
}


def get_preset(name: str) -> EvolutionConfig:
    try:
        return PRESETS[name]
    except KeyError as exc:
        raise ValidationError("unknown_preset", f"Unknown preset: {name}", name=name, available=sorted(PRESETS)) from exc


__all__ = ["EvolutionConfig", "DEFAULT_CONFIG", "PRESETS", "get_preset"]
