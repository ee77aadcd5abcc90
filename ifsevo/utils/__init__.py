"""Utility helpers for ifsevo."""

from .id_provider import CounterIDProvider, IDProvider, UUIDProvider
from .rng_manager import (
    DefaultRandomSource,
    Mulberry32,
    RandomSource,
    RNGManager,
    generate_random_seed,
)
from .validation import ValidationError

__all__ = [
    "CounterIDProvider",
    "IDProvider",
    "UUIDProvider",
    "DefaultRandomSource",
    "Mulberry32",
    "RandomSource",
    "RNGManager",
    "generate_random_seed",
    "ValidationError",
]
