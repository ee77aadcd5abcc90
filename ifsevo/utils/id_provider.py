"""Genome id providers.

Ids are produced by an explicit provider object passed to constructors and
operators instead of a module-level counter, so independent runs (and
tests) never share id state.
"""

from __future__ import annotations

import itertools
import uuid


class IDProvider:
    """Produces unique opaque genome ids."""

    def next_id(self) -> str:  # pragma: no cover - abstract
        raise NotImplementedError

    def __call__(self) -> str:
        return self.next_id()


class CounterIDProvider(IDProvider):
    """Monotonic ``<prefix>-<n>`` ids, counting per instance."""

    def __init__(self, prefix: str = "fractal3d", start: int = 0) -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)

    def next_id(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"


class UUIDProvider(IDProvider):
    """Random uuid4 ids."""

    def next_id(self) -> str:
        return str(uuid.uuid4())


__all__ = ["IDProvider", "CounterIDProvider", "UUIDProvider"]
