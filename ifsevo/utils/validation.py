"""Validation error type shared across ifsevo."""

from __future__ import annotations

from typing import Any


class ValidationError(ValueError):
    """Contract violation raised by ifsevo.

    Attributes:
        code: Short snake_case error code (e.g. ``invalid_config``)
        context: Extra keyword context describing the failure
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        super().__init__(message)
        self.code = code
        self.context = context

    def __str__(self) -> str:
        base = super().__str__()
        if not self.context:
            return f"[{self.code}] {base}"
        details = ", ".join(f"{k}={v!r}" for k, v in sorted(self.context.items()))
        return f"[{self.code}] {base} ({details})"


__all__ = ["ValidationError"]
