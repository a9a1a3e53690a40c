"""Error types raised by the engine and its collaborators."""

from __future__ import annotations

import math
from typing import Any


class ValidationError(ValueError):
    """Raised when a run is configured with parameters it cannot honor.

    Attributes:
        error_type: Short machine-readable code (e.g. ``invalid_probability``)
        message: Human-readable description
        details: Offending values and context
    """

    def __init__(self, error_type: str, message: str, **details: Any) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if not self.details:
            return f"[{self.error_type}] {self.message}"
        ctx = ", ".join(f"{k}={v!r}" for k, v in sorted(self.details.items()))
        return f"[{self.error_type}] {self.message} ({ctx})"


class StatisticsExportError(Exception):
    """Persisting the statistics stream failed; the run itself is unaffected."""

    def __init__(self, path: Any, reason: str) -> None:
        super().__init__(f"could not write statistics to {path}: {reason}")
        self.path = path
        self.reason = reason


def check_probability(name: str, value: Any) -> float:
    try:
        p = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError("invalid_probability", f"{name} must be a number", param=name, value=value) from exc
    if not math.isfinite(p) or p < 0.0 or p > 1.0:
        raise ValidationError("invalid_probability", f"{name} must lie in [0, 1]", param=name, value=value)
    return p


def check_int(name: str, value: Any, *, minimum: int, maximum: int | None = None, error_type: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(error_type, f"{name} must be an integer", param=name, value=value)
    if value < minimum or (maximum is not None and value > maximum):
        bounds = f"[{minimum}, {maximum}]" if maximum is not None else f">= {minimum}"
        raise ValidationError(error_type, f"{name} must be {bounds}", param=name, value=value)
    return value


def check_finite(name: str, value: Any) -> float:
    try:
        x = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError("invalid_constant", f"{name} must be a number", param=name, value=value) from exc
    if not math.isfinite(x):
        raise ValidationError("invalid_constant", f"{name} must be finite", param=name, value=value)
    return x


__all__ = [
    "ValidationError",
    "StatisticsExportError",
    "check_probability",
    "check_int",
    "check_finite",
]
