"""Configuration presets for evolution runs.

Configs are plain dicts; the engine reads them with ``config.get(key, default)``
so a partial dict is always valid.
"""

from __future__ import annotations

from typing import Any, Mapping

from cournot_ga.utils.validation import ValidationError

DEFAULT_CONFIG: dict[str, Any] = {
    'crossover_probability': 0.322,
    'mutation_probability': 0.00522,
    'chromosome_length': 10,
    'population_size': 30,
    'crossover_bits': 2,
    # Payoff constants K and c of the Cournot fitness
    'payoff_scale': 20000.0,
    'competition': 0.52,
    # Initial values are drawn from [0, init_bound), capped at 2**chromosome_length
    'init_bound': 1024,
    'iterations': 1000,
    'seed': None,
}

PRESET_MINIMAL: dict[str, Any] = {
    **DEFAULT_CONFIG,
    'population_size': 8,
    'iterations': 50,
}

PRESET_STANDARD: dict[str, Any] = dict(DEFAULT_CONFIG)

PRESET_RESEARCH: dict[str, Any] = {
    **DEFAULT_CONFIG,
    'crossover_probability': 0.2,
    'mutation_probability': 0.5,
    'chromosome_length': 64,
    'population_size': 128,
    'crossover_bits': 16,
}

PRESETS: dict[str, dict[str, Any]] = {
    'minimal': PRESET_MINIMAL,
    'standard': PRESET_STANDARD,
    'research': PRESET_RESEARCH,
}


def merge_config(base: Mapping[str, Any], overrides: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Return a copy of `base` with `overrides` applied; unknown keys are rejected."""
    overrides = overrides or {}
    extras = [k for k in overrides if k not in DEFAULT_CONFIG]
    if extras:
        raise ValidationError(
            "unknown_config_key",
            f"Unknown configuration keys: {sorted(extras)}",
            extras=tuple(sorted(extras)),
        )
    merged = dict(base)
    merged.update(overrides)
    return merged


def get_preset(name: str) -> dict[str, Any]:
    try:
        return dict(PRESETS[name.lower()])
    except KeyError:
        raise ValidationError("unknown_preset", f"Unknown preset: {name}", known=tuple(PRESETS)) from None


__all__ = [
    "DEFAULT_CONFIG",
    "PRESET_MINIMAL",
    "PRESET_STANDARD",
    "PRESET_RESEARCH",
    "PRESETS",
    "merge_config",
    "get_preset",
]
