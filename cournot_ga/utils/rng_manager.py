"""Deterministic random number management.

Each phase of a generation draws from its own named context so that, for a
fixed seed, changing how often one phase consumes randomness does not shift
the stream seen by the others.
"""

from __future__ import annotations

import hashlib
import random
from typing import Any


class RNGManager:
    """Hands out per-context ``random.Random`` instances derived from one seed."""

    CONTEXTS = ('init', 'selection', 'pairing', 'crossover', 'mutation')

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = random.SystemRandom().randrange(2**63)
        self.seed = int(seed)
        self._contexts: dict[str, random.Random] = {}
        for name in self.CONTEXTS:
            self.get_context_rng(name)

    def _derive_seed(self, context: str) -> int:
        digest = hashlib.sha256(f"{self.seed}:{context}".encode("utf-8")).digest()
        return int.from_bytes(digest[:8], "big")

    def get_context_rng(self, context: str) -> random.Random:
        """Return the generator for `context`, creating it on first use."""
        rng = self._contexts.get(context)
        if rng is None:
            rng = random.Random(self._derive_seed(context))
            self._contexts[context] = rng
        return rng

    def get_state(self) -> dict[str, Any]:
        return {name: rng.getstate() for name, rng in self._contexts.items()}

    def set_state(self, state: dict[str, Any]) -> None:
        for name, rng_state in state.items():
            self.get_context_rng(name).setstate(rng_state)


__all__ = ["RNGManager"]
