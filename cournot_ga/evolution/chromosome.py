"""Chromosome representation and Cournot payoff."""

from __future__ import annotations

import random
from dataclasses import dataclass

MAX_LENGTH = 64


def bit_mask(width: int) -> int:
    """Mask with the low `width` bits set; ``bit_mask(0) == 0``."""
    if width <= 0:
        return 0
    return (1 << width) - 1


def low_bits(value: int, width: int) -> int:
    return value & bit_mask(width)


@dataclass(frozen=True)
class CournotPayoff:
    """Constants of the quantity-competition payoff.

    Attributes:
        payoff_scale: Intercept ``K`` of the inverse demand curve
        competition: Sensitivity ``c`` of the price to the rivals' output
    """

    payoff_scale: float = 20000.0
    competition: float = 0.52

    def __call__(self, value: int, aggregate: int) -> float:
        # Rivals' output; the aggregate always includes `value` for a
        # well-formed population
        diff = aggregate - value
        if diff < 0:
            return 0.0
        q = float(value)
        raw = ((self.payoff_scale - q) - self.competition * float(diff)) * q
        return raw if raw > 0.0 else 0.0


DEFAULT_PAYOFF = CournotPayoff()


@dataclass
class Chromosome:
    """A candidate output level encoded as an unsigned fixed-width integer.

    Attributes:
        value: Encoded output quantity
        fitness: Payoff cached by the last evaluation
    """

    value: int = 0
    fitness: float = 0.0

    @classmethod
    def create(cls, bound: int, rng: random.Random) -> "Chromosome":
        """Draw a chromosome with value uniform in ``[0, bound)``."""
        return cls(value=rng.randrange(bound))

    def compute_fitness(self, aggregate: int, payoff: CournotPayoff = DEFAULT_PAYOFF) -> float:
        self.fitness = payoff(self.value, aggregate)
        return self.fitness

    def clone(self) -> "Chromosome":
        return Chromosome(value=self.value, fitness=self.fitness)


__all__ = [
    "MAX_LENGTH",
    "bit_mask",
    "low_bits",
    "CournotPayoff",
    "DEFAULT_PAYOFF",
    "Chromosome",
]
