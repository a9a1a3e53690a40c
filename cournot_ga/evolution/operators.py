"""Selection, pairing, crossover and mutation operators.

All operators take the random generator they consume explicitly so that a
seeded ``RNGManager`` reproduces a run exactly.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Sequence

from cournot_ga.evolution.chromosome import Chromosome, bit_mask


def fitness_shares(fitnesses: Sequence[float]) -> list[float]:
    """Normalize fitnesses into selection probabilities.

    A zero or non-finite total falls back to uniform shares instead of
    producing NaN.
    """
    total = math.fsum(fitnesses)
    if total > 0 and math.isfinite(total):
        return [f / total for f in fitnesses]
    if fitnesses:
        logging.warning("Total fitness is %r; falling back to uniform selection", total)
        return [1.0 / len(fitnesses) for _ in fitnesses]
    return []


def roulette_index(shares: Sequence[float], draw: float) -> int:
    """Index of the first individual whose cumulative share reaches `draw`.

    When rounding leaves the cumulative sum below `draw` (e.g. ``draw == 1.0``)
    the last index is returned.
    """
    if not shares:
        raise ValueError("Cannot select from an empty population")
    cumulative = 0.0
    for i, share in enumerate(shares):
        cumulative += share
        if cumulative >= draw:
            return i
    return len(shares) - 1


def roulette_select(population: Sequence[Chromosome], shares: Sequence[float], rng: random.Random) -> Chromosome:
    return population[roulette_index(shares, rng.random())].clone()


def select_population(population: Sequence[Chromosome], rng: random.Random) -> list[Chromosome]:
    """Fitness-proportionate selection of a full replacement generation."""
    shares = fitness_shares([ind.fitness for ind in population])
    return [roulette_select(population, shares, rng) for _ in range(len(population))]


def pair_population(
    population: Sequence[Chromosome], rng: random.Random
) -> tuple[list[tuple[Chromosome, Chromosome]], Chromosome | None]:
    """Randomly partition the population into disjoint pairs.

    Returns the pairs and, for an odd population, the individual left over.
    """
    order = list(population)
    rng.shuffle(order)
    leftover = order.pop() if len(order) % 2 else None
    pairs = [(order[i], order[i + 1]) for i in range(0, len(order), 2)]
    return pairs, leftover


def low_bit_crossover(parent1: Chromosome, parent2: Chromosome, z: int, length: int) -> tuple[Chromosome, Chromosome]:
    """Exchange the low `z` bits of two parents, keeping each one's high bits."""
    low = bit_mask(z)
    high = bit_mask(length) & ~low
    child1 = Chromosome(value=(parent1.value & high) | (parent2.value & low))
    child2 = Chromosome(value=(parent2.value & high) | (parent1.value & low))
    return child1, child2


def cross_population(
    population: Sequence[Chromosome], p_cross: float, z: int, length: int, rng: random.Random,
    pairing_rng: random.Random | None = None,
) -> list[Chromosome]:
    """Pair the population and apply low-bit crossover to each pair with probability `p_cross`.

    `pairing_rng` drives partner assignment; `rng` is used for it as well when omitted.
    """
    pairs, leftover = pair_population(population, pairing_rng or rng)
    offspring: list[Chromosome] = []
    crossed = 0
    for parent1, parent2 in pairs:
        if rng.random() < p_cross:
            offspring.extend(low_bit_crossover(parent1, parent2, z, length))
            crossed += 1
        else:
            offspring.extend((parent1.clone(), parent2.clone()))
    if leftover is not None:
        offspring.append(leftover.clone())
    logging.debug("Crossover applied to %d of %d pairs", crossed, len(pairs))
    return offspring


def flip_random_bit(chromosome: Chromosome, length: int, rng: random.Random) -> int:
    """Flip one uniformly chosen bit of `chromosome` in place; returns its position."""
    position = rng.randrange(length)
    chromosome.value = (chromosome.value ^ (1 << position)) & bit_mask(length)
    return position


def mutate_population(population: Sequence[Chromosome], p_mut: float, length: int, rng: random.Random) -> int:
    """One mutation trial per individual; returns how many were mutated."""
    mutated = 0
    for ind in population:
        if rng.random() < p_mut:
            flip_random_bit(ind, length, rng)
            mutated += 1
    return mutated


__all__ = [
    "fitness_shares",
    "roulette_index",
    "roulette_select",
    "select_population",
    "pair_population",
    "low_bit_crossover",
    "cross_population",
    "flip_random_bit",
    "mutate_population",
]
