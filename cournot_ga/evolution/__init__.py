"""Evolutionary engine for cournot_ga."""

from .chromosome import Chromosome, CournotPayoff, bit_mask, low_bits
from .operators import (
    cross_population,
    fitness_shares,
    low_bit_crossover,
    mutate_population,
    pair_population,
    roulette_index,
    select_population,
)
from .run import GenerationStats, PopulationSnapshot, Run, RunState

__all__ = [
    "Chromosome",
    "CournotPayoff",
    "bit_mask",
    "low_bits",
    "cross_population",
    "fitness_shares",
    "low_bit_crossover",
    "mutate_population",
    "pair_population",
    "roulette_index",
    "select_population",
    "GenerationStats",
    "PopulationSnapshot",
    "Run",
    "RunState",
]
