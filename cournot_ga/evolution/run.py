"""Generational evolution engine.

Implements:
- PopulationSnapshot: immutable aggregate of a population, taken before any
  individual is evaluated
- GenerationStats: per-generation (aggregate, variance) record
- Run: owns the population and drives evaluate -> select -> cross -> mutate
  for a fixed number of generations
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping

import numpy as np

from cournot_ga.evolution.chromosome import MAX_LENGTH, Chromosome, CournotPayoff
from cournot_ga.evolution.operators import cross_population, mutate_population, select_population
from cournot_ga.utils.rng_manager import RNGManager
from cournot_ga.utils.validation import ValidationError, check_finite, check_int, check_probability


class RunState(Enum):
    INITIALIZED = "initialized"
    EVALUATING = "evaluating"
    SELECTING = "selecting"
    RECOMBINING = "recombining"
    MUTATING = "mutating"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class GenerationStats:
    """Summary of one evaluated generation.

    Attributes:
        aggregate_value: Sum of all chromosome values (``ind_out``)
        variance: Population variance of chromosome values (``var``)
    """

    aggregate_value: int
    variance: float


@dataclass(frozen=True)
class PopulationSnapshot:
    values: tuple[int, ...]
    data_sum: int

    @classmethod
    def of(cls, population: list[Chromosome]) -> "PopulationSnapshot":
        values = tuple(ind.value for ind in population)
        return cls(values=values, data_sum=sum(values))

    def variance(self) -> float:
        if not self.values:
            return 0.0
        return float(np.var(np.asarray(self.values, dtype=np.float64)))

    def stats(self) -> GenerationStats:
        return GenerationStats(aggregate_value=self.data_sum, variance=self.variance())


class Run:
    """A single evolution run with fixed parameters.

    Args:
        p_cross: Probability that a pair exchanges its low bits
        p_mut: Probability that an individual has one bit flipped
        length: Chromosome width ``L`` in bits (1..64)
        n: Population size
        z: Number of low-order bits exchanged by crossover (0..L)
        rng_manager: Source of randomness; a fresh unseeded one by default
        payoff: Fitness constants; ``CournotPayoff()`` by default
        init_bound: Initial values are drawn from ``[0, min(init_bound, 2**L))``
    """

    def __init__(self, p_cross: float, p_mut: float, length: int, n: int, z: int, *,
                 rng_manager: RNGManager | None = None, payoff: CournotPayoff | None = None,
                 init_bound: int = 1024) -> None:
        self.p_cross = check_probability("p_cross", p_cross)
        self.p_mut = check_probability("p_mut", p_mut)
        self.length = check_int("length", length, minimum=1, maximum=MAX_LENGTH, error_type="invalid_length")
        self.n = check_int("n", n, minimum=1, error_type="invalid_population_size")
        if isinstance(z, bool) or not isinstance(z, int) or not 0 <= z <= self.length:
            raise ValidationError(
                "invalid_crossover_bits",
                "z must be an integer in [0, length]",
                z=z,
                length=self.length,
            )
        self.z = z
        init_bound = check_int("init_bound", init_bound, minimum=1, error_type="invalid_init_bound")
        self.init_bound = min(init_bound, 1 << self.length)

        self.payoff = payoff if payoff is not None else CournotPayoff()
        check_finite("payoff_scale", self.payoff.payoff_scale)
        check_finite("competition", self.payoff.competition)

        self.rng_manager = rng_manager if rng_manager is not None else RNGManager()
        init_rng = self.rng_manager.get_context_rng('init')
        self.population: list[Chromosome] = [Chromosome.create(self.init_bound, init_rng) for _ in range(self.n)]
        self.total_fitness = 0.0
        self.data_sum = 0
        self.period = 0
        self.state = RunState.INITIALIZED

    @classmethod
    def from_config(cls, config: Mapping[str, Any], rng_manager: RNGManager | None = None) -> "Run":
        if rng_manager is None and config.get('seed') is not None:
            rng_manager = RNGManager(seed=int(config['seed']))
        payoff = CournotPayoff(
            payoff_scale=float(config.get('payoff_scale', 20000.0)),
            competition=float(config.get('competition', 0.52)),
        )
        return cls(
            config.get('crossover_probability', 0.322),
            config.get('mutation_probability', 0.00522),
            config.get('chromosome_length', 10),
            config.get('population_size', 30),
            config.get('crossover_bits', 2),
            rng_manager=rng_manager,
            payoff=payoff,
            init_bound=config.get('init_bound', 1024),
        )

    def snapshot(self) -> PopulationSnapshot:
        return PopulationSnapshot.of(self.population)

    def evaluate(self) -> PopulationSnapshot:
        """Score every individual against the aggregate of the current population."""
        self.state = RunState.EVALUATING
        snap = self.snapshot()
        self.data_sum = snap.data_sum
        for ind in self.population:
            ind.compute_fitness(snap.data_sum, self.payoff)
        self.total_fitness = math.fsum(ind.fitness for ind in self.population)
        return snap

    def select(self) -> None:
        self.state = RunState.SELECTING
        self.population = select_population(self.population, self.rng_manager.get_context_rng('selection'))

    def cross(self) -> None:
        self.state = RunState.RECOMBINING
        self.population = cross_population(
            self.population, self.p_cross, self.z, self.length,
            self.rng_manager.get_context_rng('crossover'),
            pairing_rng=self.rng_manager.get_context_rng('pairing'),
        )

    def mutate(self) -> int:
        self.state = RunState.MUTATING
        return mutate_population(self.population, self.p_mut, self.length, self.rng_manager.get_context_rng('mutation'))

    def step(self) -> GenerationStats:
        """Run one generation and return the statistics of the evaluated population."""
        stats = self.evaluate().stats()
        self.select()
        self.cross()
        mutated = self.mutate()
        self.period += 1
        logging.debug(
            "generation=%d data_sum=%d variance=%.4f total_fitness=%.4f mutated=%d",
            self.period, stats.aggregate_value, stats.variance, self.total_fitness, mutated,
        )
        return stats

    def run(self, iterations: int,
            should_stop: Callable[[], bool] | None = None) -> tuple[list[Chromosome], list[GenerationStats]]:
        """Evolve for `iterations` generations.

        `should_stop` is polled between generations; a truthy result ends the
        run early with the statistics collected so far.

        Returns:
            (final_population, statistics)
        """
        iterations = check_int("iterations", iterations, minimum=0, error_type="invalid_iterations")
        statistics: list[GenerationStats] = []
        for _ in range(iterations):
            if should_stop is not None and should_stop():
                logging.info("Run stopped after %d of %d generations", len(statistics), iterations)
                break
            statistics.append(self.step())
        self.state = RunState.TERMINATED
        return [ind.clone() for ind in self.population], statistics

    def best(self) -> Chromosome:
        """Individual with the highest cached fitness."""
        return max(self.population, key=lambda ind: ind.fitness)


__all__ = ["RunState", "GenerationStats", "PopulationSnapshot", "Run"]
