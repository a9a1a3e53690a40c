import random

import pytest

from cournot_ga.evolution.chromosome import Chromosome, CournotPayoff, bit_mask, low_bits


def test_create_draws_within_bound():
    rng = random.Random(3)
    values = [Chromosome.create(1024, rng).value for _ in range(500)]
    assert all(0 <= v < 1024 for v in values)
    assert len(set(values)) > 100


def test_create_starts_with_zero_fitness():
    assert Chromosome.create(10, random.Random(0)).fitness == 0.0


def test_fitness_matches_cournot_payoff():
    ind = Chromosome(value=100)
    # ((K - q) - c * (S - q)) * q with K=20000, c=0.52, S=1000
    assert ind.compute_fitness(1000) == pytest.approx((19900 - 0.52 * 900) * 100)
    assert ind.fitness == pytest.approx(1943200.0)


def test_fitness_uses_configured_constants():
    payoff = CournotPayoff(payoff_scale=1000.0, competition=1.0)
    assert Chromosome(value=10).compute_fitness(110, payoff) == pytest.approx((990 - 100) * 10)


def test_fitness_zero_when_aggregate_below_value():
    ind = Chromosome(value=500, fitness=12.0)
    assert ind.compute_fitness(499) == 0.0
    assert ind.fitness == 0.0


def test_negative_payoff_is_floored():
    # Rivals flood the market: the raw payoff is negative
    assert Chromosome(value=1000).compute_fitness(50000) == 0.0


def test_fitness_never_negative_across_widths():
    rng = random.Random(11)
    for _ in range(2000):
        width = rng.randint(1, 64)
        value = rng.randrange(1 << width)
        aggregate = value + rng.randrange(1 << width)
        assert Chromosome(value=value).compute_fitness(aggregate) >= 0.0


def test_fitness_handles_full_64_bit_values():
    top = (1 << 64) - 1
    assert Chromosome(value=top).compute_fitness(top) == 0.0


def test_clone_is_independent():
    ind = Chromosome(value=7, fitness=3.5)
    copy = ind.clone()
    copy.value = 8
    assert ind == Chromosome(value=7, fitness=3.5)


def test_bit_mask_edges():
    assert bit_mask(0) == 0
    assert bit_mask(1) == 1
    assert bit_mask(10) == 1023
    assert bit_mask(64) == (1 << 64) - 1


def test_low_bits():
    assert low_bits(0b1011_0110, 3) == 0b110
    assert low_bits(0b1011_0110, 0) == 0
    assert low_bits((1 << 64) - 1, 64) == (1 << 64) - 1
