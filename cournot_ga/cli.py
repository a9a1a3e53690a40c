"""Command-line driver: run one evolution and export its statistics to CSV."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from cournot_ga.config import DEFAULT_CONFIG, PRESETS, get_preset, merge_config
from cournot_ga.evolution.run import Run
from cournot_ga.export import save_statistics_csv
from cournot_ga.utils.validation import StatisticsExportError, ValidationError


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog='cournot-ga', description=__doc__)
    ap.add_argument('--preset', choices=sorted(PRESETS), default='standard')
    ap.add_argument('--p-cross', type=float, default=None, help='crossover probability per pair')
    ap.add_argument('--p-mut', type=float, default=None, help='mutation probability per individual')
    ap.add_argument('--length', type=int, default=None, help='chromosome width in bits')
    ap.add_argument('--pop', type=int, default=None, help='population size')
    ap.add_argument('--z', type=int, default=None, help='low-order bits exchanged by crossover')
    ap.add_argument('--iterations', type=int, default=None)
    ap.add_argument('--seed', type=int, default=None)
    ap.add_argument('--output', default='run_3.csv')
    ap.add_argument('--log-level', default='WARNING')
    return ap


def _overrides(args: argparse.Namespace) -> dict:
    mapping = {
        'crossover_probability': args.p_cross,
        'mutation_probability': args.p_mut,
        'chromosome_length': args.length,
        'population_size': args.pop,
        'crossover_bits': args.z,
        'iterations': args.iterations,
        'seed': args.seed,
    }
    return {k: v for k, v in mapping.items() if v is not None}


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        config = merge_config(get_preset(args.preset), _overrides(args))
        run = Run.from_config(config)
        population, statistics = run.run(int(config.get('iterations', DEFAULT_CONFIG['iterations'])))
    except ValidationError as exc:
        print(f"Error: {exc}")
        return 2

    # Cached fitness is stale after crossover and mutation
    final = run.evaluate()
    best = run.best()
    logging.info("final population=%d data_sum=%d best_value=%d best_fitness=%.3f",
                 len(population), final.data_sum, best.value, best.fitness)

    try:
        save_statistics_csv(statistics, args.output)
    except StatisticsExportError as exc:
        print(f"Error: {exc}")
        return 1
    print(f"Successfully wrote to CSV in {args.output}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
