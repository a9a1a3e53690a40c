"""
cournot_ga - Genetic algorithm for Cournot quantity competition

Evolves a population of fixed-width bitstrings whose values are output
quantities; each individual's payoff depends on its own output and on the
aggregate output of the whole population.
"""

__version__ = "0.1.0"

from .config import DEFAULT_CONFIG, PRESET_MINIMAL, PRESET_RESEARCH, PRESET_STANDARD  # noqa: F401
from .evolution import *  # noqa: F401,F403
from .export import load_statistics_csv, save_statistics_csv  # noqa: F401
from .utils import RNGManager, StatisticsExportError, ValidationError  # noqa: F401
