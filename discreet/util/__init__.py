"""General purpose utilities for counting, loading, logging, and
parallelism.
"""

from .counting import value_counts
from .load import load_observations, save_array
from .parallel import auto_nprocs, parallel_map
