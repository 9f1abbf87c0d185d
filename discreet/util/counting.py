"""Counting of discrete observations.
"""

from collections import Counter

import numpy as np


def value_counts(sample):
    """Count the occurrences of each distinct value in `sample`.

    Parameters
    ----------
    sample : iterable
        Discrete observations. Any hashable values are accepted, as are
        tuples of them (used for joint outcomes). Numpy arrays are
        converted to python scalars before counting.

    Returns
    -------
    counts : np.ndarray, dtype=int, shape=(n_distinct,)
        The number of times each distinct value was observed, in order
        of first appearance. No downstream estimator depends on this
        order.
    """

    if isinstance(sample, np.ndarray):
        sample = sample.tolist()

    counts = Counter(sample)

    return np.fromiter(counts.values(), dtype=int, count=len(counts))
