"""Module for high-level computations involving mutual information.

Includes mutual information between two samples (optionally adjusted for
chance and/or normalized), the all-to-all mutual information matrix of
a multivariate dataset, and mutual information of a known joint
probability table.
"""

import logging
import warnings
import itertools
import functools

import numpy as np
from sklearn.utils import check_random_state

from .. import exception
from ..citation import cite, citation
from ..util.log import timed
from ..util.parallel import parallel_map
from .weights import ProbabilityWeights
from .entropy import (
    Method, resolve_method, entropy, estimate_entropy,
    estimate_joint_entropy, check_paired, _as_sample, _as_list)


logger = logging.getLogger(__name__)

# off-diagonal MI below this is cancellation noise, and is zeroed
MI_TOLERANCE = np.finfo(np.float64).eps

_METHOD_CITATIONS = {
    Method.CHAO_SHEN: 'chao-shen',
    Method.SHRINKAGE: 'shrinkage',
}


def mutual_information(
        x, y=None, ex=None, ey=None, method=Method.NAIVE, adjusted=False,
        normalize=False, random_state=None, n_procs=1):
    """Compute the mutual information between two aligned samples, or
    the mutual information matrix of a dataset.

    I(X; Y) = H(X) + H(Y) - H(X, Y)

    Parameters
    ----------
    x : array-like, shape=(n_observations,) or (n_observations, n_features)
        Discrete observations of the first variable. If `y` is None,
        the columns of this 2D array are the variables and the result
        is the matrix computed by `mi_matrix`.
    y : array-like, shape=(n_observations,), default=None
        Discrete observations of the second variable, aligned with `x`.
    ex : float, default=None
        Entropy of `x`. Computed with `estimate_entropy` using `method`
        if not given (the same estimate `mi_matrix` puts on its
        diagonal), rather than always with the naive estimator. Pass it
        to avoid recomputing it over many calls, or pass the naive
        estimate to get naive marginals with a bias-corrected joint
        entropy.
    ey : float, default=None
        As `ex`, but for `y`.
    method : Method or str, default=Method.NAIVE
        Entropy estimator.
    adjusted : bool, default=False
        Correct for chance by subtracting the mutual information of `x`
        and one random permutation of `y`.
    normalize : bool, default=False
        Divide by min(H(X), H(Y)). Unadjusted values are capped at 1.
    random_state : int or np.random.RandomState, default=None
        Source of the permutation used when `adjusted`.
    n_procs : int, default=1
        Number of processes; only used for the matrix form.

    Returns
    -------
    mi : float or np.ndarray, shape=(n_features, n_features)
        Mutual information in nats (or normalized).

    Raises
    ------
    LengthMismatch
        If `x` and `y` hold different numbers of observations.
    InvalidMethod
        If `method` does not name an estimator.

    Notes
    -----
    A zero denominator when normalizing is not treated specially; the
    result is nan or inf.
    """

    if y is None:
        if ex is not None or ey is not None:
            raise exception.ImproperlyConfigured(
                "Marginal entropies can only be supplied for a pair of "
                "samples, not for a data matrix.")
        return mi_matrix(
            x, method=method, adjusted=adjusted, normalize=normalize,
            random_state=random_state, n_procs=n_procs)

    method = resolve_method(method)

    x = _as_sample(x)
    y = _as_sample(y)
    check_paired(x, y)

    if ex is None:
        ex = estimate_entropy(x, method)
    if ey is None:
        ey = estimate_entropy(y, method)

    ee = estimate_joint_entropy(x, y, method)

    if adjusted:
        return _adjusted_mutual_information(
            x, y, ex, ey, ee, method, normalize, random_state)

    mi = ex + ey - ee

    if normalize:
        return _ratio(mi, min(ex, ey), cap=1.)

    return mi


@cite('adjusted-mi')
def _adjusted_mutual_information(
        x, y, ex, ey, ee, method, normalize, random_state):
    """Mutual information less a chance baseline, the baseline being the
    mutual information of `x` with a single permutation of `y`.
    """

    random_state = check_random_state(random_state)
    y_shuffled = _permuted(y, random_state)

    ee_shuffle = estimate_joint_entropy(x, y_shuffled, method)
    mi_shuffle = ex + ey - ee_shuffle

    mi = ee_shuffle - ee

    if normalize:
        return _ratio(mi, min(ex, ey) - mi_shuffle)

    return mi


def mi_matrix(
        data, method=Method.NAIVE, adjusted=False, normalize=False,
        random_state=None, n_procs=1):
    """Compute the all-to-all matrix of mutual information between the
    variables (columns) of a dataset.

    Parameters
    ----------
    data : array-like, shape=(n_observations, n_features)
        Discrete observations; each column is a variable.
    method : Method or str, default=Method.NAIVE
        Entropy estimator.
    adjusted : bool, default=False
        Correct each pair for chance (see `mutual_information`).
    normalize : bool, default=False
        Normalize each pair (see `mutual_information`). The diagonal
        is not normalized.
    random_state : int or np.random.RandomState, default=None
        Seeds the permutations used when `adjusted`. One seed per pair
        is drawn up front, so results do not depend on `n_procs`.
    n_procs : int, default=1
        Number of processes to spread cells over. None uses
        `discreet.util.parallel.auto_nprocs`.

    Returns
    -------
    mi : np.ndarray, shape=(n_features, n_features)
        Symmetric matrix. Cell (i, i) holds the entropy of feature i,
        cell (i, j) the mutual information between features i and j,
        with values below machine epsilon set to zero.
    """

    method = resolve_method(method)
    data = _as_data_matrix(data)

    n_features = data.shape[1]
    columns = [data[:, i] for i in range(n_features)]

    # citations recorded by pool workers never reach this process
    if method in _METHOD_CITATIONS:
        citation.add_citation(_METHOD_CITATIONS[method])
    if adjusted:
        citation.add_citation('adjusted-mi')

    with timed("Computed %s x %s mutual information matrix in %%.3f s." %
               (n_features, n_features), logger.info):

        logger.debug("Computing %s marginal entropies", n_features)
        diagonal = parallel_map(
            functools.partial(_entropy_task, columns=columns, method=method),
            range(n_features), n_procs=n_procs)

        pairs = list(itertools.combinations(range(n_features), 2))

        if adjusted:
            random_state = check_random_state(random_state)
            seeds = random_state.randint(
                np.iinfo(np.int32).max, size=len(pairs)).tolist()
        else:
            seeds = [None] * len(pairs)

        logger.debug("Computing %s pairwise mutual informations", len(pairs))
        off_diagonal = parallel_map(
            functools.partial(
                _pair_task, columns=columns, diagonal=diagonal,
                method=method, adjusted=adjusted, normalize=normalize),
            [(i, j, seed) for (i, j), seed in zip(pairs, seeds)],
            n_procs=n_procs)

    mi = np.zeros((n_features, n_features), dtype=np.float64)
    mi[np.diag_indices_from(mi)] = diagonal

    for (i, j), value in zip(pairs, off_diagonal):
        # drop null or negative values
        if value < MI_TOLERANCE:
            value = 0.
        mi[i, j] = mi[j, i] = value

    return mi


def mutual_information_contingency(joint_probs, normalize=False):
    """Compute the mutual information of a known joint distribution.

    Parameters
    ----------
    joint_probs : array-like, shape=(n_x_states, n_y_states)
        Cell (u, v) is the probability of X=u and Y=v. Expected to sum
        to one; a warning is issued if it does not.
    normalize : bool, default=False
        Divide by min(H(X), H(Y)), capped at 1.

    Returns
    -------
    mi : float
        Mutual information in nats (or normalized).
    """

    joint_probs = np.asarray(joint_probs, dtype=np.float64)

    if joint_probs.ndim != 2:
        raise exception.DataInvalid(
            "Expected a 2D joint probability table, but got an array "
            "with shape %s." % (joint_probs.shape,))

    if not np.isclose(joint_probs.sum(), 1):
        warnings.warn(
            "Joint probability table sums to %s rather than 1." %
            joint_probs.sum(), exception.SuspiciousDataWarning)

    ee = entropy(ProbabilityWeights(joint_probs.ravel()))
    ex = entropy(ProbabilityWeights(joint_probs.sum(axis=1)))
    ey = entropy(ProbabilityWeights(joint_probs.sum(axis=0)))

    mi = ex + ey - ee

    if normalize:
        return _ratio(mi, min(ex, ey), cap=1.)

    return mi


def contingency_table(x, y):
    """Compute the empirical joint probability table of two aligned
    samples.

    Returns
    -------
    table : np.ndarray, shape=(n_x_values, n_y_values)
        Cell (u, v) is the fraction of observations where x took its
        u-th distinct value and y its v-th, values being numbered in
        order of first appearance.
    """

    x = _as_sample(x)
    y = _as_sample(y)
    check_paired(x, y)

    x_levels = {}
    y_levels = {}
    rows = [x_levels.setdefault(v, len(x_levels)) for v in _as_list(x)]
    cols = [y_levels.setdefault(v, len(y_levels)) for v in _as_list(y)]

    table = np.zeros((len(x_levels), len(y_levels)), dtype=np.float64)
    if len(x) > 0:
        np.add.at(table, (rows, cols), 1)
        table /= len(x)

    return table


def _entropy_task(i, columns, method):
    return estimate_entropy(columns[i], method)


def _pair_task(task, columns, diagonal, method, adjusted, normalize):
    i, j, seed = task
    return mutual_information(
        columns[i], columns[j], diagonal[i], diagonal[j], method=method,
        adjusted=adjusted, normalize=normalize, random_state=seed)


def _ratio(numerator, denominator, cap=None):
    with warnings.catch_warnings():
        # zero denominators give nan or inf
        warnings.simplefilter("ignore", RuntimeWarning)
        ratio = np.float64(numerator) / np.float64(denominator)
        if cap is not None:
            ratio = np.minimum(ratio, cap)

    return float(ratio)


def _permuted(sample, random_state):
    order = random_state.permutation(len(sample))

    if isinstance(sample, np.ndarray):
        return sample[order]

    sample = list(sample)
    return [sample[k] for k in order]


def _as_data_matrix(data):
    data = np.asarray(data)

    if data.ndim != 2:
        raise exception.DataInvalid(
            "Expected a 2D array of observations (rows) by features "
            "(columns), but got an array with shape %s." % (data.shape,))

    return data
