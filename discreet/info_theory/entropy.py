"""Shannon entropy of discrete distributions, of observation counts,
and of raw samples.

Entropies are in nats. Counts can be turned into an entropy by one of
three estimators (see `Method`); the Chao-Shen and shrinkage estimators
reduce the downward bias the naive (plug-in) estimator has on small
samples with many rare outcomes.
"""

import enum
import logging

import numpy as np
from scipy.special import entr

from .. import exception
from ..citation import cite
from ..util.counting import value_counts
from .weights import FrequencyWeights, ProbabilityWeights


logger = logging.getLogger(__name__)

# below this, the shrinkage intensity is undefined (theta_ML is uniform
# or there is a single observation)
SHRINKAGE_TOLERANCE = np.finfo(np.float64).eps


class Method(enum.Enum):
    """Estimators available for turning counts into an entropy.
    """

    NAIVE = 'naive'
    CHAO_SHEN = 'chao_shen'
    SHRINKAGE = 'shrinkage'

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return _METHOD_ALIASES.get(value.lower().replace('-', '_'))
        return None


_METHOD_ALIASES = {
    'naive': Method.NAIVE,
    'chao_shen': Method.CHAO_SHEN,
    'chaoshen': Method.CHAO_SHEN,
    'cs': Method.CHAO_SHEN,
    'shrinkage': Method.SHRINKAGE,
    'shrink': Method.SHRINKAGE,
}


def resolve_method(method):
    """Turn an estimator token (a `Method` or one of its names) into a
    `Method`, raising `InvalidMethod` for anything else.
    """

    try:
        return Method(method)
    except ValueError:
        raise exception.InvalidMethod(
            "Unknown entropy estimator %r; expected one of %s." %
            (method, [m.value for m in Method])) from None


def entropy_probs(probs):
    """Entropy of a probability distribution, H = -sum(p * log(p)).

    Entries that are not strictly positive do not contribute.
    """

    probs = np.asarray(probs, dtype=np.float64).ravel()
    probs = probs[probs > 0]

    if probs.size == 0:
        return 0.0

    return float(entr(probs).sum())


def entropy_naive(counts):
    """Plug-in entropy estimate: the entropy of the observed relative
    frequencies.
    """

    counts = _as_counts(counts)
    n = counts.sum()

    if n == 0:
        return 0.0

    return entropy_probs(counts / n)


@cite('chao-shen')
def entropy_chao_shen(counts):
    """Chao-Shen entropy estimate.

    Relative frequencies are scaled down by the estimated sample
    coverage, C = 1 - f1/n (f1 being the number of singletons), and
    each term is weighted by the inverse probability of its outcome
    being included in the sample (Horvitz-Thompson).

    When every observation is a singleton the coverage would be zero;
    in that case f1 is taken to be n - 1.
    """

    counts = _as_counts(counts)
    counts = counts[counts > 0]
    n = counts.sum()

    if n == 0:
        return 0.0

    theta_ml = counts / n

    f1 = np.count_nonzero(counts == 1)
    if f1 == n:
        logger.debug(
            "All %s observations are singletons; using f1=%s to keep "
            "the coverage estimate positive.", n, n - 1)
        f1 = n - 1

    coverage = 1 - f1 / n
    p_a = coverage * theta_ml
    l_a = 1 - (1 - p_a) ** n

    return float(-np.sum(p_a * np.log(p_a) / l_a))


@cite('shrinkage')
def entropy_shrinkage(counts):
    """James-Stein shrinkage entropy estimate.

    The relative frequencies are shrunk toward the uniform distribution
    over the observed support with the intensity

        lambda = (1 - sum(theta_ML^2)) / ((n - 1) * sum((theta_ML - 1/K)^2))

    Zero counts are part of the support K. The intensity is not clipped
    to [0, 1]. If the denominator vanishes, the plug-in estimate is
    returned.
    """

    counts = _as_counts(counts)
    n = counts.sum()

    if n == 0:
        return 0.0

    theta_ml = counts / n
    target = 1 / len(theta_ml)

    denominator = (n - 1) * np.sum((theta_ml - target) ** 2)
    if denominator < SHRINKAGE_TOLERANCE:
        return entropy_probs(theta_ml)

    lambda_ = (1 - np.sum(theta_ml ** 2)) / denominator
    if lambda_ > 1:
        logger.debug("Shrinkage intensity %s exceeds 1.", lambda_)

    return entropy_probs(lambda_ * target + (1 - lambda_) * theta_ml)


_COUNTS_ESTIMATORS = {
    Method.NAIVE: entropy_naive,
    Method.CHAO_SHEN: entropy_chao_shen,
    Method.SHRINKAGE: entropy_shrinkage,
}


def entropy(weights, method=Method.NAIVE):
    """Compute the entropy of a distribution or of a set of counts.

    Parameters
    ----------
    weights : FrequencyWeights, ProbabilityWeights or array-like
        If `FrequencyWeights`, the number of observations of each
        outcome, turned into an entropy by the estimator `method`.
        Anything else is taken to be a probability distribution (arrays
        of any shape are flattened) and its entropy computed directly.
    method : Method or str, default=Method.NAIVE
        Estimator to use for counts. Checked for every input, but it has
        no effect on probabilities.

    Returns
    -------
    H : float
        Entropy in nats.

    Raises
    ------
    InvalidMethod
        If `method` does not name an estimator.
    DataInvalid
        If `weights` holds negative entries.
    """

    method = resolve_method(method)

    if isinstance(weights, FrequencyWeights):
        return _COUNTS_ESTIMATORS[method](weights)

    if not isinstance(weights, ProbabilityWeights):
        weights = ProbabilityWeights(np.ravel(weights))

    return entropy_probs(weights.values)


def estimate_entropy(sample, method=Method.NAIVE):
    """Estimate the entropy of the process that generated `sample`.

    Parameters
    ----------
    sample : array-like, shape=(n_observations,)
        Discrete observations of any hashable type.
    method : Method or str, default=Method.NAIVE
        Estimator to use.

    Returns
    -------
    H : float
        Entropy in nats; zero for samples with fewer than two
        observations.
    """

    method = resolve_method(method)
    sample = _as_sample(sample)

    if len(sample) < 2:
        return 0.0

    return entropy(FrequencyWeights(value_counts(sample)), method)


def joint_counts(x, y):
    """Count the co-occurrences of values in two aligned samples.

    Observation i contributes to the count of the pair (x[i], y[i]).
    Pairs are kept as tuples, so distinct pairs are never merged.

    Returns
    -------
    counts : np.ndarray, dtype=int, shape=(n_distinct_pairs,)
    """

    x = _as_sample(x)
    y = _as_sample(y)
    check_paired(x, y)

    return value_counts(zip(_as_list(x), _as_list(y)))


def estimate_joint_entropy(x, y, method=Method.NAIVE):
    """Estimate the entropy H(X, Y) of the joint distribution of two
    aligned samples.

    Raises
    ------
    LengthMismatch
        If `x` and `y` hold different numbers of observations.
    InvalidMethod
        If `method` does not name an estimator.
    """

    method = resolve_method(method)

    return entropy(FrequencyWeights(joint_counts(x, y)), method)


joint_entropy = estimate_joint_entropy


def check_paired(x, y):
    if len(x) != len(y):
        raise exception.LengthMismatch(
            "Paired samples must be the same length; got %s and %s "
            "observations." % (len(x), len(y)))


def _as_counts(counts):
    if not isinstance(counts, FrequencyWeights):
        counts = FrequencyWeights(counts)
    return counts.values


def _as_sample(sample):
    if isinstance(sample, np.ndarray):
        if sample.ndim != 1:
            raise exception.DataInvalid(
                "Samples must be one-dimensional; got an array with "
                "shape %s." % (sample.shape,))
        return sample

    if not hasattr(sample, '__len__'):
        sample = list(sample)

    return sample


def _as_list(sample):
    if isinstance(sample, np.ndarray):
        return sample.tolist()
    return sample
