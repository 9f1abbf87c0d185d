"""Thin, validated wrappers marking a vector of numbers as either
observation counts or a probability distribution.

The type decides how `discreet.info_theory.entropy.entropy` treats the
values: counts are turned into a distribution by one of the estimators,
probabilities are used as they are.
"""

import numbers

import numpy as np

from .. import exception


class _Weights(object):

    _kind = 'weights'

    def __init__(self, values):
        values = np.array(values, copy=True)

        if values.ndim != 1:
            raise exception.DataInvalid(
                "%s must be one-dimensional; got an array with shape %s." %
                (type(self).__name__, values.shape))

        values = self._coerce(values)

        if np.any(values < 0):
            raise exception.DataInvalid(
                "%s must be non-negative; found %s negative entries." %
                (type(self).__name__, np.count_nonzero(values < 0)))

        values.setflags(write=False)
        self._values = values

    def _coerce(self, values):
        return values

    @property
    def values(self):
        return self._values

    def sum(self):
        return self._values.sum()

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __getitem__(self, key):
        return self._values[key]

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._values
        return self._values.astype(dtype)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, self._values.tolist())


class FrequencyWeights(_Weights):
    """Number of times each outcome was observed.

    Parameters
    ----------
    counts : array-like, shape=(n_outcomes,)
        Non-negative integers. Zeros are allowed (outcomes that are
        possible but unobserved), as is an empty vector.
    """

    def _coerce(self, values):
        if values.size == 0:
            return values.astype(int)

        if not issubclass(values.dtype.type, numbers.Integral):
            if not np.issubdtype(values.dtype, np.number):
                raise exception.DataInvalid(
                    "Frequency weights must be integral (got %s)." %
                    values.dtype)
            _check_finite(self, values)
            if np.any(values != np.round(values)):
                raise exception.DataInvalid(
                    "Frequency weights must be integral (got %s)." %
                    values.dtype)
            values = values.astype(int)

        return values


class ProbabilityWeights(_Weights):
    """A probability distribution over outcomes.

    Parameters
    ----------
    probs : array-like, shape=(n_outcomes,)
        Non-negative reals.

    Notes
    -----
    The probabilities are expected to sum to one, but this is not
    checked; a vector that does not is used as given.
    """

    def _coerce(self, values):
        if not np.issubdtype(values.dtype, np.number):
            raise exception.DataInvalid(
                "Probability weights must be numeric (got %s)." %
                values.dtype)
        _check_finite(self, values)
        return values.astype(np.float64)


def _check_finite(weights, values):
    if not np.all(np.isfinite(values)):
        raise exception.DataInvalid(
            "%s must be finite; found %s nan or infinite entries." %
            (type(weights).__name__, np.count_nonzero(~np.isfinite(values))))
