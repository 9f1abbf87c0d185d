import numpy as np
from numpy.testing import assert_allclose, assert_almost_equal

import pytest

from discreet import exception
from discreet.info_theory.weights import FrequencyWeights, ProbabilityWeights
from discreet.info_theory.entropy import (
    Method, entropy, estimate_entropy, estimate_joint_entropy,
    joint_counts, resolve_method)


FREQS_UNIFORM = FrequencyWeights([1, 1, 1, 1, 1, 1])
SAMPLE = ['a', 'b', 'c', 'd', 'e', 'f']

ALL_METHODS = [Method.NAIVE, Method.CHAO_SHEN, Method.SHRINKAGE]


def test_naive_entropy():
    assert_allclose(entropy(FREQS_UNIFORM), np.log(6))
    assert entropy(FrequencyWeights([6])) == 0
    assert_allclose(estimate_entropy(SAMPLE), np.log(6))


def test_reference_estimates():
    # reference values from the R package `entropy`
    assert_almost_equal(
        entropy(FREQS_UNIFORM, method=Method.CHAO_SHEN),
        3.840549310406, decimal=9)
    assert_almost_equal(
        entropy(FrequencyWeights([4, 2, 3, 2, 4, 2, 1, 1]),
                method=Method.CHAO_SHEN),
        2.201137101279, decimal=9)
    assert_almost_equal(
        entropy(FrequencyWeights([4, 2, 3, 2, 4, 2, 1, 1])),
        1.968382408728, decimal=9)
    assert_almost_equal(
        entropy(FrequencyWeights([4, 2, 3, 0, 2, 4, 0, 0, 2, 1, 1]),
                method=Method.SHRINKAGE),
        2.379602895309, decimal=9)


@pytest.mark.parametrize('method', ALL_METHODS)
def test_uniform_entropy_is_log_k(method):
    for k in [2, 4, 6]:
        counts = FrequencyWeights([1000] * k)
        assert_allclose(entropy(counts, method=method), np.log(k))


@pytest.mark.parametrize('method', ALL_METHODS)
def test_degenerate_counts(method):
    assert entropy(FrequencyWeights([]), method=method) == 0
    assert entropy(FrequencyWeights([10]), method=method) == 0
    assert entropy(FrequencyWeights([0, 0, 0]), method=method) == 0


@pytest.mark.parametrize('method', ALL_METHODS)
def test_degenerate_samples(method):
    assert estimate_entropy([], method=method) == 0
    assert estimate_entropy([1], method=method) == 0
    assert estimate_entropy(['same'], method=method) == 0
    assert estimate_entropy([3, 3, 3, 3], method=method) == 0


def test_chao_shen_exceeds_naive_on_unique_samples():

    for counts in ([1, 1, 1, 1, 1, 1], [1, 1, 2, 1, 3, 1], [2, 1, 1]):
        counts = FrequencyWeights(counts)
        assert (entropy(counts, method=Method.CHAO_SHEN) >
                entropy(counts, method=Method.NAIVE))


def test_chao_shen_ignores_unobserved_outcomes():

    with_zeros = FrequencyWeights([4, 0, 2, 3, 0, 1])
    without_zeros = FrequencyWeights([4, 2, 3, 1])

    assert_allclose(
        entropy(with_zeros, method=Method.CHAO_SHEN),
        entropy(without_zeros, method=Method.CHAO_SHEN))


def test_shrinkage_single_observation_falls_back():
    # (n - 1) == 0 makes the shrinkage intensity undefined
    assert entropy(FrequencyWeights([1, 0, 0]), method=Method.SHRINKAGE) == 0


def test_estimators_converge_on_large_samples():

    counts = FrequencyWeights([9000, 10000, 10000, 11000])
    estimates = [entropy(counts, method=m) for m in ALL_METHODS]

    assert_allclose(estimates, estimates[0], atol=1e-3)


def test_probability_weights():

    assert_allclose(entropy(ProbabilityWeights([0.5, 0.5])), np.log(2))
    assert_allclose(entropy(ProbabilityWeights([0.5, 0, 0.5])), np.log(2))
    assert entropy(ProbabilityWeights([])) == 0

    # bare arrays are probabilities, and are flattened
    assert_allclose(entropy([[0.25, 0.25], [0.25, 0.25]]), np.log(4))


def test_bare_probabilities_are_validated():

    with pytest.raises(exception.DataInvalid):
        entropy([-0.5, 1.5])
    with pytest.raises(exception.DataInvalid):
        entropy([[0.5, 1.0], [-0.5, 0.0]])
    with pytest.raises(exception.DataInvalid):
        entropy(np.array([0.5, np.nan]))


def test_invalid_method():

    with pytest.raises(exception.InvalidMethod):
        entropy(FREQS_UNIFORM, method='NotImplemented')
    with pytest.raises(exception.InvalidMethod):
        estimate_entropy(SAMPLE, method='NotImplemented')
    with pytest.raises(exception.InvalidMethod):
        estimate_joint_entropy(SAMPLE, SAMPLE, method='NotImplemented')
    with pytest.raises(exception.InvalidMethod):
        entropy(ProbabilityWeights([0.5, 0.5]), method=None)

    # also usable as a plain ValueError
    with pytest.raises(ValueError):
        resolve_method('mle')


def test_method_tokens():

    assert resolve_method(Method.SHRINKAGE) is Method.SHRINKAGE
    assert resolve_method('naive') is Method.NAIVE
    assert resolve_method('CS') is Method.CHAO_SHEN
    assert resolve_method('chao-shen') is Method.CHAO_SHEN
    assert resolve_method('Shrink') is Method.SHRINKAGE

    assert_allclose(
        entropy(FREQS_UNIFORM, method='cs'),
        entropy(FREQS_UNIFORM, method=Method.CHAO_SHEN))


def test_joint_entropy():

    assert_allclose(estimate_joint_entropy(SAMPLE, SAMPLE), np.log(6))
    assert_almost_equal(
        estimate_joint_entropy(SAMPLE, SAMPLE, method=Method.CHAO_SHEN),
        3.840549310406, decimal=9)

    x = [0, 0, 1, 1]
    y = [0, 1, 0, 1]
    assert_allclose(estimate_joint_entropy(x, y), np.log(4))
    assert_allclose(estimate_joint_entropy(x, x), np.log(2))


def test_joint_counts_keeps_pairs_distinct():

    # hash(-1) == hash(-2) in CPython; the pairs must still be distinct
    counts = joint_counts([-1, -2, -1], [0, 0, 0])
    assert sorted(counts.tolist()) == [1, 2]

    counts = joint_counts(np.array([1, 2, 1, 2]), np.array([2, 1, 2, 1]))
    assert sorted(counts.tolist()) == [2, 2]


def test_joint_length_mismatch():

    x_short = [1, 2]
    y_long = [1, 2, 3]

    with pytest.raises(exception.LengthMismatch):
        estimate_joint_entropy(x_short, y_long)
    with pytest.raises(exception.LengthMismatch):
        joint_counts(x_short, y_long)


def test_multidimensional_sample_rejected():

    with pytest.raises(exception.DataInvalid):
        estimate_entropy(np.zeros((3, 2), dtype=int))
