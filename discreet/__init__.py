"""Entropy and mutual information estimation for discrete data.
"""

__version__ = '0.1.0'

from . import exception
from . import info_theory

from .info_theory.weights import FrequencyWeights, ProbabilityWeights
from .info_theory.entropy import (
    Method, entropy, estimate_entropy, estimate_joint_entropy, joint_entropy)
from .info_theory.mutual_info import (
    mutual_information, mutual_information_contingency, mi_matrix,
    contingency_table)
