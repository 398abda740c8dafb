"""
Domain models and value objects.

Contains distribution parameters and the discrete probability space.
"""

from exactprob.core.domain.parameters import BinomialParameters, DiceParameters
from exactprob.core.domain.probability_space import ProbabilitySpace

__all__ = [
    # Parameters
    "BinomialParameters",
    "DiceParameters",
    # Probability space
    "ProbabilitySpace",
]
