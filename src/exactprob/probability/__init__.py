"""
Discrete probability engine

Биномиальное распределение, распределение суммы костей, вероятностные
пространства и математическое ожидание. Все вычисления в Decimal.
"""

from exactprob.probability.binomial import binomial_cdf, binomial_pmf
from exactprob.probability.dice import dice_probability_space, dice_sum_pmf
from exactprob.probability.expectation import expected_value

__all__ = [
    # Binomial
    "binomial_pmf",
    "binomial_cdf",
    # Dice
    "dice_sum_pmf",
    "dice_probability_space",
    # Expectation
    "expected_value",
]
