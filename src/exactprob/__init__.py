"""
exactprob — discrete probability and descriptive statistics on exact decimals

Combinatorics, binomial and dice-sum distributions, probability spaces and
outlier-robust summary statistics computed with decimal.Decimal, so chained
products, quotients and alternating sums carry no binary floating-point
rounding error.

Conventions:
- Probabilities and coefficients are returned as Decimal
- Expected values and sample statistics are returned as native float
- Outcomes of a probability space are native int, in ascending order
- Out-of-domain input raises an ExactProbError subclass
"""

__version__ = "1.0.0"

from exactprob.core.config import (
    DEFAULT_DECIMAL_CONFIG,
    DEFAULT_OUTLIER_CONFIG,
    DecimalConfig,
    OutlierConfig,
)
from exactprob.core.domain import BinomialParameters, DiceParameters, ProbabilitySpace
from exactprob.core.errors import (
    DivisionByZero,
    EmptyInput,
    ExactProbError,
    InvalidArgument,
    InvalidOperand,
)
from exactprob.core.math import binomial_coefficient, factorial, multiset_coefficient
from exactprob.probability import (
    binomial_cdf,
    binomial_pmf,
    dice_probability_space,
    dice_sum_pmf,
    expected_value,
)
from exactprob.statistics import (
    filter_by_interquartile_range,
    filter_by_percentile_trim,
    filter_by_robust_z_score,
    filter_by_std_dev_bound,
    mean,
    median,
    median_absolute_deviation,
    mode,
    modified_z_score,
    standard_deviation,
    variance,
    z_score,
)

__all__ = [
    # Version
    "__version__",
    # Config
    "DecimalConfig",
    "OutlierConfig",
    "DEFAULT_DECIMAL_CONFIG",
    "DEFAULT_OUTLIER_CONFIG",
    # Errors
    "ExactProbError",
    "InvalidArgument",
    "DivisionByZero",
    "InvalidOperand",
    "EmptyInput",
    # Domain
    "BinomialParameters",
    "DiceParameters",
    "ProbabilitySpace",
    # Combinatorics
    "factorial",
    "binomial_coefficient",
    "multiset_coefficient",
    # Probability
    "binomial_pmf",
    "binomial_cdf",
    "dice_sum_pmf",
    "dice_probability_space",
    "expected_value",
    # Statistics
    "mean",
    "median",
    "mode",
    "variance",
    "standard_deviation",
    "z_score",
    "median_absolute_deviation",
    "modified_z_score",
    "filter_by_robust_z_score",
    "filter_by_percentile_trim",
    "filter_by_std_dev_bound",
    "filter_by_interquartile_range",
]
