"""
Core math modules для exactprob

Decimal-примитив, численные проверки и точная комбинаторика.
"""

# Numerical Safeguards
from exactprob.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_PROBABILITY_SUM,
    # Validation
    is_strict_int,
    is_valid_float,
    require_finite_number,
    require_int,
    require_non_negative_int,
    # Rounding
    clamp_index,
    round_half_up,
)

# Exact Decimal
from exactprob.core.math.exact_decimal import (
    ONE,
    ZERO,
    NumberLike,
    absolute_value,
    add,
    decimal_context,
    decimal_sum,
    divide,
    is_equal,
    multiply,
    raised_to_power,
    square_root,
    subtract,
    to_decimal,
    to_native,
)

# Combinatorics
from exactprob.core.math.combinatorics import (
    binomial_coefficient,
    exact_integer_context,
    factorial,
    factorial_digits,
    multiset_coefficient,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_PROBABILITY_SUM",
    # Numerical Safeguards: Validation
    "is_strict_int",
    "is_valid_float",
    "require_finite_number",
    "require_int",
    "require_non_negative_int",
    # Numerical Safeguards: Utilities
    "clamp_index",
    "round_half_up",
    # Exact Decimal: Constants and types
    "ONE",
    "ZERO",
    "NumberLike",
    # Exact Decimal: Functions
    "absolute_value",
    "add",
    "decimal_context",
    "decimal_sum",
    "divide",
    "is_equal",
    "multiply",
    "raised_to_power",
    "square_root",
    "subtract",
    "to_decimal",
    "to_native",
    # Combinatorics
    "binomial_coefficient",
    "exact_integer_context",
    "factorial",
    "factorial_digits",
    "multiset_coefficient",
]
