"""
Descriptive statistics

Центральная тенденция, разброс, z-scores и outlier-фильтры для выборок
native чисел. Промежуточные вычисления в Decimal.
"""

from exactprob.statistics.descriptive import (
    mean,
    median,
    median_absolute_deviation,
    mode,
    modified_z_score,
    standard_deviation,
    variance,
    z_score,
)
from exactprob.statistics.outliers import (
    filter_by_interquartile_range,
    filter_by_percentile_trim,
    filter_by_robust_z_score,
    filter_by_std_dev_bound,
)

__all__ = [
    # Central tendency
    "mean",
    "median",
    "mode",
    # Spread
    "variance",
    "standard_deviation",
    "z_score",
    "median_absolute_deviation",
    "modified_z_score",
    # Outlier filters
    "filter_by_robust_z_score",
    "filter_by_percentile_trim",
    "filter_by_std_dev_bound",
    "filter_by_interquartile_range",
]
