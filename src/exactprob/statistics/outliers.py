"""
Outlier Filters — удаление выбросов из выборок

Четыре фильтра, каждый возвращает новую отсортированную выборку:
- filter_by_robust_z_score: modified z-score < cutoff (3.5)
- filter_by_percentile_trim: срез trim_fraction (2.5%) с каждого конца
- filter_by_std_dev_bound: mean - 3σ < x < mean + 3σ
- filter_by_interquartile_range: median - 2·IQR < x < median + 2·IQR

Пороги задаются OutlierConfig. Исходная выборка не изменяется.
"""

import logging
from typing import Iterable, List, Optional

from exactprob.core.config import DEFAULT_OUTLIER_CONFIG, DecimalConfig, OutlierConfig
from exactprob.core.math.exact_decimal import (
    add,
    decimal_context,
    multiply,
    square_root,
    subtract,
    to_decimal,
)
from exactprob.core.math.numerical_safeguards import clamp_index, round_half_up
from exactprob.statistics.descriptive import (
    decimal_mean,
    decimal_median,
    decimal_median_absolute_deviation,
    decimal_modified_z,
    decimal_variance,
    require_data,
)

logger = logging.getLogger(__name__)

# Минимальная длина выборки для квартилей
_MIN_QUARTILE_SAMPLE = 4


def _log_filtered(name: str, before: int, after: int) -> None:
    logger.debug("%s removed %d of %d points", name, before - after, before)


def filter_by_robust_z_score(
    data: Iterable[float],
    config: Optional[DecimalConfig] = None,
    outlier_config: Optional[OutlierConfig] = None,
) -> List[float]:
    """
    Удаление точек с modified z-score >= cutoff.

    Устойчив к выбросам: центр и разброс: медиана и MAD.

    При MAD == 0 (больше половины точек равны медиане) сохраняются только
    точки, равные медиане.

    Raises:
        EmptyInput: Если выборка пуста
    """
    outlier_config = outlier_config or DEFAULT_OUTLIER_CONFIG
    values = sorted(require_data(data))

    with decimal_context(config):
        med = decimal_median(values)
        mad = decimal_median_absolute_deviation(values)
        if mad.is_zero():
            kept = [v for v in values if to_decimal(v) == med]
        else:
            cutoff = to_decimal(outlier_config.modified_z_cutoff)
            kept = [v for v in values if decimal_modified_z(v, med, mad, outlier_config) < cutoff]

    _log_filtered("Robust z-score filter", len(values), len(kept))
    return kept


def filter_by_percentile_trim(
    data: Iterable[float],
    outlier_config: Optional[OutlierConfig] = None,
) -> List[float]:
    """
    Срез нижних и верхних trim_fraction точек отсортированной выборки.

    Число срезаемых с каждого конца точек: round_half_up(len · trim_fraction).
    Для выборок короче 20 точек при 2.5% ничего не срезается. Фильтр не
    идемпотентен: каждый повторный вызов снова срезает концы, пока
    round_half_up(len · trim_fraction) не станет 0.
    """
    outlier_config = outlier_config or DEFAULT_OUTLIER_CONFIG
    values = sorted(require_data(data))

    low = round_half_up(len(values) * outlier_config.trim_fraction)
    kept = values[low : len(values) - low]

    _log_filtered("Percentile trim", len(values), len(kept))
    return kept


def filter_by_std_dev_bound(
    data: Iterable[float],
    config: Optional[DecimalConfig] = None,
    outlier_config: Optional[OutlierConfig] = None,
) -> List[float]:
    """
    Сохранение точек строго внутри mean ± std_dev_bound · σ.

    При σ == 0 все точки равны среднему и выбросов нет: выборка
    возвращается целиком.
    """
    outlier_config = outlier_config or DEFAULT_OUTLIER_CONFIG
    values = sorted(require_data(data))

    with decimal_context(config):
        avg = decimal_mean(values)
        sigma = square_root(decimal_variance(values, ddof=0))
        if sigma.is_zero():
            return values
        band = multiply(outlier_config.std_dev_bound, sigma)
        lower, upper = subtract(avg, band), add(avg, band)
        kept = [v for v in values if lower < to_decimal(v) < upper]

    _log_filtered("Std-dev bound filter", len(values), len(kept))
    return kept


def filter_by_interquartile_range(
    data: Iterable[float],
    config: Optional[DecimalConfig] = None,
    outlier_config: Optional[OutlierConfig] = None,
) -> List[float]:
    """
    Сохранение точек строго внутри median ± iqr_multiplier · IQR.

    Квартили берутся по индексам round_half_up(len/4) и
    round_half_up(3·len/4) отсортированной выборки (индекс ограничен
    последним элементом). При IQR == 0 сохраняются только точки, равные
    значению квартиля. Выборки короче четырёх точек квартилей не имеют и
    возвращаются целиком.
    """
    outlier_config = outlier_config or DEFAULT_OUTLIER_CONFIG
    values = sorted(require_data(data))
    length = len(values)
    if length < _MIN_QUARTILE_SAMPLE:
        return values

    lower_quartile = values[clamp_index(round_half_up(length / 4), length)]
    upper_quartile = values[clamp_index(round_half_up(3 * length / 4), length)]

    with decimal_context(config):
        med = decimal_median(values)
        iqr = subtract(upper_quartile, lower_quartile)
        if iqr.is_zero():
            kept = [v for v in values if v == lower_quartile]
        else:
            band = multiply(outlier_config.iqr_multiplier, iqr)
            lower, upper = subtract(med, band), add(med, band)
            kept = [v for v in values if lower < to_decimal(v) < upper]

    _log_filtered("Interquartile range filter", length, len(kept))
    return kept
