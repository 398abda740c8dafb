"""
Descriptive Statistics — описательные статистики на Decimal

Модуль считает статистики выборок native чисел:
- mean / median / mode
- variance / standard_deviation (population по умолчанию, ddof=1 для выборочной)
- z_score / median_absolute_deviation / modified_z_score

Суммы, деления и корни выполняются через decimal-примитив; внутри
составных статистик (дисперсия, MAD) промежуточные значения не
конвертируются во float. float возвращается только на выходе.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая выборка → EmptyInput (не NaN и не пустой результат)
2. NaN/Inf/bool в данных → InvalidArgument
3. Нулевой делитель (σ = 0, MAD = 0) → DivisionByZero
"""

from collections import Counter
from decimal import Decimal
from typing import Iterable, List, Optional, Sequence

from exactprob.core.config import DEFAULT_OUTLIER_CONFIG, DecimalConfig, OutlierConfig
from exactprob.core.errors import EmptyInput, InvalidArgument
from exactprob.core.math.exact_decimal import (
    absolute_value,
    add,
    decimal_context,
    decimal_sum,
    divide,
    multiply,
    square_root,
    subtract,
    to_decimal,
    to_native,
)
from exactprob.core.math.numerical_safeguards import require_finite_number

# =============================================================================
# DECIMAL-РЕДУКЦИИ (без конверсии во float)
# =============================================================================


def require_data(data: Iterable[float], name: str = "data") -> List[float]:
    """
    Материализация и валидация выборки.

    Args:
        data: Последовательность конечных чисел
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Список значений в исходном порядке

    Raises:
        EmptyInput: Если выборка пуста
        InvalidArgument: Если элемент не число, bool, NaN или Inf
    """
    if data is None:
        raise EmptyInput(f"{name} must not be None")
    values = list(data)
    if not values:
        raise EmptyInput(f"{name} must contain at least one value")
    for i, value in enumerate(values):
        require_finite_number(value, f"{name}[{i}]")
    return values


def decimal_mean(values: Sequence[float]) -> Decimal:
    return divide(decimal_sum(values), len(values))


def decimal_median(values: Sequence[float]) -> Decimal:
    ordered = sorted(to_decimal(v) for v in values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return divide(add(ordered[mid - 1], ordered[mid]), 2)
    return ordered[mid]


def decimal_variance(values: Sequence[float], ddof: int) -> Decimal:
    if ddof not in (0, 1):
        raise InvalidArgument(f"ddof must be 0 or 1, got {ddof!r}")
    if len(values) - ddof < 1:
        raise InvalidArgument(f"variance with ddof={ddof} needs more than {ddof} values")
    avg = decimal_mean(values)
    squared = decimal_sum(multiply(d, d) for d in (subtract(v, avg) for v in values))
    return divide(squared, len(values) - ddof)


def decimal_median_absolute_deviation(values: Sequence[float]) -> Decimal:
    med = decimal_median(values)
    return decimal_median([absolute_value(subtract(v, med)) for v in values])


# =============================================================================
# ЦЕНТРАЛЬНАЯ ТЕНДЕНЦИЯ
# =============================================================================


def mean(data: Iterable[float], config: Optional[DecimalConfig] = None) -> float:
    """
    Среднее арифметическое.

    Examples:
        >>> mean([3, 3, 4, 4, 5, 6, 7, 104])
        17.0
    """
    values = require_data(data)
    with decimal_context(config):
        return to_native(decimal_mean(values))


def median(data: Iterable[float], config: Optional[DecimalConfig] = None) -> float:
    """
    Медиана: средний элемент отсортированной выборки, для чётной длины
    среднее двух средних элементов.

    Examples:
        >>> median([3, 3, 4, 4, 5, 6, 7, 104])
        4.5
    """
    values = require_data(data)
    with decimal_context(config):
        return to_native(decimal_median(values))


def mode(data: Iterable[float]) -> List[float]:
    """
    Наиболее частые значения.

    При равенстве частот возвращаются все моды по возрастанию, поэтому
    результат всегда список.

    Examples:
        >>> mode([3, 3, 4, 4, 5, 6, 7, 104])
        [3, 4]
    """
    values = require_data(data)
    counts = Counter(values)
    top = max(counts.values())
    return sorted(value for value, count in counts.items() if count == top)


# =============================================================================
# РАЗБРОС
# =============================================================================


def variance(data: Iterable[float], ddof: int = 0, config: Optional[DecimalConfig] = None) -> float:
    """
    Дисперсия: среднее квадратов отклонений от среднего.

    Args:
        data: Выборка
        ddof: 0: генеральная дисперсия (делитель N), 1: выборочная (N - 1)
        config: Decimal-конфигурация

    Raises:
        EmptyInput: Если выборка пуста
        InvalidArgument: Если ddof не 0/1 или значений не больше ddof
    """
    values = require_data(data)
    with decimal_context(config):
        return to_native(decimal_variance(values, ddof))


def standard_deviation(
    data: Iterable[float],
    ddof: int = 0,
    config: Optional[DecimalConfig] = None,
) -> float:
    """
    Стандартное отклонение sqrt(variance).

    Examples:
        >>> standard_deviation([2, 4, 4, 4, 5, 5, 7, 9])
        2.0
    """
    values = require_data(data)
    with decimal_context(config):
        return to_native(square_root(decimal_variance(values, ddof)))


def z_score(value: float, mean: float, std_dev: float, config: Optional[DecimalConfig] = None) -> float:
    """
    Число стандартных отклонений, на которое value отстоит от среднего.

    Args:
        value: Точка выборки
        mean: Среднее выборки
        std_dev: Стандартное отклонение выборки

    Returns:
        (value - mean) / std_dev

    Raises:
        DivisionByZero: Если std_dev == 0
    """
    for name, v in (("value", value), ("mean", mean), ("std_dev", std_dev)):
        require_finite_number(v, name)
    with decimal_context(config):
        return to_native(divide(subtract(value, mean), std_dev))


def median_absolute_deviation(data: Iterable[float], config: Optional[DecimalConfig] = None) -> float:
    """
    Медиана абсолютных отклонений от медианы (MAD).

    Мера разброса, устойчивая к выбросам.
    """
    values = require_data(data)
    with decimal_context(config):
        return to_native(decimal_median_absolute_deviation(values))


def modified_z_score(
    value: float,
    median: float,
    mad: float,
    config: Optional[DecimalConfig] = None,
    outlier_config: Optional[OutlierConfig] = None,
) -> float:
    """
    Модифицированный z-score: 0.6745 · |value - median| / MAD.

    Args:
        value: Точка выборки
        median: Медиана выборки
        mad: Медиана абсолютных отклонений
        config: Decimal-конфигурация
        outlier_config: Константа 0.6745 берётся отсюда

    Raises:
        DivisionByZero: Если mad == 0
    """
    for name, v in (("value", value), ("median", median), ("mad", mad)):
        require_finite_number(v, name)
    outlier_config = outlier_config or DEFAULT_OUTLIER_CONFIG
    with decimal_context(config):
        return to_native(decimal_modified_z(value, median, mad, outlier_config))


def decimal_modified_z(value: float, med: Decimal, mad: Decimal, outlier_config: OutlierConfig) -> Decimal:
    deviation = absolute_value(subtract(value, med))
    return divide(multiply(outlier_config.modified_z_constant, deviation), mad)
