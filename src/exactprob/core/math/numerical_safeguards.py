"""
Numerical Safeguards — валидация входов и округление индексов

Модуль собирает проверки, общие для всех вычислительных модулей:
- Проверка целочисленных аргументов (n, k, целевая сумма костей)
- Проверка элементов выборок (NaN/Inf, bool, нечисловые типы)
- Допуск нормировки вероятностного пространства
- Округление half-up для индексов квантилей и срезов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool никогда не принимается как целое число
2. NaN/Inf никогда не проходят валидацию
3. Нарушение домена → InvalidArgument (не тихий fallback)
"""

import math
from typing import Any, Final

from exactprob.core.errors import InvalidArgument

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Допуск суммы вероятностей probability space относительно 1
EPS_PROBABILITY_SUM: Final[float] = 1e-9


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ АРГУМЕНТЫ
# =============================================================================


def is_strict_int(value: Any) -> bool:
    """
    Проверка, что значение: int, но не bool.

    Args:
        value: Проверяемое значение

    Returns:
        True для int (включая подклассы), False для bool и всего остального
    """
    return isinstance(value, int) and not isinstance(value, bool)


def require_int(value: Any, name: str) -> int:
    """
    Валидация, что значение целое.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        InvalidArgument: Если value не int или bool
    """
    if not is_strict_int(value):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    return int(value)


def require_non_negative_int(value: Any, name: str) -> int:
    """
    Валидация, что значение: неотрицательное целое.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        InvalidArgument: Если value не int, bool или value < 0

    Examples:
        >>> require_non_negative_int(5, "n")
        5
        >>> require_non_negative_int(-1, "n")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidArgument: n must be non-negative, got -1
    """
    result = require_int(value, name)
    if result < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {result}")
    return result


# =============================================================================
# FLOAT-ЗНАЧЕНИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def require_finite_number(value: Any, name: str) -> float:
    """
    Валидация, что значение: конечное число (int или float, не bool).

    Args:
        value: Проверяемое значение
        name: Имя параметра

    Returns:
        value без изменений

    Raises:
        InvalidArgument: Если value не число, bool, NaN или Inf
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgument(f"{name} must be a number, got {value!r}")
    if not is_valid_float(float(value)):
        raise InvalidArgument(f"{name} must be a valid float (not NaN/Inf), got {value}")
    return value


# =============================================================================
# ОКРУГЛЕНИЕ ИНДЕКСОВ
# =============================================================================


def round_half_up(value: float) -> int:
    """
    Округление до целого по правилу half-up (0.5 → 1, 2.5 → 3).

    Встроенный round() использует banker's rounding (2.5 → 2), что сдвигает
    границы срезов и квантилей. Для отрицательных значений округление
    симметрично: half away from zero.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(0.95)
        1
        >>> round_half_up(0.2)
        0
    """
    if value >= 0:
        return math.floor(value + 0.5)
    return math.ceil(value - 0.5)


def clamp_index(index: int, length: int) -> int:
    """
    Ограничение индекса диапазоном [0, length - 1].

    Args:
        index: Исходный индекс
        length: Длина последовательности (>= 1)

    Returns:
        Индекс, гарантированно валидный для последовательности длины length
    """
    if length < 1:
        raise InvalidArgument(f"length must be >= 1, got {length}")
    return max(0, min(index, length - 1))
