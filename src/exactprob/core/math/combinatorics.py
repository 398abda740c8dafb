"""
Combinatorics — факториалы и биномиальные коэффициенты в Decimal

Модуль считает целочисленную комбинаторику через decimal-примитив:
- factorial: итеративное произведение 2..num (без рекурсии)
- binomial_coefficient: n! / ((n - k)! · k!)
- multiset_coefficient: C(n + k - 1, k), выбор с повторениями

ФОРМУЛЫ:
    ⎛n⎞        n!
    ⎜ ⎟ =  ――――――――――
    ⎝k⎠    k!(n - k)!

    ⎛⎛n⎞⎞   ⎛ n + k - 1 ⎞
    ⎜⎜ ⎟⎟ = ⎜           ⎟
    ⎝⎝k⎠⎠   ⎝     k     ⎠

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результаты точные: рабочая точность поднимается до числа цифр n!
2. factorial(0) == factorial(1) == 1
3. 0 ≤ k ≤ n проверяется явно, иначе InvalidArgument
"""

import math
from contextlib import contextmanager
from decimal import MAX_EMAX, Context, Decimal
from typing import Iterator, Optional

from exactprob.core.config import DEFAULT_DECIMAL_CONFIG, DecimalConfig
from exactprob.core.errors import InvalidArgument
from exactprob.core.math.exact_decimal import ONE, ZERO, decimal_context, divide, multiply
from exactprob.core.math.numerical_safeguards import require_non_negative_int

# Запас цифр поверх оценки через lgamma
_DIGITS_MARGIN = 2


# =============================================================================
# ТОЧНОСТЬ
# =============================================================================


def factorial_digits(num: int) -> int:
    """
    Верхняя оценка числа десятичных цифр num!.

    digits(num!) = floor(log10(num!)) + 1 = floor(lgamma(num + 1) / ln 10) + 1

    Args:
        num: Неотрицательное целое

    Returns:
        Число цифр (>= 1)
    """
    if num < 2:
        return 1
    return int(math.lgamma(num + 1) / math.log(10)) + 1


@contextmanager
def exact_integer_context(digits: int, config: Optional[DecimalConfig] = None) -> Iterator[Context]:
    """
    Контекст, в котором целые числа до digits цифр не округляются.

    Точность берётся как max(config.precision, digits + запас), Emax снят.
    """
    config = config or DEFAULT_DECIMAL_CONFIG
    precision = max(config.precision, digits + _DIGITS_MARGIN)
    with decimal_context(DecimalConfig(precision=precision, rounding=config.rounding)) as ctx:
        ctx.Emax = MAX_EMAX
        yield ctx


# =============================================================================
# FACTORIAL
# =============================================================================


def factorial(num: int, config: Optional[DecimalConfig] = None) -> Decimal:
    """
    Итеративный факториал.

    Итерация вместо рекурсии: глубина стека не зависит от num.

    Args:
        num: Неотрицательное целое
        config: Decimal-конфигурация (default: DEFAULT_DECIMAL_CONFIG)

    Returns:
        num! как точное целое Decimal

    Raises:
        InvalidArgument: Если num отрицательный или не целый

    Examples:
        >>> factorial(5)
        Decimal('120')
        >>> factorial(0)
        Decimal('1')
    """
    n = require_non_negative_int(num, "num")

    result = ONE
    with exact_integer_context(factorial_digits(n), config):
        for i in range(2, n + 1):
            result = multiply(result, i)
    return result


# =============================================================================
# BINOMIAL / MULTISET COEFFICIENTS
# =============================================================================


def binomial_coefficient(n: int, k: int, config: Optional[DecimalConfig] = None) -> Decimal:
    """
    Биномиальный коэффициент "n choose k".

    Число способов выбрать k различных элементов из n без повторений.

    Args:
        n: Размер множества (>= 0)
        k: Размер выборки (0 ≤ k ≤ n)
        config: Decimal-конфигурация

    Returns:
        C(n, k) как точное целое Decimal

    Raises:
        InvalidArgument: Если n или k отрицательные/нецелые, либо k > n

    Examples:
        >>> binomial_coefficient(5, 2)
        Decimal('10')
    """
    n = require_non_negative_int(n, "n")
    k = require_non_negative_int(k, "k")
    if k > n:
        raise InvalidArgument(f"k must be <= n, got n={n}, k={k}")

    if k == 0 or k == n:
        return ONE

    with exact_integer_context(factorial_digits(n), config):
        numerator = factorial(n, config)
        denominator = multiply(factorial(n - k, config), factorial(k, config))
        return divide(numerator, denominator)


def multiset_coefficient(n: int, k: int, config: Optional[DecimalConfig] = None) -> Decimal:
    """
    Мультимножественный коэффициент "n multichoose k".

    Число способов выбрать k элементов из n с повторениями.
    Например: из 9 вкусов мороженого 3 шарика с повторами:
    multiset_coefficient(9, 3) == 165.

    Граница n == 0: из пустого множества можно выбрать только пустую
    выборку, поэтому результат 1 при k == 0 и 0 при k > 0.

    Args:
        n: Число вариантов (>= 0)
        k: Размер выборки (>= 0)
        config: Decimal-конфигурация

    Returns:
        C(n + k - 1, k) как точное целое Decimal

    Raises:
        InvalidArgument: Если n или k отрицательные/нецелые
    """
    n = require_non_negative_int(n, "n")
    k = require_non_negative_int(k, "k")

    if n == 0:
        return ONE if k == 0 else ZERO

    return binomial_coefficient(n + k - 1, k, config)
