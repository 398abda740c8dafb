"""
Binomial — биномиальное распределение в Decimal

Биномиальное распределение моделирует число успехов k в n независимых
испытаниях с одинаковой вероятностью успеха p.

ФОРМУЛЫ:
               ⎛n⎞
    P(X = k) = ⎜ ⎟ pᵏ(1-p)ⁿ⁻ᵏ
               ⎝k⎠

               k  ⎛n⎞
    P(X ≤ k) = ∑  ⎜ ⎟ pⁱ(1-p)ⁿ⁻ⁱ
              i=0 ⎝i⎠

p передаётся как native float и конвертируется в Decimal один раз;
все промежуточные значения и накопленная сумма CDF остаются в Decimal.
"""

from decimal import Decimal
from typing import Optional

from exactprob.core.config import DecimalConfig
from exactprob.core.domain.parameters import BinomialParameters
from exactprob.core.math.combinatorics import binomial_coefficient
from exactprob.core.math.exact_decimal import (
    ZERO,
    add,
    decimal_context,
    multiply,
    raised_to_power,
)


def _pmf(params: BinomialParameters, config: Optional[DecimalConfig]) -> Decimal:
    coeff = binomial_coefficient(params.n, params.k, config)
    with decimal_context(config):
        succ = raised_to_power(params.success, params.k)
        fail = raised_to_power(params.failure, params.n - params.k)
        return multiply(multiply(coeff, succ), fail)


def binomial_pmf(n: int, k: int, p: float, config: Optional[DecimalConfig] = None) -> Decimal:
    """
    Вероятность ровно k успехов в n испытаниях.

    Args:
        n: Число испытаний (>= 0)
        k: Число успехов (0 ≤ k ≤ n)
        p: Вероятность успеха в [0, 1]
        config: Decimal-конфигурация

    Returns:
        P(X = k) в Decimal

    Raises:
        InvalidArgument: Если параметры вне домена

    Examples:
        >>> binomial_pmf(2, 1, 0.5)
        Decimal('0.50')
    """
    return _pmf(BinomialParameters.create(n, k, p), config)


def binomial_cdf(n: int, k: int, p: float, config: Optional[DecimalConfig] = None) -> Decimal:
    """
    Вероятность не более k успехов в n испытаниях.

    Монотонно не убывает по k; binomial_cdf(n, n, p) ≈ 1.

    Args:
        n: Число испытаний (>= 0)
        k: Верхняя граница числа успехов (0 ≤ k ≤ n)
        p: Вероятность успеха в [0, 1]
        config: Decimal-конфигурация

    Returns:
        P(X ≤ k) в Decimal

    Raises:
        InvalidArgument: Если параметры вне домена
    """
    params = BinomialParameters.create(n, k, p)

    total = ZERO
    for i in range(params.k + 1):
        term = _pmf(params.at(i), config)
        with decimal_context(config):
            total = add(total, term)
    return total
