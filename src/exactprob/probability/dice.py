"""
Dice — распределение суммы n честных костей с s гранями

Вероятность суммы p считается через формулу включений-исключений:

           kₘₐₓ     ⎛n⎞ ⎛p - s·k - 1⎞
    1/sⁿ ·  ∑ (-1)ᵏ ⎜ ⎟ ⎜           ⎟ ,   kₘₐₓ = ⌊(p - n) / s⌋
           k=0      ⎝k⎠ ⎝p - s·k - n⎠

Знакопеременная сумма целых чисел накапливается точно (рабочая точность
покрывает наибольшее слагаемое), затем делится на sⁿ один раз в точности
DecimalConfig.
"""

import logging
from decimal import Decimal
from typing import Optional

from exactprob.core.config import DecimalConfig
from exactprob.core.domain.parameters import DiceParameters
from exactprob.core.domain.probability_space import ProbabilitySpace
from exactprob.core.math.combinatorics import (
    binomial_coefficient,
    exact_integer_context,
    factorial_digits,
)
from exactprob.core.math.exact_decimal import (
    ZERO,
    add,
    decimal_context,
    divide,
    multiply,
    raised_to_power,
    to_decimal,
)
from exactprob.core.math.numerical_safeguards import require_int

logger = logging.getLogger(__name__)


def _inner_coefficient(total: int, choose: int, config: Optional[DecimalConfig]) -> Decimal:
    """C(total, choose), равный 0 вне 0 ≤ choose ≤ total."""
    if choose < 0 or choose > total:
        return ZERO
    return binomial_coefficient(total, choose, config)


def _sum_pmf(target: int, params: DiceParameters, config: Optional[DecimalConfig]) -> Decimal:
    if not params.is_reachable(target):
        return ZERO

    n, s = params.dice, params.sides
    kmax = (target - n) // s

    # Слагаемые ограничены n! · (p - 1)!
    digits = factorial_digits(n) + factorial_digits(target - 1)
    alternating = ZERO
    with exact_integer_context(digits, config):
        for k in range(kmax + 1):
            top = target - s * k - 1
            inner = _inner_coefficient(top, target - s * k - n, config)
            if inner.is_zero():
                continue
            term = multiply(binomial_coefficient(n, k, config), inner)
            alternating = add(alternating, multiply(raised_to_power(-1, k), term))

    with decimal_context(config):
        return divide(alternating, to_decimal(params.total_outcomes))


def dice_sum_pmf(p: int, n: int, s: int, config: Optional[DecimalConfig] = None) -> Decimal:
    """
    Вероятность того, что сумма n костей с s гранями равна p.

    Args:
        p: Целевая сумма
        n: Число костей (>= 1)
        s: Число граней (>= 1)
        config: Decimal-конфигурация

    Returns:
        P(сумма = p) в Decimal; 0 для p вне [n, n·s]

    Raises:
        InvalidArgument: Если p не целое, n или s не целые >= 1

    Examples:
        >>> dice_sum_pmf(12, 2, 6, DecimalConfig(precision=5))
        Decimal('0.027778')
    """
    target = require_int(p, "p")
    params = DiceParameters.create(n, s)
    return _sum_pmf(target, params, config)


def dice_probability_space(n: int, s: int, config: Optional[DecimalConfig] = None) -> ProbabilitySpace:
    """
    Вероятностное пространство сумм n костей с s гранями.

    Носитель: все суммы от n до n·s по возрастанию.

    Args:
        n: Число костей (>= 1)
        s: Число граней (>= 1)
        config: Decimal-конфигурация

    Returns:
        ProbabilitySpace сумма → вероятность

    Raises:
        InvalidArgument: Если n или s не целые >= 1
    """
    params = DiceParameters.create(n, s)
    probabilities = {total: _sum_pmf(total, params, config) for total in params.sum_range()}

    logger.debug(
        "Built probability space for %dd%d: %d outcomes in [%d, %d]",
        params.dice,
        params.sides,
        len(probabilities),
        params.min_sum,
        params.max_sum,
    )
    return ProbabilitySpace(probabilities=probabilities)
