"""
Expectation — математическое ожидание дискретной случайной величины

Для X с конечным числом исходов x₁, ..., xₖ и вероятностями p₁, ..., pₖ:

             k
    E[X] =   ∑ xᵢpᵢ = x₁p₁ + x₂p₂ + ... + xₖpₖ
            i=1

Пример:
           x |  0  |  1  |  2  |  3  |
    P(X = x) | 0.1 | 0.2 | 0.4 | 0.3 |

    E[X] = 0·0.1 + 1·0.2 + 2·0.4 + 3·0.3 = 1.9

Сумма накапливается в Decimal и конвертируется в float только на выходе.
"""

import logging
from typing import Any, Mapping, Optional, Union

from exactprob.core.config import DecimalConfig
from exactprob.core.domain.probability_space import ProbabilitySpace
from exactprob.core.math.exact_decimal import decimal_context, decimal_sum, multiply, to_native

logger = logging.getLogger(__name__)


def expected_value(
    space: Union[ProbabilitySpace, Mapping[Any, Any]],
    config: Optional[DecimalConfig] = None,
) -> float:
    """
    Взвешенное среднее исходов вероятностного пространства.

    Args:
        space: ProbabilitySpace или отображение исход → вероятность
               (ключи int или строки с целым числом)
        config: Decimal-конфигурация

    Returns:
        E[X] как native float

    Raises:
        InvalidArgument: Если отображение не является вероятностным пространством

    Examples:
        >>> expected_value({0: 0.1, 1: 0.2, 2: 0.4, 3: 0.3})
        1.9
    """
    space = ProbabilitySpace.from_mapping(space)

    if not space.is_normalized(config=config):
        logger.warning(
            "Expected value over a space whose probabilities sum to %s, not 1",
            space.total(config),
        )

    with decimal_context(config):
        total = decimal_sum(multiply(outcome, probability) for outcome, probability in space.items())
    return to_native(total)
