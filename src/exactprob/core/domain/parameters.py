"""
Parameters — модели параметров распределений

Immutable Pydantic модели для транзиентных аргументов:
- BinomialParameters: n испытаний, k успехов, вероятность успеха p
- DiceParameters: число костей и число граней

Модели строгие (strict=True): bool, строки и нецелые float в целочисленных
полях отклоняются. Фабрики create() переводят pydantic.ValidationError
в InvalidArgument, чтобы вызывающий код видел единую таксономию ошибок.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, ValidationError, model_validator

from exactprob.core.errors import InvalidArgument
from exactprob.core.math.exact_decimal import ONE, subtract, to_decimal


def _invalid_argument(model_name: str, error: ValidationError) -> InvalidArgument:
    details = "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc']) or model_name}: {err['msg']}"
        for err in error.errors()
    )
    return InvalidArgument(f"Invalid {model_name}: {details}")


# =============================================================================
# BINOMIAL
# =============================================================================


class BinomialParameters(BaseModel):
    """
    Параметры биномиального распределения X ~ B(n, p) и точки k.

    Условия биномиальной модели:
    1. Фиксированное число испытаний n
    2. Два исхода в каждом испытании: успех или неудача
    3. Вероятность успеха p одинакова во всех испытаниях
    4. Испытания независимы
    """

    n: int = Field(..., ge=0, description="Число испытаний")
    k: int = Field(..., ge=0, description="Число успехов (0 ≤ k ≤ n)")
    p: float = Field(..., ge=0, le=1, allow_inf_nan=False, description="Вероятность успеха")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="after")
    def validate_k_within_trials(self) -> "BinomialParameters":
        """k не может превышать число испытаний."""
        if self.k > self.n:
            raise ValueError(f"k must be <= n, got n={self.n}, k={self.k}")
        return self

    @classmethod
    def create(cls, n: Any, k: Any, p: Any) -> "BinomialParameters":
        """
        Построение с переводом ошибок валидации в InvalidArgument.

        Raises:
            InvalidArgument: Если параметры вне домена
        """
        try:
            return cls(n=n, k=k, p=p)
        except ValidationError as e:
            raise _invalid_argument(cls.__name__, e) from e

    @property
    def success(self) -> Decimal:
        """p как точный Decimal (0.1 → Decimal('0.1'))."""
        return to_decimal(self.p)

    @property
    def failure(self) -> Decimal:
        """q = 1 - p, вероятность неудачи."""
        return subtract(ONE, self.success)

    def at(self, k: int) -> "BinomialParameters":
        """Те же n и p для другой точки k."""
        return self.create(n=self.n, k=k, p=self.p)


# =============================================================================
# DICE
# =============================================================================


class DiceParameters(BaseModel):
    """
    Набор из dice одинаковых честных костей с sides гранями.

    Сумма выпавших значений лежит в [dice, dice * sides].
    """

    dice: int = Field(..., ge=1, description="Число костей")
    sides: int = Field(..., ge=1, description="Число граней каждой кости")

    model_config = {"frozen": True, "strict": True}

    @classmethod
    def create(cls, dice: Any, sides: Any) -> "DiceParameters":
        """
        Построение с переводом ошибок валидации в InvalidArgument.

        Raises:
            InvalidArgument: Если dice или sides не целые >= 1
        """
        try:
            return cls(dice=dice, sides=sides)
        except ValidationError as e:
            raise _invalid_argument(cls.__name__, e) from e

    @property
    def min_sum(self) -> int:
        return self.dice

    @property
    def max_sum(self) -> int:
        return self.dice * self.sides

    @property
    def total_outcomes(self) -> int:
        """Число равновероятных упорядоченных исходов sides^dice."""
        return self.sides**self.dice

    def sum_range(self) -> range:
        """Все достижимые суммы по возрастанию."""
        return range(self.min_sum, self.max_sum + 1)

    def is_reachable(self, total: int) -> bool:
        return self.min_sum <= total <= self.max_sum
