"""
ProbabilitySpace — дискретное вероятностное пространство

Immutable Pydantic модель: упорядоченное отображение исход → вероятность.

Вероятностное пространство состоит из пространства исходов Ω, пространства
событий ℱ и вероятностной функции P:
- P: Ω → [0, 1], P(Ω) = 1, P(∅) = 0
- Для события A = {ω₁, ..., ωₙ} ⊂ Ω: P(A) = P(ω₁) + ... + P(ωₙ)
- Дополнение: P(Aᶜ) = 1 - P(A)

Исходы: native int (не строки), хранятся по возрастанию. Отображение
обёрнуто в MappingProxyType и не может быть изменено после построения.
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from jsonschema import ValidationError as SchemaValidationError
from pydantic import BaseModel, Field, ValidationError, field_validator

from exactprob.core.config import DecimalConfig
from exactprob.core.contracts.validators import (
    PROBABILITY_SPACE_SCHEMA_VERSION,
    validate_probability_space,
)
from exactprob.core.errors import InvalidArgument
from exactprob.core.math.exact_decimal import (
    ONE,
    ZERO,
    absolute_value,
    decimal_context,
    decimal_sum,
    subtract,
    to_decimal,
)
from exactprob.core.math.numerical_safeguards import EPS_PROBABILITY_SUM, is_strict_int


def _outcome_key(key: Any) -> int:
    """Исход из ключа отображения: int (не bool) или строка с целым числом."""
    if is_strict_int(key):
        return int(key)
    if isinstance(key, str):
        try:
            return int(key.strip())
        except ValueError as e:
            raise ValueError(f"outcome must be an integer, got {key!r}") from e
    raise ValueError(f"outcome must be an integer, got {key!r}")


class ProbabilitySpace(BaseModel):
    """
    Вероятностное пространство дискретной случайной величины.

    Immutable модель (frozen=True). Пример для одной d6:
        {1: 1/6, 2: 1/6, 3: 1/6, 4: 1/6, 5: 1/6, 6: 1/6}
    """

    probabilities: Mapping[int, Decimal] = Field(
        ..., description="Исход → вероятность в [0, 1], по возрастанию исхода"
    )

    model_config = {"frozen": True}

    @field_validator("probabilities", mode="before")
    @classmethod
    def convert_probabilities(cls, v: Any) -> Dict[int, Decimal]:
        """
        Ключи → int исходов, значения → Decimal через to_decimal.

        bool-ключи отклоняются; два ключа одного исхода ("7" и 7) считаются
        ошибкой, а не перезаписью.
        """
        if not isinstance(v, Mapping):
            raise ValueError(f"probabilities must be a mapping, got {type(v).__name__}")
        probabilities: Dict[int, Decimal] = {}
        for key, value in v.items():
            outcome = _outcome_key(key)
            if outcome in probabilities:
                raise ValueError(f"duplicate outcome {outcome} (key {key!r})")
            probabilities[outcome] = to_decimal(value)
        return probabilities

    @field_validator("probabilities")
    @classmethod
    def validate_and_freeze(cls, v: Mapping[int, Decimal]) -> Mapping[int, Decimal]:
        """Каждая вероятность в [0, 1]; порядок по возрастанию исхода; read-only."""
        for outcome, probability in v.items():
            if probability < 0 or probability > 1:
                raise ValueError(f"P({outcome}) must be in [0, 1], got {probability}")
        return MappingProxyType(dict(sorted(v.items())))

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> "ProbabilitySpace":
        """
        Построение из произвольного отображения исход → вероятность.

        Ключи могут быть int или строками с целым числом ("7").

        Raises:
            InvalidArgument: Если ключи не целые или вероятности вне [0, 1]
        """
        if isinstance(mapping, ProbabilitySpace):
            return mapping
        try:
            return cls(probabilities=mapping)
        except ValidationError as e:
            raise InvalidArgument(f"Invalid probability space: {e}") from e

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "ProbabilitySpace":
        """
        Построение из JSON-контракта probability_space.

        Raises:
            InvalidArgument: Если payload не соответствует схеме
        """
        try:
            validate_probability_space(data)
        except SchemaValidationError as e:
            raise InvalidArgument(f"Invalid probability_space contract: {e.message}") from e
        return cls.from_mapping({int(k): v for k, v in data["probabilities"].items()})

    def to_contract(self) -> Dict[str, Any]:
        """
        JSON-safe представление: строковые ключи, вероятности: десятичные
        строки без экспоненты (точность не теряется).
        """
        return {
            "schema_version": PROBABILITY_SPACE_SCHEMA_VERSION,
            "probabilities": {
                str(outcome): format(probability, "f")
                for outcome, probability in self.probabilities.items()
            },
        }

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    def __getitem__(self, outcome: int) -> Decimal:
        return self.probabilities[outcome]

    def __contains__(self, outcome: object) -> bool:
        return outcome in self.probabilities

    def __len__(self) -> int:
        return len(self.probabilities)

    @property
    def outcomes(self) -> Tuple[int, ...]:
        """Исходы по возрастанию."""
        return tuple(self.probabilities)

    def items(self) -> Iterable[Tuple[int, Decimal]]:
        return self.probabilities.items()

    def probability(self, outcome: int) -> Decimal:
        """P(X = outcome); 0 для исходов вне носителя."""
        return self.probabilities.get(outcome, ZERO)

    # -------------------------------------------------------------------------
    # События
    # -------------------------------------------------------------------------

    def total(self, config: Optional[DecimalConfig] = None) -> Decimal:
        """Σ P(ω) по всему носителю (должна быть ≈ 1)."""
        with decimal_context(config):
            return decimal_sum(self.probabilities.values())

    def is_normalized(
        self,
        tol: float = EPS_PROBABILITY_SUM,
        config: Optional[DecimalConfig] = None,
    ) -> bool:
        """
        Проверка P(Ω) ≈ 1.

        Args:
            tol: Абсолютный допуск (default: EPS_PROBABILITY_SUM)
            config: Decimal-конфигурация

        Returns:
            True если |Σ P(ω) - 1| <= tol
        """
        with decimal_context(config):
            return absolute_value(subtract(self.total(config), ONE)) <= to_decimal(tol)

    def event_probability(
        self,
        outcomes: Iterable[int],
        config: Optional[DecimalConfig] = None,
    ) -> Decimal:
        """
        P(A) для события A ⊂ Ω.

        Повторяющиеся исходы считаются один раз; исходы вне носителя
        имеют вероятность 0.
        """
        event = set(outcomes)
        with decimal_context(config):
            return decimal_sum(self.probability(outcome) for outcome in event)

    def complement_probability(
        self,
        outcomes: Iterable[int],
        config: Optional[DecimalConfig] = None,
    ) -> Decimal:
        """P(Aᶜ) = P(Ω) - P(A)."""
        event = set(outcomes)
        with decimal_context(config):
            return decimal_sum(
                probability
                for outcome, probability in self.probabilities.items()
                if outcome not in event
            )

    def cumulative_probability(
        self,
        outcome: int,
        config: Optional[DecimalConfig] = None,
    ) -> Decimal:
        """P(X ≤ outcome)."""
        with decimal_context(config):
            return decimal_sum(p for x, p in self.probabilities.items() if x <= outcome)

    def most_likely_outcomes(self) -> Tuple[int, ...]:
        """Исходы с максимальной вероятностью (все при равенстве), по возрастанию."""
        if not self.probabilities:
            return ()
        peak = max(self.probabilities.values())
        return tuple(x for x, p in self.probabilities.items() if p == peak)
