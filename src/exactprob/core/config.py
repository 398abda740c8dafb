"""
Config — параметры decimal-контекста и outlier-фильтров

Конфигурация задаётся immutable dataclass-объектами с дефолтами.
Любая публичная функция принимает необязательный keyword `config=`;
если он не передан, используются DEFAULT_* экземпляры из этого модуля.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN
from typing import Final


# =============================================================================
# DECIMAL CONTEXT
# =============================================================================


@dataclass(frozen=True)
class DecimalConfig:
    """Параметры decimal-контекста для всех вычислений.

    precision: число значащих цифр для нецелых результатов (деление,
    степени дробей, корни). Целочисленная комбинаторика поднимает точность
    автоматически и остаётся точной при любом размере входа.
    """

    precision: int = 100
    rounding: str = ROUND_HALF_EVEN

    def __post_init__(self) -> None:
        if self.precision < 1:
            raise ValueError(f"precision must be >= 1, got {self.precision}")


DEFAULT_DECIMAL_CONFIG: Final[DecimalConfig] = DecimalConfig()


# =============================================================================
# OUTLIER FILTERS
# =============================================================================


@dataclass(frozen=True)
class OutlierConfig:
    """Пороги outlier-фильтров.

    - modified_z_cutoff: точки с modified z-score >= cutoff отбрасываются
    - modified_z_constant: 0.6745 ≈ квантиль 0.75 стандартного нормального
    - trim_fraction: доля, срезаемая с каждого конца отсортированной выборки
    - std_dev_bound: ширина коридора mean ± k·σ
    - iqr_multiplier: ширина коридора median ± m·IQR
    """

    modified_z_cutoff: float = 3.5
    modified_z_constant: float = 0.6745
    trim_fraction: float = 0.025
    std_dev_bound: float = 3.0
    iqr_multiplier: float = 2.0

    def __post_init__(self) -> None:
        if not (0.0 <= self.trim_fraction < 0.5):
            raise ValueError(f"trim_fraction must be in [0, 0.5), got {self.trim_fraction}")
        for name in ("modified_z_cutoff", "modified_z_constant", "std_dev_bound", "iqr_multiplier"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")


DEFAULT_OUTLIER_CONFIG: Final[OutlierConfig] = OutlierConfig()
