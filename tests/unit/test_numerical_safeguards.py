"""
Тесты для модуля Numerical Safeguards и конфигурации

Проверяет:
1. Валидацию целочисленных аргументов (bool и float отклоняются)
2. Валидацию конечных чисел (NaN/Inf, bool, строки)
3. Допуск нормировки EPS_PROBABILITY_SUM
4. Округление half-up и ограничение индексов
5. Immutable конфигурацию DecimalConfig / OutlierConfig
"""

import dataclasses

import pytest

from exactprob.core.config import (
    DEFAULT_DECIMAL_CONFIG,
    DEFAULT_OUTLIER_CONFIG,
    DecimalConfig,
    OutlierConfig,
)
from exactprob.core.errors import ExactProbError, InvalidArgument
from exactprob.core.math.numerical_safeguards import (
    EPS_PROBABILITY_SUM,
    clamp_index,
    is_strict_int,
    is_valid_float,
    require_finite_number,
    require_int,
    require_non_negative_int,
    round_half_up,
)

# =============================================================================
# ТЕСТЫ ЦЕЛОЧИСЛЕННЫХ АРГУМЕНТОВ
# =============================================================================


class TestIsStrictInt:
    """Тесты для is_strict_int"""

    def test_ints_accepted(self) -> None:
        """int любого знака: целое"""
        assert is_strict_int(0)
        assert is_strict_int(-7)
        assert is_strict_int(10**30)

    def test_bool_rejected(self) -> None:
        """bool не считается целым числом"""
        assert not is_strict_int(True)
        assert not is_strict_int(False)

    def test_other_types_rejected(self) -> None:
        """float, строки и None: не целые"""
        assert not is_strict_int(2.0)
        assert not is_strict_int("2")
        assert not is_strict_int(None)


class TestRequireInt:
    """Тесты для require_int / require_non_negative_int"""

    def test_valid_values_returned(self) -> None:
        """Валидные значения возвращаются без изменений"""
        assert require_int(-3, "p") == -3
        assert require_non_negative_int(0, "n") == 0

    def test_float_rejected(self) -> None:
        """Нецелые значения вызывают InvalidArgument"""
        with pytest.raises(InvalidArgument, match="n must be an integer"):
            require_non_negative_int(2.5, "n")

        with pytest.raises(InvalidArgument, match="n must be an integer"):
            require_non_negative_int(2.0, "n")

    def test_negative_rejected(self) -> None:
        """Отрицательные значения вызывают InvalidArgument"""
        with pytest.raises(InvalidArgument, match="n must be non-negative, got -1"):
            require_non_negative_int(-1, "n")

    def test_bool_rejected(self) -> None:
        """True не подменяет 1"""
        with pytest.raises(InvalidArgument):
            require_non_negative_int(True, "n")

    def test_invalid_argument_is_value_error(self) -> None:
        """InvalidArgument ловится и как ValueError, и как ExactProbError"""
        with pytest.raises(ValueError):
            require_int("3", "n")

        with pytest.raises(ExactProbError):
            require_int("3", "n")


# =============================================================================
# ТЕСТЫ FLOAT-ЗНАЧЕНИЙ
# =============================================================================


class TestFiniteNumbers:
    """Тесты для is_valid_float / require_finite_number"""

    def test_valid_float(self) -> None:
        assert is_valid_float(1.5)
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))

    def test_require_finite_number_accepts_int_and_float(self) -> None:
        assert require_finite_number(3, "x") == 3
        assert require_finite_number(-0.5, "x") == -0.5

    def test_require_finite_number_rejects_nan_inf(self) -> None:
        """NaN/Inf отклоняются"""
        with pytest.raises(InvalidArgument, match="NaN/Inf"):
            require_finite_number(float("nan"), "x")

        with pytest.raises(InvalidArgument, match="NaN/Inf"):
            require_finite_number(float("-inf"), "x")

    def test_require_finite_number_rejects_non_numbers(self) -> None:
        """Строки и bool отклоняются"""
        with pytest.raises(InvalidArgument, match="x must be a number"):
            require_finite_number("1.0", "x")

        with pytest.raises(InvalidArgument, match="x must be a number"):
            require_finite_number(False, "x")


class TestProbabilitySumTolerance:
    """Тесты для EPS_PROBABILITY_SUM"""

    def test_value(self) -> None:
        assert EPS_PROBABILITY_SUM == 1e-9


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ И ИНДЕКСОВ
# =============================================================================


class TestRoundHalfUp:
    """Тесты для round_half_up"""

    def test_half_rounds_up(self) -> None:
        """0.5 → 1, 2.5 → 3 (в отличие от banker's rounding в round())"""
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round(2.5) == 2

    def test_below_half_rounds_down(self) -> None:
        assert round_half_up(0.49) == 0
        assert round_half_up(1.2) == 1

    def test_negative_symmetric(self) -> None:
        """Отрицательные: half away from zero"""
        assert round_half_up(-2.5) == -3
        assert round_half_up(-0.4) == 0

    def test_returns_int(self) -> None:
        assert isinstance(round_half_up(1.0), int)


class TestClampIndex:
    """Тесты для clamp_index"""

    def test_inside_range_unchanged(self) -> None:
        assert clamp_index(1, 3) == 1

    def test_clamped_to_last(self) -> None:
        assert clamp_index(5, 3) == 2

    def test_clamped_to_zero(self) -> None:
        assert clamp_index(-1, 3) == 0

    def test_empty_length_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="length must be >= 1"):
            clamp_index(0, 0)


# =============================================================================
# ТЕСТЫ КОНФИГУРАЦИИ
# =============================================================================


class TestDecimalConfig:
    """Тесты для DecimalConfig"""

    def test_defaults(self) -> None:
        assert DEFAULT_DECIMAL_CONFIG.precision == 100
        assert DEFAULT_DECIMAL_CONFIG.rounding == "ROUND_HALF_EVEN"

    def test_invalid_precision(self) -> None:
        with pytest.raises(ValueError, match="precision must be >= 1"):
            DecimalConfig(precision=0)

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_DECIMAL_CONFIG.precision = 10


class TestOutlierConfig:
    """Тесты для OutlierConfig"""

    def test_defaults(self) -> None:
        assert DEFAULT_OUTLIER_CONFIG.modified_z_cutoff == 3.5
        assert DEFAULT_OUTLIER_CONFIG.modified_z_constant == 0.6745
        assert DEFAULT_OUTLIER_CONFIG.trim_fraction == 0.025
        assert DEFAULT_OUTLIER_CONFIG.std_dev_bound == 3.0
        assert DEFAULT_OUTLIER_CONFIG.iqr_multiplier == 2.0

    def test_trim_fraction_range(self) -> None:
        with pytest.raises(ValueError, match="trim_fraction"):
            OutlierConfig(trim_fraction=0.5)

        with pytest.raises(ValueError, match="trim_fraction"):
            OutlierConfig(trim_fraction=-0.1)

    def test_non_positive_thresholds(self) -> None:
        with pytest.raises(ValueError, match="std_dev_bound must be positive"):
            OutlierConfig(std_dev_bound=0.0)
