"""
Тесты публичного API пакета exactprob
"""

from decimal import Decimal

import pytest

import exactprob


class TestPublicApi:
    """Тесты для экспортов верхнего уровня"""

    def test_all_names_resolve(self) -> None:
        for name in exactprob.__all__:
            assert hasattr(exactprob, name), name

    def test_version(self) -> None:
        assert exactprob.__version__ == "1.0.0"

    def test_error_hierarchy(self) -> None:
        """Все ошибки наследуют ExactProbError и совместимы со встроенными"""
        for error in (
            exactprob.InvalidArgument,
            exactprob.DivisionByZero,
            exactprob.InvalidOperand,
            exactprob.EmptyInput,
        ):
            assert issubclass(error, exactprob.ExactProbError)

        assert issubclass(exactprob.DivisionByZero, ZeroDivisionError)
        assert issubclass(exactprob.EmptyInput, ValueError)

    def test_end_to_end(self) -> None:
        """Пространство 2d6 → ожидание → фильтр выбросов"""
        space = exactprob.dice_probability_space(2, 6)
        assert exactprob.expected_value(space) == pytest.approx(7.0)
        assert abs(space.event_probability([2, 12]) - Decimal(1) / Decimal(18)) < Decimal("1e-25")
        assert exactprob.binomial_coefficient(4, 2) == Decimal(6)
        assert exactprob.filter_by_robust_z_score([1, 2, 3, 4, 50]) == [1, 2, 3, 4]
