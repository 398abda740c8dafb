"""
Тесты для доменных моделей

Проверяет:
1. BinomialParameters: домен n, k, p и immutability
2. DiceParameters: диапазон сумм и число исходов
3. ProbabilitySpace: конверсию, порядок исходов, события
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from exactprob.core.domain import BinomialParameters, DiceParameters, ProbabilitySpace
from exactprob.core.errors import InvalidArgument

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def coin_pair_space() -> ProbabilitySpace:
    """Число орлов при двух бросках монеты."""
    return ProbabilitySpace.from_mapping({2: 0.25, 0: 0.25, 1: 0.5})


# =============================================================================
# ТЕСТЫ BINOMIAL PARAMETERS
# =============================================================================


class TestBinomialParameters:
    """Тесты для BinomialParameters"""

    def test_valid(self) -> None:
        params = BinomialParameters.create(3, 1, 0.1)
        assert params.n == 3
        assert params.k == 1
        assert params.success == Decimal("0.1")
        assert params.failure == Decimal("0.9")

    def test_k_greater_than_n(self) -> None:
        with pytest.raises(InvalidArgument, match="k must be <= n"):
            BinomialParameters.create(3, 4, 0.5)

    @pytest.mark.parametrize("p", [-0.1, 1.5, float("nan"), float("inf")])
    def test_probability_out_of_domain(self, p: float) -> None:
        with pytest.raises(InvalidArgument, match="Invalid BinomialParameters"):
            BinomialParameters.create(3, 1, p)

    def test_strict_integers(self) -> None:
        """Строки, bool и float в целочисленных полях отклоняются"""
        with pytest.raises(InvalidArgument):
            BinomialParameters.create("3", 1, 0.5)

        with pytest.raises(InvalidArgument):
            BinomialParameters.create(True, 1, 0.5)

        with pytest.raises(InvalidArgument):
            BinomialParameters.create(3, 1.0, 0.5)

    def test_at_returns_new_instance(self) -> None:
        params = BinomialParameters.create(5, 0, 0.5)
        moved = params.at(3)
        assert moved.k == 3
        assert params.k == 0

    def test_at_validates(self) -> None:
        with pytest.raises(InvalidArgument):
            BinomialParameters.create(5, 0, 0.5).at(6)

    def test_frozen(self) -> None:
        params = BinomialParameters.create(5, 2, 0.5)
        with pytest.raises(ValidationError):
            params.k = 3


# =============================================================================
# ТЕСТЫ DICE PARAMETERS
# =============================================================================


class TestDiceParameters:
    """Тесты для DiceParameters"""

    def test_two_d6(self) -> None:
        params = DiceParameters.create(2, 6)
        assert params.min_sum == 2
        assert params.max_sum == 12
        assert params.total_outcomes == 36
        assert list(params.sum_range()) == list(range(2, 13))

    def test_reachability(self) -> None:
        params = DiceParameters.create(3, 4)
        assert params.is_reachable(3)
        assert params.is_reachable(12)
        assert not params.is_reachable(2)
        assert not params.is_reachable(13)

    @pytest.mark.parametrize("dice,sides", [(0, 6), (2, 0), (-1, 6), (2.0, 6), (2, "6")])
    def test_invalid(self, dice, sides) -> None:
        with pytest.raises(InvalidArgument, match="Invalid DiceParameters"):
            DiceParameters.create(dice, sides)


# =============================================================================
# ТЕСТЫ PROBABILITY SPACE
# =============================================================================


class TestProbabilitySpaceConstruction:
    """Тесты построения ProbabilitySpace"""

    def test_outcomes_sorted(self, coin_pair_space: ProbabilitySpace) -> None:
        assert coin_pair_space.outcomes == (0, 1, 2)

    def test_values_are_exact_decimals(self, coin_pair_space: ProbabilitySpace) -> None:
        assert coin_pair_space[1] == Decimal("0.5")
        assert isinstance(coin_pair_space[1], Decimal)

    def test_string_keys_converted(self) -> None:
        """Строковые ключи ("7") становятся int"""
        space = ProbabilitySpace.from_mapping({"7": "1"})
        assert space.outcomes == (7,)
        assert 7 in space

    def test_from_mapping_passthrough(self, coin_pair_space: ProbabilitySpace) -> None:
        assert ProbabilitySpace.from_mapping(coin_pair_space) is coin_pair_space

    @pytest.mark.parametrize(
        "mapping",
        [
            {1: 1.5},
            {1: -0.1},
            {"one": 0.5},
            {1: "abc"},
            {1: float("nan")},
        ],
    )
    def test_invalid_mapping(self, mapping) -> None:
        with pytest.raises(InvalidArgument, match="Invalid probability space"):
            ProbabilitySpace.from_mapping(mapping)

    @pytest.mark.parametrize("key", [True, False, 1.0, None])
    def test_non_integer_key_rejected(self, key) -> None:
        """bool и float не принимаются как исход"""
        with pytest.raises(InvalidArgument, match="outcome must be an integer"):
            ProbabilitySpace.from_mapping({key: 1.0})

    def test_duplicate_outcome_rejected(self) -> None:
        """Ключи "7" и 7 задают один исход: ошибка, а не перезапись"""
        with pytest.raises(InvalidArgument, match="duplicate outcome 7"):
            ProbabilitySpace.from_mapping({"7": 0.5, 7: 0.5})

    def test_not_a_mapping(self) -> None:
        with pytest.raises(InvalidArgument):
            ProbabilitySpace.from_mapping([(1, 0.5)])

    def test_immutable(self, coin_pair_space: ProbabilitySpace) -> None:
        """Ни отображение, ни поле не меняются после построения"""
        with pytest.raises(TypeError):
            coin_pair_space.probabilities[3] = Decimal(0)

        with pytest.raises(ValidationError):
            coin_pair_space.probabilities = {}


class TestProbabilitySpaceEvents:
    """Тесты событий ProbabilitySpace"""

    def test_total_and_normalized(self, coin_pair_space: ProbabilitySpace) -> None:
        assert coin_pair_space.total() == Decimal(1)
        assert coin_pair_space.is_normalized()

    def test_not_normalized(self) -> None:
        assert not ProbabilitySpace.from_mapping({1: 0.5}).is_normalized()

    def test_probability_outside_support(self, coin_pair_space: ProbabilitySpace) -> None:
        assert coin_pair_space.probability(5) == Decimal(0)

    def test_event_probability(self, coin_pair_space: ProbabilitySpace) -> None:
        """Повторы и исходы вне носителя не влияют на P(A)"""
        assert coin_pair_space.event_probability([0, 2]) == Decimal("0.5")
        assert coin_pair_space.event_probability([1, 1, 1, 9]) == Decimal("0.5")
        assert coin_pair_space.event_probability([]) == Decimal(0)

    def test_complement_probability(self, coin_pair_space: ProbabilitySpace) -> None:
        assert coin_pair_space.complement_probability([1]) == Decimal("0.5")
        assert coin_pair_space.complement_probability([]) == Decimal(1)

    def test_cumulative_probability(self, coin_pair_space: ProbabilitySpace) -> None:
        assert coin_pair_space.cumulative_probability(-1) == Decimal(0)
        assert coin_pair_space.cumulative_probability(1) == Decimal("0.75")
        assert coin_pair_space.cumulative_probability(2) == Decimal(1)

    def test_most_likely_outcomes(self, coin_pair_space: ProbabilitySpace) -> None:
        assert coin_pair_space.most_likely_outcomes() == (1,)

    def test_most_likely_ties(self) -> None:
        space = ProbabilitySpace.from_mapping({3: 0.5, 1: 0.5})
        assert space.most_likely_outcomes() == (1, 3)
