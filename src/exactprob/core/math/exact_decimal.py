"""
Exact Decimal — decimal-примитив для всех вычислений

Модуль оборачивает decimal.Decimal набором чистых функций:
- Конверсия native → Decimal без артефактов двоичного float (через str)
- add / subtract / multiply / divide / raised_to_power
- square_root / absolute_value / is_equal
- Конверсия Decimal → float только на границе публичных функций

Все операции выполняются в текущем decimal-контексте потока.
decimal_context(config) задаёт точность и округление через
decimal.localcontext, поэтому вычисления в разных потоках не делят
состояние.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна операция не мутирует аргументы (Decimal immutable)
2. Деление на точный ноль → DivisionByZero, а не Inf/NaN
3. Корень из отрицательного → InvalidOperand; корень из 0 валиден
4. NaN/Inf никогда не попадают в вычисления
"""

from contextlib import contextmanager
from decimal import Context, Decimal, InvalidOperation, localcontext
from typing import Iterable, Iterator, Optional, Union

from exactprob.core.config import DEFAULT_DECIMAL_CONFIG, DecimalConfig
from exactprob.core.errors import DivisionByZero, InvalidArgument, InvalidOperand
from exactprob.core.math.numerical_safeguards import is_strict_int

NumberLike = Union[int, float, str, Decimal]

ZERO = Decimal(0)
ONE = Decimal(1)


# =============================================================================
# КОНТЕКСТ
# =============================================================================


@contextmanager
def decimal_context(config: Optional[DecimalConfig] = None) -> Iterator[Context]:
    """
    Локальный decimal-контекст с точностью и округлением из config.

    Args:
        config: Параметры контекста (default: DEFAULT_DECIMAL_CONFIG)

    Yields:
        Активный decimal.Context

    Examples:
        >>> with decimal_context(DecimalConfig(precision=5)):
        ...     divide(1, 3)
        Decimal('0.33333')
    """
    config = config or DEFAULT_DECIMAL_CONFIG
    with localcontext() as ctx:
        ctx.prec = config.precision
        ctx.rounding = config.rounding
        yield ctx


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_decimal(value: NumberLike) -> Decimal:
    """
    Конверсия числа в Decimal.

    float конвертируется через str(), поэтому 0.1 → Decimal('0.1'),
    а не Decimal('0.1000000000000000055511151231257827...').

    Args:
        value: int, float, десятичная строка или Decimal

    Returns:
        Конечное Decimal значение

    Raises:
        InvalidArgument: bool, NaN/Inf, нечисловая строка или другой тип
    """
    if isinstance(value, Decimal):
        result = value
    elif is_strict_int(value):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as e:
            raise InvalidArgument(f"Not a decimal number: {value!r}") from e
    else:
        raise InvalidArgument(f"Unsupported numeric type {type(value).__name__}: {value!r}")

    if not result.is_finite():
        raise InvalidArgument(f"Value must be finite (not NaN/Inf), got {value!r}")
    return result


def to_native(value: NumberLike) -> float:
    """
    Конверсия в native float на границе публичного API.

    Args:
        value: Decimal или число

    Returns:
        Ближайший float
    """
    return float(to_decimal(value))


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: NumberLike, b: NumberLike) -> Decimal:
    """Сумма a + b."""
    return to_decimal(a) + to_decimal(b)


def subtract(a: NumberLike, b: NumberLike) -> Decimal:
    """Разность a - b."""
    return to_decimal(a) - to_decimal(b)


def multiply(a: NumberLike, b: NumberLike) -> Decimal:
    """Произведение a * b."""
    return to_decimal(a) * to_decimal(b)


def divide(numerator: NumberLike, denominator: NumberLike) -> Decimal:
    """
    Деление с явной проверкой точного нуля.

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator, округлённое по текущему контексту

    Raises:
        DivisionByZero: Если denominator == 0
    """
    denom = to_decimal(denominator)
    if denom.is_zero():
        raise DivisionByZero(f"Division by zero: {numerator} / {denominator}")
    return to_decimal(numerator) / denom


def raised_to_power(base: NumberLike, exponent: int) -> Decimal:
    """
    Возведение в целую степень.

    Допускает отрицательное основание ((-1)^k для знакопеременных сумм)
    и отрицательную степень для ненулевого основания. base^0 = 1 для
    любого base, включая 0.

    Args:
        base: Основание
        exponent: Целый показатель

    Returns:
        base ** exponent

    Raises:
        InvalidArgument: Если exponent не целый
        DivisionByZero: Если base == 0 и exponent < 0

    Examples:
        >>> raised_to_power(-1, 3)
        Decimal('-1')
        >>> raised_to_power(0, 0)
        Decimal('1')
    """
    if not is_strict_int(exponent):
        raise InvalidArgument(f"exponent must be an integer, got {exponent!r}")

    b = to_decimal(base)
    if exponent == 0:
        return ONE
    if b.is_zero() and exponent < 0:
        raise DivisionByZero(f"Zero raised to negative power {exponent}")
    return b**exponent


def square_root(value: NumberLike) -> Decimal:
    """
    Квадратный корень.

    Args:
        value: Неотрицательный операнд (0 допустим: дисперсия 0 валидна)

    Returns:
        sqrt(value) по текущему контексту

    Raises:
        InvalidOperand: Если value < 0
    """
    v = to_decimal(value)
    if v < 0:
        raise InvalidOperand(f"Square root of negative value: {value}")
    return v.sqrt()


def absolute_value(value: NumberLike) -> Decimal:
    """Модуль значения."""
    return abs(to_decimal(value))


def is_equal(a: NumberLike, b: NumberLike) -> bool:
    """
    Точное сравнение по значению (Decimal('1.0') == Decimal('1')).
    """
    return to_decimal(a) == to_decimal(b)


def decimal_sum(values: Iterable[NumberLike]) -> Decimal:
    """
    Сумма последовательности в Decimal.

    Args:
        values: Любые NumberLike значения

    Returns:
        Сумма (ZERO для пустой последовательности)
    """
    total = ZERO
    for value in values:
        total = total + to_decimal(value)
    return total
