"""
Errors — таксономия исключений exactprob

Все ошибки синхронные и пробрасываются непосредственно вызывающему коду.
Частичные результаты не возвращаются, повторы не применяются (I/O нет).

Иерархия:
    ExactProbError
    ├── InvalidArgument  (ValueError)       : вход вне домена функции
    ├── DivisionByZero   (ZeroDivisionError): делитель точно равен нулю
    ├── InvalidOperand   (ValueError)       : корень из отрицательного числа
    └── EmptyInput       (ValueError)       : пустая выборка в статистиках

Каждый класс наследует также встроенное исключение, поэтому вызывающий код
может ловить как ExactProbError, так и ValueError / ZeroDivisionError.
"""


class ExactProbError(Exception):
    """Базовое исключение библиотеки."""

    pass


class InvalidArgument(ExactProbError, ValueError):
    """
    Аргумент вне области определения.

    Примеры:
    - отрицательное или нецелое n/k там, где нужно неотрицательное целое
    - k > n в биномиальных коэффициентах
    - вероятность вне [0, 1], NaN/Inf, bool вместо числа
    - невалидный payload probability_space контракта
    """

    pass


class DivisionByZero(ExactProbError, ZeroDivisionError):
    """
    Деление на точный ноль в decimal-примитиве.

    Например, modified_z_score при MAD == 0 (все отклонения нулевые).
    """

    pass


class InvalidOperand(ExactProbError, ValueError):
    """Квадратный корень из отрицательного операнда."""

    pass


class EmptyInput(ExactProbError, ValueError):
    """Статистическая функция вызвана на пустой выборке."""

    pass
