"""
Numerical Safeguards — IEEE-754 Math Primitives

Модуль обеспечивает предсказуемую IEEE-754 семантику для вещественных
примитивов, на которых построена комплексная арифметика:
- Деление с IEEE-результатом при нулевом делителе (±inf / NaN вместо ZeroDivisionError)
- exp/log/sin/cos без исключений на границах области определения
- Проверки валидности float (NaN/Inf)
- Epsilon-сравнения float с учётом машинной точности

Python `math` и float-деление бросают ZeroDivisionError, ValueError и
OverflowError там, где IEEE-754 возвращает специальное значение. Обёртки
ниже возвращают это специальное значение.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна обёртка не бросает исключение на числовых аномалиях
2. NaN на входе всегда даёт NaN на выходе
3. Знаки нулей и бесконечностей соответствуют IEEE-754
4. Все операции детерминированы и воспроизводимы
"""

import logging
import math
from typing import Any, Final

logger = logging.getLogger(__name__)

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# IEEE-754 КОНВЕРСИЯ
# =============================================================================


def ieee_float(x: Any) -> float:
    """
    Конверсия вещественного значения в float без OverflowError.

    int и Fraction за пределами диапазона double дают ±inf,
    как при переполнении float арифметики.

    Args:
        x: Значение любого вещественного типа

    Returns:
        float(x) или ±inf при переполнении

    Examples:
        >>> ieee_float(3)
        3.0
        >>> ieee_float(10**400)
        inf
        >>> ieee_float(-10**400)
        -inf
    """
    try:
        return float(x)
    except OverflowError:
        result = -math.inf if x < 0 else math.inf
        logger.debug("ieee_float: %s out of float range -> %r", type(x).__name__, result)
        return result


# =============================================================================
# IEEE-754 ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: Any, denominator: Any) -> Any:
    """
    Деление с IEEE-754 семантикой при нулевом делителе и переполнении.

    Для ненулевого делителя результат совпадает с `numerator / denominator`
    (тип результата определяется арифметикой операндов).

    При нулевом делителе:
        0 / 0, NaN / 0   → NaN
        x / +0           → sign(x) * inf
        x / -0           → -sign(x) * inf

    При переполнении (int / int за пределами double):
        ±inf со знаком sign(numerator) * sign(denominator)

    Args:
        numerator: Числитель (любой вещественный тип)
        denominator: Знаменатель (любой вещественный тип)

    Returns:
        Частное или IEEE специальное значение (float)

    Examples:
        >>> ieee_divide(10.0, 2.0)
        5.0
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
        >>> ieee_divide(10**400, 3)
        inf
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        num = ieee_float(numerator)
        if num == 0.0 or math.isnan(num):
            result = math.nan
        else:
            result = math.copysign(math.inf, num) * math.copysign(
                1.0, ieee_float(denominator)
            )
    except OverflowError:
        result = math.inf if (numerator < 0) == (denominator < 0) else -math.inf

    logger.debug("ieee_divide: %r / %r -> %r", numerator, denominator, result)
    return result


# =============================================================================
# IEEE-754 ТРАНСЦЕНДЕНТНЫЕ ФУНКЦИИ
# =============================================================================


def ieee_exp(x: Any) -> float:
    """
    Экспонента e^x без OverflowError.

    Examples:
        >>> ieee_exp(0.0)
        1.0
        >>> ieee_exp(1000.0)
        inf
        >>> ieee_exp(-10**400)
        0.0
    """
    value = ieee_float(x)
    try:
        return math.exp(value)
    except OverflowError:
        logger.debug("ieee_exp: overflow for x=%r -> inf", value)
        return math.inf


def ieee_log(x: Any) -> float:
    """
    Натуральный логарифм с IEEE-754 семантикой на границе области.

    log(0) = -inf, log(x < 0) = NaN, log(inf) = inf, log(NaN) = NaN.

    Examples:
        >>> ieee_log(1.0)
        0.0
        >>> ieee_log(0.0)
        -inf
    """
    value = ieee_float(x)
    if value == 0.0:
        logger.debug("ieee_log: log(0) -> -inf")
        return -math.inf
    if value < 0.0:
        logger.debug("ieee_log: log(%r) outside domain -> nan", value)
        return math.nan
    return math.log(value)


def ieee_sin(x: Any) -> float:
    """sin(x); для x = ±inf (в т.ч. после переполнения) возвращает NaN."""
    value = ieee_float(x)
    if math.isinf(value):
        logger.debug("ieee_sin: sin(%r) -> nan", value)
        return math.nan
    return math.sin(value)


def ieee_cos(x: Any) -> float:
    """cos(x); для x = ±inf (в т.ч. после переполнения) возвращает NaN."""
    value = ieee_float(x)
    if math.isinf(value):
        logger.debug("ieee_cos: cos(%r) -> nan", value)
        return math.nan
    return math.cos(value)


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Реализация Python's math.isclose с настраиваемыми толерантностями.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol
