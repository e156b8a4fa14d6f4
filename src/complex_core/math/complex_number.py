"""
ComplexNumber — Комплексное число над обобщённым вещественным типом

Value type ComplexNumber[T] с re/im частями и стандартным набором
алгебраических и аналитических операций:
- norm_squared / norm / l1_norm / argument
- scale / unscale / conjugate / inverse
- to_polar / from_polar
- exp / ln (главная ветвь)
- арифметические операторы + - * / с комплексными и вещественными операндами

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Экземпляры immutable: каждая операция возвращает новое значение
2. Части хранятся как есть: без валидации, без приведения типа, без нормализации
3. Ни одна операция не бросает исключение на числовых аномалиях:
   деление на ноль, log(0), переполнение exp дают IEEE-754 результат (inf/NaN)
4. NaN/Inf пропагируют через цепочки операций без изменений
5. imaginary_unit() и from_polar() не зависят ни от какого экземпляра

ОБОБЩЁННЫЙ ТИП T:
    Алгебраические операции (norm_squared, scale, unscale, conjugate, inverse,
    l1_norm, операторы) используют арифметику самого T: int, Fraction,
    float, numpy float32/float64 сохраняют свой тип.
    Трансцендентные операции (norm, argument, to_polar, from_polar, exp, ln)
    идут через модуль math и возвращают float.

ФОРМУЛЫ:
    |z|^2 = re^2 + im^2
    z^-1 = conj(z) / |z|^2
    arg(z) = atan2(im, re) ∈ (-pi, pi]
    e^(a+bi) = e^a (cos b + i sin b)
    ln(z) = ln|z| + i arg(z)
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Generic, NamedTuple, Optional, Protocol, TypeVar

from complex_core.math.numerical_safeguards import (
    ieee_cos,
    ieee_divide,
    ieee_exp,
    ieee_float,
    ieee_log,
    ieee_sin,
    is_valid_float,
    is_zero,
)
from complex_core.math.tolerance import DEFAULT_TOLERANCE, ComplexTolerance


# =============================================================================
# TYPES
# =============================================================================


class RealScalar(Protocol):
    """
    Минимальный контракт вещественного типа для ComplexNumber[T].

    Требуется: + - * /, унарный минус, abs() и __float__ (для math-примитивов
    sqrt, atan2, sin, cos, exp, log).
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __abs__(self) -> Any: ...

    def __float__(self) -> float: ...


T = TypeVar("T", bound=RealScalar)


class PolarForm(NamedTuple):
    """Полярная форма r * e^(i * theta)."""

    radius: float
    angle: float


# =============================================================================
# COMPLEX NUMBER
# =============================================================================


@dataclass(frozen=True, slots=True, eq=False)
class ComplexNumber(Generic[T]):
    """
    Комплексное число re + im*i.

    Immutable (frozen=True, slots=True): нет __dict__, нет владения ресурсами,
    безопасно для совместного использования между потоками.

    Равенство точное и покомпонентное (NaN != NaN, как у float).
    Для приближённого сравнения используйте is_close().
    """

    re: T
    im: T

    # -------------------------------------------------------------------------
    # Нормы и аргумент
    # -------------------------------------------------------------------------

    def norm_squared(self) -> T:
        """
        Квадрат модуля: re^2 + im^2.

        Без защиты от переполнения: для float результат становится inf.
        """
        return self.re * self.re + self.im * self.im

    def norm(self) -> float:
        """Модуль (евклидова норма): sqrt(re^2 + im^2)."""
        return math.sqrt(ieee_float(self.norm_squared()))

    def l1_norm(self) -> T:
        """L1 (taxicab) норма: |re| + |im|."""
        return abs(self.re) + abs(self.im)

    def argument(self) -> float:
        """
        Главное значение аргумента: atan2(im, re) ∈ (-pi, pi].

        atan2(0, 0) = 0 по IEEE соглашению.
        """
        return math.atan2(ieee_float(self.im), ieee_float(self.re))

    def to_polar(self) -> PolarForm:
        """
        Полярная форма (radius, angle) = (norm(), argument()).

        Returns:
            PolarForm, распаковывается как обычная пара (r, theta)
        """
        return PolarForm(self.norm(), self.argument())

    # -------------------------------------------------------------------------
    # Алгебраические операции
    # -------------------------------------------------------------------------

    def scale(self, t: T) -> "ComplexNumber[T]":
        """Умножение на вещественный скаляр: (re*t, im*t)."""
        return ComplexNumber(self.re * t, self.im * t)

    def unscale(self, t: T) -> "ComplexNumber[T]":
        """
        Деление на вещественный скаляр: (re/t, im/t).

        t == 0 не является ошибкой: результат ±inf/NaN по IEEE-754.
        """
        return ComplexNumber(ieee_divide(self.re, t), ieee_divide(self.im, t))

    def conjugate(self) -> "ComplexNumber[T]":
        """Сопряжённое число: (re, -im)."""
        return ComplexNumber(self.re, -self.im)

    def inverse(self) -> "ComplexNumber[T]":
        """
        Обратное число: (re / |z|^2, -im / |z|^2).

        Для нулевого модуля результат inf/NaN по IEEE-754. Вызывающий код,
        которому нужна строгая проверка, проверяет is_zero() заранее.

        Examples:
            >>> make(1.0, 0.0).inverse()
            ComplexNumber(re=1.0, im=-0.0)
        """
        nsq = self.norm_squared()
        return ComplexNumber(ieee_divide(self.re, nsq), ieee_divide(-self.im, nsq))

    # -------------------------------------------------------------------------
    # Экспонента и логарифм
    # -------------------------------------------------------------------------

    def exp(self) -> "ComplexNumber[float]":
        """
        Комплексная экспонента: e^(a+bi) = e^a (cos b + i sin b).

        Переполнение e^a даёт inf вместо OverflowError.
        """
        return from_polar(ieee_exp(self.re), self.im)

    def ln(self) -> "ComplexNumber[float]":
        """
        Натуральный логарифм, главная ветвь: (ln|z|, arg(z)).

        ln(0) = (-inf, 0.0).
        """
        r, theta = self.to_polar()
        return ComplexNumber(ieee_log(r), theta)

    # -------------------------------------------------------------------------
    # Классификация и сравнение
    # -------------------------------------------------------------------------

    def is_zero(self, tol: float = 0.0) -> bool:
        """
        Проверка на ноль (по умолчанию точная: re == 0 и im == 0).

        Args:
            tol: Абсолютная толерантность для каждой части (default: 0.0)
        """
        return is_zero(self.re, tol) and is_zero(self.im, tol)

    def is_nan(self) -> bool:
        """True если хотя бы одна часть NaN."""
        return math.isnan(ieee_float(self.re)) or math.isnan(ieee_float(self.im))

    def is_infinite(self) -> bool:
        """True если нет NaN и хотя бы одна часть ±inf."""
        return not self.is_nan() and (
            math.isinf(ieee_float(self.re)) or math.isinf(ieee_float(self.im))
        )

    def is_finite(self) -> bool:
        """
        True если обе части конечны.

        int/Fraction за пределами диапазона double считаются бесконечными
        (ieee_float).
        """
        return is_valid_float(ieee_float(self.re)) and is_valid_float(ieee_float(self.im))

    def is_close(
        self,
        other: "ComplexNumber[Any]",
        tolerance: Optional[ComplexTolerance] = None,
    ) -> bool:
        """
        Покомпонентное приближённое сравнение.

        Args:
            other: Сравниваемое число
            tolerance: Толерантности (default: DEFAULT_TOLERANCE)

        Returns:
            True если re и im близки с учётом толерантности
        """
        tol = tolerance if tolerance is not None else DEFAULT_TOLERANCE
        return tol.components_close(self.re, other.re) and tol.components_close(
            self.im, other.im
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.re == other.re and self.im == other.im

    def __hash__(self) -> int:
        return hash((self.re, self.im))

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "ComplexNumber[Any]":
        if isinstance(other, ComplexNumber):
            return ComplexNumber(self.re + other.re, self.im + other.im)
        if isinstance(other, numbers.Real):
            return ComplexNumber(self.re + other, self.im)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Any) -> "ComplexNumber[Any]":
        if isinstance(other, ComplexNumber):
            return ComplexNumber(self.re - other.re, self.im - other.im)
        if isinstance(other, numbers.Real):
            return ComplexNumber(self.re - other, self.im)
        return NotImplemented

    def __rsub__(self, other: Any) -> "ComplexNumber[Any]":
        if isinstance(other, numbers.Real):
            return ComplexNumber(other - self.re, -self.im)
        return NotImplemented

    def __mul__(self, other: Any) -> "ComplexNumber[Any]":
        if isinstance(other, ComplexNumber):
            return ComplexNumber(
                self.re * other.re - self.im * other.im,
                self.re * other.im + self.im * other.re,
            )
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "ComplexNumber[Any]":
        # (a+bi)/(c+di) = (a+bi)(c-di) / (c^2+d^2)
        if isinstance(other, ComplexNumber):
            return (self * other.conjugate()).unscale(other.norm_squared())
        if isinstance(other, numbers.Real):
            return self.unscale(other)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> "ComplexNumber[Any]":
        if isinstance(other, numbers.Real):
            return self.inverse().scale(other)
        return NotImplemented

    def __neg__(self) -> "ComplexNumber[T]":
        return ComplexNumber(-self.re, -self.im)

    def __pos__(self) -> "ComplexNumber[T]":
        return self

    def __abs__(self) -> float:
        return self.norm()

    def __complex__(self) -> complex:
        return complex(ieee_float(self.re), ieee_float(self.im))


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def make(re: T, im: T) -> ComplexNumber[T]:
    """
    Создание комплексного числа из действительной и мнимой частей.

    Аналог двухаргументного complex(re, im). Части сохраняются как есть.

    Examples:
        >>> make(3, 4).norm()
        5.0
    """
    return ComplexNumber(re, im)


def imaginary_unit() -> ComplexNumber[float]:
    """Мнимая единица i = 0 + 1i."""
    return ComplexNumber(0.0, 1.0)


def zero() -> ComplexNumber[float]:
    """Аддитивная единица 0 + 0i."""
    return ComplexNumber(0.0, 0.0)


def one() -> ComplexNumber[float]:
    """Мультипликативная единица 1 + 0i."""
    return ComplexNumber(1.0, 0.0)


def from_polar(r: float, theta: float) -> ComplexNumber[float]:
    """
    Комплексное число из полярной формы: (r*cos(theta), r*sin(theta)).

    Чистая функция двух аргументов. theta = ±inf даёт NaN части.

    Examples:
        >>> from_polar(1.0, 0.0)
        ComplexNumber(re=1.0, im=0.0)
    """
    return ComplexNumber(r * ieee_cos(theta), r * ieee_sin(theta))


def from_builtin(z: complex) -> ComplexNumber[float]:
    """Конверсия встроенного complex в ComplexNumber[float]."""
    return ComplexNumber(z.real, z.imag)
