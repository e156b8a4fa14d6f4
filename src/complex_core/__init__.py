"""
complex-core: complex number value type over a generic real scalar.

ComplexNumber[T] with norm, conjugate, inverse, polar conversion,
exponential and logarithm. Numeric anomalies follow IEEE-754 and never raise.
"""

from complex_core.math import (
    DEFAULT_TOLERANCE,
    ComplexNumber,
    ComplexTolerance,
    PolarForm,
    from_builtin,
    from_polar,
    imaginary_unit,
    make,
    one,
    zero,
)

__all__ = [
    "ComplexNumber",
    "ComplexTolerance",
    "DEFAULT_TOLERANCE",
    "PolarForm",
    "from_builtin",
    "from_polar",
    "imaginary_unit",
    "make",
    "one",
    "zero",
]
