"""
Core math modules для complex-core

Комплексная арифметика и вещественные примитивы с IEEE-754 семантикой.
"""

# Numerical Safeguards
from complex_core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # IEEE-754 primitives
    ieee_cos,
    ieee_divide,
    ieee_exp,
    ieee_float,
    ieee_log,
    ieee_sin,
    # NaN/Inf checks
    is_valid_float,
    # Epsilon comparisons
    is_close,
    is_zero,
)

# Tolerance config
from complex_core.math.tolerance import DEFAULT_TOLERANCE, ComplexTolerance

# Complex Number
from complex_core.math.complex_number import (
    ComplexNumber,
    PolarForm,
    RealScalar,
    from_builtin,
    from_polar,
    imaginary_unit,
    make,
    one,
    zero,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — IEEE-754 primitives
    "ieee_cos",
    "ieee_divide",
    "ieee_exp",
    "ieee_float",
    "ieee_log",
    "ieee_sin",
    # Numerical Safeguards — NaN/Inf checks
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    "is_zero",
    # Tolerance — Config
    "ComplexTolerance",
    "DEFAULT_TOLERANCE",
    # Complex Number — Types
    "ComplexNumber",
    "PolarForm",
    "RealScalar",
    # Complex Number — Constructors
    "from_builtin",
    "from_polar",
    "imaginary_unit",
    "make",
    "one",
    "zero",
]
