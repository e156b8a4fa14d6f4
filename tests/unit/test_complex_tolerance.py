"""
Tests for ComplexTolerance config model

Покрывает:
- Значения по умолчанию (EPS_FLOAT_COMPARE_REL / EPS_FLOAT_COMPARE_ABS)
- Валидация: отрицательные и NaN/Inf толерантности запрещены
- Immutability (frozen=True)
- Покомпонентное сравнение
"""

import math

import pytest
from pydantic import ValidationError

from complex_core.math import (
    DEFAULT_TOLERANCE,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ComplexTolerance,
)


class TestComplexToleranceDefaults:
    """Значения по умолчанию."""

    def test_defaults_match_epsilon_constants(self):
        tol = ComplexTolerance()
        assert tol.rel_tol == EPS_FLOAT_COMPARE_REL
        assert tol.abs_tol == EPS_FLOAT_COMPARE_ABS

    def test_default_instance(self):
        assert DEFAULT_TOLERANCE == ComplexTolerance()


class TestComplexToleranceValidation:
    """Валидация полей."""

    def test_zero_tolerances_allowed(self):
        tol = ComplexTolerance(rel_tol=0.0, abs_tol=0.0)
        assert tol.components_close(1.0, 1.0)
        assert not tol.components_close(1.0, 1.0 + 1e-15)

    def test_negative_rel_tol_rejected(self):
        with pytest.raises(ValidationError):
            ComplexTolerance(rel_tol=-1e-9)

    def test_negative_abs_tol_rejected(self):
        with pytest.raises(ValidationError):
            ComplexTolerance(abs_tol=-1.0)

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError):
            ComplexTolerance(abs_tol=math.inf)
        with pytest.raises(ValidationError):
            ComplexTolerance(rel_tol=math.nan)

    def test_frozen(self):
        tol = ComplexTolerance()
        with pytest.raises(ValidationError):
            tol.abs_tol = 1.0


class TestComponentsClose:
    """Сравнение одной пары компонент."""

    def test_absolute_tolerance(self):
        tol = ComplexTolerance(rel_tol=0.0, abs_tol=1e-3)
        assert tol.components_close(0.0, 5e-4)
        assert not tol.components_close(0.0, 5e-3)

    def test_relative_tolerance(self):
        tol = ComplexTolerance(rel_tol=1e-6, abs_tol=0.0)
        assert tol.components_close(1e10, 1e10 + 1.0)
        assert not tol.components_close(1e10, 1e10 + 1e5)
