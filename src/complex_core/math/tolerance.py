"""
ComplexTolerance — Конфигурация приближённого сравнения

Immutable Pydantic модель с толерантностями для покомпонентного сравнения
комплексных чисел (ComplexNumber.is_close).
"""

from typing import Any, Final

from pydantic import BaseModel, Field

from complex_core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ieee_float,
    is_close,
)


class ComplexTolerance(BaseModel):
    """
    Толерантности для сравнения комплексных чисел.

    Сравнение покомпонентное: re и im сравниваются независимо через
    numerical_safeguards.is_close с одними и теми же rel_tol/abs_tol.

    Immutable модель (frozen=True). NaN/Inf толерантности запрещены.
    """

    rel_tol: float = Field(
        default=EPS_FLOAT_COMPARE_REL,
        ge=0,
        allow_inf_nan=False,
        description="Относительная толерантность",
    )
    abs_tol: float = Field(
        default=EPS_FLOAT_COMPARE_ABS,
        ge=0,
        allow_inf_nan=False,
        description="Абсолютная толерантность",
    )

    model_config = {"frozen": True}  # Immutable

    def components_close(self, a: Any, b: Any) -> bool:
        """Сравнение одной пары компонент с толерантностями модели."""
        return is_close(
            ieee_float(a), ieee_float(b), rel_tol=self.rel_tol, abs_tol=self.abs_tol
        )


# Толерантности по умолчанию (EPS_FLOAT_COMPARE_REL / EPS_FLOAT_COMPARE_ABS)
DEFAULT_TOLERANCE: Final[ComplexTolerance] = ComplexTolerance()
