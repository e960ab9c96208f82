from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SamplePoint:
    position_m: float
    value: float


@dataclass(frozen=True)
class AnalysisResult:
    """
    Salida de compute_analysis().

    Curvas: posición en m, V en N, M en N·m (redondeadas para mostrar).
    Máximos: |V| y |M| máximos sobre las muestras (sin redondear).
    Tensiones: en Pa (SI) y en MPa (conversión explícita).
    """
    shear: Tuple[SamplePoint, ...]
    moment: Tuple[SamplePoint, ...]

    max_shear_force_N: float
    max_bending_moment_Nm: float
    x_max_shear_m: float
    x_max_moment_m: float

    max_normal_stress_Pa: float
    max_shear_stress_Pa: float
    max_normal_stress_MPa: float
    max_shear_stress_MPa: float

    yield_strength_MPa: float
    safety_factor: float  # inf si max_normal_stress == 0

    center_of_gravity_m: float

    # Reacciones (simple: R_A/R_B en N; voladizo: R_A = reacción, R_B = momento de empotramiento N·m)
    reaction_A: float = 0.0
    reaction_B: float = 0.0

    @property
    def safety_factor_applicable(self) -> bool:
        return math.isfinite(self.safety_factor)

    def summary_rows(self) -> Tuple[Tuple[str, str], ...]:
        """Filas (etiqueta, valor) listas para mostrar o exportar."""
        return (
            ("Max Shear Force", f"{self.max_shear_force_N:.2f} N"),
            ("Max Bending Moment", f"{self.max_bending_moment_Nm:.2f} N·m"),
            ("Max Normal Stress", f"{self.max_normal_stress_MPa:.2f} MPa"),
            ("Max Shear Stress", f"{self.max_shear_stress_MPa:.2f} MPa"),
            ("Safety Factor", format_safety_factor(self.safety_factor)),
            ("Center of Gravity", f"{self.center_of_gravity_m:.3f} m"),
        )


def format_safety_factor(fs: float) -> str:
    """FS con 2 decimales; 'N/A' cuando no hay tensión (FS no acotado)."""
    if not math.isfinite(fs):
        return "N/A"
    return f"{fs:.2f}"
