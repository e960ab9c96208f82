from __future__ import annotations

import math
from dataclasses import dataclass

from beam_calc.engine.units import pa_to_mpa
from beam_calc.errors import InvalidConfigurationError
from beam_calc.sections.rect_section import CrossSection

# Factor de forma de la distribución parabólica de corte en sección rectangular
SHEAR_SHAPE_FACTOR = 1.5


@dataclass(frozen=True)
class StressResult:
    area_m2: float
    I_m4: float
    W_m3: float

    sigma_max_Pa: float
    tau_max_Pa: float
    sigma_max_MPa: float
    tau_max_MPa: float

    FS: float  # inf si sigma_max == 0


def safety_factor(yield_strength_MPa: float, sigma_MPa: float) -> float:
    """FS = fy / σ. Sin tensión el FS no está acotado: devuelve +inf (nunca NaN)."""
    if sigma_MPa == 0.0:
        return math.inf
    return float(yield_strength_MPa) / abs(float(sigma_MPa))


def compute_stresses(
    *,
    max_shear_N: float,
    max_moment_Nm: float,
    section: CrossSection,
    yield_strength_MPa: float,
) -> StressResult:
    """
    Verificación elástica de la sección rectangular:
      σ = M·c/I   (c = h/2)
      τ = 1.5·V/A

    Unidades:
      - V en N, M en N·m
      - A en m², I en m^4
      - σ, τ en Pa (y en MPa para mostrar)
    """
    p = section.props_m()
    A = p["area_m2"]
    I = p["I_m4"]
    if A <= 0 or I <= 0:
        raise InvalidConfigurationError(
            "sección sin área (ancho y alto deben ser > 0)", "section"
        )

    sigma = abs(float(max_moment_Nm)) * p["c_m"] / I
    tau = SHEAR_SHAPE_FACTOR * abs(float(max_shear_N)) / A

    sigma_MPa = pa_to_mpa(sigma)
    tau_MPa = pa_to_mpa(tau)

    return StressResult(
        area_m2=A,
        I_m4=I,
        W_m3=p["W_m3"],
        sigma_max_Pa=sigma,
        tau_max_Pa=tau,
        sigma_max_MPa=sigma_MPa,
        tau_max_MPa=tau_MPa,
        FS=safety_factor(yield_strength_MPa, sigma_MPa),
    )
