from __future__ import annotations

import logging

from beam_calc.domain.cases import BeamCase
from beam_calc.domain.results import AnalysisResult
from beam_calc.engine.diagrams import N_SAMPLES, build_V_M, sample_curves
from beam_calc.engine.stress import compute_stresses
from beam_calc.engine.units import to_meters
from beam_calc.engine.validate import validate_case
from beam_calc.errors import InvalidConfigurationError
from beam_calc.materials.material_db import resolve_material

logger = logging.getLogger(__name__)


def compute_analysis(case: BeamCase, n_points: int = N_SAMPLES) -> AnalysisResult:
    """
    Cálculo completo (función pura): configuración -> curvas V/M + resumen.

    1) valida (InvalidConfigurationError antes de muestrear)
    2) muestrea V(x), M(x) según (tipo de viga, tipo de carga)
    3) tensiones y FS de la sección rectangular
    """
    try:
        validate_case(case)
    except InvalidConfigurationError as e:
        logger.warning("Configuración rechazada: %s", e)
        raise

    diag = build_V_M(case.beam, case.load)
    curves = sample_curves(diag, n_points)
    R_A, R_B = diag.reactions()

    props = resolve_material(case.material)
    st = compute_stresses(
        max_shear_N=curves.max_shear,
        max_moment_Nm=curves.max_moment,
        section=case.section,
        yield_strength_MPa=props.yield_strength_MPa,
    )

    result = AnalysisResult(
        shear=curves.shear,
        moment=curves.moment,
        max_shear_force_N=curves.max_shear,
        max_bending_moment_Nm=curves.max_moment,
        x_max_shear_m=curves.x_max_shear,
        x_max_moment_m=curves.x_max_moment,
        max_normal_stress_Pa=st.sigma_max_Pa,
        max_shear_stress_Pa=st.tau_max_Pa,
        max_normal_stress_MPa=st.sigma_max_MPa,
        max_shear_stress_MPa=st.tau_max_MPa,
        yield_strength_MPa=props.yield_strength_MPa,
        safety_factor=st.FS,
        center_of_gravity_m=to_meters(case.beam.length_mm) / 2.0,
        reaction_A=R_A,
        reaction_B=R_B,
    )

    logger.debug(
        "Análisis: |V|max=%.2f N, |M|max=%.2f N·m, σ=%.4f MPa, FS=%s",
        result.max_shear_force_N,
        result.max_bending_moment_Nm,
        result.max_normal_stress_MPa,
        result.safety_factor,
    )
    return result
