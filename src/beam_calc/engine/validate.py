from __future__ import annotations

import math
from typing import Optional

from beam_calc.domain.beam import BEAM_TYPES
from beam_calc.domain.cases import BeamCase
from beam_calc.domain.loads import LOAD_TYPES
from beam_calc.errors import InvalidConfigurationError
from beam_calc.materials.material_db import CustomMaterial, resolve_material

_EPS = 1e-9


def _num(v, field: str) -> float:
    """Convierte a float finito o rechaza con el nombre del campo."""
    try:
        f = float(v)
    except (TypeError, ValueError):
        raise InvalidConfigurationError(f"valor no numérico: {v!r}", field) from None
    if not math.isfinite(f):
        raise InvalidConfigurationError(f"valor no finito: {v!r}", field)
    return f


def _positive(v, field: str) -> float:
    f = _num(v, field)
    if f <= 0:
        raise InvalidConfigurationError(f"debe ser > 0 (recibido {f:g})", field)
    return f


def _within(v: float, lo: float, hi: float, field: str, what: str) -> None:
    if v < lo - _EPS or v > hi + _EPS:
        raise InvalidConfigurationError(
            f"{v:g} mm fuera de {what} [{lo:g}, {hi:g}] mm", field
        )


def validate_case(case: BeamCase) -> None:
    """
    Rechaza configuraciones que harían NaN/inf en el muestreo.
    Se llama SIEMPRE antes de muestrear; no devuelve nada si el caso es válido.
    """
    beam = case.beam
    load = case.load
    sec = case.section

    if beam.beam_type not in BEAM_TYPES:
        raise InvalidConfigurationError(
            f"tipo de viga desconocido {beam.beam_type!r} (opciones: {', '.join(BEAM_TYPES)})",
            "beam.beam_type",
        )
    if load.load_type not in LOAD_TYPES:
        raise InvalidConfigurationError(
            f"tipo de carga desconocido {load.load_type!r} (opciones: {', '.join(LOAD_TYPES)})",
            "load.load_type",
        )

    L = _positive(beam.length_mm, "beam.length_mm")
    _positive(sec.width_mm, "section.width_mm")
    _positive(sec.height_mm, "section.height_mm")
    _num(load.magnitude_N, "load.magnitude_N")

    # Tramo donde puede estar la carga
    lo, hi, what = 0.0, L, "la viga"
    if beam.is_simple:
        left = 0.0 if beam.left_support_mm is None else _num(beam.left_support_mm, "beam.left_support_mm")
        right = L if beam.right_support_mm is None else _num(beam.right_support_mm, "beam.right_support_mm")
        _within(left, 0.0, L, "beam.left_support_mm", "la viga")
        _within(right, 0.0, L, "beam.right_support_mm", "la viga")
        if right <= left + _EPS:
            raise InvalidConfigurationError(
                f"apoyo derecho ({right:g} mm) debe estar a la derecha del izquierdo ({left:g} mm)",
                "beam.right_support_mm",
            )
        lo, hi, what = left, right, "los apoyos"

    start = _num(load.start_mm, "load.start_mm")
    _within(start, lo, hi, "load.start_mm", what)

    if load.is_uniform:
        end: Optional[float] = load.end_mm
        if end is None:
            raise InvalidConfigurationError("falta el fin de la carga uniforme", "load.end_mm")
        end = _num(end, "load.end_mm")
        _within(end, lo, hi, "load.end_mm", what)
        if end <= start + _EPS:
            raise InvalidConfigurationError(
                f"la carga uniforme debe tener longitud > 0 (inicio {start:g} mm, fin {end:g} mm)",
                "load.end_mm",
            )

    # Material: el preset ya se validó al construirlo; custom solo se chequea numérico
    props = resolve_material(case.material)
    fy = _num(props.yield_strength_MPa, "material.yield_strength_MPa")
    if isinstance(case.material, CustomMaterial) and fy < 0:
        raise InvalidConfigurationError(
            f"tensión de fluencia negativa ({fy:g} MPa)", "material.yield_strength_MPa"
        )
