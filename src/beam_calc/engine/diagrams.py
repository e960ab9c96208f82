from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from beam_calc.domain.beam import BeamConfig
from beam_calc.domain.loads import LoadConfig
from beam_calc.domain.results import SamplePoint
from beam_calc.engine.units import to_meters

logger = logging.getLogger(__name__)

N_SAMPLES = 101          # 100 intervalos + extremo
POSITION_DECIMALS = 3
VALUE_DECIMALS = 2


@dataclass(frozen=True)
class VMDiagram:
    """
    Diagrama V(x) y M(x) en forma cerrada para UNA carga y UN tramo.

    Dominio (m):
    - simple: x desde el apoyo izquierdo, [0, right-left]
    - cantilever: extremo libre en x=0, empotramiento en x=x_end

    a, b: inicio/fin de la carga en coordenadas del dominio (para puntual a == b).

    Convención en discontinuidades (puntual): el punto x == a toma el valor
    del tramo a su izquierda; en x=0 no hay tramo izquierdo y se usa el derecho.
    Voladizo: V y M se reportan positivos (magnitud).
    """
    beam_type: str
    load_type: str
    x_end: float
    P: float
    a: float
    b: float

    # -------------------------
    # Reacciones
    # -------------------------
    @property
    def load_length(self) -> float:
        return self.b - self.a

    @property
    def w(self) -> float:
        """Intensidad de la uniforme (N/m). Cero para puntual."""
        if self.load_type != "uniform":
            return 0.0
        return self.P / self.load_length

    def reactions(self) -> Tuple[float, float]:
        """
        simple: (R_A, R_B) en N, + hacia arriba
        cantilever: (R, M_empotramiento) en N y N·m
        """
        L = self.x_end
        xc = 0.5 * (self.a + self.b)  # punto de aplicación de la resultante
        if self.beam_type == "simple":
            R_B = self.P * xc / L
            return self.P - R_B, R_B
        return self.P, self.P * (L - xc)

    def eval_V(self, x: float) -> float:
        return float(self._eval_V_array(np.asarray([x], dtype=float))[0])

    def eval_M(self, x: float) -> float:
        return float(self._eval_M_array(np.asarray([x], dtype=float))[0])

    # -------------------------
    # Evaluadores vectorizados
    # -------------------------
    @property
    def tol(self) -> float:
        """Tolerancia de posición (m), relativa al dominio."""
        return 1e-9 * self.x_end

    def _eval_V_array(self, x: np.ndarray) -> np.ndarray:
        P, a, b = self.P, self.a, self.b
        tol = self.tol

        if self.beam_type == "simple":
            R_A, R_B = self.reactions()
            if self.load_type == "point":
                return np.where(x <= a + tol, R_A, R_A - P)
            return np.select(
                [x < a, x <= b, x > b],
                [np.full_like(x, R_A), R_A - self.w * (x - a), np.full_like(x, -R_B)],
            )

        # voladizo
        if self.load_type == "point":
            H = (x > a + tol) | ((x <= tol) & (a <= tol))
            return np.where(H, P, 0.0)
        return self.w * np.clip(x - a, 0.0, b - a)

    def _eval_M_array(self, x: np.ndarray) -> np.ndarray:
        P, a, b = self.P, self.a, self.b
        tol = self.tol

        if self.beam_type == "simple":
            R_A, R_B = self.reactions()
            if self.load_type == "point":
                return np.where(x <= a + tol, R_A * x, R_A * x - P * (x - a))
            t = x - a
            return np.select(
                [x < a, x <= b, x > b],
                [R_A * x, R_A * x - self.w * t * t * 0.5, R_B * (self.x_end - x)],
            )

        # voladizo
        if self.load_type == "point":
            return P * np.clip(x - a, 0.0, None)
        t = x - a
        xc = 0.5 * (a + b)
        return np.select(
            [x < a, x <= b, x > b],
            [np.zeros_like(x), self.w * t * t * 0.5, P * (x - xc)],
        )

    # -------------------------
    # Muestreo
    # -------------------------
    def sample(self, n_points: int = N_SAMPLES) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """(x, V, M) sin redondear, n_points equiespaciados en [0, x_end]."""
        x = np.linspace(0.0, self.x_end, int(n_points), dtype=float)
        return x, self._eval_V_array(x), self._eval_M_array(x)


@dataclass(frozen=True)
class SampledCurves:
    shear: Tuple[SamplePoint, ...]
    moment: Tuple[SamplePoint, ...]
    max_shear: float
    max_moment: float
    x_max_shear: float
    x_max_moment: float


def sample_curves(diag: VMDiagram, n_points: int = N_SAMPLES) -> SampledCurves:
    """
    Muestrea V y M y devuelve puntos redondeados (x: 3 dec, valores: 2 dec).
    Los máximos |V| y |M| se toman de los valores SIN redondear.
    """
    x, V, M = diag.sample(n_points)

    absV = np.abs(V)
    absM = np.abs(M)
    iV = int(np.argmax(absV))
    iM = int(np.argmax(absM))

    xr = np.round(x, POSITION_DECIMALS)
    Vr = np.round(V, VALUE_DECIMALS) + 0.0  # +0.0 elimina -0.0
    Mr = np.round(M, VALUE_DECIMALS) + 0.0

    shear = tuple(SamplePoint(float(xi), float(vi)) for xi, vi in zip(xr, Vr))
    moment = tuple(SamplePoint(float(xi), float(mi)) for xi, mi in zip(xr, Mr))

    return SampledCurves(
        shear=shear,
        moment=moment,
        max_shear=float(absV[iV]),
        max_moment=float(absM[iM]),
        x_max_shear=float(x[iV]),
        x_max_moment=float(x[iM]),
    )


def _clamp(v: float, lo: float, hi: float) -> float:
    return min(max(v, lo), hi)


def build_V_M(beam: BeamConfig, load: LoadConfig) -> VMDiagram:
    """
    Pasa la configuración (mm) a coordenadas del dominio (m).
    La carga se recorta al dominio (validate_case admite un margen de redondeo).
    No valida: llamar a validate_case() antes.
    """
    start = float(load.start_mm)
    end = float(load.end_mm) if load.is_uniform and load.end_mm is not None else start

    if beam.is_simple:
        origin = beam.left_mm
        x_end = to_meters(beam.right_mm - beam.left_mm)
    else:
        origin = 0.0
        x_end = to_meters(beam.length_mm)

    diag = VMDiagram(
        beam_type=beam.beam_type,
        load_type=load.load_type,
        x_end=x_end,
        P=float(load.magnitude_N),
        a=_clamp(to_meters(start - origin), 0.0, x_end),
        b=_clamp(to_meters(end - origin), 0.0, x_end),
    )
    logger.debug(
        "Diagrama %s/%s: dominio=%g m, P=%g N, carga=[%g, %g] m",
        diag.beam_type, diag.load_type, diag.x_end, diag.P, diag.a, diag.b,
    )
    return diag
