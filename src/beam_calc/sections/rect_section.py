from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from beam_calc.engine.units import to_meters


def _rect_I_about_centroid(b: float, h: float) -> float:
    """I de un rectángulo b (ancho) x h (alto), respecto a su centroide (eje horizontal)."""
    return (b * h**3) / 12.0


@dataclass(frozen=True)
class CrossSection:
    """
    Sección rectangular maciza. Dimensiones en mm.
    """
    width_mm: float
    height_mm: float

    def props_m(self) -> Dict[str, float]:
        """
        Propiedades geométricas en SI (m / m^2 / m^4 / m^3):
          - b_m, h_m
          - area_m2
          - I_m4 (eje fuerte, por el centroide)
          - c_m (distancia a la fibra extrema = h/2)
          - W_m3 (módulo resistente elástico = I/c)
        """
        b = to_meters(self.width_mm)
        h = to_meters(self.height_mm)

        area = b * h
        I = _rect_I_about_centroid(b, h)
        c = h / 2.0
        W = I / c if c > 0 else 0.0

        return {
            "b_m": b,
            "h_m": h,
            "area_m2": area,
            "I_m4": I,
            "c_m": c,
            "W_m3": W,
        }
