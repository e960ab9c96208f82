from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

BeamType = Literal["simple", "cantilever"]

BEAM_TYPES = ("simple", "cantilever")


@dataclass(frozen=True)
class BeamConfig:
    """
    Viga de un solo tramo. Todas las longitudes en mm.

    - simple: apoyada en left_support_mm y right_support_mm (0 <= left < right <= L)
    - cantilever: extremo libre en x=0, empotramiento en x=L (los apoyos no se usan)
    """
    beam_type: BeamType
    length_mm: float
    left_support_mm: Optional[float] = None
    right_support_mm: Optional[float] = None

    @property
    def is_simple(self) -> bool:
        return self.beam_type == "simple"

    @property
    def left_mm(self) -> float:
        """Apoyo izquierdo efectivo (por defecto el extremo de la viga)."""
        if self.left_support_mm is None:
            return 0.0
        return float(self.left_support_mm)

    @property
    def right_mm(self) -> float:
        if self.right_support_mm is None:
            return float(self.length_mm)
        return float(self.right_support_mm)

    @property
    def span_mm(self) -> float:
        """Longitud del dominio de los diagramas."""
        if self.is_simple:
            return self.right_mm - self.left_mm
        return float(self.length_mm)
