from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

LoadType = Literal["point", "uniform"]

LOAD_TYPES = ("point", "uniform")


@dataclass(frozen=True)
class LoadConfig:
    """
    Carga única sobre la viga.

    magnitude_N: fuerza TOTAL (para uniforme también es el total, no N/mm)
    start_mm: posición de la puntual o inicio de la uniforme
    end_mm: fin de la uniforme (solo uniform)
    """
    load_type: LoadType
    magnitude_N: float
    start_mm: float
    end_mm: Optional[float] = None

    @property
    def is_uniform(self) -> bool:
        return self.load_type == "uniform"

    @property
    def length_mm(self) -> float:
        if not self.is_uniform or self.end_mm is None:
            return 0.0
        return float(self.end_mm) - float(self.start_mm)
