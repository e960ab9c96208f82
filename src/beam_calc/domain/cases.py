from __future__ import annotations

from dataclasses import dataclass

from beam_calc.domain.beam import BeamConfig
from beam_calc.domain.loads import LoadConfig
from beam_calc.materials.material_db import MaterialChoice
from beam_calc.sections.rect_section import CrossSection


@dataclass(frozen=True)
class BeamCase:
    """
    Caso completo para el motor (snapshot inmutable de la configuración):
      - viga (tipo, longitud, apoyos)
      - carga única (puntual o uniforme)
      - sección rectangular
      - material (preset o custom)
    Los resultados NO se guardan acá: se recalculan con compute_analysis().
    """
    beam: BeamConfig
    load: LoadConfig
    section: CrossSection
    material: MaterialChoice
