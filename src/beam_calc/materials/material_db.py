from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Union

from beam_calc.errors import UnknownMaterialError


@dataclass(frozen=True)
class MaterialProperties:
    """
    Propiedades del material.

    Solo yield_strength_MPa interviene en el cálculo (FS). El resto es
    descriptivo (se muestra en el reporte).
    """
    yield_strength_MPa: float = 0.0
    elastic_modulus_GPa: float = 0.0
    density_kgm3: float = 0.0
    poissons_ratio: float = 0.0
    thermal_expansion_um_per_C: float = 0.0


ASTM_A36 = "ASTM A36 Structural Steel"
ASTM_A992 = "ASTM A992 Structural Steel"
ASTM_A572_GR50 = "ASTM A572 Grade 50 Steel"

PRESETS: Dict[str, MaterialProperties] = {
    ASTM_A36: MaterialProperties(
        yield_strength_MPa=250.0,
        elastic_modulus_GPa=200.0,
        density_kgm3=7850.0,
        poissons_ratio=0.3,
        thermal_expansion_um_per_C=12.0,
    ),
    ASTM_A992: MaterialProperties(
        yield_strength_MPa=345.0,
        elastic_modulus_GPa=200.0,
        density_kgm3=7850.0,
        poissons_ratio=0.3,
        thermal_expansion_um_per_C=12.0,
    ),
    ASTM_A572_GR50: MaterialProperties(
        yield_strength_MPa=345.0,
        elastic_modulus_GPa=200.0,
        density_kgm3=7850.0,
        poissons_ratio=0.3,
        thermal_expansion_um_per_C=12.0,
    ),
}

CUSTOM = "Custom"


@dataclass(frozen=True)
class PresetMaterial:
    """Material estándar por nombre (debe existir en PRESETS)."""
    name: str

    def __post_init__(self):
        if self.name not in PRESETS:
            raise UnknownMaterialError(f"No existe el material preset: {self.name!r}")


@dataclass(frozen=True)
class CustomMaterial:
    """Material con todos los campos ingresados por el usuario (default cero)."""
    props: MaterialProperties = MaterialProperties()
    name: str = CUSTOM


MaterialChoice = Union[PresetMaterial, CustomMaterial]


def preset_names() -> List[str]:
    """Nombres en el orden de la UI (Custom al final)."""
    return list(PRESETS.keys()) + [CUSTOM]


def get_preset(name: str) -> MaterialProperties:
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownMaterialError(f"No existe el material preset: {name!r}") from None


def resolve_material(choice: MaterialChoice) -> MaterialProperties:
    if isinstance(choice, PresetMaterial):
        return get_preset(choice.name)
    if isinstance(choice, CustomMaterial):
        return choice.props
    raise TypeError(f"Selección de material no soportada: {type(choice).__name__}")


def material_label(choice: MaterialChoice) -> str:
    return choice.name
