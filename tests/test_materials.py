import pytest

from beam_calc.errors import UnknownMaterialError
from beam_calc.materials.material_db import (
    ASTM_A36,
    ASTM_A572_GR50,
    ASTM_A992,
    CUSTOM,
    CustomMaterial,
    MaterialProperties,
    PresetMaterial,
    get_preset,
    material_label,
    preset_names,
    resolve_material,
)


def test_presets_match_standard_values():
    a36 = get_preset(ASTM_A36)
    assert a36.yield_strength_MPa == 250.0
    assert a36.elastic_modulus_GPa == 200.0
    assert a36.density_kgm3 == 7850.0
    assert a36.poissons_ratio == 0.3
    assert a36.thermal_expansion_um_per_C == 12.0

    assert get_preset(ASTM_A992).yield_strength_MPa == 345.0
    assert get_preset(ASTM_A572_GR50).yield_strength_MPa == 345.0


def test_preset_names_end_with_custom():
    names = preset_names()
    assert names[:3] == [ASTM_A36, ASTM_A992, ASTM_A572_GR50]
    assert names[-1] == CUSTOM


def test_unknown_preset_fails_fast():
    with pytest.raises(UnknownMaterialError):
        PresetMaterial("ASTM A999")
    with pytest.raises(KeyError):
        get_preset("ASTM A999")


def test_custom_material_defaults_to_zero():
    props = resolve_material(CustomMaterial())
    assert props == MaterialProperties()
    assert props.yield_strength_MPa == 0.0
    assert material_label(CustomMaterial()) == CUSTOM


def test_resolve_preset_and_custom():
    assert resolve_material(PresetMaterial(ASTM_A992)).yield_strength_MPa == 345.0
    custom = CustomMaterial(MaterialProperties(yield_strength_MPa=275.0, elastic_modulus_GPa=70.0))
    assert resolve_material(custom).yield_strength_MPa == 275.0
    assert material_label(PresetMaterial(ASTM_A36)) == ASTM_A36
