import math

import pytest

from beam_calc.domain.beam import BeamConfig
from beam_calc.domain.cases import BeamCase
from beam_calc.domain.loads import LoadConfig
from beam_calc.domain.results import format_safety_factor
from beam_calc.engine.analysis import compute_analysis
from beam_calc.engine.stress import compute_stresses, safety_factor
from beam_calc.engine.units import pa_to_mpa, to_meters
from beam_calc.materials.material_db import ASTM_A36, PresetMaterial
from beam_calc.sections.rect_section import CrossSection


def test_unit_conversions():
    assert to_meters(1500) == pytest.approx(1.5)
    assert pa_to_mpa(2.5e6) == pytest.approx(2.5)


def test_rect_section_properties():
    p = CrossSection(width_mm=100, height_mm=200).props_m()
    assert p["area_m2"] == pytest.approx(0.1 * 0.2)
    assert p["I_m4"] == pytest.approx(0.1 * 0.2**3 / 12.0)
    assert p["c_m"] == pytest.approx(0.1)
    assert p["W_m3"] == pytest.approx(0.1 * 0.2**2 / 6.0)


def test_compute_stresses_rectangular_section():
    st = compute_stresses(
        max_shear_N=500.0,
        max_moment_Nm=250.0,
        section=CrossSection(width_mm=100, height_mm=200),
        yield_strength_MPa=250.0,
    )
    # σ = 6M/(b h²), τ = 1.5 V/A
    assert st.sigma_max_Pa == pytest.approx(375_000.0)
    assert st.sigma_max_MPa == pytest.approx(0.375)
    assert st.tau_max_Pa == pytest.approx(37_500.0)
    assert st.tau_max_MPa == pytest.approx(0.0375)
    assert st.FS == pytest.approx(250.0 / 0.375)


def test_safety_factor_ratio():
    assert safety_factor(250.0, 125.0) == pytest.approx(2.0)
    assert format_safety_factor(safety_factor(250.0, 125.0)) == "2.00"


def test_safety_factor_without_stress_is_unbounded():
    fs = safety_factor(250.0, 0.0)
    assert math.isinf(fs) and fs > 0
    assert format_safety_factor(fs) == "N/A"


def test_zero_load_gives_not_applicable_safety_factor():
    case = BeamCase(
        beam=BeamConfig("simple", 1000.0, 0.0, 1000.0),
        load=LoadConfig("point", 0.0, 500.0),
        section=CrossSection(100, 200),
        material=PresetMaterial(ASTM_A36),
    )
    res = compute_analysis(case)
    assert res.max_normal_stress_MPa == 0.0
    assert not res.safety_factor_applicable
    assert dict(res.summary_rows())["Safety Factor"] == "N/A"


def test_summary_rows_units():
    case = BeamCase(
        beam=BeamConfig("simple", 1000.0, 0.0, 1000.0),
        load=LoadConfig("point", 1000.0, 500.0),
        section=CrossSection(100, 200),
        material=PresetMaterial(ASTM_A36),
    )
    rows = dict(compute_analysis(case).summary_rows())
    assert rows["Max Bending Moment"] == "250.00 N·m"
    assert rows["Safety Factor"] == "666.67"
    assert rows["Center of Gravity"] == "0.500 m"
