# path: tests/test_diagrams.py
import pytest

from beam_calc.domain.beam import BeamConfig
from beam_calc.domain.cases import BeamCase
from beam_calc.domain.loads import LoadConfig
from beam_calc.engine.analysis import compute_analysis
from beam_calc.engine.diagrams import N_SAMPLES, build_V_M
from beam_calc.materials.material_db import ASTM_A36, PresetMaterial
from beam_calc.sections.rect_section import CrossSection


def _case(beam, load):
    return BeamCase(
        beam=beam,
        load=load,
        section=CrossSection(width_mm=100, height_mm=200),
        material=PresetMaterial(ASTM_A36),
    )


def _simple(L=1000.0, left=0.0, right=None):
    return BeamConfig(beam_type="simple", length_mm=L, left_support_mm=left,
                      right_support_mm=L if right is None else right)


def _cantilever(L=2000.0):
    return BeamConfig(beam_type="cantilever", length_mm=L)


ALL_CASES = [
    _case(_simple(), LoadConfig("point", 1000.0, 500.0)),
    _case(_simple(), LoadConfig("uniform", 2000.0, 0.0, 1000.0)),
    _case(_cantilever(), LoadConfig("point", 500.0, 0.0)),
    _case(_cantilever(), LoadConfig("uniform", 4000.0, 0.0, 2000.0)),
    _case(_simple(1200.0, 100.0, 1100.0), LoadConfig("uniform", 900.0, 300.0, 700.0)),
]


@pytest.mark.parametrize("case", ALL_CASES)
def test_curves_have_101_increasing_samples_over_domain(case):
    res = compute_analysis(case)
    assert len(res.shear) == N_SAMPLES
    assert len(res.moment) == N_SAMPLES

    xs = [p.position_m for p in res.shear]
    assert xs == [p.position_m for p in res.moment]
    assert xs[0] == 0.0
    assert all(b > a for a, b in zip(xs, xs[1:]))
    assert xs[-1] == pytest.approx(case.beam.span_mm / 1000.0)


@pytest.mark.parametrize("case", ALL_CASES)
def test_samples_are_rounded_for_display(case):
    res = compute_analysis(case)
    for p in res.shear + res.moment:
        assert round(p.position_m, 3) == p.position_m
        assert round(p.value, 2) == p.value


def test_simple_point_load_at_midspan():
    res = compute_analysis(_case(_simple(), LoadConfig("point", 1000.0, 500.0)))

    assert res.reaction_A == pytest.approx(500.0)
    assert res.reaction_B == pytest.approx(500.0)
    assert res.max_bending_moment_Nm == pytest.approx(1000.0 * 1.0 / 4.0)
    assert res.x_max_moment_m == pytest.approx(0.5)
    assert res.max_shear_force_N == pytest.approx(500.0)

    # el punto bajo la carga pertenece al tramo izquierdo
    assert res.shear[50].value == pytest.approx(500.0)
    assert res.shear[51].value == pytest.approx(-500.0)
    assert res.moment[0].value == 0.0
    assert res.moment[-1].value == pytest.approx(0.0, abs=1e-9)


def test_simple_point_load_with_offset_supports():
    case = _case(_simple(1200.0, 100.0, 1100.0), LoadConfig("point", 1000.0, 600.0))
    res = compute_analysis(case)

    assert res.shear[-1].position_m == pytest.approx(1.0)
    assert res.max_bending_moment_Nm == pytest.approx(250.0)
    assert res.center_of_gravity_m == pytest.approx(0.6)


def test_simple_uniform_full_span_max_moment():
    res = compute_analysis(_case(_simple(), LoadConfig("uniform", 2000.0, 0.0, 1000.0)))
    w = 2000.0 / 1.0

    assert res.max_bending_moment_Nm == pytest.approx(w * 1.0**2 / 8.0)
    assert res.x_max_moment_m == pytest.approx(0.5)
    assert res.shear[0].value == pytest.approx(1000.0)
    assert res.shear[-1].value == pytest.approx(-1000.0)


def test_simple_uniform_partial_is_continuous_and_in_equilibrium():
    beam = _simple(1200.0, 100.0, 1100.0)
    load = LoadConfig("uniform", 900.0, 300.0, 700.0)
    diag = build_V_M(beam, load)

    R_A, R_B = diag.reactions()
    assert R_A + R_B == pytest.approx(900.0)
    # resultante en x=0.4 m de un tramo de 1.0 m
    assert R_B == pytest.approx(900.0 * 0.4)

    eps = 1e-9
    for xb in (diag.a, diag.b):
        assert diag.eval_V(xb - eps) == pytest.approx(diag.eval_V(xb + eps), abs=1e-5)
        assert diag.eval_M(xb - eps) == pytest.approx(diag.eval_M(xb + eps), abs=1e-5)

    assert diag.eval_M(0.0) == pytest.approx(0.0)
    assert diag.eval_M(diag.x_end) == pytest.approx(0.0, abs=1e-9)


def test_cantilever_point_load_at_free_end():
    res = compute_analysis(_case(_cantilever(2000.0), LoadConfig("point", 500.0, 0.0)))

    assert all(p.value == pytest.approx(500.0) for p in res.shear)
    assert res.max_bending_moment_Nm == pytest.approx(500.0 * 2.0)
    assert res.x_max_moment_m == pytest.approx(2.0)
    assert res.moment[0].value == 0.0
    assert res.reaction_A == pytest.approx(500.0)
    assert res.reaction_B == pytest.approx(1000.0)


def test_cantilever_point_load_inside_span():
    res = compute_analysis(_case(_cantilever(2000.0), LoadConfig("point", 500.0, 1000.0)))

    # tramo libre sin esfuerzos; el punto bajo la carga toma el valor de la izquierda
    assert res.shear[49].value == 0.0
    assert res.shear[50].value == 0.0
    assert res.shear[51].value == pytest.approx(500.0)
    assert res.moment[-1].value == pytest.approx(500.0)
    assert res.max_bending_moment_Nm == pytest.approx(500.0)


def test_cantilever_uniform_full_length():
    res = compute_analysis(_case(_cantilever(2000.0), LoadConfig("uniform", 4000.0, 0.0, 2000.0)))
    w = 4000.0 / 2.0

    assert res.max_bending_moment_Nm == pytest.approx(w * 2.0**2 / 2.0)
    assert res.x_max_moment_m == pytest.approx(2.0)
    assert res.max_shear_force_N == pytest.approx(4000.0)
    assert res.shear[0].value == 0.0


def test_cantilever_uniform_partial_beyond_load_is_linear():
    diag = build_V_M(_cantilever(2000.0), LoadConfig("uniform", 1000.0, 0.0, 1000.0))

    assert diag.eval_V(1.5) == pytest.approx(1000.0)
    # resultante a 0.5 m del extremo libre
    assert diag.eval_M(2.0) == pytest.approx(1000.0 * 1.5)
    assert diag.eval_M(1.0) == pytest.approx(1000.0 * 0.5)


def test_negative_magnitude_reports_absolute_maxima():
    res = compute_analysis(_case(_simple(), LoadConfig("point", -1000.0, 500.0)))
    assert res.max_bending_moment_Nm == pytest.approx(250.0)
    assert res.max_shear_force_N == pytest.approx(500.0)


@pytest.mark.parametrize("case", ALL_CASES)
def test_analysis_is_idempotent(case):
    assert compute_analysis(case) == compute_analysis(case)


@pytest.mark.parametrize("start_mm", [100.0, 300.0, 570.0, 700.0, 900.0])
def test_simple_point_sample_under_load_takes_left_segment(start_mm):
    res = compute_analysis(_case(_simple(), LoadConfig("point", 1000.0, start_mm)))
    i = int(round(start_mm / 10.0))
    R_A = 1000.0 * (1.0 - start_mm / 1000.0)

    assert res.shear[i].position_m == pytest.approx(start_mm / 1000.0)
    assert res.shear[i].value == pytest.approx(R_A)
    assert res.shear[i + 1].value == pytest.approx(R_A - 1000.0)


@pytest.mark.parametrize("start_mm", [300.0, 700.0, 1400.0, 1900.0])
def test_cantilever_point_sample_under_load_takes_left_segment(start_mm):
    res = compute_analysis(_case(_cantilever(2000.0), LoadConfig("point", 500.0, start_mm)))
    i = int(round(start_mm / 20.0))

    assert res.shear[i].position_m == pytest.approx(start_mm / 1000.0)
    assert res.shear[i].value == 0.0
    assert res.shear[i + 1].value == pytest.approx(500.0)


def test_load_within_rounding_margin_is_clamped_to_domain():
    beam = _simple()
    load = LoadConfig("point", 1000.0, 1000.0 + 5e-10)
    diag = build_V_M(beam, load)

    assert diag.a == diag.x_end
    res = compute_analysis(_case(beam, load))
    assert res.reaction_B == pytest.approx(1000.0)
    assert res.reaction_A == pytest.approx(0.0, abs=1e-9)
