# path: scripts/run_analysis.py
import argparse
import dataclasses
import logging
import os
import sys
import traceback

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from beam_calc.services.logging_setup import setup_logging

from beam_calc.domain.beam import BeamConfig
from beam_calc.domain.cases import BeamCase
from beam_calc.domain.loads import LoadConfig
from beam_calc.engine.analysis import compute_analysis
from beam_calc.errors import BeamCalcError
from beam_calc.materials.material_db import ASTM_A36, CustomMaterial, MaterialProperties, PresetMaterial
from beam_calc.sections.rect_section import CrossSection
from beam_calc.services.case_file import load_case, save_case
from beam_calc.services.figures import export_figures
from beam_calc.services.report_pdf import DEFAULT_REPORT_NAME, ReportHeader, export_report_pdf


def _default_case() -> BeamCase:
    # Caso por defecto: viga simple de 1 m, puntual centrada, A36
    return BeamCase(
        beam=BeamConfig(beam_type="simple", length_mm=1000, left_support_mm=0, right_support_mm=1000),
        load=LoadConfig(load_type="point", magnitude_N=1000, start_mm=500, end_mm=500),
        section=CrossSection(width_mm=100, height_mm=200),
        material=PresetMaterial(ASTM_A36),
    )


def _apply_overrides(case: BeamCase, args) -> BeamCase:
    def _pick(obj, **fields):
        changes = {k: v for k, v in fields.items() if v is not None}
        return dataclasses.replace(obj, **changes) if changes else obj

    beam = _pick(case.beam, beam_type=args.beam_type, length_mm=args.length,
                 left_support_mm=args.left_support, right_support_mm=args.right_support)
    load = _pick(case.load, load_type=args.load_type, magnitude_N=args.magnitude,
                 start_mm=args.start, end_mm=args.end)
    section = _pick(case.section, width_mm=args.width, height_mm=args.height)

    material = case.material
    if args.material is not None:
        material = PresetMaterial(args.material)
    elif args.yield_strength is not None:
        material = CustomMaterial(MaterialProperties(yield_strength_MPa=args.yield_strength))

    return BeamCase(beam=beam, load=load, section=section, material=material)


def _parse_args(argv=None):
    p = argparse.ArgumentParser(description="Shear/moment diagrams, stress and safety factor for a single-span beam.")
    p.add_argument("case", nargs="?", help="case file (JSON); without it the default case is used")
    o = p.add_argument_group("overrides", "replace single values of the case file (or of the default case)")
    o.add_argument("--beam-type", choices=("simple", "cantilever"))
    o.add_argument("--length", type=float, metavar="MM", help="beam length [mm]")
    o.add_argument("--left-support", type=float, metavar="MM")
    o.add_argument("--right-support", type=float, metavar="MM")
    o.add_argument("--load-type", choices=("point", "uniform"))
    o.add_argument("--magnitude", type=float, metavar="N", help="total load [N]")
    o.add_argument("--start", type=float, metavar="MM", help="load start (point load position) [mm]")
    o.add_argument("--end", type=float, metavar="MM", help="uniform load end [mm]")
    o.add_argument("--width", type=float, metavar="MM")
    o.add_argument("--height", type=float, metavar="MM")
    m = o.add_mutually_exclusive_group()
    m.add_argument("--material", metavar="NAME", help="material preset name")
    m.add_argument("--yield-strength", type=float, metavar="MPA", help="custom material with this yield strength")
    p.add_argument("--pdf", nargs="?", const=DEFAULT_REPORT_NAME, help="write a PDF report")
    p.add_argument("--figures", metavar="DIR", help="write beam/V/M figures (PNG) to DIR")
    p.add_argument("--save-case", metavar="PATH", help="write the case actually used as JSON")
    p.add_argument("--title", default="Beam Load Analysis")
    p.add_argument("--author", default="")
    p.add_argument("--project", default="")
    p.add_argument("--log-dir", default="logs")
    p.add_argument("--no-log-file", action="store_true", help="log to the console only")
    p.add_argument("-v", "--verbose", action="store_true", help="DEBUG logging")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    logger = setup_logging(None if args.no_log_file else args.log_dir, level=logging.DEBUG if args.verbose else logging.INFO)

    def _excepthook(exctype, value, tb):
        msg = "".join(traceback.format_exception(exctype, value, tb))
        logger.error("Excepción no capturada:\n%s", msg)
        sys.__excepthook__(exctype, value, tb)

    sys.excepthook = _excepthook

    try:
        case = load_case(args.case) if args.case else _default_case()
        case = _apply_overrides(case, args)
        result = compute_analysis(case)
    except (BeamCalcError, FileNotFoundError) as e:
        logger.error("No se pudo calcular: %s", e)
        return 2

    for label, value in result.summary_rows():
        print(f"{label:<20} {value}")

    if args.save_case:
        save_case(case, args.save_case)
    if args.figures:
        export_figures(case, result, args.figures)
    if args.pdf:
        header = ReportHeader(title=args.title, author=args.author, project=args.project)
        export_report_pdf(args.pdf, case, result, header=header)
    return 0


if __name__ == "__main__":
    sys.exit(main())
