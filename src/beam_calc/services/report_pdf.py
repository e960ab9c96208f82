# path: src/beam_calc/services/report_pdf.py
from __future__ import annotations

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from reportlab.lib import colors, pagesizes
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Image, PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from beam_calc.domain.cases import BeamCase
from beam_calc.domain.results import AnalysisResult
from beam_calc.materials.material_db import material_label, resolve_material
from beam_calc.services.figures import export_figures
from beam_calc.view.style import RenderStyle

logger = logging.getLogger(__name__)

DEFAULT_REPORT_NAME = "beam_load_analysis.pdf"

# Nota: este módulo no calcula nada. Recibe el caso y el resultado del motor
# y arma el PDF (una página de resultados + una por figura).


@dataclass(frozen=True)
class ReportHeader:
    title: str = "Beam Load Analysis"
    project: str = ""
    author: str = ""
    date: Optional[datetime] = None
    revision: str = "A"


def export_report_pdf(
    out_pdf_path: str,
    case: BeamCase,
    result: AnalysisResult,
    header: Optional[ReportHeader] = None,
    style: Optional[RenderStyle] = None,
    page_size=pagesizes.A4,
) -> str:
    """
    Genera el reporte PDF:
      1) resultados + datos de entrada
      2) esquema de la viga
      3) diagrama de corte V(x)
      4) diagrama de momento M(x)
    Las figuras se generan en un directorio temporal que se borra al final.
    """
    header = header or ReportHeader()
    tmpdir = tempfile.mkdtemp(prefix="beam_calc_report_")
    try:
        imgs = export_figures(case, result, tmpdir, style=style)
        _build_pdf(out_pdf_path, case, result, header, imgs, page_size)
    finally:
        shutil.rmtree(tmpdir, ignore_errors=True)

    logger.info("Reporte PDF generado: %s", out_pdf_path)
    return out_pdf_path


def _build_pdf(out_pdf_path: str, case: BeamCase, result: AnalysisResult, header: ReportHeader,
               imgs: Dict[str, str], page_size) -> None:
    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(name="H1c", parent=styles["Heading1"], alignment=TA_CENTER))
    styles.add(ParagraphStyle(name="Small", parent=styles["BodyText"], fontSize=9, leading=11))

    doc = SimpleDocTemplate(
        out_pdf_path,
        pagesize=page_size,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=12 * mm,
        bottomMargin=12 * mm,
        title=header.title,
    )

    story: List[object] = []

    # ----------------- Encabezado -----------------
    story.append(Paragraph(header.title, styles["H1c"]))
    story.append(Spacer(1, 4 * mm))

    date = header.date or datetime.now()
    meta_rows = [
        ["Project:", header.project or "-"],
        ["Author:", header.author or "-"],
        ["Date:", date.strftime("%Y-%m-%d %H:%M")],
        ["Revision:", header.revision],
    ]
    t = Table(meta_rows, colWidths=[40 * mm, 140 * mm])
    t.setStyle(_kv_table_style())
    story.append(t)
    story.append(Spacer(1, 6 * mm))

    # ----------------- Resultados -----------------
    story.append(Paragraph("Results", styles["Heading2"]))
    t = Table([list(r) for r in result.summary_rows()], colWidths=[70 * mm, 110 * mm])
    t.setStyle(_kv_table_style())
    story.append(t)
    if not result.safety_factor_applicable:
        story.append(Spacer(1, 2 * mm))
        story.append(Paragraph("Safety factor not applicable: the section carries no bending stress.", styles["Small"]))
    story.append(Spacer(1, 4 * mm))

    # ----------------- Datos del caso -----------------
    story.append(Paragraph("Input Data", styles["Heading2"]))
    t = Table(_input_rows(case), colWidths=[70 * mm, 110 * mm])
    t.setStyle(_kv_table_style())
    story.append(t)

    # ----------------- Figuras (una por página) -----------------
    for key, title in (("beam", "Beam Diagram"), ("v", "Shear Force Diagram"), ("m", "Bending Moment Diagram")):
        story.append(PageBreak())
        _append_figure(story, styles, key, title, imgs, max_w=180 * mm, max_h=120 * mm)

    doc.build(story)


# ----------------- helpers -----------------

def _input_rows(case: BeamCase) -> List[List[str]]:
    beam, load, sec = case.beam, case.load, case.section
    props = resolve_material(case.material)

    rows = [
        ["Beam Type", "Simple Beam" if beam.is_simple else "Cantilever Beam"],
        ["Beam Length [mm]", _f(beam.length_mm, 2)],
    ]
    if beam.is_simple:
        rows.append(["Left Support [mm]", _f(beam.left_mm, 2)])
        rows.append(["Right Support [mm]", _f(beam.right_mm, 2)])

    rows.append(["Load Type", "Uniform Load" if load.is_uniform else "Point Load"])
    rows.append(["Load Magnitude [N]", _f(load.magnitude_N, 2)])
    rows.append(["Load Start [mm]", _f(load.start_mm, 2)])
    if load.is_uniform and load.end_mm is not None:
        rows.append(["Load End [mm]", _f(load.end_mm, 2)])

    rows += [
        ["Width [mm]", _f(sec.width_mm, 2)],
        ["Height [mm]", _f(sec.height_mm, 2)],
        ["Material", material_label(case.material)],
        ["Yield Strength [MPa]", _f(props.yield_strength_MPa, 2)],
        ["Elastic Modulus [GPa]", _f(props.elastic_modulus_GPa, 2)],
        ["Density [kg/m³]", _f(props.density_kgm3, 2)],
        ["Poisson's Ratio", _f(props.poissons_ratio, 3)],
        ["Thermal Expansion [µm/m·°C]", _f(props.thermal_expansion_um_per_C, 2)],
    ]
    return rows


def _append_figure(story: List[object], styles, key: str, title: str, imgs: Dict[str, str], *, max_w: float, max_h: float):
    story.append(Paragraph(title, styles["Heading2"]))
    path = (imgs.get(key) or "").strip()
    if path and os.path.exists(path):
        story.append(_img(path, max_w=max_w, max_h=max_h))
    else:
        # Dejar evidencia en el PDF si no se insertó la imagen
        story.append(Paragraph(f"(No image: '{key}' not available)", styles["Small"]))
    story.append(Spacer(1, 3 * mm))


def _f(v: float, dec: int) -> str:
    s = f"{float(v):.{dec}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _kv_table_style():
    return TableStyle(
        [
            ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
            ("BACKGROUND", (0, 0), (0, -1), colors.whitesmoke),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("LEFTPADDING", (0, 0), (-1, -1), 6),
            ("RIGHTPADDING", (0, 0), (-1, -1), 6),
            ("TOPPADDING", (0, 0), (-1, -1), 4),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ]
    )


def _img(path: str, *, max_w: float, max_h: float):
    img = Image(path)
    iw, ih = img.imageWidth, img.imageHeight
    if iw <= 0 or ih <= 0:
        return img
    scale = min(max_w / iw, max_h / ih, 1.0)
    img.drawWidth = iw * scale
    img.drawHeight = ih * scale
    return img
