from __future__ import annotations

import logging
import os
from typing import Dict, Optional

from matplotlib.figure import Figure

from beam_calc.domain.cases import BeamCase
from beam_calc.domain.results import AnalysisResult
from beam_calc.view.renderer_beam import render_beam
from beam_calc.view.renderer_vm import render_moment, render_shear
from beam_calc.view.style import RenderStyle

logger = logging.getLogger(__name__)

# claves usadas por el reporte
FIGURE_KEYS = ("beam", "v", "m")


def export_figures(
    case: BeamCase,
    result: AnalysisResult,
    out_dir: str,
    style: Optional[RenderStyle] = None,
    fmt: str = "png",
) -> Dict[str, str]:
    """
    Guarda esquema, V(x) y M(x) como imágenes independientes.
    Devuelve {"beam": path, "v": path, "m": path}.
    Usa Figure directamente (sin pyplot): no depende de backend interactivo.
    """
    style = style or RenderStyle()
    os.makedirs(out_dir, exist_ok=True)

    renderers = {
        "beam": lambda ax: render_beam(ax, case, result, style),
        "v": lambda ax: render_shear(ax, result, style),
        "m": lambda ax: render_moment(ax, result, style),
    }
    names = {"beam": "beam_diagram", "v": "shear_force", "m": "bending_moment"}

    out: Dict[str, str] = {}
    for key in FIGURE_KEYS:
        fig = Figure(figsize=(style.fig_width_in, style.fig_height_in))
        ax = fig.add_subplot(111)
        renderers[key](ax)
        fig.tight_layout()
        path = os.path.join(out_dir, f"{names[key]}.{fmt}")
        fig.savefig(path, dpi=style.dpi)
        out[key] = path

    logger.info("Figuras exportadas en %s", out_dir)
    return out
