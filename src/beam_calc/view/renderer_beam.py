from __future__ import annotations

from typing import Optional

import numpy as np
from matplotlib.patches import Polygon, Rectangle

from beam_calc.domain.cases import BeamCase
from beam_calc.domain.results import AnalysisResult
from beam_calc.view.style import RenderStyle


# -------------------------
# Helpers generales
# -------------------------
def _draw_arrow(ax, x: float, y0: float, y1: float, style: RenderStyle):
    ax.annotate(
        "",
        xy=(x, y1),
        xytext=(x, y0),
        arrowprops=dict(
            arrowstyle="-|>",
            lw=style.arrow_lw,
            mutation_scale=style.arrow_scale,
            color=style.load_color,
            facecolor=style.load_color,
            shrinkA=0,
            shrinkB=0,
        ),
    )


def _draw_pin(ax, x: float, size: float, style: RenderStyle):
    """Apoyo simple: triángulo con vértice en la viga."""
    tri = Polygon(
        [(x, 0.0), (x - size / 2.0, -size), (x + size / 2.0, -size)],
        closed=True,
        fill=False,
        lw=style.support_lw,
        edgecolor="black",
        zorder=4,
    )
    ax.add_patch(tri)


def _draw_wall(ax, x: float, size: float, style: RenderStyle, *, side: int = +1):
    """Empotramiento: muro rayado del lado `side` (+1 derecha, -1 izquierda)."""
    h = 2.5 * size
    w = 0.6 * size
    x0 = x if side > 0 else x - w
    ax.add_patch(
        Rectangle(
            (x0, -h / 2.0),
            w,
            h,
            facecolor="none",
            edgecolor="black",
            hatch="///",
            lw=style.support_lw,
            zorder=4,
        )
    )


# -------------------------
# Render principal
# -------------------------
def render_beam(ax, case: BeamCase, result: Optional[AnalysisResult] = None, style: Optional[RenderStyle] = None):
    """
    Esquema de la viga en mm (coordenadas absolutas de la configuración):
    apoyos (o empotramiento), carga(s) y marcador del centro de gravedad.
    """
    style = style or RenderStyle()
    beam = case.beam
    load = case.load
    L = float(beam.length_mm)

    ax.clear()

    arrow_h = (style.arrow_height_pctL / 100.0) * L
    dist_h = (style.dist_height_pctL / 100.0) * L
    size = (style.support_size_pctL / 100.0) * L

    # Viga
    ax.plot([0, L], [0, 0], linewidth=style.beam_lw, color="black", solid_capstyle="butt", zorder=3)

    # Apoyos
    if beam.is_simple:
        _draw_pin(ax, beam.left_mm, size, style)
        _draw_pin(ax, beam.right_mm, size, style)
    else:
        _draw_wall(ax, L, size, style, side=+1)

    # Cargas
    x1 = float(load.start_mm)
    if load.is_uniform and load.end_mm is not None:
        x2 = float(load.end_mm)
        ax.plot([x1, x2], [dist_h, dist_h], lw=style.arrow_lw, color=style.load_color)
        for xi in np.linspace(x1, x2, style.n_dist_arrows):
            _draw_arrow(ax, float(xi), dist_h, 0.0, style)
        y_lbl = dist_h
    else:
        x2 = x1
        _draw_arrow(ax, x1, arrow_h, 0.0, style)
        y_lbl = arrow_h

    ax.text(
        (x1 + x2) / 2.0,
        y_lbl + 0.02 * L,
        f"{float(load.magnitude_N):.2f} N",
        ha="center",
        va="bottom",
        fontsize=style.font_size,
        color=style.load_color,
    )

    # Centro de gravedad
    x_cg = 0.5 * L if result is None else result.center_of_gravity_m * 1000.0
    ax.plot([x_cg, x_cg], [-0.6 * size, 0.6 * size], lw=2, color=style.cg_color, zorder=5)
    ax.scatter([x_cg], [0.0], s=24, color=style.cg_color, zorder=6)
    ax.text(x_cg, -1.2 * size, "CG", ha="center", va="top", fontsize=style.font_size, color=style.cg_color)

    # Extremos
    y_ext = -size - 0.06 * L
    ax.text(0.0, y_ext, "0", ha="center", va="top", fontsize=style.font_size)
    ax.text(L, y_ext, f"{L:g}", ha="center", va="top", fontsize=style.font_size)

    margin = 0.06 * L
    ax.set_xlim(-margin, L + margin)
    ax.set_ylim(-max(arrow_h, 3.0 * size), 1.5 * max(arrow_h, dist_h) + 0.05 * L)
    ax.set_aspect("auto", adjustable="box")

    # Formato
    ax.set_xlabel(f"Beam Length: {L:g} mm")
    ax.set_yticks([])
    kind = "Simple Beam" if beam.is_simple else "Cantilever Beam"
    ax.set_title(f"Beam Diagram ({kind})")
    ax.grid(True, axis="x", alpha=0.25)
