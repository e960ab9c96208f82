from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from beam_calc.domain.results import AnalysisResult, SamplePoint
from beam_calc.view.style import RenderStyle


def _to_arrays(points: Sequence[SamplePoint]) -> Tuple[np.ndarray, np.ndarray]:
    x = np.asarray([p.position_m for p in points], dtype=float)
    y = np.asarray([p.value for p in points], dtype=float)
    return x, y


def _peak_indices(x: np.ndarray, y: np.ndarray, *, min_dx: float) -> Dict[int, str]:
    """
    Con una sola carga V(x) y M(x) tienen a lo sumo un pico por signo:
    basta con el máximo y el mínimo globales. Se descartan los casi nulos
    y, si quedan pegados en x, gana el de mayor |y|.
    """
    max_abs = float(np.max(np.abs(y)))
    peaks: Dict[int, str] = {}
    for kind, i in (("max", int(np.argmax(y))), ("min", int(np.argmin(y)))):
        if abs(float(y[i])) >= 0.01 * max_abs:
            peaks.setdefault(i, kind)

    if len(peaks) == 2:
        i, j = sorted(peaks, key=lambda k: abs(float(y[k])), reverse=True)
        if abs(float(x[i] - x[j])) < min_dx:
            del peaks[j]
    return peaks


def _annotate_extrema(ax, x: np.ndarray, y: np.ndarray, unit: str):
    """Marca máximo/mínimo con su valor; máximo arriba, mínimo abajo, dentro del recuadro."""
    if len(x) == 0 or float(np.max(np.abs(y))) <= 0.0:
        return

    x_min, x_max = ax.get_xlim()
    y_min, y_max = ax.get_ylim()
    mx = 0.03 * max(1e-9, float(x_max - x_min))
    my = 0.03 * max(1e-9, float(y_max - y_min))

    peaks = _peak_indices(x, y, min_dx=0.05 * float(x_max - x_min))
    for i, kind in sorted(peaks.items(), key=lambda kv: float(x[kv[0]])):
        xi, yi = float(x[i]), float(y[i])
        ax.scatter([xi], [yi], s=18, zorder=6)

        ty = yi + my if kind == "max" else yi - my
        tx = min(max(xi, x_min + mx), x_max - mx)
        ty = min(max(ty, y_min + my), y_max - my)
        ax.text(tx, ty, f"{yi:.2f} {unit}", ha="center",
                va="bottom" if kind == "max" else "top", fontsize=8, zorder=7)


def _render_curve(ax, points: Sequence[SamplePoint], *, style: RenderStyle, color: str,
                  ylabel: str, title: str, unit: str, y_zoom: float,
                  xlim: Optional[Tuple[float, float]]):
    ax.clear()
    x, y = _to_arrays(points)

    ax.plot(x, y, lw=style.curve_lw, color=color)
    ax.axhline(0.0, linewidth=1.0, color="black")

    if xlim is None:
        ax.set_xlim(float(x[0]), float(x[-1]))
    else:
        ax.set_xlim(xlim[0], xlim[1])

    ymax = float(np.max(np.abs(y))) if len(y) else 1.0
    ymax = ymax if ymax > 0 else 1.0
    pad = 1.15
    ax.set_ylim(-ymax * y_zoom * pad, ymax * y_zoom * pad)

    _annotate_extrema(ax, x, y, unit)

    ax.set_xlabel("Position (m)")
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    ax.grid(True, linestyle="--", alpha=0.35)


# -------------------------
# Render
# -------------------------
def render_shear(ax, result: AnalysisResult, style: Optional[RenderStyle] = None,
                 y_zoom: float = 1.0, xlim: Optional[Tuple[float, float]] = None):
    _render_curve(
        ax, result.shear,
        style=style or RenderStyle(),
        color="tab:blue",
        ylabel="Shear Force (N)",
        title="Shear Force Diagram",
        unit="N",
        y_zoom=y_zoom,
        xlim=xlim,
    )


def render_moment(ax, result: AnalysisResult, style: Optional[RenderStyle] = None,
                  y_zoom: float = 1.0, xlim: Optional[Tuple[float, float]] = None):
    _render_curve(
        ax, result.moment,
        style=style or RenderStyle(),
        color="tab:orange",
        ylabel="Bending Moment (N·m)",
        title="Bending Moment Diagram",
        unit="N·m",
        y_zoom=y_zoom,
        xlim=xlim,
    )
