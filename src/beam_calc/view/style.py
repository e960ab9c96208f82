from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class RenderStyle:
    beam_lw: float = 4

    arrow_lw: float = 1.5
    arrow_scale: float = 12.0

    support_lw: float = 1.5
    support_size_pctL: float = 4.0   # alto de los triángulos de apoyo

    # Alturas (en % de L)
    arrow_height_pctL: float = 12.0
    dist_height_pctL: float = 8.0
    n_dist_arrows: int = 5

    cg_color: str = "blue"
    load_color: str = "red"

    curve_lw: float = 2.0
    font_size: int = 10

    # Exportación de figuras
    fig_width_in: float = 8.0
    fig_height_in: float = 3.5
    dpi: int = 200
