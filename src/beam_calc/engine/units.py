from __future__ import annotations

MM_PER_M = 1000.0
PA_PER_MPA = 1e6


def to_meters(mm: float) -> float:
    """mm -> m"""
    return float(mm) / MM_PER_M


def pa_to_mpa(pa: float) -> float:
    """Pa -> MPa (solo para mostrar; internamente todo es SI)."""
    return float(pa) / PA_PER_MPA
