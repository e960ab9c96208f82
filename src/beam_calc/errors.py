from __future__ import annotations

from typing import Optional


class BeamCalcError(Exception):
    """Base de errores propios del motor."""


class InvalidConfigurationError(BeamCalcError, ValueError):
    """
    Configuración inválida detectada ANTES de muestrear.
    `field` identifica el dato de entrada que la provocó (ej. "beam.length_mm").
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

    def __str__(self) -> str:
        msg = super().__str__()
        if self.field:
            return f"{self.field}: {msg}"
        return msg


class UnknownMaterialError(BeamCalcError, KeyError):
    """Nombre de material sin preset asociado (error de programación)."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Material desconocido"
