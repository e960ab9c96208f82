from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict

from beam_calc.domain.beam import BeamConfig
from beam_calc.domain.cases import BeamCase
from beam_calc.domain.loads import LoadConfig
from beam_calc.errors import InvalidConfigurationError
from beam_calc.materials.material_db import (
    CustomMaterial,
    MaterialChoice,
    MaterialProperties,
    PresetMaterial,
)
from beam_calc.sections.rect_section import CrossSection

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"

# Ejemplo (mm / N / MPa):
# {
#   "schema": "1.0",
#   "beam": {"beam_type": "simple", "length_mm": 1000, "left_support_mm": 0, "right_support_mm": 1000},
#   "load": {"load_type": "point", "magnitude_N": 1000, "start_mm": 500},
#   "section": {"width_mm": 100, "height_mm": 200},
#   "material": {"preset": "ASTM A36 Structural Steel"}
# }


def load_case(path: str | Path) -> BeamCase:
    data = _read_json(path)
    return case_from_dict(data)


def save_case(case: BeamCase, path: str | Path) -> None:
    _write_json(path, case_to_dict(case))


def case_to_dict(case: BeamCase) -> Dict[str, Any]:
    return {
        "schema": SCHEMA_VERSION,
        "beam": asdict(case.beam),
        "load": asdict(case.load),
        "section": asdict(case.section),
        "material": _material_to_dict(case.material),
    }


def case_from_dict(data: Dict[str, Any]) -> BeamCase:
    _require_object(data, "case")
    for key in ("beam", "load", "section", "material"):
        if key not in data:
            raise InvalidConfigurationError(f"falta la sección '{key}'", key)
        _require_object(data[key], key)

    beam_d = data["beam"]
    load_d = data["load"]
    sec_d = data["section"]

    beam = BeamConfig(
        beam_type=str(_require(beam_d, "beam_type", "beam")).strip().lower(),
        length_mm=_require(beam_d, "length_mm", "beam"),
        left_support_mm=beam_d.get("left_support_mm"),
        right_support_mm=beam_d.get("right_support_mm"),
    )
    load = LoadConfig(
        load_type=str(_require(load_d, "load_type", "load")).strip().lower(),
        magnitude_N=_require(load_d, "magnitude_N", "load"),
        start_mm=_require(load_d, "start_mm", "load"),
        end_mm=load_d.get("end_mm"),
    )
    section = CrossSection(
        width_mm=_require(sec_d, "width_mm", "section"),
        height_mm=_require(sec_d, "height_mm", "section"),
    )
    return BeamCase(beam=beam, load=load, section=section, material=_material_from_dict(data["material"]))


# ----------------- helpers -----------------

def _require_object(v: Any, field: str) -> Dict[str, Any]:
    if not isinstance(v, dict):
        raise InvalidConfigurationError(f"se espera un objeto JSON (recibido {type(v).__name__})", field)
    return v


def _require(d: Dict[str, Any], key: str, section: str) -> Any:
    if key not in d:
        raise InvalidConfigurationError("campo obligatorio", f"{section}.{key}")
    return d[key]


def _material_to_dict(choice: MaterialChoice) -> Dict[str, Any]:
    if isinstance(choice, PresetMaterial):
        return {"preset": choice.name}
    return {"custom": asdict(choice.props)}


def _material_from_dict(d: Dict[str, Any]) -> MaterialChoice:
    if "preset" in d:
        # nombre desconocido => UnknownMaterialError (no es un error de usuario recuperable)
        return PresetMaterial(str(d["preset"]))
    if "custom" in d:
        fields = _require_object(d["custom"], "material.custom")
        known = set(MaterialProperties.__dataclass_fields__)
        extra = set(fields) - known
        if extra:
            raise InvalidConfigurationError(
                f"campos desconocidos: {', '.join(sorted(extra))}", "material.custom"
            )
        values: Dict[str, float] = {}
        for k, v in fields.items():
            try:
                values[k] = float(v)
            except (TypeError, ValueError):
                raise InvalidConfigurationError(f"valor no numérico: {v!r}", f"material.custom.{k}") from None
        return CustomMaterial(props=MaterialProperties(**values))
    raise InvalidConfigurationError("se espera 'preset' o 'custom'", "material")


def _read_json(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"No existe el archivo de caso: {p}")
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidConfigurationError(f"JSON inválido ({e.msg}, línea {e.lineno})", str(p)) from e
    if not isinstance(data, dict):
        raise InvalidConfigurationError("el documento debe ser un objeto JSON", str(p))
    schema = data.get("schema", SCHEMA_VERSION)
    if schema != SCHEMA_VERSION:
        logger.warning("Versión de esquema %s (esperada %s): se intenta leer igual.", schema, SCHEMA_VERSION)
    return data


def _write_json(path: str | Path, data: Dict[str, Any]) -> None:
    Path(path).write_text(json.dumps(data, indent=2), encoding="utf-8")
