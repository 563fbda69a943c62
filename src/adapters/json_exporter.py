"""Exportación JSON de entidades de cuenta.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- La etiqueta (`type` o `action`) viaja con el payload, así que el archivo
  se puede volver a validar contra la unión `Account`.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import AccountEntity


def entity_to_json(entity: AccountEntity) -> str:
    """Serializa la entidad a JSON UTF-8 con formato estable."""

    payload = entity.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)


def export_entity_json(*, entity: AccountEntity, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(entity_to_json(entity) + "\n", encoding="utf-8")
    return output_path
