"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas en múltiples comandos.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from rich.table import Table

from core.domain.models import AccountEntity


def _flatten(prefix: str, value: Any, rows: list[tuple[str, str]]) -> None:
    if isinstance(value, BaseModel):
        for name in type(value).model_fields:
            _flatten(f"{prefix}.{name}" if prefix else name, getattr(value, name), rows)
        return
    rows.append((prefix, "" if value is None else str(value)))


def build_entity_table(entity: AccountEntity) -> Table:
    """Tabla campo/valor del payload de `entity`."""

    tag = getattr(entity, "type", None) or getattr(entity, "action", None)
    table = Table(title=f"Account • {tag.value if tag else '?'}")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    if not entity.has_payload:
        table.add_row("(empty)", "No content returned")
        return table

    rows: list[tuple[str, str]] = []
    _flatten("", entity.payload, rows)
    for field, value in rows:
        table.add_row(field, value)
    return table
