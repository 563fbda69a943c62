"""Resolución de strings a miembros de enum.

Es la única validación antes de construir la URL: corre siempre antes de
`build_request`.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from core.domain.errors import InvalidQueryTypeError

E = TypeVar("E", bound=Enum)


def parse_query_enum(enum_cls: type[E], raw: str | None) -> E:
    """Convierte `raw` en un miembro de `enum_cls`.

    La comparación es case-sensitive: primero contra el valor del miembro
    (`"VerifyCredentials"`), luego contra el nombre Python
    (`"VERIFY_CREDENTIALS"`). Solo se recortan espacios en los extremos.
    """

    allowed = [str(member.value) for member in enum_cls]
    if raw is None:
        raise InvalidQueryTypeError("None", allowed)

    candidate = str(raw).strip()
    for member in enum_cls:
        if str(member.value) == candidate:
            return member

    member = enum_cls.__members__.get(candidate)
    if member is not None:
        return member

    raise InvalidQueryTypeError(candidate, allowed)
