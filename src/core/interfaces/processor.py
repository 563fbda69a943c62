"""Contratos de procesadores de peticiones.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite añadir procesadores para otros recursos (statuses, friendships...)
  que la capa de consulta use de forma intercambiable.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, TypeVar, runtime_checkable

from core.query.predicate import Expr
from core.query.request import Request

T = TypeVar("T")


@runtime_checkable
class RequestProcessor(Protocol):
    """Traduce un predicado a una `Request` e interpreta la respuesta.

    Reglas de diseño:
    - Ningún método hace I/O; el transporte lo ejecuta otro.
    - `build_url` fija la variante activa que luego usa `process_results`,
      así que una instancia sirve para una sola llamada.
    """

    base_url: str

    def get_parameters(self, expression: Expr) -> dict[str, str]:
        ...

    def build_url(self, parameters: dict[str, str] | None) -> Request:
        ...

    def process_results(self, response_json: str | None) -> list[Any]:
        ...


@runtime_checkable
class RequestProcessorWithAction(Protocol):
    """Procesador que además interpreta respuestas de acciones."""

    def process_action_result(
        self,
        response_json: str | None,
        action: Enum,
        expected_type: type[T] | None = None,
    ) -> T | None:
        ...
