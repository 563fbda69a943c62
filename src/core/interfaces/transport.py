"""Contrato del transporte HTTP.

El core nunca llama a la red: recibe JSON ya descargado y devuelve la URL
que hay que pedir. Este Protocol es lo único que sabe de ambos lados.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.query.request import Request


@runtime_checkable
class Transport(Protocol):
    async def get(self, request: Request) -> str:
        """Ejecuta un GET y devuelve el cuerpo como texto."""

        ...

    async def post(self, request: Request, data: dict[str, str] | None = None) -> str:
        """Ejecuta un POST (acciones con efectos) y devuelve el cuerpo."""

        ...
