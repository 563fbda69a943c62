"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y autenticación para todas las llamadas.
- Facilita testeo: se puede inyectar un `httpx.AsyncClient` con `MockTransport`.

El core no conoce httpx: solo el Protocol `core.interfaces.transport.Transport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.errors import AccountQueryError
from core.query.request import Request

log = logging.getLogger(__name__)


class TransportError(AccountQueryError):
    """Fallo de red o respuesta HTTP no exitosa."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las llamadas se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if settings.bearer_token:
        headers["Authorization"] = f"Bearer {settings.bearer_token}"
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpxTransport:
    """Implementación de `Transport` sobre `httpx.AsyncClient`.

    Si no se inyecta un cliente, se crea uno por llamada y se cierra al terminar.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def get(self, request: Request) -> str:
        return await self._send("GET", request)

    async def post(self, request: Request, data: dict[str, str] | None = None) -> str:
        return await self._send("POST", request, data=data)

    async def _send(self, method: str, request: Request, data: dict[str, str] | None = None) -> str:
        log.debug("%s %s", method, request.url)
        try:
            if self._client is not None:
                response = await self._client.request(method, request.url, data=data)
            else:
                async with build_async_client(self._settings) as client:
                    response = await client.request(method, request.url, data=data)
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {request.url} failed: {exc}", url=request.url) from exc

        if not response.is_success:
            raise TransportError(
                f"{method} {request.url} returned HTTP {response.status_code}",
                url=request.url,
                status_code=response.status_code,
            )
        return response.text
