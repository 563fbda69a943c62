"""Superficie de consulta para el caller.

Por qué un servicio aparte:
- Conecta los pasos puros del procesador con un `Transport`:
  predicado -> parámetros -> `Request` -> transporte -> entidad tipada.
- Crea un procesador nuevo por llamada, así el tipo resuelto nunca se
  comparte entre llamadas concurrentes.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from core.domain.account_types import AccountAction
from core.domain.models import EndSessionAccount
from core.interfaces.transport import Transport
from core.query.predicate import Expr
from core.services.account_processor import AccountRequestProcessor, narrow

log = logging.getLogger(__name__)


class AccountQuery:
    """Ejecuta consultas y acciones de cuenta a través de un `Transport`."""

    def __init__(
        self,
        transport: Transport,
        *,
        base_url: str,
        processor_factory: Callable[[str], AccountRequestProcessor] = AccountRequestProcessor,
    ) -> None:
        self._transport = transport
        self._base_url = base_url
        self._processor_factory = processor_factory

    def new_processor(self) -> AccountRequestProcessor:
        return self._processor_factory(self._base_url)

    async def first(self, predicate: Expr, expected_type: Any = None) -> Any:
        """Ejecuta la consulta de `predicate` y devuelve su única entidad.

        `expected_type` acepta una clase o la unión `Account`.
        """

        processor = self.new_processor()
        parameters = processor.get_parameters(predicate)
        request = processor.build_url(parameters)

        response_json = await self._transport.get(request)
        entity = processor.process_results(response_json)[0]
        log.info("Account query %s -> %s", processor.type.value, type(entity).__name__)
        return narrow(entity, expected_type)

    async def end_session(self) -> EndSessionAccount:
        """Envía la acción EndSession y mapea su respuesta."""

        processor = self.new_processor()
        request = processor.build_action_url(AccountAction.END_SESSION)
        response_json = await self._transport.post(request)
        return processor.process_action_result(
            response_json,
            AccountAction.END_SESSION,
            EndSessionAccount,
        )
