"""Descriptor de petición y tablas de URL por variante.

Cada tabla se valida al importar el módulo: si alguien añade un miembro al
enum sin su sufijo, la importación falla con `InvalidOperationError` en vez
de fallar en runtime con una consulta concreta.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Mapping, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.account_types import AccountAction, AccountType
from core.domain.errors import InvalidOperationError

log = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


class Request(BaseModel):
    """URL absoluta de una llamada HTTP (sin verbo ni body)."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1, description="URL absoluta a la que apunta la llamada.")

    def __str__(self) -> str:
        return self.url


def ensure_exhaustive(enum_cls: type[Enum], table: Mapping[Enum, object], *, name: str) -> None:
    """Falla si `table` no cubre todos los miembros de `enum_cls`."""

    missing = [member.name for member in enum_cls if member not in table]
    if missing:
        raise InvalidOperationError(f"{name} has no entry for {', '.join(missing)}")


ACCOUNT_URL_SUFFIXES: dict[AccountType, str] = {
    AccountType.VERIFY_CREDENTIALS: "account/verify_credentials.json",
    AccountType.RATE_LIMIT_STATUS: "account/rate_limit_status.json",
    AccountType.TOTALS: "account/totals.json",
    AccountType.SETTINGS: "account/settings.json",
}

ACCOUNT_ACTION_PATHS: dict[AccountAction, str] = {
    AccountAction.END_SESSION: "account/end_session.json",
}

ensure_exhaustive(AccountType, ACCOUNT_URL_SUFFIXES, name="ACCOUNT_URL_SUFFIXES")
ensure_exhaustive(AccountAction, ACCOUNT_ACTION_PATHS, name="ACCOUNT_ACTION_PATHS")


def build_request(base_url: str, variant: E, table: Mapping[E, str] | None = None) -> Request:
    """Concatena `base_url` con el sufijo fijo de `variant`."""

    if table is None:
        table = ACCOUNT_ACTION_PATHS if isinstance(variant, AccountAction) else ACCOUNT_URL_SUFFIXES  # type: ignore[assignment]

    key_types = {type(member) for member in table}  # type: ignore[union-attr]
    suffix = table.get(variant) if type(variant) in key_types else None  # type: ignore[union-attr]
    if suffix is None:
        raise InvalidOperationError(f"No URL suffix registered for {variant!r}")

    url = base_url + suffix
    log.debug("Built %s request: %s", getattr(variant, "value", variant), url)
    return Request(url=url)
