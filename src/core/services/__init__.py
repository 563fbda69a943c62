"""Servicios del Core: procesador de cuentas y superficie de consulta."""

from core.services.account_processor import (
    AccountRequestProcessor,
    map_action,
    map_response,
    narrow,
)
from core.services.account_query import AccountQuery

__all__ = [
    "AccountQuery",
    "AccountRequestProcessor",
    "map_action",
    "map_response",
    "narrow",
]
