"""Selectores de cuenta (query types y actions).

Por qué dos enums:
- `AccountType` elige el sub-recurso de lectura y la forma de la respuesta.
- `AccountAction` elige llamadas con efectos secundarios; su respuesta tiene
  otra forma y nunca se mezcla con las lecturas.

Los valores son los nombres que viajan en los predicados y en la CLI.
"""

from __future__ import annotations

from enum import Enum


class AccountType(str, Enum):
    """Query-type variants supported by the account endpoints."""

    VERIFY_CREDENTIALS = "VerifyCredentials"
    RATE_LIMIT_STATUS = "RateLimitStatus"
    TOTALS = "Totals"
    SETTINGS = "Settings"

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return self.value


class AccountAction(str, Enum):
    """Side-effecting account calls."""

    END_SESSION = "EndSession"
