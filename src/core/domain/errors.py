"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI y los callers pueden capturar `AccountQueryError` sin conocer cada caso.
- Cada error hereda también de la excepción built-in más cercana, así que
  `except ValueError` sigue funcionando donde tiene sentido.

Ninguno de estos errores se reintenta ni se silencia dentro del core.
"""

from __future__ import annotations

from collections.abc import Iterable


class AccountQueryError(Exception):
    """Base de todos los errores del procesador de cuentas."""


class ConfigurationError(AccountQueryError, ValueError):
    """Falta un parámetro obligatorio (p.ej. `Type`) en el predicado."""

    def __init__(self, message: str, *, parameter: str | None = None) -> None:
        super().__init__(message)
        self.parameter = parameter


class InvalidQueryTypeError(AccountQueryError, ValueError):
    """El string recibido no corresponde a ningún miembro del enum."""

    def __init__(self, raw: str, allowed: Iterable[str]) -> None:
        self.raw = raw
        self.allowed = tuple(allowed)
        super().__init__(f"Unknown query type {raw!r}; expected one of: {', '.join(self.allowed)}")


class InvalidOperationError(AccountQueryError, RuntimeError):
    """Una tabla de dispatch no cubre un miembro de su enum.

    Indica que el enum y la tabla se desincronizaron; no es una condición de usuario.
    """


class MalformedResponseError(AccountQueryError, ValueError):
    """El JSON no tiene la forma esperada para la variante."""


class TypeMismatchError(AccountQueryError, TypeError):
    """El tipo esperado por el caller no es compatible con la entidad producida."""

    def __init__(self, expected: object, actual: type) -> None:
        self.expected = expected
        self.actual = actual
        expected_name = getattr(expected, "__name__", repr(expected))
        super().__init__(f"Cannot narrow {actual.__name__} to {expected_name}")
