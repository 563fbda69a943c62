"""Predicados de consulta y extracción de parámetros.

Python no tiene árboles de expresión sobre lambdas, así que el predicado se
construye explícitamente con sobrecarga de operadores:

    F.Type == AccountType.SETTINGS
    (F.Type == AccountType.TOTALS) & (F.ScreenName == "jack")

`ParameterFinder` recorre ese árbol y solo lee comparaciones de igualdad
contra campos de una allow-list. No es un evaluador de predicados.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from core.domain.errors import ConfigurationError

log = logging.getLogger(__name__)


class Expr:
    """Nodo base del árbol de predicado."""

    def __and__(self, other: Expr) -> Expr:
        return And(self, other)

    def __or__(self, other: Expr) -> Expr:
        return Or(self, other)

    def __invert__(self) -> Expr:
        return Not(self)

    def __bool__(self) -> bool:
        raise TypeError(
            "Predicate expressions have no truth value; combine them with & and | instead of and/or."
        )


@dataclass(frozen=True, eq=False)
class FieldRef(Expr):
    name: str

    def _compare(self, op: str, value: Any) -> Comparison:
        return Comparison(op=op, field=self, value=value)

    def __eq__(self, value: Any) -> Comparison:  # type: ignore[override]
        return self._compare("==", value)

    def __ne__(self, value: Any) -> Comparison:  # type: ignore[override]
        return self._compare("!=", value)

    def __lt__(self, value: Any) -> Comparison:
        return self._compare("<", value)

    def __le__(self, value: Any) -> Comparison:
        return self._compare("<=", value)

    def __gt__(self, value: Any) -> Comparison:
        return self._compare(">", value)

    def __ge__(self, value: Any) -> Comparison:
        return self._compare(">=", value)

    __hash__ = object.__hash__


@dataclass(frozen=True, eq=False)
class Comparison(Expr):
    op: str
    field: FieldRef
    value: Any


@dataclass(frozen=True, eq=False)
class And(Expr):
    left: Expr
    right: Expr


@dataclass(frozen=True, eq=False)
class Or(Expr):
    left: Expr
    right: Expr


@dataclass(frozen=True, eq=False)
class Not(Expr):
    operand: Expr


class _FieldFactory:
    """`F.Type` es azúcar para `FieldRef("Type")`."""

    def __getattr__(self, name: str) -> FieldRef:
        if name.startswith("__"):
            raise AttributeError(name)
        return FieldRef(name)

    def __call__(self, name: str) -> FieldRef:
        return FieldRef(name)


F = _FieldFactory()


def encode_value(value: Any) -> str:
    """Codifica un literal del predicado como string."""

    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "True" if value else "False"
    return str(value)


class ParameterFinder:
    """Recorre un predicado y recoge `campo == literal` para campos permitidos.

    Reglas:
    - Solo `==` cuenta; el resto de comparaciones se ignoran.
    - Ambos órdenes de operandos valen (`F.Type == x` y `x == F.Type`).
    - Si un campo aparece varias veces gana la última comparación (recorrido
      de izquierda a derecha).
    """

    def __init__(self, expression: Expr, allowed: Iterable[str]) -> None:
        self._allowed = frozenset(allowed)
        self._parameters: dict[str, str] = {}
        self._visit(expression)

    @property
    def parameters(self) -> dict[str, str]:
        return dict(self._parameters)

    def _visit(self, node: Any) -> None:
        if isinstance(node, Comparison):
            self._visit_comparison(node)
        elif isinstance(node, (And, Or)):
            self._visit(node.left)
            self._visit(node.right)
        elif isinstance(node, Not):
            self._visit(node.operand)

    def _visit_comparison(self, node: Comparison) -> None:
        if node.op != "==" or isinstance(node.value, Expr):
            return
        if node.field.name not in self._allowed:
            return
        self._parameters[node.field.name] = encode_value(node.value)


def get_parameters(
    expression: Expr,
    allowed: Iterable[str],
    *,
    required: Iterable[str] = ("Type",),
) -> dict[str, str]:
    """Extrae parámetros y exige la presencia de los campos obligatorios."""

    if not isinstance(expression, Expr):
        raise ConfigurationError(
            f"Expected a predicate expression, got {type(expression).__name__}.",
        )

    parameters = ParameterFinder(expression, allowed).parameters
    for name in required:
        if name not in parameters:
            raise ConfigurationError(f"You must set {name}.", parameter=name)

    log.debug("Extracted parameters %s", parameters)
    return parameters
