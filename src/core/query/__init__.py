"""Traducción de predicados a peticiones.

Por qué un paquete aparte:
- Extraer parámetros, resolver enums y construir URLs son pasos puros,
  sin I/O, que cualquier procesador puede reutilizar.
"""

from core.query.enums import parse_query_enum
from core.query.predicate import F, FieldRef, ParameterFinder, get_parameters
from core.query.request import Request, build_request

__all__ = [
    "F",
    "FieldRef",
    "ParameterFinder",
    "Request",
    "build_request",
    "get_parameters",
    "parse_query_enum",
]
