"""Lector dinámico de documentos JSON.

Por qué existe:
- Algunos endpoints (settings, rate limit) anidan y nombran sus campos de
  forma inconsistente; es más claro recorrerlos campo a campo que declarar
  un esquema para cada uno.
- Centraliza la coerción de tipos: un campo ausente o `null` produce el
  valor por defecto del tipo, un valor incoercible es un error de forma.

El camino con esquema (pydantic) vive en `adapters.twitter_json`.
"""

from __future__ import annotations

import json
from typing import Any, Sequence, TypeVar, Union

from core.domain.errors import MalformedResponseError

T = TypeVar("T")

PathLike = Union[str, int, Sequence[Union[str, int]]]

_MISSING = object()


def _split_path(path: PathLike) -> list[str | int]:
    if isinstance(path, int):
        return [path]
    if isinstance(path, str):
        return [part for part in path.split(".") if part]
    return list(path)


def _as_index(key: str | int) -> int | None:
    if isinstance(key, int):
        return key
    if key.isdigit():
        return int(key)
    return None


class JsonDocument:
    """Envoltorio de un valor JSON con acceso por rutas y coerción tipada."""

    def __init__(self, data: Any) -> None:
        self._data = data

    @classmethod
    def parse(cls, text: str) -> JsonDocument:
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise MalformedResponseError(f"Response is not valid JSON: {exc}") from exc
        return cls(data)

    @property
    def raw(self) -> Any:
        return self._data

    def is_object(self) -> bool:
        return isinstance(self._data, dict)

    def require_object(self) -> JsonDocument:
        if not self.is_object():
            raise MalformedResponseError(f"Expected a JSON object, got {type(self._data).__name__}")
        return self

    def _lookup(self, path: PathLike) -> Any:
        node = self._data
        for key in _split_path(path):
            if isinstance(node, dict):
                node = node.get(str(key), _MISSING)
            elif isinstance(node, list):
                index = _as_index(key)
                if index is None or not -len(node) <= index < len(node):
                    return _MISSING
                node = node[index]
            else:
                return _MISSING
            if node is _MISSING:
                return _MISSING
        return node

    def get(self, path: PathLike) -> JsonDocument | None:
        """Sub-documento en `path`, o `None` si no existe o es `null`."""

        value = self._lookup(path)
        if value is _MISSING or value is None:
            return None
        return JsonDocument(value)

    def get_value(self, path: PathLike, type_: type[T]) -> T:
        """Valor en `path` convertido a `type_`.

        Ausente/`null` -> valor por defecto (`0`, `False`, `None`...).
        """

        value = self._lookup(path)
        if value is _MISSING or value is None:
            return _default_for(type_)
        try:
            return _coerce(value, type_)
        except (TypeError, ValueError) as exc:
            raise MalformedResponseError(
                f"Field {path!r} holds {value!r}, which is not a valid {type_.__name__}"
            ) from exc

    def __bool__(self) -> bool:
        return True

    def __len__(self) -> int:
        if isinstance(self._data, (list, dict)):
            return len(self._data)
        return 0

    def __getitem__(self, index: int) -> JsonDocument:
        if not isinstance(self._data, list):
            raise MalformedResponseError(f"Expected a JSON array, got {type(self._data).__name__}")
        return JsonDocument(self._data[index])

    def is_array(self) -> bool:
        return isinstance(self._data, list)


def _default_for(type_: type) -> Any:
    if type_ is bool:
        return False
    if type_ is int:
        return 0
    if type_ is float:
        return 0.0
    return None


def _coerce(value: Any, type_: type) -> Any:
    if type_ is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ("true", "false"):
            return value.lower() == "true"
        if isinstance(value, int):
            return value != 0
        raise ValueError("not a boolean")
    if type_ is int:
        if isinstance(value, bool):
            raise TypeError("boolean is not an integer")
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError("fractional number")
            return int(value)
        if isinstance(value, (int, str)):
            return int(value)
        raise TypeError("not an integer")
    if type_ is float:
        if isinstance(value, bool):
            raise TypeError("boolean is not a number")
        return float(value)
    if type_ is str:
        if isinstance(value, (dict, list)):
            raise TypeError("container is not a string")
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
    if type_ is JsonDocument:
        return JsonDocument(value)
    if isinstance(value, type_):
        return value
    raise TypeError(f"unsupported target type {type_!r}")
