"""Typed, named properties used to configure scene objects."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any, Iterator


class NoriError(Exception):
    """Raised when a scene description or object configuration is invalid."""


class PropertyType(Enum):
    """The kind of value a property holds, named as in scene files."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    COLOR = "color"
    POINT = "point"
    VECTOR = "vector"
    STRING = "string"
    TRANSFORM = "transform"


_MISSING: Any = object()


class PropertyList:
    """A mapping from property names to typed values.

    Each ``get_*`` method raises :class:`NoriError` when the property is absent
    and no default was given, or when it was stored with a different type.
    """

    def __init__(self) -> None:
        self._properties: dict[str, tuple[PropertyType, Any]] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def type_of(self, name: str) -> PropertyType:
        """Return the type a property was stored with."""
        try:
            return self._properties[name][0]
        except KeyError:
            raise NoriError(f"Property '{name}' is missing!") from None

    def _set(self, name: str, kind: PropertyType, value: Any) -> None:
        if name in self._properties:
            print(f'Property "{name}" was specified multiple times!', file=sys.stderr)
        self._properties[name] = (kind, value)

    def _get(self, name: str, kind: PropertyType, default: Any) -> Any:
        try:
            stored_kind, value = self._properties[name]
        except KeyError:
            if default is _MISSING:
                raise NoriError(f"Property '{name}' is missing!") from None
            return default
        if stored_kind is not kind:
            raise NoriError(
                f"Property '{name}' has the wrong type! (expected <{kind.value}>)!"
            )
        return value

    def set_boolean(self, name: str, value: Any) -> None:
        self._set(name, PropertyType.BOOLEAN, bool(value))

    def get_boolean(self, name: str, default: Any = _MISSING) -> bool:
        return self._get(name, PropertyType.BOOLEAN, default)

    def set_integer(self, name: str, value: Any) -> None:
        self._set(name, PropertyType.INTEGER, int(value))

    def get_integer(self, name: str, default: Any = _MISSING) -> int:
        return self._get(name, PropertyType.INTEGER, default)

    def set_float(self, name: str, value: Any) -> None:
        self._set(name, PropertyType.FLOAT, float(value))

    def get_float(self, name: str, default: Any = _MISSING) -> float:
        return self._get(name, PropertyType.FLOAT, default)

    def set_color(self, name: str, value: Any) -> None:
        self._set(name, PropertyType.COLOR, value)

    def get_color(self, name: str, default: Any = _MISSING) -> Any:
        return self._get(name, PropertyType.COLOR, default)

    def set_point(self, name: str, value: Any) -> None:
        self._set(name, PropertyType.POINT, value)

    def get_point(self, name: str, default: Any = _MISSING) -> Any:
        return self._get(name, PropertyType.POINT, default)

    def set_vector(self, name: str, value: Any) -> None:
        self._set(name, PropertyType.VECTOR, value)

    def get_vector(self, name: str, default: Any = _MISSING) -> Any:
        return self._get(name, PropertyType.VECTOR, default)

    def set_string(self, name: str, value: Any) -> None:
        self._set(name, PropertyType.STRING, str(value))

    def get_string(self, name: str, default: Any = _MISSING) -> str:
        return self._get(name, PropertyType.STRING, default)

    def set_transform(self, name: str, value: Any) -> None:
        self._set(name, PropertyType.TRANSFORM, value)

    def get_transform(self, name: str, default: Any = _MISSING) -> Any:
        return self._get(name, PropertyType.TRANSFORM, default)