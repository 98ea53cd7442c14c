from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Type

from typewiring.core.exceptions import InvalidArgumentError


class MappingEnumValuesProvider:
    """Enum values taken from a fixed ``{literal: value}`` mapping."""

    def __init__(self, values: Mapping[str, Any]) -> None:
        if values is None:
            raise InvalidArgumentError("You must provide an enum values mapping")
        self._values = MappingProxyType(dict(values))

    @property
    def values(self) -> Mapping[str, Any]:
        return self._values

    def get_value(self, name: str) -> Optional[Any]:
        return self._values.get(name)

    def __repr__(self) -> str:
        return f"MappingEnumValuesProvider({dict(self._values)!r})"


class EnumClassValuesProvider:
    """Enum values taken from the members of a Python ``Enum`` class, by member name."""

    def __init__(self, enum_cls: Type[Enum]) -> None:
        if enum_cls is None or not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
            raise InvalidArgumentError(f"Expected an Enum class, got {enum_cls!r}")
        self._enum_cls = enum_cls

    @property
    def enum_cls(self) -> Type[Enum]:
        return self._enum_cls

    def get_value(self, name: str) -> Optional[Enum]:
        return self._enum_cls.__members__.get(name)

    def __repr__(self) -> str:
        return f"EnumClassValuesProvider({self._enum_cls.__name__})"
