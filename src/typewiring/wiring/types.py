from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


# Field resolvers and discriminators are opaque here; the executing engine
# decides how they are called.
Resolver = Callable[..., Any]
TypeDiscriminator = Callable[..., Any]


@runtime_checkable
class EnumValuesProvider(Protocol):
    """Maps an enum literal name to the internal value it stands for."""

    def get_value(self, name: str) -> Any:
        ...
