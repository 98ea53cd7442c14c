"""Finalized, immutable wiring for a single schema type."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from typewiring.core.exceptions import InvalidArgumentError
from typewiring.wiring.types import EnumValuesProvider, Resolver, TypeDiscriminator


@dataclass(frozen=True)
class TypeWiring:
    """Resolvers, default resolver, discriminator and enum values bound to one type.

    Instances are produced by ``TypeWiringBuilder.build()`` and never change
    afterwards. ``field_resolvers`` is a read-only view over a private copy,
    so later builder calls cannot leak into an already built wiring.
    """

    type_name: str
    field_resolvers: Mapping[str, Resolver] = field(default_factory=dict, hash=False)
    default_resolver: Optional[Resolver] = None
    type_discriminator: Optional[TypeDiscriminator] = None
    enum_value_mapping: Optional[EnumValuesProvider] = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if not self.type_name:
            raise InvalidArgumentError("You must provide a type name")
        object.__setattr__(self, "field_resolvers", MappingProxyType(dict(self.field_resolvers)))

    def has_field_resolver(self, field_name: str) -> bool:
        return field_name in self.field_resolvers

    def resolver_for(self, field_name: str) -> Optional[Resolver]:
        """Return the field's own resolver, falling back to the default resolver."""
        resolver = self.field_resolvers.get(field_name)
        if resolver is None:
            return self.default_resolver
        return resolver
