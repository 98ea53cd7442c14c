"""typewiring.

Per-type runtime wiring for schema-driven resolvers.

Collects the field resolvers, default resolver, type discriminator and
enum values for a schema type into an immutable ``TypeWiring`` that a
schema-construction engine consumes. Duplicate bindings are rejected in
strict mode, which is on by default and can be changed process-wide or
per builder.

Public API for applications wiring their schema types.
"""

from typewiring.core.exceptions import (
    DuplicateBindingError,
    InvalidArgumentError,
    TypeWiringError,
    TypeWiringRegistryError,
    WiringConfigError,
)
from typewiring.core.strict_mode import (
    default_strict_mode,
    get_default_strict_mode,
    set_default_strict_mode,
)
from typewiring.models.type_wiring import TypeWiring
from typewiring.wiring.builder import TypeWiringBuilder, new_type_wiring
from typewiring.wiring.enum_values import EnumClassValuesProvider, MappingEnumValuesProvider
from typewiring.wiring.registry import TypeWiringRegistry, register_type_wiring

__version__ = "0.1.0"

__all__ = [
    "DuplicateBindingError",
    "EnumClassValuesProvider",
    "InvalidArgumentError",
    "MappingEnumValuesProvider",
    "TypeWiring",
    "TypeWiringBuilder",
    "TypeWiringError",
    "TypeWiringRegistry",
    "TypeWiringRegistryError",
    "WiringConfigError",
    "default_strict_mode",
    "get_default_strict_mode",
    "new_type_wiring",
    "register_type_wiring",
    "set_default_strict_mode",
]
