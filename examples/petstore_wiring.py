"""
Example: wiring the types of a small pet store schema.

Shows the three ways of producing type wirings:
- Builder calls, step by step
- A builder function passed to new_type_wiring / register_type_wiring
- Declarative config loaded from a dict
"""

from enum import Enum

from typewiring import (
    DuplicateBindingError,
    EnumClassValuesProvider,
    TypeWiringRegistry,
    default_strict_mode,
    new_type_wiring,
    register_type_wiring,
)
from typewiring.core.logger import configure_logging
from typewiring.wiring.loader import load_type_wirings

configure_logging("DEBUG")


def pet_name(env):
    return env["source"]["name"]


def pet_age(env):
    return env["source"]["age"]


def property_resolver(env):
    return env["source"].get(env["field_name"])


def pet_kind(env):
    return "Dog" if env["source"].get("barks") else "Cat"


class Species(Enum):
    DOG = "dog"
    CAT = "cat"


# =============================================================================
# Example 1: builder calls
# =============================================================================
pet = (
    new_type_wiring("Pet")
    .with_field_resolver("name", pet_name)
    .with_field_resolver("age", pet_age)
    .with_default_resolver(property_resolver)
    .build()
)
print(f"{pet.type_name}: {list(pet.field_resolvers)}")

try:
    new_type_wiring("Pet").with_field_resolver("name", pet_name).with_field_resolver("name", pet_age)
except DuplicateBindingError as exc:
    print(f"Rejected in strict mode: {exc} (field={exc.field_name})")


# =============================================================================
# Example 2: registered builder functions
# =============================================================================
@register_type_wiring("Animal")
def wire_animal(builder):
    return builder.with_type_discriminator(pet_kind)


@register_type_wiring("Species")
def wire_species(builder):
    return builder.with_enum_value_mapping(EnumClassValuesProvider(Species))


print(f"Registered: {TypeWiringRegistry.type_names()}")


# =============================================================================
# Example 3: lenient batch of wirings from config
# =============================================================================
with default_strict_mode(False):
    wirings = load_type_wirings(config_dict={
        "types": [
            {
                "type_name": "Owner",
                "default_resolver": "builtins:dict",
                "enum_values": {"ACTIVE": 1, "INACTIVE": 0},
            },
        ]
    })

for wiring in wirings:
    print(f"{wiring.type_name}: enum ACTIVE -> {wiring.enum_value_mapping.get_value('ACTIVE')}")
