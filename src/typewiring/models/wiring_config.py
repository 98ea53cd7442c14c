from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Dotted references are "package.module:attr" or "package.module.attr".
ObjectReference = str


class TypeWiringConfig(BaseModel):
    """Declarative description of one type wiring."""

    model_config = ConfigDict(extra="forbid")

    type_name: str = Field(min_length=1)
    strict_mode: Optional[bool] = None  # Overrides WiringConfig.strict_mode and the process default

    field_resolvers: Dict[str, ObjectReference] = Field(default_factory=dict)
    default_resolver: Optional[ObjectReference] = None
    type_discriminator: Optional[ObjectReference] = None

    # Either inline literal -> value pairs or a reference to a provider object
    enum_values: Optional[Dict[str, Any]] = None
    enum_values_provider: Optional[ObjectReference] = None

    @model_validator(mode="after")
    def _validate_enum_source(self) -> "TypeWiringConfig":
        if self.enum_values is not None and self.enum_values_provider is not None:
            raise ValueError("enum_values and enum_values_provider are mutually exclusive")
        return self

    @model_validator(mode="after")
    def _validate_field_names(self) -> "TypeWiringConfig":
        empty = [name for name in self.field_resolvers if not name]
        if empty:
            raise ValueError("field_resolvers contains an empty field name")
        return self


class WiringConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    strict_mode: Optional[bool] = None  # Applied to every type without its own override
    types: List[TypeWiringConfig] = Field(default_factory=list)

    def type_names(self) -> List[str]:
        return [t.type_name for t in self.types]
