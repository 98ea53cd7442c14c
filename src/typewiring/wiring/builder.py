"""Builder that assembles the runtime wiring for one schema type.

Usage:
    # Step by step
    wiring = (
        new_type_wiring("Pet")
        .with_field_resolver("name", resolve_name)
        .with_default_resolver(resolve_property)
        .build()
    )

    # Or with a single function that receives the builder
    wiring = new_type_wiring("Pet", lambda b: b.with_field_resolver("name", resolve_name))

Strict mode:
    Builders start with the process-wide default from
    ``typewiring.core.strict_mode``. In strict mode a second resolver for
    the same field, or a second default resolver, raises
    ``DuplicateBindingError``. Otherwise the later binding replaces the
    earlier one.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, overload

from typewiring.core.exceptions import DuplicateBindingError, InvalidArgumentError
from typewiring.core.logger import get_logger
from typewiring.core.strict_mode import get_default_strict_mode
from typewiring.models.type_wiring import TypeWiring
from typewiring.wiring.types import EnumValuesProvider, Resolver, TypeDiscriminator

logger = get_logger(__name__)


class TypeWiringBuilder:
    """Accumulates the bindings for one type and validates them as they arrive.

    A builder is meant to be filled in by a single caller. ``build()`` does
    not close it: further calls keep working and a later ``build()``
    returns a new snapshot.
    """

    def __init__(self, type_name: Optional[str] = None, *, strict_mode: Optional[bool] = None) -> None:
        self._type_name: Optional[str] = None
        self._field_resolvers: Dict[str, Resolver] = {}
        self._default_resolver: Optional[Resolver] = None
        self._type_discriminator: Optional[TypeDiscriminator] = None
        self._enum_value_mapping: Optional[EnumValuesProvider] = None
        self._strict_mode = get_default_strict_mode() if strict_mode is None else bool(strict_mode)

        if type_name is not None:
            self.with_type_name(type_name)

    @property
    def type_name(self) -> Optional[str]:
        return self._type_name

    @property
    def strict_mode(self) -> bool:
        return self._strict_mode

    def with_type_name(self, type_name: str) -> TypeWiringBuilder:
        """Set the type name for this wiring. Required before ``build()``."""
        if not type_name:
            raise InvalidArgumentError("You must provide a type name")
        self._type_name = type_name
        return self

    def with_strict_mode(self, strict_mode: bool) -> TypeWiringBuilder:
        """Override strict mode for this builder only."""
        self._strict_mode = bool(strict_mode)
        return self

    def with_field_resolver(self, field_name: str, resolver: Resolver) -> TypeWiringBuilder:
        """Bind a resolver to a field of this type.

        Args:
            field_name: Field the resolver applies to.
            resolver: Resolver for that field.

        Returns:
            Self for method chaining.

        Raises:
            InvalidArgumentError: If either argument is missing.
            DuplicateBindingError: In strict mode, if the field already has a resolver.
        """
        self._check_field_binding(field_name, resolver)
        if self._strict_mode:
            self._assert_field_unbound(field_name)
        self._put_field_resolver(field_name, resolver)
        return self

    def with_field_resolvers(self, resolvers: Mapping[str, Resolver]) -> TypeWiringBuilder:
        """Bind several field resolvers at once.

        The whole batch is validated before anything is applied, so a
        rejected batch leaves the builder exactly as it was.

        Args:
            resolvers: Mapping of field names to resolvers.

        Returns:
            Self for method chaining.

        Raises:
            InvalidArgumentError: If the mapping, or any name or resolver in it, is missing.
            DuplicateBindingError: In strict mode, for the first field that already has a resolver.
        """
        if resolvers is None:
            raise InvalidArgumentError("You must provide a field resolvers mapping")

        batch = dict(resolvers)
        for field_name, resolver in batch.items():
            self._check_field_binding(field_name, resolver)
        if self._strict_mode:
            for field_name in batch:
                self._assert_field_unbound(field_name)

        for field_name, resolver in batch.items():
            self._put_field_resolver(field_name, resolver)
        return self

    def with_default_resolver(self, resolver: Resolver) -> TypeWiringBuilder:
        """Set the resolver used for any field without one of its own.

        Raises:
            InvalidArgumentError: If ``resolver`` is missing.
            DuplicateBindingError: In strict mode, if a default resolver is already set.
                Its ``type_name`` is ``None`` when no type name has been set yet.
        """
        if resolver is None:
            raise InvalidArgumentError("You must provide a default resolver")
        if self._default_resolver is not None:
            if self._strict_mode:
                owner = f"The type {self._type_name}" if self._type_name else "This type wiring"
                raise DuplicateBindingError(
                    f"{owner} already has a default resolver defined",
                    type_name=self._type_name,
                )
            logger.debug(f"Replacing default resolver on type {self._type_name}")
        self._default_resolver = resolver
        return self

    def with_type_discriminator(self, discriminator: TypeDiscriminator) -> TypeWiringBuilder:
        """Set the discriminator used to pick the concrete type of interface and union values."""
        if discriminator is None:
            raise InvalidArgumentError("You must provide a type discriminator")
        self._type_discriminator = discriminator
        return self

    def with_enum_value_mapping(self, mapping: EnumValuesProvider) -> TypeWiringBuilder:
        if mapping is None:
            raise InvalidArgumentError("You must provide an enum value mapping")
        self._enum_value_mapping = mapping
        return self

    def build(self) -> TypeWiring:
        """Return an immutable snapshot of the current bindings."""
        if not self._type_name:
            raise InvalidArgumentError("You must provide a type name")
        return TypeWiring(
            type_name=self._type_name,
            field_resolvers=self._field_resolvers,
            default_resolver=self._default_resolver,
            type_discriminator=self._type_discriminator,
            enum_value_mapping=self._enum_value_mapping,
        )

    def _check_field_binding(self, field_name: Any, resolver: Any) -> None:
        if not field_name:
            raise InvalidArgumentError("You must tell us what field the resolver applies to")
        if resolver is None:
            raise InvalidArgumentError(f"You must provide a resolver for field {field_name}")

    def _assert_field_unbound(self, field_name: str) -> None:
        if field_name in self._field_resolvers:
            raise DuplicateBindingError(
                f"The field {field_name} already has a resolver defined",
                field_name=field_name,
                type_name=self._type_name,
            )

    def _put_field_resolver(self, field_name: str, resolver: Resolver) -> None:
        if field_name in self._field_resolvers:
            logger.debug(f"Replacing resolver for field {field_name} on type {self._type_name}")
        self._field_resolvers[field_name] = resolver


@overload
def new_type_wiring(type_name: str) -> TypeWiringBuilder:
    ...


@overload
def new_type_wiring(
    type_name: str,
    builder_fn: Callable[[TypeWiringBuilder], TypeWiringBuilder],
) -> TypeWiring:
    ...


def new_type_wiring(type_name, builder_fn=None):
    """Create a builder for ``type_name``, or build a wiring in one step.

    Without ``builder_fn`` the new builder is returned. With it, the builder
    is passed to ``builder_fn`` and the builder it returns is built.
    """
    if not type_name:
        raise InvalidArgumentError("You must provide a type name")
    builder = TypeWiringBuilder(type_name)
    if builder_fn is None:
        return builder
    return builder_fn(builder).build()
