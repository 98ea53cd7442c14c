"""
Custom exception classes for typewiring.

Every failure is raised synchronously at the call that violates the
contract. These are configuration mistakes caught while wiring is being
assembled, long before a schema built from it is ever executed.
"""

from typing import Optional


class TypeWiringError(Exception):
    """Base exception class for all typewiring exceptions."""

    pass


class InvalidArgumentError(TypeWiringError, ValueError):
    """Raised when a required argument is missing or empty.

    Covers type names, field names, resolvers, discriminators, enum
    mappings and resolver maps.
    """

    pass


class DuplicateBindingError(TypeWiringError):
    """
    Raised in strict mode when a binding is defined twice for the same type.

    Field level duplicates carry ``field_name``; a second default resolver
    carries ``type_name``.

    Example:
        >>> raise DuplicateBindingError(
        ...     "The field name already has a resolver defined",
        ...     field_name="name",
        ...     type_name="Pet",
        ... )
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: Optional[str] = None,
        type_name: Optional[str] = None,
    ):
        self.field_name = field_name
        self.type_name = type_name
        super().__init__(message)


class WiringConfigError(TypeWiringError):
    """Raised when declarative wiring config cannot be turned into a wiring."""

    pass


class TypeWiringRegistryError(TypeWiringError, RuntimeError):
    pass
