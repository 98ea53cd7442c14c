from __future__ import annotations

from typing import Callable, ClassVar, Dict, List, Optional

from typewiring.core.exceptions import TypeWiringRegistryError
from typewiring.core.logger import get_logger
from typewiring.models.type_wiring import TypeWiring
from typewiring.wiring.builder import TypeWiringBuilder, new_type_wiring

logger = get_logger(__name__)


BuilderFn = Callable[[TypeWiringBuilder], TypeWiringBuilder]


class TypeWiringRegistry:
    _registry: ClassVar[Dict[str, TypeWiring]] = {}

    @classmethod
    def register(cls, wiring: TypeWiring, *, overwrite: bool = False) -> TypeWiring:
        type_name = wiring.type_name
        if not overwrite and type_name in cls._registry:
            raise TypeWiringRegistryError(f"Type wiring already registered for type_name={type_name!r}")
        cls._registry[type_name] = wiring
        logger.info(
            f"Registered type wiring for {type_name!r} "
            f"({len(wiring.field_resolvers)} field resolvers, overwrite={overwrite})"
        )
        return wiring

    @classmethod
    def get(cls, type_name: str) -> TypeWiring:
        try:
            return cls._registry[type_name]
        except KeyError as exc:
            raise TypeWiringRegistryError(f"No type wiring registered for type_name={type_name!r}") from exc

    @classmethod
    def try_get(cls, type_name: str) -> Optional[TypeWiring]:
        return cls._registry.get(type_name)

    @classmethod
    def type_names(cls) -> List[str]:
        return list(cls._registry.keys())

    @classmethod
    def clear(cls) -> None:
        cls._registry.clear()


def register_type_wiring(
    type_name: str,
    *,
    overwrite: bool = False,
) -> Callable[[BuilderFn], BuilderFn]:
    def decorator(builder_fn: BuilderFn) -> BuilderFn:
        TypeWiringRegistry.register(new_type_wiring(type_name, builder_fn), overwrite=overwrite)
        return builder_fn

    return decorator
