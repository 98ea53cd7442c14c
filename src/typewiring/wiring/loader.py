"""
Build type wirings from declarative configuration.

Configuration can come from a dict or from a JSON/YAML file. Resolvers,
discriminators and enum providers are referenced by dotted path and
imported when the wiring is built.

Example:
    >>> from typewiring.wiring.loader import load_type_wirings
    >>> wirings = load_type_wirings(config_dict={
    ...     "types": [
    ...         {
    ...             "type_name": "Pet",
    ...             "field_resolvers": {"name": "petstore.resolvers:pet_name"},
    ...             "default_resolver": "petstore.resolvers:property_resolver",
    ...         }
    ...     ]
    ... })
"""

from __future__ import annotations

import importlib
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from typewiring.core.exceptions import DuplicateBindingError, WiringConfigError
from typewiring.core.logger import get_logger, push_wiring_scope, reset_wiring_scope
from typewiring.models.type_wiring import TypeWiring
from typewiring.models.wiring_config import TypeWiringConfig, WiringConfig
from typewiring.wiring.builder import TypeWiringBuilder
from typewiring.wiring.enum_values import MappingEnumValuesProvider

logger = get_logger(__name__)


def _reject_duplicate_keys(pairs: Iterable[Tuple[Any, Any]]) -> Dict[Any, Any]:
    """Build a mapping from parsed key/value pairs, refusing repeated keys.

    A repeated key in a wiring file would otherwise be dropped silently by
    the parser, hiding a second binding from strict mode.
    """
    mapping: Dict[Any, Any] = {}
    for key, value in pairs:
        if key in mapping:
            raise DuplicateBindingError(
                f"The key {key} is defined more than once in the wiring config",
                field_name=key,
            )
        mapping[key] = value
    return mapping


def _unique_key_yaml_loader(yaml: Any) -> Any:
    class UniqueKeyLoader(yaml.SafeLoader):
        pass

    def construct_mapping(loader: Any, node: Any, deep: bool = False) -> Dict[Any, Any]:
        # Keys pulled in through "<<" merges may be overridden; only explicit keys must be unique.
        _reject_duplicate_keys(
            (loader.construct_object(key_node, deep=deep), None)
            for key_node, _ in node.value
            if key_node.tag != "tag:yaml.org,2002:merge"
        )
        loader.flatten_mapping(node)
        return dict(loader.construct_pairs(node, deep=deep))

    UniqueKeyLoader.add_constructor(yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, construct_mapping)
    return UniqueKeyLoader


def import_object(reference: str) -> Any:
    """Import the object named by ``package.module:attr`` or ``package.module.attr``."""
    if not reference:
        raise WiringConfigError("Empty object reference")

    if ":" in reference:
        module_name, _, attr_path = reference.partition(":")
    else:
        module_name, _, attr_path = reference.rpartition(".")
    if not module_name or not attr_path:
        raise WiringConfigError(f"Invalid object reference: {reference!r}")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise WiringConfigError(f"Cannot import module {module_name!r} for reference {reference!r}") from exc

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as exc:
            raise WiringConfigError(f"Module {module_name!r} has no attribute {attr_path!r}") from exc
    return obj


def build_type_wiring(cfg: TypeWiringConfig, *, strict_mode: Optional[bool] = None) -> TypeWiring:
    """
    Build one wiring from its config.

    Strict mode precedence: ``cfg.strict_mode``, then the ``strict_mode``
    argument, then the process-wide default.
    """
    effective_strict = cfg.strict_mode if cfg.strict_mode is not None else strict_mode

    token = push_wiring_scope(cfg.type_name)
    try:
        builder = TypeWiringBuilder(cfg.type_name, strict_mode=effective_strict)
        builder.with_field_resolvers(
            {field_name: import_object(ref) for field_name, ref in cfg.field_resolvers.items()}
        )
        if cfg.default_resolver:
            builder.with_default_resolver(import_object(cfg.default_resolver))
        if cfg.type_discriminator:
            builder.with_type_discriminator(import_object(cfg.type_discriminator))
        if cfg.enum_values is not None:
            builder.with_enum_value_mapping(MappingEnumValuesProvider(cfg.enum_values))
        elif cfg.enum_values_provider:
            builder.with_enum_value_mapping(import_object(cfg.enum_values_provider))

        wiring = builder.build()
        logger.debug(f"Built type wiring with {len(wiring.field_resolvers)} field resolvers")
        return wiring
    finally:
        reset_wiring_scope(token)


def load_wiring_config(
    config_path: Optional[str] = None,
    config_dict: Optional[Dict[str, Any]] = None,
) -> WiringConfig:
    """
    Load and validate wiring configuration.

    Args:
        config_path: Path to a JSON/YAML configuration file
        config_dict: Direct configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If neither argument is given or the file format is unsupported
        DuplicateBindingError: If a mapping in the file repeats a key
        pydantic.ValidationError: If the configuration is malformed
    """
    if config_dict is not None:
        config = config_dict
        logger.info("Using provided wiring config dictionary")
    elif config_path:
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_file, "r") as f:
            if config_file.suffix == ".json":
                config = json.load(f, object_pairs_hook=_reject_duplicate_keys)
            elif config_file.suffix in (".yaml", ".yml"):
                try:
                    import yaml
                except ImportError:
                    raise ImportError(
                        "PyYAML required for YAML configs. "
                        "Install with: pip install typewiring[yaml]"
                    )
                config = yaml.load(f, Loader=_unique_key_yaml_loader(yaml))
            else:
                raise ValueError(
                    f"Unsupported config format: {config_file.suffix}. "
                    "Use .json or .yaml"
                )
        logger.info(f"Loaded wiring config from {config_path}")
    else:
        raise ValueError("Either config_path or config_dict must be provided")

    return WiringConfig.model_validate(config or {})


def load_type_wirings(
    config_path: Optional[str] = None,
    config_dict: Optional[Dict[str, Any]] = None,
) -> List[TypeWiring]:
    """Load configuration and build every type wiring it describes, in order."""
    config = load_wiring_config(config_path=config_path, config_dict=config_dict)
    return [build_type_wiring(cfg, strict_mode=config.strict_mode) for cfg in config.types]
