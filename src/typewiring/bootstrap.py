from __future__ import annotations

import importlib
import sys
from typing import Iterable

from typewiring.core.logger import get_logger, push_wiring_scope, reset_wiring_scope
from typewiring.wiring.registry import TypeWiringRegistry

logger = get_logger(__name__)


def load_wiring_modules(modules: Iterable[str], *, reload: bool = False) -> None:
    """Import wiring modules so their ``register_type_wiring`` decorators run.

    Modules already imported are not imported again, so repeated calls are
    cheap. In tests, call with reload=True to clear the registry and re-run
    the decorators from scratch.
    """
    modules = list(modules)

    # Re-importing without clearing would trip the duplicate registration check.
    if reload:
        TypeWiringRegistry.clear()

    for module_name in modules:
        if reload:
            sys.modules.pop(module_name, None)
        token = push_wiring_scope(module_name)
        try:
            importlib.import_module(module_name)
        finally:
            reset_wiring_scope(token)

    logger.info(f"Loaded {len(modules)} wiring module(s); {len(TypeWiringRegistry.type_names())} type(s) registered")
