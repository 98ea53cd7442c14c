"""Process-wide default for strict mode.

Builders read this once, when they are created, to seed their own strict
flag. Changing the default afterwards leaves existing builders alone.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

from typewiring.core.logger import get_logger

logger = get_logger(__name__)

_INITIAL_STRICT_MODE = True


class _StrictModeCell:
    def __init__(self, value: bool) -> None:
        self._value = value
        self._lock = threading.Lock()

    def get(self) -> bool:
        with self._lock:
            return self._value

    def set(self, value: bool) -> bool:
        with self._lock:
            previous, self._value = self._value, value
        return previous


_DEFAULT_STRICT_MODE = _StrictModeCell(_INITIAL_STRICT_MODE)


def set_default_strict_mode(strict: bool) -> None:
    """Set the process-wide strict mode seen by builders created from now on."""
    strict = bool(strict)
    previous = _DEFAULT_STRICT_MODE.set(strict)
    if previous != strict:
        logger.info(f"Default strict mode changed: {previous} -> {strict}")


def get_default_strict_mode() -> bool:
    """Return the current process-wide strict mode."""
    return _DEFAULT_STRICT_MODE.get()


@contextmanager
def default_strict_mode(strict: bool) -> Iterator[None]:
    """Temporarily set the process-wide strict mode, restoring it on exit.

    Example:
        >>> with default_strict_mode(False):
        ...     wiring = new_type_wiring("Pet", configure_pet)
    """
    previous = get_default_strict_mode()
    set_default_strict_mode(strict)
    try:
        yield
    finally:
        set_default_strict_mode(previous)
