import logging
import sys
import contextvars
from typing import Optional

# Context variable carrying the type name (or module) currently being wired
_WIRING_SCOPE: contextvars.ContextVar[str] = contextvars.ContextVar("wiring_scope", default="-")

_PACKAGE_LOGGER = "typewiring"

# Library stays silent until the application configures logging.
logging.getLogger(_PACKAGE_LOGGER).addHandler(logging.NullHandler())


class _WiringScopeFilter(logging.Filter):
    """Logging filter that injects the wiring scope from contextvars into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.wiring_scope = _WIRING_SCOPE.get()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | scope=%(wiring_scope)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def configure_logging(level: str = "INFO") -> None:
    """
    Attach a stdout handler to the typewiring logger.

    Only the ``typewiring`` namespace is touched; the root logger and other
    libraries keep whatever configuration the application gave them.

    Args:
        level: Log level for typewiring logs (DEBUG, INFO, WARNING, ERROR).

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for h in package_logger.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _WiringScopeFilter) for f in h.filters):
            # Already configured; level updated above
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_WiringScopeFilter())
    package_logger.addHandler(handler)


def get_logger(name: str = _PACKAGE_LOGGER) -> logging.Logger:
    """
    Get a module-specific logger under the typewiring namespace.
    """
    if name != _PACKAGE_LOGGER and not name.startswith(_PACKAGE_LOGGER + "."):
        name = f"{_PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def current_wiring_scope() -> str:
    return _WIRING_SCOPE.get()


def push_wiring_scope(scope: Optional[str]) -> Optional[contextvars.Token]:
    """Set the current wiring scope in context and return a token for later reset."""
    if not scope:
        return None
    return _WIRING_SCOPE.set(scope)


def reset_wiring_scope(token: Optional[contextvars.Token]) -> None:
    """Reset the wiring scope using the provided token (if any)."""
    if token is None:
        return
    _WIRING_SCOPE.reset(token)
